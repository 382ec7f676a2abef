"""Attendance use cases: batch reconciliation, single-record edits, reports."""

from catechesis.application.use_cases.attendance.attendance_reconciler import (
    AttendanceReconciler,
    validate_batch,
)
from catechesis.application.use_cases.attendance.attendance_report import (
    AttendanceReportService,
    render_summary_csv,
)

__all__ = [
    "AttendanceReconciler",
    "AttendanceReportService",
    "render_summary_csv",
    "validate_batch",
]
