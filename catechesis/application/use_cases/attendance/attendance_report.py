"""Attendance report: per-enrollment totals for a group and CSV export."""

from __future__ import annotations

import csv
import io
from collections.abc import Iterable
from datetime import date
from typing import TYPE_CHECKING

from catechesis.application.dtos.attendance import AttendanceSummaryRow, AttendanceTally
from catechesis.domain.entities.principal import Principal
from catechesis.domain.enums import Capability
from catechesis.domain.exceptions import GroupNotFoundException, ValidationException

if TYPE_CHECKING:
    from catechesis.application.interfaces.repositories import (
        IAttendanceRepository,
        IGroupRepository,
    )
    from catechesis.application.services.access_guard import AccessGuard

CSV_HEADER = ("Name", "Document", "Total classes", "Present", "Absent", "Attendance %")


def summarize_tally(tally: AttendanceTally, threshold: float) -> AttendanceSummaryRow:
    """Derive absent, percentage and the low-attendance flag from raw counts."""
    percentage = round(tally.present * 100 / tally.classes, 2) if tally.classes else 0.0
    return AttendanceSummaryRow(
        enrollment_id=tally.enrollment_id,
        person_id=tally.person_id,
        full_name=f"{tally.first_names} {tally.last_names}",
        document_id=tally.document_id,
        classes=tally.classes,
        present=tally.present,
        absent=tally.classes - tally.present,
        percentage=percentage,
        low_attendance=tally.classes > 0 and percentage < threshold,
    )


def render_summary_csv(rows: Iterable[AttendanceSummaryRow]) -> str:
    """Render summary rows as CSV text with a header line."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for row in rows:
        writer.writerow(
            (
                row.full_name,
                row.document_id,
                row.classes,
                row.present,
                row.absent,
                f"{row.percentage:.2f}%",
            )
        )
    return buffer.getvalue()


class AttendanceReportService:
    """Builds attendance summaries for a group (report:export in the group's parish)."""

    def __init__(
        self,
        guard: AccessGuard,
        group_repo: IGroupRepository,
        attendance_repo: IAttendanceRepository,
        low_attendance_threshold: float = 70.0,
    ) -> None:
        self.guard = guard
        self.group_repo = group_repo
        self.attendance_repo = attendance_repo
        self.low_attendance_threshold = low_attendance_threshold

    async def attendance_summary(
        self,
        principal: Principal,
        group_id: str,
        start: date | None = None,
        end: date | None = None,
    ) -> list[AttendanceSummaryRow]:
        """Return per-enrollment totals, best attendance first, then by name."""
        if start and end and start > end:
            raise ValidationException("start must be on or before end", field="start")
        group = await self.group_repo.get_by_id(group_id)
        if not group:
            raise self.guard.missing_resource(
                principal, Capability.REPORT_EXPORT, GroupNotFoundException(group_id)
            )
        self.guard.require(principal, group.tenant_id, Capability.REPORT_EXPORT)

        tallies = await self.attendance_repo.tally_for_group(group.id, start, end)
        rows = [summarize_tally(t, self.low_attendance_threshold) for t in tallies]
        rows.sort(key=lambda r: (-r.percentage, r.full_name))
        return rows
