"""Attendance API: batch reconciliation, single-record edits, reports."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response

from catechesis.api.v1.dependencies import (
    CurrentPrincipal,
    get_attendance_reader,
    get_attendance_reconciler,
    get_attendance_report_service,
)
from catechesis.application.dtos.attendance import AttendanceFact
from catechesis.application.use_cases.attendance import (
    AttendanceReconciler,
    AttendanceReportService,
    render_summary_csv,
)
from catechesis.domain.enums import ReportFormat
from catechesis.schemas.attendance import (
    AttendanceBatchRequest,
    AttendanceRecordResponse,
    AttendanceReportResponse,
    AttendanceSummaryRowResponse,
    AttendanceUpdateRequest,
    BatchDetailsResponse,
    BatchResultResponse,
    BatchSummaryResponse,
)
from catechesis.schemas.error import ErrorResponse

router = APIRouter()


@router.post(
    "/groups/{group_id}/batch",
    response_model=BatchResultResponse,
    responses={400: {"model": ErrorResponse}, 403: {"model": ErrorResponse}},
)
async def record_attendance_batch(
    group_id: str,
    body: AttendanceBatchRequest,
    principal: CurrentPrincipal,
    reconciler: Annotated[AttendanceReconciler, Depends(get_attendance_reconciler)],
) -> BatchResultResponse:
    """Apply a batch of attendance facts; inspect details.errors for items that did not apply."""
    facts = [AttendanceFact(item.enrollment_id, item.present) for item in body.items]
    result = await reconciler.reconcile_batch(principal, group_id, body.day, facts)
    return BatchResultResponse(
        group_id=result.group_id,
        day=result.day,
        summary=BatchSummaryResponse(
            total=result.summary.total,
            succeeded=result.summary.succeeded,
            updated=result.summary.updated,
            failed=result.summary.failed,
        ),
        details=BatchDetailsResponse(
            created=result.created,
            updated=result.updated,
            errors=result.errors,
        ),
    )


@router.get("/groups/{group_id}", response_model=list[AttendanceRecordResponse])
async def list_group_attendance(
    group_id: str,
    principal: CurrentPrincipal,
    reader: Annotated[AttendanceReconciler, Depends(get_attendance_reader)],
    day: Annotated[date, Query(description="Calendar day")],
) -> list[AttendanceRecordResponse]:
    """Return the group's attendance records for one day."""
    records = await reader.list_for_group_and_day(principal, group_id, day)
    return [AttendanceRecordResponse.model_validate(r) for r in records]


@router.get(
    "/groups/{group_id}/report",
    response_model=AttendanceReportResponse,
    responses={200: {"content": {"text/csv": {}}}},
)
async def attendance_report(
    group_id: str,
    principal: CurrentPrincipal,
    service: Annotated[AttendanceReportService, Depends(get_attendance_report_service)],
    report_format: Annotated[ReportFormat, Query(alias="format")] = ReportFormat.JSON,
    start: date | None = None,
    end: date | None = None,
):
    """Per-enrollment attendance totals as JSON or CSV."""
    rows = await service.attendance_summary(principal, group_id, start, end)
    if report_format is ReportFormat.CSV:
        return Response(
            content=render_summary_csv(rows),
            media_type="text/csv",
            headers={
                "Content-Disposition": f'attachment; filename="attendance_{group_id}.csv"'
            },
        )
    return AttendanceReportResponse(
        group_id=group_id,
        start=start,
        end=end,
        rows=[AttendanceSummaryRowResponse.model_validate(r) for r in rows],
    )


@router.patch("/{record_id}", response_model=AttendanceRecordResponse)
async def update_attendance(
    record_id: str,
    body: AttendanceUpdateRequest,
    principal: CurrentPrincipal,
    reconciler: Annotated[AttendanceReconciler, Depends(get_attendance_reconciler)],
) -> AttendanceRecordResponse:
    """Change the present flag of one record."""
    record = await reconciler.update_attendance(principal, record_id, body.present)
    return AttendanceRecordResponse.model_validate(record)


@router.delete("/{record_id}", status_code=204)
async def delete_attendance(
    record_id: str,
    principal: CurrentPrincipal,
    reconciler: Annotated[AttendanceReconciler, Depends(get_attendance_reconciler)],
) -> Response:
    """Delete one record."""
    await reconciler.delete_attendance(principal, record_id)
    return Response(status_code=204)
