from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .analytics.aggregator import TimeSeriesAggregator
from .attendance.http_attendance_repository import HttpAttendanceRepository
from .attendance.service import AttendanceAnalyticsService
from .attendance.sheet_service import AttendanceSheetService
from .backend.client import BackendClient, BackendConfig
from .core.constants import DEFAULT_BACKEND_TIMEOUT
from .core.enums import Granularity
from .pieces.http_trunk_repository import HttpTrunkRepository
from .pieces.service import PieceTrackingService
from .salary.http_salary_repository import HttpSalaryRepository
from .salary.service import SalaryService
from .staff.http_staff_repository import HttpStaffRepository
from .staff.service import StaffService
from .stitching.http_stitching_repository import HttpStitchingRepository
from .stitching.log_service import StitchingLogService
from .stitching.service import StitchingAnalyticsService


@dataclass(frozen=True)
class Container:
    aggregator: TimeSeriesAggregator
    default_granularity: Granularity

    staff_service: StaffService
    attendance_service: AttendanceAnalyticsService
    attendance_sheet_service: AttendanceSheetService
    stitching_service: StitchingAnalyticsService
    stitching_log_service: StitchingLogService
    salary_service: SalaryService
    piece_service: PieceTrackingService


def build_container(
    *,
    backend_config: dict,
    label_order: bool = False,
    default_granularity: str = Granularity.DAILY.value,
    client: Optional[BackendClient] = None,
) -> Container:
    if client is None:
        config = BackendConfig(
            base_url=str(backend_config["base_url"]),
            timeout=float(backend_config.get("timeout", DEFAULT_BACKEND_TIMEOUT)),
        )
        client = BackendClient.get_instance(config)

    staff_repo = HttpStaffRepository(client)
    attendance_repo = HttpAttendanceRepository(client)
    stitching_repo = HttpStitchingRepository(client)
    salary_repo = HttpSalaryRepository(client)
    trunk_repo = HttpTrunkRepository(client)

    aggregator = TimeSeriesAggregator(label_order=label_order)

    return Container(
        aggregator=aggregator,
        default_granularity=Granularity(default_granularity),
        staff_service=StaffService(staff_repo),
        attendance_service=AttendanceAnalyticsService(attendance_repo, aggregator),
        attendance_sheet_service=AttendanceSheetService(attendance_repo),
        stitching_service=StitchingAnalyticsService(stitching_repo, staff_repo, aggregator),
        stitching_log_service=StitchingLogService(stitching_repo),
        salary_service=SalaryService(staff_repo, attendance_repo, stitching_repo, salary_repo, aggregator=aggregator),
        piece_service=PieceTrackingService(trunk_repo, aggregator),
    )
