"""Example: use the service layer directly (without Flask).

Prints one staff member's weekly attendance and the month's salary run.
"""

import importlib

from config import get_settings_module

from src.garment_ems.garment_ems.analytics.model import ViewFilter
from src.garment_ems.garment_ems.container import build_container
from src.garment_ems.garment_ems.core.enums import Granularity
from src.garment_ems.garment_ems.salary.model import SalaryRates


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(backend_config=settings.BACKEND_CONFIG)

    view = ViewFilter(year=2024, month=3, granularity=Granularity.WEEKLY)
    for bucket in container.attendance_service.attendance_buckets(view):
        print(bucket.to_dict())

    summary = container.salary_service.build_summary(
        year=2024, month=3, rates=SalaryRates(rate_per_piece=6, rate_per_shift=450)
    )
    print(summary.totals.to_dict())


if __name__ == "__main__":
    main()
