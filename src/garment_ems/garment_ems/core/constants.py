"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_BACKEND_TIMEOUT = 15.0
DEFAULT_TRUNK_ITEM_TYPE = "Trunk Pieces"

# Month labels must not depend on the process locale (calendar.month_name does).
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

METRIC_PRESENT_SHIFTS = "presentShifts"
METRIC_ABSENT_SHIFTS = "absentShifts"
METRIC_STITCHED_COUNT = "stitchedCount"
METRIC_SALARY = "salary"
METRIC_EXPECTED_PAYMENT = "expectedPayment"
METRIC_TOTAL_PAID = "totalPaid"
