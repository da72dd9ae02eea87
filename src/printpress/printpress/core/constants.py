"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

DEFAULT_COMPANY_NAME = "My Printing Press"
DEFAULT_COMPANY_ADDRESS = "123 Print Street, Inkville"

RECENT_ACTIVITY_LIMIT = 5
UPCOMING_TASKS_LIMIT = 5

MONEY_QUANTUM = Decimal("0.01")
HOURS_QUANTUM = Decimal("0.01")

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
