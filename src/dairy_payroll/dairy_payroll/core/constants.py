"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

MOBILE_DIGITS = 10
RECENT_ACTIVITY_DAYS = 7
RECENT_CREDIT_DAYS = 10
RECENT_SALARY_ENTRIES = 5
RECENT_CREDIT_ENTRIES = 3
TOP_ITEMS_LIMIT = 5

CURRENCY_PLACES = Decimal("0.01")
AMOUNT_DECIMALS = 2  # every DECIMAL column is (n,2)
HISTORICAL_MATCH_TOLERANCE = Decimal("0.01")
HISTORICAL_CREDIT_ITEM = "Historical Credit (Settled)"
OTHER_ITEM = "Other"
UNKNOWN_EMPLOYEE = "Unknown Employee"
