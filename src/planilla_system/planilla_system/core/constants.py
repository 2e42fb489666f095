"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
Payroll formula constants live in ``payroll.rates``.
"""

NATIONAL_ID_LENGTH = 13
MIN_PASSWORD_LENGTH = 6
DEFAULT_TIMEZONE = "America/Tegucigalpa"
DASHBOARD_WINDOW_DAYS = 7
RECENT_ACTIVITY_LIMIT = 5
MONEY_PLACES = 2
