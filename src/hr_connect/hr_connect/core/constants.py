"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

CUSTOM_SHIFT_HOURS = 9
CUSTOM_SHIFT_MINUTES = CUSTOM_SHIFT_HOURS * 60
LAST_MINUTE_OF_DAY = 23 * 60 + 59

EARTH_RADIUS_METERS = 6_371_000.0

# Head office: 99B Nguyễn Trãi, Ninh Kiều, Cần Thơ
DEFAULT_OFFICE_LATITUDE = 10.040675858019696
DEFAULT_OFFICE_LONGITUDE = 105.78463187148355
DEFAULT_OFFICE_RADIUS_METERS = 200.0

DEFAULT_STANDARD_WORK_DAYS = 27
DEFAULT_WORK_HOURS_PER_DAY = 8
DEFAULT_OVERTIME_RATE = 1.5
DEFAULT_SOCIAL_INSURANCE_RATE = 10.5

DEFAULT_HISTORY_LIMIT = 30
