"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DAILY_WAGE = 420
SHIFT_HOURS = 12
HOURLY_RATE = DAILY_WAGE / SHIFT_HOURS

# 06:30 local
SHIFT_START_MINUTES = 6 * 60 + 30
LATE_GRACE_MINUTES = 15
LATE_HALF_HOUR_MINUTES = 30

NOON_HOUR = 12

# Fixed Bangkok offset, no DST.
LOCAL_UTC_OFFSET_HOURS = 7

BUDDHIST_ERA_OFFSET = 543
BUDDHIST_ERA_MIN_YEAR = 2400

NOTE_ABSENT = "ขาดงาน"
NOTE_REST_DAY = "วันหยุด"

TEST_GUARD_NAME = "ทดสอบ"

# Guard status indicator window (local minutes of day)
STATUS_WORK_END_MINUTES = 18 * 60 + 30
STATUS_LUNCH_START_MINUTES = 12 * 60
STATUS_LUNCH_END_MINUTES = 13 * 60
