"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_REQUIRED_PERCENTAGE = 75
# Percentage points above the requirement that still count as "warning".
WARNING_MARGIN = 10

DEFAULT_SUBJECT_COLOR = "#7341ff"
DEFAULT_UPCOMING_LIMIT = 10
DASHBOARD_UPCOMING_LIMIT = 5

GROUP_CODE_LENGTH = 6
GROUP_CODE_MAX_ATTEMPTS = 20

DEFAULT_TIMETABLE_NAME = "Uploaded Timetable"
