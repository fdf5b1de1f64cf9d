"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

FEED_UNLOCK_LIMIT = 3
FEED_ATTENDANCE_LIMIT = 5
FEED_MAX_ITEMS = 5

ICON_UNLOCK = "bi-lock"
ICON_ATTENDANCE = "bi-check-circle"

SEVERITY_WARNING = "warning"
SEVERITY_INFO = "info"
SEVERITY_SUCCESS = "success"

# (lower bound inclusive, label), checked top to bottom
ATTENDANCE_RATE_LABELS = (
    (90.0, "Excellent"),
    (75.0, "Good"),
    (60.0, "Average"),
)
ATTENDANCE_RATE_FALLBACK_LABEL = "Needs Attention"

PLACEHOLDER_TEACHER = "Teacher"
PLACEHOLDER_TEACHER_UNKNOWN = "Unknown"
PLACEHOLDER_COURSE = "Course"
PLACEHOLDER_DASH = "-"
