"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_DEMO_PASSWORD = "password123"
DEFAULT_HISTORY_DAYS = 30
RECORDS_PER_PAGE = 10
TREND_DAYS = 7
RECENT_RECORDS_LIMIT = 5
UNKNOWN_LABEL = "Unknown"

# Storage keys (values are JSON strings)
USER_KEY = "absen_school_user"
CLASSES_KEY = "absen_school_classes"
STUDENTS_KEY = "absen_school_students"
TEACHERS_KEY = "absen_school_teachers"
ATTENDANCE_KEY = "absen_school_attendance"

STORAGE_FILENAME = "storage.json"
