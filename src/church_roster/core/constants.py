"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

# Storage keys
STUDENTS_KEY = "students"
ATTENDANCE_KEY = "attendance"
THEME_KEY = "theme"

# Roster CSV defaults
DEFAULT_GRADE = "3학년"
UNASSIGNED_CELL = "미배정"
NAME_HEADER = "이름"

ROSTER_CSV_HEADER = ("이름", "학년", "셀", "담임 선생님", "연락처")
ATTENDANCE_CSV_HEADER = ("이름", "학년", "셀(구역)")
# Date columns are only looked for from this index on.
ATTENDANCE_FIRST_DATE_COLUMN = 3
MIN_ROW_COLUMNS = 3

NO_RECORD_MARK = "-"
CSV_BOM = "\ufeff"

# Dashboard
DEFAULT_TREND_WINDOW = 5
ALLOWED_TREND_WINDOWS = (4, 5)

# Full-database document
DATABASE_VERSION = 1

# Text-generation fallbacks
INSIGHT_UNAVAILABLE = "AI 분석 서비스를 일시적으로 사용할 수 없습니다."
INSIGHT_EMPTY = "분석 정보를 불러오지 못했습니다."

# Confirmation prompts
DELETE_CONFIRM_MESSAGE = "정말로 삭제하시겠습니까?"
RESTORE_CONFIRM_MESSAGE = "데이터베이스를 복원하면 현재 데이터가 덮어씌워집니다. 계속하시겠습니까?"
