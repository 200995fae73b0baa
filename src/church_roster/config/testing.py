SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

STORAGE_BACKEND = "memory"
DATA_DIR = ""

TREND_WINDOW = 5
UNRECOGNIZED_STATUS_POLICY = "coerce"

SEED_DEMO_DATA = False

GEMINI_API_KEY = ""
GEMINI_MODEL = "gemini-2.5-flash"
