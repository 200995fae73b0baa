import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "file")
DATA_DIR = os.getenv("DATA_DIR", "data")

TREND_WINDOW = int(os.getenv("TREND_WINDOW", "4"))
UNRECOGNIZED_STATUS_POLICY = os.getenv("UNRECOGNIZED_STATUS_POLICY", "coerce")

SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "0")))

GEMINI_API_KEY = os.getenv("GEMINI_API_KEY", "")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
