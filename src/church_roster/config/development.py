import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# "file" keeps one JSON document per key under DATA_DIR; "memory" is volatile.
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "file")
DATA_DIR = os.getenv("DATA_DIR", "data")

TREND_WINDOW = int(os.getenv("TREND_WINDOW", "5"))
UNRECOGNIZED_STATUS_POLICY = os.getenv("UNRECOGNIZED_STATUS_POLICY", "coerce")

# If enabled, an empty roster is filled with demo students and five weeks of attendance
SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "1")))

GEMINI_API_KEY = os.getenv("GEMINI_API_KEY", "")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
