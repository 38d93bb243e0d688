import os

DEBUG = False

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

PUNCH_CSV_PATH = os.getenv("PUNCH_CSV_PATH", "")

EXCLUDED_GUARDS = tuple(g for g in os.getenv("EXCLUDED_GUARDS", "ทดสอบ").split(",") if g)
