import os

DEBUG = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Spreadsheet export of the time clock; empty means no source data
PUNCH_CSV_PATH = os.getenv("PUNCH_CSV_PATH", "data/punches.csv")

EXCLUDED_GUARDS = tuple(g for g in os.getenv("EXCLUDED_GUARDS", "ทดสอบ").split(",") if g)
