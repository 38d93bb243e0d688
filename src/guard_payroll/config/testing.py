DEBUG = False
TESTING = True

LOG_LEVEL = "WARNING"

PUNCH_CSV_PATH = ""

EXCLUDED_GUARDS = ("ทดสอบ",)
