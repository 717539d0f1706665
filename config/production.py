import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "json")

SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "1")))

CURRENT_USER_ID = os.getenv("CURRENT_USER_ID", "demo-user-1")
