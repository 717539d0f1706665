import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_FORMAT = os.getenv("LOG_FORMAT", "text")

# Demo user + three subjects on startup
SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "1")))

# No authentication: every request acts as this user
CURRENT_USER_ID = os.getenv("CURRENT_USER_ID", "demo-user-1")
