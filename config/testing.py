SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True

LOG_LEVEL = "WARNING"
LOG_FORMAT = "text"

SEED_DEMO_DATA = True

CURRENT_USER_ID = "demo-user-1"
