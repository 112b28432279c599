from config.base import db_config

SECRET_KEY = "test-secret"
DB_CONFIG = db_config("dairy_payroll_test")
DEBUG = False
TESTING = True

AUTO_INIT_DB = False
AUTO_SEED_DB = False

RECENT_ACTIVITY_DAYS = 7
RECENT_CREDIT_DAYS = 10
