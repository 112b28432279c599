import os

from config.base import db_config, env_flag, env_int

SECRET_KEY = os.environ.get("SECRET_KEY", "please-set-SECRET_KEY")
DB_CONFIG = db_config("dairy_payroll")
DEBUG = False

AUTO_INIT_DB = env_flag("AUTO_INIT_DB", False)
AUTO_SEED_DB = False

RECENT_ACTIVITY_DAYS = env_int("RECENT_ACTIVITY_DAYS", 7)
RECENT_CREDIT_DAYS = env_int("RECENT_CREDIT_DAYS", 10)
