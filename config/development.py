import os

from config.base import db_config, env_flag, env_int

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")
DB_CONFIG = db_config("dairy_payroll")
DEBUG = True

# schema.sql is idempotent (CREATE TABLE IF NOT EXISTS), safe to run on every start
AUTO_INIT_DB = env_flag("AUTO_INIT_DB", True)
AUTO_SEED_DB = env_flag("AUTO_SEED_DB", False)

# "recent activity" badge on the settlement screen, "last 10 days" credit column
RECENT_ACTIVITY_DAYS = env_int("RECENT_ACTIVITY_DAYS", 7)
RECENT_CREDIT_DAYS = env_int("RECENT_CREDIT_DAYS", 10)
