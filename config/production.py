import os

from .config import db_config_from_env, env_flag

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = db_config_from_env()

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "0")
AUTO_SEED_DB = env_flag("AUTO_SEED_DB", "0")

API_REQUIRE_LOGIN = env_flag("API_REQUIRE_LOGIN", "1")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin123")
GUEST_PASSWORD = os.getenv("GUEST_PASSWORD", "guest123")
SESSION_DAYS = int(os.getenv("SESSION_DAYS", "7"))
