import os

from .config import db_config_from_env, env_flag

SECRET_KEY = "test-secret"

DB_CONFIG = db_config_from_env(password_default="12345", database_default="factory_ops_test")

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "0")
AUTO_SEED_DB = env_flag("AUTO_SEED_DB", "0")

API_REQUIRE_LOGIN = False
ADMIN_PASSWORD = "admin123"
GUEST_PASSWORD = "guest123"
SESSION_DAYS = 7
