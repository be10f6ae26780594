import os

from .config import db_config_from_env, env_flag

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = db_config_from_env(password_default="123456")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "1")
# Optional: also seed demo data on startup
AUTO_SEED_DB = env_flag("AUTO_SEED_DB", "0")

API_REQUIRE_LOGIN = env_flag("API_REQUIRE_LOGIN", "0")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin123")
GUEST_PASSWORD = os.getenv("GUEST_PASSWORD", "guest123")
SESSION_DAYS = int(os.getenv("SESSION_DAYS", "7"))
