import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    ENVIRONMENT = data.get("ENVIRONMENT", "dev")
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./app.db")
    CREATE_TABLES_ON_STARTUP = bool(data.get("CREATE_TABLES_ON_STARTUP", True))
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))

    # Sessions
    SESSION_BACKEND = data.get("SESSION_BACKEND", "memory")
    SESSION_COOKIE_NAME = data.get("SESSION_COOKIE_NAME", "session_id")
    SESSION_COOKIE_PATH = data.get("SESSION_COOKIE_PATH", API_PREFIX)
    SESSION_COOKIE_SECURE = bool(
        data.get("SESSION_COOKIE_SECURE", ENVIRONMENT == "production")
    )
    SESSION_TTL_HOURS = data.get("SESSION_TTL_HOURS", 24)
    SESSION_PURGE_EVERY = data.get("SESSION_PURGE_EVERY", 100)

    # Passwords
    PASSWORD_MIN_LENGTH = data.get("PASSWORD_MIN_LENGTH", 8)
    BCRYPT_ROUNDS = data.get("BCRYPT_ROUNDS", 12)
