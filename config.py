import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file)
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./test.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ADMIN_API_KEY = data.get("ADMIN_API_KEY", "test-admin-key-12345")
    FRONTEND_URL = data.get("FRONTEND_URL", "http://localhost:3000")
    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 12))
    PASSWORD_MIN_LENGTH = int(data.get("PASSWORD_MIN_LENGTH", 8))
    PASSWORD_RESET_TOKEN_TTL_MINUTES = int(data.get("PASSWORD_RESET_TOKEN_TTL_MINUTES", 10))
    PASSWORD_RESET_COOLDOWN_SECONDS = int(data.get("PASSWORD_RESET_COOLDOWN_SECONDS", 60))
    PASSWORD_RESET_RATE_LIMIT = data.get("PASSWORD_RESET_RATE_LIMIT", "5/minute")
    PASSWORD_RESET_REVEAL_UNKNOWN_EMAIL = bool(data.get("PASSWORD_RESET_REVEAL_UNKNOWN_EMAIL", False))
    PASSWORD_RESET_EXPOSE_URL = bool(data.get("PASSWORD_RESET_EXPOSE_URL", False))
    PASSWORD_RESET_SWEEP_ENABLED = bool(data.get("PASSWORD_RESET_SWEEP_ENABLED", True))
    PASSWORD_RESET_SWEEP_INTERVAL_SECONDS = int(data.get("PASSWORD_RESET_SWEEP_INTERVAL_SECONDS", 300))
