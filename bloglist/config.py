# bloglist/config.py
import os


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    SQLALCHEMY_DATABASE_URI = os.environ.get("DATABASE_URL", "sqlite:///bloglist.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # 🔐 JWT
    JWT_SECRET_KEY = os.environ.get("JWT_SECRET_KEY", "supersecret-bloglist-dev-key-change-me")
    JWT_ALGORITHM = "HS256"
    JWT_EXPIRES_HOURS = int(os.environ.get("JWT_EXPIRES_HOURS", "8"))

    # None -> método por defecto de werkzeug
    PASSWORD_HASH_METHOD = os.environ.get("PASSWORD_HASH_METHOD") or None

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
    LOG_COLOR = _env_flag("LOG_COLOR", default=True)

    CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "*")

    # Sólo para desarrollo / e2e: expone POST /api/testing/reset
    ENABLE_TESTING_ROUTES = _env_flag("ENABLE_TESTING_ROUTES")


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    JWT_SECRET_KEY = "test-secret-key-bloglist-0123456789abcdef"
    PASSWORD_HASH_METHOD = "pbkdf2:sha256:1000"
    LOG_COLOR = False
    ENABLE_TESTING_ROUTES = True
