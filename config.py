import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.environ.get("CONFIG_FILE", os.path.join(ROOT_PATH, "env.yaml"))

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


def _get(key, default=None):
    """Environment variables win over env.yaml values"""
    value = os.environ.get(key)
    if value is not None:
        return value
    return data.get(key, default)


def _get_bool(key, default):
    value = _get(key, default)
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def _get_optional_int(key):
    value = _get(key)
    if value in (None, ""):
        return None
    return int(value)


class ApplicationConfig:
    DB_URI = _get("DB_URI", "sqlite+aiosqlite:///./kostentram.db")
    API_HOST = _get("API_HOST", "0.0.0.0")
    API_PORT = int(_get("PORT", _get("API_PORT", 4000)))
    LOG_LEVEL = _get("LOG_LEVEL", "INFO")
    CREATE_TABLES = _get_bool("CREATE_TABLES", True)

    # Required: create_app refuses to start without it
    JWT_SECRET = _get("JWT_SECRET", "")
    JWT_EXPIRES_DAYS = int(_get("JWT_EXPIRES_DAYS", 7))
    BCRYPT_ROUNDS = int(_get("BCRYPT_ROUNDS", 10))

    # Unset switches forgot-password into testing mode (token echoed back)
    FRONTEND_URL = (_get("FRONTEND_URL") or "").rstrip("/") or None
    # Unset leaves reset tokens without expiry
    RESET_TOKEN_TTL_MINUTES = _get_optional_int("RESET_TOKEN_TTL_MINUTES")
