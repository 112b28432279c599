import os

_SETTINGS = {
    "development": "config.development",
    "dev": "config.development",
    "production": "config.production",
    "prod": "config.production",
    "testing": "config.testing",
    "test": "config.testing",
}


def get_settings_module() -> str:
    """Settings module named by APP_ENV; unknown or unset values fall back to development."""
    env = os.getenv("APP_ENV", "development").strip().lower()
    return _SETTINGS.get(env, "config.development")
