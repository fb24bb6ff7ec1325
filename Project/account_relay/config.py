import os


class BaseConfig:

    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key-change-me")

    PAYSTACK_SECRET_KEY = os.getenv("PAYSTACK_SECRET_KEY")
    PAYSTACK_BASE_URL = os.getenv("PAYSTACK_BASE_URL", "https://api.paystack.co")
    PAYSTACK_TIMEOUT = float(os.getenv("PAYSTACK_TIMEOUT", "15"))
    PAYSTACK_BANKS_PER_PAGE = int(os.getenv("PAYSTACK_BANKS_PER_PAGE", "100"))

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    EXPOSE_ERROR_DETAILS = False


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
    EXPOSE_ERROR_DETAILS = True


class ProductionConfig(BaseConfig):
    DEBUG = False


class TestingConfig(BaseConfig):
    TESTING = True
    PAYSTACK_SECRET_KEY = "sk_test_relay"
    PAYSTACK_BASE_URL = "https://paystack.test"
    LOG_LEVEL = "DEBUG"


CONFIG_BY_ENV = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}


def get_config(env: str | None = None):
    """Pick a config class from APP_ENV, falling back to development."""
    env = (env or os.getenv("APP_ENV", "development")).lower().strip()
    try:
        return CONFIG_BY_ENV[env]
    except KeyError:
        raise ValueError(f"Unsupported APP_ENV: {env}")
