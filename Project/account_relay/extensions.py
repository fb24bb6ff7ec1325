import logging

from flask import Flask, current_app
from flask.logging import default_handler

from account_relay.utils.errors import ConfigurationMissing
from account_relay.utils.paystack.provider import PaystackProvider

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def init_logging(app: Flask):
    """Set the app logger level from LOG_LEVEL and give it a timestamped handler."""
    level = str(app.config.get("LOG_LEVEL", "INFO")).upper()
    app.logger.setLevel(level)

    default_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    return app.logger


def init_paystack(app: Flask):
    """
    Build the Paystack provider from app config.

    A missing PAYSTACK_SECRET_KEY is not fatal at startup: the app still boots
    and every Paystack route answers 500 until the key is set.
    """
    try:
        provider = PaystackProvider(
            app.config.get("PAYSTACK_SECRET_KEY"),
            base_url=app.config.get("PAYSTACK_BASE_URL"),
            timeout=app.config.get("PAYSTACK_TIMEOUT", 15),
            banks_per_page=app.config.get("PAYSTACK_BANKS_PER_PAGE", 100),
        )
    except ConfigurationMissing:
        app.logger.warning("PAYSTACK_SECRET_KEY not set, Paystack routes will return 500")
        provider = None

    app.extensions["paystack"] = provider
    return provider


def get_provider() -> PaystackProvider:
    provider = current_app.extensions.get("paystack")
    if provider is None:
        raise ConfigurationMissing()
    return provider
