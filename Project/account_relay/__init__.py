from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from account_relay.config import get_config
from account_relay.extensions import init_logging, init_paystack
from account_relay.utils.errors import RelayError


def create_app(config_object=None):
    app = Flask(__name__, instance_relative_config=False)

    if config_object is None:
        config_object = get_config()
    app.config.from_object(config_object)

    init_logging(app)
    init_paystack(app)

    from account_relay.handlers.paystack import paystack_bp

    app.register_blueprint(paystack_bp)

    register_error_handlers(app)

    return app


def _error_body(message, error=None):
    body = {"status": False, "message": message}
    if error is not None:
        body["error"] = error
    return body


def register_error_handlers(app: Flask):

    @app.errorhandler(RelayError)
    def handle_relay_error(exc):
        if exc.http_status >= 500:
            app.logger.error("%s: %s", type(exc).__name__, exc.message)
        return jsonify(_error_body(exc.message)), exc.http_status

    @app.errorhandler(HTTPException)
    def handle_http_error(exc):
        return jsonify(_error_body(exc.description or exc.name)), exc.code

    @app.errorhandler(Exception)
    def handle_unexpected(exc):
        app.logger.exception("Unexpected error")
        detail = str(exc) if app.config.get("EXPOSE_ERROR_DETAILS") else None
        return jsonify(_error_body("An unexpected error occurred", detail)), 500
