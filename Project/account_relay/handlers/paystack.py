from functools import wraps

from flask import Blueprint, current_app, jsonify, request

from account_relay.extensions import get_provider
from account_relay.utils.bank.verify_bank_account import AccountResolver
from account_relay.utils.errors import (
    ConfigurationMissing,
    UpstreamRejected,
    UpstreamUnavailable,
)

paystack_bp = Blueprint("paystack", __name__, url_prefix="/api/paystack")


def paystack_key_required(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        if current_app.extensions.get("paystack") is None:
            err = ConfigurationMissing()
            return jsonify({"status": False, "message": err.message}), err.http_status

        return func(*args, **kwargs)

    return wrapper


def _with_detail(body: dict, detail):
    if current_app.config.get("EXPOSE_ERROR_DETAILS") and detail:
        body["error"] = detail
    return body


@paystack_bp.route("/banks", methods=["GET"])
@paystack_key_required
def list_banks():
    """Fetch all Nigerian banks from Paystack, sorted by name."""
    try:
        banks = get_provider().list_banks()
    except UpstreamRejected as exc:
        current_app.logger.warning("Paystack refused bank list: %s", exc.message)
        return jsonify({"status": False, "message": exc.message}), 400
    except UpstreamUnavailable as exc:
        current_app.logger.error("Paystack banks error: %s", exc.reason)
        body = {
            "status": False,
            "message": exc.upstream_message or "Error fetching banks from Paystack",
        }
        return jsonify(_with_detail(body, exc.detail)), 500

    return jsonify({
        "status": True,
        "message": "Banks fetched successfully",
        "data": banks,
    })


@paystack_bp.route("/verify", methods=["POST"])
@paystack_key_required
def verify_account():
    """
    Resolve an account number with a bank code.

    Body: {"account_number": "0123456789", "bank_code": "058"}
    Fintech codes and Paystack failures are answered with a mock name, so
    anything past input validation comes back 200.
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = request.form.to_dict()

    resolver = AccountResolver(get_provider(), logger=current_app.logger)
    result = resolver.resolve(data.get("account_number"), data.get("bank_code"))

    return jsonify({
        "status": True,
        "message": result.message,
        "data": result.to_dict(),
    })
