import logging
import re
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Optional

from account_relay.utils.bank.fintech import classify
from account_relay.utils.bank.mock_names import generate_mock_name
from account_relay.utils.errors import (
    InvalidAccountFormat,
    MissingField,
    UpstreamUnavailable,
)

NUBAN_PATTERN = re.compile(r"[0-9]{10}")

# Phrases Paystack uses when a test-mode key has run out of resolves
RESPONSE_LIMIT_KEYWORDS = ("limit", "daily", "exceeded", "test mode", "upgrade to live")
ERROR_LIMIT_KEYWORDS = ("limit", "quota", "rate", "daily", "exceeded")
LIMIT_STATUS_CODES = (429, 403)

MESSAGE_RESOLVED = "Account resolved successfully"
MESSAGE_FINTECH = "Account resolved successfully (Fintech - Test Mode)"
MESSAGE_LIMIT_FALLBACK = "Account resolved successfully (Test Mode - Daily Limit Fallback)"
MESSAGE_FALLBACK = "Account resolved successfully (Test Mode - Fallback)"


class OutcomeKind(str, Enum):
    SUCCESS = "success"
    SANDBOX_LIMITED = "sandbox_limited"
    GENERIC_FAILURE = "generic_failure"


@dataclass(frozen=True)
class UpstreamOutcome:
    kind: OutcomeKind
    data: Optional[dict] = None
    reason: str = ""


@dataclass(frozen=True)
class Resolution:
    account_number: str
    account_name: str
    bank_id: str
    is_fintech: bool
    is_mock: bool
    message: str = MESSAGE_RESOLVED
    bank_name: Optional[str] = None

    def to_dict(self) -> dict:
        data = asdict(self)
        data.pop("message")
        if data["bank_name"] is None:
            data.pop("bank_name")
        return data


def validate_verify_input(account_number, bank_code) -> tuple[str, str]:
    # null, "", false and 0 all count as missing
    if not account_number or not bank_code:
        raise MissingField()

    account_number = str(account_number)
    bank_code = str(bank_code)

    # Nigerian NUBAN numbers are always 10 digits, nothing around them
    if not NUBAN_PATTERN.fullmatch(account_number):
        raise InvalidAccountFormat()

    return account_number, bank_code


def _mentions_any(text: str, keywords) -> bool:
    text = (text or "").lower()
    return any(word in text for word in keywords)


def classify_upstream_outcome(
    response: Optional[dict] = None,
    error: Optional[UpstreamUnavailable] = None,
) -> UpstreamOutcome:
    """
    Collapse everything Paystack can do to a resolve call into one of three
    outcomes.

    ``response`` is a decoded 2xx body; ``error`` is the exception raised when
    there was no usable 2xx body. Exactly one of them should be given.
    """
    if error is not None:
        status_code = error.status_code
        reason = error.reason
        text = error.keyword_text

        if status_code is None:
            # timeout, DNS failure, connection reset
            return UpstreamOutcome(OutcomeKind.GENERIC_FAILURE, reason=reason)

        if status_code in LIMIT_STATUS_CODES or _mentions_any(text, ERROR_LIMIT_KEYWORDS):
            return UpstreamOutcome(OutcomeKind.SANDBOX_LIMITED, reason=reason)

        if status_code == 400 and _mentions_any(text, RESPONSE_LIMIT_KEYWORDS):
            return UpstreamOutcome(OutcomeKind.SANDBOX_LIMITED, reason=reason)

        return UpstreamOutcome(OutcomeKind.GENERIC_FAILURE, reason=reason)

    if not isinstance(response, dict):
        return UpstreamOutcome(
            OutcomeKind.GENERIC_FAILURE, reason=f"Unexpected payload from Paystack: {response!r}"
        )

    if response.get("status"):
        data = response.get("data")
        if isinstance(data, dict):
            return UpstreamOutcome(OutcomeKind.SUCCESS, data=data)
        return UpstreamOutcome(
            OutcomeKind.GENERIC_FAILURE, reason=f"Unexpected data from Paystack: {data!r}"
        )

    reason = str(response.get("message") or "")
    if _mentions_any(reason, RESPONSE_LIMIT_KEYWORDS):
        return UpstreamOutcome(OutcomeKind.SANDBOX_LIMITED, reason=reason)
    return UpstreamOutcome(OutcomeKind.GENERIC_FAILURE, reason=reason)


class AccountResolver:
    """
    Turns an account number and bank code into an account holder name.

    Once the input is valid this always produces a Resolution: fintech codes
    get their fixed test name, everything else goes to Paystack, and any
    Paystack failure is answered with a name from generate_mock_name.
    """

    def __init__(self, provider, logger: Optional[logging.Logger] = None):
        self.provider = provider
        self.logger = logger or logging.getLogger(__name__)

    def resolve(self, account_number, bank_code) -> Resolution:
        account_number, bank_code = validate_verify_input(account_number, bank_code)

        fintech = classify(bank_code)
        if fintech is not None:
            self.logger.info(
                "Fintech bank %s (%s), returning test name without calling Paystack",
                bank_code, fintech.display_name,
            )
            return Resolution(
                account_number=account_number,
                account_name=fintech.mock_account_name,
                bank_id=bank_code,
                bank_name=fintech.display_name,
                is_fintech=True,
                is_mock=True,
                message=MESSAGE_FINTECH,
            )

        try:
            body = self.provider.resolve_account(account_number, bank_code)
        except UpstreamUnavailable as exc:
            self.logger.error(
                "Paystack verify error (status=%s): %s", exc.status_code, exc.reason
            )
            outcome = classify_upstream_outcome(error=exc)
        else:
            outcome = classify_upstream_outcome(response=body)

        if outcome.kind is OutcomeKind.SUCCESS:
            data = outcome.data
            self.logger.info("Resolved account %s at bank %s", account_number, bank_code)
            return Resolution(
                account_number=data.get("account_number", account_number),
                account_name=data.get("account_name"),
                bank_id=data.get("bank_id"),
                is_fintech=False,
                is_mock=False,
            )

        if outcome.kind is OutcomeKind.SANDBOX_LIMITED:
            self.logger.warning(
                "Paystack rate/daily limit reached, using mock account name: %s",
                outcome.reason,
            )
            return self._fallback(account_number, bank_code, MESSAGE_LIMIT_FALLBACK)

        self.logger.warning(
            "Paystack could not resolve account, using mock account name: %s",
            outcome.reason,
        )
        return self._fallback(account_number, bank_code, MESSAGE_FALLBACK)

    @staticmethod
    def _fallback(account_number: str, bank_code: str, message: str) -> Resolution:
        return Resolution(
            account_number=account_number,
            account_name=generate_mock_name(account_number),
            bank_id=bank_code,
            is_fintech=False,
            is_mock=True,
            message=message,
        )
