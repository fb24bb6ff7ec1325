class RelayError(Exception):
    """Base error for anything the relay reports back to the caller."""

    http_status = 500
    default_message = "An unexpected error occurred"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingField(RelayError):
    http_status = 400
    default_message = "Account number and bank code are required"


class InvalidAccountFormat(RelayError):
    http_status = 400
    default_message = "Account number must be exactly 10 digits"


class ConfigurationMissing(RelayError):
    http_status = 500
    default_message = (
        "Paystack secret key not configured. "
        "Please set PAYSTACK_SECRET_KEY in your .env file"
    )


class UpstreamError(RelayError):
    """
    Paystack could not give us a usable answer.

    status_code is the HTTP status Paystack replied with, or None when the
    request never got a response (timeout, DNS, connection reset).
    upstream_message is the `message` field of Paystack's JSON body, if any;
    detail is the low-level error text, and status_text the HTTP reason
    phrase ("Too Many Requests").
    """

    def __init__(
        self,
        upstream_message: str | None = None,
        *,
        status_code: int | None = None,
        payload=None,
        detail: str | None = None,
        status_text: str | None = None,
    ):
        super().__init__(upstream_message)
        self.upstream_message = upstream_message
        self.status_code = status_code
        self.payload = payload
        self.detail = detail or self.message
        self.status_text = status_text

    @property
    def reason(self) -> str:
        return self.upstream_message or self.detail or ""

    @property
    def keyword_text(self) -> str:
        """Text worth scanning for quota wording; never the request URL."""
        return self.upstream_message or self.status_text or ""


class UpstreamUnavailable(UpstreamError):
    http_status = 500
    default_message = "Error fetching data from Paystack"


class UpstreamRejected(UpstreamError):
    http_status = 400
    default_message = "Paystack rejected the request"
