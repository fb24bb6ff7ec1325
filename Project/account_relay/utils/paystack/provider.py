import unicodedata

import requests

from account_relay.utils.errors import (
    ConfigurationMissing,
    UpstreamRejected,
    UpstreamUnavailable,
)


def bank_sort_key(bank: dict):
    """Locale-friendly ordering: accents and case ignored, raw name breaks ties."""
    name = str(bank.get("name") or "")
    folded = unicodedata.normalize("NFKD", name)
    folded = "".join(ch for ch in folded if not unicodedata.combining(ch))
    return folded.casefold(), name


def _upstream_message(response) -> str | None:
    if response is None:
        return None
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        return body.get("message") or None
    return None


class PaystackProvider:
    BASE_URL = "https://api.paystack.co"

    def __init__(
        self,
        secret_key: str | None,
        *,
        base_url: str | None = None,
        timeout: float = 15,
        banks_per_page: int = 100,
        session: requests.Session | None = None,
    ):
        if not secret_key:
            raise ConfigurationMissing()

        self.secret_key = secret_key
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self.timeout = timeout
        self.banks_per_page = banks_per_page
        self.session = session or requests.Session()

    def _headers(self):
        return {
            "Authorization": f"Bearer {self.secret_key}",
            "Content-Type": "application/json",
        }

    def _get(self, path: str, params: dict) -> dict:
        try:
            resp = self.session.get(
                f"{self.base_url}{path}",
                headers=self._headers(),
                params=params,
                timeout=self.timeout,
            )
            resp.raise_for_status()
            return resp.json()
        except requests.JSONDecodeError as exc:
            # 2xx with a body that is not JSON
            raise UpstreamUnavailable(
                status_code=resp.status_code,
                detail=f"Invalid JSON from Paystack: {exc}",
            ) from exc
        except requests.RequestException as exc:
            response = getattr(exc, "response", None)
            raise UpstreamUnavailable(
                _upstream_message(response),
                detail=str(exc),
                status_code=response.status_code if response is not None else None,
                status_text=response.reason if response is not None else None,
            ) from exc

    def list_banks(self) -> list[dict]:
        """
        Fetch every Nigerian bank Paystack supports, sorted by name.

        Raises UpstreamUnavailable when the call itself fails and
        UpstreamRejected when Paystack answers with ``status: false``.
        """
        body = self._get(
            "/bank",
            {"country": "nigeria", "use_cursor": "true", "perPage": self.banks_per_page},
        )

        if not isinstance(body, dict):
            raise UpstreamUnavailable(detail="Unexpected payload from Paystack", payload=body)

        if not body.get("status"):
            raise UpstreamRejected(
                body.get("message") or "Failed to fetch banks",
                payload=body,
            )

        banks = body.get("data") or []
        if not isinstance(banks, list) or not all(isinstance(b, dict) for b in banks):
            raise UpstreamUnavailable(detail="Unexpected payload from Paystack", payload=body)

        return sorted(banks, key=bank_sort_key)

    def resolve_account(self, account_number: str, bank_code: str) -> dict:
        """
        Ask Paystack for the holder name of a NUBAN account.

        The decoded body is returned as-is for any 2xx reply, including
        ``status: false`` ones; the caller decides what those mean.
        """
        return self._get(
            "/bank/resolve",
            {"account_number": account_number, "bank_code": bank_code},
        )
