"""
Shared fixtures: a Flask app on TestingConfig and stand-ins for Paystack.

FakeProvider replaces PaystackProvider at the orchestrator/route level;
StubSession replaces requests.Session when the provider itself is under test.
"""
from __future__ import annotations

import json

import pytest
import requests

from account_relay import create_app
from account_relay.config import TestingConfig


class FakeProvider:
    """Records calls and replays canned answers instead of calling Paystack."""

    def __init__(self, resolve_result=None, banks_result=None):
        self.resolve_result = resolve_result
        self.banks_result = banks_result if banks_result is not None else []
        self.resolve_calls = []
        self.banks_calls = 0

    def resolve_account(self, account_number, bank_code):
        self.resolve_calls.append((account_number, bank_code))
        if isinstance(self.resolve_result, Exception):
            raise self.resolve_result
        return self.resolve_result

    def list_banks(self):
        self.banks_calls += 1
        if isinstance(self.banks_result, Exception):
            raise self.banks_result
        return self.banks_result


def make_response(status_code: int = 200, body=None, url: str = "https://paystack.test/bank") -> requests.Response:
    resp = requests.Response()
    resp.status_code = status_code
    resp.url = url
    resp._content = body if isinstance(body, bytes) else json.dumps(body).encode()
    resp.headers["Content-Type"] = "application/json"
    return resp


class StubSession:
    """Minimal requests.Session double: returns one response or raises one error."""

    def __init__(self, response=None, error: Exception | None = None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, headers=None, params=None, timeout=None):
        self.calls.append({"url": url, "headers": headers, "params": params, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def fake_provider():
    return FakeProvider()


@pytest.fixture
def app(fake_provider):
    app = create_app(TestingConfig)
    app.extensions["paystack"] = fake_provider
    yield app


@pytest.fixture
def client(app):
    return app.test_client()
