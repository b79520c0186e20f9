"""Tests for the HTTP client, with the transport stubbed out."""

import pytest
import requests

from wallettracker.http_client import WalletClient


class FakeResponse:
    def __init__(self, status_code=200, body=None):
        self.status_code = status_code
        self._body = body if body is not None else {}

    def json(self):
        return self._body

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


@pytest.fixture
def client():
    return WalletClient(base_url="http://wallet.test/", timeout=5)


def stub(monkeypatch, client, response=None, exc=None):
    calls = []

    def fake_request(method, url, json=None, timeout=None):
        calls.append({"method": method, "url": url, "json": json, "timeout": timeout})
        if exc is not None:
            raise exc
        return response

    monkeypatch.setattr(client.session, "request", fake_request)
    return calls


class TestRequests:
    def test_base_url_trailing_slash_stripped(self, client):
        assert client.base_url == "http://wallet.test"

    def test_get_balance(self, monkeypatch, client):
        calls = stub(monkeypatch, client, FakeResponse(body={"balance": 70}))

        assert client.get_balance() == 70
        assert calls[0]["method"] == "GET"
        assert calls[0]["url"] == "http://wallet.test/v1/balance"
        assert calls[0]["timeout"] == 5

    def test_deposit_posts_body(self, monkeypatch, client):
        body = {"success": True, "balance": 100, "error_code": None, "error_message": None}
        calls = stub(monkeypatch, client, FakeResponse(body=body))

        assert client.deposit("addrA", 100) == body
        assert calls[0]["url"] == "http://wallet.test/v1/deposits"
        assert calls[0]["json"] == {"address": "addrA", "amount": 100}

    def test_withdraw_rejection_is_not_an_error(self, monkeypatch, client):
        body = {"success": False, "balance": 0, "error_code": "INSUFFICIENT_FUNDS",
                "error_message": "Insufficient funds for withdrawal of 5. Available balance: 0"}
        stub(monkeypatch, client, FakeResponse(body=body))

        assert client.withdraw("addrA", 5)["error_code"] == "INSUFFICIENT_FUNDS"

    def test_get_history(self, monkeypatch, client):
        stub(monkeypatch, client, FakeResponse(body={"lines": ["x"], "entries": []}))
        assert client.get_history() == ["x"]


class TestErrors:
    def test_http_error_includes_detail(self, monkeypatch, client):
        stub(monkeypatch, client, FakeResponse(status_code=422, body={"detail": "bad body"}))

        with pytest.raises(requests.HTTPError, match="bad body"):
            client.deposit("addrA", 1)

    def test_timeout(self, monkeypatch, client):
        stub(monkeypatch, client, exc=requests.exceptions.Timeout())

        with pytest.raises(TimeoutError):
            client.get_balance()

    def test_connection_error(self, monkeypatch, client):
        stub(monkeypatch, client, exc=requests.exceptions.ConnectionError())

        with pytest.raises(ConnectionError, match="Is the server running"):
            client.health()


class TestDefaults:
    def test_settings_fill_missing_arguments(self, monkeypatch):
        monkeypatch.setenv("WALLET_API_URL", "http://from-env:9000")
        monkeypatch.setenv("WALLET_HTTP_TIMEOUT", "7")

        c = WalletClient()

        assert c.base_url == "http://from-env:9000"
        assert c.timeout == 7
