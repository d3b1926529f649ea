import json

import httpx
import pytest

from tinkoff_merchant.token import generate_token


TERMINAL_KEY = "TestTerminal"
PASSWORD = "pwd"
BASE_URL = "https://rest-api-test.tinkoff.ru/v2"


@pytest.fixture(autouse=True)
def no_sentry(monkeypatch):
    monkeypatch.delenv("ENABLE_SENTRY", raising=False)


@pytest.fixture
def recorded():
    """Requests seen by the mock transport."""
    return []


@pytest.fixture
def mock_transport(recorded):
    def handler(request: httpx.Request) -> httpx.Response:
        recorded.append(request)
        body = json.loads(request.content)
        method = request.url.path.rsplit("/", 1)[-1]
        return httpx.Response(200, json={
            "TerminalKey": body["TerminalKey"],
            "Success": True,
            "ErrorCode": "0",
            "Method": method,
        })

    return httpx.MockTransport(handler)


@pytest.fixture
def notification():
    body = {
        "TerminalKey": TERMINAL_KEY,
        "OrderId": "order-7",
        "Success": True,
        "Status": "CONFIRMED",
        "PaymentId": 13660,
        "ErrorCode": "0",
        "Amount": 19200,
        "CardId": 322264,
        "Pan": "430000******0777",
        "ExpDate": "1122",
    }
    body["Token"] = generate_token(body, PASSWORD)
    return body
