import asyncio
import json

import httpx
import pytest
from fastapi.testclient import TestClient

from app import create_app
from app.config.config import Credentials
from app.core.twilio_verify_client import TwilioVerifyClient


def verification_payload(**overrides) -> dict:
    payload = {
        "sid": "VE0123456789",
        "service_sid": "VA0123456789",
        "account_sid": "AC0123456789",
        "to": "+15551234567",
        "channel": "sms",
        "status": "pending",
        "valid": False,
        "date_created": "2024-05-01T12:00:00Z",
        "date_updated": "2024-05-01T12:00:00Z",
    }
    payload.update(overrides)
    return payload


class FakeTwilio:
    """Stands in for Twilio Verify; records every request it receives."""

    def __init__(self):
        self.requests = []
        self.status_code = 201
        self.body = json.dumps(verification_payload()).encode()
        self.error = None

    def respond(self, status_code=201, body=None, **payload):
        self.status_code = status_code
        self.body = body if body is not None else json.dumps(verification_payload(**payload)).encode()

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error(f"{self.error.__name__} while contacting provider", request=request)
        return httpx.Response(self.status_code, content=self.body, headers={"Content-Type": "application/json"})


class SlowDripTransport(httpx.AsyncBaseTransport):
    """Answers 201 with a valid body, one byte per `delay` seconds."""

    def __init__(self, delay: float):
        self.delay = delay

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        body = json.dumps(verification_payload()).encode()

        async def drip():
            for byte in body:
                await asyncio.sleep(self.delay)
                yield bytes([byte])

        return httpx.Response(201, content=drip(), headers={"Content-Type": "application/json"})


@pytest.fixture
def credentials():
    return Credentials(service_sid="VA0123456789", account_sid="AC0123456789", auth_token="secret-token")


@pytest.fixture
def fake_twilio():
    return FakeTwilio()


@pytest.fixture
def verify_client(credentials, fake_twilio):
    return TwilioVerifyClient(credentials, transport=httpx.MockTransport(fake_twilio.handler))


@pytest.fixture
def client(verify_client):
    return TestClient(create_app(verify_client=verify_client))
