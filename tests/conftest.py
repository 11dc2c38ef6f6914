"""
Shared fixtures. Every test gets a fresh in-memory database and a notifier
whose HTTP session is a local fake, so no request ever leaves the process.
"""

from __future__ import annotations

import pytest

from contactdesk import create_app
from contactdesk.notifier import Notifier


class FakeResponse:
    def __init__(self, status_code=200, text="OK"):
        self.status_code = status_code
        self.text = text


class FakeSession:
    """Records posts and replays queued responses (default: 200 OK).

    Queue entries are ``(status, text)`` tuples or exceptions to raise.
    """

    def __init__(self):
        self.calls = []
        self._queue = []

    def queue(self, *responses):
        self._queue.extend(responses)

    def post(self, url, json=None, timeout=None):
        self.calls.append({"url": url, "json": json, "timeout": timeout})
        if not self._queue:
            return FakeResponse()
        result = self._queue.pop(0)
        if isinstance(result, BaseException):
            raise result
        status, text = result
        return FakeResponse(status, text)


VALID_SUBMISSION = {
    "name": "Ada Lovelace",
    "email": "ada@example.com",
    "company": "Analytical Engines",
    "phone": "+44 20 7946 0000",
    "message": "We'd like a demo.",
}


@pytest.fixture
def email_session():
    return FakeSession()


@pytest.fixture
def notifier(email_session):
    return Notifier(
        service_id="service_test",
        template_id="template_contact",
        public_key="public_test",
        private_key="private_test",
        to_email="owner@example.com",
        session=email_session,
    )


@pytest.fixture
def app(notifier):
    app = create_app("testing", notifier=notifier)
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture
def store(app):
    return app.extensions["record_store"]


@pytest.fixture
def unconfigured_app():
    """App whose notifier is built from the blank testing config."""
    app = create_app("testing")
    with app.app_context():
        yield app


@pytest.fixture
def unconfigured_client(unconfigured_app):
    with unconfigured_app.test_client() as client:
        yield client
