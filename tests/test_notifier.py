"""EmailJS notifier: request building and outcome normalization."""

from __future__ import annotations

import requests

from contactdesk.errors import ProviderError
from contactdesk.notifier import NotificationOutcome, Notifier

from .conftest import VALID_SUBMISSION


# ---- Configuration ----
def test_validate_configuration_all_set(notifier):
    assert notifier.validate_configuration() == {"is_valid": True, "missing": []}


def test_validate_configuration_reports_missing_in_order(email_session):
    n = Notifier(template_id="t", private_key="k", session=email_session)
    result = n.validate_configuration()
    assert result["is_valid"] is False
    assert result["missing"] == ["EMAILJS_SERVICE_ID", "EMAILJS_PUBLIC_KEY", "TO_EMAIL"]


def test_validate_configuration_missing_service_id(email_session):
    n = Notifier(
        template_id="t", public_key="p", private_key="k", to_email="o@x.com", session=email_session
    )
    result = n.validate_configuration()
    assert result["is_valid"] is False
    assert "EMAILJS_SERVICE_ID" in result["missing"]


def test_from_config_reads_settings(email_session):
    n = Notifier.from_config({
        "EMAILJS_SERVICE_ID": "svc",
        "EMAILJS_TEMPLATE_ID": "tpl",
        "EMAILJS_WELCOME_TEMPLATE_ID": "welcome",
        "EMAILJS_PUBLIC_KEY": "pub",
        "EMAILJS_PRIVATE_KEY": "priv",
        "TO_EMAIL": "owner@x.com",
        "EMAIL_TIMEOUT": 3,
    }, session=email_session)
    assert n.welcome_template_id == "welcome"
    assert n.api_url == Notifier.DEFAULT_API_URL
    assert n.timeout == 3
    assert n.validate_configuration()["is_valid"] is True


# ---- Contact email ----
def test_contact_email_request(notifier, email_session):
    outcome = notifier.send_contact_email(VALID_SUBMISSION)

    assert outcome.success is True
    assert outcome.message_id == "OK"
    assert outcome.message == "Email sent successfully"

    call = email_session.calls[0]
    assert call["url"] == Notifier.DEFAULT_API_URL
    payload = call["json"]
    assert payload["service_id"] == "service_test"
    assert payload["template_id"] == "template_contact"
    assert payload["user_id"] == "public_test"
    assert payload["accessToken"] == "private_test"
    assert payload["template_params"] == {
        "from_name": "Ada Lovelace",
        "from_email": "ada@example.com",
        "company": "Analytical Engines",
        "phone": "+44 20 7946 0000",
        "message": "We'd like a demo.",
        "to_email": "owner@example.com",
        "reply_to": "ada@example.com",
    }


def test_contact_email_fallback_text(notifier, email_session):
    notifier.send_contact_email({"name": "A", "email": "a@x.com", "message": "hi", "company": ""})
    params = email_session.calls[0]["json"]["template_params"]
    assert params["company"] == "Not specified"
    assert params["phone"] == "Not provided"


def test_contact_email_provider_rejection(notifier, email_session):
    email_session.queue((400, "The template ID is invalid"))
    outcome = notifier.send_contact_email(VALID_SUBMISSION)

    assert outcome.success is False
    assert outcome.error == "The template ID is invalid"
    assert isinstance(outcome.details, ProviderError)
    assert outcome.details.status == 400


def test_contact_email_empty_rejection_body(notifier, email_session):
    email_session.queue((503, ""))
    outcome = notifier.send_contact_email(VALID_SUBMISSION)
    assert outcome.error == "EmailJS returned HTTP 503"


def test_contact_email_network_error(notifier, email_session):
    email_session.queue(requests.ConnectionError("connection refused"))
    outcome = notifier.send_contact_email(VALID_SUBMISSION)
    assert outcome.success is False
    assert outcome.error == "Network error: connection refused"


def test_contact_email_timeout(notifier, email_session):
    email_session.queue(requests.Timeout())
    outcome = notifier.send_contact_email(VALID_SUBMISSION)
    assert outcome.error == "Request timeout"


def test_contact_email_unexpected_fault_uses_default_message(notifier, email_session):
    email_session.queue(RuntimeError())
    outcome = notifier.send_contact_email(VALID_SUBMISSION)
    assert outcome.success is False
    assert outcome.error == "Failed to send email"
    assert isinstance(outcome.details, RuntimeError)


def test_default_transport_is_requests_module():
    assert Notifier().session is requests


def test_unconfigured_notifier_fails_without_network(email_session):
    n = Notifier(session=email_session)
    outcome = n.send_contact_email(VALID_SUBMISSION)
    assert outcome.success is False
    assert "EMAILJS_SERVICE_ID" in outcome.error
    assert email_session.calls == []


# ---- Welcome email ----
def test_welcome_email_falls_back_to_primary_template(notifier, email_session):
    outcome = notifier.send_welcome_email(VALID_SUBMISSION)

    assert outcome.success is True
    assert outcome.message == "Welcome email sent successfully"
    payload = email_session.calls[0]["json"]
    assert payload["template_id"] == "template_contact"
    assert payload["template_params"] == {
        "to_name": "Ada Lovelace",
        "to_email": "ada@example.com",
        "from_name": Notifier.WELCOME_FROM_NAME,
        "message": Notifier.WELCOME_MESSAGE,
    }


def test_welcome_email_uses_its_own_template(notifier, email_session):
    notifier.welcome_template_id = "template_welcome"
    notifier.send_welcome_email(VALID_SUBMISSION)
    assert email_session.calls[0]["json"]["template_id"] == "template_welcome"


def test_welcome_email_failure_default_message(notifier, email_session):
    email_session.queue(ValueError())
    outcome = notifier.send_welcome_email(VALID_SUBMISSION)
    assert outcome.success is False
    assert outcome.error == "Failed to send welcome email"


# ---- Outcome ----
def test_outcome_to_dict():
    assert NotificationOutcome.sent("OK", "Email sent successfully").to_dict() == {
        "success": True, "messageId": "OK", "message": "Email sent successfully",
    }
    failed = NotificationOutcome.failed("Forbidden", ProviderError("Forbidden", status=403))
    assert failed.to_dict() == {
        "success": False,
        "error": "Forbidden",
        "details": {"type": "ProviderError", "message": "Forbidden", "status": 403},
    }
