"""Email Notifications: templated sends and error propagation.

Invariants:
    - Provider exceptions reach the caller unchanged (never reported as success)
    - Non-2xx provider responses raise EmailDeliveryError with the status
    - Missing API key: development skips, other environments raise
    - Request carries from/to/subject/html/text and a Bearer API key
"""

import json
from unittest.mock import AsyncMock

import httpx
import pytest

from portal.config import Settings
from portal.core.errors import EmailDeliveryError
from portal.infrastructure.email_client import ResendClient
from portal.services.email import EmailService, strip_tags

APP_URL = "https://portal.example"


def _service(handler, is_development: bool = False) -> EmailService:
    client = ResendClient(
        api_key="re_test", from_email="noreply@getlost.test",
        transport=httpx.MockTransport(handler),
    )
    return EmailService(client, APP_URL, is_development)


@pytest.fixture
def sent():
    return []


@pytest.fixture
def ok_service(sent):
    def handler(request: httpx.Request) -> httpx.Response:
        sent.append(request)
        return httpx.Response(200, json={"id": "email_123"})
    return _service(handler)


# ─── Delivery ───────────────────────────────────────────────────

async def test_send_posts_expected_payload(ok_service, sent):
    await ok_service.send_email("reader@example.com", "Hello", "<p>Hi <b>there</b></p>")

    assert len(sent) == 1
    request = sent[0]
    assert request.headers["Authorization"] == "Bearer re_test"
    payload = json.loads(request.content)
    assert payload["to"] == ["reader@example.com"]
    assert payload["from"] == "noreply@getlost.test"
    assert payload["subject"] == "Hello"
    assert payload["text"] == "Hi there"


async def test_client_returns_provider_id(sent):
    def handler(request):
        return httpx.Response(200, json={"id": "email_abc"})

    client = ResendClient("re_test", "a@b.test", transport=httpx.MockTransport(handler))
    assert await client.send("x@y.test", "s", "<p>h</p>", "h") == "email_abc"


async def test_verification_email_links_token(ok_service, sent):
    await ok_service.send_verification_email("reader@example.com", "tok123")

    payload = json.loads(sent[0].content)
    assert payload["subject"] == "Verify your email for Get Lost"
    assert f"{APP_URL}/auth/verify-email?token=tok123" in payload["html"]


async def test_password_reset_email_links_token(ok_service, sent):
    await ok_service.send_password_reset_email("reader@example.com", "r1")

    payload = json.loads(sent[0].content)
    assert f"{APP_URL}/auth/reset-password?token=r1" in payload["html"]


async def test_report_ready_email_links_book(ok_service, sent):
    await ok_service.send_report_ready_email(
        "reader@example.com", "Night <Train>", "book-9", user_name="Sam",
    )

    payload = json.loads(sent[0].content)
    assert payload["subject"] == 'Your report for "Night <Train>" is ready!'
    assert f"{APP_URL}/dashboard/book/book-9#report" in payload["html"]
    assert "Night &lt;Train&gt;" in payload["html"]
    assert "Hi Sam," in payload["html"]


async def test_manuscript_emails_name_the_book(ok_service, sent):
    await ok_service.send_manuscript_queued_email("r@example.com", "Dune Road")
    await ok_service.send_manuscript_in_progress_email("r@example.com", "Dune Road")
    await ok_service.send_welcome_email("r@example.com", "Sam")

    subjects = [json.loads(r.content)["subject"] for r in sent]
    assert subjects == [
        'Your manuscript "Dune Road" has been queued',
        'We\'re working on your report for "Dune Road"',
        "Welcome to Get Lost!",
    ]


# ─── Failures propagate ─────────────────────────────────────────

async def test_provider_exception_propagates(ok_service, monkeypatch):
    monkeypatch.setattr(
        ok_service.client, "send", AsyncMock(side_effect=RuntimeError("Email send failed")),
    )

    with pytest.raises(RuntimeError, match="Email send failed"):
        await ok_service.send_email("reader@example.com", "Hello", "<p>Hi</p>")


async def test_provider_rejection_raises_delivery_error():
    def handler(request):
        return httpx.Response(422, json={"message": "Invalid `to` field"})

    service = _service(handler)

    with pytest.raises(EmailDeliveryError) as exc_info:
        await service.send_welcome_email("not-an-email")
    assert exc_info.value.status_code == 422


async def test_transport_error_propagates():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    service = _service(handler)

    with pytest.raises(httpx.ConnectError):
        await service.send_email("reader@example.com", "Hello", "<p>Hi</p>")


# ─── Configuration ──────────────────────────────────────────────

async def test_missing_key_in_development_skips():
    service = EmailService(None, APP_URL, is_development=True)

    await service.send_email("reader@example.com", "Hello", "<p>Hi</p>")


async def test_missing_key_outside_development_raises():
    service = EmailService(None, APP_URL, is_development=False)

    with pytest.raises(EmailDeliveryError):
        await service.send_email("reader@example.com", "Hello", "<p>Hi</p>")


def test_from_settings_without_key_has_no_client():
    service = EmailService.from_settings(Settings(resend_api_key=None))
    assert service.client is None


def test_from_settings_with_key_builds_client():
    settings = Settings(resend_api_key="re_live", environment="production")
    service = EmailService.from_settings(settings)
    assert service.client.api_key == "re_live"
    assert service.is_development is False


def test_strip_tags():
    assert strip_tags("<h2>Hi</h2><p>there</p>") == "Hithere"
