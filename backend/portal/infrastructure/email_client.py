"""Resend Email Client: posts transactional email to the Resend HTTP API.

Invariants:
    - Non-2xx responses raise EmailDeliveryError carrying the provider status
    - Transport failures (httpx.HTTPError) propagate unchanged to the caller
    - No retries; the caller decides whether a failed send matters
"""

import logging

import httpx

from portal.core.errors import EmailDeliveryError

logger = logging.getLogger(__name__)


class ResendClient:
    """Thin async wrapper around POST /emails."""

    def __init__(
        self,
        api_key: str,
        from_email: str,
        api_url: str = "https://api.resend.com/emails",
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.from_email = from_email
        self.api_url = api_url
        self.timeout_seconds = timeout_seconds
        # Injected in tests (httpx.MockTransport)
        self._transport = transport

    async def send(self, to: str, subject: str, html: str, text: str) -> str | None:
        """Send one message. Returns the provider's message id."""
        payload = {
            "from": self.from_email,
            "to": [to],
            "subject": subject,
            "html": html,
            "text": text,
        }
        async with httpx.AsyncClient(
            timeout=self.timeout_seconds, transport=self._transport,
        ) as client:
            response = await client.post(
                self.api_url,
                json=payload,
                headers={"Authorization": f"Bearer {self.api_key}"},
            )

        if response.is_error:
            logger.error(
                f"Resend API error {response.status_code}: {_error_detail(response)}",
                extra={"email_to": to},
            )
            raise EmailDeliveryError(
                "Email provider rejected the message",
                status_code=response.status_code,
            )

        provider_id = response.json().get("id")
        logger.info(
            "Email sent", extra={"email_to": to, "provider_id": provider_id},
        )
        return provider_id


def _error_detail(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict):
        return str(body.get("message") or body)
    return str(body)
