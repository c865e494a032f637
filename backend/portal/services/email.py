"""Email Notifications: templated account and manuscript emails.

Invariants:
    - Every public sender goes through send_email
    - Provider failures propagate to the caller unchanged (no swallowed success)
    - Without an API key: development logs and skips, other environments raise
    - Interpolated user values are HTML-escaped

Design Decisions:
    - One shared layout; each email supplies heading, paragraphs and a button
"""

import html
import logging
import re
from datetime import datetime, timezone

import httpx

from portal.config import Settings
from portal.core.errors import EmailDeliveryError
from portal.infrastructure.email_client import ResendClient

logger = logging.getLogger(__name__)

_TAG_PATTERN = re.compile(r"<[^>]*>")
_BRAND = "Get Lost"


def strip_tags(markup: str) -> str:
    """Plain-text fallback for an HTML body."""
    return _TAG_PATTERN.sub("", markup)


def _render(
    title: str,
    heading: str,
    paragraphs: list[str],
    button_label: str,
    button_url: str,
    footer: str,
    highlight: str | None = None,
) -> str:
    year = datetime.now(timezone.utc).year
    body = "\n".join(f"<p>{p}</p>" for p in paragraphs)
    highlight_block = (
        f'<div class="book-title">&quot;{html.escape(highlight)}&quot;</div>'
        if highlight else ""
    )
    url = html.escape(button_url, quote=True)
    return f"""<!DOCTYPE html>
<html>
  <head><meta charset="UTF-8"><title>{html.escape(title)}</title></head>
  <body style="font-family: sans-serif; background-color: #f9fafb; padding: 20px;">
    <div class="container" style="background: white; border-radius: 12px; padding: 48px; max-width: 500px; margin: 0 auto;">
      <h2>{heading}</h2>
      {body}
      {highlight_block}
      <a href="{url}" class="button" style="background-color: #ea580c; color: white; padding: 16px 48px; border-radius: 8px; text-decoration: none;">{button_label}</a>
      <div class="footer" style="margin-top: 40px; font-size: 13px; color: #9ca3af;">
        <p>{footer}</p>
        <p>&copy; {year} {_BRAND}. All rights reserved.</p>
      </div>
    </div>
  </body>
</html>"""


def _greeting(user_name: str | None) -> str:
    return f"Hi {html.escape(user_name)}," if user_name else "Hi,"


class EmailService:
    """Builds notification emails and hands them to the provider client."""

    def __init__(
        self,
        client: ResendClient | None,
        app_url: str,
        is_development: bool = True,
    ):
        self.client = client
        self.app_url = app_url.rstrip("/")
        self.is_development = is_development

    @classmethod
    def from_settings(
        cls, settings: Settings, transport: httpx.AsyncBaseTransport | None = None,
    ) -> "EmailService":
        client = None
        if settings.resend_api_key:
            client = ResendClient(
                api_key=settings.resend_api_key,
                from_email=settings.resend_from_email,
                api_url=settings.resend_api_url,
                timeout_seconds=settings.email_timeout_seconds,
                transport=transport,
            )
        return cls(client, settings.app_url, settings.is_development)

    async def send_email(
        self, to: str, subject: str, html_body: str, text: str | None = None,
    ) -> None:
        """Send one email. Raises whatever the provider raises."""
        if self.client is None:
            if self.is_development:
                logger.info(
                    f"Email provider not configured, skipping: {subject}",
                    extra={"email_to": to},
                )
                return
            logger.error("Resend API key not configured", extra={"email_to": to})
            raise EmailDeliveryError("Email provider not configured")

        await self.client.send(to, subject, html_body, text or strip_tags(html_body))

    async def send_verification_email(self, email: str, token: str) -> None:
        url = f"{self.app_url}/auth/verify-email?token={token}"
        await self.send_email(email, f"Verify your email for {_BRAND}", _render(
            "Verify Your Email",
            "Verify Your Email Address",
            [
                f"Welcome to {_BRAND}! Please verify your email to complete your registration.",
                "This link will expire in 24 hours.",
            ],
            "Verify Email",
            url,
            f"If you didn't create an account with {_BRAND}, you can safely ignore this email.",
        ))

    async def send_password_reset_email(self, email: str, token: str) -> None:
        url = f"{self.app_url}/auth/reset-password?token={token}"
        await self.send_email(email, f"Reset your password for {_BRAND}", _render(
            "Reset Your Password",
            "Reset Your Password",
            [
                "We received a request to reset your password. "
                "Click the button below to create a new password:",
                "This link will expire in 1 hour.",
            ],
            "Reset Password",
            url,
            "If you didn't request this, you can safely ignore this email.",
        ))

    async def send_welcome_email(self, email: str, name: str | None = None) -> None:
        heading = f"Welcome, {html.escape(name)}!" if name else "Welcome!"
        await self.send_email(email, f"Welcome to {_BRAND}!", _render(
            f"Welcome to {_BRAND}",
            heading,
            ["Your account is ready. Let's discover your book's unique fingerprint."],
            "Go to Dashboard",
            f"{self.app_url}/dashboard",
            "Happy writing!",
        ))

    async def send_manuscript_queued_email(
        self, email: str, book_title: str, user_name: str | None = None,
    ) -> None:
        await self.send_email(
            email, f'Your manuscript "{book_title}" has been queued', _render(
                "Manuscript Queued",
                "Manuscript Queued",
                [
                    _greeting(user_name),
                    "Your manuscript has been successfully uploaded and is now "
                    "in our queue for processing.",
                ],
                "View Dashboard",
                f"{self.app_url}/dashboard",
                f"Thank you for using {_BRAND}!",
                highlight=book_title,
            ),
        )

    async def send_manuscript_in_progress_email(
        self, email: str, book_title: str, user_name: str | None = None,
    ) -> None:
        await self.send_email(
            email, f'We\'re working on your report for "{book_title}"', _render(
                "Manuscript In Progress",
                "We're Working on Your Report",
                [
                    _greeting(user_name),
                    "Great news! Our team has started working on your manuscript report.",
                ],
                "View Dashboard",
                f"{self.app_url}/dashboard",
                f"Thank you for using {_BRAND}!",
                highlight=book_title,
            ),
        )

    async def send_report_ready_email(
        self, email: str, book_title: str, book_id: str, user_name: str | None = None,
    ) -> None:
        await self.send_email(
            email, f'Your report for "{book_title}" is ready!', _render(
                "Report Ready",
                "Your Report is Ready!",
                [
                    _greeting(user_name),
                    "Your comprehensive manuscript report has been completed "
                    "and is ready for you to view.",
                ],
                "View Report",
                f"{self.app_url}/dashboard/book/{book_id}#report",
                f"Thank you for using {_BRAND}!",
                highlight=book_title,
            ),
        )
