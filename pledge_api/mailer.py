"""
Transactional email delivery through the Resend HTTP API.
"""
from typing import Optional

import requests

from .config import get_settings
from .errors import SendError
from .logging_config import email_logger


class ResendClient:
    """Sends one message per call. Every failure raises SendError."""

    def __init__(self, api_key: str, api_url: str = "https://api.resend.com", timeout: int = 10):
        self.api_key = api_key
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout

    def send(self, sender: str, to: str, subject: str, html: str) -> Optional[str]:
        """Send a message and return the provider's message id."""
        if not self.api_key:
            raise SendError("RESEND_API_KEY is not configured", recipient=to)

        payload = {
            "from": sender,
            "to": [to],
            "subject": subject,
            "html": html,
        }
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

        try:
            response = requests.post(
                f"{self.api_url}/emails",
                json=payload,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise SendError(f"Email request failed for {to}: {e}", recipient=to) from e

        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        # Resend reports failures either as a non-2xx status or as an error object
        error = body.get("error")
        if response.status_code >= 300 or error:
            details = error if isinstance(error, dict) else body
            message = (
                details.get("message")
                or (error if isinstance(error, str) else None)
                or response.reason
                or "Unknown error"
            )
            raise SendError(
                f"Resend error for {to}: {message}",
                recipient=to,
                error_name=details.get("name"),
            )

        message_id = body.get("id")
        email_logger.debug("Email accepted", recipient=to, message_id=message_id)
        return message_id


def get_mailer() -> ResendClient:
    """FastAPI dependency returning the configured email client."""
    settings = get_settings()
    return ResendClient(
        api_key=settings.resend_api_key,
        api_url=settings.resend_api_url,
        timeout=settings.email_timeout,
    )
