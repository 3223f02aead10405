"""
Error types raised by the pledge service.
"""
from typing import Optional


class PledgeError(Exception):
    """Base class for service errors."""

    status_code = 500


class Unauthorized(PledgeError):
    """Trigger credential missing or wrong."""

    status_code = 401

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class StoreError(PledgeError):
    """Relational store failure or a row that cannot be used."""


class SendError(PledgeError):
    """The email provider failed or returned an error payload."""

    def __init__(self, message: str, recipient: Optional[str] = None, error_name: Optional[str] = None):
        self.recipient = recipient
        self.error_name = error_name
        super().__init__(message)
