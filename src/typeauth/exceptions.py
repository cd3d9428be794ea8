"""Errors raised while dispatching a verification request.

These never escape :meth:`typeauth.Typeauth.authenticate`; the authenticator
converts them into an :class:`~typeauth.models.AuthFailure`.
"""

from typing import Optional


class DispatchError(Exception):
    """Base class for verification dispatch failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TransportFailureError(DispatchError):
    """Every attempt failed at the transport layer (network, DNS, timeout)."""

    def __init__(self, message: str, attempts: int, last_error: Optional[BaseException] = None):
        super().__init__(message)
        self.attempts = attempts
        self.last_error = last_error


class ServiceRejectionError(DispatchError):
    """The verification service answered with an unusable response."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
