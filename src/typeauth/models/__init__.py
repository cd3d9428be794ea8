"""
Data models for typeauth.

Pydantic models for the verification wire format and the result returned
by ``Typeauth.authenticate``.
"""

from typeauth.models.request import IncomingRequest
from typeauth.models.result import (
    AUTHENTICATION_ERROR_DOCS_URL,
    MISSING_TOKEN_DOCS_URL,
    AuthError,
    AuthErrorKind,
    AuthFailure,
    AuthResult,
    AuthSuccess,
)
from typeauth.models.verification import (
    TelemetryPayload,
    VerificationRequest,
    VerificationResponse,
)

__all__ = [
    # Request
    "IncomingRequest",
    # Wire
    "TelemetryPayload",
    "VerificationRequest",
    "VerificationResponse",
    # Result
    "AuthError",
    "AuthErrorKind",
    "AuthFailure",
    "AuthResult",
    "AuthSuccess",
    "AUTHENTICATION_ERROR_DOCS_URL",
    "MISSING_TOKEN_DOCS_URL",
]
