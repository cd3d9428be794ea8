"""Result of an ``authenticate`` call.

An :data:`AuthResult` is either :class:`AuthSuccess` or :class:`AuthFailure`,
never both. ``to_dict()`` produces the public shape ``{"result": true}`` or
``{"error": {"message": ..., "docs": ...}}``.
"""

from enum import Enum
from typing import Any, Dict, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

MISSING_TOKEN_DOCS_URL = "https://docs.typeauth.com/errors/missing-token"
AUTHENTICATION_ERROR_DOCS_URL = "https://docs.typeauth.com/errors/authentication"


class AuthErrorKind(str, Enum):
    """Why a request was not authenticated."""

    MISSING_TOKEN = "missing_token"
    TRANSPORT_FAILURE = "transport_failure"
    SERVICE_REJECTION = "service_rejection"
    INVALID_VERDICT = "invalid_verdict"


class AuthError(BaseModel):
    """Structured error returned to the caller."""

    model_config = ConfigDict(frozen=True)

    message: str = Field(..., description="Human readable error message")
    docs: str = Field(..., description="Documentation URL for this error")
    kind: AuthErrorKind = Field(..., description="Error category")


class AuthSuccess(BaseModel):
    """The token was accepted by the verification service."""

    model_config = ConfigDict(frozen=True)

    result: Literal[True] = True

    @property
    def ok(self) -> bool:
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {"result": True}


class AuthFailure(BaseModel):
    """The request could not be authenticated."""

    model_config = ConfigDict(frozen=True)

    error: AuthError

    @property
    def ok(self) -> bool:
        return False

    def to_dict(self) -> Dict[str, Any]:
        return {"error": {"message": self.error.message, "docs": self.error.docs}}


AuthResult = Union[AuthSuccess, AuthFailure]


def missing_token() -> AuthFailure:
    return AuthFailure(
        error=AuthError(
            message="Missing token",
            docs=MISSING_TOKEN_DOCS_URL,
            kind=AuthErrorKind.MISSING_TOKEN,
        )
    )


def authentication_error(message: str, kind: AuthErrorKind) -> AuthFailure:
    return AuthFailure(
        error=AuthError(message=message, docs=AUTHENTICATION_ERROR_DOCS_URL, kind=kind)
    )
