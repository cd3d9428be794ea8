"""typeauth

Authenticate incoming HTTP requests against the typeauth verification service.
"""

__version__ = "0.1.0"

from typeauth.config import TypeauthOptions
from typeauth.models import (
    AuthError,
    AuthErrorKind,
    AuthFailure,
    AuthResult,
    AuthSuccess,
)

# Authenticator imports the clients, which depend on models; import it last
from typeauth.authenticator import Typeauth

__all__ = [
    "Typeauth",
    "TypeauthOptions",
    # Results
    "AuthError",
    "AuthErrorKind",
    "AuthFailure",
    "AuthResult",
    "AuthSuccess",
]
