"""HTTP clients for typeauth services."""

from typeauth.clients.base import BaseServiceClient
from typeauth.clients.verification_client import VerificationClient

__all__ = [
    "BaseServiceClient",
    "VerificationClient",
]
