"""Utility Functions"""

from typeauth.utils.resilience import create_transport_retrying

__all__ = [
    "create_transport_retrying",
]
