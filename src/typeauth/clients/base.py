"""Base HTTP client for calls to typeauth services."""

import logging
from typing import Dict, Optional

import httpx

logger = logging.getLogger(__name__)


class BaseServiceClient:
    """Base class for async HTTP clients talking to typeauth services.

    A fresh ``httpx.AsyncClient`` is opened for every operation and closed when
    it finishes, so no connection outlives a call.

    Usage:
        class VerificationClient(BaseServiceClient):
            async def verify(self, body: VerificationRequest) -> VerificationResponse:
                async with self._get_client() as client:
                    response = await client.post(
                        f"{self.base_url}/authenticate",
                        content=body.to_json(),
                        headers=self._headers(),
                    )
                    ...
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize service client.

        Args:
            base_url: Service base URL (e.g., https://api.typeauth.com)
            timeout: Request timeout in seconds (default: 10.0)
            transport: Optional httpx transport (e.g. httpx.MockTransport in tests)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

        logger.info(f"Initialized {self.__class__.__name__} with base_url={self.base_url}")

    def _headers(self) -> Dict[str, str]:
        """Headers sent with every request."""
        return {
            "Content-Type": "application/json",
        }

    def _get_client(self) -> httpx.AsyncClient:
        """Get HTTP client instance with configured timeout.

        Returns:
            Configured AsyncClient ready for use with async context manager
        """
        return httpx.AsyncClient(timeout=self.timeout, transport=self.transport)
