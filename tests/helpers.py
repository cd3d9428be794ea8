"""
Shared test helpers for typeauth tests.

- MockVerificationService: httpx.MockTransport with queued outcomes and call history
- SleepRecorder: stand-in for asyncio.sleep that records retry delays
- make_request: incoming request builder for authenticate()
"""

import json
from typing import Any, Callable, Dict, List, Optional, Union

import httpx

MOCK_APP_ID = "mock-app-id"
MOCK_TOKEN = "mock-token"
DEFAULT_AUTH_URL = "https://api.typeauth.com/authenticate"


# =============================================================================
# Verification Service Mocking
# =============================================================================

Outcome = Union[httpx.Response, Exception, Callable[[httpx.Request], httpx.Response]]


class MockVerificationService:
    """
    Mock typeauth verification service behind an httpx.MockTransport.

    Outcomes are consumed in order, one per HTTP attempt. An exception
    outcome is raised from the transport, simulating a network failure.
    Once the queue is empty every call gets the default response.

    Usage:
        def test_retry(verification_service, make_typeauth):
            verification_service.queue(httpx.ConnectError("down"))
            typeauth = make_typeauth()
            ...
            assert verification_service.call_count == 2
    """

    def __init__(self):
        self._outcomes: List[Outcome] = []
        self._default_body: Dict[str, Any] = {"success": True, "valid": True}
        self.calls: List[httpx.Request] = []

    def queue(self, *outcomes: Outcome) -> "MockVerificationService":
        """Append outcomes for the next attempts."""
        self._outcomes.extend(outcomes)
        return self

    def set_default_body(self, body: Dict[str, Any]) -> "MockVerificationService":
        self._default_body = body
        return self

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)

        if not self._outcomes:
            return httpx.Response(200, json=self._default_body)

        outcome = self._outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        if callable(outcome):
            return outcome(request)
        return outcome

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def body(self, index: int = -1) -> Dict[str, Any]:
        """Decoded JSON body of a recorded call."""
        return json.loads(self.calls[index].content)


class SleepRecorder:
    """Async sleep replacement that records requested delays."""

    def __init__(self):
        self.delays: List[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


def make_request(
    headers: Optional[Dict[str, Any]] = None,
    url: str = "https://api.typeauth.com",
    method: str = "GET",
) -> httpx.Request:
    """Build an incoming request for authenticate()."""
    return httpx.Request(method, url, headers=headers or {})
