"""
Shared pytest fixtures for typeauth tests.

This module provides:
- verification_service: MockVerificationService wired to an httpx.MockTransport
- sleep_recorder: SleepRecorder replacing asyncio.sleep between retries
- make_typeauth: factory wiring both into a Typeauth instance
"""

from typing import Any

import pytest

from typeauth import Typeauth

from helpers import MOCK_APP_ID, MockVerificationService, SleepRecorder


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def verification_service():
    return MockVerificationService()


@pytest.fixture
def sleep_recorder():
    return SleepRecorder()


@pytest.fixture
def make_typeauth(verification_service, sleep_recorder):
    """
    Factory for Typeauth instances talking to the mock service.

    Usage:
        typeauth = make_typeauth(token_header="X-Api-Key")
    """

    def _make(**options: Any) -> Typeauth:
        options.setdefault("app_id", MOCK_APP_ID)
        return Typeauth(
            transport=verification_service.transport,
            sleep=sleep_recorder,
            **options,
        )

    return _make

