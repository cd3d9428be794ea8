"""Retry policy for verification calls.

Only transport-level failures are retried. The delay between attempts is
flat; there is no exponential growth.
"""

import asyncio
import logging
from typing import Awaitable, Callable, Optional

import httpx
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_fixed,
)

logger = logging.getLogger(__name__)

SleepFunc = Callable[[float], Awaitable[None]]


def create_transport_retrying(
    max_attempts: int,
    delay_seconds: float,
    sleep: Optional[SleepFunc] = None,
) -> AsyncRetrying:
    """Create an async retry controller for transport failures.

    One warning is logged before each sleep, naming the failed attempt's
    exception.

    Args:
        max_attempts: Total attempts, including the first one
        delay_seconds: Constant wait between attempts
        sleep: Awaitable sleep used between attempts (default: asyncio.sleep)

    Returns:
        An AsyncRetrying that re-raises the last transport error once
        ``max_attempts`` is reached

    Example:
        ```python
        async for attempt in create_transport_retrying(3, 1.0):
            with attempt:
                response = await client.post(url, content=body)
        ```
    """
    return AsyncRetrying(
        sleep=sleep or asyncio.sleep,
        stop=stop_after_attempt(max_attempts),
        wait=wait_fixed(delay_seconds),
        retry=retry_if_exception_type(httpx.TransportError),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )
