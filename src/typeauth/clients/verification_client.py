"""HTTP client for the typeauth verification endpoint."""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from typeauth.clients.base import BaseServiceClient
from typeauth.exceptions import DispatchError, ServiceRejectionError, TransportFailureError
from typeauth.models import VerificationRequest, VerificationResponse
from typeauth.utils.resilience import SleepFunc, create_transport_retrying

logger = logging.getLogger(__name__)


class VerificationClient(BaseServiceClient):
    """POSTs verification requests to ``{base_url}/authenticate``.

    Transport failures (connection errors, DNS failures, timeouts) are retried
    up to ``max_retries`` attempts with a constant ``retry_delay`` between
    them. Any HTTP response ends the loop: a non-2xx status is the service's
    answer and is never retried.

    Usage:
        client = VerificationClient(base_url="https://api.typeauth.com")
        verdict = await client.verify(VerificationRequest(token="...", app_id="..."))
    """

    def __init__(
        self,
        base_url: str,
        max_retries: int = 3,
        retry_delay: float = 1.0,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        sleep: Optional[SleepFunc] = None,
    ):
        """Initialize client.

        Args:
            base_url: Verification service base URL
            max_retries: Total attempts on transport failure
            retry_delay: Delay between attempts in seconds
            timeout: Per-attempt request timeout in seconds
            transport: Optional httpx transport
            sleep: Awaitable sleep used between attempts (default: asyncio.sleep)
        """
        super().__init__(base_url=base_url, timeout=timeout, transport=transport)
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self._sleep = sleep

    @property
    def url(self) -> str:
        return f"{self.base_url}/authenticate"

    async def verify(self, body: VerificationRequest) -> VerificationResponse:
        """Send ``body`` to the verification service and return its verdict.

        Args:
            body: Verification request body, sent verbatim on every attempt

        Returns:
            Parsed verdict from a 2xx response

        Raises:
            TransportFailureError: If every attempt failed at the transport layer
            ServiceRejectionError: On a non-2xx status, an undecodable or
                unparsable body, or any other non-transport httpx error
            DispatchError: If the retry loop ends without an outcome
        """
        content = body.to_json()
        retrying = create_transport_retrying(
            max_attempts=self.max_retries,
            delay_seconds=self.retry_delay,
            sleep=self._sleep,
        )

        async with self._get_client() as client:
            try:
                async for attempt in retrying:
                    with attempt:
                        response = await client.post(
                            self.url, content=content, headers=self._headers()
                        )
                    # Failed attempts are recorded on the retry state, not raised here
                    if not attempt.retry_state.outcome.failed:
                        return self._parse_response(response)
            except httpx.TransportError as e:
                logger.error(
                    f"Verification request to {self.url} failed after "
                    f"{self.max_retries} attempts: {e!r}"
                )
                raise TransportFailureError(
                    "typeauth API request failed after multiple retries",
                    attempts=self.max_retries,
                    last_error=e,
                ) from e
            except httpx.DecodingError as e:
                logger.warning(f"Verification response body could not be decoded: {e}")
                raise ServiceRejectionError(
                    "typeauth API returned an invalid response body"
                ) from e
            except httpx.HTTPError as e:
                logger.warning(f"Verification request to {self.url} failed: {e!r}")
                raise ServiceRejectionError(
                    f"typeauth API request failed: {e.__class__.__name__}"
                ) from e

        raise DispatchError("Unexpected error occurred")

    def _parse_response(self, response: httpx.Response) -> VerificationResponse:
        if not response.is_success:
            logger.warning(
                f"Verification service rejected request: status={response.status_code}"
            )
            raise ServiceRejectionError(
                f"typeauth API request failed with status: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            logger.warning(f"Verification service returned a non-JSON body: {e}")
            raise ServiceRejectionError(
                "typeauth API returned an invalid response body",
                status_code=response.status_code,
            ) from e

        try:
            verdict = VerificationResponse.model_validate(data)
        except ValidationError:
            # Anything other than boolean flags is a negative verdict
            logger.warning("Verification response has malformed success/valid flags")
            verdict = VerificationResponse()

        logger.debug(
            f"Verification response: status={response.status_code}, "
            f"success={verdict.success}, valid={verdict.valid}"
        )
        return verdict
