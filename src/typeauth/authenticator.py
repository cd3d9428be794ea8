"""Request authentication against the typeauth verification service."""

import logging
from typing import Any, Optional

import httpx

from typeauth.auth.telemetry import build_telemetry
from typeauth.auth.token import extract_token
from typeauth.clients import VerificationClient
from typeauth.config import TypeauthOptions
from typeauth.exceptions import DispatchError, ServiceRejectionError, TransportFailureError
from typeauth.models import AuthErrorKind, AuthResult, AuthSuccess, IncomingRequest, VerificationRequest
from typeauth.models.result import authentication_error, missing_token
from typeauth.utils.resilience import SleepFunc

logger = logging.getLogger(__name__)


class Typeauth:
    """Authenticates incoming requests by asking the typeauth service.

    Nothing is verified locally: the token is forwarded to
    ``{base_url}/authenticate`` and the service's verdict is returned as an
    :data:`~typeauth.models.AuthResult`. ``authenticate`` does not raise for
    missing tokens, network failures, rejections or negative verdicts.

    Usage:
        typeauth = Typeauth(app_id="my-app")

        result = await typeauth.authenticate(request)
        if not result.ok:
            return JSONResponse(result.to_dict(), status_code=401)
    """

    def __init__(
        self,
        options: Optional[TypeauthOptions] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        sleep: Optional[SleepFunc] = None,
        **option_kwargs: Any,
    ):
        """Initialize authenticator.

        Args:
            options: Prebuilt options; mutually exclusive with option keywords
            transport: Optional httpx transport for the verification client
            sleep: Awaitable sleep used between retry attempts
            **option_kwargs: Fields of TypeauthOptions (app_id, base_url, ...)

        Raises:
            pydantic.ValidationError: If the configuration is invalid
            TypeError: If both options and option keywords are given
        """
        if options is None:
            options = TypeauthOptions(**option_kwargs)
        elif option_kwargs:
            raise TypeError("Pass either options or option keywords, not both")

        self.options = options
        self._client = VerificationClient(
            base_url=options.base_url,
            max_retries=options.max_retries,
            retry_delay=options.retry_delay_seconds,
            timeout=options.timeout,
            transport=transport,
            sleep=sleep,
        )

        logger.info(
            f"Initialized Typeauth: app_id={options.app_id}, base_url={options.base_url}, "
            f"token_header={options.token_header}, telemetry={options.telemetry_enabled}"
        )

    async def authenticate(self, request: IncomingRequest) -> AuthResult:
        """Authenticate ``request``.

        Args:
            request: Incoming request (Starlette, httpx or any object with
                method, url and headers)

        Returns:
            AuthSuccess when the service reports the token as valid,
            AuthFailure otherwise
        """
        token = extract_token(request.headers, self.options.token_header)
        if token is None:
            logger.info(f"Missing token in {self.options.token_header} header")
            return missing_token()

        body = VerificationRequest(
            token=token,
            app_id=self.options.app_id,
            telemetry=build_telemetry(request) if self.options.telemetry_enabled else None,
        )

        try:
            verdict = await self._client.verify(body)
        except TransportFailureError as e:
            return authentication_error(e.message, AuthErrorKind.TRANSPORT_FAILURE)
        except ServiceRejectionError as e:
            return authentication_error(e.message, AuthErrorKind.SERVICE_REJECTION)
        except DispatchError as e:
            logger.error(f"Verification dispatch ended unexpectedly: {e.message}")
            return authentication_error(e.message, AuthErrorKind.TRANSPORT_FAILURE)

        if not verdict.is_authenticated:
            logger.warning(
                f"Token rejected by verification service: "
                f"success={verdict.success}, valid={verdict.valid}"
            )
            return authentication_error(
                "Typeauth authentication failed", AuthErrorKind.INVALID_VERDICT
            )

        return AuthSuccess()
