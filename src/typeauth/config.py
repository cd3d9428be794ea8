"""Authenticator configuration.

Defaults are applied once, when the options record is built, and the record is
frozen afterwards. Values may come from keyword arguments or from
``TYPEAUTH_*`` environment variables.

Environment Variables:
    TYPEAUTH_APP_ID: Application identifier (required unless passed explicitly)
    TYPEAUTH_BASE_URL: Verification service base URL
    TYPEAUTH_TOKEN_HEADER: Header carrying the token (default: Authorization)
    TYPEAUTH_DISABLE_TELEMETRY: "true"/"1"/"yes" to stop sending telemetry
    TYPEAUTH_MAX_RETRIES: Attempts made on transport failure (default: 3)
    TYPEAUTH_RETRY_DELAY: Delay between attempts in milliseconds (default: 1000)
    TYPEAUTH_TIMEOUT: Per-attempt HTTP timeout in seconds (default: 10.0)
"""

import logging
import os
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.typeauth.com"
DEFAULT_TOKEN_HEADER = "Authorization"
DEFAULT_MAX_RETRIES = 3
DEFAULT_RETRY_DELAY_MS = 1000
DEFAULT_TIMEOUT_SECONDS = 10.0

# Environment variable -> option field
_ENV_FIELDS: Dict[str, str] = {
    "TYPEAUTH_APP_ID": "app_id",
    "TYPEAUTH_BASE_URL": "base_url",
    "TYPEAUTH_TOKEN_HEADER": "token_header",
    "TYPEAUTH_DISABLE_TELEMETRY": "disable_telemetry",
    "TYPEAUTH_MAX_RETRIES": "max_retries",
    "TYPEAUTH_RETRY_DELAY": "retry_delay",
    "TYPEAUTH_TIMEOUT": "timeout",
}


class TypeauthOptions(BaseModel):
    """Immutable configuration for a :class:`~typeauth.Typeauth` instance.

    ``0`` is a legitimate ``retry_delay`` (retry immediately). ``max_retries``
    counts total attempts and must be at least 1.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    app_id: str = Field(..., min_length=1, description="Application identifier sent as appID")
    base_url: str = Field(DEFAULT_BASE_URL, min_length=1, description="Verification service base URL")
    token_header: str = Field(
        DEFAULT_TOKEN_HEADER, min_length=1, description="Request header carrying the token"
    )
    disable_telemetry: bool = Field(False, description="Omit request telemetry from verification calls")
    max_retries: int = Field(
        DEFAULT_MAX_RETRIES, ge=1, description="Maximum attempts on transport failure"
    )
    retry_delay: int = Field(
        DEFAULT_RETRY_DELAY_MS, ge=0, description="Flat delay between attempts in milliseconds"
    )
    timeout: float = Field(
        DEFAULT_TIMEOUT_SECONDS, gt=0, description="Per-attempt HTTP timeout in seconds"
    )

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @property
    def telemetry_enabled(self) -> bool:
        return not self.disable_telemetry

    @property
    def retry_delay_seconds(self) -> float:
        return self.retry_delay / 1000

    @classmethod
    def from_env(cls, **overrides: Any) -> "TypeauthOptions":
        """Build options from ``TYPEAUTH_*`` environment variables.

        Keyword overrides take precedence over the environment. Unset
        variables fall back to the field defaults.

        Raises:
            pydantic.ValidationError: If a value is missing or malformed
        """
        values: Dict[str, Any] = {}
        for env_key, field_name in _ENV_FIELDS.items():
            env_value = os.getenv(env_key)
            if env_value is not None and env_value != "":
                values[field_name] = env_value

        # pydantic only accepts a narrow set of bool strings
        if "disable_telemetry" in values:
            values["disable_telemetry"] = values["disable_telemetry"].strip().lower() in (
                "1",
                "true",
                "yes",
                "on",
            )

        values.update(overrides)
        logger.debug(f"Loading TypeauthOptions from environment: fields={sorted(values)}")
        return cls(**values)
