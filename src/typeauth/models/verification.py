"""Wire models for the verification service.

The outbound body is ``{"token", "appID", "telemetry"?}``. When telemetry is
disabled the ``telemetry`` key is left out entirely, never sent as null.
"""

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool


class TelemetryPayload(BaseModel):
    """Snapshot of the incoming request, captured when the body is built."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(..., description="Full request URL")
    method: str = Field(..., description="HTTP method")
    headers: Dict[str, str] = Field(default_factory=dict, description="All request headers")
    ipaddress: str = Field("", description="Client IP from CF-Connecting-IP, empty if absent")
    timestamp: int = Field(..., description="Capture time in epoch milliseconds")


class VerificationRequest(BaseModel):
    """Body POSTed to ``{base_url}/authenticate``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    token: str
    app_id: str = Field(..., alias="appID")
    telemetry: Optional[TelemetryPayload] = None

    def to_json(self) -> str:
        """Serialize to compact JSON, dropping ``telemetry`` when unset."""
        return self.model_dump_json(by_alias=True, exclude_none=True)


class VerificationResponse(BaseModel):
    """Verdict returned by the verification service.

    Both flags must be literal JSON ``true`` for a request to pass; missing
    flags default to ``False``.
    """

    model_config = ConfigDict(extra="ignore")

    success: StrictBool = False
    valid: StrictBool = False

    @property
    def is_authenticated(self) -> bool:
        return self.success and self.valid
