"""Request telemetry captured alongside verification calls."""

import time

from typeauth.auth.headers import flatten_headers
from typeauth.models import IncomingRequest, TelemetryPayload

# Set by Cloudflare to the original client address
CLIENT_IP_HEADER = "CF-Connecting-IP"


def build_telemetry(request: IncomingRequest) -> TelemetryPayload:
    """Snapshot ``request`` for the verification service.

    Header names are lowercased; repeated headers are joined with ``", "``.
    The timestamp is taken now, not when the request arrived.
    """
    headers = flatten_headers(request.headers)
    return TelemetryPayload(
        url=str(request.url),
        method=request.method,
        headers=headers,
        ipaddress=headers.get(CLIENT_IP_HEADER.lower(), ""),
        timestamp=int(time.time() * 1000),
    )
