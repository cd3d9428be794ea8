"""Token extraction, telemetry capture and framework integration.

The middleware imports FastAPI, so it is loaded lazily.
"""

from typeauth.auth.telemetry import CLIENT_IP_HEADER, build_telemetry
from typeauth.auth.token import BEARER_PREFIX, extract_token


def __getattr__(name):
    """Lazy import for the FastAPI middleware."""
    if name in ("TypeauthMiddleware", "get_auth_result"):
        from typeauth.auth.middleware import TypeauthMiddleware, get_auth_result
        return {"TypeauthMiddleware": TypeauthMiddleware, "get_auth_result": get_auth_result}[name]
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


__all__ = [
    "BEARER_PREFIX",
    "CLIENT_IP_HEADER",
    "build_telemetry",
    "extract_token",
    # Lazy loaded
    "TypeauthMiddleware",
    "get_auth_result",
]
