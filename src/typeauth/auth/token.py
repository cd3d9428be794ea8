"""Token extraction from request headers."""

from typing import Mapping, Optional

from typeauth.auth.headers import get_header
from typeauth.config import DEFAULT_TOKEN_HEADER

BEARER_PREFIX = "Bearer "


def extract_token(headers: Mapping[str, str], header_name: str = DEFAULT_TOKEN_HEADER) -> Optional[str]:
    """Return the credential carried in ``header_name``, or ``None``.

    Header lookup is case-insensitive. The ``Bearer `` prefix (case-sensitive,
    one trailing space) is stripped only when reading the default
    ``Authorization`` header; any other header is returned verbatim.

    Args:
        headers: Request headers (any mapping, including Starlette/httpx headers)
        header_name: Header carrying the token

    Returns:
        The token, or None when the header is absent or empty
    """
    token = get_header(headers, header_name)
    if not token:
        return None

    if header_name.lower() == DEFAULT_TOKEN_HEADER.lower() and token.startswith(BEARER_PREFIX):
        token = token[len(BEARER_PREFIX):]

    return token or None
