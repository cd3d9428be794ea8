"""Case-insensitive access to incoming request headers.

Values are read as given. Starlette decodes header bytes as latin-1, so they
must not be re-encoded as ASCII on the way through.
"""

from typing import Dict, Mapping, Optional


def get_header(headers: Mapping[str, str], name: str) -> Optional[str]:
    """Return the first value of header ``name``, ignoring case."""
    name = name.lower()
    for key, value in headers.items():
        if key.lower() == name:
            return value
    return None


def flatten_headers(headers: Mapping[str, str]) -> Dict[str, str]:
    """Lowercase header names and join repeated headers with ``", "``."""
    flat: Dict[str, str] = {}
    for key, value in headers.items():
        key = key.lower()
        if key in flat:
            flat[key] = f"{flat[key]}, {value}"
        else:
            flat[key] = value
    return flat
