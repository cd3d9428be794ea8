"""Read-only view of the incoming HTTP request."""

from typing import Any, Mapping

from typing_extensions import Protocol, runtime_checkable


@runtime_checkable
class IncomingRequest(Protocol):
    """Anything exposing ``method``, ``url`` and ``headers``.

    ``starlette.requests.Request`` and ``httpx.Request`` both satisfy it.
    ``url`` may be a string or a URL object; it is rendered with ``str()``.
    """

    @property
    def method(self) -> str: ...

    @property
    def url(self) -> Any: ...

    @property
    def headers(self) -> Mapping[str, str]: ...
