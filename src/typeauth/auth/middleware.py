"""FastAPI/Starlette integration for request authentication."""

import logging
from typing import List, Optional

from fastapi import HTTPException, Request, status
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse, Response

from typeauth.authenticator import Typeauth
from typeauth.models import AuthSuccess

logger = logging.getLogger(__name__)

DEFAULT_SKIP_PATHS = ["/health", "/metrics", "/docs", "/openapi.json"]


class TypeauthMiddleware(BaseHTTPMiddleware):
    """Middleware that authenticates every request with typeauth.

    This middleware:
    1. Skips configured paths (health checks, docs)
    2. Calls Typeauth.authenticate for every other request
    3. Answers 401 with ``{"error": {"message", "docs"}}`` on failure
    4. Stores the result on request.state.typeauth on success

    Usage:
        app.add_middleware(
            TypeauthMiddleware,
            authenticator=Typeauth(app_id="my-app"),
            skip_paths=["/health"],
        )
    """

    def __init__(
        self,
        app,
        authenticator: Typeauth,
        skip_paths: Optional[List[str]] = None,
    ):
        """Initialize middleware.

        Args:
            app: FastAPI application
            authenticator: Configured Typeauth instance
            skip_paths: Paths that bypass authentication
        """
        super().__init__(app)
        self.authenticator = authenticator
        self.skip_paths = skip_paths if skip_paths is not None else list(DEFAULT_SKIP_PATHS)

    async def dispatch(self, request: Request, call_next) -> Response:
        """Authenticate the request before handing it to the route."""
        if request.url.path in self.skip_paths:
            return await call_next(request)

        result = await self.authenticator.authenticate(request)
        if not result.ok:
            logger.warning(
                f"Rejected request to {request.url.path}: {result.error.message}"
            )
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content=result.to_dict(),
                headers={"WWW-Authenticate": "Bearer"},
            )

        request.state.typeauth = result
        return await call_next(request)


def get_auth_result(request: Request) -> AuthSuccess:
    """FastAPI dependency returning the result stored by TypeauthMiddleware.

    Usage in route:
        @router.get("/items")
        async def list_items(auth: AuthSuccess = Depends(get_auth_result)):
            ...

    Raises:
        HTTPException: If the middleware did not authenticate this request
    """
    if not hasattr(request.state, "typeauth"):
        logger.error("Missing typeauth result in request state")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing authentication result (middleware not configured?)",
        )

    return request.state.typeauth
