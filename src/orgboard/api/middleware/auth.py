"""Bearer token authentication middleware.

Decodes the token once per request and records the outcome on
``request.state``. Enforcement happens in the ``get_current_user`` dependency
so public routes need no allow-list here.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from orgboard.logging_config import bind_request_context
from orgboard.security import decode_access_token

NO_TOKEN = "No token, authorization denied"
INVALID_TOKEN = "Token is not valid"


class AuthMiddleware(BaseHTTPMiddleware):
    """Attach the verified AuthContext (or the reason there is none) to request.state."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request.state.auth = None
        request.state.auth_error = None

        auth_header = request.headers.get("authorization")
        if not auth_header:
            request.state.auth_error = NO_TOKEN
        else:
            scheme, _, token = auth_header.partition(" ")
            if scheme.lower() != "bearer" or not token.strip():
                request.state.auth_error = INVALID_TOKEN
            else:
                try:
                    request.state.auth = decode_access_token(token.strip())
                except ValueError:
                    request.state.auth_error = INVALID_TOKEN

        if request.state.auth is not None:
            bind_request_context(
                request.state.trace_id,
                user_id=request.state.auth.id,
                org_id=request.state.auth.org_id,
            )
        return await call_next(request)
