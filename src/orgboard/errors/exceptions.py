"""Exception taxonomy for the OrgBoard API."""


class OrgBoardError(Exception):
    """Base exception. Carries the HTTP status its handler responds with."""

    def __init__(self, code: str, message: str, status_code: int = 500):
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class BadRequestError(OrgBoardError):
    """Malformed or missing input, or a business-rule violation by the caller."""

    def __init__(self, message: str):
        super().__init__("BAD_REQUEST", message, status_code=400)


class AuthenticationError(OrgBoardError):
    """Missing, invalid or expired token, or bad credentials."""

    def __init__(self, message: str = "Token is not valid"):
        super().__init__("UNAUTHORIZED", message, status_code=401)


class AuthorizationError(OrgBoardError):
    """Authenticated, but not allowed to touch the resource."""

    def __init__(self, message: str = "Access Denied"):
        super().__init__("FORBIDDEN", message, status_code=403)


class NotFoundError(OrgBoardError):
    """Resource absent, or owned by another organization.

    The two cases share one message so callers cannot probe other tenants.
    """

    def __init__(self, message: str = "Resource not found"):
        super().__init__("NOT_FOUND", message, status_code=404)


class ConflictError(OrgBoardError):
    """Resource state conflict, e.g. an email that is already registered."""

    def __init__(self, message: str):
        super().__init__("CONFLICT", message, status_code=409)


class ServerError(OrgBoardError):
    """Unexpected persistence or runtime failure."""

    def __init__(self, message: str = "Server Error"):
        super().__init__("SERVER_ERROR", message, status_code=500)
