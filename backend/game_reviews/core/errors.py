"""Error Hierarchy — typed exceptions for every failure mode the API reports.

Invariants:
    - Every error has a code (str) and an http_status (int)
    - to_response() produces the public envelope {"msg": <message>}
    - 5xx errors never expose internal details in the envelope

Design Decisions:
    - Single hierarchy with ReviewsApiError base: one global handler maps all of them
    - InvalidQueryError answers 404, not 400: existing clients rely on it
"""


INVALID_INPUT_MESSAGE = "Invalid input"
INVALID_QUERY_MESSAGE = "Input query not found"
ROUTE_NOT_FOUND_MESSAGE = "Path Not Found"
INTERNAL_ERROR_MESSAGE = "Internal server error"


class ReviewsApiError(Exception):
    """Base exception for all API errors."""

    def __init__(self, message: str, code: str, http_status: int = 500):
        super().__init__(message)
        self.message = message
        self.code = code
        self.http_status = http_status

    @property
    def public_message(self) -> str:
        if self.http_status >= 500:
            return INTERNAL_ERROR_MESSAGE
        return self.message

    def to_response(self) -> dict:
        """Convert to the REST error envelope."""
        return {"msg": self.public_message}


# ─── Client Errors (400/404) ────────────────────────────────────

class InvalidInputError(ReviewsApiError):
    """Malformed path parameter, body value or page/limit."""
    def __init__(self, field: str | None = None):
        super().__init__(INVALID_INPUT_MESSAGE, "INVALID_INPUT", 400)
        self.field = field


class InvalidQueryError(ReviewsApiError):
    """sort_by or order outside its allow-list."""
    def __init__(self, parameter: str | None = None):
        super().__init__(INVALID_QUERY_MESSAGE, "INVALID_QUERY", 404)
        self.parameter = parameter


class ResourceNotFoundError(ReviewsApiError):
    """Well-formed identifier with no matching row."""
    def __init__(self, table: str, value: object):
        super().__init__(
            f"input '{value}' not found in '{table}' database",
            "RESOURCE_NOT_FOUND", 404,
        )
        self.table = table
        self.value = value


class DuplicateKeyError(ReviewsApiError):
    """Unique key already taken."""
    def __init__(self, message: str):
        super().__init__(message, "DUPLICATE_KEY", 400)


class RouteNotFoundError(ReviewsApiError):
    """No route matches the request path."""
    def __init__(self):
        super().__init__(ROUTE_NOT_FOUND_MESSAGE, "ROUTE_NOT_FOUND", 404)


# ─── Infrastructure Errors (500) ────────────────────────────────

class DatabaseError(ReviewsApiError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", 500,
        )
        self.operation = operation
