"""Errors raised by :class:`usersearch.services.search_client.SearchClient`.

Every failure of ``find_users`` surfaces as exactly one of these. ``kind`` is a
stable short label used for metrics and log events.
"""


class SearchClientError(Exception):
    """Base error for a failed user search."""

    kind = "error"


class InvalidRequestError(SearchClientError, ValueError):
    """Raised before any network call when the request parameters are invalid."""

    kind = "validation"


class AuthError(SearchClientError):
    """Raised when the server rejects the access token."""

    kind = "auth"

    def __init__(self) -> None:
        super().__init__("Bad AccessToken")


class FatalError(SearchClientError):
    """Raised when the search server reports an internal failure."""

    kind = "fatal"

    def __init__(self) -> None:
        super().__init__("SearchServer fatal error")


class InvalidOrderFieldError(SearchClientError):
    kind = "invalid_order_field"

    def __init__(self, order_field: str) -> None:
        self.order_field = order_field
        super().__init__(f"OrderFeld {order_field} invalid")


class UnknownBadRequestError(SearchClientError):
    kind = "unknown_bad_request"

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(f"unknown bad request error: {code}")


class UnparseableError(SearchClientError):
    """Raised when a 200 or 400 body cannot be decoded."""

    kind = "unparseable"

    def __init__(self, what: str, cause: str) -> None:
        self.cause = cause
        super().__init__(f"cant unpack {what} json: {cause}")


class SearchTimeoutError(SearchClientError, TimeoutError):
    kind = "timeout"

    def __init__(self, query: str) -> None:
        self.query = query
        super().__init__(f"timeout for {query}")


class UnknownError(SearchClientError):
    """Raised for transport failures and statuses with no dedicated handling."""

    kind = "unknown"

    def __init__(self, cause: str) -> None:
        self.cause = cause
        super().__init__(f"unknown error: {cause}")
