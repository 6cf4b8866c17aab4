"""HTTP client for the user search service.

``SearchClient.find_users`` sends one GET request and turns the reply into a
:class:`SearchResponse` or raises one of the errors in :mod:`usersearch.errors`.
Nothing is retried.
"""

import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, NamedTuple, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from usersearch import config
from usersearch.errors import (
    AuthError,
    FatalError,
    InvalidOrderFieldError,
    InvalidRequestError,
    SearchClientError,
    SearchTimeoutError,
    UnknownBadRequestError,
    UnknownError,
    UnparseableError,
)
from usersearch.logging import get_logger
from usersearch.metrics import search_latency, search_requests, search_users_returned
from usersearch.schemas import SearchErrorPayload, SearchRequest, SearchResponse, User
from usersearch.services.pagination import detect_next_page

log = get_logger(__name__)

ERROR_BAD_ORDER_FIELD = "ErrorBadOrderField"
UNEXPECTED_EOF = "unexpected end of JSON input"

_users_adapter = TypeAdapter(Optional[List[User]])
_error_adapter = TypeAdapter(SearchErrorPayload)


class StatusClass(Enum):
    UNAUTHORIZED = "unauthorized"
    SERVER_FAULT = "server_fault"
    BAD_REQUEST = "bad_request"
    OK = "ok"
    OTHER = "other"

    @classmethod
    def of(cls, status_code: int) -> "StatusClass":
        if status_code == 401:
            return cls.UNAUTHORIZED
        if 500 <= status_code < 600:
            return cls.SERVER_FAULT
        if status_code == 400:
            return cls.BAD_REQUEST
        if status_code == 200:
            return cls.OK
        return cls.OTHER


class Decoded(NamedTuple):
    value: Any
    cause: Optional[str]


def decode_json(adapter: TypeAdapter, body: bytes) -> Decoded:
    """Decode ``body`` with ``adapter`` without raising.

    Empty and truncated documents report ``unexpected end of JSON input``.
    """
    if not body.strip():
        return Decoded(None, UNEXPECTED_EOF)
    try:
        return Decoded(adapter.validate_json(body), None)
    except ValidationError as exc:
        msg = exc.errors()[0]["msg"]
        if "EOF while parsing" in msg:
            return Decoded(None, UNEXPECTED_EOF)
        return Decoded(None, msg)


def validate_request(req: SearchRequest) -> None:
    if req.limit < 0:
        raise InvalidRequestError("limit must be > 0")
    if req.offset < 0:
        raise InvalidRequestError("offset must be > 0")


@dataclass(frozen=True)
class SearchClient:
    access_token: str
    url: str
    timeout: float = config.DEFAULT_TIMEOUT_SECONDS
    max_limit: int = config.MAX_LIMIT
    transport: Optional[httpx.BaseTransport] = None

    @classmethod
    def from_env(cls) -> "SearchClient":
        if not config.SEARCH_SERVICE_URL:
            raise RuntimeError("SEARCH_SERVICE_URL must be set")
        return cls(
            access_token=config.SEARCH_ACCESS_TOKEN,
            url=config.SEARCH_SERVICE_URL,
            timeout=config.SEARCH_TIMEOUT_SECONDS,
        )

    def find_users(self, req: SearchRequest) -> SearchResponse:
        started = time.perf_counter()
        try:
            validate_request(req)
            limit = min(req.limit, self.max_limit)
            params = {
                "limit": limit + 1,
                "offset": req.offset,
                "order_by": req.order_by,
                "order_field": req.order_field,
                "query": req.query,
            }
            log.debug("search_request", url=self.url, **params)
            result = self._fetch(req, params, limit)
        except SearchClientError as exc:
            search_requests.labels(outcome=exc.kind).inc()
            log.debug("search_failed", kind=exc.kind, error=str(exc))
            raise
        finally:
            search_latency.observe(time.perf_counter() - started)

        search_requests.labels(outcome="ok").inc()
        search_users_returned.observe(len(result.users))
        log.debug("search_response", users=len(result.users), next_page=result.next_page)
        return result

    def _fetch(self, req: SearchRequest, params: dict, limit: int) -> SearchResponse:
        headers = {"AccessToken": self.access_token}
        with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
            try:
                request = client.build_request("GET", self.url, params=params, headers=headers)
            except httpx.InvalidURL as exc:
                raise UnknownError(str(exc)) from exc
            query = request.url.query.decode("ascii")

            try:
                response = client.send(request, stream=True)
            except httpx.TimeoutException as exc:
                raise SearchTimeoutError(query) from exc
            except httpx.HTTPError as exc:
                raise UnknownError(str(exc)) from exc

            try:
                return self._classify(response, req, limit, query)
            finally:
                response.close()

    def _classify(self, response: httpx.Response, req: SearchRequest, limit: int, query: str) -> SearchResponse:
        match StatusClass.of(response.status_code):
            case StatusClass.UNAUTHORIZED:
                raise AuthError()
            case StatusClass.SERVER_FAULT:
                raise FatalError()
            case StatusClass.BAD_REQUEST:
                payload, cause = decode_json(_error_adapter, _read_body(response, query))
                if cause is not None:
                    raise UnparseableError("error", cause)
                if payload.error == ERROR_BAD_ORDER_FIELD:
                    raise InvalidOrderFieldError(req.order_field)
                raise UnknownBadRequestError(payload.error)
            case StatusClass.OK:
                users, cause = decode_json(_users_adapter, _read_body(response, query))
                if cause is not None:
                    raise UnparseableError("result", cause)
                return detect_next_page(users or [], limit)
            case _:
                raise UnknownError(f"unexpected status code {response.status_code}")


def _read_body(response: httpx.Response, query: str) -> bytes:
    try:
        return response.read()
    except httpx.TimeoutException as exc:
        raise SearchTimeoutError(query) from exc
    except httpx.HTTPError as exc:
        raise UnknownError(str(exc)) from exc
