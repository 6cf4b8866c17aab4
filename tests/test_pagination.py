import httpx
import pytest

from usersearch.errors import FatalError
from usersearch.schemas import SearchRequest, User
from usersearch.services.pagination import detect_next_page, iter_users
from usersearch.services.search_client import SearchClient


def _users(n, start=0):
    return [User(id=i) for i in range(start, start + n)]


def test_extra_row_means_next_page():
    resp = detect_next_page(_users(26), 25)

    assert resp.next_page is True
    assert [u.id for u in resp.users] == list(range(25))


def test_short_page_is_returned_unchanged():
    users = _users(7)
    resp = detect_next_page(users, 25)

    assert resp.next_page is False
    assert resp.users == users


def test_zero_limit_with_one_row_has_next_page():
    resp = detect_next_page(_users(1), 0)

    assert resp.next_page is True
    assert resp.users == []


class _PagedServer:
    """Serves ``total`` users honoring limit/offset like the real service."""

    def __init__(self, total):
        self.total = total
        self.offsets = []

    def __call__(self, request):
        limit = int(request.url.params["limit"])
        offset = int(request.url.params["offset"])
        self.offsets.append(offset)
        rows = [{"Id": i} for i in range(offset, min(offset + limit, self.total))]
        return httpx.Response(200, json=rows)


def test_iter_users_walks_every_page():
    server = _PagedServer(total=60)
    client = SearchClient("token", "http://search.local/", transport=httpx.MockTransport(server))

    ids = [u.id for u in iter_users(client, SearchRequest(limit=25))]

    assert ids == list(range(60))
    assert server.offsets == [0, 25, 50]


def test_iter_users_starts_at_request_offset():
    server = _PagedServer(total=12)
    client = SearchClient("token", "http://search.local/", transport=httpx.MockTransport(server))

    ids = [u.id for u in iter_users(client, SearchRequest(limit=5, offset=4))]

    assert ids == list(range(4, 12))
    assert server.offsets == [4, 9]


def test_iter_users_propagates_errors():
    client = SearchClient(
        "token",
        "http://search.local/",
        transport=httpx.MockTransport(lambda request: httpx.Response(500)),
    )

    with pytest.raises(FatalError):
        list(iter_users(client, SearchRequest(limit=5)))
