from typing import Iterator, List

from usersearch.schemas import SearchRequest, SearchResponse, User


def detect_next_page(users: List[User], limit: int) -> SearchResponse:
    # The server was asked for limit + 1 rows; the extra row only signals
    # that another page exists and is not returned.
    if len(users) == limit + 1:
        return SearchResponse(users=users[:limit], next_page=True)
    return SearchResponse(users=users, next_page=False)


def iter_users(client, request: SearchRequest) -> Iterator[User]:
    """Yield users from every page, starting at ``request.offset``.

    Each page is fetched with a separate ``find_users`` call; errors are not
    caught.
    """
    offset = request.offset
    while True:
        page = client.find_users(request.model_copy(update={"offset": offset}))
        yield from page.users
        if not page.next_page or not page.users:
            return
        offset += len(page.users)
