import socket
import sys
import threading
import time
from pathlib import Path

import pytest
import uvicorn

_ROOT_DIR = Path(__file__).resolve().parents[1]
if str(_ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(_ROOT_DIR))

from tests import search_server  # noqa: E402
from usersearch.logging import configure_logging  # noqa: E402
from usersearch.services.search_client import SearchClient  # noqa: E402

configure_logging(level="DEBUG", json_output=True)


@pytest.fixture(scope="session")
def search_server_url():
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    sock.bind(("127.0.0.1", 0))
    host, port = sock.getsockname()

    server = uvicorn.Server(uvicorn.Config(search_server.app, log_level="warning", lifespan="off"))
    thread = threading.Thread(target=server.run, kwargs={"sockets": [sock]}, daemon=True)
    thread.start()

    deadline = time.monotonic() + 10
    while not server.started:
        if time.monotonic() > deadline:
            raise RuntimeError("fake search server did not start")
        time.sleep(0.01)

    yield f"http://{host}:{port}/"

    server.should_exit = True
    thread.join(timeout=10)
    sock.close()


@pytest.fixture()
def last_query():
    search_server.app.state.last_query = None
    return lambda: search_server.app.state.last_query


@pytest.fixture()
def client(search_server_url):
    return SearchClient(search_server.SUCCESS_ACCESS_TOKEN, search_server_url)
