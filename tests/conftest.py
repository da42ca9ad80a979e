import pytest
from starlette.requests import Request


class RecordingSink:
    """LogSink fake that keeps every written message."""

    def __init__(self):
        self.messages: list[str] = []

    def write(self, message: str) -> None:
        self.messages.append(message)


def build_request(method: str = "GET", accept: str | None = None, path: str = "/") -> Request:
    headers = []
    if accept is not None:
        headers.append((b"accept", accept.encode()))
    scope = {
        "type": "http",
        "method": method,
        "path": path,
        "raw_path": path.encode(),
        "query_string": b"",
        "headers": headers,
        "scheme": "http",
        "server": ("testserver", 80),
        "client": ("testclient", 50000),
    }
    return Request(scope)


def raised(exc: BaseException) -> BaseException:
    """Return ``exc`` after raising it so it carries a traceback."""
    try:
        raise exc
    except BaseException as caught:
        return caught


@pytest.fixture
def make_request():
    return build_request


@pytest.fixture
def sink():
    return RecordingSink()
