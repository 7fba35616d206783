"""Shared test fixtures."""

from unittest.mock import AsyncMock, patch

import httpx
import pytest

from vyos_api.client import Vyos

BASE_URL = "https://192.0.2.1"
API_KEY = "test-key"


@pytest.fixture
def vyos() -> Vyos:
    return Vyos(BASE_URL, API_KEY)


@pytest.fixture
def mock_send(vyos):
    """Replace Vyos.send so facades can be tested without HTTP."""
    with patch.object(vyos, "send", new=AsyncMock(return_value=None)) as send:
        yield send


@pytest.fixture
def mock_transport():
    """Route Vyos HTTP traffic through an httpx.MockTransport.

    Returns a factory taking a handler ``(httpx.Request) -> httpx.Response``;
    every request seen is appended to the returned list.
    """
    real_client_cls = httpx.AsyncClient
    patches = []

    def _install(handler):
        seen: list[httpx.Request] = []

        def _recording(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return handler(request)

        transport = httpx.MockTransport(_recording)
        p = patch(
            "vyos_api.client.httpx.AsyncClient",
            side_effect=lambda **kwargs: real_client_cls(transport=transport),
        )
        p.start()
        patches.append(p)
        return seen

    yield _install
    for p in patches:
        p.stop()
