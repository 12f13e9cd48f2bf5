"""Shared fixtures for lotr-sdk tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import pytest

from lotr_sdk import ClientConfig, OneRingClient

if TYPE_CHECKING:
    from collections.abc import Callable

TEST_API_URL = "https://api.test"
EMPTY_ENVELOPE = '{"docs":[],"total":0,"limit":1000,"offset":0,"page":1,"pages":1}'


@pytest.fixture
def recorded() -> list[httpx.Request]:
    """Every request seen by clients made with ``make_client``."""
    return []


@pytest.fixture
def make_client(
    recorded: list[httpx.Request],
) -> Callable[..., OneRingClient]:
    """Factory for a client whose requests never leave the process."""

    def _make(body: str = EMPTY_ENVELOPE, status_code: int = 200) -> OneRingClient:
        def handler(request: httpx.Request) -> httpx.Response:
            recorded.append(request)
            return httpx.Response(
                status_code,
                content=body.encode("utf-8"),
                headers={"Content-Type": "application/json"},
            )

        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        config = ClientConfig(token="fake-token", api_url=TEST_API_URL)
        return OneRingClient(config, http_client=http_client)

    return _make
