"""
OneRingClient — async client for the One API.

Every listing method takes any number of filters, merges them, and sends
the serialized query verbatim::

    async with OneRingClient("my-token") as client:
        movies, status = await client.movies(
            binary_filter("budgetInMillions", Operator.LESS_THAN, 100),
            sort("name"),
        )

Filter errors are raised unchanged before any request is made; transport
problems are raised as ``ClientError`` subclasses.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, TypeVar

import httpx
from pydantic import ValidationError as PydanticValidationError

from .config import ClientConfig
from .exceptions import APIRequestError, APIResponseError, APIStatusError
from .models import Book, Chapter, Character, Document, Envelope, Movie, Quote
from .query import generate_raw_query, merge_filters

if TYPE_CHECKING:
    from types import TracebackType

    from .models import Status
    from .query import Filter

logger = logging.getLogger(__name__)

D = TypeVar("D", bound=Document)


class OneRingClient:
    """
    Read-only client for books, movies, characters, quotes and chapters.

    Parameters
    ----------
    config:
        A ``ClientConfig`` or just the API token.
    http_client:
        Optional ``httpx.AsyncClient`` to send requests with. A borrowed
        client is left open by ``aclose()``; one created here is closed.
    """

    def __init__(
        self,
        config: ClientConfig | str,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.config = ClientConfig(token=config) if isinstance(config, str) else config
        self._owns_http_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=self.config.timeout)

    async def __aenter__(self) -> OneRingClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http_client:
            await self._http.aclose()

    # -- resources -------------------------------------------------------------

    async def books(self, *filters: Filter) -> tuple[list[Book], Status]:
        return await self._list("/book", Book, filters)

    async def chapters_from_book(
        self, book: Book, *filters: Filter
    ) -> tuple[list[Chapter], Status]:
        return await self._list(f"/book/{book.id}/chapter", Chapter, filters)

    async def movies(self, *filters: Filter) -> tuple[list[Movie], Status]:
        return await self._list("/movie", Movie, filters)

    async def quotes_from_movie(
        self, movie: Movie, *filters: Filter
    ) -> tuple[list[Quote], Status]:
        return await self._list(f"/movie/{movie.id}/quote", Quote, filters)

    async def characters(self, *filters: Filter) -> tuple[list[Character], Status]:
        return await self._list("/character", Character, filters)

    async def quotes_from_character(
        self, character: Character, *filters: Filter
    ) -> tuple[list[Quote], Status]:
        return await self._list(f"/character/{character.id}/quote", Quote, filters)

    async def quotes(self, *filters: Filter) -> tuple[list[Quote], Status]:
        return await self._list("/quote", Quote, filters)

    async def chapters(self, *filters: Filter) -> tuple[list[Chapter], Status]:
        return await self._list("/chapter", Chapter, filters)

    # -- internals -------------------------------------------------------------

    def build_url(self, endpoint: str, filters: tuple[Filter, ...] = ()) -> str:
        """Return the full request URL, without "?" when there are no filters."""
        raw_query = generate_raw_query(merge_filters(*filters))
        url = f"{self.config.api_url}{endpoint}"
        return f"{url}?{raw_query}" if raw_query else url

    async def _request(self, endpoint: str, filters: tuple[Filter, ...]) -> bytes:
        url = self.build_url(endpoint, filters)
        headers = {
            "Authorization": f"Bearer {self.config.token}",
            "Accept": "application/json",
            "User-Agent": self.config.user_agent,
        }

        logger.debug("GET %s", url)
        start = time.perf_counter()
        try:
            response = await self._http.get(url, headers=headers)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.error("Request to %s failed: %s", url, exc)
            raise APIRequestError(url, str(exc)) from exc

        elapsed = (time.perf_counter() - start) * 1000
        logger.debug("GET %s -> %s in %.2fms", url, response.status_code, elapsed)

        if response.is_error:
            message = _error_message(response)
            logger.error(
                "Request to %s returned HTTP %s: %s", url, response.status_code, message
            )
            raise APIStatusError(url, response.status_code, message)

        return response.content

    async def _list(
        self,
        endpoint: str,
        model: type[D],
        filters: tuple[Filter, ...],
    ) -> tuple[list[D], Status]:
        body = await self._request(endpoint, filters)
        try:
            envelope = Envelope[model].model_validate_json(body)  # type: ignore[valid-type]
        except PydanticValidationError as exc:
            logger.error("Could not decode %s response: %s", endpoint, exc)
            raise APIResponseError(
                f"failed to decode {model.__name__} documents from {endpoint}"
            ) from exc
        return list(envelope.docs), envelope.status


def _error_message(response: httpx.Response) -> str | None:
    """Pull ``message`` out of an API error body, if there is one."""
    try:
        payload = response.json()
    except ValueError:
        return response.text or None
    if isinstance(payload, dict) and payload.get("message"):
        return str(payload["message"])
    return response.text or None
