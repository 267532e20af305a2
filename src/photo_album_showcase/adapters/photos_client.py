"""Photos API client."""

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

import httpx
from pydantic import TypeAdapter, ValidationError

from photo_album_showcase.domain.photos import Photo, PhotoFilters, build_query_params

PHOTOS_URL = "https://jsonplaceholder.typicode.com/photos"
DEFAULT_TIMEOUT_SECONDS = 5.0
MAX_REDIRECTS = 10

_SUPPORTED_SCHEMES = {"http", "https"}
_PHOTO_LIST = TypeAdapter(list[Photo])

_logger = logging.getLogger(__name__)


class ErrorKind(Enum):
    """Classification of Photos API failures."""

    INVALID_REQUEST = "invalid_request"
    REQUEST_FAILED = "request_failed"
    INVALID_STATUS = "invalid_status"
    DECODE_FAILED = "decode_failed"


class PhotosError(Exception):
    """Base error for Photos API calls."""

    kind: ErrorKind
    message = "photos: error"

    def __init__(self, detail: object = None) -> None:
        text = self.message if detail is None else f"{self.message}: {detail}"
        super().__init__(text)


class InvalidRequestError(PhotosError):
    """The Photos API request could not be built."""

    kind = ErrorKind.INVALID_REQUEST
    message = "photos: invalid request"


class RequestFailedError(PhotosError):
    """The Photos API request did not complete."""

    kind = ErrorKind.REQUEST_FAILED
    message = "photos: failed to perform request"


class InvalidStatusError(PhotosError):
    """The Photos API answered with a non-200 status code."""

    kind = ErrorKind.INVALID_STATUS
    message = "photos: API request failed"

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(f"status code {status_code}")


class DecodeFailedError(PhotosError):
    """The Photos API response body is not a list of photos."""

    kind = ErrorKind.DECODE_FAILED
    message = "photos: failed to decode Photos API response body"


class PhotosClient(Protocol):
    """Interface for Photos API interactions."""

    async def fetch(self, filters: PhotoFilters | None = None) -> list[Photo]:
        """Fetch photos matching the given filters."""


@dataclass
class HttpxPhotosClient(PhotosClient):
    """HTTPX-backed Photos API client.

    ``url`` may be pointed at a local server for testing; do not change it
    while requests are in flight. ``timeout`` bounds each whole call, body
    included; ``None`` leaves only the httpx per-phase timeouts.
    """

    http_client: httpx.AsyncClient
    url: str = PHOTOS_URL
    timeout: float | None = DEFAULT_TIMEOUT_SECONDS

    @classmethod
    def create(
        cls, timeout: float = DEFAULT_TIMEOUT_SECONDS, url: str = PHOTOS_URL
    ) -> "HttpxPhotosClient":
        """Create a Photos client with a managed httpx session."""
        http_client = httpx.AsyncClient(timeout=timeout, max_redirects=MAX_REDIRECTS)
        return cls(http_client=http_client, url=url, timeout=timeout)

    async def fetch(self, filters: PhotoFilters | None = None) -> list[Photo]:
        """Fetch photos, filtered by albumId, id, title, url and/or thumbnailUrl.

        Multiple values for one key match any of them; different keys must all
        match. For example ``{"id": ["1", "2", "5"], "albumId": ["1"]}``.
        Redirects are followed and the final status is checked.
        """
        request = self._build_request(filters)
        _logger.debug("Photos request: url=%s", request.url)
        try:
            async with asyncio.timeout(self.timeout):
                response = await self.http_client.send(request, follow_redirects=True)
        except httpx.RequestError as exc:
            raise RequestFailedError(exc) from exc
        except TimeoutError as exc:
            raise RequestFailedError(f"timed out after {self.timeout}s") from exc
        if response.status_code != httpx.codes.OK:
            raise InvalidStatusError(response.status_code)
        try:
            photos = _PHOTO_LIST.validate_json(response.content)
        except ValidationError as exc:
            raise DecodeFailedError(exc) from exc
        _logger.debug("Photos response: photos=%s", len(photos))
        return photos

    def _build_request(self, filters: PhotoFilters | None) -> httpx.Request:
        """Build the GET request with one query parameter per filter value."""
        params = build_query_params(filters)
        try:
            request = self.http_client.build_request(
                "GET", self.url, params=params or None
            )
        except (httpx.InvalidURL, TypeError) as exc:
            raise InvalidRequestError(exc) from exc
        if request.url.scheme not in _SUPPORTED_SCHEMES or not request.url.host:
            raise InvalidRequestError(f"unsupported URL {self.url!r}")
        return request

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
