"""Shared test fixtures."""

import json
import logging
from collections.abc import Callable
from pathlib import Path

import httpx
import pytest
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from photo_album_showcase.adapters.photos_client import HttpxPhotosClient
from photo_album_showcase.domain.photos import FilterField

CATALOG_URL = "http://catalog.test/photos"
DATA_DIR = Path(__file__).parent / "data"

_FILTER_PARAMS = {field.value.param for field in FilterField}


def load_photo_records() -> list[dict[str, object]]:
    """Load the fixture photo collection as raw API records."""
    with (DATA_DIR / "photos.json").open(encoding="utf-8") as handle:
        return json.load(handle)


def create_catalog_app(records: list[dict[str, object]]) -> FastAPI:
    """Fake Photos API: ORs values within a field, ANDs across fields."""
    app = FastAPI()

    @app.get("/photos")
    async def list_photos(request: Request) -> JSONResponse:
        filters: dict[str, set[str]] = {}
        for key, value in request.query_params.multi_items():
            if key in _FILTER_PARAMS:
                filters.setdefault(key, set()).add(value)
        matches = [
            record
            for record in records
            if all(str(record[key]) in values for key, values in filters.items())
        ]
        return JSONResponse(matches)

    return app


def mock_photos_client(
    handler: Callable[[httpx.Request], object], url: str = CATALOG_URL
) -> HttpxPhotosClient:
    """Build a client whose transport is answered by ``handler``."""
    async_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return HttpxPhotosClient(http_client=async_client, url=url)


@pytest.fixture(autouse=True)
def reset_app_logger():
    logger = logging.getLogger("photo_album_showcase")
    logger.handlers.clear()
    logger.propagate = True
    yield
    logger.handlers.clear()
    logger.propagate = True


@pytest.fixture
def photo_records() -> list[dict[str, object]]:
    return load_photo_records()


@pytest.fixture
def catalog_client(photo_records) -> HttpxPhotosClient:
    transport = httpx.ASGITransport(app=create_catalog_app(photo_records))
    return HttpxPhotosClient(
        http_client=httpx.AsyncClient(transport=transport), url=CATALOG_URL
    )
