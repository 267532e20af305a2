"""Tests for container wiring."""

import asyncio

import httpx

from photo_album_showcase.adapters.photos_client import HttpxPhotosClient
from photo_album_showcase.config import Settings
from photo_album_showcase.containers import build_container


def test_build_container_creates_photos_client() -> None:
    settings = Settings(api_url="http://catalog.test/photos", timeout_seconds=2.5)

    container = build_container(settings)

    client = container.photos_client
    assert isinstance(client, HttpxPhotosClient)
    assert client.url == "http://catalog.test/photos"
    assert client.http_client.timeout == httpx.Timeout(2.5)

    asyncio.run(container.close_resources())
    assert client.http_client.is_closed
