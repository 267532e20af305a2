"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from photo_album_showcase.adapters.photos_client import HttpxPhotosClient, PhotosClient
from photo_album_showcase.config import Settings


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    photos_client: PhotosClient
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    photos_client = HttpxPhotosClient.create(
        timeout=resolved_settings.timeout_seconds,
        url=resolved_settings.api_url,
    )

    async def close_resources() -> None:
        await photos_client.close()

    return AppContainer(
        settings=resolved_settings,
        photos_client=photos_client,
        close_resources=close_resources,
    )
