"""Command-line entrypoint for photo-album-showcase.

Fetches photos from the Photos API and prints them as indented JSON::

    photo-album-showcase -id 1,2,5 -albumid 1
    photo-album-showcase -title 'natus nisi omnis corporis facere molestiae rerum in'
    photo-album-showcase -url https://via.placeholder.com/600/92c952
"""

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Sequence

from pydantic import ValidationError

from photo_album_showcase.adapters.photos_client import PhotosError
from photo_album_showcase.app_logging import configure_logging
from photo_album_showcase.config import parse_csv_values
from photo_album_showcase.containers import AppContainer, build_container
from photo_album_showcase.domain.photos import FilterField, Photo

USAGE = (
    "photo-album-showcase [-id ids...] [-albumid albumids...] [-title 'titles...'] "
    "[-url urls...] [-thumburl thumburls...]"
)
EXIT_ERROR = 1
EXIT_USAGE = 2

_logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="photo-album-showcase",
        usage=USAGE,
        description=(
            "Fetch photos from the Photos API, optionally filtered by IDs, "
            "album IDs, titles, URLs and/or thumbnail URLs."
        ),
        add_help=False,
        allow_abbrev=False,
    )
    for field in FilterField:
        parser.add_argument(
            f"-{field.value.flag}",
            dest=field.name.lower(),
            default="",
            metavar=field.value.flag.upper() + "S",
            help=field.value.help,
        )
    parser.add_argument(
        "-h", dest="show_help", action="store_true", help="display usage"
    )
    return parser


def filters_from_args(args: argparse.Namespace) -> dict[str, list[str]]:
    """Translate parsed flags into API filter parameters."""
    filters: dict[str, list[str]] = {}
    for field in FilterField:
        values = parse_csv_values(getattr(args, field.name.lower()))
        if values is not None:
            filters[field.value.param] = values
    return filters


def render_photos(photos: Sequence[Photo]) -> str:
    """Render photos as indented JSON using API field names."""
    return json.dumps(
        [photo.model_dump(by_alias=True) for photo in photos],
        indent=2,
        ensure_ascii=False,
    )


async def _fetch_photos(
    container: AppContainer, filters: dict[str, list[str]]
) -> list[Photo]:
    try:
        return await container.photos_client.fetch(filters)
    finally:
        await container.close_resources()


def main(
    argv: Sequence[str] | None = None, container: AppContainer | None = None
) -> int:
    """Run the CLI and return the process exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.show_help:
        parser.print_help(sys.stderr)
        return EXIT_USAGE

    try:
        resolved_container = container or build_container()
    except ValidationError as exc:
        configure_logging()
        _logger.error("invalid settings: %s", exc)
        return EXIT_USAGE
    configure_logging(resolved_container.settings.log_level)
    filters = filters_from_args(args)
    try:
        photos = asyncio.run(_fetch_photos(resolved_container, filters))
    except PhotosError as exc:
        _logger.error("%s", exc)
        return EXIT_ERROR
    print(render_photos(photos))
    return 0


if __name__ == "__main__":
    sys.exit(main())
