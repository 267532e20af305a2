"""Photo records and catalog filters."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

PhotoFilters = Mapping[str, Sequence[str]]


class Photo(BaseModel):
    """Details about a photo retrieved from the Photos API."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, strict=True)

    album_id: int = Field(alias="albumId")
    id: int
    title: str
    url: str
    thumbnail_url: str = Field(alias="thumbnailUrl")


@dataclass(frozen=True)
class FilterOption:
    """Query parameter and command-line flag for a filterable field."""

    param: str
    flag: str
    help: str


class FilterField(Enum):
    """Filterable photo fields (single source of truth for CLI and queries)."""

    ID = FilterOption("id", "id", "filter photos by ID(s), comma-separated")
    ALBUM_ID = FilterOption(
        "albumId", "albumid", "filter photos by album ID(s), comma-separated"
    )
    TITLE = FilterOption(
        "title",
        "title",
        "filter photos by title(s), comma-separated, use single quotes for "
        "titles with spaces (e.g., -title 'title 1','title 2')",
    )
    URL = FilterOption("url", "url", "filter photos by URL(s), comma-separated")
    THUMBNAIL_URL = FilterOption(
        "thumbnailUrl",
        "thumburl",
        "filter photos by thumbnail URL(s), comma-separated",
    )


def build_query_params(filters: PhotoFilters | None) -> list[tuple[str, str]]:
    """Flatten filters into repeated query parameters.

    Each value under a key becomes its own ``key=value`` pair, so the API ORs
    values within a field and ANDs across fields. Keys are not validated.
    """
    if not filters:
        return []
    return [(key, value) for key, values in filters.items() for value in values]
