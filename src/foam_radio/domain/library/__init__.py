"""Library domain - song records and the read-only catalog."""

from .catalog import ALL_GENRES, Catalog, format_duration, load_catalog
from .models import SharePayload, Song
from .sample_songs import SAMPLE_SONGS
from .schemas import SongRecord

__all__ = [
    "ALL_GENRES",
    "Catalog",
    "SAMPLE_SONGS",
    "SharePayload",
    "Song",
    "SongRecord",
    "format_duration",
    "load_catalog",
]
