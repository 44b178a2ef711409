"""
Song catalog: read-only, ordered list of songs loaded once at startup.
"""

import json
from pathlib import Path
from typing import Iterable, Iterator, Optional

from loguru import logger
from pydantic import ValidationError

from foam_radio.core.errors import CatalogError

from .models import SharePayload, Song
from .sample_songs import SAMPLE_SONGS
from .schemas import SongRecord

ALL_GENRES = "All"


class Catalog:
    """Immutable ordered collection of songs with lookup by id."""

    def __init__(self, songs: Iterable[Song], site_name: str = "SprayFoamRadio.com"):
        self._songs: tuple[Song, ...] = tuple(songs)
        self._by_id: dict[str, Song] = {}
        for song in self._songs:
            if song.id in self._by_id:
                raise CatalogError(f"Duplicate song id: {song.id}")
            self._by_id[song.id] = song
        self.site_name = site_name

    def __len__(self) -> int:
        return len(self._songs)

    def __iter__(self) -> Iterator[Song]:
        return iter(self._songs)

    def __contains__(self, song_id: object) -> bool:
        return song_id in self._by_id

    @property
    def songs(self) -> tuple[Song, ...]:
        return self._songs

    def get_song(self, song_id: str) -> Optional[Song]:
        """Look up a song by id (used by song detail pages)."""
        return self._by_id.get(song_id)

    def genres(self) -> list[str]:
        """Distinct genres in first-seen order."""
        seen: dict[str, None] = {}
        for song in self._songs:
            seen.setdefault(song.genre, None)
        return list(seen)

    def by_genre(self, genre: Optional[str]) -> list[Song]:
        """Filter songs by exact genre label.

        Args:
            genre: Genre to match, or None / "All" for every song

        Returns:
            Matching songs in catalog order
        """
        if genre is None or genre == ALL_GENRES:
            return list(self._songs)
        return [song for song in self._songs if song.genre == genre]

    def trending(self, limit: int = 6) -> list[Song]:
        """Most played songs, highest play count first."""
        return sorted(self._songs, key=lambda s: s.plays, reverse=True)[:max(limit, 0)]

    def share_payload(self, song: Song) -> SharePayload:
        """Build the data needed for a share message about a song."""
        return SharePayload(
            song_id=song.id,
            title=song.title,
            artist=song.artist,
            path=f"/song/{song.id}",
            text=f'Check out "{song.title}" by {song.artist} on {self.site_name}!',
        )


def format_duration(seconds: float) -> str:
    """Format seconds as m:ss."""
    seconds = max(int(seconds), 0)
    return f"{seconds // 60}:{seconds % 60:02d}"


def load_catalog(path: Optional[Path] = None, site_name: str = "SprayFoamRadio.com") -> Catalog:
    """Load the catalog from a JSON file, or the built-in songs.

    Args:
        path: JSON file containing a list of song objects, or None
        site_name: Site name used in share messages

    Returns:
        Catalog instance

    Raises:
        CatalogError: If the file is unreadable or a record is invalid
    """
    if path is None:
        logger.debug(f"Using built-in catalog ({len(SAMPLE_SONGS)} songs)")
        return Catalog(SAMPLE_SONGS, site_name=site_name)

    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise CatalogError(str(e), source=str(path)) from e

    if not isinstance(raw, list):
        raise CatalogError("Catalog file must contain a list of songs", source=str(path))

    songs = []
    for index, entry in enumerate(raw):
        try:
            songs.append(SongRecord.model_validate(entry).to_song())
        except ValidationError as e:
            raise CatalogError(f"Invalid song at index {index}: {e}", source=str(path)) from e

    try:
        catalog = Catalog(songs, site_name=site_name)
    except CatalogError as e:
        raise CatalogError(str(e), source=str(path)) from e

    logger.info(f"Loaded catalog from {path}: {len(catalog)} songs")
    return catalog
