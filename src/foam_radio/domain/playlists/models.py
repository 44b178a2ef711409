"""Playlist domain models."""

from dataclasses import dataclass, field

from foam_radio.domain.library.models import Song

FAVORITES_ID = "favorites"
FAVORITES_NAME = "Favorites"
FAVORITES_COVER = "/favorites-playlist-heart.jpg"
DEFAULT_COVER = "/playlist-cover-music.jpg"


@dataclass(frozen=True)
class Playlist:
    """A named, ordered collection of unique songs.

    Instances are immutable snapshots; the store replaces them on every
    mutation.
    """

    id: str
    name: str
    songs: tuple[Song, ...] = field(default_factory=tuple)
    cover: str = DEFAULT_COVER

    def __len__(self) -> int:
        return len(self.songs)

    def has_song(self, song_id: str) -> bool:
        return any(song.id == song_id for song in self.songs)

    @property
    def is_favorites(self) -> bool:
        return self.id == FAVORITES_ID
