"""
Music library domain models.

Contains data structures for representing songs in the catalog.
"""

from typing import NamedTuple


class Song(NamedTuple):
    """Represents a song in the catalog.

    Songs are immutable once loaded. `id` is a stable string used for
    playlist membership, radio ad-slot selection and song page links.
    """

    id: str
    title: str
    artist: str
    genre: str  # Free-text label, e.g. "Hip-Hop" or "Commercial/Jingle"
    duration: int  # in seconds, always positive
    cover: str = "/placeholder.svg"
    plays: int = 0  # Display-only play count
    src: str = ""  # Playable media locator handed to the audio bridge


class SharePayload(NamedTuple):
    """Data needed to build a share message for a song.

    URL composition (origin + path) and share dialogs are handled by the
    presentation layer.
    """

    song_id: str
    title: str
    artist: str
    path: str  # e.g. "/song/12"
    text: str
