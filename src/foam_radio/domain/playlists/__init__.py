"""Playlists domain - user playlists and the protected Favorites collection."""

from .models import DEFAULT_COVER, FAVORITES_ID, FAVORITES_NAME, Playlist
from .store import PlaylistStore

__all__ = [
    "DEFAULT_COVER",
    "FAVORITES_ID",
    "FAVORITES_NAME",
    "Playlist",
    "PlaylistStore",
]
