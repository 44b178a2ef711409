"""
Playlist management for Foam Radio.

In-memory store of user playlists. The Favorites playlist is created with
the store and can never be deleted. Invalid operations (unknown playlist,
deleting Favorites) are logged and ignored.
"""

import uuid
from dataclasses import replace
from typing import Optional

from loguru import logger

from foam_radio.domain.library.models import Song

from .models import (
    DEFAULT_COVER,
    FAVORITES_COVER,
    FAVORITES_ID,
    FAVORITES_NAME,
    Playlist,
)


class PlaylistStore:
    """CRUD over named song collections."""

    def __init__(self) -> None:
        self._playlists: dict[str, Playlist] = {
            FAVORITES_ID: Playlist(
                id=FAVORITES_ID, name=FAVORITES_NAME, cover=FAVORITES_COVER
            )
        }

    def __len__(self) -> int:
        return len(self._playlists)

    def __contains__(self, playlist_id: object) -> bool:
        return playlist_id in self._playlists

    def all(self) -> list[Playlist]:
        """All playlists in creation order (Favorites first)."""
        return list(self._playlists.values())

    def get(self, playlist_id: str) -> Optional[Playlist]:
        return self._playlists.get(playlist_id)

    @property
    def favorites(self) -> Playlist:
        return self._playlists[FAVORITES_ID]

    def create(self, name: str, cover: str = DEFAULT_COVER) -> Playlist:
        """
        Create a new empty playlist.

        Args:
            name: Display name (not required to be unique)
            cover: Cover image reference

        Returns:
            The new playlist
        """
        playlist_id = uuid.uuid4().hex
        while playlist_id in self._playlists:
            playlist_id = uuid.uuid4().hex

        playlist = Playlist(id=playlist_id, name=name, cover=cover)
        self._playlists[playlist_id] = playlist
        logger.info(f"Created playlist '{name}' ({playlist_id})")
        return playlist

    def add_song(self, playlist_id: str, song: Song) -> bool:
        """
        Append a song to a playlist unless it is already there.

        Args:
            playlist_id: Target playlist
            song: Song to add

        Returns:
            True if the song was added, False if already present or the
            playlist does not exist
        """
        playlist = self._playlists.get(playlist_id)
        if playlist is None:
            logger.warning(f"Cannot add song {song.id}: playlist {playlist_id} not found")
            return False
        if playlist.has_song(song.id):
            logger.debug(f"Song {song.id} already in playlist '{playlist.name}'")
            return False

        self._playlists[playlist_id] = replace(playlist, songs=playlist.songs + (song,))
        logger.info(f"Added '{song.title}' to playlist '{playlist.name}'")
        return True

    def remove_song(self, playlist_id: str, song_id: str) -> bool:
        """
        Remove a song from a playlist by id.

        Returns:
            True if the song was removed, False if it was not present
        """
        playlist = self._playlists.get(playlist_id)
        if playlist is None or not playlist.has_song(song_id):
            return False

        self._playlists[playlist_id] = replace(
            playlist, songs=tuple(s for s in playlist.songs if s.id != song_id)
        )
        logger.info(f"Removed song {song_id} from playlist '{playlist.name}'")
        return True

    def delete(self, playlist_id: str) -> bool:
        """
        Delete a playlist. The Favorites playlist is never deleted.

        Returns:
            True if a playlist was deleted
        """
        if playlist_id == FAVORITES_ID:
            logger.warning("Ignoring request to delete the Favorites playlist")
            return False
        if self._playlists.pop(playlist_id, None) is None:
            return False

        logger.info(f"Deleted playlist {playlist_id}")
        return True

    def contains(self, playlist_id: str, song_id: str) -> bool:
        playlist = self._playlists.get(playlist_id)
        return playlist is not None and playlist.has_song(song_id)

    def is_favorite(self, song_id: str) -> bool:
        return self.contains(FAVORITES_ID, song_id)

    def add_favorite(self, song: Song) -> bool:
        """Like a song (the heart button)."""
        return self.add_song(FAVORITES_ID, song)
