"""
Playback session: the single source of truth for what is playing and what
plays next.

All mutations happen on one control flow: UI commands and audio bridge
events call session methods directly, each completing before the next
event is processed. Subscribers receive a SessionSnapshot after every
state change.
"""

from collections import deque
from typing import Callable, Optional

from loguru import logger

from foam_radio.domain.library.models import Song
from foam_radio.domain.playlists.models import Playlist
from foam_radio.domain.radio.scheduler import RadioScheduler

from .bridge import AudioBridge
from .state import LoadFailure, PlaybackPhase, SessionSnapshot

DEFAULT_VOLUME = 0.7
MAX_RECORDED_ERRORS = 20

Listener = Callable[[SessionSnapshot], None]


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


class PlaybackSession:
    """Owns the current song, manual queue, transport flags and volume.

    "What comes next" is decided in one place, `play_next()`, used both for
    explicit skips and for the bridge's track-ended event.
    """

    def __init__(
        self,
        scheduler: RadioScheduler,
        bridge: AudioBridge,
        *,
        radio_mode: bool = True,
        volume: float = DEFAULT_VOLUME,
        auto_advance_on_error: bool = False,
    ):
        self.scheduler = scheduler
        self.bridge = bridge
        self.auto_advance_on_error = auto_advance_on_error

        self._current_song: Optional[Song] = None
        self._queue: list[Song] = []
        self._is_playing = False
        self._is_radio_mode = radio_mode
        self._current_time = 0.0
        self._volume = _clamp(volume, 0.0, 1.0)
        self._unmuted_volume = self._volume or DEFAULT_VOLUME
        self._listeners: list[Listener] = []
        self.errors: deque[LoadFailure] = deque(maxlen=MAX_RECORDED_ERRORS)

        self.bridge.set_volume(self._volume)

    # Read-only state

    @property
    def current_song(self) -> Optional[Song]:
        return self._current_song

    @property
    def queue(self) -> tuple[Song, ...]:
        return tuple(self._queue)

    @property
    def is_playing(self) -> bool:
        return self._is_playing

    @property
    def is_radio_mode(self) -> bool:
        return self._is_radio_mode

    @property
    def current_time(self) -> float:
        return self._current_time

    @property
    def volume(self) -> float:
        return self._volume

    @property
    def phase(self) -> PlaybackPhase:
        if self._current_song is None:
            return PlaybackPhase.EMPTY
        if self._is_playing:
            return PlaybackPhase.PLAYING
        if self._current_time > 0:
            return PlaybackPhase.PAUSED
        return PlaybackPhase.LOADED

    # Subscriptions

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a state-change listener.

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def snapshot(self) -> SessionSnapshot:
        song = self._current_song
        progress = (self._current_time / song.duration) * 100 if song else 0.0
        return SessionSnapshot(
            current_song=song._asdict() if song else None,
            queue=[s._asdict() for s in self._queue],
            is_playing=self._is_playing,
            is_radio_mode=self._is_radio_mode,
            current_time=self._current_time,
            volume=self._volume,
            phase=self.phase,
            progress=progress,
            last_error=self.errors[-1].reason if self.errors else None,
        )

    def _notify(self) -> None:
        if not self._listeners:
            return
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("Session listener failed")

    # Internal transitions

    def _adopt(self, song: Song) -> None:
        """Make `song` current, restart elapsed time and load it on the bridge."""
        self._current_song = song
        self._current_time = 0.0
        logger.info(f"Now playing: {song.artist} - {song.title}")
        self.bridge.load(song.src)
        if self._is_playing:
            self.bridge.play()

    def _stop(self) -> None:
        self._is_playing = False
        self.bridge.pause()

    def _restart_current(self) -> None:
        self._current_time = 0.0
        if self._current_song is not None:
            self.bridge.seek(0.0)

    # Startup

    def start(self) -> None:
        """Pick the first radio song when nothing is loaded yet.

        The song is loaded but not started.
        """
        if self._current_song is not None or not self._is_radio_mode:
            return

        song = self.scheduler.next()
        if song is None:
            logger.info("Radio has nothing to play (empty catalog)")
            return
        self._adopt(song)
        self._notify()

    # Radio mode and manual queue

    def set_radio_mode(self, enabled: bool) -> None:
        """Toggle radio mode. Does not change the current song."""
        if self._is_radio_mode == enabled:
            return
        self._is_radio_mode = enabled
        logger.info(f"Radio mode {'on' if enabled else 'off'}")
        self._notify()

    def enqueue(self, song: Song) -> None:
        self._queue.append(song)
        logger.debug(f"Queued '{song.title}' ({len(self._queue)} in queue)")
        self._notify()

    def dequeue(self, song_id: str) -> None:
        """Remove every queue entry with this song id."""
        remaining = [s for s in self._queue if s.id != song_id]
        if len(remaining) == len(self._queue):
            return
        self._queue = remaining
        self._notify()

    def clear_queue(self) -> None:
        if not self._queue:
            return
        self._queue = []
        self._notify()

    # Navigation

    def play_next(self) -> None:
        """Advance to whatever comes after the current song.

        Manual queue first, then radio, otherwise stop with the current song
        unchanged.
        """
        if self._queue:
            self._adopt(self._queue.pop(0))
        elif self._is_radio_mode:
            song = self.scheduler.next()
            if song is not None:
                self._adopt(song)
            else:
                logger.info("Radio has nothing to play (empty catalog)")
                self._stop()
        else:
            logger.debug("Queue empty and radio off, stopping")
            self._stop()
        self._notify()

    def play_previous(self) -> None:
        """Go back one song in radio mode, otherwise restart the current song.

        Manual playback keeps no history, so outside radio mode (or before
        two radio songs have been served) this only resets elapsed time.
        """
        song = self.scheduler.previous() if self._is_radio_mode else None
        if song is not None:
            self._adopt(song)
        else:
            self._restart_current()
        self._notify()

    def play_playlist(self, playlist: Playlist) -> None:
        """Play a playlist from its first song, queueing the rest.

        An empty playlist leaves the session untouched.
        """
        if not playlist.songs:
            logger.debug(f"Playlist '{playlist.name}' is empty, nothing to play")
            return

        first, *rest = playlist.songs
        self._queue = list(rest)
        self._is_radio_mode = False
        self._is_playing = True
        self._adopt(first)
        self._notify()

    def play_song(self, song: Song) -> None:
        """Play a single song picked from the library. Turns radio mode off."""
        self._is_radio_mode = False
        self._is_playing = True
        self._adopt(song)
        self._notify()

    # Transport

    def play(self) -> None:
        if self._current_song is None or self._is_playing:
            return
        self._is_playing = True
        self.bridge.play()
        self._notify()

    def pause(self) -> None:
        if self._current_song is None or not self._is_playing:
            return
        self._stop()
        self._notify()

    def toggle_play(self) -> None:
        if self._is_playing:
            self.pause()
        else:
            self.play()

    def set_volume(self, volume: float) -> None:
        self._volume = _clamp(volume, 0.0, 1.0)
        if self._volume > 0:
            self._unmuted_volume = self._volume
        self.bridge.set_volume(self._volume)
        self._notify()

    def toggle_mute(self) -> None:
        self.set_volume(self._unmuted_volume if self._volume == 0 else 0.0)

    def seek(self, seconds: float) -> None:
        """Jump within the current song, updating elapsed time immediately."""
        if self._current_song is None:
            logger.debug("Ignoring seek with no current song")
            return
        self._current_time = _clamp(seconds, 0.0, float(self._current_song.duration))
        self.bridge.seek(self._current_time)
        self._notify()

    # Audio bridge events

    def on_time_advanced(self, seconds: float) -> None:
        if self._current_song is None:
            return
        self._current_time = _clamp(seconds, 0.0, float(self._current_song.duration))
        self._notify()

    def on_ended(self) -> None:
        self.play_next()

    def on_error(self, reason: str) -> None:
        """Record a load failure.

        Playback state is left as is unless `auto_advance_on_error` is set,
        in which case the session moves on to the next song.
        """
        song_id = self._current_song.id if self._current_song else None
        self.errors.append(LoadFailure(song_id=song_id, reason=reason))
        logger.warning(f"Audio error for song {song_id}: {reason}")

        if self.auto_advance_on_error:
            self.play_next()
        else:
            self._notify()
