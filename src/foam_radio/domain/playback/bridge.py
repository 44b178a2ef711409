"""Audio rendering bridge interface.

The session only issues directives to the bridge. The bridge reports back
by calling the session's event handlers (`on_time_advanced`, `on_ended`,
`on_error`). Issuing a new `load` supersedes any load still in flight.
"""

from typing import Any, Protocol

from loguru import logger


class AudioBridge(Protocol):
    """Directives accepted by an audio output device."""

    def load(self, source: str) -> None: ...

    def play(self) -> None: ...

    def pause(self) -> None: ...

    def seek(self, seconds: float) -> None: ...

    def set_volume(self, volume: float) -> None: ...


class NullAudioBridge:
    """Headless bridge that records directives instead of producing sound.

    Used by the CLI and by tests.
    """

    def __init__(self) -> None:
        self.directives: list[tuple[str, Any]] = []
        self.source: str | None = None
        self.is_playing = False
        self.position = 0.0
        self.volume = 1.0

    def _record(self, name: str, value: Any = None) -> None:
        logger.debug(f"Audio directive: {name} {value if value is not None else ''}".rstrip())
        self.directives.append((name, value))

    def load(self, source: str) -> None:
        self.source = source
        self.position = 0.0
        self._record("load", source)

    def play(self) -> None:
        self.is_playing = True
        self._record("play")

    def pause(self) -> None:
        self.is_playing = False
        self._record("pause")

    def seek(self, seconds: float) -> None:
        self.position = seconds
        self._record("seek", seconds)

    def set_volume(self, volume: float) -> None:
        self.volume = volume
        self._record("set_volume", volume)

    def clear(self) -> None:
        self.directives.clear()
