"""
Playback session state types.

SessionSnapshot is what UI subscribers receive after every state change.
"""

from enum import Enum
from typing import NamedTuple, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class PlaybackPhase(str, Enum):
    """Informal session state, derived from current song, transport flag and elapsed time."""

    EMPTY = "empty"  # No current song
    LOADED = "loaded"  # Song set, never started (elapsed 0)
    PLAYING = "playing"
    PAUSED = "paused"  # Stopped mid-track, resumable


class LoadFailure(NamedTuple):
    """An error reported by the audio bridge."""

    song_id: Optional[str]
    reason: str


class SessionSnapshot(BaseModel):
    """Current playback session state."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    current_song: Optional[dict] = None
    queue: list[dict] = []
    is_playing: bool = False
    is_radio_mode: bool = False
    current_time: float = 0.0
    volume: float = 0.7
    phase: PlaybackPhase = PlaybackPhase.EMPTY
    progress: float = 0.0  # Percent of current song elapsed
    last_error: Optional[str] = None
