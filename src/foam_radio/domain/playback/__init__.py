"""Playback domain - session state machine and audio bridge interface.

This domain handles:
- Current song, manual queue and transport state
- Radio mode navigation via the radio scheduler
- Directives to and events from the audio rendering bridge
"""

from .bridge import AudioBridge, NullAudioBridge
from .session import DEFAULT_VOLUME, PlaybackSession
from .state import LoadFailure, PlaybackPhase, SessionSnapshot

__all__ = [
    "AudioBridge",
    "DEFAULT_VOLUME",
    "LoadFailure",
    "NullAudioBridge",
    "PlaybackPhase",
    "PlaybackSession",
    "SessionSnapshot",
]
