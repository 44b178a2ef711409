"""Shared fixtures for Foam Radio tests."""

import random

import pytest

from foam_radio.domain.library.catalog import Catalog
from foam_radio.domain.library.models import Song
from foam_radio.domain.playback.bridge import NullAudioBridge
from foam_radio.domain.playback.session import PlaybackSession
from foam_radio.domain.playlists.store import PlaylistStore
from foam_radio.domain.radio.scheduler import RadioScheduler

AD_IDS = {"ad1", "ad2"}


def make_song(song_id: str, **overrides) -> Song:
    fields = {
        "id": song_id,
        "title": f"Song {song_id}",
        "artist": "DJ FoamBot Productions",
        "genre": "Hip-Hop",
        "duration": 120,
        "plays": 100,
        "src": f"/music/{song_id}.mp3",
    }
    fields.update(overrides)
    return Song(**fields)


@pytest.fixture
def songs() -> list[Song]:
    """Seven regular songs followed by two ad-slot songs."""
    regular = [make_song(str(i)) for i in range(1, 8)]
    ads = [make_song(ad_id, genre="Commercial/Jingle", duration=30) for ad_id in sorted(AD_IDS)]
    return regular + ads


@pytest.fixture
def catalog(songs: list[Song]) -> Catalog:
    return Catalog(songs)


@pytest.fixture
def scheduler(catalog: Catalog) -> RadioScheduler:
    return RadioScheduler(catalog, ad_slot_ids=AD_IDS, rng=random.Random(1234))


@pytest.fixture
def bridge() -> NullAudioBridge:
    return NullAudioBridge()


@pytest.fixture
def session(scheduler: RadioScheduler, bridge: NullAudioBridge) -> PlaybackSession:
    return PlaybackSession(scheduler, bridge)


@pytest.fixture
def store() -> PlaylistStore:
    return PlaylistStore()


@pytest.fixture
def isolated_dirs(tmp_path, monkeypatch):
    """Point config and data directories at a temporary location."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.delenv("FOAM_RADIO_LOG_LEVEL", raising=False)
    monkeypatch.delenv("FOAM_RADIO_CATALOG", raising=False)
    return tmp_path
