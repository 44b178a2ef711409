"""Tests for the playback session state machine."""

import random

import pytest

from conftest import AD_IDS, make_song
from foam_radio.domain.playback.bridge import NullAudioBridge
from foam_radio.domain.playback.session import PlaybackSession
from foam_radio.domain.playback.state import PlaybackPhase
from foam_radio.domain.playlists.models import Playlist
from foam_radio.domain.radio.scheduler import RadioScheduler


def _session(songs, **kwargs) -> PlaybackSession:
    scheduler = RadioScheduler(songs, ad_slot_ids=AD_IDS, rng=random.Random(99))
    return PlaybackSession(scheduler, NullAudioBridge(), **kwargs)


def _state(session: PlaybackSession) -> dict:
    return {
        "current": session.current_song,
        "queue": session.queue,
        "playing": session.is_playing,
        "radio": session.is_radio_mode,
        "time": session.current_time,
        "cursor": session.scheduler.cursor,
    }


class TestStart:
    """Tests for session startup."""

    def test_initial_state_is_empty(self, session) -> None:
        """Test a new session has nothing loaded."""
        assert session.current_song is None
        assert session.phase == PlaybackPhase.EMPTY
        assert session.is_radio_mode
        assert session.volume == pytest.approx(0.7)

    def test_start_loads_first_radio_song(self, session, bridge) -> None:
        """Test start() picks a radio song without playing it."""
        session.start()

        assert session.current_song is not None
        assert session.phase == PlaybackPhase.LOADED
        assert ("load", session.current_song.src) in bridge.directives
        assert ("play", None) not in bridge.directives

    def test_start_without_radio_does_nothing(self, songs) -> None:
        """Test start() leaves a non-radio session empty."""
        session = _session(songs, radio_mode=False)
        session.start()

        assert session.current_song is None

    def test_start_with_empty_catalog(self) -> None:
        """Test start() on an empty catalog is not an error."""
        session = _session([])
        session.start()

        assert session.current_song is None


class TestPlayNext:
    """Tests for play_next and the track-ended event."""

    def test_queue_head_preferred_over_radio(self, session) -> None:
        """Test the manual queue is consumed before radio."""
        session.start()
        queued = make_song("q1")
        session.enqueue(queued)
        cursor_before = session.scheduler.cursor

        session.play_next()

        assert session.current_song == queued
        assert session.queue == ()
        assert session.scheduler.cursor == cursor_before

    @pytest.mark.parametrize("radio_mode", [True, False])
    def test_queue_shrinks_by_one(self, songs, radio_mode) -> None:
        """Test play_next pops exactly one entry regardless of radio mode."""
        session = _session(songs, radio_mode=radio_mode)
        for song_id in ("q1", "q2", "q3"):
            session.enqueue(make_song(song_id))

        session.play_next()

        assert session.current_song.id == "q1"
        assert [s.id for s in session.queue] == ["q2", "q3"]

    def test_radio_used_when_queue_empty(self, session) -> None:
        """Test radio supplies the next song when nothing is queued."""
        session.start()
        first = session.current_song

        session.play_next()

        assert session.current_song == session.scheduler.sequence[1]
        assert session.current_song != first

    def test_stops_when_queue_empty_and_radio_off(self, songs) -> None:
        """Test playback stops with the current song unchanged."""
        session = _session(songs, radio_mode=False)
        song = make_song("solo")
        session.play_song(song)

        session.play_next()

        assert session.current_song == song
        assert not session.is_playing
        assert session.bridge.directives[-1] == ("pause", None)

    def test_resets_elapsed_time(self, session) -> None:
        """Test every song change restarts elapsed time."""
        session.start()
        session.on_time_advanced(42)

        session.play_next()

        assert session.current_time == 0

    def test_plays_new_song_when_playing(self, session, bridge) -> None:
        """Test a song change while playing loads and plays the new song."""
        session.start()
        session.play()
        bridge.clear()

        session.play_next()

        assert bridge.directives == [("load", session.current_song.src), ("play", None)]

    def test_loads_without_playing_when_paused(self, session, bridge) -> None:
        """Test a skip while paused only loads the new song."""
        session.start()
        bridge.clear()

        session.play_next()

        assert bridge.directives == [("load", session.current_song.src)]
        assert not session.is_playing

    def test_empty_catalog_radio_stops(self) -> None:
        """Test radio on an empty catalog stops playback instead of failing."""
        session = _session([])

        session.play_next()

        assert session.current_song is None
        assert not session.is_playing

    def test_ended_event_matches_skip(self, songs) -> None:
        """Test track-ended and explicit skip produce identical state."""
        skipped = _session(songs)
        ended = _session(songs)
        for s in (skipped, ended):
            s.start()
            s.play()
            s.enqueue(make_song("q1"))
            s.on_time_advanced(30)

        skipped.play_next()
        ended.on_ended()
        assert _state(skipped) == _state(ended)

        skipped.play_next()
        ended.on_ended()
        assert _state(skipped) == _state(ended)
        assert skipped.snapshot() == ended.snapshot()


class TestPlayPrevious:
    """Tests for play_previous."""

    def test_without_history_only_restarts(self, session, bridge) -> None:
        """Test fewer than two radio advances only resets elapsed time."""
        session.start()
        current = session.current_song
        session.on_time_advanced(50)

        session.play_previous()

        assert session.current_song == current
        assert session.current_time == 0
        assert bridge.directives[-1] == ("seek", 0.0)

    def test_radio_steps_back(self, session) -> None:
        """Test radio mode returns to the previously served song."""
        session.start()
        first = session.current_song
        session.play_next()
        session.on_time_advanced(10)

        session.play_previous()

        assert session.current_song == first
        assert session.current_time == 0

    def test_manual_mode_only_restarts(self, session) -> None:
        """Test manual playback has no history."""
        session.start()
        session.play_next()
        session.set_radio_mode(False)
        current = session.current_song
        session.on_time_advanced(10)

        session.play_previous()

        assert session.current_song == current
        assert session.current_time == 0

    def test_without_current_song(self, songs) -> None:
        """Test previous on an empty session is harmless."""
        session = _session(songs, radio_mode=False)

        session.play_previous()

        assert session.current_song is None
        assert ("seek", 0.0) not in session.bridge.directives


class TestPlayPlaylist:
    """Tests for play_playlist and play_song."""

    def test_plays_first_and_queues_rest(self, session) -> None:
        """Test the playlist head plays and the rest become the queue."""
        songs = (make_song("p1"), make_song("p2"), make_song("p3"))
        session.start()

        session.play_playlist(Playlist(id="mix", name="Mix", songs=songs))

        assert session.current_song == songs[0]
        assert session.queue == songs[1:]
        assert session.is_playing
        assert not session.is_radio_mode
        assert session.current_time == 0

    def test_replaces_existing_queue(self, session) -> None:
        """Test playing a playlist discards previously queued songs."""
        session.enqueue(make_song("old"))

        session.play_playlist(Playlist(id="mix", name="Mix", songs=(make_song("p1"),)))

        assert session.queue == ()

    def test_empty_playlist_is_noop(self, session) -> None:
        """Test an empty playlist leaves the session unchanged."""
        session.start()
        session.enqueue(make_song("q1"))
        before = _state(session)
        notified = []
        session.subscribe(notified.append)

        session.play_playlist(Playlist(id="empty", name="Empty"))

        assert _state(session) == before
        assert notified == []

    def test_play_song_turns_radio_off(self, session, bridge) -> None:
        """Test picking a song from the library plays it directly."""
        song = make_song("pick")

        session.play_song(song)

        assert session.current_song == song
        assert session.is_playing
        assert not session.is_radio_mode
        assert bridge.directives[-2:] == [("load", song.src), ("play", None)]


class TestTransport:
    """Tests for play/pause, volume and seek."""

    def test_play_pause_toggle(self, session, bridge) -> None:
        """Test transport commands drive the bridge."""
        session.start()

        session.toggle_play()
        assert session.phase == PlaybackPhase.PLAYING
        session.on_time_advanced(12)
        session.toggle_play()

        assert session.phase == PlaybackPhase.PAUSED
        assert bridge.directives[-1] == ("pause", None)

    def test_play_without_song_is_noop(self, session, bridge) -> None:
        """Test play with nothing loaded does nothing."""
        bridge.clear()

        session.play()

        assert not session.is_playing
        assert bridge.directives == []

    def test_volume_is_clamped(self, session, bridge) -> None:
        """Test volume stays within 0.0 - 1.0."""
        session.set_volume(1.5)
        assert session.volume == 1.0
        session.set_volume(-0.2)
        assert session.volume == 0.0
        assert bridge.volume == 0.0

    def test_toggle_mute_restores_volume(self, session) -> None:
        """Test unmuting returns to the last audible volume."""
        session.set_volume(0.4)

        session.toggle_mute()
        assert session.volume == 0.0
        session.toggle_mute()

        assert session.volume == pytest.approx(0.4)

    def test_seek_updates_elapsed_immediately(self, session, bridge) -> None:
        """Test seek is reflected before the bridge confirms."""
        session.start()

        session.seek(30)

        assert session.current_time == 30
        assert bridge.directives[-1] == ("seek", 30)

    def test_seek_is_clamped_to_duration(self, session) -> None:
        """Test seeking past the end stops at the song duration."""
        session.start()

        session.seek(10_000)

        assert session.current_time == session.current_song.duration

    def test_seek_without_song_is_noop(self, session, bridge) -> None:
        """Test seek with nothing loaded is ignored."""
        bridge.clear()

        session.seek(10)

        assert session.current_time == 0
        assert bridge.directives == []

    def test_time_advanced_is_clamped(self, session) -> None:
        """Test elapsed time never exceeds the song duration."""
        session.start()

        session.on_time_advanced(session.current_song.duration + 5)

        assert session.current_time == session.current_song.duration


class TestQueue:
    """Tests for manual queue mutation."""

    def test_enqueue_appends(self, session) -> None:
        """Test enqueue is FIFO append."""
        session.enqueue(make_song("a"))
        session.enqueue(make_song("b"))

        assert [s.id for s in session.queue] == ["a", "b"]

    def test_dequeue_by_id(self, session) -> None:
        """Test dequeue removes entries with the given id."""
        session.enqueue(make_song("a"))
        session.enqueue(make_song("b"))
        session.enqueue(make_song("a"))

        session.dequeue("a")

        assert [s.id for s in session.queue] == ["b"]

    def test_clear_queue(self, session) -> None:
        """Test clear_queue empties the queue."""
        session.enqueue(make_song("a"))

        session.clear_queue()

        assert session.queue == ()

    def test_set_radio_mode_keeps_current_song(self, session) -> None:
        """Test toggling radio mode does not change the song."""
        session.start()
        current = session.current_song

        session.set_radio_mode(False)

        assert session.current_song == current
        assert not session.is_radio_mode


class TestLoadFailure:
    """Tests for audio bridge errors."""

    def test_error_recorded_without_advancing(self, session) -> None:
        """Test a load failure keeps the current song and transport state."""
        session.start()
        session.play()
        current = session.current_song

        session.on_error("decode failed")

        assert session.current_song == current
        assert session.is_playing
        assert session.errors[-1].reason == "decode failed"
        assert session.errors[-1].song_id == current.id
        assert session.snapshot().last_error == "decode failed"

    def test_auto_advance_on_error(self, songs) -> None:
        """Test the opt-in policy skips to the next song."""
        session = _session(songs, auto_advance_on_error=True)
        session.start()
        first = session.current_song

        session.on_error("network")

        assert session.current_song != first
        assert len(session.errors) == 1

    def test_errors_are_bounded(self, session) -> None:
        """Test only the most recent failures are kept."""
        for i in range(50):
            session.on_error(f"error {i}")

        assert len(session.errors) == 20
        assert session.errors[-1].reason == "error 49"


class TestSubscriptions:
    """Tests for state-change notifications."""

    def test_listener_receives_snapshots(self, session) -> None:
        """Test listeners are called after each change."""
        snapshots = []
        session.subscribe(snapshots.append)

        session.start()
        session.play()

        assert len(snapshots) == 2
        assert snapshots[-1].is_playing
        assert snapshots[-1].phase == PlaybackPhase.PLAYING

    def test_unsubscribe(self, session) -> None:
        """Test an unsubscribed listener is no longer called."""
        snapshots = []
        unsubscribe = session.subscribe(snapshots.append)
        unsubscribe()

        session.start()

        assert snapshots == []

    def test_failing_listener_does_not_break_session(self, session) -> None:
        """Test listener exceptions are contained."""
        def broken(snapshot):
            raise RuntimeError("render failed")

        received = []
        session.subscribe(broken)
        session.subscribe(received.append)

        session.start()

        assert session.current_song is not None
        assert len(received) == 1

    def test_snapshot_uses_camel_case_aliases(self, session) -> None:
        """Test the snapshot serializes for UI consumers."""
        session.start()
        session.on_time_advanced(session.current_song.duration / 2)

        data = session.snapshot().model_dump(by_alias=True)

        assert data["currentSong"]["id"] == session.current_song.id
        assert data["isRadioMode"] is True
        assert data["progress"] == pytest.approx(50.0)
