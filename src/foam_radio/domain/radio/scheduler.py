"""
Radio scheduler: endless shuffled playback over the catalog.

Each pass plays every catalog song exactly once. Regular songs and ad-slot
songs (station idents, promos) are shuffled separately, and one ad-slot
song is placed after every `ad_interval` regular songs. Ad-slot songs that
do not fit are appended to the end of the pass. When a pass is exhausted
the schedule is rebuilt with a fresh shuffle, so radio mode never runs dry.
"""

import random
from typing import Iterable, Optional

from loguru import logger

from foam_radio.domain.library.models import Song

DEFAULT_AD_INTERVAL = 3


def interleave_ads(regular: list[Song], ads: list[Song], interval: int) -> list[Song]:
    """Place one ad after every `interval` regular songs.

    Args:
        regular: Regular songs in play order
        ads: Ad-slot songs in play order, each used once
        interval: Number of regular songs between ads

    Returns:
        Combined sequence; leftover ads trail the sequence
    """
    sequence: list[Song] = []
    ad_index = 0
    for position, song in enumerate(regular, start=1):
        sequence.append(song)
        if position % interval == 0 and ad_index < len(ads):
            sequence.append(ads[ad_index])
            ad_index += 1
    sequence.extend(ads[ad_index:])
    return sequence


class RadioScheduler:
    """Serves songs for radio mode from a reshuffled, ad-interleaved pass.

    The schedule is built lazily on the first `next()` and rebuilt every
    time the cursor reaches the end of the current pass. Reshuffle
    boundaries are not deduplicated: the last song of one pass may also be
    the first song of the next.
    """

    def __init__(
        self,
        songs: Iterable[Song],
        ad_slot_ids: Iterable[str] = (),
        ad_interval: int = DEFAULT_AD_INTERVAL,
        rng: Optional[random.Random] = None,
    ):
        if ad_interval < 1:
            raise ValueError(f"ad_interval must be >= 1, got {ad_interval}")
        self._songs: tuple[Song, ...] = tuple(songs)
        self.ad_slot_ids: frozenset[str] = frozenset(ad_slot_ids)
        self.ad_interval = ad_interval
        self._rng = rng or random.Random()
        self._sequence: list[Song] = []
        self._cursor = 0
        self.builds = 0

    @property
    def sequence(self) -> tuple[Song, ...]:
        """Current pass in play order (empty until first build)."""
        return tuple(self._sequence)

    @property
    def cursor(self) -> int:
        """Index of the next song to serve; also the advances since the last build."""
        return self._cursor

    def build(self, songs: Optional[Iterable[Song]] = None) -> list[Song]:
        """Build a fresh pass and reset the cursor.

        Args:
            songs: Replacement song source, or None to reuse the current one

        Returns:
            The new sequence (same length as the song source)
        """
        if songs is not None:
            self._songs = tuple(songs)

        regular = [s for s in self._songs if s.id not in self.ad_slot_ids]
        ads = [s for s in self._songs if s.id in self.ad_slot_ids]
        self._rng.shuffle(regular)
        self._rng.shuffle(ads)

        self._sequence = interleave_ads(regular, ads, self.ad_interval)
        self._cursor = 0
        self.builds += 1

        logger.debug(
            f"Radio schedule built: {len(regular)} regular + {len(ads)} ad-slot songs "
            f"(build #{self.builds})"
        )
        return list(self._sequence)

    def next(self) -> Optional[Song]:
        """Serve the song at the cursor and advance.

        Rebuilds first when the current pass is exhausted.

        Returns:
            Next song, or None if the catalog is empty
        """
        if self._cursor >= len(self._sequence):
            self.build()
        if not self._sequence:
            logger.debug("Radio schedule is empty, nothing to play")
            return None

        song = self._sequence[self._cursor]
        self._cursor += 1
        return song

    def previous(self) -> Optional[Song]:
        """Step back to the song before the most recently served one.

        Leaves the cursor one past the returned song so that `next()`
        continues forward from there.

        Returns:
            The earlier song, or None when fewer than two songs were served
            since the last build (the caller should only restart the
            current song)
        """
        if self._cursor < 2:
            return None

        self._cursor -= 2
        song = self._sequence[self._cursor]
        self._cursor += 1
        return song

    def upcoming(self, count: int = 5) -> list[Song]:
        """Peek at the next songs of the current pass without advancing."""
        return self._sequence[self._cursor:self._cursor + max(count, 0)]
