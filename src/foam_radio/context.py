"""Application context for explicit dependency passing.

Builds one catalog, one playlist store, one radio scheduler and one
playback session at startup and hands them to whatever consumes them.
"""

import random
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from foam_radio.core.config import Config
from foam_radio.domain.library.catalog import Catalog, load_catalog
from foam_radio.domain.playback.bridge import AudioBridge, NullAudioBridge
from foam_radio.domain.playback.session import PlaybackSession
from foam_radio.domain.playlists.store import PlaylistStore
from foam_radio.domain.radio.scheduler import RadioScheduler


@dataclass
class AppContext:
    """Core objects shared by the presentation layer.

    Attributes:
        config: Application configuration
        catalog: Read-only song catalog
        playlists: Playlist store (Favorites included)
        scheduler: Radio scheduler over the catalog
        session: Playback session driving the audio bridge
    """

    config: Config
    catalog: Catalog
    playlists: PlaylistStore
    scheduler: RadioScheduler
    session: PlaybackSession

    @classmethod
    def create(
        cls,
        config: Config,
        bridge: Optional[AudioBridge] = None,
        catalog: Optional[Catalog] = None,
    ) -> "AppContext":
        """Wire up the core from configuration.

        Args:
            config: Application configuration
            bridge: Audio output device (default: headless NullAudioBridge)
            catalog: Pre-loaded catalog (default: load from config)

        Returns:
            New AppContext; the session has been started, so in radio mode
            the first song is already loaded

        Raises:
            CatalogError: If the configured catalog file is invalid
        """
        if catalog is None:
            path = Path(config.catalog.path) if config.catalog.path else None
            catalog = load_catalog(path, site_name=config.catalog.site_name)

        rng = random.Random(config.radio.seed) if config.radio.seed is not None else None
        scheduler = RadioScheduler(
            catalog,
            ad_slot_ids=config.radio.ad_slot_ids,
            ad_interval=config.radio.ad_interval,
            rng=rng,
        )
        session = PlaybackSession(
            scheduler,
            bridge or NullAudioBridge(),
            radio_mode=config.player.radio_on_start,
            volume=config.player.volume,
            auto_advance_on_error=config.player.auto_advance_on_error,
        )
        session.start()

        return cls(
            config=config,
            catalog=catalog,
            playlists=PlaylistStore(),
            scheduler=scheduler,
            session=session,
        )
