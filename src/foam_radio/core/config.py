"""
Configuration management for Foam Radio
"""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from loguru import logger

# Station idents and promos in the built-in catalog
DEFAULT_AD_SLOT_IDS = ["13", "14", "15", "16", "17", "18", "19"]


@dataclass
class CatalogConfig:
    """Configuration for the song catalog source."""

    path: Optional[str] = None  # JSON file; None uses the built-in catalog
    site_name: str = "SprayFoamRadio.com"


@dataclass
class PlayerConfig:
    """Configuration for the playback session."""

    volume: float = 0.7
    radio_on_start: bool = True
    auto_advance_on_error: bool = False

    def validate(self) -> None:
        """Validate player configuration values.

        Raises:
            ValueError: If configuration values are invalid
        """
        if not 0.0 <= self.volume <= 1.0:
            raise ValueError(f"Invalid volume: {self.volume}. Must be between 0.0 and 1.0")


@dataclass
class RadioConfig:
    """Configuration for the radio scheduler."""

    ad_slot_ids: List[str] = field(default_factory=lambda: list(DEFAULT_AD_SLOT_IDS))
    ad_interval: int = 3  # Regular songs between ad slots
    seed: Optional[int] = None  # Fixed shuffle seed (testing/demo only)

    def validate(self) -> None:
        """Validate radio configuration values.

        Raises:
            ValueError: If configuration values are invalid
        """
        if not isinstance(self.ad_slot_ids, list):
            raise ValueError(f"Invalid ad_slot_ids: {self.ad_slot_ids!r}. Must be a list of song ids")
        if self.ad_interval < 1:
            raise ValueError(f"Invalid ad_interval: {self.ad_interval}. Must be >= 1")


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_file: Optional[str] = None  # Default: ~/.local/share/foam-radio/foam-radio.log
    console_output: bool = False

    def validate(self) -> None:
        """Validate logging configuration values.

        Raises:
            ValueError: If configuration values are invalid
        """
        if not isinstance(self.level, str):
            raise ValueError(f"Invalid level: {self.level!r}. Must be a level name")


@dataclass
class Config:
    """Main configuration object."""

    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    player: PlayerConfig = field(default_factory=PlayerConfig)
    radio: RadioConfig = field(default_factory=RadioConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / "foam-radio"
    return Path.home() / ".config" / "foam-radio"


def get_data_dir() -> Path:
    """Get the data directory path (log files)."""
    data_home = os.environ.get("XDG_DATA_HOME")
    if data_home:
        return Path(data_home) / "foam-radio"
    return Path.home() / ".local" / "share" / "foam-radio"


def get_config_path() -> Path:
    """Get the path to the configuration file."""
    return get_config_dir() / "config.toml"


def create_default_config() -> str:
    """Create default configuration file content."""
    return """
# Foam Radio Configuration

[catalog]
# JSON file with song records (default: built-in catalog)
# path = "~/music/catalog.json"

# Site name used in share messages
site_name = "SprayFoamRadio.com"

[player]
# Initial volume (0.0 - 1.0)
volume = 0.7

# Start in radio mode and pick the first song automatically
radio_on_start = true

# Skip to the next song when the audio device reports a load failure
auto_advance_on_error = false

[radio]
# Song ids played as promotional breaks between regular songs
ad_slot_ids = ["13", "14", "15", "16", "17", "18", "19"]

# Number of regular songs between promotional breaks
ad_interval = 3

[logging]
# Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
level = "INFO"

# Custom log file path (default: ~/.local/share/foam-radio/foam-radio.log)
# log_file = "/path/to/foam-radio.log"

# Also output logs to console (useful for debugging)
console_output = false
""".strip()


def _section(toml_data: dict, name: str) -> Optional[dict]:
    """Return a config table, or None (with a warning) if it is not a table."""
    if name not in toml_data:
        return None
    data = toml_data[name]
    if not isinstance(data, dict):
        logger.warning(f"Invalid [{name}] configuration: expected a table. Using defaults.")
        return None
    return data


def _parse_config(toml_data: dict) -> Config:
    config = Config()

    catalog_data = _section(toml_data, "catalog")
    if catalog_data is not None:
        path = catalog_data.get("path")
        config.catalog = CatalogConfig(
            path=str(Path(path).expanduser()) if path else None,
            site_name=str(catalog_data.get("site_name", config.catalog.site_name)),
        )

    player_data = _section(toml_data, "player")
    if player_data is not None:
        try:
            config.player = PlayerConfig(
                volume=float(player_data.get("volume", config.player.volume)),
                radio_on_start=player_data.get(
                    "radio_on_start", config.player.radio_on_start
                ),
                auto_advance_on_error=player_data.get(
                    "auto_advance_on_error", config.player.auto_advance_on_error
                ),
            )
            config.player.validate()
        except (TypeError, ValueError) as e:
            logger.warning(f"Invalid player configuration: {e}. Using defaults.")
            config.player = PlayerConfig()

    radio_data = _section(toml_data, "radio")
    if radio_data is not None:
        ad_slot_ids = radio_data.get("ad_slot_ids", config.radio.ad_slot_ids)
        if isinstance(ad_slot_ids, list):
            ad_slot_ids = [str(song_id) for song_id in ad_slot_ids]
        try:
            config.radio = RadioConfig(
                ad_slot_ids=ad_slot_ids,
                ad_interval=int(radio_data.get("ad_interval", config.radio.ad_interval)),
                seed=radio_data.get("seed"),
            )
            config.radio.validate()
        except (TypeError, ValueError) as e:
            logger.warning(f"Invalid radio configuration: {e}. Using defaults.")
            config.radio = RadioConfig()

    logging_data = _section(toml_data, "logging")
    if logging_data is not None:
        log_file = logging_data.get("log_file")
        if log_file:
            log_file = str(Path(log_file).expanduser())
        config.logging = LoggingConfig(
            level=logging_data.get("level", config.logging.level),
            log_file=log_file,
            console_output=logging_data.get(
                "console_output", config.logging.console_output
            ),
        )
        try:
            config.logging.validate()
        except ValueError as e:
            logger.warning(f"Invalid logging configuration: {e}. Using defaults.")
            config.logging = LoggingConfig()
        config.logging.level = config.logging.level.upper()

    return config


def _apply_env_overrides(config: Config) -> Config:
    log_level = os.environ.get("FOAM_RADIO_LOG_LEVEL")
    if log_level:
        config.logging.level = log_level.upper()

    catalog_path = os.environ.get("FOAM_RADIO_CATALOG")
    if catalog_path:
        config.catalog.path = str(Path(catalog_path).expanduser())

    return config


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from file or create default.

    Environment variables override TOML values:
    - FOAM_RADIO_LOG_LEVEL
    - FOAM_RADIO_CATALOG
    """
    from dotenv import load_dotenv

    env_path = get_config_dir() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    config_path = config_path or get_config_path()

    if not config_path.exists():
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            f.write(create_default_config())
        logger.info(f"Created default configuration at: {config_path}")
        return _apply_env_overrides(Config())

    try:
        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)
        config = _parse_config(toml_data)
    except Exception as e:
        logger.warning(f"Error loading configuration from {config_path}: {e}")
        logger.warning("Using default configuration.")
        return _apply_env_overrides(Config())

    return _apply_env_overrides(config)
