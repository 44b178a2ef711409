"""
Foam Radio CLI - headless access to the catalog and the radio scheduler.

Audio output is replaced by a NullAudioBridge, so every command runs
without a sound device.
"""

import argparse
import sys
from typing import Optional

from loguru import logger
from rich.table import Table

from foam_radio.context import AppContext
from foam_radio.core.config import get_config_path, load_config
from foam_radio.core.console import get_console
from foam_radio.core.errors import CatalogError
from foam_radio.core.output import setup_from_config
from foam_radio.domain.library.catalog import format_duration
from foam_radio.domain.library.models import Song


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def _song_table(title: str, songs: list[Song], ad_slot_ids: frozenset[str] = frozenset()) -> Table:
    table = Table(title=title)
    table.add_column("#", justify="right", style="dim")
    table.add_column("ID", style="cyan")
    table.add_column("Title")
    table.add_column("Artist")
    table.add_column("Genre", style="magenta")
    table.add_column("Time", justify="right")
    table.add_column("Plays", justify="right")

    for position, song in enumerate(songs, start=1):
        marker = " [yellow](ad)[/yellow]" if song.id in ad_slot_ids else ""
        table.add_row(
            str(position),
            song.id,
            song.title + marker,
            song.artist,
            song.genre,
            format_duration(song.duration),
            f"{song.plays:,}",
        )
    return table


def cmd_songs(ctx: AppContext, args: argparse.Namespace) -> int:
    songs = ctx.catalog.by_genre(args.genre)
    if not songs:
        get_console().print(f"No songs in genre '{args.genre}'", style="yellow")
        get_console().print(f"Genres: {', '.join(ctx.catalog.genres())}")
        return 1
    get_console().print(_song_table(f"Songs ({args.genre or 'All'})", songs))
    return 0


def cmd_trending(ctx: AppContext, args: argparse.Namespace) -> int:
    get_console().print(_song_table("Top Tracks", ctx.catalog.trending(args.limit)))
    return 0


def cmd_radio(ctx: AppContext, args: argparse.Namespace) -> int:
    session = ctx.session
    if session.current_song is None:
        get_console().print("Nothing to play: the catalog is empty", style="yellow")
        return 1

    picks = [session.current_song]
    for _ in range(args.count - 1):
        session.play_next()
        picks.append(session.current_song)

    get_console().print(
        _song_table("Radio", picks, ad_slot_ids=ctx.scheduler.ad_slot_ids)
    )
    return 0


def cmd_share(ctx: AppContext, args: argparse.Namespace) -> int:
    song = ctx.catalog.get_song(args.song_id)
    if song is None:
        get_console().print(f"Unknown song id: {args.song_id}", style="red")
        return 1

    payload = ctx.catalog.share_payload(song)
    console = get_console()
    console.print(f"[bold]{payload.title}[/bold] by {payload.artist}")
    console.print(f"Path: {payload.path}")
    console.print(payload.text)
    return 0


def cmd_config(ctx: AppContext, args: argparse.Namespace) -> int:
    get_console().print(str(get_config_path()))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="foam-radio",
        description="Foam Radio - catalog browser and radio scheduler",
    )
    parser.add_argument(
        "--log-level",
        help="Override the configured log level (DEBUG, INFO, WARNING, ...)",
    )
    subparsers = parser.add_subparsers(dest="subcommand", required=True)

    songs_parser = subparsers.add_parser("songs", help="List the catalog")
    songs_parser.add_argument("--genre", help="Only songs with this genre")
    songs_parser.set_defaults(handler=cmd_songs)

    trending_parser = subparsers.add_parser("trending", help="Most played songs")
    trending_parser.add_argument("--limit", type=_positive_int, default=6)
    trending_parser.set_defaults(handler=cmd_trending)

    radio_parser = subparsers.add_parser("radio", help="Show the next radio picks")
    radio_parser.add_argument("--count", type=_positive_int, default=10)
    radio_parser.add_argument("--seed", type=int, help="Fixed shuffle seed")
    radio_parser.set_defaults(handler=cmd_radio)

    share_parser = subparsers.add_parser("share", help="Show share message data for a song")
    share_parser.add_argument("song_id")
    share_parser.set_defaults(handler=cmd_share)

    config_parser = subparsers.add_parser("config", help="Show the config file path")
    config_parser.set_defaults(handler=cmd_config)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the foam-radio command."""
    args = build_parser().parse_args(argv)

    config = load_config()
    if args.log_level:
        config.logging.level = args.log_level.upper()
    if getattr(args, "seed", None) is not None:
        config.radio.seed = args.seed
    if args.subcommand == "radio":
        config.player.radio_on_start = True
    setup_from_config(config.logging)

    try:
        ctx = AppContext.create(config)
    except CatalogError as e:
        logger.error(f"Failed to load catalog: {e}")
        get_console().print(f"Error: {e}", style="red")
        return 1

    return args.handler(ctx, args)


if __name__ == "__main__":
    sys.exit(main())
