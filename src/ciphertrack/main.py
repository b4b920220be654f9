"""Main entry point for the CipherTrack application."""

import argparse
import asyncio
import logging
import sys

import aiohttp

from ciphertrack.adapters.broadcasters import StateBroadcaster
from ciphertrack.adapters.config import AppConfig
from ciphertrack.adapters.console import ConsoleDisplayAdapter
from ciphertrack.adapters.live_status_api import LiveStatusSnapshotFetcher
from ciphertrack.adapters.pollers import PollingTimer
from ciphertrack.adapters.preferences import JsonPreferencesStore
from ciphertrack.application.services import PositionScale, RefreshController
from ciphertrack.domain.models import DisplayPreferences, RefreshPhase

logger = logging.getLogger(__name__)

HELP_TEXT = "Commands: <train number> search, r refresh, b back, d dark mode, c compact, q quit"


def configure_logging(level: str) -> None:
    """Configure root logging on stderr."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="ciphertrack",
        description="Track a train's live position along its route.",
    )
    parser.add_argument("train_number", nargs="?", help="Train number to track")
    parser.add_argument(
        "--once",
        action="store_true",
        help="Fetch once, print the status and exit (non-zero on error)",
    )
    parser.add_argument("--config", dest="config_file", help="TOML file with overrides")
    theme = parser.add_mutually_exclusive_group()
    theme.add_argument("--dark", dest="dark_mode", action="store_const", const=True)
    theme.add_argument("--light", dest="dark_mode", action="store_const", const=False)
    layout = parser.add_mutually_exclusive_group()
    layout.add_argument("--compact", dest="compact_layout", action="store_const", const=True)
    layout.add_argument("--comfortable", dest="compact_layout", action="store_const", const=False)
    parser.add_argument("--color", action="store_true", help="Use ANSI colors")
    return parser.parse_args(argv)


def apply_preference_flags(
    preferences: DisplayPreferences, args: argparse.Namespace
) -> DisplayPreferences:
    """Override stored preferences with explicit command line flags."""
    updates = {}
    if args.dark_mode is not None:
        updates["dark_mode"] = args.dark_mode
    if args.compact_layout is not None:
        updates["compact_layout"] = args.compact_layout
    return preferences.model_copy(update=updates) if updates else preferences


async def update_preferences(
    preferences: DisplayPreferences,
    controller: RefreshController,
    display: ConsoleDisplayAdapter,
    store: JsonPreferencesStore,
) -> None:
    """Persist new preferences and re-render with them."""
    store.save(preferences)
    display.preferences = preferences
    await controller.set_scale(PositionScale.for_layout(preferences.compact_layout))


async def handle_command(
    command: str,
    controller: RefreshController,
    display: ConsoleDisplayAdapter,
    store: JsonPreferencesStore,
) -> bool:
    """Handle one interactive command.

    Returns:
        False when the session should end.
    """
    command = command.strip()
    if not command:
        return True
    if command == "q":
        return False
    if command == "r":
        if not await controller.manual_refresh():
            print("Nothing to refresh right now.")
    elif command == "b":
        await controller.navigate_back()
    elif command == "d":
        await update_preferences(
            display.preferences.toggled_dark_mode(), controller, display, store
        )
    elif command == "c":
        await update_preferences(
            display.preferences.toggled_compact_layout(), controller, display, store
        )
    elif command.isalnum():
        await controller.submit_search(command)
    else:
        print(HELP_TEXT)
    return True


async def run_interactive(
    controller: RefreshController,
    display: ConsoleDisplayAdapter,
    store: JsonPreferencesStore,
    train_number: str | None,
) -> int:
    """Run an interactive session reading commands from stdin."""
    print(HELP_TEXT)
    if train_number:
        await controller.submit_search(train_number)
    else:
        await display.display(controller.view)

    while True:
        line = await asyncio.to_thread(sys.stdin.readline)
        if not line:
            return 0
        if not await handle_command(line, controller, display, store):
            return 0


async def run_once(controller: RefreshController, train_number: str) -> int:
    """Fetch once and report whether it succeeded."""
    await controller.submit_search(train_number)
    return 0 if controller.state.phase is RefreshPhase.READY else 1


async def main(argv: list[str] | None = None) -> int:
    """Main application entry point."""
    args = parse_args(argv)
    config = AppConfig()
    configure_logging(config.log_level)

    if args.config_file:
        config.config_file = args.config_file
    if config.config_file:
        try:
            config.load_overrides()
        except (FileNotFoundError, ValueError) as e:
            logger.error(f"Invalid configuration: {e}")
            return 1

    if args.once and not args.train_number:
        logger.error("--once requires a train number")
        return 2

    store = JsonPreferencesStore(config.preferences_file)
    preferences = apply_preference_flags(store.load(), args)

    display = ConsoleDisplayAdapter(
        preferences=preferences,
        delay_threshold_minutes=config.delay_threshold_minutes,
        use_color=args.color,
    )
    broadcaster = StateBroadcaster()
    broadcaster.subscribe(display)

    async with aiohttp.ClientSession() as session:
        controller = RefreshController(
            fetcher=LiveStatusSnapshotFetcher(session, config),
            timer=PollingTimer(config.refresh_interval_seconds),
            broadcaster=broadcaster,
            scale=PositionScale.for_layout(preferences.compact_layout),
        )
        await display.start()
        try:
            if args.once:
                return await run_once(controller, args.train_number)
            return await run_interactive(controller, display, store, args.train_number)
        finally:
            await controller.close()
            await display.stop()


def run() -> None:
    """Console script entry point."""
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        logger.info("Shutting down...")


if __name__ == "__main__":
    run()
