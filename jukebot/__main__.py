"""
Jukebot CLI entry point.

Provides command-line interface for running the bot and inspecting its setup.
"""

import argparse
import asyncio
import sys
from pathlib import Path

from jukebot import __version__
from jukebot.bot.commands import COMMANDS
from jukebot.bot.errors import DisconnectedError, JukebotError
from jukebot.config.logging import get_logger, setup_logging
from jukebot.config.settings import load_settings


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="jukebot",
        description="Prefix-command Discord bot with a small music session",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"Jukebot {__version__}",
    )

    parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help="Path to .env file (default: .env in current directory)",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Override logging level from config",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser(
        "run",
        help="Connect to Discord and start handling commands",
    )
    subparsers.add_parser(
        "config",
        help="Show current configuration",
    )
    subparsers.add_parser(
        "commands",
        help="List the chat commands the bot understands",
    )

    return parser


def cmd_config(settings) -> int:
    """Show current configuration."""
    logger = get_logger(__name__)

    logger.info("\n=== Jukebot Configuration ===\n")
    logger.info(f"Log Level: {settings.log_level}")
    logger.info(f"Log File: {settings.log_file or 'None (console only)'}")
    logger.info(f"\nBot Name: {settings.bot.name}")
    logger.info(f"Token: {'Set' if settings.bot.token else 'Not set'}")
    logger.info(f"Server ID: {settings.bot.server_id}")
    logger.info(f"Text Channel ID: {settings.bot.text_channel_id}")
    logger.info(f"Command Prefix: {settings.bot.command_prefix}")
    logger.info(f"Debug: {settings.bot.debug}")
    logger.info(f"Message Overrides: {len(settings.bot.messages)}")

    return 0


def cmd_commands(settings) -> int:
    """Print the command table."""
    prefix = settings.bot.command_prefix
    for key, descriptor in COMMANDS.items():
        aliases = ", ".join(f"{prefix}{alias}" for alias in descriptor.aliases)
        print(f"{key:<12} {aliases:<32} {descriptor.description}")
    return 0


def cmd_run(settings) -> int:
    """Start the Discord bot and block until it disconnects."""
    logger = get_logger(__name__)

    from jukebot.bot import MusicBot
    from jukebot.platform import DiscordPlatform

    bot = MusicBot(settings.bot, DiscordPlatform())
    logger.info(f"Starting {settings.bot.name}...")
    try:
        asyncio.run(bot.init())
    except DisconnectedError:
        # Already logged by the bot with reason and code
        return 1
    except JukebotError as e:
        logger.error(str(e))
        return 1
    return 0


def main() -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()

    # Load settings
    try:
        settings = load_settings(env_file=args.env_file)
    except Exception as e:
        print(f"Error loading settings: {e}", file=sys.stderr)
        return 1

    # Override log level if specified
    if args.log_level:
        settings.log_level = args.log_level

    setup_logging(settings)

    if args.command == "config":
        return cmd_config(settings)
    elif args.command == "run":
        return cmd_run(settings)
    elif args.command == "commands":
        return cmd_commands(settings)
    else:
        parser.print_help()
        return 0


if __name__ == "__main__":
    sys.exit(main())
