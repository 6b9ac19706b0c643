#!/usr/bin/env python3
"""
Dungeon Crawl - Command Line Interface

Play the dungeon crawl in the terminal, or watch a scripted run.

Usage:
    uv run python cli.py play
    uv run python cli.py -v play --name Ayla
    uv run python cli.py demo --rooms 3
"""

import argparse
import json
import logging
import sys

from packages.crawler import (
    ConsoleActionHandler,
    ConsoleRenderer,
    GameConfig,
    ScriptedActionHandler,
    create_game,
)


logger = logging.getLogger("crawler.cli")


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def cmd_play(args) -> int:
    """Interactive game in the terminal."""
    config = GameConfig(player_name=args.name, max_rounds=args.max_rounds)
    runner = create_game(
        config=config,
        renderer=ConsoleRenderer(),
        action_handler=ConsoleActionHandler(),
    )

    print("=" * 60)
    print("Dungeon Crawl")
    print("=" * 60)

    try:
        runner.run()
    except (EOFError, KeyboardInterrupt):
        print("\nExiting...")
    return 0


def cmd_demo(args) -> int:
    """Headless run: always take action 1, continue through `--rooms` rooms."""
    config = GameConfig(player_name=args.name, max_rounds=args.max_rounds)
    continues = [True] * max(args.rooms - 1, 0)
    renderer = ConsoleRenderer(output_fn=(lambda line: None) if args.json else print)
    runner = create_game(
        config=config,
        renderer=renderer,
        action_handler=ScriptedActionHandler(continues=continues),
    )

    stats = runner.run()
    logger.debug("Demo finished: %s", stats)
    if args.json:
        print(json.dumps(stats, indent=2))
    return 0


def main():
    parser = argparse.ArgumentParser(
        description="Dungeon Crawl - turn-based encounter prototype",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s play
  %(prog)s play --name Ayla
  %(prog)s demo --rooms 3 --json
        """
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    play_parser = subparsers.add_parser("play", help="Play interactively")
    play_parser.add_argument("--name", "-n", default="Player", help="Player name")
    play_parser.add_argument("--max-rounds", type=int, help="Stop after this many action choices")

    demo_parser = subparsers.add_parser("demo", help="Run a scripted game")
    demo_parser.add_argument("--name", "-n", default="Player", help="Player name")
    demo_parser.add_argument("--rooms", "-r", type=int, default=1, help="Rooms to clear before quitting")
    demo_parser.add_argument("--max-rounds", type=int, default=200, help="Safety limit on action choices")
    demo_parser.add_argument("--json", "-j", action="store_true", help="Print run statistics as JSON")

    args = parser.parse_args()
    configure_logging(args.verbose)

    if not args.command:
        parser.print_help()
        return 1

    commands = {
        "play": cmd_play,
        "demo": cmd_demo,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
