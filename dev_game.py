#!/usr/bin/env python3
"""
Development Mode Game Launcher

Picks a game by slug and hands the remaining arguments to its own
entry point. Game-specific options come from each game's ARGUMENTS.

Usage:
    # List available games
    python dev_game.py --list

    # Play a game
    python dev_game.py fruitfall
    python dev_game.py fruitfall --lives 3 --seed 42

    # See game-specific options
    python dev_game.py fruitfall --help

    # With custom resolution
    python dev_game.py fruitfall --resolution 1600x1000
"""

import argparse
import sys
from typing import Callable, Dict, List, Optional, Tuple

from games.FruitFall import main as fruitfall_main
from games.FruitFall.game_mode import FruitFallMode

# slug -> (game class, entry point)
GAMES: Dict[str, Tuple[type, Callable[[Optional[List[str]]], int]]] = {
    'fruitfall': (FruitFallMode, fruitfall_main.main),
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for development game launcher."""
    parser = argparse.ArgumentParser(
        description='Development Mode Game Launcher',
        add_help=False,
    )
    parser.add_argument('game', nargs='?', choices=sorted(GAMES))
    parser.add_argument('--list', '-l', action='store_true', help='List all available games and exit')

    args, remaining = parser.parse_known_args(argv)

    if args.list:
        print("\nAvailable Games (Development Mode)")
        print("=" * 50)
        for slug, (game_class, _) in GAMES.items():
            info = game_class.get_info()
            print(f"\n  {slug}")
            print(f"    Name: {info['name']}")
            print(f"    Description: {info['description']}")
            print(f"    Version: {info['version']}")
            print(f"    Options: {', '.join(a['name'] for a in info['arguments'])}")
        print()
        return 0

    if args.game is None:
        parser.print_help()
        return 1

    _, entry_point = GAMES[args.game]
    return entry_point(remaining)


if __name__ == "__main__":
    sys.exit(main())
