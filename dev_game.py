#!/usr/bin/env python3
"""
Development Mode Game Launcher

Launcher for playing registered games with mouse input.

Uses the game registry for auto-discovery. Game-specific arguments are
loaded from each game class's ARGUMENTS list.

Usage:
    # List available games
    python dev_game.py --list

    # Play a game
    python dev_game.py fishguard
    python dev_game.py fishguard --pacing gentle --mute

    # See game-specific options
    python dev_game.py fishguard --help

    # With custom resolution
    python dev_game.py fishguard --resolution 1920x1080
"""

import argparse
import os
import sys
import time

import pygame

# Ensure project root is on path
_project_root = os.path.dirname(os.path.abspath(__file__))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from bearwatch.games.input import InputEvent
from bearwatch.logging import close_all_sinks
from bearwatch.models import Resolution
from games.registry import get_registry


def _add_game_arguments(parser: argparse.ArgumentParser, arguments) -> None:
    """Translate registry argument definitions into argparse options."""
    added = set()
    for arg_def in arguments:
        arg_name = arg_def['name']
        if arg_name in added:
            continue
        added.add(arg_name)

        kwargs = {}
        for key in ('type', 'default', 'help', 'choices', 'action'):
            if key in arg_def:
                kwargs[key] = arg_def[key]
        if 'action' in kwargs:
            kwargs.pop('type', None)  # action and type are mutually exclusive
        parser.add_argument(arg_name, **kwargs)


def _print_games(registry) -> None:
    print("\nAvailable Games (Development Mode)")
    print("=" * 50)
    for slug in registry.list_games():
        info = registry.get_game_info(slug)
        print(f"\n  {slug}")
        print(f"    Name: {info.name}")
        print(f"    Description: {info.description}")
        print(f"    Version: {info.version}")
        if info.arguments:
            print(f"    Options: {', '.join(a['name'] for a in info.arguments)}")
    print()


def main():
    """Main entry point for development game launcher."""
    registry = get_registry()
    available_games = registry.list_games()

    # Phase 1: identify the game so its arguments can be added
    pre_parser = argparse.ArgumentParser(add_help=False)
    pre_parser.add_argument('game', nargs='?', choices=available_games)
    pre_args, _ = pre_parser.parse_known_args()

    # Phase 2: full parser with game-specific arguments
    parser = argparse.ArgumentParser(
        description='Development Mode Game Launcher - play games with mouse input',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Available games: {', '.join(available_games)}

Examples:
  python dev_game.py --list
  python dev_game.py fishguard
  python dev_game.py fishguard --pacing gentle
  python dev_game.py <game> --help       # See game-specific options
        """
    )
    parser.add_argument('game', nargs='?', choices=available_games, help='Game to play')
    parser.add_argument('--list', '-l', action='store_true',
                        help='List all available games and exit')
    parser.add_argument('--resolution', '-r', type=str, default='1280x720',
                        help='Window resolution as WIDTHxHEIGHT (default: 1280x720)')
    parser.add_argument('--fullscreen', '-f', action='store_true',
                        help='Run in fullscreen mode')

    if pre_args.game:
        _add_game_arguments(parser, registry.get_game_arguments(pre_args.game))

    args = parser.parse_args()

    if args.list:
        _print_games(registry)
        return 0

    if args.game is None:
        parser.print_help()
        return 1

    try:
        resolution = Resolution.parse(args.resolution)
    except ValueError:
        print(f"Invalid resolution format: {args.resolution}")
        print("Expected format: WIDTHxHEIGHT (e.g., 1920x1080)")
        return 1

    pygame.init()

    if args.fullscreen:
        screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
    else:
        screen = pygame.display.set_mode((resolution.width, resolution.height), pygame.RESIZABLE)
    width, height = screen.get_size()

    game_info = registry.get_game_info(args.game)
    pygame.display.set_caption(f"{game_info.name} - Development Mode")
    print("=" * 60)
    print(f"Development Mode: {game_info.name}")
    print("=" * 60)
    print(f"Resolution: {width}x{height}")
    print("Input: Mouse")
    print()

    skip_args = {'game', 'list', 'resolution', 'fullscreen'}
    game_kwargs = {
        k: v for k, v in vars(args).items()
        if k not in skip_args and v is not None
    }
    if game_kwargs:
        print("Game options:")
        for k, v in game_kwargs.items():
            print(f"  --{k.replace('_', '-')}: {v}")
        print()

    input_manager = registry.create_input_manager(args.game)

    try:
        game = registry.create_game(args.game, width, height,
                                    pointer_provider=input_manager.get_pointer, **game_kwargs)
    except Exception as e:
        print(f"ERROR: Failed to create game: {e}")
        import traceback
        traceback.print_exc()
        return 1

    print("Controls:")
    print("  - Click to start, move the mouse to play")
    print("  - R to reset")
    print("  - F to toggle fullscreen")
    print("  - ESC to quit")
    print()
    print("=" * 60)

    clock = pygame.time.Clock()
    running = True

    while running:
        dt = clock.tick(60) / 1000.0
        input_manager.update(dt)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                screen = pygame.display.set_mode(event.size, pygame.RESIZABLE)
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_f:
                    pygame.display.toggle_fullscreen()
                elif event.key == pygame.K_r:
                    game.handle_input([InputEvent.reset(time.monotonic())])
                    print("\n--- RESET ---\n")

        game.handle_input(input_manager.get_events())
        game.update(dt)
        game.render(screen)
        pygame.display.flip()

    print(f"Final score: {game.get_score()}")
    close_all_sinks()
    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
