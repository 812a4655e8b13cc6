#!/usr/bin/env python3
"""FruitFall - Standalone entry point.

The game draws on a fixed 800x500 logical surface that is scaled to the
window every frame. Keyboard shortcuts stand in for the control buttons:

    Enter   start
    P       pause
    R       reset
    + / =   faster
    -       slower
    Esc     quit
"""

import argparse
import sys
from typing import List, Optional

import pygame

from models import Resolution
from arcade_core.games.input import PygameInputSource
from arcade_core.logging import configure_logging, get_logger
from games.FruitFall import config
from games.FruitFall.game_mode import FruitFallMode

log = get_logger('main')

CONTROL_KEYS = {
    pygame.K_RETURN: 'start',
    pygame.K_KP_ENTER: 'start',
    pygame.K_p: 'pause',
    pygame.K_r: 'reset',
    pygame.K_PLUS: 'faster',
    pygame.K_EQUALS: 'faster',
    pygame.K_KP_PLUS: 'faster',
    pygame.K_MINUS: 'slower',
    pygame.K_KP_MINUS: 'slower',
}

LAUNCHER_ARGS = {'resolution', 'fullscreen', 'fps'}


def build_parser() -> argparse.ArgumentParser:
    """Launcher options plus every argument FruitFallMode declares."""
    parser = argparse.ArgumentParser(
        prog='fruitfall',
        description=FruitFallMode.DESCRIPTION,
    )
    parser.add_argument(
        '--resolution', '-r',
        type=str,
        default=f'{config.PLAYFIELD_WIDTH}x{config.PLAYFIELD_HEIGHT}',
        help='Window resolution as WIDTHxHEIGHT'
    )
    parser.add_argument(
        '--fullscreen', '-f',
        action='store_true',
        help='Run in fullscreen mode'
    )
    parser.add_argument(
        '--fps',
        type=int,
        default=config.TICK_RATE,
        help='Ticks per second (entity speeds are per tick)'
    )

    for arg_def in FruitFallMode.get_arguments():
        kwargs = {k: v for k, v in arg_def.items() if k != 'name'}
        if 'action' in kwargs:
            kwargs.pop('type', None)  # action and type are mutually exclusive
        parser.add_argument(arg_def['name'], **kwargs)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.log_level:
        configure_logging(level=args.log_level)

    try:
        display = Resolution.parse(args.resolution)
    except ValueError as e:
        parser.error(str(e))

    game_kwargs = {
        k: v for k, v in vars(args).items()
        if k not in LAUNCHER_ARGS and v is not None
    }

    pygame.init()
    if args.fullscreen:
        window = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        width, height = window.get_size()
        display = Resolution(width=width, height=height)
    else:
        window = pygame.display.set_mode((display.width, display.height), pygame.RESIZABLE)
    pygame.display.set_caption(FruitFallMode.NAME)

    game = FruitFallMode(**game_kwargs)
    playfield = game.playfield
    surface = pygame.Surface((playfield.width, playfield.height))
    input_source = PygameInputSource(playfield, display)
    clock = pygame.time.Clock()

    log.info("%s %s at %dx%d, %d ticks/s", FruitFallMode.NAME, FruitFallMode.VERSION,
             display.width, display.height, args.fps)

    running = True
    while running:
        dt = clock.tick(args.fps) / 1000.0
        input_source.update(dt)

        # Events the input source did not consume
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                input_source.set_display(Resolution(width=max(1, event.w), height=max(1, event.h)))
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key in CONTROL_KEYS:
                    game.execute_action(CONTROL_KEYS[event.key])

        game.handle_input(input_source.poll_events())
        game.update(dt)
        game.render(surface)

        if surface.get_size() == window.get_size():
            window.blit(surface, (0, 0))
        else:
            pygame.transform.scale(surface, window.get_size(), window)
        pygame.display.flip()

    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
