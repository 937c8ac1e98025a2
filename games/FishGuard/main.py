#!/usr/bin/env python3
"""FishGuard - Standalone entry point.

Sneak the fox up to the fish before the bear gets there.
"""

import os
import sys
import time

import pygame

# Add project root to path
_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if _root not in sys.path:
    sys.path.insert(0, _root)

from bearwatch.games.input import InputEvent, InputManager
from bearwatch.games.input.sources.mouse import MouseInputSource
from bearwatch.logging import close_all_sinks
from games.FishGuard.config import FPS, SCREEN_HEIGHT, SCREEN_WIDTH
from games.FishGuard.game_mode import FishGuardMode


def main():
    pygame.init()
    screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.RESIZABLE)
    pygame.display.set_caption("Fish Guard")
    pygame.mouse.set_visible(False)

    input_manager = InputManager(MouseInputSource())
    game = FishGuardMode(width=SCREEN_WIDTH, height=SCREEN_HEIGHT,
                         pointer_provider=input_manager.get_pointer)
    clock = pygame.time.Clock()

    running = True
    while running:
        dt = clock.tick(FPS) / 1000.0
        input_manager.update(dt)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                screen = pygame.display.set_mode(event.size, pygame.RESIZABLE)
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_r:
                    game.handle_input([InputEvent.reset(time.monotonic())])

        game.handle_input(input_manager.get_events())
        game.update(dt)
        game.render(screen)
        pygame.display.flip()

    close_all_sinks()
    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
