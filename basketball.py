#!/usr/bin/env python3
"""Free-throw arcade game using Pygame.

Two ways to shoot:
- power mode (default): SPACE starts the power meter, SPACE again shoots.
  Stop the bar between 40 and 60 to score.
- drag mode: pull the ball back with the mouse (or a finger) and release.

Ten shots per game. R restarts after the final buzzer, ESC quits.

Usage:
    python3 basketball.py [--mode power|drag] [--verbose]
"""
import sys
import argparse

try:
    import pygame
except ImportError:
    print("pygame not installed, run: pip install -e .")
    sys.exit(1)

import game_config
from game_config import FPS, HEIGHT, WIDTH, BACKGROUND
from hud import draw_ball, draw_court, draw_game_over, draw_hud, draw_power_bar
from shot_controllers import PowerMeterGame
from sound_effects import SoundBoard

BALL_START = (WIDTH // 2, HEIGHT - 80)
HOOP_W = 60
HOOP_X = WIDTH // 2 - HOOP_W // 2
HOOP_Y = BALL_START[1] - 300
FLIGHT_MS = 1000


def ease_out(frac):
    frac = max(0.0, min(1.0, frac))
    return 1 - (1 - frac) ** 2


def ball_position(outcome, flight_ms):
    """Ball centre during the shot animation: an eased move toward the outcome target."""
    x0, y0 = BALL_START
    if outcome is None:
        return x0, y0
    tx, ty = outcome.target
    k = ease_out(flight_ms / FLIGHT_MS)
    # lift the middle of the move a bit so it reads as an arc
    arc = 80 * 4 * k * (1 - k)
    return x0 + tx * k, y0 + ty * k - arc


def run_power(verbose=False, smoke=False):
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Free Throw")
    clock = pygame.time.Clock()
    sounds = SoundBoard(enabled=not smoke)

    on_event = print if verbose else None
    game = PowerMeterGame(on_event=on_event)
    flight_ms = 0

    print("OK")

    running = True
    while running:
        dt = clock.tick(FPS)
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    outcome = game.press_space()
                    if outcome is not None:
                        flight_ms = 0
                        sounds.play('swish' if outcome.made else 'miss')
                        if not game.session.active:
                            sounds.play('buzzer')
                elif event.key == pygame.K_r:
                    restarted = game.restarted()
                    if restarted is not game:
                        game = restarted
                        flight_ms = 0

        game.update(dt)
        flight_ms += dt

        screen.fill(BACKGROUND)
        draw_court(screen, HOOP_X, HOOP_Y, HOOP_W)
        bx, by = ball_position(game.last_outcome, flight_ms)
        spin = ease_out(flight_ms / FLIGHT_MS) * 6.28 if game.last_outcome else 0.0
        draw_ball(screen, bx, by, spin=spin)
        if game.meter.charging:
            draw_power_bar(screen, game.meter.value)
        draw_hud(screen, game.session)
        if game.session.summary_shown:
            draw_game_over(screen, game.session)

        pygame.display.flip()
        if smoke:
            running = False


def main(argv=None):
    parser = argparse.ArgumentParser(description='Free-throw arcade basketball')
    parser.add_argument('--mode', choices=['power', 'drag'], default='power',
                        help='power meter (keyboard) or drag-to-aim (mouse/touch)')
    parser.add_argument('--verbose', action='store_true', help='print every shot to the console')
    parser.add_argument('--smoke', action='store_true', help='draw one frame, print OK and exit')
    game_config.add_arguments(parser)
    args = parser.parse_args(argv)

    try:
        physics = game_config.physics_from_args(args)
    except ValueError as e:
        parser.error(str(e))

    pygame.init()
    try:
        if args.mode == 'drag':
            from basketball_drag import run_drag
            run_drag(physics, verbose=args.verbose, smoke=args.smoke)
        else:
            run_power(verbose=args.verbose, smoke=args.smoke)
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
