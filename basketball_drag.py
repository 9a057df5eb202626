"""Drag-to-aim variant: pull the ball back like a slingshot and let go.

Run through ``basketball.py --mode drag``.
"""
import pygame

from game_config import BACKGROUND, FPS, HEIGHT, WIDTH
from hud import draw_aim, draw_ball, draw_court, draw_game_over, draw_hud, draw_text
from shot_controllers import DragGame
from sound_effects import SoundBoard
from shot_physics import MAKE


def finger_pos(event):
    # finger events carry normalized 0..1 coordinates
    return event.x * WIDTH, event.y * HEIGHT


def handle_pointer(game, event):
    """Route mouse and touch events to the controller. Returns a Launch on release."""
    # pygame mirrors touches as mouse events; only take them once
    if event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEMOTION, pygame.MOUSEBUTTONUP) \
            and getattr(event, 'touch', False):
        return None
    if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        game.pointer_down(*event.pos)
    elif event.type == pygame.MOUSEMOTION:
        game.pointer_move(*event.pos)
    elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
        return game.pointer_up(*event.pos)
    elif event.type == pygame.FINGERDOWN:
        game.pointer_down(*finger_pos(event))
    elif event.type == pygame.FINGERMOTION:
        game.pointer_move(*finger_pos(event))
    elif event.type == pygame.FINGERUP:
        return game.pointer_up(*finger_pos(event))
    return None


def run_drag(physics, verbose=False, smoke=False):
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Free Throw - Drag")
    clock = pygame.time.Clock()
    sounds = SoundBoard(enabled=not smoke)

    on_event = print if verbose else None
    game = DragGame(physics, on_event=on_event)
    trail = []

    hoop_left, hoop_right = physics.hoop_band
    rim_top, _ = physics.rim_band

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
                elif event.key == pygame.K_r:
                    restarted = game.restarted()
                    if restarted is not game:
                        game = restarted
                        trail = []
            else:
                launch = handle_pointer(game, event)
                if launch is not None:
                    trail = []
                    if verbose:
                        print(f"launch {launch}")

        result = game.update(dt)
        if game.ball is not None and game.ball.result is None:
            trail.append(game.ball_position)
        elif game.ball is None:
            trail = []
        if result is not None:
            sounds.play('swish' if result == MAKE else 'miss')
            if not game.session.active:
                sounds.play('buzzer')

        screen.fill(BACKGROUND)
        draw_court(screen, hoop_left, rim_top, hoop_right - hoop_left)
        for px, py in trail[::3]:
            pygame.draw.circle(screen, (120, 120, 140), (int(px), int(py)), 2)
        bx, by = game.ball_position
        draw_ball(screen, bx, by, spin=(game.ball.t * 0.2 if game.ball else 0.0))
        if game.drag.active:
            length, angle = game.drag.indicator()
            draw_aim(screen, physics.ball_start, length, angle)
            draw_text(screen, f"{length / physics.max_drag * 100:.0f}%", bx + 16, by - 30, size=22)
        draw_hud(screen, game.session)
        if game.session.summary_shown:
            draw_game_over(screen, game.session)

        pygame.display.flip()
        if smoke:
            running = False
