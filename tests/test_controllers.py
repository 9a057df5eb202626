import os
import sys

# ensure project root is importable when running tests
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from game_config import DragPhysics
from game_session import AIMING, ENDED, IDLE, RESOLVING
from shot_controllers import (DRAG_MESSAGE, SHOOT_MESSAGE, START_MESSAGE, DragGame,
                              PowerMeterGame)
from shot_physics import MAKE, MISS

FRAME_MS = 16


def power_shot(game, ticks):
    game.press_space()
    for _ in range(ticks):
        game.update(0)
    return game.press_space()


def test_space_starts_then_locks_power():
    game = PowerMeterGame()
    assert game.session.message == START_MESSAGE
    assert game.press_space() is None
    assert game.meter.charging
    assert game.session.message == SHOOT_MESSAGE
    for _ in range(25):
        game.update(FRAME_MS)
    outcome = game.press_space()
    assert outcome.made
    assert not game.meter.charging
    assert (game.session.score, game.session.shot_count) == (1, 2)
    assert game.session.message == "SWISH! Power: 50%"


def test_long_shot_misses():
    game = PowerMeterGame()
    outcome = power_shot(game, 35)  # 70
    assert not outcome.made
    assert "Too long" in outcome.message
    assert (game.session.score, game.session.shot_count) == (0, 2)


def test_power_past_the_top_comes_back_down():
    game = PowerMeterGame()
    outcome = power_shot(game, 75)  # up to 100, back down to 50
    assert outcome.made


def test_space_while_resolving_is_ignored():
    game = PowerMeterGame()
    power_shot(game, 25)
    assert game.session.phase == RESOLVING
    assert game.press_space() is None
    assert game.session.shot_count == 2
    game.update(1500)
    assert game.session.phase == IDLE
    assert game.session.message == START_MESSAGE
    assert game.meter.value == 0
    assert game.last_outcome is None


def test_power_game_stops_after_ten_shots():
    game = PowerMeterGame()
    for _ in range(10):
        power_shot(game, 25)
        game.update(1500)
    assert game.session.phase == ENDED
    assert game.session.score == 10
    assert game.session.message == "GAME OVER! Final Score: 10/10"

    assert game.press_space() is None
    assert game.press_space() is None
    assert not game.meter.charging
    assert (game.session.score, game.session.shot_count) == (10, 11)


def test_short_drag_cancels_the_shot():
    game = DragGame(DragPhysics())
    assert game.pointer_down(100, 100)
    assert game.session.phase == AIMING
    assert game.pointer_up(97, 102) is None
    assert game.session.phase == IDLE
    assert game.session.message == DRAG_MESSAGE
    assert (game.session.score, game.session.shot_count) == (0, 1)
    assert game.ball is None


def fly(game):
    result = None
    ticks = 0
    while result is None:
        result = game.update(FRAME_MS)
        ticks += 1
        assert ticks < 1000
    return result, ticks


def test_drag_shot_scores():
    game = DragGame(DragPhysics())
    game.pointer_down(300, 300)
    game.pointer_move(250, 350)
    launch = game.pointer_up(209.375, 390.625)
    assert launch is not None
    assert game.session.phase == RESOLVING
    result, ticks = fly(game)
    assert result == MAKE
    assert ticks == 35
    assert (game.session.score, game.session.shot_count) == (1, 2)
    assert game.session.message == "SWISH!"


def test_drag_shot_misses_and_resets():
    game = DragGame(DragPhysics())
    game.pointer_down(300, 300)
    game.pointer_up(240, 300)
    result, _ = fly(game)
    assert result == MISS
    assert (game.session.score, game.session.shot_count) == (0, 2)
    # ball waits where it left the court until the reset fires
    assert game.update(FRAME_MS) is None
    assert game.ball is not None
    game.update(1500)
    assert game.session.phase == IDLE
    assert game.ball is None
    assert game.ball_position == game.physics.ball_start


def test_pointer_ignored_while_ball_in_flight():
    game = DragGame(DragPhysics())
    game.pointer_down(300, 300)
    game.pointer_up(240, 300)
    assert not game.pointer_down(10, 10)
    assert game.pointer_up(0, 0) is None
    assert game.session.shot_count == 1


def test_drag_game_stops_after_ten_shots():
    game = DragGame(DragPhysics())
    for _ in range(10):
        game.pointer_down(300, 300)
        game.pointer_up(240, 300)
        fly(game)
        game.update(1500)
    assert game.session.phase == ENDED
    assert not game.pointer_down(300, 300)
    assert game.pointer_up(200, 400) is None
    assert (game.session.score, game.session.shot_count) == (0, 11)


def test_restart_only_after_game_over():
    game = PowerMeterGame()
    power_shot(game, 25)
    assert game.restarted() is game

    for _ in range(9):
        game.update(1500)
        power_shot(game, 25)
    assert not game.session.active
    fresh = game.restarted()
    assert fresh is not game
    assert (fresh.session.score, fresh.session.shot_count) == (0, 1)
    assert fresh.session.shots_display == "1/10"
    assert fresh.session.message == START_MESSAGE


def test_drag_restart_keeps_calibration_and_console():
    events = []
    physics = DragPhysics(gravity=0.3)
    game = DragGame(physics, on_event=events.append)
    assert game.restarted() is game
    for _ in range(10):
        game.pointer_down(300, 300)
        game.pointer_up(240, 300)
        fly(game)
        game.update(1500)
    fresh = game.restarted()
    assert fresh is not game
    assert fresh.physics is physics
    assert fresh.session.phase == IDLE
    assert fresh.session.shots_display == "1/10"
    assert fresh.session.on_event == events.append
