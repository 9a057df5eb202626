"""Input handling for the two variants, independent of any display.

Each controller owns a GameSession and the physics state for its variant.
The front end forwards input events and calls update(dt_ms) once a frame.
"""
from game_session import AIMING, RESOLVING, GameSession, Scheduler
from shot_physics import (DragCapture, PowerOscillator, Projectile, drag_outcome, MAKE,
                          resolve_power_shot)

START_MESSAGE = "Press SPACE to Start"
SHOOT_MESSAGE = "Press SPACE to Shoot!"
DRAG_MESSAGE = "Pull back and release to shoot"
AIM_MESSAGE = "Release to shoot!"


class PowerMeterGame:
    def __init__(self, scheduler=None, on_event=None):
        self.scheduler = scheduler or Scheduler()
        self.session = GameSession(self.scheduler, idle_message=START_MESSAGE, on_event=on_event)
        self.session.on_reset(self._reset_shot)
        self.meter = PowerOscillator()
        self.last_outcome = None

    def press_space(self):
        """SPACE starts the meter, the next SPACE locks the power in."""
        if not self.session.active:
            return None
        if self.session.begin_aim(SHOOT_MESSAGE):
            self.meter.start()
            return None
        if self.session.phase != AIMING:
            return None
        return self.shoot(self.meter.stop())

    def restarted(self):
        """A fresh game once the session has ended, this one otherwise."""
        if self.session.active:
            return self
        return PowerMeterGame(on_event=self.session.on_event)

    def shoot(self, power):
        if not self.session.begin_resolve():
            return None
        outcome = resolve_power_shot(power)
        self.last_outcome = outcome
        self.session.record_shot(outcome.made, outcome.message)
        return outcome

    def update(self, dt_ms):
        self.scheduler.advance(dt_ms)
        if self.meter.charging:
            self.meter.step()

    def _reset_shot(self):
        self.meter.reset()
        self.last_outcome = None


class DragGame:
    def __init__(self, physics, scheduler=None, on_event=None):
        self.physics = physics
        self.scheduler = scheduler or Scheduler()
        self.session = GameSession(self.scheduler, idle_message=DRAG_MESSAGE, on_event=on_event)
        self.session.on_reset(self._reset_shot)
        self.drag = DragCapture(physics)
        self.ball = None
        self.launch = None
        self.last_outcome = None

    @property
    def ball_position(self):
        if self.ball is not None:
            return self.ball.x, self.ball.y
        return self.physics.ball_start

    def restarted(self):
        if self.session.active:
            return self
        return DragGame(self.physics, on_event=self.session.on_event)

    def pointer_down(self, x, y):
        if not self.session.begin_aim(AIM_MESSAGE):
            return False
        self.drag.begin(x, y)
        return True

    def pointer_move(self, x, y):
        if self.session.phase == AIMING:
            self.drag.move(x, y)

    def pointer_up(self, x=None, y=None):
        """Release the drag. Returns the Launch, or None when nothing was fired."""
        if self.session.phase != AIMING:
            return None
        if x is not None and y is not None:
            self.drag.move(x, y)
        launch = self.drag.release()
        if launch is None:
            self.session.cancel_aim()
            return None
        self.session.begin_resolve()
        self.launch = launch
        self.ball = Projectile(launch, self.physics)
        return launch

    def update(self, dt_ms):
        self.scheduler.advance(dt_ms)
        if self.session.phase != RESOLVING or self.ball is None or self.ball.result is not None:
            return None
        result = self.ball.step()
        if result is not None:
            outcome = drag_outcome(result, self.launch.velocity)
            self.last_outcome = outcome
            self.session.record_shot(result == MAKE, outcome.message)
        return result

    def _reset_shot(self):
        self.drag.cancel()
        self.ball = None
        self.launch = None
        self.last_outcome = None
