"""Pure shot mechanics for both variants.

Nothing in here touches pygame: the front ends feed input in and draw the
results, tests drive these classes directly.
"""
import math

from game_config import MAKE_TOLERANCE, PERFECT_POWER, POWER_STEP


class ShotOutcome:
    def __init__(self, made, message, target=(0, 0)):
        self.made = made
        self.message = message
        # where the ball animation should end, relative to the release point
        self.target = target

    def __repr__(self):
        return f"ShotOutcome(made={self.made!r}, message={self.message!r})"


# ---------------------------------------------------------------------------
# Power meter
# ---------------------------------------------------------------------------

class PowerOscillator:
    """Ping-pong power value in [0, 100] advanced once per tick.

    The raw counter runs 0..199 and wraps; anything above 100 folds back
    as ``200 - raw`` so the public value climbs to 100 and back down to 0.
    """

    def __init__(self, step=POWER_STEP):
        self.step_size = step
        self.raw = 0
        self.charging = False

    @property
    def value(self):
        return 200 - self.raw if self.raw > 100 else self.raw

    def start(self):
        self.raw = 0
        self.charging = True

    def step(self):
        if not self.charging:
            return self.value
        self.raw = (self.raw + self.step_size) % 200
        return self.value

    def stop(self):
        """Lock in the current value."""
        self.charging = False
        return self.value

    def reset(self):
        self.raw = 0
        self.charging = False


def power_tier(value):
    if 45 <= value <= 55:
        return "sweet"
    if 30 < value < 70:
        return "good"
    return "bad"


def is_make(power):
    return abs(power - PERFECT_POWER) <= MAKE_TOLERANCE


def resolve_power_shot(power) -> ShotOutcome:
    diff = abs(power - PERFECT_POWER)
    shown = f"{power:.0f}"
    if diff <= MAKE_TOLERANCE:
        return ShotOutcome(True, f"SWISH! Power: {shown}%", target=(0, -300))
    side = "short" if power < PERFECT_POWER else "long"
    miss_x = 50 if power > PERFECT_POWER else -50
    miss_y = -200 + diff * 2
    return ShotOutcome(False, f"MISS! Too {side}. Power: {shown}%", target=(miss_x, miss_y))


# ---------------------------------------------------------------------------
# Drag and projectile
# ---------------------------------------------------------------------------

class Launch:
    def __init__(self, velocity, angle):
        self.velocity = velocity
        self.angle = angle  # radians above horizontal

    def __repr__(self):
        return f"Launch(velocity={self.velocity:.2f}, angle={math.degrees(self.angle):.1f}deg)"


class DragCapture:
    """Slingshot-style pull behind the ball.

    ``dx`` is clamped to <= 0 so the ball can only be pulled away from the
    hoop, which sits to the right.
    """

    def __init__(self, physics):
        self.physics = physics
        self.active = False
        self.start = (0.0, 0.0)
        self.current = (0.0, 0.0)

    def begin(self, x, y):
        self.active = True
        self.start = (x, y)
        self.current = (x, y)

    def move(self, x, y):
        if self.active:
            self.current = (x, y)

    def cancel(self):
        self.active = False

    @property
    def vector(self):
        dx = min(0.0, self.current[0] - self.start[0])
        dy = self.current[1] - self.start[1]
        return dx, dy

    @property
    def distance(self):
        return math.hypot(*self.vector)

    @property
    def angle(self):
        dx, dy = self.vector
        return math.atan2(dy, -dx)

    def indicator(self):
        """(length, angle) of the aiming arrow, for drawing only."""
        return min(self.distance, self.physics.max_drag), self.angle

    def release(self):
        """End the drag. Returns a Launch, or None if the pull was too short."""
        if not self.active:
            return None
        self.active = False
        dist = self.distance
        if dist < self.physics.min_drag:
            return None
        velocity = min(dist, self.physics.max_drag) * self.physics.velocity_scale
        return Launch(velocity, self.angle)


MAKE = "make"
MISS = "miss"


class Projectile:
    """Stepped parabolic flight in screen coordinates (y grows downward)."""

    def __init__(self, launch, physics):
        self.physics = physics
        self.x0, self.y0 = physics.ball_start
        self.vx = launch.velocity * math.cos(launch.angle)
        self.vy = launch.velocity * math.sin(launch.angle)
        self.t = 0
        self.x, self.y = self.x0, self.y0
        self.result = None

    def step(self):
        """Advance one tick and return MAKE, MISS or None while in flight."""
        if self.result is not None:
            return self.result
        self.t += 1
        t = self.t
        self.x = self.x0 + self.vx * t
        self.y = self.y0 - (self.vy * t - self.physics.gravity * t * t)
        self.result = self._check()
        return self.result

    def _check(self):
        left, right = self.physics.hoop_band
        top, bottom = self.physics.rim_band
        if left <= self.x <= right and top <= self.y <= bottom:
            return MAKE
        w, h = self.physics.court
        if self.x < 0 or self.x > w or self.y < 0 or self.y > h:
            return MISS
        return None


def simulate(launch, physics, max_ticks=10000):
    """Fly a shot to completion. Returns (result, path)."""
    ball = Projectile(launch, physics)
    path = [(ball.x, ball.y)]
    for _ in range(max_ticks):
        result = ball.step()
        path.append((ball.x, ball.y))
        if result is not None:
            return result, path
    return MISS, path


def drag_outcome(result, velocity):
    if result == MAKE:
        return ShotOutcome(True, "SWISH!")
    return ShotOutcome(False, f"MISS! Speed: {velocity:.1f}")
