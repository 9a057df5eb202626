"""Constants and tunable settings shared by both free-throw variants."""
import argparse
import math

# Window
WIDTH, HEIGHT = 800, 480
FPS = 60
GROUND_Y = HEIGHT - 60

# Session
MAX_SHOTS = 10
RESET_DELAY_MS = 1500
GAME_OVER_DELAY_MS = 1200

# Power meter
POWER_STEP = 2
PERFECT_POWER = 50
MAKE_TOLERANCE = 10

# Colors
BACKGROUND = (30, 30, 40)
COURT = (150, 95, 50)
RIM = (220, 80, 40)
BACKBOARD = (200, 200, 200)
BALL = (240, 140, 30)
TIER_COLORS = {
    "sweet": (255, 215, 0),    # gold
    "good": (50, 205, 50),     # limegreen
    "bad": (255, 0, 0),
}


class DragPhysics:
    """Calibration for the drag variant.

    Velocities are in px/tick and gravity in px/tick^2. The defaults are
    tuned for the 800x480 window: a 45 degree pull of roughly 130 px drops
    the ball through the rim.
    """

    def __init__(self, gravity=0.25, velocity_scale=0.16, max_drag=150.0, min_drag=10.0,
                 ball_start=(120.0, 400.0), hoop_band=(620.0, 680.0), rim_band=(190.0, 205.0),
                 court=(WIDTH, HEIGHT)):
        self.gravity = gravity
        self.velocity_scale = velocity_scale
        self.max_drag = max_drag
        self.min_drag = min_drag
        self.ball_start = ball_start
        self.hoop_band = hoop_band
        self.rim_band = rim_band
        self.court = court

    def validate(self):
        numbers = [self.gravity, self.velocity_scale, self.max_drag, self.min_drag,
                   *self.ball_start, *self.hoop_band, *self.rim_band, *self.court]
        if not all(math.isfinite(n) for n in numbers):
            raise ValueError("drag calibration values must be finite numbers")
        if self.gravity <= 0:
            raise ValueError(f"gravity must be positive, got {self.gravity}")
        if self.velocity_scale <= 0:
            raise ValueError(f"velocity scale must be positive, got {self.velocity_scale}")
        if not 0 <= self.min_drag < self.max_drag:
            raise ValueError(f"need 0 <= min_drag < max_drag, got {self.min_drag} and {self.max_drag}")
        if self.hoop_band[0] >= self.hoop_band[1]:
            raise ValueError(f"hoop band is inverted: {self.hoop_band}")
        if self.rim_band[0] >= self.rim_band[1]:
            raise ValueError(f"rim band is inverted: {self.rim_band}")
        w, h = self.court
        x, y = self.ball_start
        if not (0 <= x <= w and 0 <= y <= h):
            raise ValueError(f"ball start {self.ball_start} is outside the court")
        return self


def add_arguments(parser: argparse.ArgumentParser):
    defaults = DragPhysics()
    parser.add_argument('--gravity', type=float, default=defaults.gravity,
                        help='drag variant gravity in px/tick^2')
    parser.add_argument('--velocity-scale', type=float, default=defaults.velocity_scale,
                        help='launch speed per pixel of drag')
    parser.add_argument('--max-drag', type=float, default=defaults.max_drag,
                        help='drag length (px) giving full power')
    parser.add_argument('--min-drag', type=float, default=defaults.min_drag,
                        help='drags shorter than this (px) cancel the shot')


def physics_from_args(args) -> DragPhysics:
    """Build and validate the drag calibration from parsed CLI arguments."""
    return DragPhysics(
        gravity=args.gravity,
        velocity_scale=args.velocity_scale,
        max_drag=args.max_drag,
        min_drag=args.min_drag,
    ).validate()
