"""Score/shot bookkeeping and the shot lifecycle shared by both variants."""
from typing import Callable, List, Tuple

from game_config import GAME_OVER_DELAY_MS, MAX_SHOTS, RESET_DELAY_MS

IDLE = "idle"
AIMING = "aiming"
RESOLVING = "resolving"
ENDED = "ended"


class Scheduler:
    """Fire-once timers driven by frame time instead of the wall clock.

    The game loop passes each frame's delta to advance(); tests do the same
    with whatever deltas they like.
    """

    def __init__(self):
        self.now = 0
        self._pending: List[Tuple[int, int, Callable]] = []
        self._seq = 0

    def call_later(self, delay_ms, callback):
        self._seq += 1
        self._pending.append((self.now + int(delay_ms), self._seq, callback))

    def advance(self, dt_ms):
        self.now += int(dt_ms)
        due = sorted(p for p in self._pending if p[0] <= self.now)
        if not due:
            return 0
        self._pending = [p for p in self._pending if p[0] > self.now]
        for _, _, callback in due:
            callback()
        return len(due)

    def pending(self):
        return len(self._pending)


class GameSession:
    """One ten-shot game.

    Phases run idle -> aiming -> resolving -> idle, or -> ended once the
    shot counter passes MAX_SHOTS. Only record_shot() changes the score.
    """

    def __init__(self, scheduler=None, max_shots=MAX_SHOTS, idle_message="", on_event=None):
        self.scheduler = scheduler or Scheduler()
        self.max_shots = max_shots
        self.idle_message = idle_message
        self.on_event = on_event
        self.score = 0
        self.shot_count = 1
        self.phase = IDLE
        self.summary_shown = False
        self.message = idle_message
        self._reset_hooks: List[Callable] = []

    @property
    def active(self):
        return self.phase != ENDED

    @property
    def shots_display(self):
        return f"{min(self.shot_count, self.max_shots)}/{self.max_shots}"

    def on_reset(self, hook):
        self._reset_hooks.append(hook)

    def begin_aim(self, message=None):
        if self.phase != IDLE:
            return False
        self.phase = AIMING
        if message is not None:
            self.message = message
        return True

    def cancel_aim(self):
        if self.phase == AIMING:
            self.reset()

    def begin_resolve(self):
        if self.phase != AIMING:
            return False
        self.phase = RESOLVING
        return True

    def record_shot(self, made, message):
        """Count a resolved shot. Returns True when it was the last one."""
        if self.phase != RESOLVING:
            return False
        if made:
            self.score += 1
        self.shot_count += 1
        self.message = message
        self._emit(f"shot {self.shot_count - 1}: {message} (score {self.score})")

        if self.shot_count > self.max_shots:
            self.phase = ENDED
            self.scheduler.call_later(GAME_OVER_DELAY_MS, self._show_game_over)
            return True
        self.scheduler.call_later(RESET_DELAY_MS, self.reset)
        return False

    def reset(self):
        if self.phase == ENDED:
            return
        self.phase = IDLE
        self.message = self.idle_message
        for hook in self._reset_hooks:
            hook()

    def _show_game_over(self):
        self.message = f"GAME OVER! Final Score: {self.score}/{self.max_shots}"
        self.summary_shown = True
        self._emit(self.message)

    def _emit(self, text):
        if self.on_event:
            self.on_event(text)
