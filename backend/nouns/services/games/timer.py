from typing import List

from .events import TimerExpired, TimerTicked

MIN_DURATION_SEC = 10
MAX_DURATION_SEC = 120


class TurnTimer:
    """Countdown clock for a single turn.

    The timer holds no thread of its own; a driver calls ``tick()`` once per
    second while ``is_running``. ``generation`` changes on every start and
    stop so a driver can tell whether it still owns the running countdown.
    """

    def __init__(self, duration: int = 60):
        self.duration = _clamp(duration)
        self.time_remaining = self.duration
        self.is_running = False
        self.generation = 0

    def start(self) -> int:
        if not self.is_running:
            self.is_running = True
            self.generation += 1
        return self.generation

    def stop(self) -> None:
        if not self.is_running:
            return
        self.is_running = False
        self.generation += 1

    def reset(self) -> None:
        self.stop()
        self.time_remaining = self.duration

    def update_duration(self, duration: int) -> None:
        self.duration = _clamp(duration)
        if not self.is_running:
            self.time_remaining = self.duration

    def tick(self) -> List[object]:
        if not self.is_running:
            return []
        self.time_remaining = max(0, self.time_remaining - 1)
        events: List[object] = [TimerTicked(self.time_remaining)]
        if self.time_remaining == 0:
            self.stop()
            events.append(TimerExpired())
        return events

    def to_dict(self):
        return {
            'duration': self.duration,
            'time_remaining': self.time_remaining,
            'is_running': self.is_running,
        }


def _clamp(duration) -> int:
    return max(MIN_DURATION_SEC, min(MAX_DURATION_SEC, int(duration)))
