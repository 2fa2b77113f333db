from nouns.services.games.events import TimerExpired, TimerTicked
from nouns.services.games.timer import TurnTimer


def test_countdown_expires_once_at_zero():
    timer = TurnTimer(duration=10)
    timer.start()
    events = []
    for _ in range(12):
        events.extend(timer.tick())
    assert sum(isinstance(e, TimerExpired) for e in events) == 1
    assert [e.remaining for e in events if isinstance(e, TimerTicked)] == list(range(9, -1, -1))
    assert timer.time_remaining == 0
    assert not timer.is_running


def test_tick_when_stopped_is_noop():
    timer = TurnTimer(duration=30)
    assert timer.tick() == []
    assert timer.time_remaining == 30


def test_stop_is_idempotent():
    timer = TurnTimer(duration=30)
    gen = timer.start()
    timer.tick()
    timer.stop()
    after_first = (timer.time_remaining, timer.generation)
    timer.stop()
    assert (timer.time_remaining, timer.generation) == after_first
    assert timer.generation != gen


def test_start_twice_keeps_generation():
    timer = TurnTimer()
    gen = timer.start()
    assert timer.start() == gen


def test_reset_restores_full_duration():
    timer = TurnTimer(duration=20)
    timer.start()
    timer.tick()
    timer.reset()
    assert timer.time_remaining == 20
    assert not timer.is_running


def test_duration_is_clamped():
    assert TurnTimer(duration=5).duration == 10
    assert TurnTimer(duration=500).duration == 120
    timer = TurnTimer(duration=60)
    timer.update_duration(90)
    assert timer.time_remaining == 90


def test_update_duration_while_running_keeps_remaining():
    timer = TurnTimer(duration=60)
    timer.start()
    timer.tick()
    timer.update_duration(30)
    assert timer.duration == 30
    assert timer.time_remaining == 59
