import time
from typing import Set, Tuple

from nouns import socketio
from .events import TimerExpired
from .sessions import get_game


_scheduled_timer_keys: Set[Tuple[str, int]] = set()


def room_for(game_code: str) -> str:
    return f"game:{game_code.upper()}"


def emit_state_update(game) -> None:
    socketio.emit('state_update', game.to_dict(), to=room_for(game.game_code), namespace='/ws')


def schedule_turn_timer(app, game_code: str) -> None:
    """Drive the running turn timer of the given game once per tick.

    - No-ops in TESTING mode unless ENABLE_SCHEDULER_IN_TESTS is set
    - Ensures a single worker per (game_code, timer generation)
    - Stops when the countdown it was started for is stopped, replaced or expires
    """
    if app.config.get('TESTING') and not app.config.get('ENABLE_SCHEDULER_IN_TESTS'):
        return

    game = get_game(game_code)
    if not game or not game.timer.is_running:
        return

    generation = game.timer.generation
    key = (game.game_code, generation)
    if key in _scheduled_timer_keys:
        app.logger.info(f"[timer-skip] game={game.game_code} generation={generation} already scheduled")
        return
    _scheduled_timer_keys.add(key)

    interval = float(app.config.get('TIMER_TICK_SEC', 1))
    app.logger.info(
        f"[timer-set] game={game.game_code} generation={generation} remaining={game.timer.time_remaining}s"
    )

    def _worker(code: str, expected_generation: int, delay: float):
        hb = int(app.config.get('TIMER_HEARTBEAT_SEC', 0))
        last_heartbeat = time.monotonic()
        try:
            while True:
                socketio.sleep(delay)
                g = get_game(code)
                if not g:
                    app.logger.info(f"[timer-abort] game={code} no longer exists")
                    return
                events = g.tick(expected_generation)
                if not events:
                    app.logger.info(
                        f"[timer-abort] game={code} generation={expected_generation} "
                        f"actual={g.timer.generation} phase={g.phase.value}"
                    )
                    return
                emit_state_update(g)
                if any(isinstance(e, TimerExpired) for e in events):
                    app.logger.info(f"[timer-fire] game={code} phase={g.phase.value}")
                    socketio.emit('timer_expired', {'game_code': code}, to=room_for(code), namespace='/ws')
                    return
                if hb > 0 and time.monotonic() - last_heartbeat >= hb:
                    last_heartbeat = time.monotonic()
                    app.logger.info(
                        f"[timer-heartbeat] game={code} remaining={g.timer.time_remaining}s"
                    )
        finally:
            _scheduled_timer_keys.discard((code, expected_generation))

    if app.config.get('TESTING'):
        _worker(game.game_code, generation, interval)
    else:
        socketio.start_background_task(_worker, game.game_code, generation, interval)
