"""In-memory registry of running games, keyed by their short join code.

Games live for the lifetime of the process only.
"""
import logging
import random
import string
import threading
from typing import Dict, Optional

from .coordinator import GameCoordinator

logger = logging.getLogger(__name__)

_games: Dict[str, GameCoordinator] = {}
_registry_lock = threading.Lock()


def generate_game_code(length=4):
    """Generate a unique, short game code."""
    while True:
        code = ''.join(random.choices(string.ascii_uppercase + string.digits, k=length))
        if code not in _games:
            return code


def create_game(turn_duration: int = 60, skip_enabled: bool = True, **kwargs) -> GameCoordinator:
    with _registry_lock:
        code = generate_game_code()
        game = GameCoordinator(game_code=code, turn_duration=turn_duration,
                               skip_enabled=skip_enabled, **kwargs)
        _games[code] = game
    logger.info(f"[game-created] game={code} duration={game.timer.duration}s skip={skip_enabled}")
    return game


def get_game(game_code: str) -> Optional[GameCoordinator]:
    if not game_code:
        return None
    return _games.get(game_code.upper())


def end_game(game_code: str) -> Optional[GameCoordinator]:
    with _registry_lock:
        game = _games.pop((game_code or '').upper(), None)
    if game is not None:
        game.stop_timer()
        logger.info(f"[game-ended] game={game.game_code}")
    return game


def clear_games() -> None:
    with _registry_lock:
        for game in _games.values():
            game.stop_timer()
        _games.clear()
