"""Offline playthrough used by the ``flask sample-game`` command."""
import random

from nouns.models import GamePhase
from nouns.services.games.coordinator import GameCoordinator

MAX_SIMULATED_SECONDS = 60 * 60


class ManualClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start=0.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


def play_sample_game(seed=7, word_count=6, turn_duration=60, guess_rate=0.25, skip_rate=0.05):
    rng = random.Random(seed)
    clock = ManualClock()
    game = GameCoordinator(game_code='SIM', turn_duration=turn_duration,
                           rng=random.Random(seed), clock=clock)
    game.add_sample_words(word_count)
    game.proceed_to_word_input()
    game.start_game()
    game.begin_round()

    for _ in range(MAX_SIMULATED_SECONDS):
        if game.phase is GamePhase.GAME_OVER:
            break
        if game.phase is GamePhase.ROUND_TRANSITION:
            game.begin_next_turn()
            continue
        roll = rng.random()
        if roll < guess_rate:
            game.word_guessed()
        elif roll < guess_rate + skip_rate:
            game.skip_current_word()
        else:
            clock.advance(1)
            game.tick()
    return game
