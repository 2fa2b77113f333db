"""Phase state machine for a single game.

The coordinator is the only object that talks to every manager. Managers
report back through the events returned by their mutating methods, which the
coordinator applies in ``_dispatch``.

Phases: setup <-> word_input -> game_overview -> playing <-> round_transition
-> game_over. Intents that do not fit the current phase return False and
leave all state untouched.
"""
import functools
import logging
import random
import threading
import time
from typing import Callable, List, Optional, Tuple

from nouns.models import (
    GamePhase,
    TransitionReason,
    Word,
    WordStat,
    WordsPerMinuteData,
    WordValidationResult,
)
from .analytics import AnalyticsLedger
from .events import TimerExpired, TimerTicked, WordSkipped, WordTimeRecorded
from .rounds import RoundTracker
from .scoring import ScoreBoard
from .timer import TurnTimer
from .words import WordPool

logger = logging.getLogger(__name__)

_PRE_GAME_PHASES = (GamePhase.SETUP, GamePhase.WORD_INPUT)


def _locked(method):
    # Timer ticks arrive from a background task; every public call runs under
    # the game lock so a tick can never interleave with a guess or skip.
    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        with self._lock:
            return method(self, *args, **kwargs)
    return wrapper


class GameCoordinator:

    def __init__(self, game_code: str = '', turn_duration: int = 60,
                 skip_enabled: bool = True, rng: Optional[random.Random] = None,
                 clock: Callable[[], float] = time.monotonic):
        self.game_code = game_code
        self.phase = GamePhase.SETUP
        self.skip_enabled = skip_enabled
        self.timer = TurnTimer(turn_duration)
        self.scores = ScoreBoard()
        self.rounds = RoundTracker()
        self.words = WordPool(rng=rng, clock=clock)
        self.analytics = AnalyticsLedger(clock=clock)
        self._lock = threading.RLock()

    # ---- setup / word input ----

    @_locked
    def update_settings(self, turn_duration: Optional[int] = None,
                        skip_enabled: Optional[bool] = None) -> bool:
        if self.phase not in _PRE_GAME_PHASES:
            return False
        if turn_duration is not None:
            self.timer.update_duration(turn_duration)
        if skip_enabled is not None:
            self.skip_enabled = bool(skip_enabled)
        return True

    @_locked
    def add_word(self, text: str) -> Optional[Word]:
        if self.phase not in _PRE_GAME_PHASES:
            return None
        return self.words.add_word(text)

    @_locked
    def validate_word(self, text: str) -> WordValidationResult:
        return self.words.validate_word(text)

    @_locked
    def add_sample_words(self, count: int = 5) -> List[Word]:
        if self.phase not in _PRE_GAME_PHASES:
            return []
        return self.words.add_sample_words(count)

    @_locked
    def can_start_game(self) -> bool:
        return self.words.can_start_game()

    @_locked
    def proceed_to_word_input(self) -> bool:
        if self.phase is not GamePhase.SETUP:
            return False
        self._set_phase(GamePhase.WORD_INPUT)
        return True

    @_locked
    def go_to_setup(self) -> bool:
        if self.phase is not GamePhase.WORD_INPUT:
            return False
        self._set_phase(GamePhase.SETUP)
        return True

    @_locked
    def start_game(self) -> bool:
        if self.phase not in _PRE_GAME_PHASES or not self.words.can_start_game():
            return False
        self._reset_progress()
        self._set_phase(GamePhase.GAME_OVERVIEW)
        return True

    # ---- play ----

    @_locked
    def begin_round(self) -> bool:
        if self.phase is not GamePhase.GAME_OVERVIEW:
            return False
        self.timer.reset()
        self._setup_round()
        self._set_phase(GamePhase.PLAYING)
        self._start_turn()
        return True

    @_locked
    def begin_next_turn(self) -> bool:
        """Resume play from the transition screen.

        After a timer expiry the other team (already switched) takes a fresh
        turn in the same round. After the words ran out the same team carries
        on into the next round with whatever time it had left.
        """
        if self.phase is not GamePhase.ROUND_TRANSITION:
            return False
        if self.rounds.last_transition_reason is TransitionReason.WORDS_EXHAUSTED:
            self.rounds.advance_round()
        self._setup_round()
        self._set_phase(GamePhase.PLAYING)
        self._start_turn()
        return True

    @_locked
    def word_guessed(self) -> bool:
        current = self.words.current_word
        if self.phase is not GamePhase.PLAYING or current is None:
            return False
        team, round_type = self.rounds.current_team, self.rounds.current_round
        self.analytics.record_correct_guess(team, round_type)
        self.rounds.mark_word_used(current.id)
        self._dispatch(self.words.mark_current_word_guessed())
        self.scores.increment_score(team)
        if self.words.has_unused_words():
            self.words.get_next_word()
        else:
            self._words_exhausted()
        return True

    @_locked
    def skip_current_word(self) -> bool:
        if self.phase is not GamePhase.PLAYING or not self.skip_enabled:
            return False
        events = self.words.skip_current_word()
        self._dispatch(events)
        return bool(events)

    @_locked
    def tick(self, generation: Optional[int] = None) -> List[object]:
        """Advance the turn timer by one second.

        ``generation`` lets a timer driver bail out once the countdown it was
        started for has been stopped or replaced.
        """
        if generation is not None and generation != self.timer.generation:
            return []
        if self.phase is not GamePhase.PLAYING:
            return []
        events = self.timer.tick()
        self._dispatch(events)
        return events

    @_locked
    def stop_timer(self) -> None:
        self.timer.stop()

    @_locked
    def reset_game(self) -> None:
        self.timer.stop()
        self.words.reset_words()
        self._reset_progress()
        self._set_phase(GamePhase.SETUP)

    # ---- results ----

    @_locked
    def get_winner(self) -> Optional[int]:
        return self.scores.get_winner()

    @_locked
    def get_word_statistics(self) -> List[WordStat]:
        return self.analytics.get_word_statistics(self.words.words)

    @_locked
    def get_words_per_minute_data(self) -> List[WordsPerMinuteData]:
        return self.analytics.get_words_per_minute_data()

    @_locked
    def get_overall_words_per_minute(self) -> Tuple[Optional[float], Optional[float]]:
        return self.analytics.get_overall_words_per_minute()

    @_locked
    def get_stats(self):
        """Everything the results screen shows, read in one consistent pass."""
        ledger = self.analytics.to_dict()
        ledger['word_statistics'] = [s.to_dict() for s in self.get_word_statistics()]
        ledger.update({
            'phase': self.phase.value,
            'winner': self.scores.get_winner(),
            'scores': self.scores.to_dict(),
        })
        return ledger

    @_locked
    def to_dict(self):
        return {
            'game_code': self.game_code,
            'phase': self.phase.value,
            'skip_enabled': self.skip_enabled,
            'can_skip': self.skip_enabled and self.words.can_skip,
            'timer': self.timer.to_dict(),
            'scores': self.scores.to_dict(),
            'rounds': self.rounds.to_dict(),
            'words': self.words.to_dict(),
        }

    # ---- internals ----

    def _set_phase(self, phase: GamePhase) -> None:
        if phase is not self.phase:
            logger.info(f"[phase] game={self.game_code} {self.phase.value} -> {phase.value}")
        self.phase = phase

    def _reset_progress(self) -> None:
        self.scores.reset_scores()
        self.rounds.reset_to_first_round()
        self.timer.reset()
        self.analytics.reset_analytics()

    def _setup_round(self) -> None:
        team, round_type = self.rounds.current_team, self.rounds.current_round
        self.words.setup_for_round(self.rounds.used_word_ids)
        # First entry only; re-initializing would wipe time already accumulated
        if round_type not in self.analytics.round_stats:
            self.analytics.initialize_round_stats(round_type)
        self.analytics.open_interval(team, round_type)

    def _start_turn(self) -> None:
        if self.words.has_unused_words():
            self.words.get_next_word()
        self.timer.start()
        logger.info(
            f"[turn-start] game={self.game_code} team={self.rounds.current_team} "
            f"round={self.rounds.current_round.name} remaining={self.timer.time_remaining}s"
        )

    def _end_turn(self) -> None:
        team, round_type = self.rounds.current_team, self.rounds.current_round
        self.analytics.close_interval(team, round_type)
        self.scores.record_current_team_turn_score(team)

    def _words_exhausted(self) -> None:
        self.timer.stop()
        self._end_turn()
        self.rounds.last_transition_reason = TransitionReason.WORDS_EXHAUSTED
        logger.info(
            f"[words-exhausted] game={self.game_code} team={self.rounds.current_team} "
            f"round={self.rounds.current_round.name}"
        )
        if self.rounds.is_final_round:
            self._set_phase(GamePhase.GAME_OVER)
        else:
            self._set_phase(GamePhase.ROUND_TRANSITION)

    def _timer_expired(self) -> None:
        if not self.words.has_unused_words():
            self._words_exhausted()
            return
        self._dispatch(self.words.release_current_word())
        self._end_turn()
        logger.info(
            f"[timer-expired] game={self.game_code} team={self.rounds.current_team} "
            f"round={self.rounds.current_round.name}"
        )
        self.rounds.switch_team()
        self.timer.reset()
        self.rounds.last_transition_reason = TransitionReason.TIMER_EXPIRED
        self._set_phase(GamePhase.ROUND_TRANSITION)

    def _dispatch(self, events) -> None:
        for event in events:
            if isinstance(event, WordSkipped):
                self.analytics.record_word_skip(event.word_id)
                skipped = self.words.get_word_by_id(event.word_id)
                logger.debug(f"[word-skipped] game={self.game_code} word={skipped.text if skipped else event.word_id}")
            elif isinstance(event, WordTimeRecorded):
                self.analytics.record_word_time(event.word_id, event.seconds)
            elif isinstance(event, TimerExpired):
                self._timer_expired()
            elif isinstance(event, TimerTicked):
                logger.debug(f"[timer-tick] game={self.game_code} remaining={event.remaining}s")
