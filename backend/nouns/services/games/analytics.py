"""Time ledger and derived stats (words per minute, hardest words).

Play time is attributed per (team, round) through timing intervals. An
interval opens when a team starts playing a round and is closed when the
timer expires, when the round's words run out, or when the game ends.
Closing adds the elapsed seconds to that pair's accumulated time, so a
single countdown that spans a round change is split across both rounds.
"""
import logging
import time
from typing import Callable, Dict, List, Optional, Tuple

from nouns.models import RoundStats, RoundType, Word, WordStat, WordsPerMinuteData

logger = logging.getLogger(__name__)


def words_per_minute(correct: int, seconds: float) -> Optional[float]:
    # None rather than 0.0: no time played means no measured rate
    if seconds <= 0:
        return None
    return correct / (seconds / 60.0)


class AnalyticsLedger:

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self.reset_analytics()

    def reset_analytics(self) -> None:
        self.skips_by_word: Dict[str, int] = {}
        self.time_spent_by_word: Dict[str, int] = {}
        self.round_stats: Dict[RoundType, RoundStats] = {}
        self._interval_starts: Dict[Tuple[int, RoundType], float] = {}
        self._interval_closed = False

    # ---- per word ----

    def record_word_skip(self, word_id: str) -> None:
        self.skips_by_word[word_id] = self.skips_by_word.get(word_id, 0) + 1

    def record_word_time(self, word_id: str, seconds: int) -> None:
        self.time_spent_by_word[word_id] = self.time_spent_by_word.get(word_id, 0) + seconds

    # ---- per round ----

    def initialize_round_stats(self, round_type: RoundType) -> None:
        self.round_stats[round_type] = RoundStats()

    def ensure_round_stats(self, round_type: RoundType) -> RoundStats:
        if round_type not in self.round_stats:
            self.initialize_round_stats(round_type)
        return self.round_stats[round_type]

    def record_correct_guess(self, team: int, round_type: RoundType) -> None:
        self.ensure_round_stats(round_type).add_correct(team)

    def open_interval(self, team: int, round_type: RoundType) -> None:
        self._interval_starts[(team, round_type)] = self._clock()
        self._interval_closed = False

    def has_open_interval(self, team: int, round_type: RoundType) -> bool:
        return not self._interval_closed and (team, round_type) in self._interval_starts

    def close_interval(self, team: int, round_type: RoundType) -> float:
        """Account the open interval for (team, round). Returns seconds added.

        Only the first close after an open counts; later closes for the same
        event return 0.0.
        """
        if self._interval_closed:
            return 0.0
        started = self._interval_starts.get((team, round_type))
        if started is None:
            return 0.0
        now = self._clock()
        elapsed = max(0.0, now - started)
        self.ensure_round_stats(round_type).add_time(team, elapsed)
        self._interval_starts[(team, round_type)] = now
        self._interval_closed = True
        logger.info(f"[time-recorded] team={team} round={round_type.name} seconds={elapsed:.2f}")
        return elapsed

    # ---- derived ----

    def get_words_per_minute_data(self) -> List[WordsPerMinuteData]:
        data = []
        for round_type in RoundType:
            stats = self.round_stats.get(round_type)
            if stats is None:
                continue
            data.append(WordsPerMinuteData(
                round=round_type,
                team1_wpm=words_per_minute(stats.team1_correct, stats.team1_time),
                team2_wpm=words_per_minute(stats.team2_correct, stats.team2_time),
            ))
        return data

    def get_overall_words_per_minute(self) -> Tuple[Optional[float], Optional[float]]:
        totals = {1: [0, 0.0], 2: [0, 0.0]}
        for stats in self.round_stats.values():
            for team in totals:
                totals[team][0] += stats.correct_for(team)
                totals[team][1] += stats.time_for(team)
        return (
            words_per_minute(*totals[1]),
            words_per_minute(*totals[2]),
        )

    def get_word_statistics(self, words: List[Word]) -> List[WordStat]:
        """Stats for every word that was shown at least once, slowest first."""
        stats = []
        for word in words:
            skips = self.skips_by_word.get(word.id, 0)
            total = self.time_spent_by_word.get(word.id, 0)
            if total > 0 or skips > 0:
                # Each word is played once per round
                stats.append(WordStat(word=word, skips=skips,
                                      average_time=total / len(RoundType),
                                      total_time=total))
        return sorted(stats, key=lambda s: s.average_time, reverse=True)

    def to_dict(self):
        team1_wpm, team2_wpm = self.get_overall_words_per_minute()
        return {
            'round_stats': {r.name: s.to_dict() for r, s in self.round_stats.items()},
            'words_per_minute': [d.to_dict() for d in self.get_words_per_minute_data()],
            'overall_words_per_minute': {'team1': team1_wpm, 'team2': team2_wpm},
        }
