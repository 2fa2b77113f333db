from typing import Optional, Set, Tuple

from nouns.models import RoundType, TransitionReason, other_team


class RoundTracker:
    """Current round, whose turn it is, and the ids guessed so far this round."""

    def __init__(self):
        self.current_round = RoundType.DESCRIBE
        self.current_team = 1
        self.last_transition_reason: Optional[TransitionReason] = None
        self._used_word_ids: Set[str] = set()

    def advance_round(self) -> bool:
        """Move to the next round. Returns False when already in the final round."""
        self._used_word_ids.clear()
        nxt = self.current_round.next_round
        if nxt is None:
            return False
        self.current_round = nxt
        return True

    def switch_team(self) -> None:
        self.current_team = other_team(self.current_team)

    def reset_to_first_round(self) -> None:
        self.current_round = RoundType.DESCRIBE
        self.current_team = 1
        self._used_word_ids.clear()
        self.last_transition_reason = None

    def mark_word_used(self, word_id: str) -> None:
        self._used_word_ids.add(word_id)

    def is_word_used(self, word_id: str) -> bool:
        return word_id in self._used_word_ids

    @property
    def used_word_ids(self) -> Set[str]:
        return set(self._used_word_ids)

    @property
    def is_final_round(self) -> bool:
        return self.current_round.is_final

    @property
    def opposing_team(self) -> int:
        return other_team(self.current_team)

    def has_used_all_words(self, total_words: int) -> bool:
        return len(self._used_word_ids) >= total_words

    def can_advance_round(self, words_used: int, total_words: int) -> bool:
        return not self.is_final_round and words_used >= total_words

    @property
    def round_progress(self) -> Tuple[int, int]:
        return self.current_round.value, len(RoundType)

    def to_dict(self):
        current, total = self.round_progress
        return {
            'round': self.current_round.to_dict(),
            'round_progress': {'current': current, 'total': total},
            'team': self.current_team,
            'last_transition_reason': (
                self.last_transition_reason.value if self.last_transition_reason else None
            ),
            'used_word_count': len(self._used_word_ids),
        }
