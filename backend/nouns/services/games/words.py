import logging
import random
import time
from typing import Callable, Iterable, List, Optional

from nouns.models import MAX_WORD_LENGTH, Word, WordValidationResult
from .events import WordSkipped, WordTimeRecorded
from .sample_words import SAMPLE_WORDS

logger = logging.getLogger(__name__)

MIN_WORDS_TO_START = 3


class WordPool:
    """Owns the master word list and the per-round unused subset.

    The unused list is ordered: skipped words go to the back. Draws are
    uniform over the unused list through the injected ``rng``.
    """

    def __init__(self, rng: Optional[random.Random] = None,
                 clock: Callable[[], float] = time.monotonic):
        self.words: List[Word] = []
        self.current_word: Optional[Word] = None
        self._unused: List[Word] = []
        self._rng = rng or random.Random()
        self._clock = clock
        self._word_started_at: Optional[float] = None

    # ---- word input ----

    def add_word(self, text: str) -> Optional[Word]:
        trimmed = (text or '').strip()
        if not trimmed:
            return None
        word = Word(text=trimmed)
        self.words.append(word)
        return word

    def validate_word(self, text: str) -> WordValidationResult:
        trimmed = (text or '').strip()
        if not trimmed:
            return WordValidationResult.EMPTY
        if len(trimmed) > MAX_WORD_LENGTH:
            return WordValidationResult.TOO_LONG
        if trimmed.lower() in {t.lower() for t in self.word_texts()}:
            return WordValidationResult.DUPLICATE
        return WordValidationResult.SUCCESS

    def add_sample_words(self, count: int = 5) -> List[Word]:
        existing = {t.lower() for t in self.word_texts()}
        available = [s for s in SAMPLE_WORDS if s.lower() not in existing]
        picked = self._rng.sample(available, min(max(count, 0), len(available)))
        return [self.add_word(text) for text in picked]

    def can_start_game(self) -> bool:
        return len(self.words) >= MIN_WORDS_TO_START

    def reset_words(self) -> None:
        self.words.clear()
        self._unused.clear()
        self.current_word = None
        self._word_started_at = None

    # ---- per round ----

    def setup_for_round(self, used_ids: Iterable[str]) -> None:
        used = set(used_ids)
        for word in self.words:
            word.used = word.id in used
        if not used:
            self._unused = list(self.words)
        else:
            self._unused = [w for w in self.words if w.id not in used]
        self.current_word = None
        self._word_started_at = None

    def get_next_word(self) -> Optional[Word]:
        if not self._unused:
            self.current_word = None
            return None
        self.current_word = self._rng.choice(self._unused)
        self._word_started_at = self._clock()
        return self.current_word

    def skip_current_word(self) -> List[object]:
        current = self.current_word
        if current is None or not self.can_skip:
            return []
        events: List[object] = self._stop_word_clock(current)
        self._unused.remove(current)
        self._unused.append(current)
        events.append(WordSkipped(current.id))
        # Draw from everything ahead of the skipped word so it is not redrawn
        self.current_word = self._rng.choice(self._unused[:-1])
        self._word_started_at = self._clock()
        logger.debug(f"[word-skip] word={current.id} next={self.current_word.id}")
        return events

    def mark_current_word_guessed(self) -> List[object]:
        current = self.current_word
        if current is None:
            return []
        events = self._stop_word_clock(current)
        current.used = True
        if current in self._unused:
            self._unused.remove(current)
        self.current_word = None
        return events

    def release_current_word(self) -> List[object]:
        """Drop the displayed word at the end of a turn, keeping it unused."""
        current = self.current_word
        if current is None:
            return []
        events = self._stop_word_clock(current)
        self.current_word = None
        return events

    def _stop_word_clock(self, word: Word) -> List[object]:
        if self._word_started_at is None:
            return []
        spent = int(self._clock() - self._word_started_at)
        self._word_started_at = None
        return [WordTimeRecorded(word.id, max(spent, 1))]

    # ---- queries ----

    @property
    def can_skip(self) -> bool:
        return len(self._unused) > 1

    def has_unused_words(self) -> bool:
        return bool(self._unused)

    @property
    def unused_count(self) -> int:
        return len(self._unused)

    @property
    def total_count(self) -> int:
        return len(self.words)

    @property
    def used_count(self) -> int:
        return sum(1 for w in self.words if w.used)

    def get_word_by_id(self, word_id: str) -> Optional[Word]:
        return next((w for w in self.words if w.id == word_id), None)

    def word_texts(self) -> List[str]:
        return [w.text for w in self.words]

    def to_dict(self):
        return {
            'words': [w.to_dict() for w in self.words],
            'current_word': self.current_word.to_dict() if self.current_word else None,
            'total': self.total_count,
            'used': self.used_count,
            'unused': self.unused_count,
            'can_skip': self.can_skip,
            'can_start_game': self.can_start_game(),
        }
