from dataclasses import dataclass, field
from enum import Enum
from typing import Optional
import uuid

TEAMS = (1, 2)
MAX_WORD_LENGTH = 50


def other_team(team: int) -> int:
    return 2 if team == 1 else 1


@dataclass(eq=False)
class Word:
    text: str
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    used: bool = False

    # Identity is the id: two words with the same text stay distinct
    def __eq__(self, other):
        return isinstance(other, Word) and self.id == other.id

    def __hash__(self):
        return hash(self.id)

    def to_dict(self):
        return {
            'id': self.id,
            'text': self.text,
            'used': self.used,
        }


class GamePhase(Enum):
    SETUP = 'setup'
    WORD_INPUT = 'word_input'
    GAME_OVERVIEW = 'game_overview'
    PLAYING = 'playing'
    ROUND_TRANSITION = 'round_transition'
    GAME_OVER = 'game_over'


class TransitionReason(Enum):
    TIMER_EXPIRED = 'timer_expired'
    WORDS_EXHAUSTED = 'words_exhausted'


class RoundType(Enum):
    DESCRIBE = 1
    ACT_OUT = 2
    ONE_WORD = 3

    @property
    def title(self) -> str:
        return {
            RoundType.DESCRIBE: 'Round 1: Describe the Word',
            RoundType.ACT_OUT: 'Round 2: Act Out the Word',
            RoundType.ONE_WORD: 'Round 3: One Word Only',
        }[self]

    @property
    def description(self) -> str:
        return {
            RoundType.DESCRIBE: 'Describe the word without saying the word itself',
            RoundType.ACT_OUT: 'Act out the word using gestures and body language',
            RoundType.ONE_WORD: 'Describe the word using only one word',
        }[self]

    @property
    def short_description(self) -> str:
        return {
            RoundType.DESCRIBE: 'Describe',
            RoundType.ACT_OUT: 'Act Out',
            RoundType.ONE_WORD: 'One Word',
        }[self]

    @property
    def next_round(self) -> Optional['RoundType']:
        if self is RoundType.DESCRIBE:
            return RoundType.ACT_OUT
        if self is RoundType.ACT_OUT:
            return RoundType.ONE_WORD
        return None

    @property
    def is_final(self) -> bool:
        return self.next_round is None

    def to_dict(self):
        return {
            'number': self.value,
            'name': self.name,
            'title': self.title,
            'description': self.description,
            'short_description': self.short_description,
        }


class WordValidationResult(Enum):
    SUCCESS = 'success'
    EMPTY = 'empty'
    TOO_LONG = 'too_long'
    DUPLICATE = 'duplicate'

    @property
    def error_message(self) -> Optional[str]:
        return {
            WordValidationResult.SUCCESS: None,
            WordValidationResult.EMPTY: 'Word cannot be empty',
            WordValidationResult.TOO_LONG: f'Word is too long (max {MAX_WORD_LENGTH} characters)',
            WordValidationResult.DUPLICATE: 'Word already exists',
        }[self]


@dataclass
class RoundStats:
    """Per-round aggregate. Times are accumulated seconds, never overwritten."""
    team1_time: float = 0.0
    team2_time: float = 0.0
    team1_correct: int = 0
    team2_correct: int = 0

    def time_for(self, team: int) -> float:
        return self.team1_time if team == 1 else self.team2_time

    def correct_for(self, team: int) -> int:
        return self.team1_correct if team == 1 else self.team2_correct

    def add_time(self, team: int, seconds: float) -> None:
        if team == 1:
            self.team1_time += seconds
        else:
            self.team2_time += seconds

    def add_correct(self, team: int) -> None:
        if team == 1:
            self.team1_correct += 1
        else:
            self.team2_correct += 1

    def to_dict(self):
        return {
            'team1_time': round(self.team1_time, 2),
            'team2_time': round(self.team2_time, 2),
            'team1_correct': self.team1_correct,
            'team2_correct': self.team2_correct,
        }


@dataclass
class WordStat:
    word: Word
    skips: int
    average_time: float
    total_time: int

    def to_dict(self):
        return {
            'word': self.word.to_dict(),
            'skips': self.skips,
            'average_time': round(self.average_time, 2),
            'total_time': self.total_time,
        }


@dataclass
class WordsPerMinuteData:
    round: RoundType
    team1_wpm: Optional[float]
    team2_wpm: Optional[float]

    def to_dict(self):
        return {
            'round': self.round.name,
            'round_number': self.round.value,
            'team1_wpm': self.team1_wpm,
            'team2_wpm': self.team2_wpm,
        }
