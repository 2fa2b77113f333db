from typing import Dict, List, Optional

from nouns.models import TEAMS


class ScoreBoard:
    """Running score per team plus the cumulative score at the end of each turn.

    Turn histories always start with a 0 baseline so a chart has a common
    origin for both teams.
    """

    def __init__(self):
        self.reset_scores()

    def reset_scores(self) -> None:
        self._scores: Dict[int, int] = {team: 0 for team in TEAMS}
        self._turn_scores: Dict[int, List[int]] = {team: [0] for team in TEAMS}
        self.team_turn_count: Dict[int, int] = {team: 0 for team in TEAMS}

    @property
    def team1_score(self) -> int:
        return self._scores[1]

    @property
    def team2_score(self) -> int:
        return self._scores[2]

    def increment_score(self, team: int) -> None:
        self._scores[team] += 1
        self.team_turn_count[team] += 1

    def get_current_score(self, team: int) -> int:
        return self._scores[team]

    def record_team_turn_score(self, team: int, score: int) -> None:
        self._turn_scores[team].append(score)

    def record_current_team_turn_score(self, team: int) -> None:
        self.record_team_turn_score(team, self.get_current_score(team))

    def turn_history(self, team: int) -> List[int]:
        return list(self._turn_scores[team])

    def get_winner(self) -> Optional[int]:
        if self.team1_score > self.team2_score:
            return 1
        if self.team2_score > self.team1_score:
            return 2
        return None

    @property
    def score_difference(self) -> int:
        return abs(self.team1_score - self.team2_score)

    @property
    def is_tied(self) -> bool:
        return self.team1_score == self.team2_score

    @property
    def total_score(self) -> int:
        return self.team1_score + self.team2_score

    def to_dict(self):
        return {
            'team1': self.team1_score,
            'team2': self.team2_score,
            'team1_turn_scores': self.turn_history(1),
            'team2_turn_scores': self.turn_history(2),
            'winner': self.get_winner(),
        }
