"""Match, judge assignment and score data classes.

The field layout mirrors the records the event store hands over. Serialized
keys use the store's camelCase spelling (``teamAId``, ``criteriaScores``, ...).
"""

# Gavel Pairing
# Copyright (C) 2025  Gavel Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from gavelpairing.constants import MATCH_STATUS_COMPLETED, MATCH_STATUS_DRAFT
from gavelpairing.exceptions import InvalidMatchDataException
from gavelpairing.type_hints import CommentPayload, CriteriaPayload


@dataclass(frozen=True)
class JudgeAssignment:
    """A judge seated on a match panel."""

    judge_id: str
    match_id: str

    def to_dict(self) -> Dict[str, Any]:
        """Serialize assignment to dictionary."""
        return {"judgeId": self.judge_id, "matchId": self.match_id}

    @classmethod
    def from_dict(cls, data: Dict[str, Any], match_id: str = "") -> "JudgeAssignment":
        """Deserialize assignment from dictionary."""
        judge_id = data.get("judgeId")
        if judge_id is None:
            raise InvalidMatchDataException(f"Assignment without judgeId: {data!r}")
        return cls(judge_id=str(judge_id), match_id=str(data.get("matchId", match_id)))


@dataclass
class Score:
    """One judge's ballot for one team in one match.

    ``criteria_scores`` and ``comment_scores`` are kept as they arrived: the
    store serializes them as JSON text, and older rows can be malformed. The
    aggregator is responsible for parsing them leniently.

    Attributes
    ----------
    judge_id : str
        Judge who filled in the ballot.
    team_id : str
        Team being scored.
    criteria_scores : dict, str or None
        Criterion name to points. Summed.
    comment_scores : list, str or None
        Judge-question points. Averaged.
    is_submitted : bool
        Draft ballots are ignored by the tally.
    """

    judge_id: str
    team_id: str
    criteria_scores: CriteriaPayload = field(default_factory=dict)
    comment_scores: CommentPayload = field(default_factory=list)
    is_submitted: bool = True

    def to_dict(self) -> Dict[str, Any]:
        """Serialize score to dictionary."""
        return {
            "judgeId": self.judge_id,
            "teamId": self.team_id,
            "criteriaScores": self.criteria_scores,
            "commentScores": self.comment_scores,
            "isSubmitted": self.is_submitted,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Score":
        """Deserialize score from dictionary."""
        judge_id = data.get("judgeId")
        team_id = data.get("teamId")
        if judge_id is None or team_id is None:
            raise InvalidMatchDataException(
                f"Score without judgeId/teamId: {data!r}"
            )
        return cls(
            judge_id=str(judge_id),
            team_id=str(team_id),
            criteria_scores=data.get("criteriaScores"),
            comment_scores=data.get("commentScores"),
            is_submitted=bool(data.get("isSubmitted", True)),
        )


@dataclass
class Match:
    """A scheduled or played match between two teams.

    Attributes
    ----------
    id : str
        Match identifier.
    round_number : int
        Tournament round (1-indexed).
    team_a_id, team_b_id : str
        The two sides. Never equal.
    status : str
        ``"draft"``, ``"completed"`` or any in-progress status.
    assignments : list of JudgeAssignment
        Judges on the panel, usually 2 or 3.
    scores : list of Score
        Ballots, at most one per (judge, team).
    winner_id : str or None
        Winner as persisted by the store, if any.
    """

    id: str
    round_number: int
    team_a_id: str
    team_b_id: str
    status: str = MATCH_STATUS_DRAFT
    assignments: List[JudgeAssignment] = field(default_factory=list)
    scores: List[Score] = field(default_factory=list)
    winner_id: Optional[str] = None

    def __post_init__(self):
        if self.team_a_id == self.team_b_id:
            raise InvalidMatchDataException(
                f"Match {self.id} pairs team {self.team_a_id} with itself"
            )

    @property
    def is_completed(self) -> bool:
        return self.status == MATCH_STATUS_COMPLETED

    @property
    def team_pair(self) -> frozenset:
        """Unordered pair of the two team ids."""
        return frozenset({self.team_a_id, self.team_b_id})

    def involves(self, team_id: str) -> bool:
        return team_id in (self.team_a_id, self.team_b_id)

    def opponent_of(self, team_id: str) -> Optional[str]:
        if team_id == self.team_a_id:
            return self.team_b_id
        if team_id == self.team_b_id:
            return self.team_a_id
        return None

    def scores_for(self, team_id: str) -> List[Score]:
        """All ballots filed for one side of the match."""
        return [score for score in self.scores if score.team_id == team_id]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary."""
        return {
            "id": self.id,
            "roundNumber": self.round_number,
            "teamAId": self.team_a_id,
            "teamBId": self.team_b_id,
            "status": self.status,
            "assignments": [a.to_dict() for a in self.assignments],
            "scores": [s.to_dict() for s in self.scores],
            "winnerId": self.winner_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Match":
        """Deserialize match from dictionary."""
        match_id = data.get("id")
        team_a_id = data.get("teamAId")
        team_b_id = data.get("teamBId")
        if match_id is None or team_a_id is None or team_b_id is None:
            raise InvalidMatchDataException(
                f"Match record missing id/teamAId/teamBId: {data!r}"
            )
        try:
            round_number = int(data.get("roundNumber", 1))
        except (TypeError, ValueError) as e:
            raise InvalidMatchDataException(
                f"Match {match_id} has a non-integer roundNumber"
            ) from e

        return cls(
            id=str(match_id),
            round_number=round_number,
            team_a_id=str(team_a_id),
            team_b_id=str(team_b_id),
            status=data.get("status", MATCH_STATUS_DRAFT),
            assignments=[
                JudgeAssignment.from_dict(a, match_id=str(match_id))
                for a in data.get("assignments") or []
            ],
            scores=[Score.from_dict(s) for s in data.get("scores") or []],
            winner_id=data.get("winnerId"),
        )
