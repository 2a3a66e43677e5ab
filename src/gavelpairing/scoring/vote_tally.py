"""Judge vote tallying for a single match.

Each judge who scored both teams casts one vote for the side with the higher
total, or half a vote to each side on equal totals. Panels of exactly two
judges are topped up with a simulated third judge whose totals are the mean of
the two real judges, so two- and three-judge matches stay comparable.
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

from dataclasses import dataclass, field, replace
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from gavelpairing.constants import (
    FULL_VOTE,
    SPLIT_VOTE,
    TWO_JUDGE_PANEL,
    VIRTUAL_JUDGE_ID,
    WINNER_TEAM_A,
    WINNER_TEAM_B,
    WINNER_TIE,
)
from gavelpairing.models.match import JudgeAssignment, Match, Score
from gavelpairing.scoring.aggregator import ScoreAggregator
from gavelpairing.type_hints import Winner
from gavelpairing.utils import setup_logger

logger = setup_logger(__name__)


@dataclass(frozen=True)
class JudgeVote:
    """One judge's ballot pair reduced to totals and a vote."""

    judge_id: str
    team_a_total: float
    team_b_total: float
    team_a_vote: float
    team_b_vote: float
    is_simulated: bool = False

    def swapped(self) -> "JudgeVote":
        return replace(
            self,
            team_a_total=self.team_b_total,
            team_b_total=self.team_a_total,
            team_a_vote=self.team_b_vote,
            team_b_vote=self.team_a_vote,
        )


@dataclass(frozen=True)
class TallyResult:
    """Outcome of tallying one match.

    Attributes
    ----------
    team_a_votes, team_b_votes : float
        Votes including the simulated judge, if any.
    team_a_total, team_b_total : float
        Summed ballot totals including the simulated judge, if any.
    winner : {"A", "B", "tie"}
        Side with strictly more votes.
    judge_votes : tuple of JudgeVote
        Per-judge breakdown in panel order, simulated judge last.
    used_virtual_judge : bool
        Whether the two-judge protocol was applied.
    """

    team_a_votes: float = 0.0
    team_b_votes: float = 0.0
    team_a_total: float = 0.0
    team_b_total: float = 0.0
    winner: Winner = WINNER_TIE
    judge_votes: Tuple[JudgeVote, ...] = field(default_factory=tuple)
    used_virtual_judge: bool = False

    @property
    def score_differential(self) -> float:
        """Team A total minus team B total."""
        return self.team_a_total - self.team_b_total

    def swapped(self) -> "TallyResult":
        """The same tally seen from team B's side."""
        if self.winner == WINNER_TEAM_A:
            winner = WINNER_TEAM_B
        elif self.winner == WINNER_TEAM_B:
            winner = WINNER_TEAM_A
        else:
            winner = WINNER_TIE
        return TallyResult(
            team_a_votes=self.team_b_votes,
            team_b_votes=self.team_a_votes,
            team_a_total=self.team_b_total,
            team_b_total=self.team_a_total,
            winner=winner,
            judge_votes=tuple(vote.swapped() for vote in self.judge_votes),
            used_virtual_judge=self.used_virtual_judge,
        )


def _cast_vote(team_a_total: float, team_b_total: float) -> Tuple[float, float]:
    if team_a_total > team_b_total:
        return FULL_VOTE, 0.0
    if team_b_total > team_a_total:
        return 0.0, FULL_VOTE
    return SPLIT_VOTE, SPLIT_VOTE


def _submitted_by_judge(scores: Iterable[Score]) -> Dict[str, Score]:
    """Index submitted ballots by judge; the first ballot per judge wins."""
    ballots: Dict[str, Score] = {}
    for score in scores:
        if not score.is_submitted:
            continue
        if score.judge_id in ballots:
            logger.debug(
                f"Ignoring duplicate ballot from judge {score.judge_id} "
                f"for team {score.team_id}"
            )
            continue
        ballots[score.judge_id] = score
    return ballots


class VoteTally:
    """Counts judge votes for a match."""

    def __init__(self, aggregator: Optional[ScoreAggregator] = None):
        self.aggregator = aggregator or ScoreAggregator()

    def tally(
        self,
        team_a_scores: Sequence[Score],
        team_b_scores: Sequence[Score],
        assignments: Sequence[JudgeAssignment],
    ) -> TallyResult:
        """Tally votes for one match.

        Args:
            team_a_scores: Ballots filed for team A
            team_b_scores: Ballots filed for team B
            assignments: Judges seated on the panel

        Returns:
            TallyResult with votes, totals, winner and per-judge breakdown
        """
        a_ballots = _submitted_by_judge(team_a_scores)
        b_ballots = _submitted_by_judge(team_b_scores)

        judge_votes: List[JudgeVote] = []
        seen_judges = set()
        for assignment in assignments:
            judge_id = assignment.judge_id
            if judge_id in seen_judges:
                continue
            seen_judges.add(judge_id)

            score_a = a_ballots.get(judge_id)
            score_b = b_ballots.get(judge_id)
            if score_a is None or score_b is None:
                # A judge who scored only one side casts nothing
                continue

            a_total = self.aggregator.total(score_a)
            b_total = self.aggregator.total(score_b)
            a_vote, b_vote = _cast_vote(a_total, b_total)
            judge_votes.append(
                JudgeVote(
                    judge_id=judge_id,
                    team_a_total=a_total,
                    team_b_total=b_total,
                    team_a_vote=a_vote,
                    team_b_vote=b_vote,
                )
            )

        used_virtual_judge = (
            len(assignments) == TWO_JUDGE_PANEL and len(judge_votes) == TWO_JUDGE_PANEL
        )
        if used_virtual_judge:
            virtual_a = sum(v.team_a_total for v in judge_votes) / TWO_JUDGE_PANEL
            virtual_b = sum(v.team_b_total for v in judge_votes) / TWO_JUDGE_PANEL
            a_vote, b_vote = _cast_vote(virtual_a, virtual_b)
            judge_votes.append(
                JudgeVote(
                    judge_id=VIRTUAL_JUDGE_ID,
                    team_a_total=virtual_a,
                    team_b_total=virtual_b,
                    team_a_vote=a_vote,
                    team_b_vote=b_vote,
                    is_simulated=True,
                )
            )

        team_a_votes = sum(v.team_a_vote for v in judge_votes)
        team_b_votes = sum(v.team_b_vote for v in judge_votes)
        if team_a_votes > team_b_votes:
            winner = WINNER_TEAM_A
        elif team_b_votes > team_a_votes:
            winner = WINNER_TEAM_B
        else:
            winner = WINNER_TIE

        logger.debug(
            f"Tallied {len(assignments)} assigned judges, {len(judge_votes)} ballots "
            f"(simulated judge: {used_virtual_judge}): "
            f"{team_a_votes}-{team_b_votes} -> {winner}"
        )

        return TallyResult(
            team_a_votes=team_a_votes,
            team_b_votes=team_b_votes,
            team_a_total=sum(v.team_a_total for v in judge_votes),
            team_b_total=sum(v.team_b_total for v in judge_votes),
            winner=winner,
            judge_votes=tuple(judge_votes),
            used_virtual_judge=used_virtual_judge,
        )

    def tally_match(self, match: Match) -> TallyResult:
        """Tally a match from team A's side."""
        return self.tally(
            match.scores_for(match.team_a_id),
            match.scores_for(match.team_b_id),
            match.assignments,
        )
