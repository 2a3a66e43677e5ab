"""Match, round and event result summaries.

These are the per-match figures the match-completion flow and the exports
need: who won, the vote split, each side's score differential, whether the
two-judge protocol applied, and the per-judge totals behind it.
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
from typing import Any, Dict, List, Optional, Sequence

from gavelpairing.constants import (
    TWO_JUDGE_PANEL,
    VIRTUAL_JUDGE_ID,
    VIRTUAL_JUDGE_LABEL,
    WINNER_TEAM_A,
    WINNER_TEAM_B,
)
from gavelpairing.models.match import Match
from gavelpairing.models.standing import Standing
from gavelpairing.models.team import Team
from gavelpairing.scoring.aggregator import ScoreAggregator
from gavelpairing.scoring.vote_tally import TallyResult, VoteTally
from gavelpairing.tournament.standings_calculator import StandingsCalculator


@dataclass
class JudgeScoreLine:
    """Totals one judge gave each team in a match."""

    judge_id: str
    team_totals: Dict[str, float] = field(default_factory=dict)
    is_simulated: bool = False

    @property
    def label(self) -> str:
        return VIRTUAL_JUDGE_LABEL if self.is_simulated else self.judge_id

    def to_dict(self) -> Dict[str, Any]:
        return {
            "judgeId": self.judge_id,
            "label": self.label,
            "teamTotals": dict(self.team_totals),
            "isSimulated": self.is_simulated,
        }


@dataclass
class MatchSummary:
    """Result figures for one match."""

    match_id: str
    round_number: int
    status: str
    team_a_id: str
    team_b_id: str
    winner_id: Optional[str] = None
    team_a_votes: float = 0.0
    team_b_votes: float = 0.0
    team_a_total: float = 0.0
    team_b_total: float = 0.0
    two_judge_protocol: bool = False
    judge_scores: List[JudgeScoreLine] = field(default_factory=list)

    @property
    def team_a_score_differential(self) -> float:
        return self.team_a_total - self.team_b_total

    @property
    def team_b_score_differential(self) -> float:
        return self.team_b_total - self.team_a_total

    def to_dict(self) -> Dict[str, Any]:
        return {
            "matchId": self.match_id,
            "roundNumber": self.round_number,
            "status": self.status,
            "teamAId": self.team_a_id,
            "teamBId": self.team_b_id,
            "winnerId": self.winner_id,
            "votes": {"teamA": self.team_a_votes, "teamB": self.team_b_votes},
            "totals": {"teamA": self.team_a_total, "teamB": self.team_b_total},
            "scoreDifferentials": {
                "teamA": self.team_a_score_differential,
                "teamB": self.team_b_score_differential,
            },
            "useTwoJudgeProtocol": self.two_judge_protocol,
            "judgeScores": [line.to_dict() for line in self.judge_scores],
        }


@dataclass
class RoundSummary:
    """Progress of one round."""

    round_number: int
    total_matches: int = 0
    completed_matches: int = 0
    matches: List[MatchSummary] = field(default_factory=list)

    @property
    def completion_rate(self) -> float:
        """Completed share in percent."""
        if self.total_matches == 0:
            return 0.0
        return self.completed_matches / self.total_matches * 100.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "roundNumber": self.round_number,
            "totalMatches": self.total_matches,
            "completedMatches": self.completed_matches,
            "completionRate": round(self.completion_rate, 1),
            "matches": [summary.to_dict() for summary in self.matches],
        }


@dataclass
class EventSummary:
    """Standings plus per-round and per-match results for an event."""

    standings: List[Standing]
    rounds: List[RoundSummary]
    match_results: List[MatchSummary]
    total_teams: int
    total_matches: int
    completed_matches: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "standings": [line.to_dict() for line in self.standings],
            "roundResults": [summary.to_dict() for summary in self.rounds],
            "matchResults": [summary.to_dict() for summary in self.match_results],
            "summary": {
                "totalTeams": self.total_teams,
                "totalMatches": self.total_matches,
                "completedMatches": self.completed_matches,
            },
        }


def _winner_id(match: Match, tally: TallyResult) -> Optional[str]:
    if tally.winner == WINNER_TEAM_A:
        return match.team_a_id
    if tally.winner == WINNER_TEAM_B:
        return match.team_b_id
    return None


def _judge_lines(
    match: Match, tally: TallyResult, aggregator: ScoreAggregator
) -> List[JudgeScoreLine]:
    """Per-judge totals for every seated judge, simulated judge last."""
    lines: List[JudgeScoreLine] = []
    for assignment in match.assignments:
        line = JudgeScoreLine(judge_id=assignment.judge_id)
        for score in match.scores:
            if score.judge_id == assignment.judge_id and score.is_submitted:
                line.team_totals[score.team_id] = aggregator.total(score)
        lines.append(line)

    for vote in tally.judge_votes:
        if vote.is_simulated:
            lines.append(
                JudgeScoreLine(
                    judge_id=VIRTUAL_JUDGE_ID,
                    team_totals={
                        match.team_a_id: vote.team_a_total,
                        match.team_b_id: vote.team_b_total,
                    },
                    is_simulated=True,
                )
            )
    return lines


def resolve_winner_id(match: Match, vote_tally: Optional[VoteTally] = None) -> Optional[str]:
    """Winning team id for a match, or None on a tied vote."""
    tally = (vote_tally or VoteTally()).tally_match(match)
    return _winner_id(match, tally)


def summarize_match(match: Match, vote_tally: Optional[VoteTally] = None) -> MatchSummary:
    """Build the result figures for one match.

    Votes, totals and judge lines are only filled in for completed matches
    that carry ballots; anything else is reported with zero figures.
    """
    summary = MatchSummary(
        match_id=match.id,
        round_number=match.round_number,
        status=match.status,
        team_a_id=match.team_a_id,
        team_b_id=match.team_b_id,
        two_judge_protocol=len(match.assignments) == TWO_JUDGE_PANEL,
    )
    if not match.is_completed or not match.scores:
        return summary

    vote_tally = vote_tally or VoteTally()
    tally = vote_tally.tally_match(match)
    summary.winner_id = _winner_id(match, tally)
    summary.team_a_votes = tally.team_a_votes
    summary.team_b_votes = tally.team_b_votes
    summary.team_a_total = tally.team_a_total
    summary.team_b_total = tally.team_b_total
    summary.judge_scores = _judge_lines(match, tally, vote_tally.aggregator)
    return summary


def summarize_rounds(
    matches: Sequence[Match], vote_tally: Optional[VoteTally] = None
) -> List[RoundSummary]:
    """Group matches by round, sorted by round number."""
    vote_tally = vote_tally or VoteTally()
    rounds: Dict[int, RoundSummary] = {}
    for match in matches:
        summary = rounds.setdefault(
            match.round_number, RoundSummary(round_number=match.round_number)
        )
        summary.matches.append(summarize_match(match, vote_tally))
        summary.total_matches += 1
        if match.is_completed:
            summary.completed_matches += 1
    return [rounds[number] for number in sorted(rounds)]


def completed_match_results(
    matches: Sequence[Match], vote_tally: Optional[VoteTally] = None
) -> List[MatchSummary]:
    """Summaries of completed matches ordered by round (stable within a round)."""
    vote_tally = vote_tally or VoteTally()
    completed = [match for match in matches if match.is_completed]
    completed.sort(key=lambda match: match.round_number)
    return [summarize_match(match, vote_tally) for match in completed]


def summarize_event(
    teams: Sequence[Team],
    matches: Sequence[Match],
    calculator: Optional[StandingsCalculator] = None,
) -> EventSummary:
    """Standings, round progress and match results in one call."""
    calculator = calculator or StandingsCalculator()
    vote_tally = calculator.vote_tally
    return EventSummary(
        standings=calculator.standings(teams, matches),
        rounds=summarize_rounds(matches, vote_tally),
        match_results=completed_match_results(matches, vote_tally),
        total_teams=len(teams),
        total_matches=len(matches),
        completed_matches=sum(1 for match in matches if match.is_completed),
    )
