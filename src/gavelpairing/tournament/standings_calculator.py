"""Standings calculation for tournaments.

This module folds completed matches into ranked team standings.
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

from dataclasses import replace
from typing import Dict, List, Optional, Sequence

from gavelpairing.constants import (
    DRAW_SCORE,
    LOSS_SCORE,
    WIN_SCORE,
    WINNER_TEAM_A,
    WINNER_TIE,
)
from gavelpairing.models.match import Match
from gavelpairing.models.standing import Standing
from gavelpairing.models.team import Team
from gavelpairing.scoring.vote_tally import TallyResult, VoteTally
from gavelpairing.utils import setup_logger

logger = setup_logger(__name__)


class StandingsCalculator:
    """Calculates ranked standings from completed matches.

    Ranking keys, all descending:

    - Wins (1 per win, 0.5 per tie)
    - Votes (judge votes, simulated third judge included)
    - Score differential (own totals minus opponent totals)

    Teams still level after all three keep their input order. There is no
    further tie-break.
    """

    def __init__(self, vote_tally: Optional[VoteTally] = None):
        self.vote_tally = vote_tally or VoteTally()

    def standings(self, teams: Sequence[Team], matches: Sequence[Match]) -> List[Standing]:
        """Calculate standings for a roster.

        Args:
            teams: Teams to rank; teams without completed matches are included
                with zero stats
            matches: Any matches of the event; only completed ones count

        Returns:
            Standings sorted by rank
        """
        completed = [match for match in matches if match.is_completed]
        tallies = {match.id: self.vote_tally.tally_match(match) for match in completed}

        lines = [self._team_standing(team, completed, tallies) for team in teams]

        # sorted() is stable, so full ties keep roster order
        ranked = sorted(lines, key=Standing.sort_key)
        result = [replace(line, rank=index) for index, line in enumerate(ranked, start=1)]

        logger.debug(
            f"Computed standings for {len(teams)} teams from "
            f"{len(completed)} completed matches"
        )
        return result

    def wins_by_team(
        self, teams: Sequence[Team], matches: Sequence[Match]
    ) -> Dict[str, float]:
        """Map team id to current wins."""
        return {line.team.id: line.wins for line in self.standings(teams, matches)}

    def _team_standing(
        self,
        team: Team,
        completed: Sequence[Match],
        tallies: Dict[str, TallyResult],
    ) -> Standing:
        """Accumulate one team's line from the completed matches it played."""
        wins = 0.0
        votes = 0.0
        score_differential = 0.0
        total_matches = 0

        for match in completed:
            if not match.involves(team.id):
                continue

            tally = tallies[match.id]
            if team.id != match.team_a_id:
                tally = tally.swapped()

            wins += self._match_points(tally)
            votes += tally.team_a_votes
            score_differential += tally.score_differential
            total_matches += 1

        return Standing(
            team=team,
            wins=wins,
            votes=votes,
            score_differential=score_differential,
            total_matches=total_matches,
        )

    def _match_points(self, tally: TallyResult) -> float:
        """Standings points for side A of a tally."""
        if tally.winner == WINNER_TEAM_A:
            return WIN_SCORE
        if tally.winner == WINNER_TIE:
            return DRAW_SCORE
        return LOSS_SCORE


def calculate_standings(teams: Sequence[Team], matches: Sequence[Match]) -> List[Standing]:
    """Shortcut for :meth:`StandingsCalculator.standings`."""
    return StandingsCalculator().standings(teams, matches)
