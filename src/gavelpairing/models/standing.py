"""Standing data class."""

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

from dataclasses import dataclass
from typing import Any, Dict

from gavelpairing.models.team import Team


@dataclass(frozen=True)
class Standing:
    """A team's line in the standings table.

    Standings are derived values: they are rebuilt from the full match list
    every time and never updated in place.

    Attributes
    ----------
    team : Team
        The team this line belongs to.
    wins : float
        1 per win, 0.5 per tie.
    votes : float
        Judge votes collected, including simulated third-judge votes.
    score_differential : float
        Sum of (own total - opponent total) over completed matches.
    total_matches : int
        Completed matches played.
    rank : int
        1-based position after sorting.
    """

    team: Team
    wins: float = 0.0
    votes: float = 0.0
    score_differential: float = 0.0
    total_matches: int = 0
    rank: int = 0

    @property
    def win_percentage(self) -> float:
        if self.total_matches == 0:
            return 0.0
        return self.wins / self.total_matches * 100.0

    def sort_key(self):
        """Descending sort key: wins, then votes, then score differential."""
        return (-self.wins, -self.votes, -self.score_differential)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize standing to dictionary."""
        return {
            "rank": self.rank,
            "team": self.team.to_dict(),
            "wins": self.wins,
            "votes": self.votes,
            "scoreDifferential": self.score_differential,
            "totalMatches": self.total_matches,
            "winPercentage": round(self.win_percentage, 1),
        }
