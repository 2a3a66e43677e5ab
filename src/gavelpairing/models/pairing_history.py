"""Data models for tournament pairing history."""

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
from typing import Any, Dict, Iterable, Set

from gavelpairing.models.match import Match
from gavelpairing.type_hints import PlayedPair


@dataclass
class PairingHistory:
    """
    Tracks which teams have already met.

    Attributes
    ----------
    previous_matches : set of frozenset of str
        Set containing frozensets of team ID pairs representing matches that
        have already been drawn, whatever their status.
    """

    previous_matches: Set[PlayedPair] = field(default_factory=set)

    @classmethod
    def from_matches(cls, matches: Iterable[Match]) -> "PairingHistory":
        """Collect every unordered pair that appears in a match list."""
        history = cls()
        for match in matches:
            history.add_pairing(match.team_a_id, match.team_b_id)
        return history

    def add_pairing(self, team1_id: str, team2_id: str) -> None:
        """Record that two teams have been paired."""
        self.previous_matches.add(frozenset({team1_id, team2_id}))

    def have_played(self, team1_id: str, team2_id: str) -> bool:
        """Check if two teams have previously met."""
        return frozenset({team1_id, team2_id}) in self.previous_matches

    def to_dict(self) -> Dict[str, Any]:
        """Serialize pairing history to dictionary."""
        return {
            "previous_matches": sorted(sorted(pair) for pair in self.previous_matches),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PairingHistory":
        """Deserialize pairing history from dictionary."""
        return cls(
            previous_matches=set(
                frozenset(map(str, pair)) for pair in data.get("previous_matches", [])
            ),
        )
