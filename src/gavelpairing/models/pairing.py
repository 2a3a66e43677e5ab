"""Pairing variants produced by the pairing engine."""

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
from typing import Any, Dict, Tuple, Union

from gavelpairing.exceptions import InvalidPairingException
from gavelpairing.models.team import Team


@dataclass(frozen=True)
class MatchPairing:
    """Two teams drawn against each other."""

    team_a: Team
    team_b: Team

    is_bye = False

    def __post_init__(self):
        if self.team_a.id == self.team_b.id:
            raise InvalidPairingException(
                f"Team {self.team_a.id} cannot be paired with itself"
            )

    @property
    def teams(self) -> Tuple[Team, ...]:
        return (self.team_a, self.team_b)

    @property
    def team_pair(self) -> frozenset:
        return frozenset({self.team_a.id, self.team_b.id})

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "match", "teamAId": self.team_a.id, "teamBId": self.team_b.id}


@dataclass(frozen=True)
class Bye:
    """A team sitting out the round for lack of an opponent."""

    team: Team

    is_bye = True

    @property
    def teams(self) -> Tuple[Team, ...]:
        return (self.team,)

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "bye", "teamId": self.team.id}


Pairing = Union[MatchPairing, Bye]

#  LocalWords:  MatchPairing
