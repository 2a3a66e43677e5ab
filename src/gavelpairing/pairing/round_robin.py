"""Round Robin Pairing System Implementation (circle method)."""

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

from typing import List, Optional, Sequence

from gavelpairing.models.pairing import Bye, MatchPairing, Pairing
from gavelpairing.models.team import Team

# Placeholder for the extra slot an odd roster gets
BYE_SLOT = None


def _pair_slots(slots: Sequence[Optional[Team]]) -> List[Pairing]:
    """Pair position i with position n-1-i for one rotation."""
    n = len(slots)
    pairings: List[Pairing] = []
    for i in range(n // 2):
        home = slots[i]
        away = slots[n - 1 - i]
        if away is BYE_SLOT:
            pairings.append(Bye(home))
        elif home is BYE_SLOT:
            pairings.append(Bye(away))
        else:
            pairings.append(MatchPairing(home, away))
    return pairings


def _rotate(slots: List[Optional[Team]]) -> List[Optional[Team]]:
    """Keep position 0 fixed and move every other slot one step clockwise."""
    if len(slots) <= 2:
        return list(slots)
    return [slots[0], slots[-1]] + slots[1:-1]


class RoundRobin:
    """Single round-robin schedule built with the circle method.

    Every pair of teams meets exactly once over ``number_of_rounds``
    rotations. Odd rosters get a bye slot, so each team sits out exactly one
    rotation.
    """

    def __init__(self, teams: Sequence[Team]):
        self.teams = list(teams)
        slots: List[Optional[Team]] = list(self.teams)
        if len(slots) % 2 == 1:
            slots.append(BYE_SLOT)
        self._slot_count = len(slots)

        self.rounds: List[List[Pairing]] = []
        for _ in range(self.number_of_rounds):
            self.rounds.append(_pair_slots(slots))
            slots = _rotate(slots)

    @property
    def number_of_rounds(self) -> int:
        """Rotations needed for everyone to meet everyone."""
        return max(self._slot_count - 1, 0)

    def get_round_pairings(self, rotation: int) -> List[Pairing]:
        """Pairings of one rotation (1-indexed)."""
        if not 1 <= rotation <= len(self.rounds):
            raise IndexError(
                f"Rotation {rotation} outside 1..{len(self.rounds)} for this schedule"
            )
        return list(self.rounds[rotation - 1])

    def all_pairings(self) -> List[Pairing]:
        """The whole schedule as one flat list, rotation by rotation."""
        return [pairing for rotation in self.rounds for pairing in rotation]


def round_robin_rounds(teams: Sequence[Team]) -> List[List[Pairing]]:
    """Circle-method schedule split per rotation."""
    return [list(rotation) for rotation in RoundRobin(teams).rounds]


def round_robin(teams: Sequence[Team]) -> List[Pairing]:
    """Complete single round-robin as a flat pairing list.

    Args:
        teams: Roster in seeding order; position 0 is the fixed pivot

    Returns:
        ``n*(n-1)/2`` match pairings for ``n`` teams, plus one bye per team
        when the roster is odd
    """
    return RoundRobin(teams).all_pairings()
