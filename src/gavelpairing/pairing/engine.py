"""Stateless entry point to the pairing systems."""

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

import random
from typing import List, Optional, Sequence

from gavelpairing.constants import PAIRING_ROUND_ROBIN, PAIRING_SWISS
from gavelpairing.models.match import Match
from gavelpairing.models.pairing import Pairing
from gavelpairing.models.team import Team
from gavelpairing.pairing.round_robin import round_robin
from gavelpairing.pairing.swiss import create_swiss_pairings
from gavelpairing.tournament.standings_calculator import StandingsCalculator


class PairingEngine:
    """Produces the pairings for a round.

    The engine keeps no state between calls: every call receives the full
    roster and match snapshot and returns fresh pairings. It assumes the
    caller has already rejected rosters of fewer than two teams.
    """

    def __init__(self, calculator: Optional[StandingsCalculator] = None):
        self.calculator = calculator or StandingsCalculator()

    def round_robin(self, teams: Sequence[Team]) -> List[Pairing]:
        """Complete circle-method schedule as one flat list."""
        return round_robin(teams)

    def swiss(
        self,
        teams: Sequence[Team],
        prior_matches: Sequence[Match],
        round_number: int,
        rng: Optional[random.Random] = None,
    ) -> List[Pairing]:
        """Swiss pairings for ``round_number``."""
        return create_swiss_pairings(
            teams, prior_matches, round_number, rng=rng, calculator=self.calculator
        )

    def pair(
        self,
        system: str,
        teams: Sequence[Team],
        prior_matches: Sequence[Match],
        round_number: int,
        rng: Optional[random.Random] = None,
    ) -> List[Pairing]:
        """Dispatch on the configured pairing system name.

        Raises:
            NotImplementedError: If the pairing system is not supported
        """
        if system == PAIRING_SWISS:
            return self.swiss(teams, prior_matches, round_number, rng)
        if system == PAIRING_ROUND_ROBIN:
            return self.round_robin(teams)
        raise NotImplementedError(f"Pairing system '{system}' is not implemented")
