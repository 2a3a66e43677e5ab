"""Round planning for tournaments.

This module turns a roster and the matches played so far into the pairings
and draft matches of a requested round.
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

import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from gavelpairing.constants import MATCH_STATUS_DRAFT, MIN_TEAMS_FOR_PAIRING
from gavelpairing.exceptions import (
    InvalidRoundException,
    InvalidTeamDataException,
    NotEnoughTeamsException,
)
from gavelpairing.models.match import Match
from gavelpairing.models.pairing import Bye, MatchPairing, Pairing
from gavelpairing.models.team import Team
from gavelpairing.models.tournament_config import TournamentConfig
from gavelpairing.pairing.engine import PairingEngine
from gavelpairing.utils import setup_logger
from gavelpairing.utils.validation import validate_round_number, validate_team_count

logger = setup_logger(__name__)


@dataclass
class RoundPlan:
    """Pairings of one round plus the draft matches they become."""

    round_number: int
    pairings: List[Pairing] = field(default_factory=list)
    draft_matches: List[Match] = field(default_factory=list)

    @property
    def byes(self) -> List[Bye]:
        return [pairing for pairing in self.pairings if pairing.is_bye]

    @property
    def match_pairings(self) -> List[MatchPairing]:
        return [pairing for pairing in self.pairings if not pairing.is_bye]


def draft_match_id(round_number: int, index: int) -> str:
    """Identifier for the ``index``-th (1-based) draft match of a round."""
    return f"r{round_number}-m{index}"


class RoundPlanner:
    """Plans rounds according to a tournament configuration.

    The planner only reads the snapshot it is given. Persisting the draft
    matches, seating judges and collecting ballots are left to the caller.
    """

    def __init__(
        self, config: TournamentConfig, engine: Optional[PairingEngine] = None
    ):
        """Initialize the round planner.

        Args:
            config: Tournament configuration (pairing system, round count)
            engine: Pairing engine to use, a fresh one by default
        """
        self.config = config
        self.engine = engine or PairingEngine()

    def plan_round(
        self,
        teams: Sequence[Team],
        matches: Sequence[Match],
        round_number: int,
        rng: Optional[random.Random] = None,
    ) -> RoundPlan:
        """Generate the pairings for ``round_number``.

        Args:
            teams: Roster to pair
            matches: Every match already drawn in the event
            round_number: 1-indexed round to plan
            rng: Random source for the round-one Swiss shuffle; a generator
                seeded from the configuration is used when omitted

        Returns:
            RoundPlan holding pairings and draft matches

        Raises:
            NotEnoughTeamsException: If fewer than two teams are given
            InvalidTeamDataException: If the roster repeats a team id
            InvalidRoundException: If the round is outside the configured range
        """
        if len(teams) < MIN_TEAMS_FOR_PAIRING:
            raise NotEnoughTeamsException(
                f"At least {MIN_TEAMS_FOR_PAIRING} teams are required to generate "
                f"pairings, got {len(teams)}"
            )
        roster_check = validate_team_count(teams)
        if not roster_check:
            raise InvalidTeamDataException(roster_check.error_message)

        round_check = validate_round_number(round_number, self.config.num_rounds)
        if not round_check:
            raise InvalidRoundException(round_check.error_message)
        round_number = round_check.sanitized_value

        if rng is None and self.config.seed is not None:
            rng = random.Random(f"{self.config.seed}:{round_number}")

        logger.info(
            f"Creating round {round_number} with {len(teams)} teams "
            f"({self.config.pairing_system})"
        )
        pairings = self.engine.pair(
            self.config.pairing_system, teams, matches, round_number, rng=rng
        )
        plan = RoundPlan(
            round_number=round_number,
            pairings=pairings,
            draft_matches=self._draft_matches(round_number, pairings),
        )
        logger.info(
            f"Round {round_number}: {len(plan.draft_matches)} matches, "
            f"{len(plan.byes)} byes"
        )
        return plan

    def _draft_matches(
        self, round_number: int, pairings: Sequence[Pairing]
    ) -> List[Match]:
        drafts: List[Match] = []
        for pairing in pairings:
            if pairing.is_bye:
                continue
            drafts.append(
                Match(
                    id=draft_match_id(round_number, len(drafts) + 1),
                    round_number=round_number,
                    team_a_id=pairing.team_a.id,
                    team_b_id=pairing.team_b.id,
                    status=MATCH_STATUS_DRAFT,
                )
            )
        return drafts
