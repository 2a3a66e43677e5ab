"""Swiss Pairing System Implementation."""

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
from typing import Dict, List, Optional, Sequence, Set

from gavelpairing.models.match import Match
from gavelpairing.models.pairing import Bye, MatchPairing, Pairing
from gavelpairing.models.pairing_history import PairingHistory
from gavelpairing.models.team import Team
from gavelpairing.tournament.standings_calculator import StandingsCalculator
from gavelpairing.utils import setup_logger

logger = setup_logger(__name__)


def create_swiss_pairings(
    teams: Sequence[Team],
    prior_matches: Sequence[Match],
    round_number: int,
    rng: Optional[random.Random] = None,
    calculator: Optional[StandingsCalculator] = None,
) -> List[Pairing]:
    """
    Create pairings for one Swiss round.

    - teams: roster to pair
    - prior_matches: every match already drawn in the event; completed ones
      drive the standings, all of them count as played pairs
    - round_number: 1-based round being paired
    - rng: random source for the round-one shuffle; pass a seeded
      ``random.Random`` for reproducible draws
    - calculator: standings calculator to use for rounds 2+
    Returns: list of MatchPairing plus at most one Bye
    """
    if round_number <= 1:
        return _pair_round_one(teams, rng or random.Random())

    return _pair_by_standings(
        teams, prior_matches, calculator or StandingsCalculator()
    )


def _pair_round_one(teams: Sequence[Team], rng: random.Random) -> List[Pairing]:
    """Shuffle the roster and pair neighbours; the odd team out gets a bye."""
    shuffled = list(teams)
    rng.shuffle(shuffled)

    pairings: List[Pairing] = []
    for i in range(0, len(shuffled) - 1, 2):
        pairings.append(MatchPairing(shuffled[i], shuffled[i + 1]))
    if len(shuffled) % 2 == 1:
        pairings.append(Bye(shuffled[-1]))

    logger.debug(f"Round 1: paired {len(shuffled)} teams after shuffle")
    return pairings


def _pair_by_standings(
    teams: Sequence[Team],
    prior_matches: Sequence[Match],
    calculator: StandingsCalculator,
) -> List[Pairing]:
    """Greedy pairing of teams with close win counts, avoiding rematches."""
    wins = calculator.wins_by_team(teams, prior_matches)
    history = PairingHistory.from_matches(prior_matches)

    # Stable sort: equal wins keep roster order
    ordered = sorted(teams, key=lambda team: -wins.get(team.id, 0.0))

    pairings: List[Pairing] = []
    paired: Set[str] = set()

    for index, team in enumerate(ordered):
        if team.id in paired:
            continue
        paired.add(team.id)

        candidates = [other for other in ordered[index + 1 :] if other.id not in paired]
        if not candidates:
            pairings.append(Bye(team))
            continue

        opponent = _closest_opponent(team, candidates, wins, history)
        paired.add(opponent.id)
        pairings.append(MatchPairing(team, opponent))

    return pairings


def _closest_opponent(
    team: Team,
    candidates: List[Team],
    wins: Dict[str, float],
    history: PairingHistory,
) -> Team:
    """Pick the fresh opponent with the nearest win count, else allow a rematch."""
    fresh = [other for other in candidates if not history.have_played(team.id, other.id)]
    pool = fresh
    if not fresh:
        logger.warning(
            f"No fresh opponent left for team {team.id}; allowing a rematch"
        )
        pool = candidates

    own_wins = wins.get(team.id, 0.0)
    # min() keeps the first candidate on equal distance, i.e. scan order
    return min(pool, key=lambda other: abs(own_wins - wins.get(other.id, 0.0)))
