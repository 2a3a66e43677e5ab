"""Pairing Checker - structural validation of a round's pairings.

Absolute criteria must never fail for a round the engine produced. The
rematch criterion is a quality criterion: the Swiss fallback may emit a
rematch when no fresh opponent is left, and this checker is how callers
find out.
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

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from itertools import combinations
from typing import Dict, List, Optional, Sequence

from gavelpairing.constants import PAIRING_ROUND_ROBIN, PAIRING_SWISS
from gavelpairing.exceptions import InvalidMatchDataException
from gavelpairing.models.match import Match
from gavelpairing.models.pairing import Bye, MatchPairing, Pairing
from gavelpairing.models.pairing_history import PairingHistory
from gavelpairing.models.team import Team
from gavelpairing.utils import setup_logger

logger = setup_logger(__name__)


class CriterionStatus(Enum):
    """Status of criterion validation."""

    COMPLIANT = "COMPLIANT"
    VIOLATION = "VIOLATION"
    NOT_APPLICABLE = "NOT_APPLICABLE"


class ViolationType(Enum):
    """Types of criterion violations."""

    ABSOLUTE = "ABSOLUTE"  # P1-P3: Must not violate
    QUALITY = "QUALITY"  # Q1: Should minimize


@dataclass
class CriterionResult:
    """Result of validating a single criterion."""

    criterion: str
    status: CriterionStatus
    violation_type: Optional[ViolationType] = None
    description: str = ""
    details: Dict[str, object] = field(default_factory=dict)

    @property
    def is_violation(self) -> bool:
        return self.status == CriterionStatus.VIOLATION


@dataclass
class ValidationReport:
    """Complete validation report for one round."""

    total_criteria: int
    compliant_count: int
    violations: List[CriterionResult]
    overall_status: CriterionStatus
    summary: str
    quality_warnings: List[CriterionResult] = field(default_factory=list)
    criteria_results: List[CriterionResult] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return self.overall_status == CriterionStatus.COMPLIANT

    @property
    def compliance_percentage(self) -> float:
        """Calculate compliance percentage."""
        if self.total_criteria == 0:
            return 100.0
        return (self.compliant_count / self.total_criteria) * 100.0


def _match_pairings(pairings: Sequence[Pairing]) -> List[MatchPairing]:
    return [pairing for pairing in pairings if not pairing.is_bye]


def check_no_self_pairing(pairings: Sequence[Pairing]) -> CriterionResult:
    """P1: A team is never paired against itself."""
    for pairing in _match_pairings(pairings):
        if pairing.team_a.id == pairing.team_b.id:
            return CriterionResult(
                criterion="P1",
                status=CriterionStatus.VIOLATION,
                violation_type=ViolationType.ABSOLUTE,
                description=f"Team {pairing.team_a.name} paired with itself",
                details={"team": pairing.team_a.id},
            )
    return CriterionResult(
        criterion="P1",
        status=CriterionStatus.COMPLIANT,
        description="No self pairings found",
    )


def check_each_team_once(
    pairings: Sequence[Pairing], teams: Sequence[Team]
) -> CriterionResult:
    """P2: Every roster team appears exactly once, and nobody else appears."""
    appearances = Counter(team.id for pairing in pairings for team in pairing.teams)
    roster_ids = [team.id for team in teams]

    duplicated = sorted(team_id for team_id, count in appearances.items() if count > 1)
    missing = [team_id for team_id in roster_ids if team_id not in appearances]
    unknown = sorted(set(appearances) - set(roster_ids))

    if duplicated or missing or unknown:
        problems = []
        if duplicated:
            problems.append(f"paired more than once: {', '.join(duplicated)}")
        if missing:
            problems.append(f"not paired: {', '.join(missing)}")
        if unknown:
            problems.append(f"not on the roster: {', '.join(unknown)}")
        return CriterionResult(
            criterion="P2",
            status=CriterionStatus.VIOLATION,
            violation_type=ViolationType.ABSOLUTE,
            description="Roster coverage broken - " + "; ".join(problems),
            details={"duplicated": duplicated, "missing": missing, "unknown": unknown},
        )
    return CriterionResult(
        criterion="P2",
        status=CriterionStatus.COMPLIANT,
        description="Every team appears exactly once",
    )


def check_single_bye(pairings: Sequence[Pairing]) -> CriterionResult:
    """P3: At most one bye per round."""
    byes = [pairing for pairing in pairings if pairing.is_bye]
    if not byes:
        return CriterionResult(
            criterion="P3",
            status=CriterionStatus.NOT_APPLICABLE,
            description="No bye assigned in this round",
        )
    if len(byes) > 1:
        return CriterionResult(
            criterion="P3",
            status=CriterionStatus.VIOLATION,
            violation_type=ViolationType.ABSOLUTE,
            description=f"{len(byes)} byes assigned in one round",
            details={"teams": [bye.team.id for bye in byes]},
        )
    return CriterionResult(
        criterion="P3",
        status=CriterionStatus.COMPLIANT,
        description=f"Single bye: {byes[0].team.name}",
    )


def check_each_pair_once(
    pairings: Sequence[Pairing], teams: Sequence[Team]
) -> CriterionResult:
    """P2 for round robin: every unordered roster pair meets exactly once."""
    roster_ids = [team.id for team in teams]
    roster = set(roster_ids)
    meetings = Counter(
        frozenset((pairing.team_a.id, pairing.team_b.id))
        for pairing in _match_pairings(pairings)
    )

    duplicated = sorted(sorted(pair) for pair, count in meetings.items() if count > 1)
    missing = [
        [a, b]
        for a, b in combinations(roster_ids, 2)
        if frozenset((a, b)) not in meetings
    ]
    unknown = sorted(
        {team.id for pairing in pairings for team in pairing.teams} - roster
    )

    if duplicated or missing or unknown:
        problems = []
        if duplicated:
            problems.append(
                "met more than once: " + ", ".join(" vs ".join(p) for p in duplicated)
            )
        if missing:
            problems.append(
                "never met: " + ", ".join(" vs ".join(p) for p in missing)
            )
        if unknown:
            problems.append(f"not on the roster: {', '.join(unknown)}")
        return CriterionResult(
            criterion="P2",
            status=CriterionStatus.VIOLATION,
            violation_type=ViolationType.ABSOLUTE,
            description="Schedule coverage broken - " + "; ".join(problems),
            details={"duplicated": duplicated, "missing": missing, "unknown": unknown},
        )
    return CriterionResult(
        criterion="P2",
        status=CriterionStatus.COMPLIANT,
        description="Every pair of teams meets exactly once",
    )


def check_one_bye_per_team(
    pairings: Sequence[Pairing], teams: Sequence[Team]
) -> CriterionResult:
    """P3 for round robin: one bye per team on an odd roster, none on an even one.

    Stored rounds do not keep byes, so a schedule without any bye is not
    checked.
    """
    byes = Counter(pairing.team.id for pairing in pairings if pairing.is_bye)
    if not byes:
        return CriterionResult(
            criterion="P3",
            status=CriterionStatus.NOT_APPLICABLE,
            description="No byes in this schedule",
        )
    if len(teams) % 2 == 0:
        return CriterionResult(
            criterion="P3",
            status=CriterionStatus.VIOLATION,
            violation_type=ViolationType.ABSOLUTE,
            description=f"{sum(byes.values())} byes on an even roster",
            details={"teams": sorted(byes)},
        )

    repeated = sorted(team_id for team_id, count in byes.items() if count > 1)
    without = [team.id for team in teams if team.id not in byes]
    if repeated or without:
        return CriterionResult(
            criterion="P3",
            status=CriterionStatus.VIOLATION,
            violation_type=ViolationType.ABSOLUTE,
            description="Byes not spread one per team",
            details={"repeated": repeated, "without_bye": without},
        )
    return CriterionResult(
        criterion="P3",
        status=CriterionStatus.COMPLIANT,
        description="Every team sits out exactly once",
    )


def check_no_rematch(
    pairings: Sequence[Pairing], history: PairingHistory
) -> CriterionResult:
    """Q1: Teams should not meet again."""
    rematches = [
        pairing
        for pairing in _match_pairings(pairings)
        if history.have_played(pairing.team_a.id, pairing.team_b.id)
    ]
    if rematches:
        return CriterionResult(
            criterion="Q1",
            status=CriterionStatus.VIOLATION,
            violation_type=ViolationType.QUALITY,
            description="Rematch: "
            + ", ".join(f"{p.team_a.name} vs {p.team_b.name}" for p in rematches),
            details={"pairs": [[p.team_a.id, p.team_b.id] for p in rematches]},
        )
    return CriterionResult(
        criterion="Q1",
        status=CriterionStatus.COMPLIANT,
        description="No rematches found",
    )


def check_schedule_feasibility(
    num_teams: int, num_rounds: int
) -> Optional[CriterionResult]:
    """Check whether the event length forces rematches.

    With N teams there are N*(N-1)/2 distinct pairs, while R rounds consume
    R * floor(N/2) of them.

    Returns:
        CriterionResult if rematches are unavoidable, None otherwise.
    """
    if num_teams < 2 or num_rounds < 1:
        return None

    max_unique_pairings = num_teams * (num_teams - 1) // 2
    total_pairings_needed = num_rounds * (num_teams // 2)
    if total_pairings_needed <= max_unique_pairings:
        return None

    return CriterionResult(
        criterion="Q1",
        status=CriterionStatus.VIOLATION,
        violation_type=ViolationType.QUALITY,
        description=(
            f"{num_teams} teams over {num_rounds} rounds need "
            f"{total_pairings_needed} pairings but only {max_unique_pairings} "
            f"distinct pairs exist"
        ),
        details={
            "num_teams": num_teams,
            "num_rounds": num_rounds,
            "max_unique_pairings": max_unique_pairings,
            "total_pairings_needed": total_pairings_needed,
        },
    )


def validate_round(
    pairings: Sequence[Pairing],
    teams: Sequence[Team],
    prior_matches: Sequence[Match] = (),
    pairing_system: str = PAIRING_SWISS,
) -> ValidationReport:
    """Validate one round of pairings against all criteria.

    A Swiss round seats every team once with at most one bye. A round-robin
    round holds the whole schedule, so coverage is checked per pair and byes
    per team instead.

    Args:
        pairings: The round as produced by the pairing engine
        teams: Roster the round was paired from
        prior_matches: Matches of earlier rounds, any status
        pairing_system: System the round was paired with

    Returns:
        ValidationReport; ``overall_status`` only reflects absolute criteria
    """
    history = PairingHistory.from_matches(prior_matches)
    if pairing_system == PAIRING_ROUND_ROBIN:
        coverage = check_each_pair_once(pairings, teams)
        bye_check = check_one_bye_per_team(pairings, teams)
    else:
        coverage = check_each_team_once(pairings, teams)
        bye_check = check_single_bye(pairings)
    all_results = [
        check_no_self_pairing(pairings),
        coverage,
        bye_check,
        check_no_rematch(pairings, history),
    ]

    compliant_count = sum(
        1 for r in all_results if r.status == CriterionStatus.COMPLIANT
    )
    absolute_violations = [
        r
        for r in all_results
        if r.is_violation and r.violation_type == ViolationType.ABSOLUTE
    ]
    quality_warnings = [
        r
        for r in all_results
        if r.is_violation and r.violation_type == ViolationType.QUALITY
    ]

    overall_status = (
        CriterionStatus.VIOLATION if absolute_violations else CriterionStatus.COMPLIANT
    )
    if overall_status == CriterionStatus.COMPLIANT:
        summary = (
            f"Absolute criteria satisfied; {len(quality_warnings)} "
            "quality criteria flagged"
        )
    else:
        summary = (
            f"Absolute violations detected - {len(absolute_violations)} "
            f"criteria failed; {len(quality_warnings)} quality warnings"
        )

    logger.info(f"Pairing check complete: {summary}")

    return ValidationReport(
        total_criteria=len(all_results),
        compliant_count=compliant_count,
        violations=absolute_violations,
        quality_warnings=quality_warnings,
        overall_status=overall_status,
        summary=summary,
        criteria_results=all_results,
    )


def pairings_from_matches(
    matches: Sequence[Match], teams: Sequence[Team]
) -> List[Pairing]:
    """Rebuild a stored round as pairings.

    Stored rounds do not keep byes, so every roster team without a match in
    ``matches`` is given one.

    Raises:
        InvalidMatchDataException: If a match names a team that is not on
            the roster
    """
    by_id = {team.id: team for team in teams}
    pairings: List[Pairing] = []
    for match in matches:
        unknown = [
            team_id
            for team_id in (match.team_a_id, match.team_b_id)
            if team_id not in by_id
        ]
        if unknown:
            raise InvalidMatchDataException(
                f"Match {match.id} names teams not on the roster: {', '.join(unknown)}"
            )
        pairings.append(MatchPairing(by_id[match.team_a_id], by_id[match.team_b_id]))
    seated = {team.id for pairing in pairings for team in pairing.teams}
    pairings.extend(Bye(team) for team in teams if team.id not in seated)
    return pairings
