import random

import pytest

from gavelpairing.controllers.round_planner import RoundPlanner, draft_match_id
from gavelpairing.exceptions import (
    InvalidRoundException,
    InvalidTeamDataException,
    NotEnoughTeamsException,
)
from gavelpairing.models.team import Team
from gavelpairing.models.tournament_config import TournamentConfig


def _teams(n):
    return [Team(id=f"t{i}", name=f"Team {i}") for i in range(1, n + 1)]


def _planner(system="swiss", num_rounds=3, seed=None):
    return RoundPlanner(
        TournamentConfig(
            name="Test Open", num_rounds=num_rounds, pairing_system=system, seed=seed
        )
    )


def test_rejects_fewer_than_two_teams():
    with pytest.raises(NotEnoughTeamsException):
        _planner().plan_round(_teams(1), [], 1)


def test_rejects_duplicate_team_ids():
    teams = [Team(id="t1", name="One"), Team(id="t1", name="Again")]
    with pytest.raises(InvalidTeamDataException):
        _planner().plan_round(teams, [], 1)


@pytest.mark.parametrize("round_number", [0, -1, 4, "two"])
def test_rejects_rounds_outside_configuration(round_number):
    with pytest.raises(InvalidRoundException):
        _planner(num_rounds=3).plan_round(_teams(4), [], round_number)


def test_draft_matches_skip_byes():
    plan = _planner().plan_round(_teams(5), [], 1, rng=random.Random(1))

    assert len(plan.pairings) == 3
    assert len(plan.byes) == 1
    assert len(plan.draft_matches) == 2
    assert [m.id for m in plan.draft_matches] == ["r1-m1", "r1-m2"]
    for match, pairing in zip(plan.draft_matches, plan.match_pairings):
        assert match.status == "draft"
        assert match.round_number == 1
        assert match.assignments == []
        assert match.scores == []
        assert (match.team_a_id, match.team_b_id) == (pairing.team_a.id, pairing.team_b.id)


def test_round_robin_schedule_lands_in_requested_round():
    plan = _planner(system="round_robin").plan_round(_teams(4), [], 2)

    assert len(plan.draft_matches) == 6
    assert {m.round_number for m in plan.draft_matches} == {2}
    assert plan.draft_matches[-1].id == draft_match_id(2, 6)


def test_configured_seed_makes_round_one_reproducible():
    first = _planner(seed=11).plan_round(_teams(8), [], 1)
    second = _planner(seed=11).plan_round(_teams(8), [], 1)
    assert first.pairings == second.pairings


def test_round_number_strings_are_accepted():
    plan = _planner().plan_round(_teams(4), [], "1", rng=random.Random(0))
    assert plan.round_number == 1
