from collections import Counter

import pytest

from gavelpairing.models.pairing import Bye, MatchPairing
from gavelpairing.models.team import Team
from gavelpairing.pairing.round_robin import RoundRobin, round_robin, round_robin_rounds


def _teams(n):
    return [Team(id=f"t{i}", name=f"Team {i}") for i in range(1, n + 1)]


@pytest.mark.parametrize("n", range(2, 11))
def test_every_pair_meets_exactly_once(n):
    pairings = round_robin(_teams(n))
    matches = [p for p in pairings if not p.is_bye]
    pairs = [p.team_pair for p in matches]

    assert len(matches) == n * (n - 1) // 2
    assert len(set(pairs)) == len(pairs)
    assert all(p.team_a.id != p.team_b.id for p in matches)


@pytest.mark.parametrize("n", [3, 5, 7, 9])
def test_odd_roster_gives_each_team_one_bye(n):
    teams = _teams(n)
    byes = [p for p in round_robin(teams) if p.is_bye]

    assert len(byes) == n
    assert Counter(bye.team.id for bye in byes) == Counter(t.id for t in teams)


@pytest.mark.parametrize("n", [2, 4, 6, 8])
def test_even_roster_has_no_byes(n):
    assert not any(p.is_bye for p in round_robin(_teams(n)))


@pytest.mark.parametrize("n", range(2, 10))
def test_each_rotation_seats_every_team_once(n):
    teams = _teams(n)
    rotations = round_robin_rounds(teams)

    assert len(rotations) == (n - 1 if n % 2 == 0 else n)
    for rotation in rotations:
        seated = [team.id for pairing in rotation for team in pairing.teams]
        assert sorted(seated) == sorted(t.id for t in teams)


def test_first_rotation_pairs_opposite_slots():
    teams = _teams(4)
    first = RoundRobin(teams).get_round_pairings(1)

    assert first == [MatchPairing(teams[0], teams[3]), MatchPairing(teams[1], teams[2])]


def test_odd_roster_bye_is_explicit():
    teams = _teams(3)
    first = RoundRobin(teams).get_round_pairings(1)

    assert Bye(teams[0]) in first
    assert MatchPairing(teams[1], teams[2]) in first


def test_two_teams_single_pairing():
    teams = _teams(2)
    assert round_robin(teams) == [MatchPairing(teams[0], teams[1])]


def test_rotation_out_of_range():
    schedule = RoundRobin(_teams(4))
    with pytest.raises(IndexError):
        schedule.get_round_pairings(0)
    with pytest.raises(IndexError):
        schedule.get_round_pairings(schedule.number_of_rounds + 1)


def test_input_is_not_mutated():
    teams = _teams(5)
    snapshot = list(teams)
    round_robin(teams)
    assert teams == snapshot
