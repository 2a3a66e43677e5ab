import pytest

from gavelpairing.exceptions import InvalidMatchDataException
from gavelpairing.models.match import Match
from gavelpairing.models.pairing import Bye, MatchPairing
from gavelpairing.models.team import Team
from gavelpairing.pairing.round_robin import round_robin
from gavelpairing.validation.pairing_check import (
    CriterionStatus,
    ViolationType,
    check_schedule_feasibility,
    pairings_from_matches,
    validate_round,
)


def _teams(*ids):
    return [Team(id=team_id, name=f"Team {team_id}") for team_id in ids]


def _result(report, criterion):
    return next(r for r in report.criteria_results if r.criterion == criterion)


def test_clean_round_is_compliant():
    a, b, c, d, e = _teams(*"ABCDE")
    report = validate_round([MatchPairing(a, b), MatchPairing(c, d), Bye(e)], [a, b, c, d, e])

    assert report.is_valid
    assert report.violations == []
    assert report.quality_warnings == []
    assert report.compliance_percentage == 100.0


def test_rematch_is_a_quality_warning_only():
    a, b, c, d = _teams(*"ABCD")
    prior = [Match(id="m1", round_number=1, team_a_id="B", team_b_id="A")]
    report = validate_round([MatchPairing(a, b), MatchPairing(c, d)], [a, b, c, d], prior)

    assert report.is_valid
    assert [w.criterion for w in report.quality_warnings] == ["Q1"]
    assert report.quality_warnings[0].violation_type == ViolationType.QUALITY
    assert report.quality_warnings[0].details["pairs"] == [["A", "B"]]


def test_team_paired_twice_is_an_absolute_violation():
    a, b, c, d = _teams(*"ABCD")
    report = validate_round([MatchPairing(a, b), MatchPairing(a, c)], [a, b, c, d])

    coverage = _result(report, "P2")
    assert not report.is_valid
    assert coverage.status == CriterionStatus.VIOLATION
    assert coverage.details["duplicated"] == ["A"]
    assert coverage.details["missing"] == ["D"]


def test_unknown_team_is_reported():
    a, b, x = _teams("A", "B", "X")
    report = validate_round([MatchPairing(a, x), Bye(b)], [a, b])
    assert _result(report, "P2").details["unknown"] == ["X"]


def test_two_byes_is_an_absolute_violation():
    a, b, c, d = _teams(*"ABCD")
    report = validate_round([MatchPairing(a, b), Bye(c), Bye(d)], [a, b, c, d])

    assert _result(report, "P3").status == CriterionStatus.VIOLATION
    assert not report.is_valid


def test_no_bye_is_not_applicable():
    a, b = _teams("A", "B")
    report = validate_round([MatchPairing(a, b)], [a, b])
    assert _result(report, "P3").status == CriterionStatus.NOT_APPLICABLE


def test_schedule_feasibility():
    assert check_schedule_feasibility(8, 7) is None
    result = check_schedule_feasibility(4, 4)
    assert result is not None
    assert result.details["total_pairings_needed"] == 8
    assert result.details["max_unique_pairings"] == 6


def test_pairings_from_matches_adds_byes_for_idle_teams():
    teams = _teams(*"ABC")
    pairings = pairings_from_matches(
        [Match(id="m1", round_number=2, team_a_id="A", team_b_id="C")], teams
    )
    assert pairings == [MatchPairing(teams[0], teams[2]), Bye(teams[1])]


def test_pairings_from_matches_rejects_teams_off_the_roster():
    teams = _teams("A", "B")
    with pytest.raises(InvalidMatchDataException, match="X"):
        pairings_from_matches(
            [Match(id="m1", round_number=1, team_a_id="A", team_b_id="X")], teams
        )


def test_round_robin_schedule_is_compliant():
    teams = _teams(*"ABCDE")
    schedule = round_robin(teams)
    report = validate_round(schedule, teams, pairing_system="round_robin")

    assert report.is_valid
    assert _result(report, "P2").status == CriterionStatus.COMPLIANT
    assert _result(report, "P3").status == CriterionStatus.COMPLIANT


def test_round_robin_schedule_fails_swiss_coverage():
    teams = _teams(*"ABCD")
    report = validate_round(round_robin(teams), teams)
    assert _result(report, "P2").details["duplicated"] == ["A", "B", "C", "D"]


def test_stored_round_robin_without_byes_is_compliant():
    teams = _teams(*"ABC")
    matches = [
        Match(id="m1", round_number=1, team_a_id="A", team_b_id="C"),
        Match(id="m2", round_number=1, team_a_id="B", team_b_id="A"),
        Match(id="m3", round_number=1, team_a_id="C", team_b_id="B"),
    ]
    pairings = pairings_from_matches(matches, teams)
    report = validate_round(pairings, teams, pairing_system="round_robin")

    assert report.is_valid
    assert _result(report, "P3").status == CriterionStatus.NOT_APPLICABLE


def test_round_robin_repeated_and_missing_pairs():
    a, b, c, d = teams = _teams(*"ABCD")
    pairings = [
        MatchPairing(a, b),
        MatchPairing(b, a),
        MatchPairing(a, c),
        MatchPairing(a, d),
        MatchPairing(b, c),
    ]
    report = validate_round(pairings, teams, pairing_system="round_robin")

    coverage = _result(report, "P2")
    assert not report.is_valid
    assert coverage.details["duplicated"] == [["A", "B"]]
    assert coverage.details["missing"] == [["B", "D"], ["C", "D"]]


def test_round_robin_byes_must_be_one_per_team():
    a, b, c = teams = _teams(*"ABC")
    pairings = [MatchPairing(a, b), MatchPairing(a, c), MatchPairing(b, c), Bye(a), Bye(a)]
    report = validate_round(pairings, teams, pairing_system="round_robin")

    byes = _result(report, "P3")
    assert byes.status == CriterionStatus.VIOLATION
    assert byes.details == {"repeated": ["A"], "without_bye": ["B", "C"]}


def test_round_robin_bye_on_even_roster_is_a_violation():
    a, b = teams = _teams("A", "B")
    report = validate_round(
        [MatchPairing(a, b), Bye(a)], teams, pairing_system="round_robin"
    )
    assert _result(report, "P3").status == CriterionStatus.VIOLATION
