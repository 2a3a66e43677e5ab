import pytest

from gavelpairing.models.match import JudgeAssignment, Match, Score
from gavelpairing.models.team import Team
from gavelpairing.tournament.standings_calculator import (
    StandingsCalculator,
    calculate_standings,
)


def _team(team_id):
    return Team(id=team_id, name=f"Team {team_id}")


def _match(match_id, team_a, team_b, a_totals, b_totals, status="completed", round_number=1):
    """Match where judge i gives a_totals[i] to team A and b_totals[i] to team B."""
    judges = [f"{match_id}-j{i}" for i in range(len(a_totals))]
    scores = []
    for judge_id, a_total, b_total in zip(judges, a_totals, b_totals):
        scores.append(Score(judge_id=judge_id, team_id=team_a, criteria_scores={"t": a_total}))
        scores.append(Score(judge_id=judge_id, team_id=team_b, criteria_scores={"t": b_total}))
    return Match(
        id=match_id,
        round_number=round_number,
        team_a_id=team_a,
        team_b_id=team_b,
        status=status,
        assignments=[JudgeAssignment(judge_id=j, match_id=match_id) for j in judges],
        scores=scores,
    )


def _ranked_ids(standings):
    return [line.team.id for line in standings]


def test_more_wins_beats_more_votes():
    teams = [_team(t) for t in ("X", "W", "Y", "Z")]
    matches = [
        _match("m1", "X", "W", [60, 60, 40], [50, 50, 50]),
        # Y loses three times 1-2 and collects 3 votes
        _match("m2", "Y", "Z", [60, 40, 40], [50, 50, 50]),
        _match("m3", "Y", "Z", [60, 40, 40], [50, 50, 50]),
        _match("m4", "Y", "Z", [60, 40, 40], [50, 50, 50]),
    ]
    standings = calculate_standings(teams, matches)
    by_id = {line.team.id: line for line in standings}

    assert by_id["Y"].wins == 0
    assert by_id["Y"].votes == 3
    assert by_id["X"].wins == 1
    assert by_id["X"].votes == 2
    assert _ranked_ids(standings).index("X") < _ranked_ids(standings).index("Y")


def test_equal_wins_more_votes_ranks_higher():
    teams = [_team(t) for t in ("A", "B", "C", "D")]
    matches = [
        _match("m1", "A", "B", [60, 60, 40], [50, 50, 50]),
        _match("m2", "C", "D", [51, 51, 51], [50, 50, 50]),
    ]
    standings = calculate_standings(teams, matches)

    assert _ranked_ids(standings) == ["C", "A", "B", "D"]
    assert [line.rank for line in standings] == [1, 2, 3, 4]


def test_equal_wins_and_votes_higher_differential_ranks_higher():
    teams = [_team(t) for t in ("A", "B", "C", "D")]
    matches = [
        _match("m1", "A", "B", [51, 51, 51], [50, 50, 50]),
        _match("m2", "C", "D", [90, 90, 90], [50, 50, 50]),
    ]
    standings = calculate_standings(teams, matches)

    assert _ranked_ids(standings)[:2] == ["C", "A"]
    assert standings[0].score_differential == 120
    assert standings[-1].score_differential == -120


def test_side_b_sees_mirrored_figures():
    teams = [_team("A"), _team("B")]
    standings = calculate_standings(teams, [_match("m1", "A", "B", [40, 40, 40], [50, 50, 50])])
    by_id = {line.team.id: line for line in standings}

    assert by_id["B"].wins == 1
    assert by_id["B"].votes == 3
    assert by_id["B"].score_differential == 30
    assert by_id["A"].score_differential == -30


def test_three_judge_tie_gives_half_win_and_one_and_a_half_votes():
    teams = [_team("A"), _team("B")]
    standings = calculate_standings(teams, [_match("m1", "A", "B", [50, 50, 50], [50, 50, 50])])

    for line in standings:
        assert line.wins == 0.5
        assert line.votes == 1.5
        assert line.total_matches == 1
        assert line.win_percentage == 50.0


def test_two_judge_match_counts_simulated_votes():
    teams = [_team("A"), _team("B")]
    standings = calculate_standings(teams, [_match("m1", "A", "B", [80, 78], [75, 82])])
    by_id = {line.team.id: line for line in standings}

    assert by_id["A"].wins == 1
    assert by_id["A"].votes == 2
    assert by_id["B"].votes == 1
    assert by_id["A"].score_differential == pytest.approx(1.5)


def test_only_completed_matches_count():
    teams = [_team("A"), _team("B")]
    matches = [
        _match("m1", "A", "B", [90, 90, 90], [50, 50, 50], status="draft"),
        _match("m2", "A", "B", [90, 90, 90], [50, 50, 50], status="in_progress"),
    ]
    standings = calculate_standings(teams, matches)

    for line in standings:
        assert line.wins == 0
        assert line.total_matches == 0
        assert line.win_percentage == 0.0


def test_teams_without_matches_keep_roster_order():
    teams = [_team(t) for t in ("C", "A", "B")]
    standings = calculate_standings(teams, [])

    assert _ranked_ids(standings) == ["C", "A", "B"]
    assert [line.rank for line in standings] == [1, 2, 3]


def test_standings_are_idempotent():
    teams = [_team(t) for t in ("A", "B", "C", "D")]
    matches = [
        _match("m1", "A", "B", [60, 60, 40], [50, 50, 50]),
        _match("m2", "C", "D", [80, 78], [75, 82]),
    ]
    calculator = StandingsCalculator()

    assert calculator.standings(teams, matches) == calculator.standings(teams, matches)


def test_wins_by_team():
    teams = [_team("A"), _team("B"), _team("C")]
    wins = StandingsCalculator().wins_by_team(
        teams, [_match("m1", "A", "B", [60, 60, 60], [50, 50, 50])]
    )
    assert wins == {"A": 1.0, "B": 0.0, "C": 0.0}


def test_standing_to_dict_uses_camel_case():
    standing = calculate_standings(
        [_team("A"), _team("B")], [_match("m1", "A", "B", [60, 60, 60], [50, 50, 50])]
    )[0]
    payload = standing.to_dict()

    assert payload["rank"] == 1
    assert payload["team"]["id"] == "A"
    assert payload["scoreDifferential"] == 30
    assert payload["totalMatches"] == 1
    assert payload["winPercentage"] == 100.0
