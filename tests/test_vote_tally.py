import pytest

from gavelpairing.constants import VIRTUAL_JUDGE_ID
from gavelpairing.models.match import JudgeAssignment, Match, Score
from gavelpairing.scoring.vote_tally import VoteTally


def _ballot(judge_id, team_id, total, submitted=True):
    return Score(
        judge_id=judge_id,
        team_id=team_id,
        criteria_scores={"total": total},
        is_submitted=submitted,
    )


def _panel(*judge_ids):
    return [JudgeAssignment(judge_id=j, match_id="m1") for j in judge_ids]


def test_two_judge_protocol_adds_simulated_third_judge():
    result = VoteTally().tally(
        [_ballot("j1", "A", 80), _ballot("j2", "A", 78)],
        [_ballot("j1", "B", 75), _ballot("j2", "B", 82)],
        _panel("j1", "j2"),
    )

    assert result.used_virtual_judge
    assert result.team_a_votes == 2
    assert result.team_b_votes == 1
    assert result.winner == "A"
    assert result.team_a_total == pytest.approx(237)
    assert result.team_b_total == pytest.approx(235.5)

    simulated = result.judge_votes[-1]
    assert simulated.is_simulated
    assert simulated.judge_id == VIRTUAL_JUDGE_ID
    assert simulated.team_a_total == 79
    assert simulated.team_b_total == 78.5


def test_three_judge_all_equal_is_a_tie():
    a = [_ballot(j, "A", 50) for j in ("j1", "j2", "j3")]
    b = [_ballot(j, "B", 50) for j in ("j1", "j2", "j3")]
    result = VoteTally().tally(a, b, _panel("j1", "j2", "j3"))

    assert result.winner == "tie"
    assert result.team_a_votes == 1.5
    assert result.team_b_votes == 1.5
    assert not result.used_virtual_judge


def test_two_judge_equal_totals_splits_every_vote():
    a = [_ballot("j1", "A", 60), _ballot("j2", "A", 60)]
    b = [_ballot("j1", "B", 60), _ballot("j2", "B", 60)]
    result = VoteTally().tally(a, b, _panel("j1", "j2"))

    assert result.winner == "tie"
    assert result.team_a_votes == result.team_b_votes == 1.5


def test_judge_scoring_one_side_casts_no_vote():
    a = [_ballot("j1", "A", 70), _ballot("j2", "A", 70), _ballot("j3", "A", 70)]
    b = [_ballot("j1", "B", 60), _ballot("j2", "B", 80)]
    result = VoteTally().tally(a, b, _panel("j1", "j2", "j3"))

    assert [v.judge_id for v in result.judge_votes] == ["j1", "j2"]
    assert result.team_a_votes == 1
    assert result.team_b_votes == 1
    assert result.winner == "tie"


def test_two_assigned_but_one_scored_skips_simulated_judge():
    result = VoteTally().tally(
        [_ballot("j1", "A", 70)],
        [_ballot("j1", "B", 60)],
        _panel("j1", "j2"),
    )

    assert not result.used_virtual_judge
    assert result.team_a_votes == 1
    assert result.team_b_votes == 0
    assert result.winner == "A"


def test_unsubmitted_ballots_are_ignored():
    result = VoteTally().tally(
        [_ballot("j1", "A", 90, submitted=False), _ballot("j2", "A", 50)],
        [_ballot("j1", "B", 10), _ballot("j2", "B", 60)],
        _panel("j1", "j2", "j3"),
    )

    assert len(result.judge_votes) == 1
    assert result.winner == "B"


def test_first_ballot_per_judge_wins():
    result = VoteTally().tally(
        [_ballot("j1", "A", 70), _ballot("j1", "A", 10)],
        [_ballot("j1", "B", 60)],
        _panel("j1", "j2", "j3"),
    )
    assert result.team_a_total == 70
    assert result.winner == "A"


def test_no_ballots_is_a_tie_with_zero_votes():
    result = VoteTally().tally([], [], _panel("j1", "j2"))
    assert result.winner == "tie"
    assert result.team_a_votes == result.team_b_votes == 0
    assert result.judge_votes == ()


def test_tally_match_reads_sides_from_match():
    match = Match(
        id="m1",
        round_number=1,
        team_a_id="A",
        team_b_id="B",
        status="completed",
        assignments=_panel("j1", "j2", "j3"),
        scores=[
            _ballot("j1", "A", 40),
            _ballot("j1", "B", 45),
            _ballot("j2", "A", 40),
            _ballot("j2", "B", 45),
            _ballot("j3", "A", 50),
            _ballot("j3", "B", 45),
        ],
    )
    result = VoteTally().tally_match(match)

    assert result.winner == "B"
    assert result.team_b_votes == 2
    assert result.score_differential == -5


def test_swapped_mirrors_the_tally():
    result = VoteTally().tally(
        [_ballot("j1", "A", 80), _ballot("j2", "A", 78)],
        [_ballot("j1", "B", 75), _ballot("j2", "B", 82)],
        _panel("j1", "j2"),
    )
    mirrored = result.swapped()

    assert mirrored.winner == "B"
    assert mirrored.team_a_votes == result.team_b_votes
    assert mirrored.score_differential == -result.score_differential
    assert mirrored.judge_votes[0].team_a_total == 75
