import json

from gavelpairing import cli


def _generate(tmp_path, *extra):
    target = tmp_path / "event.json"
    code = cli.main(
        ["generate", "--teams", "6", "--rounds", "2", "--seed", "4", "--output", str(target), *extra]
    )
    assert code == 0
    return target


def test_generate_writes_a_loadable_snapshot(tmp_path):
    target = _generate(tmp_path)
    payload = json.loads(target.read_text(encoding="utf-8"))

    assert len(payload["teams"]) == 6
    assert len(payload["matches"]) == 6
    assert payload["config"]["tournament_over"] is True


def test_standings_and_results(tmp_path, capsys):
    target = _generate(tmp_path)
    capsys.readouterr()

    assert cli.main(["standings", "--file", str(target)]) == 0
    assert "Standings" in capsys.readouterr().out

    summary = tmp_path / "summary.json"
    assert cli.main(["results", "--file", str(target), "--output", str(summary)]) == 0
    assert json.loads(summary.read_text(encoding="utf-8"))["summary"]["totalTeams"] == 6


def test_validate_stored_round(tmp_path):
    target = _generate(tmp_path)
    assert cli.main(["validate", "--file", str(target), "--round", "1"]) == 0
    assert cli.main(["validate", "--file", str(target), "--round", "9"]) == 1


def test_pair_round_beyond_configuration_fails_cleanly(tmp_path, capsys):
    target = _generate(tmp_path)
    capsys.readouterr()

    assert cli.main(["pair", "--file", str(target), "--round", "3"]) == 1
    assert "Error:" in capsys.readouterr().out


def test_pair_writes_output(tmp_path):
    target = _generate(tmp_path)
    pairings = tmp_path / "round2.json"

    assert cli.main(
        ["pair", "--file", str(target), "--round", "2", "--output", str(pairings)]
    ) == 0
    payload = json.loads(pairings.read_text(encoding="utf-8"))
    assert payload["roundNumber"] == 2
    assert len(payload["pairings"]) == 3


def test_missing_file_reports_error(tmp_path):
    assert cli.main(["standings", "--file", str(tmp_path / "missing.json")]) == 1


def test_validate_round_robin_round(tmp_path, capsys):
    target = tmp_path / "round_robin.json"
    assert cli.main(
        ["generate", "--teams", "5", "--rounds", "1", "--system", "round_robin",
         "--seed", "2", "--output", str(target)]
    ) == 0
    capsys.readouterr()

    assert cli.main(["validate", "--file", str(target), "--round", "1"]) == 0
    assert "Absolute criteria satisfied" in capsys.readouterr().out


def test_results_to_unwritable_path_reports_error(tmp_path, capsys):
    target = _generate(tmp_path)
    capsys.readouterr()
    summary = tmp_path / "missing" / "summary.json"

    assert cli.main(["results", "--file", str(target), "--output", str(summary)]) == 1
    assert "Error:" in capsys.readouterr().out
    assert not summary.exists()


def test_validate_round_naming_unknown_team_fails_cleanly(tmp_path, capsys):
    target = _generate(tmp_path)
    payload = json.loads(target.read_text(encoding="utf-8"))
    payload["matches"][0]["teamBId"] = "ghost"
    target.write_text(json.dumps(payload), encoding="utf-8")
    capsys.readouterr()

    assert cli.main(["validate", "--file", str(target), "--round", "1"]) == 1
    assert "ghost" in capsys.readouterr().out
