import json

import pytest

from team_formation.main import main


@pytest.fixture
def data_file(tmp_path, sample_data, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "data.json"
    path.write_text(json.dumps(sample_data))
    return path


def test_best_team_run(data_file, tmp_path, capsys):
    output = tmp_path / "results.json"

    code = main(["--data", str(data_file), "--output", str(output), "--project-id", "1"])

    assert code == 0
    saved = json.loads(output.read_text())
    assert [m["candidate"]["id"] for m in saved["members"]] == ["101", "104", "102"]
    assert "Amara Osei" in capsys.readouterr().out


def test_freelancers_mode_save_only(data_file, tmp_path, capsys):
    output = tmp_path / "freelancers.json"

    code = main(["--data", str(data_file), "--output", str(output), "--project-id", "2",
                 "--mode", "freelancers", "--limit", "2", "--save-only"])

    assert code == 0
    assert [r["candidate"]["id"] for r in json.loads(output.read_text())] == ["103", "106"]
    assert "FREELANCERS" not in capsys.readouterr().out


def test_missing_data_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["--data", str(tmp_path / "missing.json"), "--project-id", "1"]) == 1


def test_unknown_project_fails(data_file, tmp_path):
    code = main(["--data", str(data_file), "--output", str(tmp_path / "out.json"),
                 "--project-id", "404", "--mode", "existing-teams"])

    assert code == 1
    assert not (tmp_path / "out.json").exists()
