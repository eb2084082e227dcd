import json
from pathlib import Path

import pytest

from nexora.app_shell.cli import main


@pytest.fixture
def state_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    path = tmp_path / "state.json"
    monkeypatch.setenv("NEXORA_STATE_PATH", str(path))
    return path


def test_tier_show_defaults_to_free(state_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["tier", "show"]) == 0
    assert "Tier: free (not paid)" in capsys.readouterr().out


def test_tier_upgrade_persists(state_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["tier", "upgrade-member"]) == 0
    assert json.loads(state_path.read_text()) == {"membership:tier": "member"}

    main(["tier", "show"])
    assert "Tier: member (paid)" in capsys.readouterr().out

    main(["tier", "upgrade-creator"])
    main(["tier", "cancel"])
    assert json.loads(state_path.read_text()) == {"membership:tier": "free"}


def test_tier_explicit_state_file(tmp_path: Path) -> None:
    path = tmp_path / "other.json"
    main(["tier", "upgrade-creator", "--state", str(path)])
    assert json.loads(path.read_text())["membership:tier"] == "creator"


def test_dataset_command(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    out = tmp_path / "data"
    assert main(["dataset", "--out", str(out), "--train-min", "30", "--val", "7"]) == 0

    assert len((out / "nexora_train.jsonl").read_text().splitlines()) == 30
    assert len((out / "nexora_val.jsonl").read_text().splitlines()) == 7
    assert "Wrote 30 training pairs and 7 validation pairs." in capsys.readouterr().out


def test_unknown_command_exits() -> None:
    with pytest.raises(SystemExit):
        main(["bogus"])
