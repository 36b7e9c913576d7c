"""Test the `asconfig-tasks` CLI."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from asconfig_tasks.cli import main


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ROYALE_HOME", raising=False)
    monkeypatch.delenv("FLEX_HOME", raising=False)
    monkeypatch.setenv("PATH", "")


@pytest.fixture
def sdk(tmp_path: Path) -> Path:
    root = tmp_path / "sdk"
    root.mkdir()
    (root / "royale-sdk-description.xml").write_text("<sdk/>")
    return root


def test_list_json_for_air_mobile(tmp_path: Path, sdk: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "asconfig.json").write_text('{"config": "airmobile"}')
    rc = main(["list", "--project-dir", str(tmp_path), "--platform", "linux", "--json", "--sdk", str(sdk)])
    assert rc == 0

    payload = json.loads(capsys.readouterr().out)
    labels = [task["label"] for task in payload["tasks"]]
    assert labels[:2] == ["compile debug build", "compile release build"]
    assert len(labels) == 6
    assert payload["tasks"][2]["air"] == "ios"
    assert payload["tasks"][2]["args"] == ["--flexHome", str(sdk), "--debug=true", "--air", "ios"]
    assert payload["tasks"][0]["problemMatcher"] == "$nextgenas_nomatch"


def test_list_json_windows_bundle(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "asconfig.json").write_text('{application: "Main-app.xml", windows: {target: "bundle"}}')
    rc = main(["list", "--project-dir", str(tmp_path), "--platform", "windows", "--json"])
    assert rc == 0

    tasks = json.loads(capsys.readouterr().out)["tasks"]
    assert [t["label"] for t in tasks][2:] == ["package release Windows application (captive runtime)"]
    assert tasks[0]["command"] == "asconfigc.cmd"
    assert tasks[0]["args"] == ["--debug=true"]


def test_list_without_workspace(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "asconfig.json").write_text("{}")
    rc = main(["list", "--project-dir", str(tmp_path), "--json", "--no-workspace", "--active-file", "Main.as"])
    assert rc == 0
    assert json.loads(capsys.readouterr().out) == {"tasks": []}


def test_list_table_output(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    rc = main(["list", "--project-dir", str(tmp_path), "--active-file", "src/Main.as"])
    assert rc == 0
    out = capsys.readouterr().out
    assert "compile debug build" in out
    assert "compile release build" in out


def test_list_table_empty(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    rc = main(["list", "--project-dir", str(tmp_path)])
    assert rc == 0
    assert "No tasks available" in capsys.readouterr().out


def test_broken_settings_exit_code(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    settings_dir = tmp_path / ".asconfig_tasks"
    settings_dir.mkdir()
    (settings_dir / "config.yaml").write_text("sdk: [unclosed\n")
    (tmp_path / "asconfig.json").write_text("{}")

    rc = main(["list", "--project-dir", str(tmp_path), "--json"])
    assert rc == 2
    payload = json.loads(capsys.readouterr().out)
    assert len(payload["tasks"]) == 2
    assert payload["errors"]


def test_settings_command_override(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    settings_dir = tmp_path / ".asconfig_tasks"
    settings_dir.mkdir()
    (settings_dir / "config.yaml").write_text("command: /opt/bin/asconfigc\n")
    (tmp_path / "asconfig.json").write_text("{}")

    assert main(["list", "--project-dir", str(tmp_path), "--json"]) == 0
    tasks = json.loads(capsys.readouterr().out)["tasks"]
    assert {t["command"] for t in tasks} == {"/opt/bin/asconfigc"}


def test_sdk_command(tmp_path: Path, sdk: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setenv("FLEX_HOME", str(sdk))
    assert main(["sdk", "--project-dir", str(tmp_path), "--json"]) == 0
    assert json.loads(capsys.readouterr().out)["sdk"] == str(sdk)


def test_sdk_command_not_found(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["sdk", "--project-dir", str(tmp_path)]) == 1
    assert "No framework SDK found" in capsys.readouterr().out


def test_options_after_subcommand(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "asconfig.json").write_text('{"config": "air"}')
    rc = main(["list", "--project-dir", str(tmp_path), "--platform", "windows", "--log-level", "DEBUG", "--json"])
    assert rc == 0
    labels = [t["label"] for t in json.loads(capsys.readouterr().out)["tasks"]]
    assert labels[2] == "package release Windows application (captive runtime)"
    assert len(labels) == 5


def test_options_before_subcommand_rejected(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        main(["--project-dir", str(tmp_path), "list", "--json"])


def test_settings_command_with_launcher(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    settings_dir = tmp_path / ".asconfig_tasks"
    settings_dir.mkdir()
    (settings_dir / "config.yaml").write_text("command: npx asconfigc\n")
    (tmp_path / "asconfig.json").write_text("{}")

    assert main(["list", "--project-dir", str(tmp_path), "--json"]) == 0
    tasks = json.loads(capsys.readouterr().out)["tasks"]
    assert tasks[0]["command"] == "npx"
    assert tasks[0]["args"] == ["asconfigc", "--debug=true"]
