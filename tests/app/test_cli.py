from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from doclink.ui import cli
from tests.helpers.scenarios import fixture_payload

if TYPE_CHECKING:
    from pathlib import Path


def test_similar_prints_verdict_per_measure(capsys: pytest.CaptureFixture[str]) -> None:
    cli.main(["similar", "Server", "servers", "--pos", "NN", "NNS"])

    out = capsys.readouterr().out
    assert "'Server' vs 'servers': similar (best score 0.857)" in out
    assert "equality" in out
    assert "levenshtein" in out


def test_measures_lists_buildable_measures(capsys: pytest.CaptureFixture[str]) -> None:
    cli.main(["--set", "similarity.measures=token_overlap,equality", "measures"])

    assert capsys.readouterr().out.split() == ["token_overlap", "equality"]


def test_environment_configures_measures(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("DOCLINK_SIMILARITY__MEASURES", "levenshtein")

    cli.main(["measures"])

    assert capsys.readouterr().out.split() == ["levenshtein"]


def test_config_file_is_read(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config = tmp_path / "doclink.conf"
    config.write_text("similarity.measures=equality\n", encoding="utf-8")

    cli.main(["--config", str(config), "measures"])

    assert capsys.readouterr().out.split() == ["equality"]


def test_resolve_prints_recommendations_and_links(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    fixture = tmp_path / "fixture.json"
    fixture.write_text(json.dumps(fixture_payload()), encoding="utf-8")

    cli.main(["resolve", str(fixture)])

    out = capsys.readouterr().out
    assert "[architecture]" in out
    assert "[code]" in out
    assert "Logic : Component  (Logic)" in out
    assert "Logic -> LogicComponent [_logic] confidence=1.00 claimants=instance_connection" in out
    assert "Database -> DatabaseAccess [_db_access]" in out


@pytest.mark.parametrize(
    "argv",
    [
        ["--set", "similarity.measures", "measures"],
        ["--set", "similarity.measures=soundex", "measures"],
        ["similar", "a", "b", "--pos", "DT", "NN"],
    ],
)
def test_invalid_arguments_exit_with_status_2(argv: list[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        cli.main(argv)

    assert exc.value.code == 2


def test_failures_exit_with_status_1(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exc:
        cli.main(["resolve", str(tmp_path / "missing.json")])

    assert exc.value.code == 1


def test_unknown_agent_exits_with_status_1(tmp_path: Path) -> None:
    fixture = tmp_path / "fixture.json"
    fixture.write_text(json.dumps(fixture_payload()), encoding="utf-8")

    with pytest.raises(SystemExit) as exc:
        cli.main(["--set", "stages.connection=oracle", "resolve", str(fixture)])

    assert exc.value.code == 1
