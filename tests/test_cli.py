"""Smoke tests for the terminal front end."""

from __future__ import annotations

import json
import tempfile
from pathlib import Path

import pytest
from typer.testing import CliRunner

from quizdeck.cli import app

CONTENT = """
categories:
  - id: quick
    name: Quick
    quizzes:
      - type: TRUE_FALSE
        question: Ice floats on water.
        answer: true
      - type: SINGLE_SELECT
        question: Pick b
        options: [a, b, c]
        answer: 1
"""


@pytest.fixture
def workspace(monkeypatch):
    """Temporary config, content and preference paths for CLI runs."""
    monkeypatch.delenv("QUIZDECK_CONFIG_OVERRIDES", raising=False)
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir)
        content = root / "categories.yaml"
        content.write_text(CONTENT, encoding="utf-8")
        config = root / "config.yaml"
        config.write_text(
            f"paths:\n"
            f"  content_file: {content}\n"
            f"  preferences_file: {root / 'prefs' / 'player.json'}\n"
            f"logging:\n"
            f"  level: WARNING\n",
            encoding="utf-8",
        )
        yield root, config


@pytest.fixture
def runner():
    return CliRunner()


def test_categories_lists_content(runner, workspace):
    _, config = workspace

    result = runner.invoke(app, ["categories", "--config", str(config)])

    assert result.exit_code == 0
    assert "quick" in result.output
    assert "Quick" in result.output


def test_play_scores_answers(runner, workspace):
    _, config = workspace

    result = runner.invoke(app, ["play", "quick", "--config", str(config)], input="y\n2\n")

    assert result.exit_code == 0
    assert "Quick: 2/2 correct" in result.output


def test_play_unknown_category_fails(runner, workspace):
    _, config = workspace

    result = runner.invoke(app, ["play", "history", "--config", str(config)])

    assert result.exit_code == 1


def test_profile_set_show_and_sign_out(runner, workspace):
    root, config = workspace

    result = runner.invoke(
        app,
        [
            "profile", "set",
            "--first-name", "Ada",
            "--last-initial", "l",
            "--avatar", "TWO",
            "--config", str(config),
        ],
    )
    assert result.exit_code == 0

    stored = json.loads((root / "prefs" / "player.json").read_text(encoding="utf-8"))
    assert stored == {
        "playerPreferences.avatar": "TWO",
        "playerPreferences.firstName": "Ada",
        "playerPreferences.lastInitial": "L",
    }

    result = runner.invoke(app, ["profile", "show", "--config", str(config)])
    assert result.exit_code == 0
    assert "First name: Ada" in result.output
    assert "Avatar: TWO" in result.output
    assert "Status: signed in" in result.output

    result = runner.invoke(app, ["profile", "sign-out", "--config", str(config)])
    assert result.exit_code == 0

    result = runner.invoke(app, ["profile", "show", "--config", str(config)])
    assert "Status: not signed in" in result.output


def test_profile_show_reports_corrupt_avatar(runner, workspace):
    root, config = workspace
    prefs = root / "prefs"
    prefs.mkdir()
    (prefs / "player.json").write_text(
        json.dumps({"playerPreferences.avatar": "BOGUS"}), encoding="utf-8"
    )

    result = runner.invoke(app, ["profile", "show", "--config", str(config)])

    assert result.exit_code == 1
    assert "Unknown avatar variant" in result.output


def test_play_multi_select_reprompts_after_bad_input(runner, workspace):
    """A malformed option list is rejected whole and the player is asked again."""
    root, config = workspace
    (root / "categories.yaml").write_text(
        "categories:\n"
        "  - id: gases\n"
        "    name: Gases\n"
        "    quizzes:\n"
        "      - type: MULTI_SELECT\n"
        "        question: Which are noble gases?\n"
        "        options: [Neon, Oxygen, Argon]\n"
        "        answer: [0, 2]\n",
        encoding="utf-8",
    )

    result = runner.invoke(
        app, ["play", "gases", "--config", str(config)], input="1,x\n1,3\n"
    )

    assert result.exit_code == 0
    assert "Gases: 1/1 correct" in result.output


@pytest.mark.parametrize(
    "args",
    [
        ["profile", "set", "--first-name", "Ada", "--last-initial", "L"],
        ["profile", "sign-out"],
    ],
)
def test_profile_writes_report_corrupt_file(runner, workspace, args):
    """Changing a profile over an unreadable file exits cleanly with a message."""
    root, config = workspace
    prefs = root / "prefs"
    prefs.mkdir()
    (prefs / "player.json").write_text("{bad", encoding="utf-8")

    result = runner.invoke(app, [*args, "--config", str(config)])

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert (prefs / "player.json").read_text(encoding="utf-8") == "{bad"
