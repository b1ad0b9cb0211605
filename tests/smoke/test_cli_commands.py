"""
Smoke Tests for CLI Commands.

These tests verify that CLI commands run against temporary settings and
produce output.

Usage:
    pytest tests/smoke/test_cli_commands.py -v
    pytest tests/smoke/test_cli_commands.py -v -m smoke
"""

import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from dsa_survey.cli.main import app
from dsa_survey.core.identity import ActorIdentity

# Mark all tests in this module as smoke tests
pytestmark = pytest.mark.smoke

runner = CliRunner()


@pytest.fixture
def cli_settings(settings):
    with patch("dsa_survey.cli.main.get_settings", return_value=settings):
        yield settings


def test_help():
    result = runner.invoke(app, ["--help"])

    assert result.exit_code == 0
    assert "generate" in result.stdout


def test_categories_lists_bank(cli_settings, sample_questions):
    result = runner.invoke(app, ["categories"])

    assert result.exit_code == 0
    for category in sample_questions:
        assert category in result.stdout


def test_answers_unknown_actor_fails(cli_settings):
    result = runner.invoke(app, ["answers", "nobody", "best-adoption"])

    assert result.exit_code == 1
    assert "Actor not found" in result.stdout


def test_generate_writes_payload(cli_settings, service, tmp_path):
    service.record_answer(
        ActorIdentity.external("alice"), "best-adoption", "How many teams use the system?", "7"
    )
    output = tmp_path / "payload.json"

    result = runner.invoke(app, ["generate", "alice", "best-adoption", "--output", str(output)])

    assert result.exit_code == 0
    payload = json.loads(output.read_text(encoding="utf-8"))
    assert payload["id"] == "alice"
    assert payload["answers"] == {"How many teams use the system?": "7"}


def test_generate_without_answers_fails(cli_settings):
    result = runner.invoke(app, ["generate", "alice", "best-adoption"])

    assert result.exit_code == 1


def test_read_commands_leave_document_untouched(cli_settings, service, db_path):
    from dsa_survey.storage.answer_store import AnswerStore

    service.record_answer(
        ActorIdentity.external("alice"), "best-adoption", "How many teams use the system?", "7"
    )
    before = db_path.stat().st_ino

    with patch.object(AnswerStore, "mirror_questions") as mirror:
        runner.invoke(app, ["categories"])
        result = runner.invoke(app, ["answers", "alice", "best-adoption"])

    assert result.exit_code == 0
    mirror.assert_not_called()
    assert db_path.stat().st_ino == before


def test_categories_does_not_create_document(cli_settings, db_path):
    result = runner.invoke(app, ["categories"])

    assert result.exit_code == 0
    assert not db_path.exists()
