"""Unit tests for CLI module"""

import json

import pytest
import yaml
from typer.testing import CliRunner

from cadence.cli.main import app


@pytest.fixture
def answers_file(tmp_path):
    path = tmp_path / "answers.yaml"
    path.write_text(
        yaml.dump(
            {
                "industries": ["SaaS"],
                "platforms": ["linkedin", "email"],
                "linkedinActions": ["send_connection", "send_message"],
                "delayDays": 2,
                "campaignName": "CLI campaign",
            }
        ),
        encoding="utf-8",
    )
    return path


def test_cli_help():
    """Test CLI help lists the commands"""
    # Arrange
    runner = CliRunner()

    # Act
    result = runner.invoke(app, ["--help"])

    # Assert
    assert result.exit_code == 0
    assert "graph" in result.stdout
    assert "steps" in result.stdout
    assert "campaign" in result.stdout
    assert "check" in result.stdout


def test_cli_version():
    """Test CLI version option"""
    # Act
    result = CliRunner().invoke(app, ["--version"])

    # Assert
    assert result.exit_code == 0
    assert "Cadence version" in result.stdout


def test_graph_command_prints_json(answers_file):
    """graph prints nodes and edges"""
    # Act
    result = CliRunner().invoke(app, ["graph", str(answers_file)])

    # Assert
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["nodes"][0]["type"] == "start"
    assert data["nodes"][-1]["type"] == "end"
    assert any(edge["sourceHandle"] == "false" for edge in data["edges"])


def test_steps_command_json(answers_file):
    """steps --json prints the ordered steps"""
    # Act
    result = CliRunner().invoke(app, ["steps", str(answers_file), "--json"])

    # Assert
    assert result.exit_code == 0
    steps = json.loads(result.stdout)
    assert [s["type"] for s in steps] == [
        "lead_generation",
        "linkedin_connect",
        "delay",
        "condition",
        "linkedin_message",
        "delay",
        "email_send",
    ]
    assert [s["order"] for s in steps] == list(range(7))


def test_steps_command_table(answers_file):
    """steps renders a table by default"""
    # Act
    result = CliRunner().invoke(app, ["steps", str(answers_file)])

    # Assert
    assert result.exit_code == 0
    assert "Campaign steps" in result.stdout
    assert "email_send" in result.stdout


def test_campaign_command(answers_file):
    """campaign prints the draft document"""
    # Act
    result = CliRunner().invoke(app, ["campaign", str(answers_file), "--name", "Override"])

    # Assert
    assert result.exit_code == 0
    document = json.loads(result.stdout)
    assert document["name"] == "Override"
    assert document["status"] == "draft"
    assert document["config"]["leads_per_day"] == 25


def test_campaign_command_without_lead_generation(tmp_path):
    """campaign fails with an actionable message when no target criteria exist"""
    # Arrange
    path = tmp_path / "answers.yaml"
    path.write_text(yaml.dump({"platforms": ["email"], "campaignName": "X"}), encoding="utf-8")

    # Act
    result = CliRunner().invoke(app, ["campaign", str(path)])

    # Assert
    assert result.exit_code == 1
    assert "lead generation step" in result.output


def test_check_command_reports_issues(tmp_path):
    """check exits non-zero when issues are found"""
    # Arrange
    path = tmp_path / "answers.yaml"
    path.write_text(
        yaml.dump(
            {
                "industries": ["SaaS"],
                "platforms": ["linkedin"],
                "linkedinActions": ["send_message"],
            }
        ),
        encoding="utf-8",
    )

    # Act
    result = CliRunner().invoke(app, ["check", str(path)])

    # Assert
    assert result.exit_code == 1
    assert "message_without_connection" in result.stdout


def test_check_command_clean(answers_file):
    """check passes on consistent answers"""
    # Act
    result = CliRunner().invoke(app, ["check", str(answers_file)])

    # Assert
    assert result.exit_code == 0
    assert "No issues found" in result.stdout


def test_missing_answers_file(tmp_path):
    """Missing answer files exit with an error"""
    # Act
    result = CliRunner().invoke(app, ["graph", str(tmp_path / "missing.yaml")])

    # Assert
    assert result.exit_code == 1
    assert "not found" in result.output


def test_defaults_option(answers_file, tmp_path):
    """--defaults overrides builder defaults"""
    # Arrange
    defaults = tmp_path / "defaults.yaml"
    defaults.write_text("leads_per_day: 7\n", encoding="utf-8")

    # Act
    result = CliRunner().invoke(
        app, ["campaign", str(answers_file), "--defaults", str(defaults)]
    )

    # Assert
    assert result.exit_code == 0
    assert json.loads(result.stdout)["leads_per_day"] == 7


def test_unreadable_answers_path(tmp_path):
    """A directory given as the answer file exits with an error message"""
    # Act
    result = CliRunner().invoke(app, ["graph", str(tmp_path)])

    # Assert
    assert result.exit_code == 1
    assert "Error: Cannot read file" in result.output
