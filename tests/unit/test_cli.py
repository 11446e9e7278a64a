"""
Tests for the command line interface.
"""
import json

import pytest
from typer.testing import CliRunner

from pb_portal.cli import app

runner = CliRunner()


@pytest.fixture
def config_path(tmp_path):
    """Return a config file for a file-backed local store."""
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "mode": "local",
        "local": {"path": str(tmp_path / "portal.json")},
    }))
    return str(path)


def test_missing_config(tmp_path):
    result = runner.invoke(app, ["users", "--config", str(tmp_path / "absent.json")])
    assert result.exit_code == 1
    assert "not found" in result.output


def test_settings_show_and_update(config_path):
    result = runner.invoke(app, ["settings", "--config", config_path])
    assert result.exit_code == 0
    assert "Voting open" in result.output
    assert "False" in result.output

    result = runner.invoke(app, ["settings", "--config", config_path, "--voting", "--no-stage1"])
    assert result.exit_code == 0

    with open(config_path.replace("config.json", "portal.json")) as f:
        stored = json.load(f)
    assert stored["portalSettings"] == [
        {"stage1Visible": False, "stage2Visible": False, "votingOpen": True}]


def test_seed_rejected_in_local_mode(config_path):
    result = runner.invoke(app, ["seed", "--config", config_path])
    assert result.exit_code == 1
    assert "Seeding failed" in result.output


def test_provision_needs_remote_mode(config_path):
    result = runner.invoke(app, ["provision-identities", "--config", config_path])
    assert result.exit_code == 1


def test_users_lists_demo_users(config_path):
    result = runner.invoke(app, ["users", "--config", config_path])
    assert result.exit_code == 0
    assert "Users" in result.output
