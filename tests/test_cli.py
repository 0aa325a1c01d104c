import pytest
from typer.testing import CliRunner

from marketplace import cli
from marketplace.db import session as db_session

runner = CliRunner()


@pytest.fixture(autouse=True)
def cli_sessions(monkeypatch, session_factory):
    monkeypatch.setattr(db_session, "SessionLocal", session_factory)


def test_add_then_list():
    added = runner.invoke(cli.app, ["remarks", "add", "bid", "15", "-r", "spam bid", "--by", "admin-1", "--role", "admin"])
    assert added.exit_code == 0
    assert "Recorded deletion remark" in added.output

    listed = runner.invoke(cli.app, ["remarks", "list", "--entity-type", "bid"])
    assert listed.exit_code == 0
    assert "spam bid" in listed.output
    assert "admin-1 (admin)" in listed.output
    assert "1 of 1" in listed.output


def test_add_rejects_unknown_entity_type():
    result = runner.invoke(cli.app, ["remarks", "add", "invoice", "15", "-r", "spam", "--by", "admin-1"])
    assert result.exit_code == 1


def test_list_empty():
    result = runner.invoke(cli.app, ["remarks", "list"])
    assert result.exit_code == 0
    assert "No deletion remarks found" in result.output
