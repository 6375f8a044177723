"""Tests für die Kommandozeile (click CliRunner)."""

import json

import pytest
import requests
from click.testing import CliRunner

import main
from state.store import FORM_KEY, FormStore
from tests.conftest import CALENDAR_JSON, make_response


@pytest.fixture
def cli_env(tmp_path, monkeypatch):
    """Arbeitsverzeichnis ohne Konfiguration, Zustand im tmp-Verzeichnis."""
    monkeypatch.chdir(tmp_path)
    state_file = tmp_path / "storage.json"
    monkeypatch.setenv("SCHEDULE_STATE_FILE", str(state_file))
    monkeypatch.delenv("SCHEDULE_API_URL", raising=False)
    monkeypatch.delenv("SCHEDULE_APP_TITLE", raising=False)
    return state_file


def _fake_post(status: int, body: bytes, calls: list):
    def post(self, url, json=None, headers=None, timeout=None):
        calls.append({"url": url, "json": json})
        return make_response(status, body)
    return post


class TestFetch:
    def test_fetch_prints_calendar(self, cli_env, monkeypatch):
        monkeypatch.setenv("SCHEDULE_API_URL", "https://api.example.test/schedule")
        calls: list = []
        monkeypatch.setattr(requests.Session, "post",
                            _fake_post(200, json.dumps(CALENDAR_JSON).encode(), calls))
        result = CliRunner().invoke(main.cli, [
            "fetch", "-u", "Test University", "-g", "G-1",
            "--date-from", "2024-05-01", "--date-to", "2024-05-07",
        ])
        assert result.exit_code == 0, result.output
        assert "Test University" in result.output
        assert "Среда, 1 мая" in result.output
        assert calls[0]["json"]["dt_to"] == "2024-05-07 23:59:59"

    def test_fetch_persists_form(self, cli_env, monkeypatch):
        monkeypatch.setenv("SCHEDULE_API_URL", "https://api.example.test/schedule")
        monkeypatch.setattr(requests.Session, "post",
                            _fake_post(200, json.dumps(CALENDAR_JSON).encode(), []))
        CliRunner().invoke(main.cli, ["fetch", "-u", "Test University", "-g", "G-1"])
        data = json.loads(cli_env.read_text(encoding="utf-8"))
        assert data[FORM_KEY]["group_name"] == "G-1"

    def test_fetch_api_error(self, cli_env, monkeypatch):
        monkeypatch.setenv("SCHEDULE_API_URL", "https://api.example.test/schedule")
        monkeypatch.setattr(requests.Session, "post",
                            _fake_post(500, b"server error", []))
        result = CliRunner().invoke(main.cli, ["fetch", "-u", "Test University",
                                               "-g", "G-1"])
        assert result.exit_code == 1
        assert "500" in result.output
        assert "server error" in result.output

    def test_fetch_without_url(self, cli_env, monkeypatch):
        calls: list = []
        monkeypatch.setattr(requests.Session, "post", _fake_post(200, b"{}", calls))
        result = CliRunner().invoke(main.cli, ["fetch", "-u", "Test University",
                                               "-g", "G-1"])
        assert result.exit_code == 1
        assert "SCHEDULE_API_URL" in result.output
        assert calls == []

    def test_fetch_invalid_form(self, cli_env):
        result = CliRunner().invoke(main.cli, ["fetch"])
        assert result.exit_code == 1
        assert "unvollständig" in result.output


class TestFormCommands:
    def test_form_show_and_reset(self, cli_env, valid_form):
        FormStore(cli_env).save(valid_form)
        runner = CliRunner()
        result = runner.invoke(main.cli, ["form", "show"])
        assert result.exit_code == 0
        assert "Test University" in result.output

        result = runner.invoke(main.cli, ["form", "reset"])
        assert result.exit_code == 0
        assert FORM_KEY not in json.loads(cli_env.read_text(encoding="utf-8"))


class TestConfigCommands:
    def test_config_init_and_show(self, cli_env, tmp_path):
        runner = CliRunner()
        result = runner.invoke(main.cli, ["config", "init", "--api-url",
                                          "https://api.example.test"])
        assert result.exit_code == 0, result.output
        assert (tmp_path / "config" / "client_config.yaml").exists()

        result = runner.invoke(main.cli, ["config", "show"])
        assert result.exit_code == 0
        assert "https://api.example.test" in result.output
