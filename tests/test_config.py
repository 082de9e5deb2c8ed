"""Tests for settings and the user .env writer."""

from core.config import AppSettings, write_user_env_vars


def test_settings_read_prefixed_env(monkeypatch):
    monkeypatch.setenv("JOBCTL_URL", "https://rd.example.com")
    monkeypatch.setenv("JOBCTL_PROJECT", "ops")
    monkeypatch.setenv("JOBCTL_API_VERSION", "45")
    settings = AppSettings()
    assert settings.url == "https://rd.example.com"
    assert settings.project == "ops"
    assert settings.api_version == 45


def test_write_user_env_vars_merges_and_skips_none(tmp_path):
    env_path = tmp_path / "cfg" / ".env"
    env_path.parent.mkdir()
    env_path.write_text("JOBCTL_URL=http://old\nJOBCTL_PROJECT=keep\n")

    write_user_env_vars({"JOBCTL_URL": "http://new", "JOBCTL_AUTH_TOKEN": "t", "JOBCTL_PROJECT": None}, env_path)

    lines = env_path.read_text().splitlines()
    assert lines[0].startswith("#")
    assert "JOBCTL_URL=http://new" in lines
    assert "JOBCTL_PROJECT=keep" in lines
    assert "JOBCTL_AUTH_TOKEN=t" in lines


def test_write_user_env_vars_reads_quotes_and_skips_junk(tmp_path):
    env_path = tmp_path / ".env"
    env_path.write_text('# comment\n\nJOBCTL_URL="http://quoted"\nnot a pair\n=orphan\nJOBCTL_PROJECT = \'ops\'\n')

    write_user_env_vars({}, env_path)

    lines = env_path.read_text().splitlines()
    assert lines[1:] == ["JOBCTL_PROJECT=ops", "JOBCTL_URL=http://quoted"]
