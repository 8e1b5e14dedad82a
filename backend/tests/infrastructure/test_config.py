"""Settings — defaults reproduce the fixed bind address; env overrides apply."""

from albums_api.config import Settings


def test_defaults(monkeypatch):
    for name in ("HOST", "PORT", "SEED_ALBUMS", "LOG_LEVEL", "LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.host == "localhost"
    assert settings.port == 8085
    assert settings.seed_albums is True
    assert settings.log_format == "json"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("seed_albums", "false")
    settings = Settings(_env_file=None)
    assert settings.port == 9000
    assert settings.seed_albums is False
