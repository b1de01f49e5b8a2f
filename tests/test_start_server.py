import pytest

from start_server import check_environment, server_options


def test_missing_secret_stops_startup(monkeypatch):
    monkeypatch.delenv("ACCESS_TOKEN_SECRET", raising=False)

    with pytest.raises(RuntimeError, match="ACCESS_TOKEN_SECRET"):
        check_environment()


def test_secret_present_passes(monkeypatch):
    monkeypatch.setenv("ACCESS_TOKEN_SECRET", "s3cret")
    check_environment()


def test_defaults_reload_outside_production(monkeypatch):
    for name in ("HOST", "PORT", "RELOAD"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("ENVIRONMENT", "development")

    assert server_options() == {"host": "0.0.0.0", "port": 4545, "reload": True, "log_level": "info"}


def test_production_does_not_reload_by_default(monkeypatch):
    monkeypatch.delenv("RELOAD", raising=False)
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("PORT", "8080")

    options = server_options()

    assert options["reload"] is False
    assert options["port"] == 8080
