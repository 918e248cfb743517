from __future__ import annotations


def test_configure_structlog_warns_on_invalid_log_level(monkeypatch, capfd) -> None:
    from rwa_options.logging import configure_structlog

    monkeypatch.setenv("RWA_OPTIONS_LOG_LEVEL", "not-a-level")
    configure_structlog()

    captured = capfd.readouterr()
    assert "Invalid RWA_OPTIONS_LOG_LEVEL" in captured.err


def test_configure_structlog_accepts_valid_level(monkeypatch, capfd) -> None:
    from rwa_options.logging import configure_structlog

    monkeypatch.setenv("RWA_OPTIONS_LOG_LEVEL", "debug")
    configure_structlog()

    assert "Invalid" not in capfd.readouterr().err
    monkeypatch.setenv("RWA_OPTIONS_LOG_LEVEL", "WARNING")
    configure_structlog()
