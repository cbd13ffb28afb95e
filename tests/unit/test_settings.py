import logging

from catalog import settings


def test_defaults_are_parsed() -> None:
    assert isinstance(settings.PORT, int)
    assert settings.LOG_LEVEL == settings.LOG_LEVEL.upper()


def test_configure_logging_uses_given_level(monkeypatch) -> None:
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    settings.configure_logging("DEBUG")

    assert calls[0]["level"] == logging.DEBUG
