import pytest
from pydantic import ValidationError
from pairwise.core.config import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("PAIRWISE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("PAIRWISE_SHOW_HEADERS", raising=False)


def test_defaults():
    settings = Settings.load()
    assert settings.LOG_LEVEL == "INFO"
    assert settings.SHOW_HEADERS is True


def test_load_from_env(monkeypatch):
    monkeypatch.setenv("PAIRWISE_LOG_LEVEL", "debug")
    monkeypatch.setenv("PAIRWISE_SHOW_HEADERS", "false")

    settings = Settings.load()
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.SHOW_HEADERS is False


def test_show_headers_truthy(monkeypatch):
    monkeypatch.setenv("PAIRWISE_SHOW_HEADERS", "yes")
    assert Settings.load().SHOW_HEADERS is True


def test_unknown_log_level(monkeypatch):
    monkeypatch.setenv("PAIRWISE_LOG_LEVEL", "loud")
    with pytest.raises(ValidationError):
        Settings.load()


@pytest.mark.parametrize("raw", ["treu", "nope", "2"])
def test_show_headers_rejects_unknown_values(monkeypatch, raw):
    monkeypatch.setenv("PAIRWISE_SHOW_HEADERS", raw)
    with pytest.raises(ValidationError):
        Settings.load()


@pytest.mark.parametrize(
    "raw, expected",
    [("0", False), ("off", False), ("No", False), ("1", True), ("ON", True)],
)
def test_show_headers_accepted_spellings(monkeypatch, raw, expected):
    monkeypatch.setenv("PAIRWISE_SHOW_HEADERS", raw)
    assert Settings.load().SHOW_HEADERS is expected
