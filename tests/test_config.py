import pytest

from tinkoff_merchant.config import PROD_URL, TEST_URL, load_config


@pytest.fixture
def terminal_env(monkeypatch):
    monkeypatch.setenv("TERMINAL_KEY", "TestTerminal")
    monkeypatch.setenv("TERMINAL_PASSWORD", "pwd")
    monkeypatch.delenv("TERMINAL_ENV", raising=False)
    monkeypatch.delenv("TERMINAL_DEBUG", raising=False)
    return monkeypatch


def test_defaults_to_test_environment(terminal_env):
    config = load_config()
    assert config.terminal_key == "TestTerminal"
    assert config.password == "pwd"
    assert config.base_url == TEST_URL
    assert config.debug is False


def test_prod_environment_and_debug(terminal_env):
    terminal_env.setenv("TERMINAL_ENV", "prod")
    terminal_env.setenv("TERMINAL_DEBUG", "1")
    config = load_config()
    assert config.base_url == PROD_URL
    assert config.debug is True


@pytest.mark.parametrize("missing", ["TERMINAL_KEY", "TERMINAL_PASSWORD"])
def test_missing_credentials(terminal_env, missing):
    terminal_env.delenv(missing)
    with pytest.raises(RuntimeError, match="must be set"):
        load_config()


def test_sentry_disabled_by_default():
    from tinkoff_merchant.sentry import init_sentry

    assert init_sentry() is False


def test_sentry_initialised_when_enabled(monkeypatch):
    from unittest.mock import patch

    from tinkoff_merchant.sentry import init_sentry

    monkeypatch.setenv("ENABLE_SENTRY", "1")
    monkeypatch.setenv("SENTRY_DSN", "https://key@sentry.example.com/1")
    with patch("tinkoff_merchant.sentry.sentry_sdk.init") as init:
        assert init_sentry() is True

    assert init.call_args.kwargs["dsn"] == "https://key@sentry.example.com/1"
