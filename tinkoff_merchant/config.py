"""Terminal configuration loaded from the environment."""
import os

from dataclasses import dataclass


PROD_URL = "https://securepay.tinkoff.ru/v2"
TEST_URL = "https://rest-api-test.tinkoff.ru/v2"
# Список тестовых карт Тинькофф:
# https://developer.tbank.ru/eacq/intro/errors/test


@dataclass(frozen=True)
class TerminalConfig:
    """Credentials and endpoint of a single acquiring terminal."""

    terminal_key: str
    password: str
    base_url: str = PROD_URL
    debug: bool = False


def base_url_for(env: str) -> str:
    return PROD_URL if env == "prod" else TEST_URL


def load_config() -> TerminalConfig:
    """Build :class:`TerminalConfig` from ``TERMINAL_*`` variables."""
    terminal_key = os.environ.get("TERMINAL_KEY")
    password = os.environ.get("TERMINAL_PASSWORD")

    if not terminal_key or not password:
        raise RuntimeError("TERMINAL_KEY and TERMINAL_PASSWORD must be set")

    return TerminalConfig(
        terminal_key=terminal_key,
        password=password,
        base_url=base_url_for(os.getenv("TERMINAL_ENV", "test")),
        debug=os.getenv("TERMINAL_DEBUG") == "1",
    )
