import os
import logging
import sentry_sdk

from sentry_sdk.integrations.logging import LoggingIntegration


def sentry_enabled() -> bool:
    return os.getenv("ENABLE_SENTRY") == "1"


def init_sentry() -> bool:
    """Initialise Sentry if ENABLE_SENTRY=1. Returns whether it was enabled."""
    if not sentry_enabled():
        return False

    sentry_sdk.init(
        dsn=os.getenv("SENTRY_DSN"),
        enable_logs=True,
        send_default_pii=False,
        integrations=[LoggingIntegration(
            level=logging.INFO,
            event_level=logging.ERROR,
        )],
    )
    return True


def capture_exception(e: BaseException) -> None:
    if sentry_enabled():
        sentry_sdk.capture_exception(e)
