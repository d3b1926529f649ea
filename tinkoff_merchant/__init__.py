"""Typed client for the Tinkoff (T-Bank) internet acquiring API."""
from .base import is_success
from .client import TinkoffMerchantAPI
from .config import TerminalConfig, load_config
from .notification import NotificationCheck, check_notification
from .sync import TinkoffMerchantSyncAPI
from .token import generate_token, signable_fields
from .types import PAYMENT_STATUSES, SUCCESS_STATUSES

__all__ = [
    "NotificationCheck",
    "PAYMENT_STATUSES",
    "SUCCESS_STATUSES",
    "TerminalConfig",
    "TinkoffMerchantAPI",
    "TinkoffMerchantSyncAPI",
    "check_notification",
    "generate_token",
    "is_success",
    "load_config",
    "signable_fields",
]
