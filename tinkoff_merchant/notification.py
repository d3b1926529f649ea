"""Verification of inbound payment notifications."""
import hmac
import logging

from dataclasses import dataclass
from typing import Any, Callable, Mapping

from tinkoff_merchant.token import TOKEN_FIELD, generate_token, sha256_hex


@dataclass(frozen=True)
class NotificationCheck:
    success: bool
    error: str | None = None


def check_notification(
    body: Mapping[str, Any],
    terminal_key: str,
    password: str,
    hash_func: Callable[[str], str] = sha256_hex,
) -> NotificationCheck:
    """Check that *body* was sent for our terminal and carries a valid token.

    The token is recomputed over every field of the notification except
    ``Token`` itself, with the same rules as for outgoing requests.
    """
    request_terminal_key = body.get("TerminalKey")
    if request_terminal_key != terminal_key:
        logging.warning("Notification for foreign terminal: %s", request_terminal_key)
        return NotificationCheck(False, f"Invalid request TerminalKey: {request_terminal_key}")

    token_params = dict(body)
    token_params.pop(TOKEN_FIELD, None)
    expected = generate_token(token_params, password, hash_func)

    received = body.get(TOKEN_FIELD)
    if not isinstance(received, str) or not hmac.compare_digest(received, expected):
        logging.warning(
            "Notification token mismatch: order_id=%s payment_id=%s",
            body.get("OrderId"), body.get("PaymentId"),
        )
        return NotificationCheck(False, "Invalid request Token")

    return NotificationCheck(True)
