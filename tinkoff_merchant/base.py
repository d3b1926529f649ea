"""Transport-independent part of the Tinkoff clients."""
import json
import logging

from typing import Any, Callable, Mapping

from tinkoff_merchant.config import PROD_URL
from tinkoff_merchant.notification import NotificationCheck, check_notification
from tinkoff_merchant.token import TOKEN_FIELD, generate_token, sha256_hex
from tinkoff_merchant.types import ApiMethod


HEADERS = {"Content-Type": "application/json"}


class BaseMerchantAPI:
    """Holds terminal credentials and builds signed request bodies."""

    def __init__(
        self,
        terminal_key: str,
        password: str,
        base_url: str = PROD_URL,
        timeout: float | None = None,
        debug: bool = False,
        logger: logging.Logger | None = None,
        hash_func: Callable[[str], str] = sha256_hex,
    ) -> None:
        self._terminal_key = terminal_key
        self._password = password
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._debug = debug
        self._logger = logger or logging.getLogger(__name__)
        self._hash_func = hash_func

        if self._debug:
            self._logger.info(
                "Created %s for terminal with key: %s",
                type(self).__name__, self._terminal_key,
            )

    @property
    def terminal_key(self) -> str:
        return self._terminal_key

    @property
    def base_url(self) -> str:
        return self._base_url

    def method_url(self, method: ApiMethod) -> str:
        return f"{self._base_url}/{method}"

    def build_payload(self, method: ApiMethod, params: Mapping[str, Any]) -> dict[str, Any]:
        """Copy *params*, add ``TerminalKey`` and sign the result."""
        payload = dict(params)
        payload.pop(TOKEN_FIELD, None)
        payload["TerminalKey"] = self._terminal_key
        payload[TOKEN_FIELD] = generate_token(payload, self._password, self._hash_func)

        if self._debug:
            self._logger.info("%s:\n%s", method, json.dumps(payload, indent=2, ensure_ascii=False))

        return payload

    def check_notification(self, body: Mapping[str, Any]) -> NotificationCheck:
        """Verify an inbound notification against this terminal."""
        return check_notification(body, self._terminal_key, self._password, self._hash_func)


def is_success(response: Mapping[str, Any]) -> bool:
    """True if the API reported success for the call."""
    return bool(response.get("Success", False)) and str(response.get("ErrorCode", "0")) == "0"
