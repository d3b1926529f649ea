"""Blocking client for the Tinkoff acquiring API built on requests."""
import requests

from typing import Any, Mapping

from tinkoff_merchant.base import HEADERS, BaseMerchantAPI
from tinkoff_merchant.config import TerminalConfig
from tinkoff_merchant.sentry import capture_exception
from tinkoff_merchant.types import (
    ApiMethod,
    CancelParams,
    CancelResponse,
    CheckOrderParams,
    CheckOrderResponse,
    ConfirmParams,
    ConfirmResponse,
    GetStateParams,
    GetStateResponse,
    InitParams,
    InitResponse,
)


class TinkoffMerchantSyncAPI(BaseMerchantAPI):
    """Same operations as :class:`TinkoffMerchantAPI`, without asyncio."""

    def __init__(self, terminal_key: str, password: str, *, session: requests.Session | None = None, **kwargs) -> None:
        super().__init__(terminal_key, password, **kwargs)
        self._session = session

    @classmethod
    def from_config(cls, config: TerminalConfig, **kwargs) -> "TinkoffMerchantSyncAPI":
        return cls(
            config.terminal_key,
            config.password,
            base_url=config.base_url,
            debug=config.debug,
            **kwargs,
        )

    def init(self, params: InitParams) -> InitResponse:
        return self._request("Init", params)

    def get_state(self, params: GetStateParams) -> GetStateResponse:
        return self._request("GetState", params)

    def check_order(self, params: CheckOrderParams) -> CheckOrderResponse:
        return self._request("CheckOrder", params)

    def confirm(self, params: ConfirmParams) -> ConfirmResponse:
        return self._request("Confirm", params)

    def cancel(self, params: CancelParams) -> CancelResponse:
        return self._request("Cancel", params)

    def _request(self, method: ApiMethod, params: Mapping[str, Any]) -> Any:
        payload = self.build_payload(method, params)
        post = self._session.post if self._session is not None else requests.post

        try:
            response = post(self.method_url(method), json=payload, headers=HEADERS, timeout=self._timeout)
            response.raise_for_status()
            return response.json()
        except Exception as e:
            self._logger.error("Tinkoff %s request failed: %s", method, e)
            capture_exception(e)
            raise
