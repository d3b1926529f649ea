"""Async client for the Tinkoff acquiring API built on httpx."""
import httpx

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


class TinkoffMerchantAPI(BaseMerchantAPI):
    """Asynchronous API client.

    Pass *client* to reuse a connection pool; otherwise a short-lived
    ``httpx.AsyncClient`` is opened for every call.
    """

    def __init__(self, terminal_key: str, password: str, *, client: httpx.AsyncClient | None = None, **kwargs) -> None:
        super().__init__(terminal_key, password, **kwargs)
        self._client = client
        self._owns_client = client is None

    @classmethod
    def from_config(cls, config: TerminalConfig, **kwargs) -> "TinkoffMerchantAPI":
        return cls(
            config.terminal_key,
            config.password,
            base_url=config.base_url,
            debug=config.debug,
            **kwargs,
        )

    async def __aenter__(self) -> "TinkoffMerchantAPI":
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
            self._owns_client = True
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the client opened by ``__aenter__``; an injected one is left to its owner."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def init(self, params: InitParams) -> InitResponse:
        """Метод инициирует платежную сессию."""
        return await self._request("Init", params)

    async def get_state(self, params: GetStateParams) -> GetStateResponse:
        """Метод возвращает статус платежа."""
        return await self._request("GetState", params)

    async def check_order(self, params: CheckOrderParams) -> CheckOrderResponse:
        """Метод возвращает статус заказа."""
        return await self._request("CheckOrder", params)

    async def confirm(self, params: ConfirmParams) -> ConfirmResponse:
        """Подтвердить двухэтапный платёж."""
        return await self._request("Confirm", params)

    async def cancel(self, params: CancelParams) -> CancelResponse:
        """
        Отменяет платежную сессию. В зависимости от статуса платежа переводит его:

        - NEW -> CANCELED
        - AUTHORIZED -> PARTIAL_REVERSED, если отмена не на полную сумму
        - AUTHORIZED -> REVERSED, если отмена на полную сумму
        - CONFIRMED -> PARTIAL_REFUNDED, если отмена не на полную сумму
        - CONFIRMED -> REFUNDED, если отмена на полную сумму
        """
        return await self._request("Cancel", params)

    async def _request(self, method: ApiMethod, params: Mapping[str, Any]) -> Any:
        payload = self.build_payload(method, params)
        url = self.method_url(method)

        try:
            if self._client is not None:
                response = await self._client.post(url, json=payload, headers=HEADERS)
            else:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    response = await client.post(url, json=payload, headers=HEADERS)
            response.raise_for_status()
            return response.json()
        except Exception as e:
            self._logger.error("Tinkoff %s request failed: %s", method, e)
            capture_exception(e)
            raise
