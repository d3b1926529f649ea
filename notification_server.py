"""Receiver for Tinkoff payment notifications (FastAPI)."""

import logging
import os

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import PlainTextResponse

from tinkoff_merchant.config import TerminalConfig, load_config
from tinkoff_merchant.notification import check_notification
from tinkoff_merchant.sentry import init_sentry
from tinkoff_merchant.types import PAYMENT_STATUSES, SUCCESS_STATUSES


LISTEN_PORT = int(os.getenv("NOTIFICATION_SERVER_PORT", "8080"))
NOTIFICATION_PATH = "/tinkoff/notification"


def create_app(config: TerminalConfig | None = None) -> FastAPI:
    config = config or load_config()
    app = FastAPI(title="Tinkoff notifications")

    @app.post(NOTIFICATION_PATH, response_class=PlainTextResponse)
    async def tinkoff_notification(request: Request) -> PlainTextResponse:
        try:
            body = await request.json()
        except ValueError:
            # JSONDecodeError and UnicodeDecodeError
            raise HTTPException(status_code=400, detail="Body must be JSON")

        if not isinstance(body, dict):
            raise HTTPException(status_code=400, detail="Body must be a JSON object")

        result = check_notification(body, config.terminal_key, config.password)
        if not result.success:
            logging.error("Rejected notification: %s", result.error)
            raise HTTPException(status_code=400, detail=result.error)

        status = body.get("Status")
        logging.info(
            "Notification accepted: order_id=%s payment_id=%s status=%s (%s)",
            body.get("OrderId"), body.get("PaymentId"), status,
            PAYMENT_STATUSES.get(status, "неизвестен"),
        )
        if status in SUCCESS_STATUSES:
            logging.info("Payment completed: order_id=%s", body.get("OrderId"))

        # Банк ждёт в ответе ровно "OK", иначе будет повторять нотификацию
        return PlainTextResponse(content="OK", status_code=200)

    return app


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    init_sentry()

    uvicorn.run(create_app(), host="0.0.0.0", port=LISTEN_PORT)
