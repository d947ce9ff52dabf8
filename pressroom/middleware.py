import logging
import time
from contextvars import ContextVar

from sqlalchemy import event
from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger(__name__)

# SQL statements run while serving the current request.
query_count_var: ContextVar[int] = ContextVar("query_count", default=0)


def install_query_counter(engine) -> None:
    """Bump ``query_count_var`` on each statement *engine* sends to the database."""

    @event.listens_for(engine.sync_engine, "before_cursor_execute")
    def _count_query(conn, cursor, statement, parameters, context, executemany):
        query_count_var.set(query_count_var.get() + 1)


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)


class TimingMiddleware:
    """Stamp responses with elapsed time and query count, and log the request."""

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            return await self.app(scope, receive, send)

        # Must run in the app's own task; the counter is a ContextVar.
        query_count_var.set(0)
        start = time.perf_counter()
        status = {"code": 500}

        async def send_with_metrics(message: Message) -> None:
            if message["type"] == "http.response.start":
                status["code"] = message["status"]
                message["headers"] = [
                    *message.get("headers", []),
                    (b"x-response-time-ms", str(_elapsed_ms(start)).encode()),
                    (b"x-query-count", str(query_count_var.get()).encode()),
                ]
            await send(message)

        try:
            await self.app(scope, receive, send_with_metrics)
        finally:
            logger.info(
                "%s %s -> %d in %.2f ms (%d queries)",
                scope["method"], scope["path"], status["code"],
                _elapsed_ms(start), query_count_var.get(),
            )
