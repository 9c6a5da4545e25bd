"""
Request-scoped cancellation.

Each HTTP request is served by its own asyncio task. When the client goes away
(`http.disconnect` on the receive channel) the task is cancelled, so whatever it is
awaiting, typically a database round trip, is aborted and the session dependency
rolls back and closes on the way out. With a deadline configured the same happens
when the request runs too long, and the client gets a 504 if nothing was sent yet.

Register it outermost (added last) so the whole request, other middlewares
included, runs inside the cancellable task.
"""

import asyncio
import json
import logging

from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger(__name__)

# nginx's "client closed request"; only ever logged, never sent
CLIENT_CLOSED_REQUEST = 499


class RequestCancellationMiddleware:

    def __init__(self, app: ASGIApp, timeout: float | None = None):
        self.app = app
        self.timeout = timeout

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        inbox: asyncio.Queue[Message] = asyncio.Queue()
        state = {"started": False, "complete": False, "disconnected": False}

        async def send_wrapper(message: Message) -> None:
            if message["type"] == "http.response.start":
                state["started"] = True
            elif message["type"] == "http.response.body" and not message.get("more_body", False):
                state["complete"] = True
            await send(message)

        handler = asyncio.create_task(self.app(scope, inbox.get, send_wrapper))

        async def pump() -> None:
            while True:
                message = await receive()
                await inbox.put(message)
                if message["type"] == "http.disconnect":
                    # servers also report a finished response as a disconnect
                    if not state["complete"]:
                        state["disconnected"] = True
                        handler.cancel()
                    return

        listener = asyncio.create_task(pump())
        try:
            done, _ = await asyncio.wait({handler}, timeout=self.timeout)
            if not done:
                handler.cancel()
                await asyncio.wait({handler})
                if not handler.cancelled() and handler.exception() is not None:
                    # the handler failed while unwinding; its error is still the cause
                    logger.error(
                        "http.request.failed_after_timeout",
                        extra={"method": scope.get("method"), "path": scope.get("path")},
                        exc_info=handler.exception(),
                    )
                await self._on_timeout(scope, send, response_started=state["started"])
                return

            if handler.cancelled() and state["disconnected"]:
                logger.info(
                    "http.request.cancelled",
                    extra={
                        "method": scope.get("method"),
                        "path": scope.get("path"),
                        "status_code": CLIENT_CLOSED_REQUEST,
                    },
                )
                return

            # re-raises whatever the application raised
            handler.result()
        finally:
            listener.cancel()
            if not handler.done():
                handler.cancel()

    async def _on_timeout(self, scope: Scope, send: Send, *, response_started: bool) -> None:
        logger.warning(
            "http.request.timeout",
            extra={
                "method": scope.get("method"),
                "path": scope.get("path"),
                "status_code": 504,
                "timeout_seconds": self.timeout,
            },
        )
        if response_started:
            # headers are gone already; all we can do is stop
            return

        body = json.dumps({"error": "request timed out"}).encode("utf-8")
        await send(
            {
                "type": "http.response.start",
                "status": 504,
                "headers": [
                    (b"content-type", b"application/json"),
                    (b"content-length", str(len(body)).encode("latin-1")),
                ],
            }
        )
        await send({"type": "http.response.body", "body": body})
