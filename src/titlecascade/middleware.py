"""ASGI middleware giving every request its own title registry.

Wrap the application once::

    app = TitleScopeMiddleware(app, config=TitleConfig(fallback="My App"))

Each ``http`` request then runs inside ``title_scope()``, so titles and
separators set while rendering one request are never visible to
another. Other scope types (lifespan, websocket) pass straight through.
"""

import logging
from collections.abc import Awaitable, Callable, MutableMapping
from typing import Any, TypeAlias

from titlecascade.config import TitleConfig
from titlecascade.context import title_scope

logger = logging.getLogger("titlecascade.middleware")

Scope: TypeAlias = MutableMapping[str, Any]
Receive: TypeAlias = Callable[[], Awaitable[MutableMapping[str, Any]]]
Send: TypeAlias = Callable[[MutableMapping[str, Any]], Awaitable[None]]
ASGIApp: TypeAlias = Callable[[Scope, Receive, Send], Awaitable[None]]


class TitleScopeMiddleware:
    """Run each HTTP request against a fresh ``TitleRegistry``."""

    __slots__ = ("app", "config")

    def __init__(self, app: ASGIApp, config: TitleConfig | None = None) -> None:
        self.app = app
        self.config = config

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        with title_scope(self.config):
            logger.debug("Title scope for %s %s", scope.get("method"), scope.get("path"))
            await self.app(scope, receive, send)
