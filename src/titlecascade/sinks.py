"""Rendering sinks for the cascade string.

A sink is any callable that accepts the finished title::

    def sink(title: str) -> None: ...

The root binding is the only writer. ``HeadTitle`` is the built-in
sink for server rendering: it keeps the latest title and renders it
as an escaped ``<title>`` element.
"""

import html
from collections import deque
from typing import Protocol

from kida.template import Markup


class TitleSink(Protocol):
    """Protocol for title sinks. Functions and callable objects both fit."""

    def __call__(self, title: str) -> None: ...


class HeadTitle:
    """In-memory sink holding the document title.

    Usage::

        head = HeadTitle(fallback="My App")
        with TitleBinding("Home", level=0, sink=head):
            head.render()  # Markup('<title>Home</title>')
    """

    __slots__ = ("_fallback", "_history")

    def __init__(self, fallback: str = "", history_size: int = 32) -> None:
        self._fallback = fallback
        # Only the latest history_size titles are kept
        self._history: deque[str] = deque(maxlen=history_size)

    def __call__(self, title: str) -> None:
        self._history.append(title)

    @property
    def title(self) -> str:
        """Latest title received, or the fallback before any update."""
        if self._history and self._history[-1]:
            return self._history[-1]
        return self._fallback

    @property
    def history(self) -> tuple[str, ...]:
        """The most recent titles received, oldest first."""
        return tuple(self._history)

    def render(self) -> Markup:
        return Markup(f"<title>{html.escape(self.title, quote=False)}</title>")

    def __html__(self) -> str:
        return str(self.render())

    def __repr__(self) -> str:
        return f"<HeadTitle {self.title!r}>"
