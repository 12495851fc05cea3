"""Kida template helpers for the page title.

Registers globals that read the current context's registry, so a base
layout can render the cascade built by the bindings of the request::

    <head>
      {{ title_tag() }}
    </head>

Or with a plain string::

    <meta property="og:title" content="{{ page_title() }}">
"""

import html
from collections.abc import Sequence
from typing import Any

from kida import Environment
from kida.template import Markup

from titlecascade.cascade import PartLike, build_title
from titlecascade.context import get_registry
from titlecascade.parts import DEFAULT_SEPARATOR


def page_title() -> str:
    """Current cascade, or the registry's fallback when empty."""
    registry = get_registry()
    return registry.title or registry.config.fallback


def title_tag() -> Markup:
    """Current cascade as an escaped ``<title>`` element."""
    return Markup(f"<title>{html.escape(page_title(), quote=False)}</title>")


def cascade(parts: Sequence[PartLike], separator: str = DEFAULT_SEPARATOR) -> str:
    """Filter form of ``build_title``.

    Example:
        {{ [{"level": 0, "title": "Docs"}, {"level": 1, "title": "API"}] | cascade }}
        → "API • Docs"
    """
    return build_title(parts, separator)


TITLE_GLOBALS: dict[str, Any] = {
    "page_title": page_title,
    "title_tag": title_tag,
}

TITLE_FILTERS: dict[str, Any] = {
    "cascade": cascade,
}


def register_title_globals(env: Environment) -> Environment:
    """Add the title globals and filters to *env* and return it."""
    env.update_filters(TITLE_FILTERS)
    for name, value in TITLE_GLOBALS.items():
        env.add_global(name, value)
    return env
