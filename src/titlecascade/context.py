"""Context-scoped title registry via ContextVar.

Provides:
- ``get_registry()``: the ``TitleRegistry`` for the current task/thread.
- ``title_scope()``: install a fresh registry for a block of work.
- Module-level shortcuts (``set_title_part``, ``reset_level_counter``, ...)
  that act on the current registry.

``ContextVar`` is task-local under asyncio, so two requests handled
concurrently each see their own registry as long as each runs inside
its own ``title_scope()``. ``TitleScopeMiddleware`` does that per
request.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

from titlecascade.config import TitleConfig
from titlecascade.registry import TitleRegistry

logger = logging.getLogger("titlecascade.context")

registry_var: ContextVar[TitleRegistry | None] = ContextVar("titlecascade_registry", default=None)
"""The registry for the current context. Created lazily by ``get_registry()``."""


def get_registry() -> TitleRegistry:
    """Return the current context's registry, creating one if needed."""
    registry = registry_var.get()
    if registry is None:
        registry = TitleRegistry()
        registry_var.set(registry)
    return registry


@contextmanager
def title_scope(config: TitleConfig | None = None) -> Iterator[TitleRegistry]:
    """Run a block against a fresh registry.

    The previous registry (if any) is restored on exit, including
    exits by exception::

        with title_scope() as registry:
            with TitleBinding("My App", level=0, sink=head):
                ...
    """
    registry = TitleRegistry(config)
    token = registry_var.set(registry)
    logger.debug("Entered title scope %#x", id(registry))
    try:
        yield registry
    finally:
        registry_var.reset(token)
        logger.debug("Left title scope %#x", id(registry))


# -- Shortcuts on the current registry --


def get_next_level() -> int:
    return get_registry().get_next_level()


def reset_level_counter() -> None:
    """Call on navigation, before the new route's bindings mount."""
    get_registry().reset_level_counter()


def set_separator(separator: str) -> None:
    get_registry().set_separator(separator)


def set_title_part(level: int, title: str) -> None:
    get_registry().set_title_part(level, title)


def remove_title_part(level: int) -> None:
    get_registry().remove_title_part(level)


def clear_title_state() -> None:
    """Reset the current registry to its empty, default state.

    Prefer ``title_scope()`` for new code; this exists for callers that
    reuse one context across independent renders.
    """
    get_registry().clear()


def current_title() -> str:
    """The cascade string for the current context."""
    return get_registry().title
