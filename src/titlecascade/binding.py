"""Title bindings — one component's claim on the page title.

A binding registers a single title part when mounted and removes it
when unmounted. The root binding (level 0) also subscribes to the
registry and forwards the combined cascade to a sink.

Bindings are resource handles. Use them as context managers so the
part is released on every exit path::

    head = HeadTitle()
    with TitleBinding("My App", level=0, sink=head):
        with TitleBinding("Settings"):
            head.title  # "Settings • My App"

Lifecycle:
    Unregistered → mount() → Registered(normal, level) | Registered(override)
    update() moves between the two registered modes.
    unmount() → Unregistered
"""

import logging
from collections.abc import Callable
from typing import Self

from titlecascade.cascade import build_title
from titlecascade.context import get_registry
from titlecascade.errors import TitleError
from titlecascade.parts import OVERRIDE_LEVEL, TitlePart, require_level, require_separator, require_title
from titlecascade.registry import TitleRegistry
from titlecascade.sinks import HeadTitle, TitleSink

logger = logging.getLogger("titlecascade.binding")

ROOT_LEVEL = 0


class TitleBinding:
    """Register one title part for the lifetime of a component.

    Args:
        title: Text for this level. An empty string contributes nothing.
        level: Explicit level. When omitted, the registry assigns the
            next auto level on mount.
        override: Show *title* alone, bypassing the cascade.
        separator: Cascade separator. Applied only by the root binding.
        sink: Receives the cascade string. Used only by the root
            binding; defaults to a fresh ``HeadTitle``.
        registry: Registry to bind to. Defaults to the current
            context's registry at mount time.
    """

    __slots__ = (
        "_explicit_level",
        "_key",
        "_level",
        "_mounted",
        "_override",
        "_registry",
        "_rendered",
        "_separator",
        "_sink",
        "_title",
        "_unsubscribe",
    )

    def __init__(
        self,
        title: str,
        *,
        level: int | None = None,
        override: bool = False,
        separator: str | None = None,
        sink: TitleSink | None = None,
        registry: TitleRegistry | None = None,
    ) -> None:
        require_title(title)
        if level is not None:
            require_level(level)
        if separator is not None:
            require_separator(separator)

        self._title = title
        self._explicit_level = level
        self._override = bool(override)
        self._separator = separator
        self._sink = sink
        self._registry = registry
        self._level: int | None = None
        self._key: int | None = None
        self._mounted = False
        self._rendered: str | None = None
        self._unsubscribe: Callable[[], None] | None = None

    # -- Properties --

    @property
    def title(self) -> str:
        return self._title

    @property
    def override(self) -> bool:
        return self._override

    @property
    def level(self) -> int | None:
        """Resolved level, or None before the first mount."""
        return self._level

    @property
    def key(self) -> int | None:
        """The registry key this binding currently holds, if any."""
        return self._key

    @property
    def mounted(self) -> bool:
        return self._mounted

    @property
    def is_root(self) -> bool:
        return self._level == ROOT_LEVEL

    @property
    def registry(self) -> TitleRegistry | None:
        return self._registry

    @property
    def sink(self) -> TitleSink | None:
        return self._sink

    def __repr__(self) -> str:
        state = "mounted" if self._mounted else "unmounted"
        return f"<TitleBinding {self._title!r} level={self._level} override={self._override} {state}>"

    # -- Lifecycle --

    def mount(self) -> Self:
        """Claim a level and register this binding's part."""
        if self._mounted:
            msg = f"{self!r} is already mounted"
            raise TitleError(msg)

        registry = self._registry if self._registry is not None else get_registry()
        self._registry = registry

        if self._explicit_level is not None:
            registry.reserve_level(self._explicit_level)
            self._level = self._explicit_level
        else:
            self._level = registry.get_next_level()

        self._mounted = True
        logger.debug("Mounted %r", self)

        try:
            if self.is_root and self._separator is not None:
                registry.set_separator(self._separator)
            self._write()
            if self.is_root:
                if self._sink is None:
                    self._sink = HeadTitle(fallback=registry.config.fallback)
                self._unsubscribe = registry.subscribe(self._render)
        except BaseException:
            self.unmount()
            raise
        return self

    def update(
        self,
        title: str | None = None,
        *,
        override: bool | None = None,
        separator: str | None = None,
    ) -> None:
        """Change this binding's props. ``None`` leaves a prop unchanged.

        All arguments are validated before anything is applied. When
        mounted, the registry is updated immediately; a mode change
        moves the part off its old key in the same write.
        """
        if title is not None:
            require_title(title)
        if separator is not None:
            require_separator(separator)

        if title is not None:
            self._title = title
        if override is not None:
            self._override = bool(override)
        if separator is not None:
            self._separator = separator

        if not self._mounted:
            return
        registry, _ = self._bound()
        if separator is not None:
            if self.is_root:
                registry.set_separator(separator)
            else:
                logger.debug("Ignoring separator on non-root %r", self)
        self._write()

    def unmount(self) -> None:
        """Remove this binding's part and stop rendering. Idempotent."""
        if not self._mounted:
            return
        self._mounted = False
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        if self._key is not None and self._registry is not None:
            self._registry.remove_title_part(self._key)
        self._key = None
        self._rendered = None
        logger.debug("Unmounted %r", self)

    def __enter__(self) -> Self:
        return self.mount()

    def __exit__(self, *exc_info: object) -> None:
        self.unmount()

    # -- Internals --

    def _bound(self) -> tuple[TitleRegistry, int]:
        if self._registry is None or self._level is None:
            msg = f"{self!r} is not mounted"
            raise TitleError(msg)
        return self._registry, self._level

    def _write(self) -> None:
        registry, level = self._bound()
        new_key = OVERRIDE_LEVEL if self._override else level
        old_key = self._key if self._key is not None else new_key
        registry.move_title_part(old_key, new_key, self._title)
        self._key = new_key if self._title else None

    def _render(self, parts: tuple[TitlePart, ...], separator: str) -> None:
        title = build_title(parts, separator)
        if title == self._rendered:
            return
        self._rendered = title
        if self._sink is not None:
            self._sink(title)
