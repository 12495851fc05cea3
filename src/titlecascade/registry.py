"""Part registry — the state behind one page title.

Holds the active title parts keyed by level, the active separator,
and the auto-level counter. All mutations and subscriber notifications
run synchronously in the caller's turn; subscribers always see the
post-write snapshot.

One registry per independent execution (per request when server
rendering). ``titlecascade.context`` scopes instances with a ContextVar
so concurrent requests never share one.
"""

import contextlib
import logging
from collections.abc import Callable

from titlecascade.cascade import build_title
from titlecascade.config import TitleConfig
from titlecascade.parts import OVERRIDE_LEVEL, TitlePart, require_level, require_separator, require_title

logger = logging.getLogger("titlecascade.registry")

# Called with (parts, separator) after every visible change
type Subscriber = Callable[[tuple[TitlePart, ...], str], None]


class TitleRegistry:
    """Ordered title parts plus separator and level counter.

    Usage::

        registry = TitleRegistry()
        registry.set_title_part(0, "Root")
        registry.set_title_part(1, "Page")
        registry.title  # "Page • Root"

    Setting an existing level replaces its title (last write wins).
    Setting an empty title removes the level.
    """

    __slots__ = ("_config", "_counter", "_parts", "_separator", "_subscribers")

    def __init__(self, config: TitleConfig | None = None) -> None:
        self._config = config or TitleConfig()
        self._parts: dict[int, str] = {}
        self._separator = self._config.separator
        self._counter = 0
        self._subscribers: list[Subscriber] = []

    # -- Read access --

    @property
    def config(self) -> TitleConfig:
        return self._config

    @property
    def parts(self) -> tuple[TitlePart, ...]:
        """Active parts in ascending level order (override first)."""
        return tuple(
            TitlePart(level=level, title=title) for level, title in sorted(self._parts.items())
        )

    @property
    def separator(self) -> str:
        return self._separator

    @property
    def counter(self) -> int:
        """The level the next ``get_next_level()`` call will return."""
        return self._counter

    @property
    def title(self) -> str:
        """The current cascade string."""
        return build_title(self.parts, self._separator)

    def active_levels(self) -> list[int]:
        """Non-override levels that currently hold a part."""
        return sorted(level for level in self._parts if level != OVERRIDE_LEVEL)

    def get(self, level: int) -> str | None:
        return self._parts.get(level)

    def __len__(self) -> int:
        return len(self._parts)

    def __contains__(self, level: object) -> bool:
        return level in self._parts

    def __repr__(self) -> str:
        return f"<TitleRegistry parts={self._parts!r} separator={self._separator!r}>"

    # -- Level assignment --

    def get_next_level(self) -> int:
        """Return the next auto-assigned level and advance the counter."""
        level = self._counter
        self._counter += 1
        return level

    def reserve_level(self, level: int) -> None:
        """Advance the counter past an explicitly claimed *level*.

        Keeps later auto-assigned levels from landing on it. The
        counter never moves backwards. The override level is ignored.
        """
        require_level(level)
        if level != OVERRIDE_LEVEL and level >= self._counter:
            self._counter = level + 1

    def reset_level_counter(self) -> None:
        """Restart auto-assignment after the highest active level.

        Call on every navigation. Parts of components that persist
        across the navigation keep their levels, so the counter resumes
        at ``max(active) + 1`` rather than 0.
        """
        levels = self.active_levels()
        self._counter = levels[-1] + 1 if levels else 0
        logger.debug("Level counter reset to %d", self._counter)

    # -- Mutation --

    def set_separator(self, separator: str) -> None:
        require_separator(separator)
        if separator == self._separator:
            return
        self._separator = separator
        self._notify()

    def set_title_part(self, level: int, title: str) -> None:
        """Register *title* at *level*, replacing any previous title there.

        An empty title is no contribution: the level is removed instead.
        """
        require_level(level)
        require_title(title)
        if not title:
            self.remove_title_part(level)
            return
        if self._parts.get(level) == title:
            return
        self._parts[level] = title
        self._notify()

    def move_title_part(self, old_level: int, new_level: int, title: str) -> None:
        """Drop *old_level* and set *title* at *new_level* as one change.

        Subscribers are notified once, so nobody observes the moment
        between removal and write.
        """
        require_level(new_level)
        require_title(title)
        changed = False
        if old_level != new_level:
            changed = self._parts.pop(old_level, None) is not None
        if title:
            if self._parts.get(new_level) != title:
                self._parts[new_level] = title
                changed = True
        elif self._parts.pop(new_level, None) is not None:
            changed = True
        if changed:
            self._notify()

    def remove_title_part(self, level: int) -> None:
        """Drop the part at *level*. Missing levels are ignored."""
        if self._parts.pop(level, None) is None:
            return
        self._notify()

    def clear(self) -> None:
        """Empty the parts, restore the configured separator, zero the counter.

        Subscribers stay attached and are notified of the empty state.
        """
        changed = bool(self._parts) or self._separator != self._config.separator
        self._parts.clear()
        self._separator = self._config.separator
        self._counter = 0
        if changed:
            self._notify()

    # -- Subscription --

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Call *callback* now and after every change.

        Returns an unsubscribe function. Calling it more than once is
        harmless. If the first call raises, *callback* is not kept.
        """
        self._subscribers.append(callback)
        try:
            callback(self.parts, self._separator)
        except BaseException:
            self._subscribers.remove(callback)
            raise

        def unsubscribe() -> None:
            with contextlib.suppress(ValueError):
                self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self) -> None:
        parts = self.parts
        separator = self._separator
        # Copy so a subscriber may unsubscribe while being notified
        for callback in list(self._subscribers):
            callback(parts, separator)
