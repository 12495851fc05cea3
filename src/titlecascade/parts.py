"""Title part model and level constants.

A title part is one component's contribution to the page title. Parts
are keyed by level: 0 is the root (least specific), higher levels are
more specific. ``OVERRIDE_LEVEL`` is reserved for a standalone title
that bypasses cascading entirely.
"""

from dataclasses import dataclass

from titlecascade.errors import InvalidArgument

OVERRIDE_LEVEL = -1
"""Sentinel level for a standalone title that ignores the hierarchy."""

DEFAULT_SEPARATOR = " • "


def is_valid_level(level: object) -> bool:
    """Return True for a non-negative int or ``OVERRIDE_LEVEL``.

    ``bool`` is rejected even though it subclasses ``int``.
    """
    if isinstance(level, bool) or not isinstance(level, int):
        return False
    return level >= 0 or level == OVERRIDE_LEVEL


def require_level(level: object) -> None:
    if not is_valid_level(level):
        msg = f"Invalid level {level!r}: must be >= 0 or OVERRIDE_LEVEL ({OVERRIDE_LEVEL})"
        raise InvalidArgument(msg)


def require_separator(separator: object) -> None:
    if not isinstance(separator, str) or not separator:
        msg = "Invalid separator: empty string is not allowed."
        raise InvalidArgument(msg)


def require_title(title: object) -> None:
    if not isinstance(title, str):
        msg = f"Invalid title: expected str, got {type(title).__name__}"
        raise InvalidArgument(msg)


@dataclass(frozen=True, slots=True)
class TitlePart:
    """One registered title segment.

    Attributes:
        level: Hierarchy depth, or ``OVERRIDE_LEVEL``.
        title: Text contributed at that level.
    """

    level: int
    title: str

    @property
    def is_override(self) -> bool:
        return self.level == OVERRIDE_LEVEL
