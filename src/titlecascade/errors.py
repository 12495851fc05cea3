"""Title exception hierarchy.

Shared by the registry, the cascade builder, and bindings so every
module raises and catches the same types.
"""

from dataclasses import dataclass
from typing import Any


class TitleError(Exception):
    """Base for all titlecascade errors."""


class InvalidArgument(TitleError, ValueError):  # noqa: N818 — mirrors the public error name
    """Raised synchronously when a caller passes a value that can't be applied.

    Examples: a negative non-override level, an empty separator, or a
    non-sequence handed to ``build_title``. State is never modified
    before this is raised.
    """


@dataclass(frozen=True, slots=True)
class MalformedPart(TitleError):  # noqa: N818 — mirrors the public error name
    """A structurally invalid entry found while building a cascade.

    Raised by the entry validator and recovered inside ``build_title``:
    the entry is dropped and a warning is logged. Never escapes the
    builder.
    """

    entry: Any
    reason: str

    def __str__(self) -> str:
        return f"{self.reason}: {self.entry!r}"
