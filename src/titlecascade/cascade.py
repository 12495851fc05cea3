"""Cascade builder — combine title parts into one page title.

Pure function, no registry access. Parts are ordered most specific
first (highest level first) and joined with the separator::

    build_title([TitlePart(0, "Root"), TitlePart(1, "Section"), TitlePart(2, "Page")])
    # → "Page • Section • Root"

A part at ``OVERRIDE_LEVEL`` wins outright: its title is returned
alone and the separator is ignored.
"""

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from titlecascade.errors import InvalidArgument, MalformedPart
from titlecascade.parts import DEFAULT_SEPARATOR, OVERRIDE_LEVEL, TitlePart

logger = logging.getLogger("titlecascade.cascade")

type PartLike = TitlePart | Mapping[str, Any]


def _coerce_part(entry: Any) -> TitlePart:
    """Validate one entry, raising ``MalformedPart`` if it can't be used."""
    if isinstance(entry, TitlePart):
        level, title = entry.level, entry.title
    elif isinstance(entry, Mapping):
        if "level" not in entry:
            raise MalformedPart(entry, "missing level")
        if "title" not in entry:
            raise MalformedPart(entry, "missing title")
        level, title = entry["level"], entry["title"]
    else:
        raise MalformedPart(entry, "not a title part")

    if isinstance(level, bool) or not isinstance(level, int):
        raise MalformedPart(entry, "level is not an integer")
    if not isinstance(title, str):
        raise MalformedPart(entry, "title is not a string")
    return TitlePart(level=level, title=title)


def valid_parts(parts: Iterable[Any]) -> list[TitlePart]:
    """Return the structurally valid entries, logging and dropping the rest."""
    result: list[TitlePart] = []
    for entry in parts:
        try:
            result.append(_coerce_part(entry))
        except MalformedPart as exc:
            logger.warning("Dropping malformed title part: %s", exc)
    return result


def build_title(parts: Sequence[PartLike], separator: str = DEFAULT_SEPARATOR) -> str:
    """Build the cascade string from *parts*.

    Raises ``InvalidArgument`` when *parts* is not a sequence. Strings
    and bytes count as non-sequences here.
    """
    if not isinstance(parts, Sequence) or isinstance(parts, (str, bytes, bytearray)):
        msg = "build_title: parts must be a sequence"
        raise InvalidArgument(msg)

    candidates = valid_parts(parts)

    # Duplicate overrides collapse to the last one, like a keyed write
    for part in reversed(candidates):
        if part.level == OVERRIDE_LEVEL:
            return part.title

    ordered = sorted(
        (part for part in candidates if part.level >= 0),
        key=lambda part: part.level,
        reverse=True,
    )
    return separator.join(part.title for part in ordered)
