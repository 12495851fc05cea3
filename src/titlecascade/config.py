"""Title configuration.

TitleConfig is a frozen dataclass, immutable after creation. Each
registry holds one and falls back to it on ``clear()``.
"""

from dataclasses import dataclass

from titlecascade.errors import InvalidArgument
from titlecascade.parts import DEFAULT_SEPARATOR, require_separator


@dataclass(frozen=True, slots=True)
class TitleConfig:
    """Registry defaults. Override what you need::

        config = TitleConfig(separator=" | ", fallback="My App")
    """

    # Joins cascade segments; restored on clear()
    separator: str = DEFAULT_SEPARATOR

    # Rendered by HeadTitle when the cascade is empty
    fallback: str = ""

    def __post_init__(self) -> None:
        require_separator(self.separator)
        if not isinstance(self.fallback, str):
            msg = f"Invalid fallback: expected str, got {type(self.fallback).__name__}"
            raise InvalidArgument(msg)
