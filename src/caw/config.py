"""Runtime configuration for armoring."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Literal

from .exceptions import ConfigurationError

OddLengthPolicy = Literal["reject", "zero-pad"]

DEFAULT_CHARACTER_LIMIT: Final[int] = 280
ODD_LENGTH_POLICIES: Final = ("reject", "zero-pad")


@dataclass(frozen=True)
class ArmorConfig:
    """Encoder settings.

    ``character_limit`` is advisory: a fragment may run past it when a single
    word plus the fragment header does not fit.  ``odd_length`` selects what
    happens to a message with an odd number of bytes: ``"reject"`` raises
    :class:`~caw.exceptions.OddLengthMessage`, ``"zero-pad"`` appends a zero
    byte that the receiver sees as part of the message.
    """

    character_limit: int = DEFAULT_CHARACTER_LIMIT
    odd_length: OddLengthPolicy = "reject"

    def __post_init__(self) -> None:
        if not isinstance(self.character_limit, int) or self.character_limit <= 0:
            raise ConfigurationError("character_limit must be a positive integer")
        if self.odd_length not in ODD_LENGTH_POLICIES:
            raise ConfigurationError(f"unsupported odd-length policy: {self.odd_length!r}")


__all__ = ["ArmorConfig", "DEFAULT_CHARACTER_LIMIT", "ODD_LENGTH_POLICIES", "OddLengthPolicy"]
