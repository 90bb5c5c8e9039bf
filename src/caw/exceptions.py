"""Custom exception hierarchy for the caw armoring codec."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


class CawError(Exception):
    """Base class for all caw errors."""


class ConfigurationError(CawError):
    """Raised when user-supplied configuration is invalid."""


class DictionaryError(CawError):
    """Raised when a dictionary cannot be loaded or is malformed."""


@dataclass
class DictionaryTooSmall(DictionaryError):
    """Raised when the dictionary cannot hold every marker and data slot."""

    size: int
    required: int

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"dictionary has {self.size} words but at least {self.required} are required"


class OddLengthMessage(CawError):
    """Raised when an odd-length message is armored under the ``reject`` policy."""


class DecodeError(CawError):
    """Base class for errors that abort reconstruction of a single message."""


@dataclass
class AmbiguousOrder(DecodeError):
    """Raised when the position of a fragment cannot be determined."""

    fragment: str
    reason: str

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"cannot order fragment ({self.reason}): {self.fragment!r}"


@dataclass
class DuplicateFragment(DecodeError):
    """Raised when two fragments claim the same position."""

    order: int

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"more than one fragment claims position {self.order}"


@dataclass
class IncompleteMessage(DecodeError):
    """Raised when the fragment set does not describe a whole message."""

    reason: str
    missing: List[int] = field(default_factory=list)

    def __str__(self) -> str:  # pragma: no cover - human-friendly message
        if not self.missing:
            return f"incomplete message: {self.reason}"
        indices = ", ".join(str(i) for i in self.missing)
        return f"incomplete message: {self.reason} (missing fragments: {indices})"


__all__ = [
    "AmbiguousOrder",
    "CawError",
    "ConfigurationError",
    "DecodeError",
    "DictionaryError",
    "DictionaryTooSmall",
    "DuplicateFragment",
    "IncompleteMessage",
    "OddLengthMessage",
]
