"""PCG64 (XSL-RR 128/64) pseudo-random generator over plain Python integers.

The generator is part of the wire contract: two peers must draw the exact
same stream from the same seed material, so nothing here may depend on a
library's unspecified internals.  The raw stream is identical to
:class:`numpy.random.PCG64` for the same ``(state, inc)`` pair, which the
test-suite uses as an independent reference.
"""
from __future__ import annotations

import hashlib
from datetime import date as Date
from datetime import datetime
from typing import Final, Tuple, Union

from ..exceptions import ConfigurationError

MASK64: Final[int] = (1 << 64) - 1
MASK128: Final[int] = (1 << 128) - 1
MULTIPLIER: Final[int] = 0x2360ED051FC65DA44385DF649FCCF645
SEED_BITS: Final[int] = 128

DateLike = Union[Date, datetime]


def calendar_date(value: DateLike) -> Date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, Date):
        return value
    raise ConfigurationError("date must be a datetime.date or datetime.datetime")


def seed_material(seed: int, date: DateLike) -> bytes:
    """Return the byte string both peers hash to key the generator.

    The decimal seed is followed by the year, month and day without
    zero-padding, e.g. seed ``69`` on 2024-03-05 gives ``b"69202435"``.
    """

    if not isinstance(seed, int) or isinstance(seed, bool):
        raise ConfigurationError("seed must be an integer")
    if seed < 0 or seed >> SEED_BITS:
        raise ConfigurationError("seed must fit in 128 unsigned bits")
    day = calendar_date(date)
    return f"{seed}{day.year}{day.month}{day.day}".encode("ascii")


def derive_stream(seed: int, date: DateLike) -> Tuple[int, int]:
    """Derive ``(initstate, initseq)`` from the shared secret."""

    digest = hashlib.sha256(seed_material(seed, date)).digest()
    return int.from_bytes(digest[:16], "big"), int.from_bytes(digest[16:], "big")


class PCG64:
    """Permuted congruential generator with 128-bit state and 64-bit output."""

    __slots__ = ("state", "inc")

    def __init__(self, initstate: int, initseq: int) -> None:
        self.state = 0
        self.inc = ((initseq << 1) | 1) & MASK128
        self._step()
        self.state = (self.state + initstate) & MASK128
        self._step()

    @classmethod
    def from_secret(cls, seed: int, date: DateLike) -> "PCG64":
        initstate, initseq = derive_stream(seed, date)
        return cls(initstate, initseq)

    def _step(self) -> None:
        self.state = (self.state * MULTIPLIER + self.inc) & MASK128

    def next64(self) -> int:
        """Advance the generator and return the next 64-bit output."""

        self._step()
        state = self.state
        rot = state >> 122
        value = ((state >> 64) ^ state) & MASK64
        return ((value >> rot) | (value << ((64 - rot) & 63))) & MASK64

    def below(self, bound: int) -> int:
        """Return a uniform integer in ``[0, bound)``.

        Uses Lemire's widening multiplication with rejection, so a draw is
        only repeated when the low half falls under ``2**64 mod bound``.
        """

        if bound <= 0 or bound > MASK64:
            raise ValueError("bound must be in [1, 2**64)")
        product = self.next64() * bound
        low = product & MASK64
        if low < bound:
            threshold = ((1 << 64) - bound) % bound
            while low < threshold:
                product = self.next64() * bound
                low = product & MASK64
        return product >> 64


__all__ = [
    "DateLike",
    "MULTIPLIER",
    "PCG64",
    "SEED_BITS",
    "calendar_date",
    "derive_stream",
    "seed_material",
]
