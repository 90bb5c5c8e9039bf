"""Reassemble armored fragments into the original bytes."""
from __future__ import annotations

import logging
from concurrent.futures import Executor
from dataclasses import dataclass, field
from functools import partial
from typing import Dict, Iterable, List, Optional

import numpy as np

from ..dictionary import Dictionary
from ..exceptions import AmbiguousOrder, DuplicateFragment, IncompleteMessage
from .mapping import Assignment, DictMappings, Role

logger = logging.getLogger(__name__)

MAX_REPORTED_GAPS = 16
MAX_NUMBER_DIGITS = 18


@dataclass
class ParsedFragment:
    """Meaningful content of one fragment string."""

    text: str
    order: Optional[int]
    has_begin: bool = False
    has_end: bool = False
    codes: List[int] = field(default_factory=list)
    dropped: int = 0


def _is_number(token: str) -> bool:
    return token.isascii() and token.isdigit()


def _resolve(token: str, mappings: DictMappings, dictionary: Dictionary) -> Optional[Assignment]:
    index = dictionary.index_of(token)
    if index is None:
        return None
    return mappings.lookup(index)


def parse_fragment(text: str, mappings: DictMappings, dictionary: Dictionary) -> ParsedFragment:
    """Classify the tokens of *text* and work out its position.

    Tokens that are not in the dictionary, or that the mapping does not use,
    are dropped.  The first all-digit token after a ``fragment`` alias is the
    fragment number, even when unmapped words sit between them; camouflage
    must not put a digit-only token in that gap.  Digit tokens anywhere else
    are dropped like any other unmapped word.

    Raises:
        AmbiguousOrder: If the fragment has no derivable position or its
            markers contradict each other.
    """

    has_begin = has_end = False
    number: Optional[int] = None
    codes: List[int] = []
    dropped = 0
    expecting_number = False

    for token in text.split():
        if expecting_number and _is_number(token):
            if len(token) > MAX_NUMBER_DIGITS:
                raise AmbiguousOrder(
                    text, f"fragment number has more than {MAX_NUMBER_DIGITS} digits"
                )
            value = int(token)
            if number is not None and number != value:
                raise AmbiguousOrder(text, f"conflicting fragment numbers {number} and {value}")
            number = value
            expecting_number = False
            continue
        assignment = _resolve(token, mappings, dictionary)
        if assignment is None:
            dropped += 1
            continue
        if expecting_number:
            raise AmbiguousOrder(text, "fragment marker is not followed by its number")
        if assignment.role is Role.DATA:
            codes.append(assignment.value)
        elif assignment.role is Role.BEGIN:
            has_begin = True
        elif assignment.role is Role.END:
            has_end = True
        else:
            expecting_number = True

    if expecting_number:
        raise AmbiguousOrder(text, "fragment marker is not followed by its number")

    if has_begin:
        if number not in (None, 0):
            raise AmbiguousOrder(text, f"begin marker in fragment numbered {number}")
        order: Optional[int] = 0
    elif number is not None:
        order = number
    elif has_end:
        order = None
    else:
        raise AmbiguousOrder(text, "no begin or fragment marker")

    return ParsedFragment(
        text=text,
        order=order,
        has_begin=has_begin,
        has_end=has_end,
        codes=codes,
        dropped=dropped,
    )


def _first_gaps(numbered: Dict[int, ParsedFragment], limit: int = MAX_REPORTED_GAPS) -> List[int]:
    gaps: List[int] = []
    last = max(numbered)
    candidate = 0
    while len(gaps) < limit and candidate <= last:
        if candidate not in numbered:
            gaps.append(candidate)
        candidate += 1
    return gaps


def order_fragments(parsed: Iterable[ParsedFragment]) -> List[ParsedFragment]:
    """Sort parsed fragments into message order and check the set is whole.

    Raises:
        DuplicateFragment: If two fragments claim the same position.
        AmbiguousOrder: If the end marker is followed by further fragments.
        IncompleteMessage: If the begin or end marker is missing or the
            numbering has gaps.
    """

    numbered: Dict[int, ParsedFragment] = {}
    trailing: List[ParsedFragment] = []
    for fragment in parsed:
        if fragment.order is None:
            trailing.append(fragment)
        elif fragment.order in numbered:
            raise DuplicateFragment(fragment.order)
        else:
            numbered[fragment.order] = fragment

    if len(trailing) > 1:
        raise AmbiguousOrder(
            trailing[1].text, "more than one unnumbered fragment carries the end marker"
        )
    ordered = [numbered[key] for key in sorted(numbered)] + trailing
    if not ordered:
        raise IncompleteMessage("no fragments")
    if not any(fragment.has_begin for fragment in ordered):
        raise IncompleteMessage("no fragment carries a begin marker")
    if not any(fragment.has_end for fragment in ordered):
        raise IncompleteMessage("no fragment carries an end marker")

    if len(numbered) != max(numbered, default=0) + 1:
        raise IncompleteMessage("fragment numbers are not contiguous", _first_gaps(numbered))

    terminal = next(i for i, fragment in enumerate(ordered) if fragment.has_end)
    if terminal != len(ordered) - 1:
        raise AmbiguousOrder(ordered[terminal + 1].text, "fragment follows the end marker")
    return ordered


def doff(
    fragments: Iterable[str],
    mappings: DictMappings,
    dictionary: Dictionary,
    *,
    executor: Optional[Executor] = None,
) -> bytes:
    """Doff armor: rebuild the message from fragments given in any order.

    Fragments are independent until they are ordered, so an *executor* may
    be supplied to parse them concurrently.
    """

    parse = partial(parse_fragment, mappings=mappings, dictionary=dictionary)
    if executor is not None:
        parsed = list(executor.map(parse, fragments))
    else:
        parsed = [parse(text) for text in fragments]

    ordered = order_fragments(parsed)
    dropped = sum(fragment.dropped for fragment in ordered)
    if dropped:
        logger.debug("ignored %d unmapped token(s) across %d fragment(s)", dropped, len(ordered))

    codes = [code for fragment in ordered for code in fragment.codes]
    return np.asarray(codes, dtype=">u2").tobytes()


__all__ = ["ParsedFragment", "doff", "order_fragments", "parse_fragment"]
