"""Armor bytes as fragments of dictionary words."""
from __future__ import annotations

import logging
import random
from typing import List, Optional, Sequence

from ..config import DEFAULT_CHARACTER_LIMIT, ArmorConfig
from ..exceptions import OddLengthMessage
from .mapping import DictMappings, Role

logger = logging.getLogger(__name__)

_SYSTEM_RANDOM = random.SystemRandom()


def pair_codes(data: bytes, *, odd_length: str = "reject") -> List[int]:
    """Pair consecutive bytes into 16-bit codes, high byte first."""

    if len(data) % 2:
        if odd_length != "zero-pad":
            raise OddLengthMessage(
                f"message has {len(data)} bytes; armor carries whole byte pairs only"
            )
        logger.warning("padding odd-length message of %d bytes with a zero byte", len(data))
        data = bytes(data) + b"\x00"
    return [(data[i] << 8) | data[i + 1] for i in range(0, len(data), 2)]


def _split_points(words: Sequence[str], header_len: int, limit: int) -> List[int]:
    splits = [0]
    count = 0
    for index, word in enumerate(words):
        added = len(word) if count == 0 else len(word) + 1
        reserve = header_len + len(str(len(splits))) + 2
        if count and count + added + reserve > limit:
            splits.append(index)
            count = len(word)
        else:
            count += added
    splits.append(len(words))
    return splits


def don(
    data: bytes,
    mappings: DictMappings,
    dictionary: Sequence[str],
    character_limit: int = DEFAULT_CHARACTER_LIMIT,
    *,
    config: Optional[ArmorConfig] = None,
    rng: Optional[random.Random] = None,
) -> List[str]:
    """Don armor: encode *data* as an ordered list of fragment strings.

    The first fragment starts with a ``begin`` alias; every later fragment
    starts with a ``fragment`` alias followed by its decimal position.  The
    last fragment carries an ``end`` alias.  *character_limit* is a soft
    bound on the length of each fragment.

    Args:
        data: Message bytes.
        mappings: Mapping shared with the receiving peer.
        dictionary: Word list the mapping indexes into.
        character_limit: Advisory fragment length in characters.
        config: Overrides *character_limit* and selects the odd-length policy.
        rng: Source for alias selection. Defaults to :class:`random.SystemRandom`.

    Raises:
        OddLengthMessage: If *data* has an odd length under the ``reject`` policy.
    """

    cfg = config or ArmorConfig(character_limit=character_limit)
    chooser = rng or _SYSTEM_RANDOM

    codes = pair_codes(data, odd_length=cfg.odd_length)
    words: List[str] = [dictionary[chooser.choice(mappings.begin)]]
    words.extend(dictionary[mappings.index_for(code)] for code in codes)
    words.append(dictionary[chooser.choice(mappings.end)])

    header_len = max(len(word) for word in mappings.alias_words(Role.FRAGMENT, dictionary))
    splits = _split_points(words, header_len, cfg.character_limit)

    fragments: List[str] = []
    for position, (start, stop) in enumerate(zip(splits, splits[1:])):
        parts: List[str] = []
        if position:
            parts.append(dictionary[chooser.choice(mappings.fragment)])
            parts.append(str(position))
        parts.extend(words[start:stop])
        fragments.append(" ".join(parts))

    logger.debug("armored %d bytes as %d fragment(s)", len(data), len(fragments))
    return fragments


__all__ = ["don", "pair_codes"]
