"""Tests for encoder configuration."""

from __future__ import annotations

import pytest

from caw.config import DEFAULT_CHARACTER_LIMIT, ArmorConfig
from caw.exceptions import ConfigurationError


def test_defaults() -> None:
    cfg = ArmorConfig()
    assert cfg.character_limit == DEFAULT_CHARACTER_LIMIT
    assert cfg.odd_length == "reject"


@pytest.mark.parametrize("limit", [0, -10, 2.5])
def test_invalid_limit(limit) -> None:
    with pytest.raises(ConfigurationError):
        ArmorConfig(character_limit=limit)


def test_invalid_policy() -> None:
    with pytest.raises(ConfigurationError):
        ArmorConfig(odd_length="truncate")  # type: ignore[arg-type]
