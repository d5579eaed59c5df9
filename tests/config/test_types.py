"""Tests for rope_sim.config.types module."""

from __future__ import annotations

import dataclasses

import pytest

from rope_sim.config.types import RopeConfig


def test_defaults() -> None:
    config = RopeConfig()
    assert config.knot_count == 10
    assert config.render is False


def test_rejects_zero_knots() -> None:
    with pytest.raises(ValueError, match="knot_count must be >= 1"):
        RopeConfig(knot_count=0)


def test_single_knot_allowed() -> None:
    assert RopeConfig(knot_count=1).knot_count == 1


def test_is_frozen() -> None:
    config = RopeConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.knot_count = 3  # type: ignore[misc]
