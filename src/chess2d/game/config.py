"""Game configuration."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

from chess2d.core.enums import Side


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Settings fixed for the lifetime of a controller.

    Args:
        initial_side: Side that moves first after setup and every reset.
        include_friendly_l_squares: Report knight targets occupied by a
            friendly piece from :meth:`GameController.get_legal_destinations`.
            Moving onto them is still rejected.
    """

    initial_side: Side = Side.WHITE
    include_friendly_l_squares: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> GameConfig:
        """Build a config from plain values, e.g. parsed JSON/TOML."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}")

        kwargs: dict[str, Any] = dict(data)
        if "initial_side" in kwargs:
            kwargs["initial_side"] = _parse_side(kwargs["initial_side"])
        if "include_friendly_l_squares" in kwargs:
            kwargs["include_friendly_l_squares"] = _parse_flag(
                "include_friendly_l_squares", kwargs["include_friendly_l_squares"]
            )
        return cls(**kwargs)


_TRUE_WORDS = frozenset({"true", "yes", "on", "1"})
_FALSE_WORDS = frozenset({"false", "no", "off", "0"})


def _parse_flag(name: str, value: object) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        word = value.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
    raise ValueError(f"Invalid value for {name}: {value!r}")


def _parse_side(value: object) -> Side:
    if isinstance(value, Side):
        return value
    if isinstance(value, str):
        try:
            return Side[value.strip().upper()]
        except KeyError:
            pass
    raise ValueError(f"Invalid side: {value!r}")
