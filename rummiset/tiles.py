from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from .errors import InvalidTileColor, InvalidTileValue

MIN_VALUE = 1
MAX_VALUE = 13


class Color(str, Enum):
    BLACK = "BLACK"
    RED = "RED"
    BLUE = "BLUE"
    ORANGE = "ORANGE"

    def __str__(self) -> str:
        return self.value


class JokerVariant(str, Enum):
    SINGLE = "SINGLE"
    DOUBLE = "DOUBLE"
    MIRROR = "MIRROR"
    COLOR_CHANGE = "COLOR CHANGE"

    def __str__(self) -> str:
        return self.value


def _value_error(value: int) -> str:
    if isinstance(value, bool) or not isinstance(value, int):
        return f"tile value must be an integer, got {value!r}"
    if value < MIN_VALUE or value > MAX_VALUE:
        return f"invalid tile value {value}: must be between {MIN_VALUE} and {MAX_VALUE}"
    return ""


@dataclass(frozen=True)
class BasicTile:
    color: Color
    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.color, Color):
            raise InvalidTileColor(f"tile color must be a Color, got {self.color!r}")
        reason = _value_error(self.value)
        if reason:
            raise InvalidTileValue(reason)

    @classmethod
    def create(cls, color: Color, value: int) -> Tuple[Optional["BasicTile"], str]:
        if not isinstance(color, Color):
            return None, f"tile color must be a Color, got {color!r}"
        reason = _value_error(value)
        if reason:
            return None, reason
        return cls(color, value), ""


@dataclass(frozen=True)
class Joker:
    variant: JokerVariant

    @staticmethod
    def single() -> "Joker":
        return Joker(JokerVariant.SINGLE)

    @staticmethod
    def double() -> "Joker":
        return Joker(JokerVariant.DOUBLE)

    @staticmethod
    def mirror() -> "Joker":
        return Joker(JokerVariant.MIRROR)

    @staticmethod
    def color_change() -> "Joker":
        return Joker(JokerVariant.COLOR_CHANGE)


Tile = Union[BasicTile, Joker]


def is_joker(tile: Tile, variant: Optional[JokerVariant] = None) -> bool:
    if not isinstance(tile, Joker):
        return False
    return variant is None or tile.variant == variant


def describe_tile(tile: Tile) -> str:
    if isinstance(tile, BasicTile):
        return f"{tile.color} {tile.value}"
    return f"{tile.variant} JOKER"
