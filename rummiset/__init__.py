"""Rummikub set validation with special jokers."""

from .colors import AllowanceSet
from .errors import InvalidTileColor, InvalidTileValue, InvariantViolation, NotationError, RummisetError
from .mirror import is_symmetric
from .notation import format_tiles, parse_tiles
from .rules import Ruleset
from .tiles import BasicTile, Color, Joker, JokerVariant, Tile
from .validator import check_set, is_valid_set

__all__ = [
    "AllowanceSet",
    "BasicTile",
    "Color",
    "Joker",
    "JokerVariant",
    "Tile",
    "Ruleset",
    "RummisetError",
    "InvalidTileColor",
    "InvalidTileValue",
    "InvariantViolation",
    "NotationError",
    "check_set",
    "is_valid_set",
    "is_symmetric",
    "parse_tiles",
    "format_tiles",
]
