"""Shorthand text notation for tile sequences.

A basic tile is a color letter followed by its value (``r7``, ``u13``); a joker
is a single letter. Tokens are separated by whitespace::

    r = RED     o = ORANGE    a = BLACK     u = BLUE
    j = SINGLE  d = DOUBLE    m = MIRROR    c = COLOR CHANGE
"""

from __future__ import annotations

from typing import Iterable, List

from .errors import NotationError
from .tiles import BasicTile, Color, Joker, JokerVariant, Tile

COLOR_LETTERS = {
    "r": Color.RED,
    "o": Color.ORANGE,
    "a": Color.BLACK,
    "u": Color.BLUE,
}

JOKER_LETTERS = {
    "j": JokerVariant.SINGLE,
    "d": JokerVariant.DOUBLE,
    "m": JokerVariant.MIRROR,
    "c": JokerVariant.COLOR_CHANGE,
}

_LETTER_OF_COLOR = {color: letter for letter, color in COLOR_LETTERS.items()}
_LETTER_OF_JOKER = {variant: letter for letter, variant in JOKER_LETTERS.items()}


def parse_tile(token: str) -> Tile:
    text = token.strip().lower()
    if not text:
        raise NotationError("empty tile token")
    if text in JOKER_LETTERS:
        return Joker(JOKER_LETTERS[text])

    letter, digits = text[0], text[1:]
    if letter not in COLOR_LETTERS:
        raise NotationError(f"unknown tile {token!r}: expected one of r, o, a, u, j, d, m, c")
    if not (digits.isascii() and digits.isdigit()):
        raise NotationError(f"tile {token!r} is missing a numeric value")
    tile, reason = BasicTile.create(COLOR_LETTERS[letter], int(digits))
    if tile is None:
        raise NotationError(f"tile {token!r}: {reason}")
    return tile


def parse_tiles(text: str) -> List[Tile]:
    return [parse_tile(token) for token in text.split()]


def format_tile(tile: Tile) -> str:
    if isinstance(tile, BasicTile):
        return f"{_LETTER_OF_COLOR[tile.color]}{tile.value}"
    return _LETTER_OF_JOKER[tile.variant]


def format_tiles(tiles: Iterable[Tile]) -> str:
    return " ".join(format_tile(tile) for tile in tiles)
