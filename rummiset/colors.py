from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from .tiles import Color

COLORS = tuple(Color)
_INDEX = {color: idx for idx, color in enumerate(COLORS)}


def _validate_flags(flags: Sequence[bool]) -> None:
    if len(flags) != len(COLORS):
        raise ValueError(f"allowance set must have exactly {len(COLORS)} flags")


@dataclass
class AllowanceSet:
    """Which of the four colors may still be played at the current position.

    Flags are stored in ``Color`` declaration order.
    """

    flags: List[bool]

    def __post_init__(self) -> None:
        _validate_flags(self.flags)

    @classmethod
    def all(cls) -> "AllowanceSet":
        return cls([True] * len(COLORS))

    @classmethod
    def none(cls) -> "AllowanceSet":
        return cls([False] * len(COLORS))

    @classmethod
    def only(cls, color: Color) -> "AllowanceSet":
        allow = cls.none()
        allow.set(color, True)
        return allow

    @classmethod
    def all_except(cls, color: Color) -> "AllowanceSet":
        allow = cls.all()
        allow.set(color, False)
        return allow

    def allows(self, color: Color) -> bool:
        return self.flags[_INDEX[color]]

    def __getitem__(self, color: Color) -> bool:
        return self.allows(color)

    def set(self, color: Color, allowed: bool) -> None:
        self.flags[_INDEX[color]] = allowed

    def count(self) -> int:
        return sum(1 for flag in self.flags if flag)

    def allowed_colors(self) -> List[Color]:
        return [color for color, flag in zip(COLORS, self.flags) if flag]

    def intersect(self, other: "AllowanceSet") -> "AllowanceSet":
        return AllowanceSet([a and b for a, b in zip(self.flags, other.flags)])

    def copy(self) -> "AllowanceSet":
        return AllowanceSet(list(self.flags))

    def __eq__(self, other: object) -> bool:
        return isinstance(other, AllowanceSet) and self.flags == other.flags
