from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Sequence, Tuple, Union

from .colors import AllowanceSet
from .errors import InvariantViolation
from .mirror import is_symmetric
from .rules import Ruleset
from .tiles import MAX_VALUE, MIN_VALUE, BasicTile, JokerVariant, Tile, describe_tile

logger = logging.getLogger(__name__)

_JOKER_WIDTH = {JokerVariant.SINGLE: 1, JokerVariant.DOUBLE: 2}


@dataclass(frozen=True)
class Undetermined:
    """No two basic tiles seen yet, so the set could still be a run or a group.

    ``distance`` is the offset from ``first`` to the current position.
    """

    first: Optional[BasicTile] = None
    distance: int = 0
    size: int = 0

    def leading(self) -> int:
        # joker slots before the first basic tile
        return self.size - self.distance if self.first is not None else self.size


@dataclass(frozen=True)
class RunState:
    # Unknown only while nothing but jokers has been read.
    last_value: Optional[int]
    # Normally a single color. After a color change joker, every color except the
    # previous one; after two in a row, every color.
    allow: AllowanceSet
    size: int


@dataclass(frozen=True)
class GroupState:
    value: int
    # Colors not used yet.
    allow: AllowanceSet
    size: int


ParseState = Union[Undetermined, RunState, GroupState]


class Outcome(str, Enum):
    REJECT = "REJECT"
    MIRROR = "MIRROR"


@dataclass(frozen=True)
class Step:
    state: Optional[ParseState] = None
    outcome: Optional[Outcome] = None
    reason: str = ""

    @staticmethod
    def proceed(state: ParseState) -> "Step":
        return Step(state=state)

    @staticmethod
    def reject(reason: str) -> "Step":
        return Step(outcome=Outcome.REJECT, reason=reason)

    @staticmethod
    def mirror() -> "Step":
        return Step(outcome=Outcome.MIRROR)


def _enter_run(state: Undetermined, last_value: Optional[int], allow: AllowanceSet, size: int) -> Step:
    """Commit an undetermined prefix to a run, checking that it fits in 1..13."""
    if state.first is not None and state.first.value - state.leading() < MIN_VALUE:
        return Step.reject("run would start below 1")
    if last_value is not None and last_value > MAX_VALUE:
        return Step.reject("run would go past 13")
    return Step.proceed(RunState(last_value=last_value, allow=allow, size=size))


def _advance_undetermined(state: Undetermined, tile: Tile, ruleset: Ruleset) -> Step:
    if isinstance(tile, BasicTile):
        first = state.first
        if first is None:
            seen = Undetermined(first=tile, distance=1, size=state.size + 1)
            if seen.size <= ruleset.max_group_size:
                return Step.proceed(seen)
            # Too long for a group.
            if tile.value < seen.size:
                return Step.reject("run would start below 1")
            return Step.proceed(RunState(last_value=tile.value, allow=AllowanceSet.only(tile.color), size=seen.size))

        if tile.value == first.value + state.distance and tile.color == first.color:
            return _enter_run(state, tile.value, AllowanceSet.only(tile.color), state.size + 1)
        if tile.value == first.value and tile.color != first.color:
            if state.size > ruleset.max_group_size - 1:
                return Step.reject(f"group cannot have more than {ruleset.max_group_size} tiles")
            allow = AllowanceSet.all_except(tile.color).intersect(AllowanceSet.all_except(first.color))
            return Step.proceed(GroupState(value=first.value, allow=allow, size=state.size + 1))
        return Step.reject("tiles form neither a run nor a group")

    variant = tile.variant
    if variant == JokerVariant.MIRROR:
        return Step.mirror()

    if variant == JokerVariant.COLOR_CHANGE:
        if state.first is None:
            return Step.proceed(RunState(last_value=None, allow=AllowanceSet.all(), size=state.size + 1))
        return _enter_run(
            state,
            state.first.value + state.distance,
            AllowanceSet.all_except(state.first.color),
            state.size + 1,
        )

    width = _JOKER_WIDTH[variant]
    if state.first is None:
        grown = replace(state, size=state.size + width)
    else:
        grown = replace(state, distance=state.distance + width, size=state.size + width)
    if grown.size <= ruleset.max_group_size:
        return Step.proceed(grown)
    if grown.first is None:
        return Step.proceed(RunState(last_value=None, allow=AllowanceSet.all(), size=grown.size))
    return _enter_run(
        grown,
        grown.first.value + grown.distance - 1,
        AllowanceSet.only(grown.first.color),
        grown.size,
    )


def _flip_colors(allow: AllowanceSet) -> AllowanceSet:
    allowed = allow.allowed_colors()
    if len(allowed) == 1:
        return AllowanceSet.all_except(allowed[0])
    if len(allowed) in (3, 4):
        return AllowanceSet.all()
    raise InvariantViolation(f"unexpected number of allowed colors ({len(allowed)}) upon color change")


def _advance_run(state: RunState, tile: Tile) -> Step:
    if isinstance(tile, BasicTile):
        if not state.allow[tile.color]:
            return Step.reject(f"{describe_tile(tile)} is not allowed here")
        if tile.value <= state.size:
            return Step.reject("run would start below 1")
        if state.last_value is not None and tile.value != state.last_value + 1:
            return Step.reject(f"expected {state.last_value + 1}, got {describe_tile(tile)}")
        return Step.proceed(RunState(last_value=tile.value, allow=AllowanceSet.only(tile.color), size=state.size + 1))

    variant = tile.variant
    if variant == JokerVariant.MIRROR:
        return Step.mirror()

    width = 1 if variant == JokerVariant.COLOR_CHANGE else _JOKER_WIDTH[variant]
    size = state.size + width
    last_value = None if state.last_value is None else state.last_value + width
    if last_value is not None and last_value > MAX_VALUE:
        return Step.reject("run would go past 13")
    if last_value is None and size > MAX_VALUE:
        return Step.reject(f"run cannot have more than {MAX_VALUE} tiles")

    allow = state.allow
    if variant == JokerVariant.COLOR_CHANGE:
        allow = _flip_colors(allow)
    return Step.proceed(RunState(last_value=last_value, allow=allow, size=size))


def _advance_group(state: GroupState, tile: Tile, ruleset: Ruleset) -> Step:
    if isinstance(tile, BasicTile):
        if tile.value != state.value:
            return Step.reject(f"group value is {state.value}, got {describe_tile(tile)}")
        if not state.allow[tile.color]:
            return Step.reject(f"{describe_tile(tile)}: color already used in the group")
        allow = state.allow.copy()
        allow.set(tile.color, False)
        size = state.size + 1
    else:
        variant = tile.variant
        if variant == JokerVariant.MIRROR:
            return Step.mirror()
        if variant == JokerVariant.COLOR_CHANGE:
            return Step.reject(f"{describe_tile(tile)} cannot be used in a group")
        if variant == JokerVariant.DOUBLE and state.allow.count() < 2:
            return Step.reject(f"not enough colors left for a {describe_tile(tile)}")
        allow = state.allow
        size = state.size + _JOKER_WIDTH[variant]

    if size > ruleset.max_group_size:
        return Step.reject(f"group cannot have more than {ruleset.max_group_size} tiles")
    return Step.proceed(GroupState(value=state.value, allow=allow, size=size))


def advance(state: ParseState, tile: Tile, ruleset: Optional[Ruleset] = None) -> Step:
    """Feed one tile to the parser and return what happens next."""
    ruleset = ruleset or Ruleset()
    if isinstance(state, Undetermined):
        return _advance_undetermined(state, tile, ruleset)
    if isinstance(state, RunState):
        return _advance_run(state, tile)
    if isinstance(state, GroupState):
        return _advance_group(state, tile, ruleset)
    raise InvariantViolation(f"unknown parse state {state!r}")


def check_set(tiles: Sequence[Tile], ruleset: Optional[Ruleset] = None) -> Tuple[bool, str]:
    """Return whether the ordered tiles form a valid set, and why not if they don't."""
    ruleset = ruleset or Ruleset()
    if len(tiles) < ruleset.min_set_size:
        return False, f"set needs at least {ruleset.min_set_size} tiles"

    state: ParseState = Undetermined()
    for index, tile in enumerate(tiles):
        step = advance(state, tile, ruleset)
        if step.outcome == Outcome.MIRROR:
            logger.debug("mirror joker at position %d decides the set", index)
            if is_symmetric(tiles, index):
                return True, ""
            return False, "tiles are not symmetric around the mirror joker"
        if step.outcome == Outcome.REJECT:
            logger.debug("rejected at position %d: %s", index, step.reason)
            return False, step.reason
        state = step.state
    return True, ""


def is_valid_set(tiles: Sequence[Tile], ruleset: Optional[Ruleset] = None) -> bool:
    """Given an ordered set of Rummikub tiles, return whether the set is valid."""
    ok, _ = check_set(tiles, ruleset)
    return ok
