from __future__ import annotations

from typing import Optional, Sequence, Tuple

from .tiles import BasicTile, JokerVariant, Tile, is_joker


def _advance(tile: Tile, pending: bool) -> Tuple[bool, bool]:
    """Return (cursor advances, pending afterwards) for one side of a comparison.

    A double joker stands for two tiles, so it has to be matched twice before
    its cursor moves on.
    """
    if is_joker(tile, JokerVariant.DOUBLE):
        return pending, not pending
    return True, pending


def _compare(
    left: Tile, right: Tile, pending_left: bool, pending_right: bool
) -> Optional[Tuple[bool, bool, bool, bool]]:
    if is_joker(left, JokerVariant.MIRROR) or is_joker(right, JokerVariant.MIRROR):
        return None
    left_cc = is_joker(left, JokerVariant.COLOR_CHANGE)
    right_cc = is_joker(right, JokerVariant.COLOR_CHANGE)
    if left_cc or right_cc:
        if left_cc and right_cc:
            return True, True, pending_left, pending_right
        return None
    if isinstance(left, BasicTile) and isinstance(right, BasicTile) and left != right:
        return None
    step_left, pending_left = _advance(left, pending_left)
    step_right, pending_right = _advance(right, pending_right)
    return step_left, step_right, pending_left, pending_right


def is_symmetric(tiles: Sequence[Tile], axis: int) -> bool:
    """Return whether ``tiles`` mirror each other across the joker at ``axis``.

    Examples:
        3 4 5 | 5 4 3   symmetric
        3 J 5 | 5 4 3   symmetric
        3 J 5 | 5 DJ    symmetric
        DJ DJ | 5 4 3   not symmetric

    Two cursors walk outward from the axis and compare the tiles under them.
    The walk stops once either cursor reaches its end of the sequence, unless a
    double joker sitting there still owes its second match. The tiles are
    symmetric iff both cursors end on the outermost tiles together.
    """
    last = len(tiles) - 1
    if axis <= 0 or axis >= last:
        return False

    left = axis - 1
    right = axis + 1
    pending_left = False
    pending_right = False

    while True:
        result = _compare(tiles[left], tiles[right], pending_left, pending_right)
        if result is None:
            return False
        step_left, step_right, pending_left, pending_right = result

        if left == 0 and pending_left:
            if step_right:
                if right == last:
                    return False
                right += 1
            continue
        if right == last and pending_right:
            if step_left:
                if left == 0:
                    return False
                left -= 1
            continue
        if left == 0 or right == last:
            break
        if step_left:
            left -= 1
        if step_right:
            right += 1

    return left == 0 and right == last
