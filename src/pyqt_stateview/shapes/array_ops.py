"""
Pure sequence operations behind the array editor.

Every operation returns a new list and never mutates the snapshot it was
given, so each ``value_changed`` emission fully replaces the previous one.
Untouched items keep their relative order. Length changes are exactly +1 for
append, -1 for delete and 0 for swap and update.
"""

from enum import Enum
from typing import Any, List, Sequence


class MoveDirection(Enum):
    UP = -1
    DOWN = 1


def _check_index(items: Sequence[Any], index: int) -> None:
    if not 0 <= index < len(items):
        raise IndexError(f"Array index {index} out of range for {len(items)} items")


def append_item(items: Sequence[Any], item: Any) -> List[Any]:
    """Return ``items`` with ``item`` pushed to the end."""
    return [*items, item]


def can_move(items: Sequence[Any], index: int, direction: MoveDirection) -> bool:
    """Whether the swap control for ``index`` in ``direction`` is active."""
    target = index + direction.value
    return 0 <= index < len(items) and 0 <= target < len(items)


def swap_adjacent(items: Sequence[Any], index: int, direction: MoveDirection) -> List[Any]:
    """
    Exchange ``index`` with its neighbour in ``direction``.

    At the boundaries (first item moving up, last item moving down) the
    result is an unchanged copy.
    """
    _check_index(items, index)
    result = list(items)
    if not can_move(items, index, direction):
        return result
    target = index + direction.value
    result[index], result[target] = result[target], result[index]
    return result


def delete_item(items: Sequence[Any], index: int) -> List[Any]:
    """Remove ``index``; later items shift down by one."""
    _check_index(items, index)
    return [item for i, item in enumerate(items) if i != index]


def update_item(items: Sequence[Any], index: int, item: Any) -> List[Any]:
    """Replace ``index`` with ``item``, leaving all other indices unchanged."""
    _check_index(items, index)
    result = list(items)
    result[index] = item
    return result
