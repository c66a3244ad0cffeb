"""
Collapsible-container state machine.

Two states, one symmetric user-triggered transition. The initial state is
computed once when the node is mounted; nothing re-evaluates it afterwards,
so an array that grows past the threshold stays expanded until the user
collapses it.
"""

from enum import Enum
from typing import Any, Optional, Sequence

from pyqt_stateview.protocols.form_config import get_config

from .descriptors import ShapeDescriptor


class CollapseMode(Enum):
    EXPANDED = "expanded"
    COLLAPSED = "collapsed"


class CollapseState:
    """Per-node collapse flag, keyed by the node's position in the widget tree."""

    __slots__ = ("_mode",)

    def __init__(self, collapsed: bool = False):
        self._mode = CollapseMode.COLLAPSED if collapsed else CollapseMode.EXPANDED

    @property
    def mode(self) -> CollapseMode:
        return self._mode

    @property
    def is_collapsed(self) -> bool:
        return self._mode is CollapseMode.COLLAPSED

    def toggle(self) -> CollapseMode:
        self._mode = (
            CollapseMode.EXPANDED if self._mode is CollapseMode.COLLAPSED else CollapseMode.COLLAPSED
        )
        return self._mode

    def __repr__(self) -> str:
        return f"CollapseState({self._mode.value})"


def array_starts_collapsed(items: Optional[Sequence[Any]], inner: ShapeDescriptor) -> bool:
    """
    Initial collapse heuristic for array display nodes.

    Collapsed iff the sequence is non-empty and either the items are composite
    and there are more than ``array_composite_collapse_threshold`` of them, or
    there are more than ``array_collapse_threshold`` items.

    "Composite" is read from the array's declared inner shape rather than by
    inspecting the first item; the two agree for every value of that shape.
    """
    if not items:
        return False
    config = get_config()
    length = len(items)
    return (inner.is_composite and length > config.array_composite_collapse_threshold) or (
        length > config.array_collapse_threshold
    )
