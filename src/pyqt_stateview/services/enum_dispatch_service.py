"""
Enum-keyed dispatch tables.

A subclass maps each member of a strategy enum to a handler and decides,
per call, which member applies. ShapeDispatcher uses one table per pipeline
keyed on ShapeKind, so the display and edit pipelines can never disagree on
which kinds exist.

Example:
    class Pipeline(EnumDispatchService[ShapeKind]):
        def __init__(self, handlers):
            super().__init__()
            self._register_handlers(handlers)

        def _determine_strategy(self, shape, *args, **kwargs) -> ShapeKind:
            return shape.kind
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, Dict, Generic, List, TypeVar

logger = logging.getLogger(__name__)

KindT = TypeVar('KindT', bound=Enum)


class EnumDispatchService(ABC, Generic[KindT]):
    """
    Base for services that route calls through an enum -> handler table.

    Handlers receive exactly the arguments passed to dispatch().
    """

    def __init__(self):
        self._handlers: Dict[KindT, Callable] = {}

    def _register_handlers(self, handlers: Dict[KindT, Callable]) -> None:
        """
        Add handlers, replacing any already registered for the same members.

        Raises:
            ValueError: If ``handlers`` is empty
        """
        if not handlers:
            raise ValueError(f"{type(self).__name__}: refusing to register an empty handler table")
        self._handlers.update(handlers)
        logger.debug(f"{type(self).__name__}: {len(handlers)} handler(s) registered")

    @abstractmethod
    def _determine_strategy(self, *args, **kwargs) -> KindT:
        """Return the enum member whose handler should receive this call."""

    def dispatch(self, *args, **kwargs) -> Any:
        """
        Call the handler for the member chosen by _determine_strategy().

        Raises:
            KeyError: If no handler is registered for that member
        """
        kind = self._determine_strategy(*args, **kwargs)
        handler = self._handlers.get(kind)
        if handler is None:
            known = ", ".join(str(k.value) for k in self._handlers)
            raise KeyError(f"{type(self).__name__}: no handler for {kind.value!r} (known: {known})")
        return handler(*args, **kwargs)

    def get_registered_strategies(self) -> List[KindT]:
        return list(self._handlers)

    def has_strategy(self, kind: KindT) -> bool:
        return kind in self._handlers
