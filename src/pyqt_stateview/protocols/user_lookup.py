"""User lookup protocol for lazily resolved reference identifiers.

Applications register a lookup per reference key; reference widgets call it
off the main thread.
"""

from typing import Protocol, Optional, Dict

from .session import UserDescriptor


class UserLookupProtocol(Protocol):
    """Callable resolving an identifier to a UserDescriptor.

    Returning None means "unresolved", not necessarily an error. Raising is
    treated the same way by the reference widget.

    Example:
        from pyqt_stateview.protocols import register_user_lookup

        register_user_lookup(lambda user_id: backend.fetch_user(user_id))
    """

    def __call__(self, identifier: str) -> Optional[UserDescriptor]:
        ...


# Global registry instance (set by application)
_user_lookups: Dict[str, UserLookupProtocol] = {}


def register_user_lookup(lookup: UserLookupProtocol, key: str = "user") -> None:
    """Register a lookup implementation.

    Args:
        lookup: Callable resolving identifiers
        key: ReferenceShape.lookup_key this lookup serves
    """
    _user_lookups[key] = lookup


def unregister_user_lookup(key: str = "user") -> None:
    _user_lookups.pop(key, None)


def get_user_lookup(key: str = "user") -> Optional[UserLookupProtocol]:
    """Get the registered lookup.

    Returns:
        Registered lookup or None if not set
    """
    return _user_lookups.get(key)
