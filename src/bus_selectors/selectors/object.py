"""Base selector backed by a single immutable object."""

from __future__ import annotations

from typing import Any

from bus_selectors.protocols.selector import HeaderResolver

__all__ = ["ObjectSelector"]


class ObjectSelector:
    """Selector that holds one backing object for its whole lifetime.

    By itself it selects keys equal to the object and produces no headers.
    Subclasses store a prepared form of their input (a compiled pattern,
    a template) in the same slot and override the matching behaviour.

    Implements the ``Selector`` protocol.

    Selectors are hashable only when their backing object is. An
    unhashable object such as a list still selects keys but the selector
    cannot be a set member or mapping key.

    Parameters:
        obj: The value backing this selector.
    """

    __slots__ = ("_object",)

    def __init__(self, obj: Any) -> None:
        object.__setattr__(self, "_object", obj)

    def __setattr__(self, name: str, value: Any) -> None:
        msg = f"{type(self).__name__} is immutable; cannot set {name!r}"
        raise AttributeError(msg)

    def __delattr__(self, name: str) -> None:
        msg = f"{type(self).__name__} is immutable; cannot delete {name!r}"
        raise AttributeError(msg)

    @property
    def object(self) -> Any:
        """The value backing this selector."""
        return self._object

    def matches(self, key: Any) -> bool:
        """Select keys equal to the backing object.

        Parameters:
            key: The key published to the bus.

        Returns:
            True if ``key == self.object``.
        """
        return bool(key == self._object)

    def header_resolver(self) -> HeaderResolver | None:
        """Plain object selectors produce no headers."""
        return None

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(self._object == other._object)  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._object))

    def __reduce__(self) -> tuple[Any, ...]:
        # Rebuild through __init__; slot restoration would go through __setattr__.
        return (type(self), (self._object,))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(object={self._object!r})"
