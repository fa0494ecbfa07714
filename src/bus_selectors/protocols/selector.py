"""Protocol definition for routing-key selectors."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

AttributeMap = dict[str, str | None]
"""Headers extracted from a matching key, keyed by attribute name."""

HeaderResolver = Callable[[Any], AttributeMap | None]
"""Callable turning a key into its attribute map, or None when it does not match."""


@runtime_checkable
class Selector(Protocol):
    """Predicate-plus-extractor registered against a handler in a routing table.

    The dispatcher first asks ``matches`` as a fast reject, then, for keys
    that match, calls the header resolver to obtain the attributes handed
    to the handler. Implementations must be side-effect free and safe to
    call from any thread.
    """

    @property
    def object(self) -> Any:
        """The value backing this selector."""
        ...

    def matches(self, key: Any) -> bool:
        """Check whether a published key is selected.

        Parameters:
            key: The key published to the bus. May be of any type.

        Returns:
            True if the key is selected, False otherwise.
        """
        ...

    def header_resolver(self) -> HeaderResolver | None:
        """Return the callable that extracts headers from a matching key.

        Returns:
            A pure callable mapping a key to its attribute map (or None when
            the key does not match), or None if this selector never
            produces headers.
        """
        ...
