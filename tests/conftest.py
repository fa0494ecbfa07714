"""Shared fixtures for bus-selectors tests."""

from __future__ import annotations

from typing import Any

import pytest

from bus_selectors.protocols.selector import HeaderResolver
from bus_selectors.selectors.regex import RegexSelector


class PrefixSelector:
    """A hand-written selector that satisfies the Selector protocol.

    Selects string keys starting with a prefix and reports the remainder
    as a ``suffix`` header. Used to check that consumers rely only on the
    protocol rather than on concrete selector classes.
    """

    def __init__(self, prefix: str) -> None:
        self._prefix = prefix

    @property
    def object(self) -> Any:
        return self._prefix

    def matches(self, key: Any) -> bool:
        return isinstance(key, str) and key.startswith(self._prefix)

    def header_resolver(self) -> HeaderResolver | None:
        def resolve(key: Any) -> dict[str, str | None] | None:
            if not self.matches(key):
                return None
            return {"suffix": key[len(self._prefix) :]}

        return resolve


@pytest.fixture
def event_selector() -> RegexSelector:
    """Selector for keys like ``event1`` or ``event23``."""
    return RegexSelector("event([0-9]+)")


@pytest.fixture
def prefix_selector() -> PrefixSelector:
    return PrefixSelector("order.")
