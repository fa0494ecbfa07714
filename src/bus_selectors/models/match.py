"""Match models recording how a selector treated a published key."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict

from bus_selectors.protocols.selector import Selector

logger = logging.getLogger(__name__)

__all__ = [
    "SelectorMatch",
    "evaluate",
]


class SelectorMatch(BaseModel):
    """Outcome of offering one key to one selector.

    ``headers`` is None when the key was rejected or the selector produces
    no headers, and a (possibly empty) mapping otherwise.
    """

    model_config = ConfigDict(frozen=True)

    key: Any
    matched: bool
    headers: dict[str, str | None] | None = None


def evaluate(selector: Selector, key: Any) -> SelectorMatch:
    """Run the dispatch flow for one key against one selector.

    Calls ``selector.matches`` first and only consults the header resolver
    for keys that match.

    Parameters:
        selector: The selector to test.
        key: The published key.

    Returns:
        A ``SelectorMatch`` describing the decision.
    """
    if not selector.matches(key):
        logger.debug("%r rejected key %r", selector, key)
        return SelectorMatch(key=key, matched=False)

    resolver = selector.header_resolver()
    headers = resolver(key) if resolver is not None else None
    logger.debug("%r matched key %r with headers %r", selector, key, headers)
    return SelectorMatch(key=key, matched=True, headers=headers)
