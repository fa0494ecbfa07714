"""Protocol definitions for bus-selectors' pluggable selectors."""

from .selector import AttributeMap, HeaderResolver, Selector

__all__ = [
    "AttributeMap",
    "HeaderResolver",
    "Selector",
]
