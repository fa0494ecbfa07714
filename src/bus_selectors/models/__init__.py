"""Data models for bus-selectors."""

from .match import SelectorMatch, evaluate

__all__ = [
    "SelectorMatch",
    "evaluate",
]
