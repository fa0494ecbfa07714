"""Selector implementations."""

from .object import ObjectSelector
from .regex import R, RegexSelector, regex_selector

__all__ = [
    "ObjectSelector",
    "R",
    "RegexSelector",
    "regex_selector",
]
