"""bus-selectors: Routing-key selectors for event-bus dispatch.

Selectors:
    ObjectSelector, RegexSelector, regex_selector, R

Protocols (extension points):
    Selector, HeaderResolver, AttributeMap

Models:
    SelectorMatch, evaluate

Exceptions:
    SelectorError, InvalidPatternError, MatchError
"""

from importlib.metadata import PackageNotFoundError, version

from bus_selectors.exceptions import InvalidPatternError, MatchError, SelectorError
from bus_selectors.models import SelectorMatch, evaluate
from bus_selectors.protocols import AttributeMap, HeaderResolver, Selector
from bus_selectors.selectors import ObjectSelector, R, RegexSelector, regex_selector

try:
    __version__ = version("bus-selectors")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

__all__ = [
    "AttributeMap",
    "HeaderResolver",
    "InvalidPatternError",
    "MatchError",
    "ObjectSelector",
    "R",
    "RegexSelector",
    "Selector",
    "SelectorError",
    "SelectorMatch",
    "__version__",
    "evaluate",
    "regex_selector",
]
