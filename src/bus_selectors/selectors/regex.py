"""Regular-expression selector for routing keys.

A ``RegexSelector`` compiles its pattern once and matches keys with
anchored full-match semantics. Capturing groups of a matching key are
exposed as headers named ``group1`` .. ``groupN``::

    selector = R("event([0-9]+)")
    selector.matches("event23")               # True
    selector.header_resolver()("event23")     # {"group1": "23"}
"""

from __future__ import annotations

import logging
import re
from typing import Any

from bus_selectors.exceptions import InvalidPatternError, MatchError
from bus_selectors.protocols.selector import AttributeMap, HeaderResolver
from bus_selectors.selectors.object import ObjectSelector

logger = logging.getLogger(__name__)

__all__ = [
    "R",
    "RegexSelector",
    "regex_selector",
]


class RegexSelector(ObjectSelector):
    """Selector that full-matches string keys against a compiled pattern.

    Only ``str`` keys are considered; any other key type is rejected
    without conversion by both ``matches`` and the header resolver, so a
    key matches exactly when the resolver returns a mapping.

    Capturing groups that did not take part in a match are reported with
    a ``None`` value, keeping the header names a function of the pattern
    alone. Named groups are reported under their positional name.

    Implements the ``Selector`` protocol.

    Parameters:
        pattern: The regular expression to compile, with default flags.

    Raises:
        InvalidPatternError: If ``pattern`` is not a string or does not compile.
    """

    __slots__ = ("_header_resolver",)

    def __init__(self, pattern: str) -> None:
        if not isinstance(pattern, str):
            msg = f"Selector pattern must be a string, got {type(pattern).__name__}"
            raise InvalidPatternError(msg, pattern=pattern)
        try:
            compiled = re.compile(pattern)
        except re.error as exc:
            msg = f"Invalid selector pattern {pattern!r}: {exc.msg}"
            raise InvalidPatternError(msg, pattern=pattern, position=exc.pos) from exc

        super().__init__(compiled)
        object.__setattr__(self, "_header_resolver", self._resolve_headers)
        logger.debug(
            "Compiled RegexSelector pattern %r with %d group(s)", pattern, compiled.groups
        )

    @property
    def pattern(self) -> str:
        """The source of the compiled pattern."""
        return self._object.pattern

    @property
    def groups(self) -> int:
        """Number of capturing groups in the pattern."""
        return self._object.groups

    def matches(self, key: Any) -> bool:
        """Check whether ``key`` is a string fully matched by the pattern.

        Parameters:
            key: The key published to the bus.

        Returns:
            True if the whole key matches, False for partial matches,
            non-matching keys and non-string keys.

        Raises:
            MatchError: If the regex engine fails while matching.
        """
        if not isinstance(key, str):
            return False
        return self._fullmatch(key) is not None

    def header_resolver(self) -> HeaderResolver:
        """Return the header resolver for this selector.

        The same callable is returned on every call.
        """
        return self._header_resolver

    def _resolve_headers(self, key: Any) -> AttributeMap | None:
        if not isinstance(key, str):
            return None
        match = self._fullmatch(key)
        if match is None:
            return None
        return {f"group{i}": match.group(i) for i in range(1, self._object.groups + 1)}

    def _fullmatch(self, key: str) -> re.Match[str] | None:
        try:
            return self._object.fullmatch(key)
        except (re.error, RecursionError) as exc:
            msg = f"Regex engine failed matching {key!r} against {self.pattern!r}: {exc}"
            raise MatchError(msg, pattern=self.pattern, key=key) from exc

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.pattern,))

    def __repr__(self) -> str:
        return f"RegexSelector(pattern={self.pattern!r})"


def regex_selector(pattern: str) -> RegexSelector:
    """Create a selector from a regular expression.

    Parameters:
        pattern: The regular expression to compile.

    Returns:
        A new ``RegexSelector``.

    Raises:
        InvalidPatternError: If the pattern does not compile.
    """
    return RegexSelector(pattern)


R = regex_selector
