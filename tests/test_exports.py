"""Tests for top-level package exports."""

from __future__ import annotations

import bus_selectors


class TestTopLevelExports:
    """Verify all expected symbols are importable from the top-level package."""

    def test_selector_exports(self) -> None:
        from bus_selectors import ObjectSelector, R, RegexSelector, regex_selector

        assert ObjectSelector is not None
        assert RegexSelector is not None
        assert R is regex_selector

    def test_protocol_exports(self) -> None:
        from bus_selectors import AttributeMap, HeaderResolver, Selector

        assert Selector is not None
        assert HeaderResolver is not None
        assert AttributeMap is not None

    def test_model_exports(self) -> None:
        from bus_selectors import SelectorMatch, evaluate

        assert SelectorMatch is not None
        assert callable(evaluate)

    def test_exception_exports(self) -> None:
        from bus_selectors import InvalidPatternError, MatchError, SelectorError

        assert issubclass(InvalidPatternError, SelectorError)
        assert issubclass(MatchError, SelectorError)

    def test_version(self) -> None:
        assert isinstance(bus_selectors.__version__, str)
        assert bus_selectors.__version__

    def test_all_names_resolve(self) -> None:
        for name in bus_selectors.__all__:
            assert hasattr(bus_selectors, name), name
