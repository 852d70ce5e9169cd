"""Property-based tests for wrap, functor and monad laws."""

import pytest
from hypothesis import given
from hypothesis import strategies as st
from wrapped import Blank, EmptyAccess, wrap
from wrapped.optional import BlankType, Present

from tests.strategies import exceptions, int_optionals, optionals, present_values


def increment(n: int) -> int:
    return n + 1


def double(n: int) -> int:
    return n * 2


def half_if_even(n: int) -> Present[int] | BlankType:
    return wrap(n // 2) if n % 2 == 0 else Blank


def positive(n: int) -> Present[int] | BlankType:
    return wrap(n) if n > 0 else Blank


class TestWrapProperties:
    """wrap() is total and round-trips non-None values."""

    @given(present_values)
    def test_wrap_value_is_present(self, value):
        wrapped = wrap(value)
        assert wrapped.is_present()
        assert wrapped.unwrap() == value

    def test_wrap_none_is_blank(self):
        wrapped = wrap(None)
        assert wrapped.is_blank()
        with pytest.raises(EmptyAccess):
            wrapped.unwrap()

    @given(present_values, st.integers())
    def test_unwrap_or_round_trip(self, value, default):
        assert wrap(value).unwrap_or(default) == value
        assert wrap(None).unwrap_or(default) == default


class TestOptionalFunctorLaws:
    """Functor laws hold for both variants."""

    @given(optionals)
    def test_identity(self, x):
        """Identity: x.map(id) == x."""
        assert x.map(lambda v: v) == x

    @given(int_optionals)
    def test_composition(self, x):
        """Composition: x.map(lambda v: f(g(v))) == x.map(g).map(f)."""
        assert x.map(lambda v: increment(double(v))) == x.map(double).map(increment)


class TestOptionalMonadLaws:
    """Monad laws for flat_map, with wrap as unit."""

    @given(st.integers())
    def test_left_identity(self, value):
        """Left identity: wrap(v).flat_map(f) == f(v)."""
        assert wrap(value).flat_map(half_if_even) == half_if_even(value)

    @given(int_optionals)
    def test_right_identity(self, x):
        """Right identity: x.flat_map(wrap) == x."""
        assert x.flat_map(wrap) == x

    @given(int_optionals)
    def test_associativity(self, x):
        """x.flat_map(f).flat_map(g) == x.flat_map(lambda v: f(v).flat_map(g))."""
        left = x.flat_map(half_if_even).flat_map(positive)
        right = x.flat_map(lambda v: half_if_even(v).flat_map(positive))
        assert left == right


class TestOptionalFilterProperties:
    """Properties of select, reject and iterate across both variants."""

    @given(int_optionals)
    def test_select_reject_partition(self, x):
        """select and reject with the same predicate never both keep a value."""
        kept = x.select(lambda v: v > 0)
        dropped = x.reject(lambda v: v > 0)
        assert not (kept.is_present() and dropped.is_present())
        if x.is_present():
            assert kept.is_present() or dropped.is_present()

    @given(int_optionals)
    def test_iterate_matches_presence(self, x):
        assert list(x.iterate()) == ([x.unwrap()] if x.is_present() else [])


def _raiser(exc: Exception):
    """Build a callback of any arity that raises exc."""

    def fail(*_args):
        raise exc

    return fail


# Each entry runs one combinator with a failing callback on the variant that calls it.
CALLBACK_COMBINATORS = {
    'map': lambda fail: wrap(1).map(fail),
    'flat_map': lambda fail: wrap(1).flat_map(fail),
    'select': lambda fail: wrap(1).select(fail),
    'reject': lambda fail: wrap(1).reject(fail),
    'on_present': lambda fail: wrap(1).on_present(fail),
    'on_blank': lambda fail: Blank.on_blank(fail),
    'unwrap_or_else': lambda fail: Blank.unwrap_or_else(fail),
    'or_else': lambda fail: Blank.or_else(fail),
    'map_or': lambda fail: wrap(1).map_or(0, fail),
    'map_or_else': lambda fail: Blank.map_or_else(fail, lambda n: n),
}


class TestCallbackErrorsPropagate:
    """Callback exceptions surface as the very same object."""

    @pytest.mark.parametrize('combinator', sorted(CALLBACK_COMBINATORS))
    @given(exc=exceptions)
    def test_exception_is_not_replaced(self, combinator, exc):
        with pytest.raises(type(exc)) as exc_info:
            CALLBACK_COMBINATORS[combinator](_raiser(exc))
        assert exc_info.value is exc
