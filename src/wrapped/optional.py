"""Optional type: Present[T] | Blank for values that may be absent."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import Any, NoReturn, TypeIs

import msgspec

from wrapped.errors import EmptyAccess
from wrapped.propagate import Propagate

__all__ = ['Blank', 'BlankType', 'Optional', 'Present', 'wrap']

logger = logging.getLogger(__name__)


class Present[T](msgspec.Struct, frozen=True):
    """Present variant of Optional, holding exactly one value of type T.

    Use ``wrap`` to build one from a possibly-None value; constructing
    ``Present(None)`` directly is rejected.

    Instances stay tracked by the garbage collector since the held value
    may be a container that refers back to the Present.

    Examples:
        >>> p = wrap(42)
        >>> p.unwrap()
        42
        >>> p.map(lambda x: x * 2)
        Present(value=84)
        >>> list(p)
        [42]
    """

    value: T

    def __post_init__(self) -> None:
        if self.value is None:
            msg = 'Present cannot hold None; use wrap() to build an Optional'
            raise ValueError(msg)

    def __iter__(self) -> Iterator[T]:
        yield self.value

    def is_present(self) -> TypeIs[Present[T]]:
        """Return True since this is Present.

        Narrows the type for checkers, like ``isinstance(x, Present)``.
        """
        return True

    def is_blank(self) -> TypeIs[BlankType]:
        """Return False since this is Present."""
        return False

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, supplier: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained value without calling the supplier."""
        return self.value

    def map_or[U](self, default: U, f: Callable[[T], U]) -> U:  # noqa: ARG002
        """Apply f to the value, ignoring the default.

        Args:
            default: Value returned for Blank (unused for Present).
            f: Function to apply to the value.

        Returns:
            f(value).
        """
        return f(self.value)

    def map_or_else[U](self, default: Callable[[], U], f: Callable[[T], U]) -> U:  # noqa: ARG002
        """Apply f to the value without calling the default factory."""
        return f(self.value)

    def expect(self, _msg: str) -> T:
        """Return the contained value, ignoring the message."""
        return self.value

    def on_present(self, f: Callable[[T], Any]) -> Present[T]:
        """Call f with the value for its side effect and return self.

        Chainable with ``on_blank`` in either order:

            >>> wrap(name).on_present(greet).on_blank(ask_for_name)
        """
        f(self.value)
        return self

    def on_blank(self, _f: Callable[[], Any]) -> Present[T]:
        """Do nothing and return self."""
        return self

    def map[U](self, f: Callable[[T], U | None]) -> Present[U] | BlankType:
        """Apply a function to the contained value.

        The result goes through ``wrap``, so a function returning None
        produces Blank.

        Args:
            f: Function to apply to the value.

        Returns:
            Present containing f(value), or Blank if f returned None.
        """
        return wrap(f(self.value))

    def flat_map[U](
        self, f: Callable[[T], Present[U] | BlankType]
    ) -> Present[U] | BlankType:
        """Apply a function that returns an Optional to the contained value.

        Also known as bind. The result of f is returned as-is, never
        re-wrapped.

        Args:
            f: Function that takes T and returns Optional[U].

        Returns:
            The Optional returned by f.
        """
        return f(self.value)

    def select(self, predicate: Callable[[T], bool]) -> Present[T] | BlankType:
        """Return self if the predicate holds for the value, else Blank."""
        if predicate(self.value):
            return self
        return Blank

    def reject(self, predicate: Callable[[T], bool]) -> Present[T] | BlankType:
        """Return Blank if the predicate holds for the value, else self."""
        if predicate(self.value):
            return Blank
        return self

    def iterate(self) -> Present[T]:
        """Return a restartable iterable yielding the value exactly once."""
        return self

    def equals(self, other: object) -> bool:
        """Return True if other is a Present holding an equal value."""
        return self == other

    def or_else(self, _f: Callable[[], Present[T] | BlankType]) -> Present[T]:
        """Return self unchanged since this is Present."""
        return self

    def zip[U](self, other: Present[U] | BlankType) -> Present[tuple[T, U]] | BlankType:
        """Combine two Present values into a Present tuple.

        Returns Blank if other is Blank.
        """
        if isinstance(other, Present):
            return Present((self.value, other.value))
        return Blank

    def flatten(self) -> Present[Any] | BlankType:
        """Unnest a Present holding another Optional.

        A Present holding a plain value is returned unchanged.
        """
        if isinstance(self.value, Present | BlankType):
            return self.value
        return self

    def bail(self) -> T:
        """Return the contained value (no-op for Present).

        For Blank, this raises Propagate; see ``short_circuit``.
        """
        return self.value


class BlankType(msgspec.Struct, frozen=True, gc=False):
    """Blank variant of Optional, representing the absence of a value.

    Operations on Blank return Blank or a caller-supplied default; the only
    failing access is ``unwrap``/``expect``.

    Use the ``Blank`` singleton (or ``wrap(None)``) instead of
    instantiating directly. All instances compare equal.

    Examples:
        >>> Blank.is_blank()
        True
        >>> Blank.unwrap_or(0)
        0
    """

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    def is_present(self) -> TypeIs[Present[Any]]:
        """Return False since this is Blank."""
        return False

    def is_blank(self) -> TypeIs[BlankType]:
        """Return True since this is Blank."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise since Blank has no value.

        Raises:
            EmptyAccess: Always.
        """
        logger.debug('blank_unwrapped')
        raise EmptyAccess

    def unwrap_or[T](self, default: T) -> T:
        """Return the default."""
        return default

    def unwrap_or_else[T](self, supplier: Callable[[], T]) -> T:
        """Return the result of calling the supplier."""
        return supplier()

    def map_or[U](self, default: U, _f: Callable[[Any], U]) -> U:
        """Return the default; f is never called."""
        return default

    def map_or_else[U](self, default: Callable[[], U], _f: Callable[[Any], U]) -> U:
        """Return default(); f is never called."""
        return default()

    def expect(self, msg: str) -> NoReturn:
        """Raise with a custom message.

        Raises:
            EmptyAccess: Always, carrying msg.
        """
        logger.debug('blank_unwrapped', extra={'expect_message': msg})
        raise EmptyAccess(msg)

    def on_present(self, _f: Callable[[Any], Any]) -> BlankType:
        """Do nothing and return self."""
        return self

    def on_blank(self, f: Callable[[], Any]) -> BlankType:
        """Call f for its side effect and return self.

        Chainable with ``on_present`` in either order.
        """
        f()
        return self

    def map(self, _f: Callable[[Any], Any]) -> BlankType:
        """Return Blank; the function is never called."""
        return self

    def flat_map(self, _f: Callable[[Any], Any]) -> BlankType:
        """Return Blank; the function is never called."""
        return self

    def select(self, _predicate: Callable[[Any], bool]) -> BlankType:
        """Return Blank; the predicate is never called."""
        return self

    def reject(self, _predicate: Callable[[Any], bool]) -> BlankType:
        """Return Blank; the predicate is never called."""
        return self

    def iterate(self) -> BlankType:
        """Return a restartable iterable that yields nothing."""
        return self

    def equals(self, other: object) -> bool:
        """Return True if other is Blank."""
        return self == other

    def or_else[T](self, f: Callable[[], Present[T] | BlankType]) -> Present[T] | BlankType:
        """Return the Optional produced by f."""
        return f()

    def zip(self, _other: Present[Any] | BlankType) -> BlankType:
        """Return Blank."""
        return self

    def flatten(self) -> BlankType:
        """Return Blank."""
        return self

    def bail(self) -> NoReturn:
        """Raise Propagate to exit the enclosing ``short_circuit`` function.

        Raises:
            Propagate: Always, carrying this Blank.
        """
        raise Propagate(self)


Blank: BlankType = BlankType()
"""Singleton instance representing the absence of a value."""


type Optional[T] = Present[T] | BlankType


def wrap[T](value: T | None) -> Present[T] | BlankType:
    """Convert a possibly-None value into an Optional.

    Total: never raises.

    Examples:
        >>> wrap(1)
        Present(value=1)
        >>> wrap(None)
        BlankType()
    """
    if value is None:
        return Blank
    return Present(value)
