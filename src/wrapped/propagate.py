"""Propagate exception for .bail() mechanism."""

from typing import Any


class Propagate(Exception):  # noqa: N818
    """Exception raised by .bail() to propagate a Blank up the call stack.

    This is caught by the @short_circuit decorator, which returns the
    carried Blank. The name intentionally doesn't end with "Error": it is
    control flow, not a failure.
    """

    __slots__ = ('_value',)

    def __init__(self, value: Any) -> None:
        """Initialize Propagate with the Blank to propagate.

        Args:
            value: The Blank being propagated.
        """
        self._value = value
        super().__init__(f'Propagate({value!r})')

    @property
    def value(self) -> Any:
        """The Blank being propagated."""
        return self._value
