"""@short_circuit decorator for catching Propagate exceptions."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Any

import wrapt

from wrapped.optional import BlankType, Present
from wrapped.propagate import Propagate

__all__ = ['short_circuit']

logger = logging.getLogger(__name__)


def short_circuit[**P, T](
    func: Callable[P, Present[T] | BlankType]
    | Callable[P, Awaitable[Present[T] | BlankType]],
) -> Callable[P, Present[T] | BlankType] | Callable[P, Awaitable[Present[T] | BlankType]]:
    """Decorator that catches Propagate exceptions for .bail() support.

    When a function decorated with @short_circuit calls .bail() on a Blank,
    the Propagate exception is caught and the Blank is returned, so the
    function exits early without an explicit absence check.

    Automatically detects async functions and handles them appropriately.

    Args:
        func: The function to wrap. Must return an Optional.

    Returns:
        A wrapped function that catches Propagate and returns the carried Blank.

    Example:
        ```python
        @short_circuit
        def full_name(user_id: int) -> Optional[str]:
            user = find_user(user_id).bail()
            last = wrap(user.last_name).bail()
            return wrap(f'{user.first_name} {last}')
        ```
    """
    if inspect.iscoroutinefunction(func):

        @wrapt.decorator
        async def async_wrapper(
            wrapped: Callable[P, Awaitable[Present[T] | BlankType]],
            instance: Any,
            args: tuple[Any, ...],
            kwargs: dict[str, Any],
        ) -> Present[T] | BlankType:
            try:
                return await wrapped(*args, **kwargs)
            except Propagate as p:
                logger.debug('blank_propagated', extra={'function': wrapped.__qualname__})
                return p.value

        return async_wrapper(func)  # type: ignore[return-value]

    @wrapt.decorator
    def sync_wrapper(
        wrapped: Callable[P, Present[T] | BlankType],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Present[T] | BlankType:
        try:
            return wrapped(*args, **kwargs)
        except Propagate as p:
            logger.debug('blank_propagated', extra={'function': wrapped.__qualname__})
            return p.value

    return sync_wrapper(func)  # type: ignore[return-value]
