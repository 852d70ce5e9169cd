"""@lift decorator for turning None-returning functions into Optional ones."""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from typing import Any

import wrapt

from wrapped.optional import BlankType, Present, wrap

__all__ = ['lift']


def lift[**P, T](
    func: Callable[P, T | None] | Callable[P, Awaitable[T | None]],
) -> Callable[P, Present[T] | BlankType] | Callable[P, Awaitable[Present[T] | BlankType]]:
    """Decorator that passes a function's return value through ``wrap``.

    A None result becomes Blank; anything else becomes Present. Exceptions
    raised by the function propagate unchanged. Async functions are
    detected automatically.

    Args:
        func: The function to wrap.

    Returns:
        A wrapped function returning Optional[T] instead of T | None.

    Example:
        ```python
        @lift
        def find_user(user_id: int) -> User | None:
            return users.get(user_id)

        find_user(1).map(lambda u: u.name).unwrap_or('anonymous')
        ```
    """
    if inspect.iscoroutinefunction(func):

        @wrapt.decorator
        async def async_wrapper(
            wrapped: Callable[P, Awaitable[T | None]],
            instance: Any,
            args: tuple[Any, ...],
            kwargs: dict[str, Any],
        ) -> Present[T] | BlankType:
            return wrap(await wrapped(*args, **kwargs))

        return async_wrapper(func)  # type: ignore[return-value]

    @wrapt.decorator
    def sync_wrapper(
        wrapped: Callable[P, T | None],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Present[T] | BlankType:
        return wrap(wrapped(*args, **kwargs))

    return sync_wrapper(func)  # type: ignore[return-value]
