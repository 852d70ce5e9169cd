"""Error raised on unchecked access to a Blank."""

from __future__ import annotations

__all__ = ['EmptyAccess']


class EmptyAccess(IndexError):  # noqa: N818
    """Unchecked access (``unwrap``/``expect``) on a Blank.

    Subclasses IndexError so code that already guards index access
    still catches it.
    """

    def __init__(self, message: str | None = None) -> None:
        self.message = message or 'Blank has no value'
        super().__init__(self.message)
