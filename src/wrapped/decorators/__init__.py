"""Decorators: @lift and @short_circuit."""

from wrapped.decorators.lift import lift
from wrapped.decorators.short_circuit import short_circuit

__all__ = [
    'lift',
    'short_circuit',
]
