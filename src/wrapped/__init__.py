"""wrapped: an Optional type for values that may be absent.

Flat imports (preferred):
    from wrapped import wrap, Optional, Present, Blank, EmptyAccess
    from wrapped import lift, short_circuit

Submodule imports (for organization):
    from wrapped.optional import Present, BlankType, Blank, Optional, wrap
    from wrapped.decorators import lift, short_circuit
"""

# Configuration
from wrapped._config import WrappedConfig, get_config, init

# Decorators
from wrapped.decorators import lift, short_circuit

# Errors
from wrapped.errors import EmptyAccess

# Types
from wrapped.optional import (
    Blank,
    BlankType,
    Optional,
    Present,
    wrap,
)
from wrapped.propagate import Propagate

__all__ = [
    # Types
    'Blank',
    'BlankType',
    # Errors
    'EmptyAccess',
    'Optional',
    'Present',
    # Propagation
    'Propagate',
    # Configuration
    'WrappedConfig',
    'get_config',
    'init',
    # Decorators
    'lift',
    'short_circuit',
    # Conversion
    'wrap',
]
