"""
Weight initialization public API.

This module aggregates every supported initialization scheme and registers
them into the global `WeightInitializer` registry via import side effects.

Importing this module ensures that all built-in schemes are available for
lookup and dispatch through `WeightInitializer`.

Exports
-------
- WeightInitializer:
    The registry-backed dispatcher.
- normalized, uniform_based_on_in_and_out, bounded_uniform:
    Initializers parameterized by explicit fan values or bounds rather than
    a scheme.
"""

from ._constants import *
from ._distribution import *
from ._normalized import normalized
from ._uniform import bounded_uniform, uniform_based_on_in_and_out
from ._base import WeightInitializer

__all__ = [
    WeightInitializer.__name__,
    bounded_uniform.__name__,
    normalized.__name__,
    uniform_based_on_in_and_out.__name__,
]
