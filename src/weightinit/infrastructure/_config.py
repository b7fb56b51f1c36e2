"""
Configuration for weight initialization.

`InitConfig` groups the knobs that change numeric results: the seed used by
the fixed-seed uniform paths, the legacy integer-division behaviour of the
``UNIFORM`` scheme, and the dtype of tensors built by the default engine.

Instances are frozen so a config can be shared across calls without one
caller mutating another's results.
"""

from __future__ import annotations

from dataclasses import dataclass

RANDOM_SEED = 123


@dataclass(frozen=True)
class InitConfig:
    """
    Weight initialization settings.

    Attributes
    ----------
    seed:
        Seed for the fixed-seed uniform initializers. Every call re-seeds with
        this value, so repeated calls are reproducible rather than independent.
    integer_division_uniform:
        If True (default), the ``UNIFORM`` scheme computes its bound as
        ``1 // shape[0]``, which collapses to zero for any fan-in above one.
        If False, the bound is ``1.0 / shape[0]``.
    dtype:
        Element dtype of the default NumPy engine.
    """

    seed: int = RANDOM_SEED
    integer_division_uniform: bool = True
    dtype: str = "float64"


DEFAULT_CONFIG = InitConfig()
