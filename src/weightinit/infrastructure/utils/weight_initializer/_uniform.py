"""
Fixed-seed uniform weight initializers.

This module provides the uniform initialization strategies that draw from a
generator re-seeded on every call, and registers the scheme-based ones into
the global `WeightInitializer` registry.

Implemented
-----------
- `uniform_based_on_in_and_out`:
    ``U(-b, +b)`` with ``b = 4 * sqrt(6 / (fan_in + fan_out))``.
- `bounded_uniform`:
    ``U(low, high)`` with explicit bounds.
- ``WeightInit.UNIFORM``:
    ``U(-a, +a)`` with ``a`` the reciprocal of fan-in (see `InitConfig`).
- ``WeightInit.FAN_IN_OUT_SIZE``:
    `uniform_based_on_in_and_out` with fan-in/fan-out read from the shape.

Notes
-----
- The seed comes from ``config.seed`` (123 unless overridden). Two calls with
  identical arguments return identical tensors.
"""

import math
import warnings
from typing import Optional, Sequence

import numpy as np

from ._base import WeightInitializer, _resolve_backend
from ..._config import InitConfig
from ...distributions._distributions import uniform
from ....domain._errors import InvalidShapeError
from ....domain._tensor_engine import IRealDistribution, ITensorEngine
from ....domain._weight_init import WeightInit
from ....domain.utils._weight_initialization import (
    _calculate_fan_in_and_fan_out,
    _validate_shape,
)


def uniform_based_on_in_and_out(
    shape: Sequence[int],
    n_in: int,
    n_out: int,
    *,
    engine: Optional[ITensorEngine] = None,
    config: Optional[InitConfig] = None,
) -> np.ndarray:
    """
    Sample a uniform tensor scaled by the number of inputs and outputs.

    The bound is:

        b = 4 * sqrt(6 / (n_in + n_out))

    and values are drawn from ``U(-b, +b)`` with a generator seeded by
    ``config.seed``.

    Parameters
    ----------
    shape:
        Target tensor shape.
    n_in, n_out:
        Number of inputs and outputs; their sum must be positive.

    Returns
    -------
    np.ndarray
        A new tensor of `shape`.
    """
    dims = _validate_shape(shape)
    if n_in + n_out <= 0:
        raise InvalidShapeError(
            dims, f"n_in + n_out must be positive, got {n_in + n_out}"
        )
    engine, config = _resolve_backend(engine, config)

    bound = 4.0 * math.sqrt(6.0 / float(n_in + n_out))
    dist = uniform(config.seed, -bound, bound)
    return engine.sample_distribution(dims, dist)


def bounded_uniform(
    shape: Sequence[int],
    low: float,
    high: float,
    *,
    engine: Optional[ITensorEngine] = None,
    config: Optional[InitConfig] = None,
) -> np.ndarray:
    """
    Sample a uniform tensor in ``[low, high]`` with the fixed seed.

    Raises
    ------
    ValueError
        If `low` exceeds `high`.
    """
    dims = _validate_shape(shape)
    if low > high:
        raise ValueError(f"low must not exceed high, got [{low}, {high}]")
    engine, config = _resolve_backend(engine, config)
    return engine.sample_uniform(dims, float(low), float(high), config.seed)


@WeightInitializer.register_initializer(WeightInit.UNIFORM)
def uniform_scheme(
    shape: Sequence[int],
    distribution: Optional[IRealDistribution] = None,
    *,
    engine: ITensorEngine,
    config: InitConfig,
) -> np.ndarray:
    """
    Apply the ``UNIFORM`` scheme: ``U(-a, +a)`` with ``a = 1 / fan_in``.

    With ``config.integer_division_uniform`` (the default) the reciprocal is
    taken with integer division, so ``a`` is 1 for a fan-in of one and 0
    otherwise. A zero bound yields an all-zero tensor and emits a
    `RuntimeWarning`.
    """
    dims = _validate_shape(shape)
    fan_in = dims[0]

    if config.integer_division_uniform:
        a = float(1 // fan_in)
        if a == 0.0:
            warnings.warn(
                f"UNIFORM bound 1 // {fan_in} truncates to 0; all weights will be "
                "zero. Set InitConfig(integer_division_uniform=False) for a "
                "real-valued bound.",
                RuntimeWarning,
                stacklevel=2,
            )
    else:
        a = 1.0 / float(fan_in)

    return engine.sample_uniform(dims, -a, a, config.seed)


@WeightInitializer.register_initializer(WeightInit.FAN_IN_OUT_SIZE)
def fan_in_out_size(
    shape: Sequence[int],
    distribution: Optional[IRealDistribution] = None,
    *,
    engine: ITensorEngine,
    config: InitConfig,
) -> np.ndarray:
    """
    Apply the ``FAN_IN_OUT_SIZE`` scheme.

    Delegates to `uniform_based_on_in_and_out` with ``shape[0]`` as fan-in
    and ``shape[1]`` as fan-out; `shape` needs at least two dimensions.
    """
    dims = _validate_shape(shape, min_rank=2)
    fan_in, fan_out = _calculate_fan_in_and_fan_out(dims)
    return uniform_based_on_in_and_out(
        dims, fan_in, fan_out, engine=engine, config=config
    )
