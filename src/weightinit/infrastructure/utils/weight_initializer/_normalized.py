"""
Unseeded uniform-derived weight initializers.

These strategies draw ``U[0, 1)`` samples from the engine's own generator and
rescale them in-place.

- `normalized` / ``WeightInit.NORMALIZED``:
    ``(x - 0.5) / fan_in``, i.e. values in ``[-0.5 / fan_in, 0.5 / fan_in)``.
- ``WeightInit.VARIANCE_SCALED``:
    ``2 * r * x - r`` with ``r = sqrt(6) / sqrt(sum(shape) + 1)``, i.e.
    values in ``[-r, r)``.
"""

import math
from typing import Optional, Sequence

import numpy as np

from ._base import WeightInitializer, _resolve_backend
from ..._config import InitConfig
from ....domain._errors import InvalidShapeError
from ....domain._tensor_engine import IRealDistribution, ITensorEngine
from ....domain._weight_init import WeightInit
from ....domain.utils._weight_initialization import _validate_shape


def normalized(
    shape: Sequence[int],
    n_in: int,
    *,
    engine: Optional[ITensorEngine] = None,
    config: Optional[InitConfig] = None,
) -> np.ndarray:
    """
    Normalized weight init.

    Parameters
    ----------
    shape:
        Target tensor shape.
    n_in:
        Number of inputs; must be non-zero.

    Returns
    -------
    np.ndarray
        ``(U[0, 1) - 0.5) / n_in`` over `shape`.
    """
    dims = _validate_shape(shape)
    if n_in == 0:
        raise InvalidShapeError(dims, "n_in must be non-zero")
    engine, _ = _resolve_backend(engine, config)

    w = engine.rand(dims)
    engine.subtract_scalar(w, 0.5)
    return engine.divide_scalar(w, float(n_in))


@WeightInitializer.register_initializer(WeightInit.NORMALIZED)
def normalized_scheme(
    shape: Sequence[int],
    distribution: Optional[IRealDistribution] = None,
    *,
    engine: ITensorEngine,
    config: InitConfig,
) -> np.ndarray:
    dims = _validate_shape(shape)
    return normalized(dims, dims[0], engine=engine, config=config)


@WeightInitializer.register_initializer(WeightInit.VARIANCE_SCALED)
def variance_scaled(
    shape: Sequence[int],
    distribution: Optional[IRealDistribution] = None,
    *,
    engine: ITensorEngine,
    config: InitConfig,
) -> np.ndarray:
    """
    Apply the ``VARIANCE_SCALED`` scheme.

    The range depends on the sum of all dimensions:

        r = sqrt(6) / sqrt(sum(shape) + 1)

    and ``U[0, 1)`` is mapped onto ``[-r, r)``.
    """
    dims = _validate_shape(shape)
    r = math.sqrt(6.0) / math.sqrt(float(sum(dims) + 1))

    w = engine.rand(dims)
    engine.multiply_scalar(w, 2.0)
    engine.multiply_scalar(w, r)
    return engine.subtract_scalar(w, r)
