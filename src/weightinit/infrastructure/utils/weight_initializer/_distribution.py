"""
Distribution-sampled weight initializer.

Registers ``WeightInit.DISTRIBUTION_SAMPLED``: every slice along axis 0 is
replaced by a fresh draw from the caller's distribution. For a 2-D
``(fan_in, fan_out)`` matrix this samples one row of ``fan_out`` values per
input unit.
"""

from typing import Optional, Sequence

import numpy as np

from ._base import WeightInitializer
from ..._config import InitConfig
from ....domain._tensor_engine import IRealDistribution, ITensorEngine
from ....domain._weight_init import WeightInit
from ....domain.utils._weight_initialization import _slice_size, _validate_shape


@WeightInitializer.register_initializer(WeightInit.DISTRIBUTION_SAMPLED)
def distribution_sampled(
    shape: Sequence[int],
    distribution: Optional[IRealDistribution] = None,
    *,
    engine: ITensorEngine,
    config: InitConfig,
) -> np.ndarray:
    """
    Fill each axis-0 slice of a new tensor with samples from `distribution`.

    Parameters
    ----------
    shape:
        Target shape; at least two dimensions.
    distribution:
        Source of samples. Required.

    Returns
    -------
    np.ndarray
        The sampled tensor.

    Raises
    ------
    ValueError
        If no distribution is supplied.
    InvalidShapeError
        If `shape` has fewer than two dimensions.
    """
    dims = _validate_shape(shape, min_rank=2)
    if distribution is None:
        raise ValueError("DISTRIBUTION_SAMPLED requires a distribution")

    w = engine.allocate(dims)
    count = _slice_size(dims)
    for i in range(engine.slices(w)):
        engine.put_slice(w, i, distribution.sample(count))
    return w
