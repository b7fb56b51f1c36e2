"""
Constant weight initializers.

Registers ``WeightInit.ZERO``, which returns a zero-filled tensor. Typically
used for biases, tests, or deterministic model setups.
"""

from typing import Optional, Sequence

import numpy as np

from ._base import WeightInitializer
from ..._config import InitConfig
from ....domain._tensor_engine import IRealDistribution, ITensorEngine
from ....domain._weight_init import WeightInit
from ....domain.utils._weight_initialization import _validate_shape


@WeightInitializer.register_initializer(WeightInit.ZERO)
def zero(
    shape: Sequence[int],
    distribution: Optional[IRealDistribution] = None,
    *,
    engine: ITensorEngine,
    config: InitConfig,
) -> np.ndarray:
    """
    Return a zero-filled tensor of `shape`.
    """
    return engine.allocate(_validate_shape(shape))
