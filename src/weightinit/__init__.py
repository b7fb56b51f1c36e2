"""
weightinit: weight-matrix initialization for neural-network parameters.

Public API
----------
- init_weights, init_layer_weights:
    Scheme-dispatched initialization.
- normalized, uniform_based_on_in_and_out, bounded_uniform:
    Initializers parameterized by fan values or explicit bounds.
- WeightInit, WeightInitializer, InitConfig, NumpyTensorEngine:
    Schemes, the registry dispatcher, settings and the default engine.
- UniformRealDistribution, NormalDistribution, uniform, normal:
    Seeded distributions for ``WeightInit.DISTRIBUTION_SAMPLED``.
- UnrecognizedSchemeError, InvalidShapeError:
    Errors raised on bad requests.
"""

from .domain._errors import InvalidShapeError, UnrecognizedSchemeError
from .domain._weight_init import WeightInit
from .infrastructure._config import RANDOM_SEED, InitConfig
from .infrastructure._weight_init_util import init_layer_weights, init_weights
from .infrastructure.distributions import (
    NormalDistribution,
    UniformRealDistribution,
    normal,
    uniform,
)
from .infrastructure.engine import NumpyTensorEngine
from .infrastructure.utils.weight_initializer import (
    WeightInitializer,
    bounded_uniform,
    normalized,
    uniform_based_on_in_and_out,
)

__all__ = [
    "RANDOM_SEED",
    InitConfig.__name__,
    InvalidShapeError.__name__,
    NormalDistribution.__name__,
    NumpyTensorEngine.__name__,
    UniformRealDistribution.__name__,
    UnrecognizedSchemeError.__name__,
    WeightInit.__name__,
    WeightInitializer.__name__,
    bounded_uniform.__name__,
    init_layer_weights.__name__,
    init_weights.__name__,
    normal.__name__,
    normalized.__name__,
    uniform.__name__,
    uniform_based_on_in_and_out.__name__,
]
