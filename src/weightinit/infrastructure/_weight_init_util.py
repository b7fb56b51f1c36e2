"""
Functional weight initialization API.

`init_weights` builds a tensor for a given shape and scheme;
`init_layer_weights` is the ``(n_in, n_out)`` convenience form used when
wiring dense layers. Both dispatch through the `WeightInitializer` registry,
so any scheme registered there is reachable here.

Example
-------
    w = init_weights((784, 10), WeightInit.FAN_IN_OUT_SIZE)
    b = init_layer_weights(1, 10, "zero")
"""

from __future__ import annotations

from typing import Any, Optional, Sequence, Union

import numpy as np

from ..domain._tensor_engine import IRealDistribution, ITensorEngine
from ..domain._weight_init import WeightInit
from ._config import InitConfig
from .utils.weight_initializer import WeightInitializer


def init_weights(
    shape: Sequence[int],
    scheme: Union[WeightInit, str],
    distribution: Optional[IRealDistribution] = None,
    *,
    engine: Optional[ITensorEngine] = None,
    config: Optional[InitConfig] = None,
) -> np.ndarray:
    """
    Initialize a tensor with the given weight initialization scheme.

    Parameters
    ----------
    shape:
        Shape of the tensor, ``(fan_in, fan_out, ...)``.
    scheme:
        Scheme member or name.
    distribution:
        Required by ``DISTRIBUTION_SAMPLED``; ignored otherwise.
    engine:
        Tensor engine; defaults to a NumPy engine using ``config.dtype``.
    config:
        Seed and compatibility settings; defaults to `InitConfig()`.

    Returns
    -------
    np.ndarray
        A tensor of the specified shape initialized per `scheme`.

    Raises
    ------
    UnrecognizedSchemeError
        If `scheme` does not name a registered scheme.
    InvalidShapeError
        If `shape` violates the scheme's preconditions.
    """
    return WeightInitializer(scheme)(
        shape, distribution, engine=engine, config=config
    )


def init_layer_weights(
    n_in: int,
    n_out: int,
    scheme: Union[WeightInit, str],
    activation: Any = None,
    distribution: Optional[IRealDistribution] = None,
    *,
    engine: Optional[ITensorEngine] = None,
    config: Optional[InitConfig] = None,
) -> np.ndarray:
    """
    Initialize an ``(n_in, n_out)`` weight matrix.

    `activation` is accepted so layer code can pass its activation through
    unchanged; no current scheme depends on it.
    """
    return init_weights(
        (n_in, n_out), scheme, distribution, engine=engine, config=config
    )
