"""
Weight initializer registry and dispatch utilities.

This module defines the concrete `WeightInitializer` used by the infrastructure
layer to build tensors with a registered initialization scheme.

Design
------
- Initializers are registered per `WeightInit` member via a decorator-based
  registry.
- Each initializer is a callable ``fn(shape, distribution, *, engine, config)``
  that allocates and returns a fresh tensor.
- The dispatcher resolves an initializer at construction time and invokes it
  via `__call__`, filling in the default engine and config.

Usage example
-------------
Registering an initializer:

    @WeightInitializer.register_initializer(WeightInit.ZERO)
    def zero(shape, distribution, *, engine, config):
        ...

Applying an initializer:

    init = WeightInitializer(WeightInit.ZERO)
    w = init((784, 10))

Notes
-----
- Registration keys must be unique unless explicitly overwritten.
- Schemes may be given as members or names (see `WeightInit.parse`).
"""

from __future__ import annotations

from typing import Any, Callable, ClassVar, Dict, Optional, Sequence, TypeVar, Union

import numpy as np

from ....domain._errors import UnrecognizedSchemeError
from ....domain._tensor_engine import IRealDistribution, ITensorEngine
from ....domain._weight_init import WeightInit
from ....domain.utils._weight_initialization import _WeightInitializer
from ..._config import DEFAULT_CONFIG, InitConfig
from ...engine._numpy_engine import NumpyTensorEngine

T = TypeVar("T", bound=Callable[..., np.ndarray])


class WeightInitializer(_WeightInitializer):
    """
    Registry-backed weight initializer dispatcher.

    Usage
    -----
    Register:
        @WeightInitializer.register_initializer(WeightInit.ZERO)
        def zero(shape, distribution, *, engine, config): ...

    Dispatch:
        init = WeightInitializer("zero")
        init((3, 4))

    Notes
    -----
    - Initializers are stored by scheme in a class-level registry.
    - A scheme without a registered initializer raises
      `UnrecognizedSchemeError`, the same as an unknown name.
    """

    INITIALIZERS: ClassVar[Dict[WeightInit, Callable[..., np.ndarray]]] = {}

    def __init__(self, scheme: Union[WeightInit, str]) -> None:
        resolved = WeightInit.parse(scheme)
        try:
            self._initializer: Callable[..., np.ndarray] = self.INITIALIZERS[resolved]
        except KeyError as e:
            raise UnrecognizedSchemeError(scheme) from e
        self.scheme = resolved

    @classmethod
    def register_initializer(
        cls, scheme: WeightInit, *, overwrite: bool = False
    ) -> Callable[[T], T]:
        """
        Decorator to register a weight initializer for `scheme`.

        Parameters
        ----------
        scheme:
            Registry key used to retrieve the initializer later.
        overwrite:
            If False (default), raises if `scheme` is already registered.
        """
        if not isinstance(scheme, WeightInit):
            raise ValueError("Initializer key must be a WeightInit member")

        def decorator(func: T) -> T:
            if not overwrite and scheme in cls.INITIALIZERS:
                raise ValueError(f"Initializer already registered: {scheme!r}")
            cls.INITIALIZERS[scheme] = func
            return func

        return decorator

    @classmethod
    def available(cls) -> tuple[WeightInit, ...]:
        """Return registered schemes in declaration order."""
        return tuple(s for s in WeightInit if s in cls.INITIALIZERS)

    @classmethod
    def get(cls, scheme: Union[WeightInit, str]) -> Callable[..., np.ndarray]:
        """Get a registered initializer callable by scheme."""
        resolved = WeightInit.parse(scheme)
        try:
            return cls.INITIALIZERS[resolved]
        except KeyError as e:
            raise UnrecognizedSchemeError(scheme) from e

    def __call__(
        self,
        shape: Sequence[int],
        distribution: Optional[IRealDistribution] = None,
        *,
        engine: Optional[ITensorEngine] = None,
        config: Optional[InitConfig] = None,
        **kwargs: Any,
    ) -> np.ndarray:
        engine, config = _resolve_backend(engine, config)
        return self._initializer(
            shape, distribution, engine=engine, config=config, **kwargs
        )


def _resolve_backend(
    engine: Optional[ITensorEngine], config: Optional[InitConfig]
) -> tuple[ITensorEngine, InitConfig]:
    """Fill in the default config and a NumPy engine built from it."""
    config = config if config is not None else DEFAULT_CONFIG
    engine = engine if engine is not None else NumpyTensorEngine(config.dtype)
    return engine, config
