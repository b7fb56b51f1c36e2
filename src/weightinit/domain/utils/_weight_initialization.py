"""
Abstract interfaces and utilities for weight initialization.

This module defines the abstract base class for weight initializer
dispatchers, along with shared helpers for validating shapes and computing
fan-in and fan-out values.

The concrete implementation and registry logic live in the infrastructure
layer. This module exists in the domain layer to define contracts and shared
shape arithmetic without binding to any specific backend.

Shape convention
----------------
Weight matrices are laid out as ``(fan_in, fan_out)``: rows index inputs,
columns index outputs.
"""

import operator
from typing import Any, Callable, Dict, Optional, Sequence, TypeVar, Union
from abc import ABC

from .._errors import InvalidShapeError
from .._tensor_engine import IRealDistribution
from .._weight_init import WeightInit
from ..types._numpy import NDArrayLike


T = TypeVar("T", bound=Callable[..., NDArrayLike])


class _WeightInitializer(ABC):
    """
    Abstract base class for weight initializer dispatchers.

    This class defines the contract for registry-based weight initialization.
    Concrete subclasses are responsible for implementing registry behavior
    and dispatch logic.

    Design notes
    ------------
    - Initializers are identified by `WeightInit` members.
    - Each initializer is a callable taking a shape (and optionally a
      distribution) and returning a freshly allocated tensor.
    """

    INITIALIZERS: Dict[WeightInit, Callable] = {}

    def __init__(self, scheme: Union[WeightInit, str]) -> None:
        """
        Construct a weight initializer dispatcher.

        Parameters
        ----------
        scheme:
            The scheme (or scheme name) identifying a registered initializer.
        """
        ...

    @classmethod
    def register_initializer(
        cls, scheme: WeightInit, *, overwrite: bool = False
    ) -> Callable[[T], T]:
        """
        Register a weight initializer for a given scheme.

        Parameters
        ----------
        scheme:
            Scheme the initializer implements.
        overwrite:
            Whether to allow overwriting an existing registration.

        Returns
        -------
        Callable
            A decorator that registers the initializer function.
        """
        ...

    @classmethod
    def available(cls) -> tuple[WeightInit, ...]:
        """
        Return the schemes with a registered initializer.
        """
        ...

    @classmethod
    def get(cls, scheme: Union[WeightInit, str]) -> Callable[..., NDArrayLike]:
        """
        Get a registered initializer callable by scheme.
        """
        ...

    def __call__(
        self,
        shape: Sequence[int],
        distribution: Optional[IRealDistribution] = None,
        **kwargs: Any,
    ) -> NDArrayLike:
        """
        Build a tensor of `shape` with the resolved initializer.

        Parameters
        ----------
        shape:
            Target tensor shape.
        distribution:
            Distribution for schemes that sample from one.
        **kwargs:
            Forwarded to the initializer (engine, config).

        Returns
        -------
        NDArrayLike
            The initialized tensor.
        """
        ...


def _validate_shape(shape: Sequence[int], *, min_rank: int = 1) -> tuple[int, ...]:
    """
    Normalize `shape` to a tuple of positive ints.

    Parameters
    ----------
    shape:
        Requested tensor shape.
    min_rank:
        Minimum number of dimensions the caller requires.

    Returns
    -------
    tuple[int, ...]
        The validated shape.

    Raises
    ------
    InvalidShapeError
        If the shape is empty, shorter than `min_rank`, or contains a
        non-integer or non-positive dimension.
    """
    try:
        dims = tuple(shape)
    except TypeError as e:
        raise InvalidShapeError(shape, "shape must be a sequence of ints") from e

    if len(dims) == 0:
        raise InvalidShapeError(shape, "shape must have at least one dimension")
    if len(dims) < min_rank:
        raise InvalidShapeError(
            shape, f"expected at least {min_rank} dimensions, got {len(dims)}"
        )

    out = []
    for d in dims:
        # bool is an int subclass but never a meaningful dimension
        if isinstance(d, bool):
            raise InvalidShapeError(shape, f"dimension {d!r} is not an integer")
        try:
            n = operator.index(d)
        except TypeError as e:
            raise InvalidShapeError(shape, f"dimension {d!r} is not an integer") from e
        if n <= 0:
            raise InvalidShapeError(shape, f"dimension {d!r} is not positive")
        out.append(n)
    return tuple(out)


def _calculate_fan_in_and_fan_out(shape: tuple[int, ...]) -> tuple[int, int]:
    """
    Compute fan-in and fan-out for a validated shape.

    Parameters
    ----------
    shape:
        Shape of the weight tensor, ``(fan_in, fan_out, ...)``.

    Returns
    -------
    tuple[int, int]
        A tuple of (fan_in, fan_out). Vectors report their length for both.
    """
    if len(shape) == 1:
        return shape[0], shape[0]
    return shape[0], shape[1]


def _slice_size(shape: tuple[int, ...]) -> int:
    """Number of elements in one axis-0 slice of `shape`."""
    size = 1
    for d in shape[1:]:
        size *= int(d)
    return size
