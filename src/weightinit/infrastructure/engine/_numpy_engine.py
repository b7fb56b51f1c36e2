"""
NumPy tensor engine.

This module intentionally contains NumPy usage and serves as the boundary
between backend array generation and the weight initializers.

Random sampling uses ``numpy.random.RandomState``, whose bit generator is the
Mersenne Twister (MT19937). Fixed-seed calls construct a fresh generator per
call so identical arguments always yield identical tensors.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

import numpy as np

from ...domain._tensor_engine import IRealDistribution


def _normalize_dtype(dtype: Any) -> np.dtype:
    """
    Normalize dtype inputs to a NumPy dtype for CPU array creation.

    Accepts:
    - numpy dtype objects (np.float32, np.dtype("float32"))
    - strings ("float32")
    - None (defaults to float64)
    """
    if dtype is None:
        return np.dtype(np.float64)
    try:
        dt = np.dtype(dtype)
    except TypeError as e:
        raise ValueError(f"Unsupported dtype: {dtype!r}") from e
    if dt.kind != "f":
        raise ValueError(f"Weights require a floating dtype, got {dt}")
    return dt


class NumpyTensorEngine:
    """
    CPU tensor engine backed by ``numpy.ndarray``.

    Parameters
    ----------
    dtype:
        Element dtype of created tensors. Defaults to float64.
    seed:
        Seed of the generator used by `rand`. ``None`` seeds from OS entropy,
        which matches an unseeded global generator.
    """

    def __init__(self, dtype: Any = None, seed: Optional[int] = None) -> None:
        self._dtype = _normalize_dtype(dtype)
        self._rng = np.random.RandomState(seed)

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    def allocate(self, shape: tuple[int, ...]) -> np.ndarray:
        return np.zeros(shape, dtype=self._dtype)

    def rand(self, shape: tuple[int, ...]) -> np.ndarray:
        return self._rng.random_sample(size=shape).astype(self._dtype, copy=False)

    def sample_uniform(
        self, shape: tuple[int, ...], low: float, high: float, seed: int
    ) -> np.ndarray:
        rng = np.random.RandomState(seed)
        w = rng.uniform(low, high, size=shape)
        return w.astype(self._dtype, copy=False)

    def sample_distribution(
        self, shape: tuple[int, ...], distribution: IRealDistribution
    ) -> np.ndarray:
        """
        Fill a tensor of `shape` from `distribution` in row-major order.
        """
        count = int(np.prod(shape, dtype=np.int64))
        values = np.asarray(distribution.sample(count), dtype=self._dtype)
        if values.size != count:
            raise ValueError(
                f"Distribution returned {values.size} samples, expected {count}"
            )
        return values.reshape(shape)

    def subtract_scalar(self, tensor: np.ndarray, value: float) -> np.ndarray:
        np.subtract(tensor, value, out=tensor)
        return tensor

    def divide_scalar(self, tensor: np.ndarray, value: float) -> np.ndarray:
        np.divide(tensor, value, out=tensor)
        return tensor

    def multiply_scalar(self, tensor: np.ndarray, value: float) -> np.ndarray:
        np.multiply(tensor, value, out=tensor)
        return tensor

    def slices(self, tensor: np.ndarray) -> int:
        return int(tensor.shape[0])

    def put_slice(
        self, tensor: np.ndarray, index: int, values: Sequence[float]
    ) -> np.ndarray:
        """
        Overwrite slice `index` along axis 0 with `values`.

        `values` may be flat; it is reshaped to the slice shape.
        """
        slice_shape = tensor.shape[1:]
        arr = np.asarray(values, dtype=self._dtype)
        expected = int(np.prod(slice_shape, dtype=np.int64))
        if arr.size != expected:
            raise ValueError(
                f"Slice {index} expects {expected} values, got {arr.size}"
            )
        tensor[index] = arr.reshape(slice_shape)
        return tensor
