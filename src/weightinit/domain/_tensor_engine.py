"""
Tensor engine and distribution interfaces.

Weight initializers never build arrays themselves. They orchestrate an
engine that allocates tensors, draws random samples and applies a few
in-place scalar operations, and (for distribution-sampled weights) a real
distribution that yields sample sequences.

Both contracts use structural typing so any backend satisfying the method
surface can be plugged in. The infrastructure layer provides a NumPy
implementation.
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence, runtime_checkable

from .types._numpy import NDArrayLike


@runtime_checkable
class IRealDistribution(Protocol):
    """
    A univariate real-valued distribution backed by a seeded generator.
    """

    def sample(self, count: int) -> Sequence[float]:
        """
        Draw `count` samples.

        Parameters
        ----------
        count:
            Number of samples to produce.

        Returns
        -------
        Sequence[float]
            The samples, in draw order.
        """
        ...


@runtime_checkable
class ITensorEngine(Protocol):
    """
    Tensor allocation, sampling and elementwise operations.

    Notes
    -----
    - Elementwise operations mutate the tensor in-place and return it, so
      calls can be chained the same way they read in formulas.
    - `sample_uniform` re-seeds on every call; identical arguments must
      produce identical tensors.
    """

    @property
    def dtype(self) -> Any:
        """Element dtype of tensors created by this engine."""
        ...

    def allocate(self, shape: tuple[int, ...]) -> NDArrayLike:
        """Return a zero-filled tensor of `shape`."""
        ...

    def rand(self, shape: tuple[int, ...]) -> NDArrayLike:
        """Return uniform [0, 1) samples drawn from the engine generator."""
        ...

    def sample_uniform(
        self, shape: tuple[int, ...], low: float, high: float, seed: int
    ) -> NDArrayLike:
        """Return uniform [low, high] samples drawn with a fresh `seed`."""
        ...

    def sample_distribution(
        self, shape: tuple[int, ...], distribution: IRealDistribution
    ) -> NDArrayLike:
        """Return a tensor filled in row-major order from `distribution`."""
        ...

    def subtract_scalar(self, tensor: NDArrayLike, value: float) -> NDArrayLike: ...

    def divide_scalar(self, tensor: NDArrayLike, value: float) -> NDArrayLike: ...

    def multiply_scalar(self, tensor: NDArrayLike, value: float) -> NDArrayLike: ...

    def slices(self, tensor: NDArrayLike) -> int:
        """Return the number of slices along axis 0."""
        ...

    def put_slice(
        self, tensor: NDArrayLike, index: int, values: Sequence[float]
    ) -> NDArrayLike:
        """Overwrite slice `index` along axis 0 with `values`."""
        ...
