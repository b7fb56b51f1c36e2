"""
Domain-level structural typing for NumPy-like n-dimensional arrays.

This module defines :class:`NDArrayLike`, a backend-agnostic Protocol for
the tensors handed back by a tensor engine, without introducing a
dependency on NumPy in the domain layer.

Only the surface the initializers and their callers touch is modelled:
shape/size/dtype inspection, reshaping, slice assignment and the
reductions used when checking bounds.
"""

from __future__ import annotations
from typing import Protocol, Tuple, Any, overload, runtime_checkable


@runtime_checkable
class NDArrayLike(Protocol):
    """
    NDArrayLike (N-Dimensional Array-Like)

    A structural typing interface for objects that behave like NumPy ndarrays.

    Notes
    -----
    - This is a *Protocol*, not a concrete base class.
    - ``numpy.ndarray`` satisfies it; so would CuPy or JAX arrays.
    """

    @property
    def shape(self) -> Tuple[int, ...]:
        """
        Shape of the array as a tuple of dimension sizes.

        Returns
        -------
        Tuple[int, ...]
            The size of each dimension.
        """
        ...

    @property
    def ndim(self) -> int:
        """
        Number of dimensions of the array.
        """
        ...

    @property
    def size(self) -> int:
        """
        Total number of elements in the array.
        """
        ...

    @property
    def dtype(self) -> Any:
        """
        Data type descriptor of the array elements.

        Returns
        -------
        Any
            Backend-defined dtype object (e.g., ``numpy.dtype``).
        """
        ...

    def reshape(self, *shape: int) -> NDArrayLike:
        """
        Return an array with a new shape.

        Parameters
        ----------
        *shape : int
            New shape dimensions.

        Returns
        -------
        NDArrayLike
            Reshaped array-like object.
        """
        ...

    def astype(self, dtype: Any, copy: bool = ...) -> NDArrayLike:
        """
        Cast the array to a specified data type.
        """
        ...

    @overload
    def __getitem__(self, key: int) -> Any: ...

    @overload
    def __getitem__(self, key: slice | Tuple[Any, ...]) -> NDArrayLike: ...

    def __setitem__(self, key: Any, value: Any) -> None:
        """
        Assign a value to a location or slice in the array.
        """
        ...

    def max(self, axis: int | None = None, keepdims: bool = False) -> Any: ...

    def min(self, axis: int | None = None, keepdims: bool = False) -> Any: ...
