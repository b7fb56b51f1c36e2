"""
Initialization-related exceptions for weightinit.

This module defines the errors raised when a weight initialization request
cannot be honoured: either the requested scheme is not known to the
dispatcher, or the requested tensor shape does not satisfy the
preconditions of the selected scheme.

Shape problems are reported before any arithmetic is attempted so that
callers never receive tensors built from a division by zero or a
meaningless fan-in.
"""

from typing import Any


class UnrecognizedSchemeError(RuntimeError):
    """
    Raised when a weight initialization scheme cannot be resolved.

    This error is raised by the `WeightInitializer` dispatcher when the
    requested scheme is neither a `WeightInit` member nor one of its
    registered names.

    Attributes
    ----------
    scheme : Any
        The value that failed to resolve.
    """

    def __init__(self, scheme: Any) -> None:
        """
        Initialize the UnrecognizedSchemeError.

        Parameters
        ----------
        scheme : Any
            The value that failed to resolve to a known scheme.
        """
        super().__init__(f"Unrecognized initialization scheme: {scheme!r}.")
        self.scheme = scheme


class InvalidShapeError(ValueError):
    """
    Raised when a shape (or fan value derived from it) violates a
    precondition of the requested initialization.

    Attributes
    ----------
    shape : tuple
        The offending shape as supplied by the caller.
    reason : str
        Human-readable description of the violated precondition.
    """

    def __init__(self, shape: Any, reason: str) -> None:
        """
        Initialize the InvalidShapeError.

        Parameters
        ----------
        shape : Any
            The shape that was rejected.
        reason : str
            Why the shape was rejected.
        """
        super().__init__(f"Invalid shape {shape!r}: {reason}.")
        self.shape = shape
        self.reason = reason
