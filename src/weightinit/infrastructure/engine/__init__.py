from ._numpy_engine import NumpyTensorEngine

__all__ = [NumpyTensorEngine.__name__]
