"""
Seeded real distributions usable with ``WeightInit.DISTRIBUTION_SAMPLED``.
"""

from ._distributions import (
    NormalDistribution,
    UniformRealDistribution,
    normal,
    uniform,
)

__all__ = [
    NormalDistribution.__name__,
    UniformRealDistribution.__name__,
    normal.__name__,
    uniform.__name__,
]
