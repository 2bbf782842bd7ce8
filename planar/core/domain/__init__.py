"""
Domain models and value objects.

Contains the Vector value object and its normalization result types.
"""

from planar.core.domain.vector2 import UnitResult, Vector, ZeroVectorError

__all__ = [
    "UnitResult",
    "Vector",
    "ZeroVectorError",
]
