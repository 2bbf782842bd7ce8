"""
Core math modules для planar

Float-примитивы, на которых построены операции Vector.
"""

from planar.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    EPS_UNIT_NORM,
    # Float checks
    is_close,
    is_valid_float,
    validate_tolerance,
    # IEEE-754 conversion & division
    ieee_divide,
    to_ieee_float,
)

__all__ = [
    # Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "EPS_UNIT_NORM",
    # Float checks
    "is_close",
    "is_valid_float",
    "validate_tolerance",
    # IEEE-754 conversion & division
    "ieee_divide",
    "to_ieee_float",
]
