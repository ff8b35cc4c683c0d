"""
Core math modules для TMN

Численные примитивы по правилам IEEE-754, маски коэффициентов и
вспомогательные функции поворота.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    EPS_ROTATION,
    # Exceptions
    DegenerateDivisorError,
    # Tolerance config
    DEFAULT_TOLERANCE,
    ToleranceConfig,
    # IEEE-754 primitives
    ieee_cos,
    ieee_divide,
    ieee_pow,
    ieee_sin,
    # Validation / comparisons
    components_close,
    is_close,
    is_valid_float,
)

# Coefficient Mask
from src.core.math.coefficient_mask import (
    MASK_MAX,
    is_set,
    validate_mask,
)

# Rotation
from src.core.math.rotation import (
    DEGREES_PER_QUARTER_TURN,
    UNDEFINED_AXIS,
    Axis,
    UndefinedRotationAxisError,
    degrees_to_radians,
    is_defined_axis,
    normalize_axis,
    quarter_turns,
    require_defined_axis,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "EPS_ROTATION",
    # Numerical Safeguards — Exceptions
    "DegenerateDivisorError",
    # Numerical Safeguards — Tolerance config
    "DEFAULT_TOLERANCE",
    "ToleranceConfig",
    # Numerical Safeguards — IEEE-754 primitives
    "ieee_cos",
    "ieee_divide",
    "ieee_pow",
    "ieee_sin",
    # Numerical Safeguards — Validation / comparisons
    "components_close",
    "is_close",
    "is_valid_float",
    # Coefficient Mask
    "MASK_MAX",
    "is_set",
    "validate_mask",
    # Rotation — Constants
    "DEGREES_PER_QUARTER_TURN",
    "UNDEFINED_AXIS",
    # Rotation — Types
    "Axis",
    # Rotation — Exceptions
    "UndefinedRotationAxisError",
    # Rotation — Functions
    "degrees_to_radians",
    "is_defined_axis",
    "normalize_axis",
    "quarter_turns",
    "require_defined_axis",
]
