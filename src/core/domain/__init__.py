"""
Domain models and value objects.

Contains the numeric value types: Complex, Quaternion and the unified Nums.
Component flags are exposed per type (ComplexR/ComplexI and
QuaternionR/QuaternionI/QuaternionJ/QuaternionK); the modules themselves
export them as R, I (complex_number) and R, I, J, K (quaternion).
"""

from src.core.domain.complex_number import I as ComplexI
from src.core.domain.complex_number import R as ComplexR
from src.core.domain.complex_number import Complex
from src.core.domain.nums import NumKind, Nums
from src.core.domain.quaternion import I as QuaternionI
from src.core.domain.quaternion import J as QuaternionJ
from src.core.domain.quaternion import K as QuaternionK
from src.core.domain.quaternion import R as QuaternionR
from src.core.domain.quaternion import Quaternion

__all__ = [
    # Complex
    "Complex",
    "ComplexR",
    "ComplexI",
    # Quaternion
    "Quaternion",
    "QuaternionR",
    "QuaternionI",
    "QuaternionJ",
    "QuaternionK",
    # Unified value
    "NumKind",
    "Nums",
]
