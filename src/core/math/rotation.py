"""
Rotation — вспомогательные функции для поворота значений

Модуль содержит:
- Нормализацию оси поворота (3-кортеж) с sentinel для нулевой оси
- Перевод углов из градусов в радианы и в четверть-обороты
- Исключение для поворота кватерниона вокруг неопределённой оси

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нормализация нулевого вектора даёт UNDEFINED_AXIS (все компоненты NaN)
2. Поворот кватерниона вокруг UNDEFINED_AXIS запрещён (UndefinedRotationAxisError)
3. Ось не нормализуется повторно при построении кватерниона поворота
"""

import math
from typing import Final

from src.core.math.numerical_safeguards import is_valid_float

Axis = tuple[float, float, float]

# Sentinel "неопределённая ось": результат нормализации нулевого вектора
UNDEFINED_AXIS: Final[Axis] = (math.nan, math.nan, math.nan)

# Угол, соответствующий возведению комплексного числа в первую степень
DEGREES_PER_QUARTER_TURN: Final[float] = 90.0


# =============================================================================
# EXCEPTIONS
# =============================================================================


class UndefinedRotationAxisError(ValueError):
    """
    Поворот кватерниона вокруг неопределённой оси.

    Нулевой вектор не задаёт направления, поэтому вызов отклоняется
    до каких-либо вычислений, а не возвращает NaN-кватернион.
    """

    pass


# =============================================================================
# ОСЬ ПОВОРОТА
# =============================================================================


def normalize_axis(axis: Axis) -> Axis:
    """
    Нормализация оси: деление каждой компоненты на евклидову норму.

    Args:
        axis: Ось поворота (x, y, z)

    Returns:
        Единичный вектор, либо UNDEFINED_AXIS если норма равна нулю

    Raises:
        ValueError: Если axis не является 3-кортежем

    Examples:
        >>> normalize_axis((0.0, 0.0, 2.0))
        (0.0, 0.0, 1.0)
        >>> normalize_axis((3.0, 0.0, 4.0))
        (0.6, 0.0, 0.8)
        >>> normalize_axis((0.0, 0.0, 0.0))
        (nan, nan, nan)
    """
    if len(axis) != 3:
        raise ValueError(f"axis must have exactly 3 components, got {len(axis)}")

    x, y, z = (float(c) for c in axis)
    # hypot не переполняется и не теряет точность на крайних масштабах
    m = math.hypot(x, y, z)

    if m == 0.0:
        return UNDEFINED_AXIS

    return (x / m, y / m, z / m)


def is_defined_axis(axis: Axis) -> bool:
    """True если все компоненты оси конечны (ось не является sentinel)."""
    return all(is_valid_float(c) for c in axis)


def require_defined_axis(axis: Axis) -> Axis:
    """
    Проверка, что нормализованная ось задаёт направление.

    Raises:
        UndefinedRotationAxisError: Если ось содержит NaN/Inf (нулевая ось)
    """
    if not is_defined_axis(axis):
        raise UndefinedRotationAxisError(
            f"Rotation axis is undefined: {axis}. "
            f"A zero vector cannot be normalized to a direction."
        )
    return axis


# =============================================================================
# УГЛЫ
# =============================================================================


def degrees_to_radians(angle_degrees: float) -> float:
    return angle_degrees * math.pi / 180.0


def quarter_turns(angle_degrees: float) -> float:
    """Угол в четверть-оборотах: степень для поворота комплексного числа."""
    return angle_degrees / DEGREES_PER_QUARTER_TURN
