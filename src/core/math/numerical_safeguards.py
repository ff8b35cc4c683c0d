"""
Numerical Safeguards — IEEE-754 Safe Math Primitives

Модуль обеспечивает предсказуемое поведение численных операций ядра:
- Деление, возведение в степень и тригонометрия по правилам IEEE-754
  (NaN/Inf распространяются, Python-исключения не выбрасываются)
- Проверка валидности float
- Epsilon-сравнения float с учётом машинной точности
- Конфигурация толерантностей для приближённых сравнений значений

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на ноль не выбрасывает ZeroDivisionError (возвращается ±Inf или NaN)
2. NaN/Inf пропагируют через вычисления, как в IEEE-754
3. Результат ieee_pow всегда float (никогда не complex)
4. Все операции детерминированы и воспроизводимы

ПОЛИТИКА НУЛЕВОГО ДЕЛИТЕЛЯ:
    Деление комплексного числа на ноль и обращение нулевого кватерниона
    не являются восстанавливаемыми ошибками: результат содержит Inf/NaN.
    Для строгих проверок используются checked-варианты, выбрасывающие
    DegenerateDivisorError.
"""

import math
from dataclasses import dataclass
from typing import Final, Sequence

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения float (относительная толерантность)
# Используется в is_close для относительных сравнений
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
# Используется в is_close для абсолютных сравнений
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12

# Абсолютная толерантность для результатов поворота
# (sin/cos половинного угла дают погрешность порядка 1e-16..1e-8)
EPS_ROTATION: Final[float] = 1e-6


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DegenerateDivisorError(ZeroDivisionError):
    """
    Делитель вырожден (модуль в квадрате или норма равны нулю).

    Выбрасывается только checked-вариантами деления/обращения.
    Операции по умолчанию возвращают Inf/NaN.
    """

    pass


# =============================================================================
# IEEE-754 ПРИМИТИВЫ
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление float по правилам IEEE-754.

    Python выбрасывает ZeroDivisionError для x / 0.0; здесь результат
    совпадает с аппаратным делением:
    - x / ±0 (x != 0, x не NaN) → ±Inf (знак = знак x * знак нуля)
    - 0 / 0, NaN / 0 → NaN

    Args:
        numerator: Числитель
        denominator: Знаменатель

    Returns:
        Результат деления (может быть Inf/NaN)

    Examples:
        >>> ieee_divide(10.0, 4.0)
        2.5
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(1.0, -0.0)
        -inf
        >>> ieee_divide(0.0, 0.0)
        nan
    """
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if math.isnan(numerator) or numerator == 0.0:
            return math.nan
        sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
        return math.copysign(math.inf, sign)


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and value.is_integer() and int(value) % 2 == 1


def ieee_pow(base: float, exponent: float) -> float:
    """
    Возведение в степень по правилам IEEE-754 pow().

    Отличия от встроенного `**`:
    - 0 ** (отрицательная степень) → Inf вместо ZeroDivisionError
    - переполнение → ±Inf вместо OverflowError
    - отрицательное основание с дробной степенью → NaN вместо complex

    Args:
        base: Основание
        exponent: Показатель степени

    Returns:
        base ** exponent (всегда float)

    Examples:
        >>> ieee_pow(25.0, 0.5)
        5.0
        >>> ieee_pow(0.0, -1.0)
        inf
        >>> ieee_pow(-8.0, 1.0 / 3.0)
        nan
    """
    base = float(base)
    exponent = float(exponent)

    if base == 0.0 and exponent < 0.0:
        # pow(±0, y<0): ±Inf для нечётной целой степени, иначе +Inf
        if _is_odd_integer(exponent):
            return math.copysign(math.inf, base)
        return math.inf

    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0.0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        # Отрицательное основание с нецелой степенью
        return math.nan


def ieee_cos(x: float) -> float:
    """Косинус: NaN для ±Inf вместо ValueError."""
    if math.isinf(x):
        return math.nan
    return math.cos(x)


def ieee_sin(x: float) -> float:
    """Синус: NaN для ±Inf вместо ValueError."""
    if math.isinf(x):
        return math.nan
    return math.sin(x)


# =============================================================================
# ПРОВЕРКА ВАЛИДНОСТИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


@dataclass(frozen=True)
class ToleranceConfig:
    """Толерантности для приближённого сравнения компонент значений.

    Точное (структурное) равенство остаётся поведением `==`;
    этот конфиг используется только методами is_close.
    """

    rel_tol: float = EPS_FLOAT_COMPARE_REL
    abs_tol: float = EPS_FLOAT_COMPARE_ABS

    def __post_init__(self) -> None:
        if self.rel_tol < 0 or not is_valid_float(self.rel_tol):
            raise ValueError(f"rel_tol must be a non-negative finite float, got {self.rel_tol}")
        if self.abs_tol < 0 or not is_valid_float(self.abs_tol):
            raise ValueError(f"abs_tol must be a non-negative finite float, got {self.abs_tol}")


DEFAULT_TOLERANCE: Final[ToleranceConfig] = ToleranceConfig()


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
        >>> is_close(0.0, 1e-13)
        True  # abs diff < abs_tol
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def components_close(
    a: Sequence[float],
    b: Sequence[float],
    config: ToleranceConfig | None = None,
) -> bool:
    """
    Поэлементное приближённое сравнение кортежей компонент.

    Args:
        a: Компоненты первого значения
        b: Компоненты второго значения
        config: Толерантности (default: DEFAULT_TOLERANCE)

    Returns:
        True если длины совпадают и все пары компонент близки
    """
    config = config or DEFAULT_TOLERANCE
    if len(a) != len(b):
        return False
    return all(
        is_close(x, y, rel_tol=config.rel_tol, abs_tol=config.abs_tol)
        for x, y in zip(a, b)
    )
