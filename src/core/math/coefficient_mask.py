"""
Coefficient Mask — выбор компонент значения битовой маской

Маска — беззнаковое 8-битное число, каждый бит которого выбирает одну
именованную компоненту значения (R, I, J, K). Флаги объединяются через `|`:

    >>> from src.core.domain import complex_number
    >>> complex_number.R | complex_number.I
    3

Используется операциями set() комплексных чисел и кватернионов, чтобы
перезаписать одну или несколько компонент за один вызов.
"""

from typing import Final

# Максимальное значение маски (u8)
MASK_MAX: Final[int] = 0xFF


def is_set(c: int, idx: int) -> bool:
    """
    Проверка, установлен ли бит idx в маске c.

    Контракт: is_set(c, idx) == ((c >> idx) & 1) != 0

    Args:
        c: Битовая маска
        idx: Индекс компоненты (с нуля)

    Returns:
        True если бит idx установлен

    Examples:
        >>> is_set(0b0101, 0)
        True
        >>> is_set(0b0101, 1)
        False
        >>> is_set(0b0101, 2)
        True
    """
    return ((c >> idx) & 1) != 0


def validate_mask(c: int, width: int) -> None:
    """
    Валидация маски для значения с width компонентами.

    Пустая маска (0) допустима: set() вернёт неизменённую копию.

    Args:
        c: Битовая маска
        width: Количество компонент значения (2 для Complex, 4 для Quaternion)

    Raises:
        ValueError: Если маска вне диапазона u8 или выбирает несуществующую компоненту
    """
    if isinstance(c, bool) or not isinstance(c, int):
        raise ValueError(f"mask must be an int, got {type(c).__name__}")

    if c < 0 or c > MASK_MAX:
        raise ValueError(f"mask must be in [0, {MASK_MAX}], got {c}")

    if c >> width:
        raise ValueError(
            f"mask {c:#06b} selects components beyond the {width} available"
        )
