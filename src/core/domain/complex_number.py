"""
Complex — Комплексное число

Immutable Pydantic модель комплексного числа r + i·î.
Все операции чистые: возвращают новый экземпляр, исходный не изменяется.
Компоненты — float Python (binary64), пороги переполнения и
округления отличаются от вычислений в binary32.

ПОЛИТИКА NaN/Inf:
    Компоненты могут быть NaN/Inf и распространяются по правилам IEEE-754.
    Деление на нулевое комплексное число не выбрасывает исключение,
    а даёт Inf/NaN компоненты. Для строгой проверки используется
    div_complex_checked().

РАВЕНСТВО:
    `==` — точное сравнение float компонент (NaN != NaN).
    Для приближённого сравнения используется is_close().
"""

import math
from typing import Final

from pydantic import BaseModel, Field

from src.core.math.coefficient_mask import is_set, validate_mask
from src.core.math.numerical_safeguards import (
    DegenerateDivisorError,
    ToleranceConfig,
    components_close,
    ieee_cos,
    ieee_divide,
    ieee_pow,
    ieee_sin,
)

# =============================================================================
# ФЛАГИ КОМПОНЕНТ (для set)
# =============================================================================

R: Final[int] = 1
I: Final[int] = 2

# Количество компонент
WIDTH: Final[int] = 2


# =============================================================================
# COMPLEX MODEL
# =============================================================================


class Complex(BaseModel):
    """
    Комплексное число r + i·î.

    Immutable модель (frozen=True): изменение полей запрещено,
    все операции создают новый экземпляр.
    """

    r: float = Field(0.0, description="Действительная часть")
    i: float = Field(0.0, description="Мнимая часть")

    model_config = {"frozen": True}  # Immutable

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def make(cls, r: float, i: float) -> "Complex":
        """
        Создание комплексного числа из действительной и мнимой части.

        Examples:
            >>> Complex.make(4.0, -2.0).get()
            (4.0, -2.0)
        """
        return cls(r=r, i=i)

    @classmethod
    def zero(cls) -> "Complex":
        """Аддитивная единица: 0 + 0·î."""
        return cls(r=0.0, i=0.0)

    # -------------------------------------------------------------------------
    # Доступ к компонентам
    # -------------------------------------------------------------------------

    def get(self) -> tuple[float, float]:
        """Кортеж (действительная часть, мнимая часть)."""
        return (self.r, self.i)

    def set(self, mask: int, value: float) -> "Complex":
        """
        Копия с перезаписью компонент, выбранных маской.

        Args:
            mask: Битовая маска из флагов R, I (объединяются через |)
            value: Новое значение выбранных компонент

        Returns:
            Новое комплексное число

        Raises:
            ValueError: Если маска выбирает компоненты, которых нет у Complex

        Examples:
            >>> Complex.make(1.0, 2.0).set(R | I, 3.0).get()
            (3.0, 3.0)
        """
        validate_mask(mask, WIDTH)
        r, i = self.get()
        if is_set(mask, 0):
            r = value
        if is_set(mask, 1):
            i = value
        return Complex(r=r, i=i)

    # -------------------------------------------------------------------------
    # Сопряжение и модуль
    # -------------------------------------------------------------------------

    def conjugate(self) -> "Complex":
        """Комплексно сопряжённое число: мнимая часть меняет знак."""
        return Complex(r=self.r, i=-self.i)

    def modulus(self) -> float:
        """
        Модуль комплексного числа.

        Вычисляется как (z · conj(z)).r ** 0.5, что равно sqrt(r² + i²)
        для конечных компонент. NaN/Inf распространяются.

        Examples:
            >>> Complex.make(3.0, 4.0).modulus()
            5.0
        """
        return ieee_pow(self.mult_complex(self.conjugate()).r, 0.5)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add_real(self, v: float) -> "Complex":
        """Сумма с действительным числом (меняется только действительная часть)."""
        return Complex(r=self.r + v, i=self.i)

    def add_complex(self, v: "Complex") -> "Complex":
        return Complex(r=self.r + v.r, i=self.i + v.i)

    def mult_real(self, v: float) -> "Complex":
        """Произведение с действительным числом (масштабирование обеих частей)."""
        return Complex(r=self.r * v, i=self.i * v)

    def mult_complex(self, v: "Complex") -> "Complex":
        """
        Произведение комплексных чисел.

        (r1 + i1·î)(r2 + i2·î) = (r1·r2 − i1·i2) + (r1·i2 + i1·r2)·î

        Examples:
            >>> Complex.make(3.0, 2.0).mult_complex(Complex.make(5.0, 3.0)).get()
            (9.0, 19.0)
        """
        r, i = self.get()
        return Complex(
            r=r * v.r - i * v.i,
            i=r * v.i + v.r * i,
        )

    def div_real(self, v: float) -> "Complex":
        """Деление на действительное число. Деление на 0 даёт Inf/NaN."""
        return Complex(r=ieee_divide(self.r, v), i=ieee_divide(self.i, v))

    def div_complex(self, v: "Complex") -> "Complex":
        """
        Деление комплексных чисел.

        z / v = z · conj(v) · (1 / |v|²)

        При v == 0 результат содержит Inf/NaN (исключение не выбрасывается).

        Args:
            v: Делитель

        Returns:
            Частное z / v

        Examples:
            >>> Complex.make(3.0, 2.0).div_complex(Complex.make(5.0, 3.0)).get()
            (0.6176470588235294, 0.029411764705882353)  # (21/34, 1/34)
        """
        divisor = v.mult_complex(v.conjugate()).r
        numerator = self.mult_complex(v.conjugate())
        return numerator.mult_real(ieee_divide(1.0, divisor))

    def div_complex_checked(self, v: "Complex") -> "Complex":
        """
        Деление комплексных чисел с проверкой делителя.

        Raises:
            DegenerateDivisorError: Если |v|² == 0
        """
        if v.mult_complex(v.conjugate()).r == 0.0:
            raise DegenerateDivisorError(
                f"Division by zero complex number: divisor={v.get()}"
            )
        return self.div_complex(v)

    def pow(self, v: float) -> "Complex":
        """
        Возведение в степень через полярную форму.

        z^v = |z|^v · (cos(v·θ), sin(v·θ)),  θ = atan2(i, r)

        Для дробных степеней (корней) вычисляется только главная ветвь
        (k = 0); многозначные корни не моделируются.

        Args:
            v: Показатель степени

        Returns:
            z в степени v

        Examples:
            >>> z = Complex.make(3.0, 2.0).pow(2.0)
            >>> round(z.r, 6), round(z.i, 6)
            (5.0, 12.0)
        """
        theta = math.atan2(self.i, self.r)
        scale = ieee_pow(self.modulus(), v)
        return Complex(
            r=scale * ieee_cos(v * theta),
            i=scale * ieee_sin(v * theta),
        )

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def is_close(self, other: "Complex", config: ToleranceConfig | None = None) -> bool:
        """Приближённое сравнение с другим комплексным числом."""
        return components_close(self.get(), other.get(), config)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Complex):
            return NotImplemented
        return self.r == other.r and self.i == other.i

    def __hash__(self) -> int:
        return hash(self.get())

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def __neg__(self) -> "Complex":
        return self.mult_real(-1.0)

    def __add__(self, other: object) -> "Complex":
        if isinstance(other, Complex):
            return self.add_complex(other)
        if isinstance(other, (int, float)):
            return self.add_real(other)
        return NotImplemented

    def __radd__(self, other: object) -> "Complex":
        if isinstance(other, (int, float)):
            return self.add_real(other)
        return NotImplemented

    def __mul__(self, other: object) -> "Complex":
        if isinstance(other, Complex):
            return self.mult_complex(other)
        if isinstance(other, (int, float)):
            return self.mult_real(other)
        return NotImplemented

    def __rmul__(self, other: object) -> "Complex":
        if isinstance(other, (int, float)):
            return self.mult_real(other)
        return NotImplemented

    def __truediv__(self, other: object) -> "Complex":
        if isinstance(other, Complex):
            return self.div_complex(other)
        if isinstance(other, (int, float)):
            return self.div_real(other)
        return NotImplemented

    def __rtruediv__(self, other: object) -> "Complex":
        if isinstance(other, (int, float)):
            return Complex(r=float(other), i=0.0).div_complex(self)
        return NotImplemented
