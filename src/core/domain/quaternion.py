"""
Quaternion — Кватернион

Immutable Pydantic модель кватерниона r + i·î + j·ĵ + k·k̂.
Компоненты — float Python (binary64), пороги переполнения и
округления отличаются от вычислений в binary32.

Кватернион может быть построен из двух комплексных чисел
(первое даёт r/i, второе — j/k) и комбинироваться с комплексным числом,
которое трактуется как кватернион с нулевыми j/k.

Умножение некоммутативно: порядок операндов сохраняется в точности
(self — левый операнд, аргумент — правый).

Нормализация не навязывается; кватернионы поворота должны быть единичными,
за это отвечает вызывающий код (make_from_axis_angle не нормализует ось).
"""

from typing import Final

from pydantic import BaseModel, Field

from src.core.domain.complex_number import Complex
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
J: Final[int] = 4
K: Final[int] = 8

# Количество компонент
WIDTH: Final[int] = 4


# =============================================================================
# QUATERNION MODEL
# =============================================================================


class Quaternion(BaseModel):
    """
    Кватернион r + i·î + j·ĵ + k·k̂.

    Immutable модель (frozen=True).
    """

    r: float = Field(0.0, description="Действительная часть")
    i: float = Field(0.0, description="Коэффициент при î")
    j: float = Field(0.0, description="Коэффициент при ĵ")
    k: float = Field(0.0, description="Коэффициент при k̂")

    model_config = {"frozen": True}  # Immutable

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def make_from_real(cls, r: float, i: float, j: float, k: float) -> "Quaternion":
        return cls(r=r, i=i, j=j, k=k)

    @classmethod
    def make_from_complex(cls, w1: Complex, w2: Complex) -> "Quaternion":
        """
        Кватернион из двух комплексных чисел.

        w1 даёт (r, i), w2 даёт (j, k).

        Examples:
            >>> Quaternion.make_from_complex(Complex.make(1, 2), Complex.make(3, 4)).get()
            (1.0, 2.0, 3.0, 4.0)
        """
        r, i = w1.get()
        j, k = w2.get()
        return cls(r=r, i=i, j=j, k=k)

    @classmethod
    def make_from_axis_angle(
        cls, angle: float, axis: tuple[float, float, float]
    ) -> "Quaternion":
        """
        Кватернион поворота на угол angle (радианы) вокруг оси axis.

        r = cos(angle/2), (i, j, k) = sin(angle/2) · axis

        Ось НЕ нормализуется: вызывающий код передаёт единичный вектор.

        Examples:
            >>> import math
            >>> Quaternion.make_from_axis_angle(math.pi / 2, (0.0, 0.0, 1.0)).get()
            (0.7071067811865476, 0.0, 0.0, 0.7071067811865475)
        """
        half = angle / 2.0
        s = ieee_sin(half)
        x, y, z = axis
        return cls(r=ieee_cos(half), i=s * x, j=s * y, k=s * z)

    @classmethod
    def zero(cls) -> "Quaternion":
        return cls(r=0.0, i=0.0, j=0.0, k=0.0)

    # -------------------------------------------------------------------------
    # Доступ к компонентам
    # -------------------------------------------------------------------------

    def get(self) -> tuple[float, float, float, float]:
        return (self.r, self.i, self.j, self.k)

    def set(self, mask: int, value: float) -> "Quaternion":
        """
        Копия с перезаписью компонент, выбранных маской (флаги R, I, J, K).

        Raises:
            ValueError: Если маска выходит за пределы 4 компонент
        """
        validate_mask(mask, WIDTH)
        components = [
            value if is_set(mask, idx) else component
            for idx, component in enumerate(self.get())
        ]
        return Quaternion.make_from_real(*components)

    # -------------------------------------------------------------------------
    # Сопряжение, норма, модуль, обращение
    # -------------------------------------------------------------------------

    def conjugate(self) -> "Quaternion":
        """Сопряжённый кватернион: i, j, k меняют знак."""
        return Quaternion(r=self.r, i=-self.i, j=-self.j, k=-self.k)

    def norm(self) -> float:
        """
        Норма (квадрат модуля): действительная часть q · conj(q).

        Равна r² + i² + j² + k².
        """
        return self.mult_quaternion(self.conjugate()).r

    def modulus(self) -> float:
        return ieee_pow(self.norm(), 0.5)

    def inverse(self) -> "Quaternion":
        """
        Обратный кватернион: conj(q) / norm(q).

        Для нулевого кватерниона результат содержит NaN
        (исключение не выбрасывается).
        """
        return self.conjugate().div_real(self.norm())

    def inverse_checked(self) -> "Quaternion":
        """
        Обратный кватернион с проверкой нормы.

        Raises:
            DegenerateDivisorError: Если norm() == 0
        """
        if self.norm() == 0.0:
            raise DegenerateDivisorError(
                f"Inverse of zero-norm quaternion: {self.get()}"
            )
        return self.inverse()

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add_real(self, v: float) -> "Quaternion":
        return Quaternion(r=self.r + v, i=self.i, j=self.j, k=self.k)

    def add_complex(self, v: Complex) -> "Quaternion":
        """Сумма с комплексным числом: меняются только r и i."""
        r, i = v.get()
        return Quaternion(r=self.r + r, i=self.i + i, j=self.j, k=self.k)

    def add_quaternion(self, v: "Quaternion") -> "Quaternion":
        return Quaternion(
            r=self.r + v.r,
            i=self.i + v.i,
            j=self.j + v.j,
            k=self.k + v.k,
        )

    def mult_real(self, v: float) -> "Quaternion":
        return Quaternion(r=self.r * v, i=self.i * v, j=self.j * v, k=self.k * v)

    def mult_complex(self, v: Complex) -> "Quaternion":
        """Произведение self · v, где v трактуется как кватернион (r, i, 0, 0)."""
        return self.mult_quaternion(Quaternion.make_from_complex(v, Complex.zero()))

    def mult_quaternion(self, v: "Quaternion") -> "Quaternion":
        """
        Произведение Гамильтона self · v.

        r = r1·r2 − i1·i2 − j1·j2 − k1·k2
        i = r1·i2 + i1·r2 + j1·k2 − k1·j2
        j = r1·j2 − i1·k2 + j1·r2 + k1·i2
        k = r1·k2 + i1·j2 − j1·i2 + k1·r2

        Examples:
            >>> a = Quaternion.make_from_real(4, 4, 4, 4)
            >>> a.mult_quaternion(Quaternion.make_from_real(6, 6, 6, 6)).get()
            (-48.0, 48.0, 48.0, 48.0)
        """
        r1, i1, j1, k1 = self.get()
        r2, i2, j2, k2 = v.get()
        return Quaternion(
            r=r1 * r2 - i1 * i2 - j1 * j2 - k1 * k2,
            i=r1 * i2 + i1 * r2 + j1 * k2 - k1 * j2,
            j=r1 * j2 - i1 * k2 + j1 * r2 + k1 * i2,
            k=r1 * k2 + i1 * j2 - j1 * i2 + k1 * r2,
        )

    def div_real(self, v: float) -> "Quaternion":
        """Деление всех компонент на действительное число (IEEE-754 при v == 0)."""
        return Quaternion(
            r=ieee_divide(self.r, v),
            i=ieee_divide(self.i, v),
            j=ieee_divide(self.j, v),
            k=ieee_divide(self.k, v),
        )

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def is_close(self, other: "Quaternion", config: ToleranceConfig | None = None) -> bool:
        return components_close(self.get(), other.get(), config)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return (
            self.r == other.r
            and self.i == other.i
            and self.j == other.j
            and self.k == other.k
        )

    def __hash__(self) -> int:
        return hash(self.get())

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def __neg__(self) -> "Quaternion":
        return self.mult_real(-1.0)

    def __add__(self, other: object) -> "Quaternion":
        if isinstance(other, Quaternion):
            return self.add_quaternion(other)
        if isinstance(other, Complex):
            return self.add_complex(other)
        if isinstance(other, (int, float)):
            return self.add_real(other)
        return NotImplemented

    def __radd__(self, other: object) -> "Quaternion":
        # Сложение коммутативно
        if isinstance(other, (Complex, int, float)):
            return self.__add__(other)
        return NotImplemented

    def __mul__(self, other: object) -> "Quaternion":
        if isinstance(other, Quaternion):
            return self.mult_quaternion(other)
        if isinstance(other, Complex):
            return self.mult_complex(other)
        if isinstance(other, (int, float)):
            return self.mult_real(other)
        return NotImplemented

    def __rmul__(self, other: object) -> "Quaternion":
        # Комплексный левый операнд: (c, 0) · self, порядок сохраняется
        if isinstance(other, Complex):
            return Quaternion.make_from_complex(other, Complex.zero()).mult_quaternion(self)
        if isinstance(other, (int, float)):
            return self.mult_real(other)
        return NotImplemented
