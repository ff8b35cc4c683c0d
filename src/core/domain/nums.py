"""
Nums — Единое числовое значение (Real | Complex | Quaternion)

Закрытое размеченное объединение трёх видов чисел. Каждая операция
диспетчеризуется по виду (kind) операндов:

- Бинарные операции (add, multiply) определены для всех 9 упорядоченных
  пар видов и всегда расширяют результат до "более широкого" вида:
      Real ⊕ Complex → Complex
      что угодно ⊕ Quaternion → Quaternion
- conjugate() и set() делегируются листовому типу; для Real — тождество.
- rotate() — единственная операция, требующая знаний о нескольких видах.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. kind всегда соответствует типу payload (проверяется валидатором модели)
2. Таблицы диспетчеризации покрывают все 9 пар видов
3. Порядок операндов умножения сохраняется (умножение кватернионов некоммутативно)
4. Поворот кватерниона вокруг нулевой оси → UndefinedRotationAxisError
"""

from enum import Enum
from typing import Any, Callable, Union

from pydantic import BaseModel, Field, model_validator

from src.core.domain.complex_number import Complex
from src.core.domain.quaternion import Quaternion
from src.core.math.rotation import (
    Axis,
    degrees_to_radians,
    normalize_axis,
    quarter_turns,
    require_defined_axis,
)


# =============================================================================
# ENUMS
# =============================================================================


class NumKind(str, Enum):
    """Вид числа (в порядке расширения)"""

    REAL = "real"
    COMPLEX = "complex"
    QUATERNION = "quaternion"

    @property
    def width(self) -> int:
        """Ранг вида: REAL < COMPLEX < QUATERNION."""
        return _KIND_ORDER.index(self)


_KIND_ORDER: tuple[NumKind, ...] = (NumKind.REAL, NumKind.COMPLEX, NumKind.QUATERNION)

_PAYLOAD_TYPES: dict[NumKind, type | tuple[type, ...]] = {
    NumKind.REAL: (int, float),
    NumKind.COMPLEX: Complex,
    NumKind.QUATERNION: Quaternion,
}


# =============================================================================
# NUMS MODEL
# =============================================================================


class Nums(BaseModel):
    """
    Единое числовое значение.

    Immutable модель (frozen=True). Создаётся через from_real,
    from_complex, from_quaternion.
    """

    kind: NumKind = Field(..., description="Вид числа")
    value: Union[Quaternion, Complex, float] = Field(..., description="Payload вида kind")

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_payload_matches_kind(self) -> "Nums":
        """Payload должен соответствовать виду."""
        expected = _PAYLOAD_TYPES[self.kind]
        if not isinstance(self.value, expected):
            raise ValueError(
                f"payload {type(self.value).__name__} does not match kind {self.kind.value}"
            )
        return self

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_real(cls, v: float) -> "Nums":
        return cls(kind=NumKind.REAL, value=float(v))

    @classmethod
    def from_complex(cls, c: Complex) -> "Nums":
        return cls(kind=NumKind.COMPLEX, value=c)

    @classmethod
    def from_quaternion(cls, q: Quaternion) -> "Nums":
        return cls(kind=NumKind.QUATERNION, value=q)

    # -------------------------------------------------------------------------
    # Расширение вида
    # -------------------------------------------------------------------------

    def promote(self, kind: NumKind) -> "Nums":
        """
        Расширение значения до более широкого вида.

        Real → Complex (v, 0); Real → Quaternion (v, 0, 0, 0);
        Complex → Quaternion (r, i, 0, 0).

        Args:
            kind: Целевой вид (не уже текущего)

        Returns:
            Значение вида kind

        Raises:
            ValueError: Если kind уже текущего вида (сужение)
        """
        if kind.width < self.kind.width:
            raise ValueError(
                f"cannot narrow {self.kind.value} to {kind.value}"
            )
        if kind == self.kind:
            return self

        if self.kind is NumKind.REAL:
            if kind is NumKind.COMPLEX:
                return Nums.from_complex(Complex.make(self.value, 0.0))
            return Nums.from_quaternion(Quaternion.make_from_real(self.value, 0.0, 0.0, 0.0))

        return Nums.from_quaternion(Quaternion.make_from_complex(self.value, Complex.zero()))

    # -------------------------------------------------------------------------
    # Унарные операции
    # -------------------------------------------------------------------------

    def conjugate(self) -> "Nums":
        """
        Сопряжённое значение.

        Для Real — тождество (нечего сопрягать).
        """
        if self.kind is NumKind.REAL:
            return self
        return Nums(kind=self.kind, value=self.value.conjugate())

    def set(self, mask: int, value: float) -> "Nums":
        """
        Копия с перезаписью компонент, выбранных маской.

        Для Real — тождество: у действительного числа нет именованных
        компонент, кроме него самого.
        """
        if self.kind is NumKind.REAL:
            return self
        return Nums(kind=self.kind, value=self.value.set(mask, value))

    def modulus(self) -> float:
        if self.kind is NumKind.REAL:
            return abs(self.value)
        return self.value.modulus()

    def negate(self) -> "Nums":
        return self.multiply(Nums.from_real(-1.0))

    # -------------------------------------------------------------------------
    # Бинарные операции
    # -------------------------------------------------------------------------

    def add(self, other: "Nums") -> "Nums":
        """Сумма; результат имеет более широкий из двух видов."""
        return _ADD_RULES[(self.kind, other.kind)](self.value, other.value)

    def multiply(self, other: "Nums") -> "Nums":
        """Произведение self · other; порядок операндов сохраняется."""
        return _MULT_RULES[(self.kind, other.kind)](self.value, other.value)

    # -------------------------------------------------------------------------
    # Поворот
    # -------------------------------------------------------------------------

    def rotate(self, angle_degrees: float, axis: Axis) -> "Nums":
        """
        Поворот значения на угол angle_degrees (градусы) вокруг оси axis.

        Ось сначала нормализуется (нулевая ось → sentinel с NaN).

        - Real: тождество (поворот не влияет на скаляр)
        - Complex: поворот в плоскости, z ** (angle_degrees / 90);
          ось не используется
        - Quaternion: q · value · conj(q), где q — кватернион поворота
          из angle_degrees (в радианах) и нормализованной оси

        Args:
            angle_degrees: Угол в градусах
            axis: Ось поворота (x, y, z), влияет только на кватернион

        Returns:
            Повёрнутое значение того же вида

        Raises:
            UndefinedRotationAxisError: Поворот кватерниона вокруг нулевой оси

        Examples:
            >>> v = Nums.from_quaternion(Quaternion.make_from_real(0, 1, 0, 0))
            >>> v.rotate(90.0, (0.0, 0.0, 1.0)).value.get()  # ≈ (0, 0, 1, 0)
        """
        unit_axis = normalize_axis(axis)

        if self.kind is NumKind.REAL:
            return self

        if self.kind is NumKind.COMPLEX:
            return Nums.from_complex(self.value.pow(quarter_turns(angle_degrees)))

        require_defined_axis(unit_axis)
        q = Quaternion.make_from_axis_angle(degrees_to_radians(angle_degrees), unit_axis)
        return Nums.from_quaternion(q.mult_quaternion(self.value).mult_quaternion(q.conjugate()))

    # -------------------------------------------------------------------------
    # Сравнение и операторы
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Nums):
            return NotImplemented
        return self.kind == other.kind and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.kind, self.value))

    def __neg__(self) -> "Nums":
        return self.negate()

    def __add__(self, other: object) -> "Nums":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: object) -> "Nums":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other.add(self)

    def __mul__(self, other: object) -> "Nums":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: object) -> "Nums":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other.multiply(self)


def _coerce(other: object) -> Nums | None:
    """Обёртка операнда оператора в Nums (None если тип не поддерживается)."""
    if isinstance(other, Nums):
        return other
    if isinstance(other, (int, float)):
        return Nums.from_real(other)
    if isinstance(other, Complex):
        return Nums.from_complex(other)
    if isinstance(other, Quaternion):
        return Nums.from_quaternion(other)
    return None


def _complex_as_quaternion(c: Complex) -> Quaternion:
    return Quaternion.make_from_complex(c, Complex.zero())


# =============================================================================
# ТАБЛИЦЫ ДИСПЕТЧЕРИЗАЦИИ (все 9 пар видов)
# =============================================================================

_Rule = Callable[[Any, Any], Nums]

_ADD_RULES: dict[tuple[NumKind, NumKind], _Rule] = {
    (NumKind.REAL, NumKind.REAL): lambda a, b: Nums.from_real(a + b),
    (NumKind.REAL, NumKind.COMPLEX): lambda a, b: Nums.from_complex(b.add_real(a)),
    (NumKind.REAL, NumKind.QUATERNION): lambda a, b: Nums.from_quaternion(b.add_real(a)),
    (NumKind.COMPLEX, NumKind.REAL): lambda a, b: Nums.from_complex(a.add_real(b)),
    (NumKind.COMPLEX, NumKind.COMPLEX): lambda a, b: Nums.from_complex(a.add_complex(b)),
    (NumKind.COMPLEX, NumKind.QUATERNION): lambda a, b: Nums.from_quaternion(b.add_complex(a)),
    (NumKind.QUATERNION, NumKind.REAL): lambda a, b: Nums.from_quaternion(a.add_real(b)),
    (NumKind.QUATERNION, NumKind.COMPLEX): lambda a, b: Nums.from_quaternion(a.add_complex(b)),
    (NumKind.QUATERNION, NumKind.QUATERNION): lambda a, b: Nums.from_quaternion(a.add_quaternion(b)),
}

_MULT_RULES: dict[tuple[NumKind, NumKind], _Rule] = {
    (NumKind.REAL, NumKind.REAL): lambda a, b: Nums.from_real(a * b),
    (NumKind.REAL, NumKind.COMPLEX): lambda a, b: Nums.from_complex(b.mult_real(a)),
    (NumKind.REAL, NumKind.QUATERNION): lambda a, b: Nums.from_quaternion(b.mult_real(a)),
    (NumKind.COMPLEX, NumKind.REAL): lambda a, b: Nums.from_complex(a.mult_real(b)),
    (NumKind.COMPLEX, NumKind.COMPLEX): lambda a, b: Nums.from_complex(a.mult_complex(b)),
    (NumKind.COMPLEX, NumKind.QUATERNION): (
        lambda a, b: Nums.from_quaternion(_complex_as_quaternion(a).mult_quaternion(b))
    ),
    (NumKind.QUATERNION, NumKind.REAL): lambda a, b: Nums.from_quaternion(a.mult_real(b)),
    (NumKind.QUATERNION, NumKind.COMPLEX): lambda a, b: Nums.from_quaternion(a.mult_complex(b)),
    (NumKind.QUATERNION, NumKind.QUATERNION): (
        lambda a, b: Nums.from_quaternion(a.mult_quaternion(b))
    ),
}
