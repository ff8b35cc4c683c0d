"""
Тесты для Quaternion

Проверяет:
1. Конструкторы (из действительных, из комплексных, из оси и угла)
2. Произведение Гамильтона и его некоммутативность
3. Сопряжение, норму, модуль, обращение
4. Смешанную арифметику с комплексными числами
5. set() по маске
6. Сохранение модуля при повороте (sandwich product)
"""

import math

import pytest
from pydantic import ValidationError

from src.core.domain.complex_number import Complex
from src.core.domain.quaternion import I, J, K, R, Quaternion
from src.core.math.numerical_safeguards import EPS_ROTATION, DegenerateDivisorError, ToleranceConfig

ROTATION_TOLERANCE = ToleranceConfig(rel_tol=0.0, abs_tol=EPS_ROTATION)


@pytest.fixture
def q() -> Quaternion:
    return Quaternion.make_from_real(1.0, 2.0, 3.0, 4.0)


# =============================================================================
# КОНСТРУКТОРЫ
# =============================================================================


class TestConstruction:
    """Тесты создания кватернионов"""

    def test_make_from_real(self, q: Quaternion) -> None:
        assert q.get() == (1.0, 2.0, 3.0, 4.0)

    def test_make_from_complex(self) -> None:
        """w1 даёт r/i, w2 даёт j/k"""
        result = Quaternion.make_from_complex(Complex.make(1.0, 2.0), Complex.make(3.0, 4.0))
        assert result.get() == (1.0, 2.0, 3.0, 4.0)

    def test_zero(self) -> None:
        assert Quaternion.zero().get() == (0.0, 0.0, 0.0, 0.0)

    def test_make_from_axis_angle(self) -> None:
        """90° вокруг z: (√2/2, 0, 0, √2/2)"""
        result = Quaternion.make_from_axis_angle(math.pi / 2, (0.0, 0.0, 1.0))
        half = math.sqrt(2.0) / 2.0
        assert result.is_close(Quaternion.make_from_real(half, 0.0, 0.0, half))

    def test_axis_angle_does_not_normalize_axis(self) -> None:
        """Ось передаётся как есть: вызывающий код отвечает за нормализацию"""
        result = Quaternion.make_from_axis_angle(math.pi, (0.0, 0.0, 2.0))
        assert result.k == pytest.approx(2.0)

    def test_axis_angle_of_unit_axis_is_unit(self) -> None:
        result = Quaternion.make_from_axis_angle(1.234, (0.6, 0.0, 0.8))
        assert result.norm() == pytest.approx(1.0)

    def test_immutable(self, q: Quaternion) -> None:
        with pytest.raises(ValidationError):
            q.k = 0.0  # type: ignore


# =============================================================================
# ПРОИЗВЕДЕНИЕ
# =============================================================================


class TestMultiplication:
    """Тесты умножения"""

    def test_hamilton_product(self) -> None:
        """(4,4,4,4) · (6,6,6,6) = (-48, 48, 48, 48)"""
        a = Quaternion.make_from_real(4.0, 4.0, 4.0, 4.0)
        b = Quaternion.make_from_real(6.0, 6.0, 6.0, 6.0)
        assert a.mult_quaternion(b) == Quaternion.make_from_real(-48.0, 48.0, 48.0, 48.0)

    def test_basis_units(self) -> None:
        """î·ĵ = k̂, ĵ·k̂ = î, k̂·î = ĵ, î² = -1"""
        i = Quaternion.make_from_real(0.0, 1.0, 0.0, 0.0)
        j = Quaternion.make_from_real(0.0, 0.0, 1.0, 0.0)
        k = Quaternion.make_from_real(0.0, 0.0, 0.0, 1.0)
        assert i.mult_quaternion(j) == k
        assert j.mult_quaternion(k) == i
        assert k.mult_quaternion(i) == j
        assert i.mult_quaternion(i) == Quaternion.make_from_real(-1.0, 0.0, 0.0, 0.0)

    def test_non_commutative(self) -> None:
        """î·ĵ = k̂, но ĵ·î = -k̂"""
        i = Quaternion.make_from_real(0.0, 1.0, 0.0, 0.0)
        j = Quaternion.make_from_real(0.0, 0.0, 1.0, 0.0)
        assert j.mult_quaternion(i) == Quaternion.make_from_real(0.0, 0.0, 0.0, -1.0)
        assert i.mult_quaternion(j) != j.mult_quaternion(i)

    def test_mult_real(self, q: Quaternion) -> None:
        assert q.mult_real(2.0) == Quaternion.make_from_real(2.0, 4.0, 6.0, 8.0)

    def test_mult_complex(self) -> None:
        """(0,4,7,1) · (43 + 2i) = (-8, 172, 303, 29)"""
        a = Quaternion.make_from_real(0.0, 4.0, 7.0, 1.0)
        result = a.mult_complex(Complex.make(43.0, 2.0))
        assert result == Quaternion.make_from_real(-8.0, 172.0, 303.0, 29.0)

    def test_mult_complex_matches_quaternion_product(self, q: Quaternion) -> None:
        c = Complex.make(1.5, -2.0)
        as_quaternion = Quaternion.make_from_complex(c, Complex.zero())
        assert q.mult_complex(c) == q.mult_quaternion(as_quaternion)

    def test_div_real(self, q: Quaternion) -> None:
        assert q.div_real(2.0) == Quaternion.make_from_real(0.5, 1.0, 1.5, 2.0)


# =============================================================================
# СЛОЖЕНИЕ
# =============================================================================


class TestAddition:
    """Тесты сложения"""

    def test_add_real(self, q: Quaternion) -> None:
        assert q.add_real(1.0) == Quaternion.make_from_real(2.0, 2.0, 3.0, 4.0)

    def test_add_complex_affects_r_and_i_only(self) -> None:
        a = Quaternion.make_from_real(0.0, 0.0, 1.0, 1.0)
        assert a.add_complex(Complex.make(1.0, 1.0)) == Quaternion.make_from_real(1.0, 1.0, 1.0, 1.0)

    def test_add_quaternion(self, q: Quaternion) -> None:
        assert q.add_quaternion(q) == Quaternion.make_from_real(2.0, 4.0, 6.0, 8.0)


# =============================================================================
# СОПРЯЖЕНИЕ, НОРМА, МОДУЛЬ, ОБРАЩЕНИЕ
# =============================================================================


class TestConjugateNormInverse:
    """Тесты сопряжения, нормы, модуля и обращения"""

    def test_conjugate(self) -> None:
        a = Quaternion.make_from_real(1.0, 1.0, 1.0, 1.0)
        assert a.conjugate() == Quaternion.make_from_real(1.0, -1.0, -1.0, -1.0)

    def test_conjugate_involution(self, q: Quaternion) -> None:
        assert q.conjugate().conjugate() == q

    def test_norm_is_sum_of_squares(self, q: Quaternion) -> None:
        assert q.norm() == 1.0 + 4.0 + 9.0 + 16.0

    def test_modulus(self) -> None:
        assert Quaternion.make_from_real(1.0, 1.0, 1.0, 1.0).modulus() == 2.0

    def test_modulus_of_zero(self) -> None:
        assert Quaternion.zero().modulus() == 0.0

    def test_modulus_non_negative(self) -> None:
        assert Quaternion.make_from_real(-1.0, -2.0, -3.0, -4.0).modulus() >= 0.0

    def test_inverse_product_is_identity(self, q: Quaternion) -> None:
        """q · q⁻¹ ≈ (1, 0, 0, 0)"""
        identity = Quaternion.make_from_real(1.0, 0.0, 0.0, 0.0)
        assert q.mult_quaternion(q.inverse()).is_close(identity)
        assert q.inverse().mult_quaternion(q).is_close(identity)

    def test_inverse_of_zero_propagates_nan(self) -> None:
        result = Quaternion.zero().inverse()
        assert all(math.isnan(c) for c in result.get())

    def test_inverse_checked_raises_for_zero(self) -> None:
        with pytest.raises(DegenerateDivisorError, match="zero-norm"):
            Quaternion.zero().inverse_checked()

    def test_inverse_checked_regular(self, q: Quaternion) -> None:
        assert q.inverse_checked() == q.inverse()


# =============================================================================
# SET ПО МАСКЕ
# =============================================================================


class TestSet:
    """Тесты set() по маске"""

    def test_set_all(self, q: Quaternion) -> None:
        assert q.set(R | I | J | K, 3.0) == Quaternion.make_from_real(3.0, 3.0, 3.0, 3.0)

    def test_set_subset_leaves_others(self, q: Quaternion) -> None:
        assert q.set(I | K, 0.0) == Quaternion.make_from_real(1.0, 0.0, 3.0, 0.0)

    def test_set_single(self, q: Quaternion) -> None:
        assert q.set(J, -1.0) == Quaternion.make_from_real(1.0, 2.0, -1.0, 4.0)

    def test_mask_beyond_four_components_rejected(self, q: Quaternion) -> None:
        with pytest.raises(ValueError, match="beyond the 4 available"):
            q.set(16, 0.0)


# =============================================================================
# ОПЕРАТОРЫ
# =============================================================================


class TestOperators:
    """Тесты операторов"""

    def test_neg(self) -> None:
        result = -Quaternion.make_from_real(3.0, 4.0, 1.0, 2.0)
        assert result == Quaternion.make_from_real(-3.0, -4.0, -1.0, -2.0)

    def test_add(self, q: Quaternion) -> None:
        assert q + q == q.add_quaternion(q)
        assert q + 1.0 == q.add_real(1.0)
        assert Complex.make(1.0, 1.0) + q == q.add_complex(Complex.make(1.0, 1.0))

    def test_mul_keeps_operand_order(self) -> None:
        i = Quaternion.make_from_real(0.0, 1.0, 0.0, 0.0)
        j = Quaternion.make_from_real(0.0, 0.0, 1.0, 0.0)
        assert i * j == i.mult_quaternion(j)
        assert j * i == j.mult_quaternion(i)

    def test_complex_left_operand(self) -> None:
        """c · q вычисляется как (c, 0) · q, а не q · c"""
        c = Complex.make(0.0, 1.0)
        j = Quaternion.make_from_real(0.0, 0.0, 1.0, 0.0)
        # î·ĵ = k̂, ĵ·î = -k̂
        assert c * j == Quaternion.make_from_real(0.0, 0.0, 0.0, 1.0)
        assert j * c == Quaternion.make_from_real(0.0, 0.0, 0.0, -1.0)

    def test_real_operands(self, q: Quaternion) -> None:
        assert 2 * q == q.mult_real(2.0)
        assert q * 2 == q.mult_real(2.0)

    def test_hashable(self, q: Quaternion) -> None:
        assert hash(q) == hash(Quaternion.make_from_real(1.0, 2.0, 3.0, 4.0))


# =============================================================================
# ПОВОРОТ (SANDWICH PRODUCT)
# =============================================================================


class TestSandwichRotation:
    """q · v · conj(q) для единичного q сохраняет модуль"""

    @pytest.mark.parametrize(
        "angle, axis",
        [
            (math.pi / 2, (0.0, 0.0, 1.0)),
            (0.3, (0.6, 0.0, 0.8)),
            (2.5, (1.0 / math.sqrt(3.0),) * 3),
        ],
    )
    def test_preserves_modulus(self, q: Quaternion, angle: float, axis: tuple) -> None:
        rotor = Quaternion.make_from_axis_angle(angle, axis)
        rotated = rotor.mult_quaternion(q).mult_quaternion(rotor.conjugate())
        assert rotated.modulus() == pytest.approx(q.modulus())

    def test_quarter_turn_about_z(self) -> None:
        """î поворачивается в ĵ при 90° вокруг z"""
        rotor = Quaternion.make_from_axis_angle(math.pi / 2, (0.0, 0.0, 1.0))
        v = Quaternion.make_from_real(0.0, 1.0, 0.0, 0.0)
        rotated = rotor.mult_quaternion(v).mult_quaternion(rotor.conjugate())
        assert rotated.is_close(Quaternion.make_from_real(0.0, 0.0, 1.0, 0.0), ROTATION_TOLERANCE)
