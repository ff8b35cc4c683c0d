"""
Тесты для Rotation helpers

Проверяет:
1. Нормализацию оси и sentinel для нулевой оси
2. Проверку определённости оси
3. Перевод углов
"""

import math

import pytest

from src.core.math.rotation import (
    DEGREES_PER_QUARTER_TURN,
    UNDEFINED_AXIS,
    UndefinedRotationAxisError,
    degrees_to_radians,
    is_defined_axis,
    normalize_axis,
    quarter_turns,
    require_defined_axis,
)


class TestNormalizeAxis:
    """Тесты для normalize_axis"""

    def test_unit_axis_unchanged(self) -> None:
        assert normalize_axis((0.0, 0.0, 1.0)) == (0.0, 0.0, 1.0)

    def test_scaled_axis(self) -> None:
        x, y, z = normalize_axis((3.0, 0.0, 4.0))
        assert x == pytest.approx(0.6)
        assert y == 0.0
        assert z == pytest.approx(0.8)

    def test_result_has_unit_length(self) -> None:
        x, y, z = normalize_axis((1.0, -2.0, 2.0))
        assert math.sqrt(x * x + y * y + z * z) == pytest.approx(1.0)

    def test_int_components_accepted(self) -> None:
        assert normalize_axis((0, 2, 0)) == (0.0, 1.0, 0.0)

    @pytest.mark.parametrize("length", [1e200, 1e-200])
    def test_extreme_magnitude_axis(self, length: float) -> None:
        """Квадраты компонент выходят за диапазон float, норма — нет"""
        assert normalize_axis((0.0, 0.0, length)) == (0.0, 0.0, 1.0)

    def test_extreme_magnitude_mixed_components(self) -> None:
        x, y, z = normalize_axis((3e200, 0.0, 4e200))
        assert x == pytest.approx(0.6)
        assert y == 0.0
        assert z == pytest.approx(0.8)

    def test_zero_axis_gives_sentinel(self) -> None:
        """Нулевой вектор → все компоненты NaN"""
        axis = normalize_axis((0.0, 0.0, 0.0))
        assert all(math.isnan(c) for c in axis)

    def test_wrong_length_rejected(self) -> None:
        with pytest.raises(ValueError, match="exactly 3 components"):
            normalize_axis((1.0, 0.0))  # type: ignore


class TestAxisDefinedness:
    """Тесты для is_defined_axis / require_defined_axis"""

    def test_sentinel_is_undefined(self) -> None:
        assert not is_defined_axis(UNDEFINED_AXIS)

    def test_regular_axis_is_defined(self) -> None:
        assert is_defined_axis((0.0, 1.0, 0.0))

    def test_require_returns_axis(self) -> None:
        assert require_defined_axis((1.0, 0.0, 0.0)) == (1.0, 0.0, 0.0)

    def test_require_rejects_sentinel(self) -> None:
        with pytest.raises(UndefinedRotationAxisError, match="undefined"):
            require_defined_axis(UNDEFINED_AXIS)

    def test_error_is_value_error(self) -> None:
        assert issubclass(UndefinedRotationAxisError, ValueError)


class TestAngles:
    """Тесты для перевода углов"""

    def test_degrees_to_radians(self) -> None:
        assert degrees_to_radians(180.0) == pytest.approx(math.pi)
        assert degrees_to_radians(90.0) == pytest.approx(math.pi / 2)

    def test_quarter_turns(self) -> None:
        assert DEGREES_PER_QUARTER_TURN == 90.0
        assert quarter_turns(90.0) == 1.0
        assert quarter_turns(180.0) == 2.0
        assert quarter_turns(45.0) == 0.5
