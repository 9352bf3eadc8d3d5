"""Tests for CubeHex / FractionalHex value types."""

import pytest

from hexengine.models.hex import (
    DIRECTION_NAMES,
    DIRECTIONS,
    CubeHex,
    FractionalHex,
    InvalidCoordinate,
    is_valid_hex,
    make_hex,
)


class TestConstruction:
    def test_make_hex_derives_s(self):
        assert make_hex(3, -1) == CubeHex(3, -1, -2)

    def test_make_hex_accepts_valid_s(self):
        assert make_hex(1, 2, -3) == CubeHex(1, 2, -3)

    def test_make_hex_rejects_unbalanced_triple(self):
        with pytest.raises(InvalidCoordinate):
            make_hex(1, 1, 1)

    def test_direct_construction_validates(self):
        with pytest.raises(InvalidCoordinate):
            CubeHex(2, 0, 0)

    def test_invalid_coordinate_is_value_error(self):
        with pytest.raises(ValueError):
            CubeHex(0, 0, 1)

    def test_is_valid_hex(self):
        assert is_valid_hex(CubeHex(4, -4, 0))
        assert is_valid_hex(FractionalHex(0.25, 0.25, -0.5))


class TestValueSemantics:
    def test_equality_is_component_wise(self):
        assert CubeHex(1, -1, 0) == make_hex(1, -1)
        assert CubeHex(1, -1, 0) != CubeHex(-1, 1, 0)

    def test_hashable(self):
        cells = {CubeHex(0, 0, 0), make_hex(0, 0), CubeHex(1, 0, -1)}
        assert len(cells) == 2

    def test_immutable(self):
        h = CubeHex(0, 0, 0)
        with pytest.raises(AttributeError):
            h.q = 5

    def test_dict_roundtrip(self):
        h = CubeHex(3, -5, 2)
        assert h.to_dict() == {"q": 3, "r": -5, "s": 2}
        assert CubeHex.from_dict(h.to_dict()) == h

    def test_from_dict_without_s(self):
        assert CubeHex.from_dict({"q": 2, "r": 1}) == CubeHex(2, 1, -3)

    def test_from_dict_rejects_bad_s(self):
        with pytest.raises(InvalidCoordinate):
            CubeHex.from_dict({"q": 2, "r": 1, "s": 0})


class TestArithmetic:
    def test_add(self):
        assert CubeHex(1, -1, 0) + CubeHex(0, 2, -2) == CubeHex(1, 1, -2)

    def test_subtract(self):
        assert CubeHex(1, -1, 0) - CubeHex(0, 2, -2) == CubeHex(1, -3, 2)

    def test_scalar_multiply(self):
        assert CubeHex(1, -2, 1) * 3 == CubeHex(3, -6, 3)
        assert 2 * CubeHex(1, -2, 1) == CubeHex(2, -4, 2)

    def test_length(self):
        assert CubeHex(3, -1, -2).length() == 3
        assert CubeHex(0, 0, 0).length() == 0


class TestDirections:
    def test_six_unit_vectors(self):
        assert len(DIRECTIONS) == 6
        for d in DIRECTIONS:
            assert d.length() == 1

    def test_direction_order(self):
        assert DIRECTION_NAMES == ("E", "NE", "NW", "W", "SW", "SE")
        assert DIRECTIONS[0] == CubeHex(1, 0, -1)
        assert DIRECTIONS[4] == CubeHex(-1, 1, 0)

    def test_opposite_directions_cancel(self):
        for i in range(3):
            assert DIRECTIONS[i] + DIRECTIONS[i + 3] == CubeHex(0, 0, 0)

    def test_neighbor_rejects_bad_direction(self):
        with pytest.raises(ValueError):
            CubeHex(0, 0, 0).neighbor(6)
        with pytest.raises(ValueError):
            CubeHex(0, 0, 0).neighbor(-1)


class TestFractionalHex:
    def test_accepts_balanced_floats(self):
        f = FractionalHex(0.5, 0.25, -0.75)
        assert f.q + f.r + f.s == pytest.approx(0.0)

    def test_tolerates_float_drift(self):
        FractionalHex(0.1, 0.2, -0.30000000000000004)

    def test_tolerance_scales_with_magnitude(self):
        FractionalHex(4199258.000001, -1259777.8199248, -2939480.180076199)
        with pytest.raises(InvalidCoordinate):
            FractionalHex(1e6, -1e6, 1.0)

    def test_rejects_unbalanced(self):
        with pytest.raises(InvalidCoordinate):
            FractionalHex(0.5, 0.5, 0.0)

    def test_from_hex(self):
        assert FractionalHex.from_hex(CubeHex(2, -3, 1)) == FractionalHex(2.0, -3.0, 1.0)
