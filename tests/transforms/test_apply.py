"""
Tests for the apply helpers in transforms.linear and
transforms.homogeneous, and homogeneous coordinate conversion.
"""

import pytest

from pygeomath.core.constants import PI
from pygeomath.core.exceptions import DimensionError, NumericalError
from pygeomath.transforms import homogeneous, linear
from pygeomath.vectors import Vector2, Vector3, Vector4


# ═══════════════════════════════════════════════════════════════════════
# Plain transforms
# ═══════════════════════════════════════════════════════════════════════


class TestLinear:

    def test_scale2(self):
        assert linear.scale2(Vector2(1, 1), (2, 3)) == Vector2(2, 3)

    def test_single_axis_scale_2d(self):
        assert linear.scale2x(Vector2(1, 1), 4) == Vector2(4, 1)
        assert linear.scale2y(Vector2(1, 1), 4) == Vector2(1, 4)

    def test_single_axis_scale_3d(self):
        v = Vector3(1, 1, 1)
        assert linear.scale3(v, (2, 3, 4)) == Vector3(2, 3, 4)
        assert linear.scale3x(v, 5) == Vector3(5, 1, 1)
        assert linear.scale3y(v, 5) == Vector3(1, 5, 1)
        assert linear.scale3z(v, 5) == Vector3(1, 1, 5)

    def test_rotate2(self):
        assert linear.rotate2(Vector2(1, 0), PI) == Vector2(-1, 0)

    def test_rotate3(self):
        assert linear.rotate3x(Vector3(0, 1, 0), PI / 2) == Vector3(0, 0, 1)
        assert linear.rotate3y(Vector3(0, 0, 1), PI / 2) == Vector3(1, 0, 0)
        assert linear.rotate3z(Vector3(1, 0, 0), PI / 2) == Vector3(0, 1, 0)

    def test_wrong_dimension(self):
        with pytest.raises(DimensionError):
            linear.rotate2(Vector3(1, 0, 0), 0.5)


# ═══════════════════════════════════════════════════════════════════════
# Homogeneous transforms
# ═══════════════════════════════════════════════════════════════════════


class TestHomogeneous2D:

    def test_scale(self):
        v = Vector3(1, 1, 1)
        assert homogeneous.scale2(v, (2, 3)) == Vector3(2, 3, 1)
        assert homogeneous.scale2x(v, 2) == Vector3(2, 1, 1)
        assert homogeneous.scale2y(v, 2) == Vector3(1, 2, 1)

    def test_rotate(self):
        assert homogeneous.rotate2(Vector3(1, 0, 1), PI / 2) == Vector3(0, 1, 1)

    def test_translate(self):
        assert homogeneous.translate2(Vector3(1, 1, 1), (5, 7)) == Vector3(6, 8, 1)

    def test_shear(self):
        v = Vector3(1, 1, 1)
        assert homogeneous.shear2(v, (1, 2)) == Vector3(2, 3, 1)
        assert homogeneous.shear2x(v, 3) == Vector3(4, 1, 1)
        assert homogeneous.shear2y(v, 3) == Vector3(1, 4, 1)


class TestHomogeneous3D:

    def test_scale(self):
        v = Vector4(1, 1, 1, 1)
        assert homogeneous.scale3(v, (2, 3, 4)) == Vector4(2, 3, 4, 1)
        assert homogeneous.scale3x(v, 2) == Vector4(2, 1, 1, 1)
        assert homogeneous.scale3y(v, 2) == Vector4(1, 2, 1, 1)
        assert homogeneous.scale3z(v, 2) == Vector4(1, 1, 2, 1)

    def test_rotate(self):
        assert homogeneous.rotate3x(Vector4(0, 1, 0, 1), PI / 2) == Vector4(0, 0, 1, 1)
        assert homogeneous.rotate3y(Vector4(0, 0, 1, 1), PI / 2) == Vector4(1, 0, 0, 1)
        assert homogeneous.rotate3z(Vector4(1, 0, 0, 1), PI / 2) == Vector4(0, 1, 0, 1)

    def test_translate(self):
        assert homogeneous.translate3(Vector4(0, 0, 0, 1), (1, 2, 3)) == Vector4(1, 2, 3, 1)

    def test_shear(self):
        v = Vector4(1, 1, 1, 1)
        assert homogeneous.shear3(v, (1, 1, 1)) == Vector4(2, 2, 2, 1)
        assert homogeneous.shear3x(v, 2) == Vector4(3, 1, 1, 1)
        assert homogeneous.shear3y(v, 2) == Vector4(1, 3, 1, 1)
        assert homogeneous.shear3z(v, 2) == Vector4(1, 1, 3, 1)


# ═══════════════════════════════════════════════════════════════════════
# Coordinate conversion
# ═══════════════════════════════════════════════════════════════════════


class TestConversion:

    def test_to_homogeneous(self):
        assert homogeneous.to_homogeneous(Vector2(3, 4)) == Vector3(3, 4, 1)
        assert homogeneous.to_homogeneous(Vector3(1, 2, 3)) == Vector4(1, 2, 3, 1)

    def test_from_homogeneous_divides(self):
        assert homogeneous.from_homogeneous(Vector4(2, 4, 6, 2)) == Vector3(1, 2, 3)

    def test_roundtrip(self):
        v = Vector2(-1.5, 2.25)
        assert homogeneous.from_homogeneous(homogeneous.to_homogeneous(v)) == v

    def test_point_at_infinity(self):
        assert homogeneous.try_from_homogeneous(Vector3(1, 2, 0)) is None
        with pytest.raises(NumericalError, match="point at infinity"):
            homogeneous.from_homogeneous(Vector3(1, 2, 0))

    def test_vector2_has_no_affine_form(self):
        with pytest.raises(DimensionError, match="dimension 3 or 4"):
            homogeneous.from_homogeneous(Vector2(1, 1))
        with pytest.raises(DimensionError, match="dimension 3 or 4"):
            homogeneous.try_from_homogeneous(Vector2(1, 1))

    def test_vector4_has_no_homogeneous_form(self):
        with pytest.raises(DimensionError, match="got Vector4"):
            homogeneous.to_homogeneous(Vector4(1, 2, 3, 1))
