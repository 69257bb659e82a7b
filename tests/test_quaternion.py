"""Tests for the numpy quaternion helpers."""

import math

import numpy as np
import pytest

import quaternion
from conftest import same_rotation


class TestConstruction:
    def test_identity(self):
        assert np.array_equal(quaternion.identity(), [1.0, 0.0, 0.0, 0.0])

    def test_from_axis_angle_quarter_turn_about_y(self):
        q = quaternion.from_axis_angle([0, 1, 0], 90)
        half = math.sqrt(0.5)
        assert np.allclose(q, [half, 0.0, half, 0.0])

    def test_from_axis_angle_normalizes_axis(self):
        assert np.allclose(
            quaternion.from_axis_angle([0, 5, 0], 60),
            quaternion.from_axis_angle([0, 1, 0], 60),
        )

    def test_zero_angle_is_exact_identity(self):
        assert np.array_equal(
            quaternion.from_axis_angle([0, 1, 0], 0.0), quaternion.identity()
        )

    def test_zero_axis_rejected(self):
        with pytest.raises(ValueError):
            quaternion.from_axis_angle([0, 0, 0], 45)

    def test_normalize_zero_rejected(self):
        with pytest.raises(ValueError):
            quaternion.normalize([0, 0, 0, 0])

    def test_normalize(self):
        assert np.allclose(quaternion.normalize([2, 0, 0, 0]), [1, 0, 0, 0])


class TestOperations:
    def test_multiply_adds_angles_about_same_axis(self):
        a = quaternion.from_axis_angle([0, 1, 0], 30)
        b = quaternion.from_axis_angle([0, 1, 0], 60)
        assert same_rotation(
            quaternion.multiply(a, b), quaternion.from_axis_angle([0, 1, 0], 90)
        )

    def test_multiply_by_conjugate_is_identity(self):
        q = quaternion.from_axis_angle([1, 2, 3], 77)
        assert same_rotation(
            quaternion.multiply(q, quaternion.conjugate(q)), quaternion.identity()
        )

    def test_rotate_vector_about_y(self):
        q = quaternion.from_axis_angle([0, 1, 0], 90)
        assert np.allclose(quaternion.rotate_vector(q, [1, 0, 0]), [0, 0, -1])

    def test_rotate_vector_about_x(self):
        q = quaternion.from_axis_angle([1, 0, 0], 90)
        assert np.allclose(quaternion.rotate_vector(q, [0, 1, 0]), [0, 0, 1])

    def test_angle_between_ignores_sign(self):
        q = quaternion.from_axis_angle([0, 0, 1], 40)
        assert quaternion.angle_between(q, -q) == pytest.approx(0.0, abs=1e-6)

    def test_angle_between(self):
        a = quaternion.from_axis_angle([0, 1, 0], 10)
        b = quaternion.from_axis_angle([0, 1, 0], 55)
        assert quaternion.angle_between(a, b) == pytest.approx(45.0)

    def test_to_matrix_matches_rotate_vector(self):
        q = quaternion.from_axis_angle([1, 1, 0], 123)
        vector = np.array([0.3, -1.2, 2.0])
        assert np.allclose(
            quaternion.to_matrix(q) @ vector, quaternion.rotate_vector(q, vector)
        )

    def test_is_unit(self):
        assert quaternion.is_unit(quaternion.from_axis_angle([0, 1, 0], 10))
        assert not quaternion.is_unit([1.1, 0, 0, 0])
