"""Tests for SLERP and two-pose interpolation."""

import numpy as np
import pytest
import quaternion

from posetime.config.settings_schemas import InterpolationSettings
from posetime.geometry import Pose, Vector3, make_quaternion
from posetime.interpolation import interpolate_pose, slerp


def components(q) -> np.ndarray:
    return quaternion.as_float_array(q)


def z_rotation(angle: float):
    return make_quaternion(np.cos(angle / 2.0), 0.0, 0.0, np.sin(angle / 2.0))


class TestSlerp:
    def test_endpoints(self) -> None:
        q1 = z_rotation(0.0)
        q2 = z_rotation(np.pi / 2.0)
        np.testing.assert_allclose(components(slerp(q1, q2, 0.0)), components(q1), atol=1e-12)
        np.testing.assert_allclose(components(slerp(q1, q2, 1.0)), components(q2), atol=1e-12)

    def test_midpoint_is_half_angle(self) -> None:
        result = slerp(z_rotation(0.0), z_rotation(np.pi / 2.0), 0.5)
        np.testing.assert_allclose(components(result), components(z_rotation(np.pi / 4.0)), atol=1e-12)

    def test_constant_angular_velocity(self) -> None:
        q1 = z_rotation(0.0)
        q2 = z_rotation(2.0)
        for t in (0.1, 0.3, 0.7, 0.9):
            np.testing.assert_allclose(
                components(slerp(q1, q2, t)), components(z_rotation(2.0 * t)), atol=1e-12
            )

    @pytest.mark.parametrize("t", [0.0, 0.25, 0.5, 0.75, 1.0])
    def test_antipodal_identity_stays_identity(self, t: float) -> None:
        result = components(slerp(make_quaternion(1.0, 0.0, 0.0, 0.0), make_quaternion(-1.0, 0.0, 0.0, 0.0), t))
        # Equal up to sign to the identity
        np.testing.assert_allclose(np.abs(result), [1.0, 0.0, 0.0, 0.0], atol=1e-12)

    def test_negative_dot_takes_shortest_arc(self) -> None:
        q1 = z_rotation(0.0)
        q2 = -z_rotation(np.pi / 2.0)  # same rotation, opposite hemisphere
        result = components(slerp(q1, q2, 0.5))
        np.testing.assert_allclose(result, components(z_rotation(np.pi / 4.0)), atol=1e-12)

    def test_near_parallel_is_unit_and_finite(self) -> None:
        q1 = make_quaternion(1.0, 0.0, 0.0, 0.0)
        q2 = quaternion.from_rotation_vector([1e-4, 0.0, 0.0])
        for t in np.linspace(0.0, 1.0, 11):
            result = components(slerp(q1, q2, t))
            assert np.all(np.isfinite(result))
            assert abs(np.linalg.norm(result) - 1.0) < 1e-9

    def test_identical_inputs(self) -> None:
        q = z_rotation(0.3)
        np.testing.assert_allclose(components(slerp(q, q, 0.4)), components(q), atol=1e-12)

    def test_does_not_mutate_inputs(self) -> None:
        q1 = z_rotation(0.0)
        q2 = -z_rotation(1.0)
        before = components(q2).copy()
        slerp(q1, q2, 0.5)
        np.testing.assert_array_equal(components(q2), before)

    def test_custom_threshold_forces_lerp_branch(self) -> None:
        q1 = z_rotation(0.0)
        q2 = z_rotation(np.pi / 2.0)
        result = components(slerp(q1, q2, 0.25, dot_threshold=0.0))
        expected = 0.75 * components(q1) + 0.25 * components(q2)
        np.testing.assert_allclose(result, expected / np.linalg.norm(expected), atol=1e-12)

    @pytest.mark.parametrize("threshold", [1.0, 2.0, -0.5])
    def test_threshold_outside_unit_interval_rejected(self, threshold: float) -> None:
        q = z_rotation(0.3)
        with pytest.raises(ValueError):
            slerp(q, q, 0.5, dot_threshold=threshold)

    def test_equal_inputs_stay_finite_at_highest_threshold(self) -> None:
        q = z_rotation(0.3)
        result = components(slerp(q, q, 0.5, dot_threshold=np.nextafter(1.0, 0.0)))
        assert np.all(np.isfinite(result))
        np.testing.assert_allclose(result, components(q), atol=1e-12)


class TestInterpolatePose:
    def setup_method(self) -> None:
        self.pose1 = Pose(Vector3(0.0, 0.0, 0.0), z_rotation(0.0))
        self.pose2 = Pose(Vector3(2.0, -4.0, 6.0), z_rotation(np.pi / 2.0))

    def test_midpoint(self) -> None:
        result = interpolate_pose(self.pose1, self.pose2, 0.5)
        assert result.position == Vector3(1.0, -2.0, 3.0)
        np.testing.assert_allclose(components(result.orientation), components(z_rotation(np.pi / 4.0)), atol=1e-12)

    def test_fraction_above_one_is_clamped(self) -> None:
        result = interpolate_pose(self.pose1, self.pose2, 1.5)
        assert result.position == self.pose2.position
        np.testing.assert_allclose(components(result.orientation), components(self.pose2.orientation), atol=1e-12)

    def test_fraction_below_zero_is_clamped(self) -> None:
        result = interpolate_pose(self.pose1, self.pose2, -0.5)
        assert result.position == self.pose1.position
        np.testing.assert_allclose(components(result.orientation), components(self.pose1.orientation), atol=1e-12)

    def test_settings_threshold_is_used(self) -> None:
        settings = InterpolationSettings(slerp_dot_threshold=0.0)
        result = interpolate_pose(self.pose1, self.pose2, 0.25, settings)
        expected = 0.75 * components(self.pose1.orientation) + 0.25 * components(self.pose2.orientation)
        np.testing.assert_allclose(components(result.orientation), expected / np.linalg.norm(expected), atol=1e-12)
