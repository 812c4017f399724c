import pytest

from fcikit.control_types import (
    CartesianPose,
    CartesianVelocities,
    JointPositions,
    JointVelocities,
    Torques,
)

IDENTITY = [1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1]


def test_torques_store_values():
    torques = Torques([1, 2, 3, 4, 5, 6, 7])
    assert torques.tau_J == (1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0)
    assert torques.motion_finished is False


@pytest.mark.parametrize(
    "factory,size,message",
    [
        (Torques, 7, "tau_J"),
        (JointPositions, 7, "joint_positions"),
        (JointVelocities, 7, "joint_velocities"),
        (CartesianPose, 16, "cartesian_pose"),
        (CartesianVelocities, 6, "cartesian_velocities"),
    ],
)
@pytest.mark.parametrize("delta", [-1, 1])
def test_wrong_number_of_elements(factory, size, message, delta):
    with pytest.raises(ValueError, match=f"Invalid number of elements in {message}"):
        factory([0.0] * (size + delta))


def test_joint_types_round_trip():
    values = (0.1, -0.2, 0.3, -0.4, 0.5, -0.6, 0.7)
    assert JointPositions(values).q == values
    assert JointVelocities(list(values)).dq == values


def test_motion_finished_flag():
    assert JointPositions([0.0] * 7, motion_finished=True).motion_finished is True


def test_cartesian_pose_without_elbow():
    pose = CartesianPose(IDENTITY)
    assert pose.O_T_EE == tuple(float(v) for v in IDENTITY)
    assert pose.has_elbow() is False


def test_cartesian_pose_with_elbow():
    pose = CartesianPose(IDENTITY, [0.5, -1])
    assert pose.elbow == (0.5, -1.0)
    assert pose.has_elbow() is True


def test_cartesian_velocities_elbow():
    velocities = CartesianVelocities([0.0] * 6)
    assert velocities.has_elbow() is False
    assert CartesianVelocities([0.0] * 6, [0.0, 1.0]).has_elbow() is True


@pytest.mark.parametrize("factory,size", [(CartesianPose, 16), (CartesianVelocities, 6)])
def test_invalid_elbow_length(factory, size):
    with pytest.raises(ValueError, match="Invalid number of elements in elbow"):
        factory([0.0] * size, [1.0, 1.0, 1.0])