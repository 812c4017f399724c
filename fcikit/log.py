"""Records of robot states and commands, and their CSV export."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from .control_types import (
    CartesianPose,
    CartesianVelocities,
    JointPositions,
    JointVelocities,
    Torques,
)
from .robot_state import RobotState


@dataclass
class RobotCommand:
    """The commands sent to the robot in one control cycle."""

    joint_positions: JointPositions = field(
        default_factory=lambda: JointPositions((0.0,) * 7)
    )
    joint_velocities: JointVelocities = field(
        default_factory=lambda: JointVelocities((0.0,) * 7)
    )
    cartesian_pose: CartesianPose = field(
        default_factory=lambda: CartesianPose((0.0,) * 16)
    )
    cartesian_velocities: CartesianVelocities = field(
        default_factory=lambda: CartesianVelocities((0.0,) * 6)
    )
    torques: Torques = field(default_factory=lambda: Torques((0.0,) * 7))


@dataclass
class Record:
    """One logged control cycle: the robot state and the command sent."""

    state: RobotState = field(default_factory=RobotState)
    command: RobotCommand = field(default_factory=RobotCommand)


def _csv_names(size: int, name: str) -> str:
    return ",".join(f"{name}[{i}]" for i in range(size))


def _csv_values(values: Sequence[float]) -> str:
    return ",".join(f"{v:g}" for v in values)


def _state_header() -> str:
    return ",".join(
        [
            "time",
            "success_rate",
            _csv_names(7, "state.q"),
            _csv_names(7, "state.q_d"),
            _csv_names(7, "state.dq"),
            _csv_names(7, "state.dq_d"),
            _csv_names(7, "state.tau_J"),
            _csv_names(7, "state.tau_ext_hat_filtered"),
        ]
    )


def _command_header() -> str:
    return ",".join(
        [
            _csv_names(7, "cmd.q_d"),
            _csv_names(7, "cmd.dq_d"),
            _csv_names(16, "cmd.O_T_EE_d"),
            _csv_names(6, "cmd.O_dP_EE_d"),
            _csv_names(7, "cmd.tau_J_d"),
        ]
    )


def _state_line(state: RobotState) -> str:
    return ",".join(
        [
            str(state.time.to_msec()),
            f"{state.control_command_success_rate:g}",
            _csv_values(state.q),
            _csv_values(state.q_d),
            _csv_values(state.dq),
            _csv_values(state.dq_d),
            _csv_values(state.tau_J),
            _csv_values(state.tau_ext_hat_filtered),
        ]
    )


def _command_line(command: RobotCommand) -> str:
    return ",".join(
        [
            _csv_values(command.joint_positions.q),
            _csv_values(command.joint_velocities.dq),
            _csv_values(command.cartesian_pose.O_T_EE),
            _csv_values(command.cartesian_velocities.O_dP_EE),
            _csv_values(command.torques.tau_J),
        ]
    )


def log_to_csv(log: Iterable[Record]) -> str:
    """Return the records as CSV text with a header line; empty if there are none."""
    records = list(log)
    if not records:
        return ""
    lines = [f"{_state_header()},{_command_header()}"]
    lines.extend(
        f"{_state_line(r.state)},{_command_line(r.command)}" for r in records
    )
    return "".join(f"{line}\n" for line in lines)