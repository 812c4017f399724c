"""Ring buffer of the most recent robot states and raw commands."""

from __future__ import annotations

import copy
from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass, field

from .control_types import (
    CartesianPose,
    CartesianVelocities,
    JointPositions,
    JointVelocities,
    Torques,
)
from .log import Record, RobotCommand
from .robot_state import RobotState


def _floats(values: Sequence[float], size: int, name: str) -> tuple[float, ...]:
    converted = tuple(float(v) for v in values)
    if len(converted) != size:
        raise ValueError(f"{name} must have {size} elements, got {len(converted)}.")
    return converted


@dataclass
class MotionGeneratorCommand:
    """Motion generator part of a command as sent to the robot."""

    q_c: tuple[float, ...] = (0.0,) * 7
    dq_c: tuple[float, ...] = (0.0,) * 7
    O_T_EE_c: tuple[float, ...] = (0.0,) * 16
    O_dP_EE_c: tuple[float, ...] = (0.0,) * 6
    elbow_c: tuple[float, ...] = (0.0,) * 2
    valid_elbow: bool = False
    motion_generation_finished: bool = False

    def __post_init__(self) -> None:
        self.q_c = _floats(self.q_c, 7, "q_c")
        self.dq_c = _floats(self.dq_c, 7, "dq_c")
        self.O_T_EE_c = _floats(self.O_T_EE_c, 16, "O_T_EE_c")
        self.O_dP_EE_c = _floats(self.O_dP_EE_c, 6, "O_dP_EE_c")
        self.elbow_c = _floats(self.elbow_c, 2, "elbow_c")
        self.valid_elbow = bool(self.valid_elbow)
        self.motion_generation_finished = bool(self.motion_generation_finished)


@dataclass
class ControllerCommand:
    """Controller part of a command as sent to the robot."""

    tau_J_d: tuple[float, ...] = (0.0,) * 7

    def __post_init__(self) -> None:
        self.tau_J_d = _floats(self.tau_J_d, 7, "tau_J_d")


@dataclass
class RawRobotCommand:
    """A complete command message as sent to the robot."""

    message_id: int = 0
    motion: MotionGeneratorCommand = field(default_factory=MotionGeneratorCommand)
    control: ControllerCommand = field(default_factory=ControllerCommand)


def _to_robot_command(raw: RawRobotCommand) -> RobotCommand:
    return RobotCommand(
        joint_positions=JointPositions(raw.motion.q_c),
        joint_velocities=JointVelocities(raw.motion.dq_c),
        cartesian_pose=CartesianPose(raw.motion.O_T_EE_c),
        cartesian_velocities=CartesianVelocities(raw.motion.O_dP_EE_c),
        torques=Torques(raw.control.tau_J_d),
    )


class Logger:
    """Keeps the last ``log_size`` state/command pairs; a size of 0 keeps nothing."""

    def __init__(self, log_size: int) -> None:
        if log_size < 0:
            raise ValueError("log_size must not be negative.")
        self._entries: deque[tuple[RobotState, RawRobotCommand]] = deque(maxlen=log_size)

    def log(self, state: RobotState, command: RawRobotCommand) -> None:
        """Store a state and the command sent with it, dropping the oldest if full."""
        if self._entries.maxlen == 0:
            return
        self._entries.append((copy.deepcopy(state), copy.deepcopy(command)))

    def flush(self) -> list[Record]:
        """Return the stored entries, oldest first, and empty the buffer."""
        records = [
            Record(state=state, command=_to_robot_command(command))
            for state, command in self._entries
        ]
        self._entries.clear()
        return records