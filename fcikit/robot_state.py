"""Snapshot of the robot's measured, desired and commanded state."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, fields
from typing import Any

from .duration import Duration
from .errors import Errors


class RobotMode(enum.IntEnum):
    """The robot's current mode."""

    OTHER = 0
    IDLE = 1
    MOVE = 2
    GUIDING = 3
    REFLEX = 4
    USER_STOPPED = 5
    AUTOMATIC_ERROR_RECOVERY = 6


def _array(size: int) -> Any:
    return field(default=(0.0,) * size, metadata={"size": size})


@dataclass
class RobotState:
    """The robot state.

    Poses are 4x4 matrices in column-major order, flattened to 16 values.
    Every array field is stored as a tuple of floats of fixed length;
    constructing a state with an array of the wrong length raises
    :class:`ValueError`.
    """

    O_T_EE: tuple[float, ...] = _array(16)
    O_T_EE_d: tuple[float, ...] = _array(16)
    F_T_EE: tuple[float, ...] = _array(16)
    F_T_NE: tuple[float, ...] = _array(16)
    NE_T_EE: tuple[float, ...] = _array(16)
    EE_T_K: tuple[float, ...] = _array(16)
    m_ee: float = 0.0
    I_ee: tuple[float, ...] = _array(9)
    F_x_Cee: tuple[float, ...] = _array(3)
    m_load: float = 0.0
    I_load: tuple[float, ...] = _array(9)
    F_x_Cload: tuple[float, ...] = _array(3)
    m_total: float = 0.0
    I_total: tuple[float, ...] = _array(9)
    F_x_Ctotal: tuple[float, ...] = _array(3)
    elbow: tuple[float, ...] = _array(2)
    elbow_d: tuple[float, ...] = _array(2)
    elbow_c: tuple[float, ...] = _array(2)
    delbow_c: tuple[float, ...] = _array(2)
    ddelbow_c: tuple[float, ...] = _array(2)
    tau_J: tuple[float, ...] = _array(7)
    tau_J_d: tuple[float, ...] = _array(7)
    dtau_J: tuple[float, ...] = _array(7)
    q: tuple[float, ...] = _array(7)
    q_d: tuple[float, ...] = _array(7)
    dq: tuple[float, ...] = _array(7)
    dq_d: tuple[float, ...] = _array(7)
    ddq_d: tuple[float, ...] = _array(7)
    joint_contact: tuple[float, ...] = _array(7)
    cartesian_contact: tuple[float, ...] = _array(6)
    joint_collision: tuple[float, ...] = _array(7)
    cartesian_collision: tuple[float, ...] = _array(6)
    tau_ext_hat_filtered: tuple[float, ...] = _array(7)
    O_F_ext_hat_K: tuple[float, ...] = _array(6)
    K_F_ext_hat_K: tuple[float, ...] = _array(6)
    O_dP_EE_d: tuple[float, ...] = _array(6)
    O_ddP_O: tuple[float, ...] = _array(3)
    O_T_EE_c: tuple[float, ...] = _array(16)
    O_dP_EE_c: tuple[float, ...] = _array(6)
    O_ddP_EE_c: tuple[float, ...] = _array(6)
    theta: tuple[float, ...] = _array(7)
    dtheta: tuple[float, ...] = _array(7)
    current_errors: Errors = field(default_factory=Errors)
    last_motion_errors: Errors = field(default_factory=Errors)
    control_command_success_rate: float = 0.0
    robot_mode: RobotMode = RobotMode.USER_STOPPED
    time: Duration = field(default_factory=Duration)

    def __post_init__(self) -> None:
        for state_field in fields(self):
            size = state_field.metadata.get("size")
            if size is None:
                continue
            values = tuple(float(v) for v in getattr(self, state_field.name))
            if len(values) != size:
                raise ValueError(
                    f"{state_field.name} must have {size} elements, got {len(values)}."
                )
            setattr(self, state_field.name, values)
        self.m_ee = float(self.m_ee)
        self.m_load = float(self.m_load)
        self.m_total = float(self.m_total)
        self.control_command_success_rate = float(self.control_command_success_rate)
        if not isinstance(self.current_errors, Errors):
            self.current_errors = Errors(self.current_errors)
        if not isinstance(self.last_motion_errors, Errors):
            self.last_motion_errors = Errors(self.last_motion_errors)
        self.robot_mode = RobotMode(self.robot_mode)
        if not isinstance(self.time, Duration):
            self.time = Duration(self.time)