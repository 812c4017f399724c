"""Values returned by control and motion generator callbacks."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


def _as_floats(values: Sequence[float], size: int, name: str) -> tuple[float, ...]:
    converted = tuple(float(v) for v in values)
    if len(converted) != size:
        raise ValueError(f"Invalid number of elements in {name}.")
    return converted


@dataclass
class Torques:
    """Joint-level torque commands without gravity and friction."""

    tau_J: tuple[float, ...]
    motion_finished: bool = False

    def __post_init__(self) -> None:
        self.tau_J = _as_floats(self.tau_J, 7, "tau_J")


@dataclass
class JointPositions:
    """Joint position commands."""

    q: tuple[float, ...]
    motion_finished: bool = False

    def __post_init__(self) -> None:
        self.q = _as_floats(self.q, 7, "joint_positions")


@dataclass
class JointVelocities:
    """Joint velocity commands."""

    dq: tuple[float, ...]
    motion_finished: bool = False

    def __post_init__(self) -> None:
        self.dq = _as_floats(self.dq, 7, "joint_velocities")


@dataclass
class CartesianPose:
    """Cartesian pose command as a column-major 4x4 matrix, with optional elbow."""

    O_T_EE: tuple[float, ...]
    elbow: tuple[float, ...] = (0.0, 0.0)
    motion_finished: bool = False

    def __post_init__(self) -> None:
        self.O_T_EE = _as_floats(self.O_T_EE, 16, "cartesian_pose")
        self.elbow = _as_floats(self.elbow, 2, "elbow")

    def has_elbow(self) -> bool:
        """Return True if an elbow configuration was given."""
        return self.elbow != (0.0, 0.0)


@dataclass
class CartesianVelocities:
    """Cartesian velocity command, with optional elbow."""

    O_dP_EE: tuple[float, ...]
    elbow: tuple[float, ...] = (0.0, 0.0)
    motion_finished: bool = False

    def __post_init__(self) -> None:
        self.O_dP_EE = _as_floats(self.O_dP_EE, 6, "cartesian_velocities")
        self.elbow = _as_floats(self.elbow, 2, "elbow")

    def has_elbow(self) -> bool:
        """Return True if an elbow configuration was given."""
        return self.elbow != (0.0, 0.0)