"""Error flags reported by the robot while it is being controlled."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator


class Error(enum.IntEnum):
    """Position of each error flag in the robot's error array."""

    JOINT_POSITION_LIMITS_VIOLATION = 0
    CARTESIAN_POSITION_LIMITS_VIOLATION = 1
    SELF_COLLISION_AVOIDANCE_VIOLATION = 2
    JOINT_VELOCITY_VIOLATION = 3
    CARTESIAN_VELOCITY_VIOLATION = 4
    FORCE_CONTROL_SAFETY_VIOLATION = 5
    JOINT_REFLEX = 6
    CARTESIAN_REFLEX = 7
    MAX_GOAL_POSE_DEVIATION_VIOLATION = 8
    MAX_PATH_POSE_DEVIATION_VIOLATION = 9
    CARTESIAN_VELOCITY_PROFILE_SAFETY_VIOLATION = 10
    JOINT_POSITION_MOTION_GENERATOR_START_POSE_INVALID = 11
    JOINT_MOTION_GENERATOR_POSITION_LIMITS_VIOLATION = 12
    JOINT_MOTION_GENERATOR_VELOCITY_LIMITS_VIOLATION = 13
    JOINT_MOTION_GENERATOR_VELOCITY_DISCONTINUITY = 14
    JOINT_MOTION_GENERATOR_ACCELERATION_DISCONTINUITY = 15
    CARTESIAN_POSITION_MOTION_GENERATOR_START_POSE_INVALID = 16
    CARTESIAN_MOTION_GENERATOR_ELBOW_LIMIT_VIOLATION = 17
    CARTESIAN_MOTION_GENERATOR_VELOCITY_LIMITS_VIOLATION = 18
    CARTESIAN_MOTION_GENERATOR_VELOCITY_DISCONTINUITY = 19
    CARTESIAN_MOTION_GENERATOR_ACCELERATION_DISCONTINUITY = 20
    CARTESIAN_MOTION_GENERATOR_ELBOW_SIGN_INCONSISTENT = 21
    CARTESIAN_MOTION_GENERATOR_START_ELBOW_INVALID = 22
    CARTESIAN_MOTION_GENERATOR_JOINT_POSITION_LIMITS_VIOLATION = 23
    CARTESIAN_MOTION_GENERATOR_JOINT_VELOCITY_LIMITS_VIOLATION = 24
    CARTESIAN_MOTION_GENERATOR_JOINT_VELOCITY_DISCONTINUITY = 25
    CARTESIAN_MOTION_GENERATOR_JOINT_ACCELERATION_DISCONTINUITY = 26
    CARTESIAN_POSITION_MOTION_GENERATOR_INVALID_FRAME = 27
    FORCE_CONTROLLER_DESIRED_FORCE_TOLERANCE_VIOLATION = 28
    CONTROLLER_TORQUE_DISCONTINUITY = 29
    START_ELBOW_SIGN_INCONSISTENT = 30
    COMMUNICATION_CONSTRAINTS_VIOLATION = 31
    POWER_LIMIT_VIOLATION = 32
    JOINT_P2P_INSUFFICIENT_TORQUE_FOR_PLANNING = 33
    TAU_J_RANGE_VIOLATION = 34
    INSTABILITY_DETECTED = 35
    JOINT_MOVE_IN_WRONG_DIRECTION = 36
    CARTESIAN_SPLINE_MOTION_GENERATOR_VIOLATION = 37
    JOINT_VIA_MOTION_GENERATOR_PLANNING_JOINT_LIMIT_VIOLATION = 38
    BASE_ACCELERATION_INITIALIZATION_TIMEOUT = 39
    BASE_ACCELERATION_INVALID_READING = 40

    @property
    def label(self) -> str:
        """Return the lower-case name used in error listings."""
        return self.name.lower()


_ERROR_COUNT = len(Error)


class Errors:
    """An immutable set of error flags, one for each :class:`Error`.

    Each flag can be read as an attribute named after the error in lower
    case, for example ``errors.joint_reflex``, or by indexing with an
    :class:`Error`. The object is true if any flag is set.
    """

    __slots__ = ("_flags",)

    def __init__(self, flags: Iterable[bool] | None = None) -> None:
        if flags is None:
            values = (False,) * _ERROR_COUNT
        else:
            values = tuple(bool(flag) for flag in flags)
        if len(values) != _ERROR_COUNT:
            raise ValueError(
                f"Errors needs {_ERROR_COUNT} flags, got {len(values)}."
            )
        object.__setattr__(self, "_flags", values)

    def __getattr__(self, name: str) -> bool:
        try:
            error = Error[name.upper()]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__!r} object has no attribute {name!r}"
            ) from None
        if name != error.label:
            raise AttributeError(
                f"{type(self).__name__!r} object has no attribute {name!r}"
            )
        return self._flags[error]

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Errors is immutable")

    def __getitem__(self, error: Error) -> bool:
        return self._flags[Error(error)]

    def __iter__(self) -> Iterator[bool]:
        return iter(self._flags)

    def __len__(self) -> int:
        return _ERROR_COUNT

    def __bool__(self) -> bool:
        return any(self._flags)

    def active(self) -> list[Error]:
        """Return the errors whose flag is set, in index order."""
        return [error for error in Error if self._flags[error]]

    def active_names(self) -> list[str]:
        """Return the names of the errors whose flag is set, in index order."""
        return [error.label for error in self.active()]

    def __str__(self) -> str:
        return "[" + ", ".join(f'"{name}"' for name in self.active_names()) + "]"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Errors):
            return NotImplemented
        return self._flags == other._flags

    def __hash__(self) -> int:
        return hash(self._flags)

    def __repr__(self) -> str:
        return f"Errors({self.active_names()!r})"