"""State reported by the gripper."""

from __future__ import annotations

from dataclasses import dataclass, field

from .duration import Duration


@dataclass
class GripperState:
    """Current gripper state: finger width, grasp flag, temperature and time."""

    width: float = 0.0
    max_width: float = 0.0
    is_grasped: bool = False
    temperature: int = 0
    time: Duration = field(default_factory=Duration)

    def __post_init__(self) -> None:
        self.width = float(self.width)
        self.max_width = float(self.max_width)
        self.is_grasped = bool(self.is_grasped)
        self.temperature = int(self.temperature)
        if not isinstance(self.time, Duration):
            self.time = Duration(self.time)

    def __str__(self) -> str:
        return (
            f'{{"width": {self.width:g}, "max_width": {self.max_width:g}, '
            f'"is_grasped": {int(self.is_grasped)}, '
            f'"temperature": {self.temperature}, "time": {self.time.to_sec():g}}}'
        )