"""Robot and gripper state, error flags, control types, load calculations, filtering and logging."""

__version__ = "0.1.0"