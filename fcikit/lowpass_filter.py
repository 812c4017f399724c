"""First-order low-pass filters for scalar signals and Cartesian poses."""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

_EPSILON = float(np.finfo(float).eps)


def _gain(sample_time: float, cutoff_frequency: float) -> float:
    return sample_time / (sample_time + (1.0 / (2.0 * math.pi * cutoff_frequency)))


def _check_parameters(prefix: str, sample_time: float, cutoff_frequency: float) -> None:
    if sample_time < 0 or not math.isfinite(sample_time):
        raise ValueError(f"{prefix}: sample_time is negative, infinite or NaN.")
    if cutoff_frequency <= 0 or not math.isfinite(cutoff_frequency):
        raise ValueError(f"{prefix}: cutoff_frequency is zero, negative, infinite or NaN.")


def lowpass_filter(
    sample_time: float, y: float, y_last: float, cutoff_frequency: float
) -> float:
    """Blend the current sample ``y`` with the previous output ``y_last``."""
    _check_parameters("lowpass-filter", sample_time, cutoff_frequency)
    if not math.isfinite(y) or not math.isfinite(y_last):
        raise ValueError(
            "lowpass-filter: current or past input value of the signal to be filtered "
            "is infinite or NaN."
        )
    gain = _gain(sample_time, cutoff_frequency)
    return gain * y + (1 - gain) * y_last


def _rotation_part(linear: np.ndarray) -> np.ndarray:
    """Return the rotation factor of the polar decomposition of ``linear``."""
    u, _, vt = np.linalg.svd(linear)
    signs = np.ones(3)
    signs[-1] = np.linalg.det(u @ vt)
    return u @ np.diag(signs) @ vt


def _quaternion_from_matrix(m: np.ndarray) -> np.ndarray:
    """Return the unit quaternion (w, x, y, z) of a rotation matrix."""
    trace = m[0, 0] + m[1, 1] + m[2, 2]
    if trace > 0:
        t = math.sqrt(trace + 1.0)
        w = 0.5 * t
        t = 0.5 / t
        return np.array(
            [w, (m[2, 1] - m[1, 2]) * t, (m[0, 2] - m[2, 0]) * t, (m[1, 0] - m[0, 1]) * t]
        )
    i = 0
    if m[1, 1] > m[0, 0]:
        i = 1
    if m[2, 2] > m[i, i]:
        i = 2
    j = (i + 1) % 3
    k = (j + 1) % 3
    t = math.sqrt(m[i, i] - m[j, j] - m[k, k] + 1.0)
    vector = np.zeros(3)
    vector[i] = 0.5 * t
    t = 0.5 / t
    w = (m[k, j] - m[j, k]) * t
    vector[j] = (m[j, i] + m[i, j]) * t
    vector[k] = (m[k, i] + m[i, k]) * t
    return np.array([w, *vector])


def _quaternion_to_matrix(q: np.ndarray) -> np.ndarray:
    w, x, y, z = q
    tx, ty, tz = 2.0 * x, 2.0 * y, 2.0 * z
    twx, twy, twz = tx * w, ty * w, tz * w
    txx, txy, txz = tx * x, ty * x, tz * x
    tyy, tyz, tzz = ty * y, tz * y, tz * z
    return np.array(
        [
            [1.0 - (tyy + tzz), txy - twz, txz + twy],
            [txy + twz, 1.0 - (txx + tzz), tyz - twx],
            [txz - twy, tyz + twx, 1.0 - (txx + tyy)],
        ]
    )


def _slerp(start: np.ndarray, end: np.ndarray, t: float) -> np.ndarray:
    dot = float(start @ end)
    abs_dot = abs(dot)
    if abs_dot >= 1.0 - _EPSILON:
        scale_start = 1.0 - t
        scale_end = t
    else:
        theta = math.acos(abs_dot)
        sin_theta = math.sin(theta)
        scale_start = math.sin((1.0 - t) * theta) / sin_theta
        scale_end = math.sin(t * theta) / sin_theta
    if dot < 0:
        scale_end = -scale_end
    return scale_start * start + scale_end * end


def cartesian_lowpass_filter(
    sample_time: float,
    y: Sequence[float],
    y_last: Sequence[float],
    cutoff_frequency: float,
) -> tuple[float, ...]:
    """Filter a column-major 4x4 pose against the previous pose.

    The translation is blended linearly and the orientation by spherical
    linear interpolation with the same gain.
    """
    prefix = "Cartesian lowpass-filter"
    _check_parameters(prefix, sample_time, cutoff_frequency)
    if len(y) != 16 or len(y_last) != 16:
        raise ValueError(f"{prefix}: poses must have 16 elements.")
    pose = np.asarray(y, dtype=float).reshape(4, 4, order="F")
    pose_last = np.asarray(y_last, dtype=float).reshape(4, 4, order="F")
    if not (np.isfinite(pose).all() and np.isfinite(pose_last).all()):
        raise ValueError(
            f"{prefix}: current or past input value of the signal to be filtered "
            "is infinite or NaN."
        )

    orientation = _quaternion_from_matrix(_rotation_part(pose[:3, :3]))
    orientation_last = _quaternion_from_matrix(_rotation_part(pose_last[:3, :3]))

    gain = _gain(sample_time, cutoff_frequency)
    filtered = pose.copy()
    filtered[:3, 3] = gain * pose[:3, 3] + (1.0 - gain) * pose_last[:3, 3]
    orientation = _slerp(orientation_last, orientation, gain)
    filtered[:3, :3] = _quaternion_to_matrix(orientation / np.linalg.norm(orientation))
    return tuple(float(v) for v in filtered.ravel(order="F"))