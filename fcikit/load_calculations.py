"""Combination of end-effector and external load mass properties."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np


def _check_length(values: Sequence[float], length: int, name: str) -> None:
    if len(values) != length:
        raise ValueError(f"{name} must have {length} elements, got {len(values)}.")


def combine_center_of_mass(
    m_ee: float,
    f_x_cee: Sequence[float],
    m_load: float,
    f_x_cload: Sequence[float],
) -> tuple[float, float, float]:
    """Return the mass-weighted center of mass of end effector and load.

    If the combined mass is not positive, the result is the origin.
    """
    _check_length(f_x_cee, 3, "f_x_cee")
    _check_length(f_x_cload, 3, "f_x_cload")
    if m_ee + m_load > 0:
        return tuple(
            (m_ee * ee + m_load * load) / (m_ee + m_load)
            for ee, load in zip(f_x_cee, f_x_cload)
        )
    return (0.0, 0.0, 0.0)


def skew_symmetric_matrix_from_vector(vector: Sequence[float]) -> np.ndarray:
    """Return the 3x3 cross-product matrix of a 3-vector."""
    _check_length(vector, 3, "vector")
    x, y, z = (float(v) for v in vector)
    return np.array(
        [
            [0.0, -z, y],
            [z, 0.0, -x],
            [-y, x, 0.0],
        ]
    )


def _skew_squared(vector: Sequence[float]) -> np.ndarray:
    skew = skew_symmetric_matrix_from_vector(vector)
    return skew @ skew


def combine_inertia_tensor(
    m_ee: float,
    f_x_cee: Sequence[float],
    i_ee: Sequence[float],
    m_load: float,
    f_x_cload: Sequence[float],
    i_load: Sequence[float],
    m_total: float,
    f_x_ctotal: Sequence[float],
) -> tuple[float, ...]:
    """Return the combined inertia tensor about the combined center of mass.

    Inertia tensors are nine values in column-major order. A body with zero
    mass contributes no inertia; a zero total mass gives a zero tensor.
    """
    _check_length(i_ee, 9, "i_ee")
    _check_length(i_load, 9, "i_load")
    _check_length(f_x_ctotal, 3, "f_x_ctotal")
    if m_total == 0:
        return (0.0,) * 9

    inertia_ee = np.asarray(i_ee, dtype=float).reshape(3, 3, order="F")
    inertia_load = np.asarray(i_load, dtype=float).reshape(3, 3, order="F")
    if m_ee == 0:
        inertia_ee = np.zeros((3, 3))
    if m_load == 0:
        inertia_load = np.zeros((3, 3))

    inertia_ee_flange = inertia_ee - m_ee * _skew_squared(f_x_cee)
    inertia_load_flange = inertia_load - m_load * _skew_squared(f_x_cload)
    inertia_total_flange = inertia_ee_flange + inertia_load_flange

    inertia_total = inertia_total_flange + m_total * _skew_squared(f_x_ctotal)
    return tuple(float(v) for v in inertia_total.ravel(order="F"))