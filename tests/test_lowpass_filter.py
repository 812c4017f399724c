import math

import numpy as np
import pytest

from fcikit.lowpass_filter import cartesian_lowpass_filter, lowpass_filter


def _pose(rotation=None, translation=(0.0, 0.0, 0.0)):
    matrix = np.eye(4)
    if rotation is not None:
        matrix[:3, :3] = rotation
    matrix[:3, 3] = translation
    return tuple(matrix.ravel(order="F"))


def _rotation_z(angle):
    c, s = math.cos(angle), math.sin(angle)
    return np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])


def _matrix(values):
    return np.array(values).reshape(4, 4, order="F")


def test_zero_sample_time_keeps_last_value():
    assert lowpass_filter(0.0, 5.0, 2.0, 10.0) == 2.0


def test_result_lies_between_inputs():
    result = lowpass_filter(0.001, 1.0, 0.0, 100.0)
    assert 0.0 < result < 1.0


def test_constant_signal_is_unchanged():
    assert lowpass_filter(0.001, 3.5, 3.5, 100.0) == pytest.approx(3.5)


def test_high_cutoff_follows_input():
    assert lowpass_filter(0.001, 4.0, 1.0, 1e12) == pytest.approx(4.0, abs=1e-6)


def test_higher_cutoff_moves_closer_to_input():
    low = lowpass_filter(0.001, 1.0, 0.0, 10.0)
    high = lowpass_filter(0.001, 1.0, 0.0, 100.0)
    assert low < high


@pytest.mark.parametrize(
    "sample_time, y, y_last, cutoff, match",
    [
        (-0.001, 1.0, 0.0, 10.0, "sample_time"),
        (math.inf, 1.0, 0.0, 10.0, "sample_time"),
        (math.nan, 1.0, 0.0, 10.0, "sample_time"),
        (0.001, 1.0, 0.0, 0.0, "cutoff_frequency"),
        (0.001, 1.0, 0.0, -1.0, "cutoff_frequency"),
        (0.001, 1.0, 0.0, math.inf, "cutoff_frequency"),
        (0.001, math.nan, 0.0, 10.0, "infinite or NaN"),
        (0.001, 1.0, math.inf, 10.0, "infinite or NaN"),
    ],
)
def test_invalid_arguments_raise(sample_time, y, y_last, cutoff, match):
    with pytest.raises(ValueError, match=match):
        lowpass_filter(sample_time, y, y_last, cutoff)


def test_cartesian_identity_stays_identity():
    identity = _pose()
    result = cartesian_lowpass_filter(0.001, identity, identity, 100.0)
    assert np.allclose(result, identity)


def test_cartesian_zero_sample_time_keeps_last_pose():
    last = _pose(_rotation_z(0.4), (0.1, -0.2, 0.3))
    current = _pose(_rotation_z(1.2), (0.5, 0.5, 0.5))
    result = cartesian_lowpass_filter(0.0, current, last, 100.0)
    assert np.allclose(result, last)


def test_cartesian_translation_matches_scalar_filter():
    last = _pose(translation=(0.1, -0.2, 0.3))
    current = _pose(translation=(0.5, 0.4, -0.1))
    result = _matrix(cartesian_lowpass_filter(0.001, current, last, 50.0))
    for axis in range(3):
        expected = lowpass_filter(0.001, current[12 + axis], last[12 + axis], 50.0)
        assert result[axis, 3] == pytest.approx(expected)


def test_cartesian_rotation_is_interpolated_by_gain():
    last = _pose()
    current = _pose(_rotation_z(math.pi / 2))
    result = _matrix(cartesian_lowpass_filter(0.001, current, last, 50.0))
    rotation = result[:3, :3]
    assert np.allclose(rotation @ rotation.T, np.eye(3))
    assert np.linalg.det(rotation) == pytest.approx(1.0)
    angle = math.atan2(rotation[1, 0], rotation[0, 0])
    assert angle == pytest.approx(lowpass_filter(0.001, math.pi / 2, 0.0, 50.0))


def test_cartesian_keeps_bottom_row():
    pose = _pose(_rotation_z(0.3), (1.0, 2.0, 3.0))
    result = _matrix(cartesian_lowpass_filter(0.001, pose, pose, 50.0))
    assert np.array_equal(result[3], np.array(pose).reshape(4, 4, order="F")[3])


def test_cartesian_rejects_nan_values():
    bad = list(_pose())
    bad[5] = math.nan
    with pytest.raises(ValueError, match="infinite or NaN"):
        cartesian_lowpass_filter(0.001, bad, _pose(), 50.0)


def test_cartesian_rejects_invalid_parameters():
    with pytest.raises(ValueError, match="sample_time"):
        cartesian_lowpass_filter(-1.0, _pose(), _pose(), 50.0)
    with pytest.raises(ValueError, match="cutoff_frequency"):
        cartesian_lowpass_filter(0.001, _pose(), _pose(), 0.0)


def test_cartesian_rejects_wrong_length():
    with pytest.raises(ValueError):
        cartesian_lowpass_filter(0.001, _pose()[:15], _pose(), 50.0)