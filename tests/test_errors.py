import random

import pytest

from fcikit.errors import Error, Errors


def _flags(*errors):
    flags = [False] * len(Error)
    for error in errors:
        flags[error] = True
    return flags


def test_is_initialized_to_no_errors():
    errors = Errors()
    assert not errors
    assert errors.active() == []


def test_evaluates_to_true_on_error():
    flags = [False] * len(Error)
    flags[random.randrange(len(flags))] = True
    assert Errors(flags)


def test_can_get_names_of_errors():
    errors = Errors(
        _flags(
            Error.JOINT_POSITION_LIMITS_VIOLATION,
            Error.SELF_COLLISION_AVOIDANCE_VIOLATION,
        )
    )
    assert (
        str(errors)
        == '["joint_position_limits_violation", "self_collision_avoidance_violation"]'
    )


def test_empty_string_is_brackets():
    assert str(Errors()) == "[]"


def test_there_are_41_error_kinds():
    assert len(Errors()) == 41
    assert Error.BASE_ACCELERATION_INVALID_READING == 40


def test_attribute_access_matches_flags():
    errors = Errors(_flags(Error.JOINT_REFLEX, Error.BASE_ACCELERATION_INVALID_READING))
    assert errors.joint_reflex is True
    assert errors.base_acceleration_invalid_reading is True
    assert errors.cartesian_reflex is False
    assert errors[Error.JOINT_REFLEX] is True


def test_active_in_index_order():
    errors = Errors(_flags(Error.POWER_LIMIT_VIOLATION, Error.JOINT_VELOCITY_VIOLATION))
    assert errors.active() == [Error.JOINT_VELOCITY_VIOLATION, Error.POWER_LIMIT_VIOLATION]
    assert errors.active_names() == ["joint_velocity_violation", "power_limit_violation"]


def test_wrong_number_of_flags_raises():
    with pytest.raises(ValueError):
        Errors([True] * 40)


def test_unknown_attribute_raises():
    with pytest.raises(AttributeError):
        Errors().not_an_error


def test_upper_case_attribute_is_rejected():
    with pytest.raises(AttributeError):
        Errors().JOINT_REFLEX


def test_is_immutable():
    errors = Errors()
    with pytest.raises(AttributeError):
        errors.joint_reflex = True
    assert errors.joint_reflex is False
    assert not errors
    assert str(errors) == "[]"


def test_equality_and_hash():
    a = Errors(_flags(Error.JOINT_REFLEX))
    b = Errors(_flags(Error.JOINT_REFLEX))
    assert a == b
    assert hash(a) == hash(b)
    assert a != Errors()


def test_copy_via_iteration_round_trip():
    original = Errors(_flags(Error.TAU_J_RANGE_VIOLATION, Error.INSTABILITY_DETECTED))
    assert Errors(original) == original
    assert list(original).count(True) == 2