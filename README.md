# fcikit

Data types and helper computations for working with a torque-controlled
seven-joint robot arm and its gripper: millisecond time stamps, robot and
gripper state, error flags, control commands, combined load calculations,
low-pass filtering, and a ring-buffer log of states and commands that can be
exported as CSV.

## Installation

```
pip install fcikit
```

The package needs Python 3.10 or later and depends on `numpy`.

## Overview

| Module | What it offers |
| --- | --- |
| `fcikit.duration` | `Duration`, an unsigned 64-bit millisecond count with arithmetic and comparison |
| `fcikit.exceptions` | `RobotException` and its subclasses `ControlException`, `IncompatibleVersionException`, `CommandException`, `ProtocolException`, `NetworkException`, `ModelException`, `RealtimeException`, `InvalidOperationException` |
| `fcikit.load_calculations` | `combine_center_of_mass`, `combine_inertia_tensor`, `skew_symmetric_matrix_from_vector` |
| `fcikit.lowpass_filter` | `lowpass_filter`, `cartesian_lowpass_filter` |
| `fcikit.errors` | the `Error` enumeration and the immutable `Errors` flag set |
| `fcikit.robot_state` | `RobotMode` and the `RobotState` dataclass |
| `fcikit.control_types` | `Torques`, `JointPositions`, `JointVelocities`, `CartesianPose`, `CartesianVelocities` |
| `fcikit.gripper_state` | `GripperState` |
| `fcikit.log` | `RobotCommand`, `Record`, `log_to_csv` |
| `fcikit.logger` | `MotionGeneratorCommand`, `ControllerCommand`, `RawRobotCommand` and `Logger`, a fixed-size ring buffer |

Poses are 4x4 homogeneous matrices flattened to 16 values in column-major
order; inertia tensors are 9 values in column-major order.

## Examples

### Durations

A `Duration` counts whole milliseconds. Addition, subtraction and
multiplication wrap around modulo 2**64. Dividing by another duration gives
an `int`; dividing by an integer gives a `Duration`; both use integer division.

```python
from datetime import timedelta
from fcikit.duration import Duration

d = Duration(12345)
d.to_msec()                             # 12345
d.to_sec()                              # 12.345
Duration(timedelta(seconds=2)).to_msec()  # 2000
(Duration(4) + Duration(3)).to_msec()   # 7
Duration(4) // Duration(3)              # 1
(2 * Duration(4)).to_msec()             # 8
```

### Combining end effector and load

```python
from fcikit.load_calculations import combine_center_of_mass, combine_inertia_tensor

m_ee, c_ee = 0.73, [-0.01, 0.0, -0.03]
m_load, c_load = 0.5, [0.01, -0.2, 0.03]
i_ee = [0.001, 0, 0, 0, 0.0025, 0, 0, 0, 0.0017]
i_load = [0.001, 0, 0, 0, 0.025, 0, 0, 0, 0.3]

c_total = combine_center_of_mass(m_ee, c_ee, m_load, c_load)
i_total = combine_inertia_tensor(
    m_ee, c_ee, i_ee, m_load, c_load, i_load, m_ee + m_load, c_total
)
```

A non-positive combined mass gives a center of mass at the origin; a zero
total mass gives a zero inertia tensor, and a body of zero mass contributes
no inertia. Inputs of the wrong length raise `ValueError`.

### Low-pass filtering

```python
from fcikit.lowpass_filter import lowpass_filter, cartesian_lowpass_filter

filtered = lowpass_filter(0.001, y=1.0, y_last=0.0, cutoff_frequency=100.0)

identity = [1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1]
pose = cartesian_lowpass_filter(0.001, identity, identity, 100.0)
```

The Cartesian filter blends the translation linearly and the orientation by
spherical linear interpolation with the same gain. A negative or non-finite
sample time, a non-positive or non-finite cutoff frequency, or a non-finite
input raises `ValueError`.

### Control values

Each control type checks the length of its values and raises `ValueError`
on a mismatch.

```python
from fcikit.control_types import JointPositions, CartesianPose

JointPositions([0.0] * 7)
CartesianPose([1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1]).has_elbow()  # False
JointPositions([0.0] * 6)  # raises ValueError
```

### Error flags

`Errors` holds one flag for each `Error`. A flag is read as a lower-case
attribute or by indexing with an `Error`; the object is true if any flag is
set, and renders as a list of the active names.

```python
from fcikit.errors import Error, Errors

flags = [False] * len(Error)
flags[Error.JOINT_POSITION_LIMITS_VIOLATION] = True
flags[Error.SELF_COLLISION_AVOIDANCE_VIOLATION] = True
errors = Errors(flags)

bool(errors)                   # True
errors.joint_reflex            # False
errors.active_names()          # ['joint_position_limits_violation', 'self_collision_avoidance_violation']
str(errors)                    # '["joint_position_limits_violation", "self_collision_avoidance_violation"]'
str(Errors())                  # '[]'
```

### Robot and gripper state

`RobotState` is a dataclass whose array fields are stored as tuples of
floats of fixed length; a wrong length raises `ValueError`. Its robot mode
defaults to `RobotMode.USER_STOPPED`.

```python
from fcikit.gripper_state import GripperState
from fcikit.duration import Duration

str(GripperState(width=0.08, max_width=0.08, is_grasped=True, temperature=30, time=Duration(1500)))
# '{"width": 0.08, "max_width": 0.08, "is_grasped": 1, "temperature": 30, "time": 1.5}'
```

### Logging and CSV export

`Logger(n)` keeps copies of the last `n` state/command pairs; `Logger(0)`
keeps nothing. `flush()` returns them oldest first as `Record` objects and
empties the buffer. `log_to_csv` writes a header line followed by one line
per record, or an empty string for no records.

```python
from fcikit.logger import Logger, RawRobotCommand
from fcikit.robot_state import RobotState
from fcikit.log import log_to_csv

logger = Logger(50)
logger.log(RobotState(), RawRobotCommand())
records = logger.flush()
csv_text = log_to_csv(records)
```

## What this package does not do

It does not connect to a robot or gripper, send commands, run control loops,
load a kinematic or dynamic model, or set realtime scheduling. The exception
classes for network, protocol, command, model and realtime failures are
provided for applications that do such work; nothing in the package raises
them itself.

## Running the tests

```
pip install "fcikit[test]"
pytest
```