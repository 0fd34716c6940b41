# linobase

Building blocks for the host side of a small wheeled robot base:

- **Kinematics**: turn a commanded body velocity into per-motor RPM and
  PWM values, and turn measured motor RPMs back into body velocities.
- **IMU configuration**: the chips fitted on common IMU boards and the
  axis order and sign of their accelerometer, gyroscope and magnetometer.
- **Messages**: little-endian binary messages (standard scalar types,
  geometry, sensor, PID-gain and service messages).
- **Protocol**: framing and checksums for carrying those messages over a
  serial link, and a streaming decoder for incoming frames.

It needs only the standard library and Python 3.10 or later.

## Installation

```
pip install .
```

## Kinematics

```python
from linobase.kinematics import Kinematics

base = Kinematics(motor_max_rpm=90, wheel_diameter=0.1, base_width=0.235, pwm_bits=8)

rpm = base.get_rpm(0.3, 0.0, 0.5)            # MotorOutput(motor1..motor4)
pwm = base.get_pwm(0.3, 0.0, 0.5)            # RPM scaled against max RPM onto 0..255
vel = base.get_velocities(40, 60)            # differential drive: two motors
vel = base.get_velocities(40, 60, 40, 60)    # mecanum: four motors
```

`get_velocities` returns a `Velocities(linear_x, linear_y, angular_z)`;
with two readings `linear_y` is always 0. Passing three readings raises
`TypeError`. Motor order is front-left, front-right, rear-left, rear-right.

## Messages

Every message class is a dataclass derived from
`linobase.message.Message`. It can serialize itself to bytes and be read
back, and carries its `type_name` and `md5sum`:

```python
from linobase.geometry_msgs import Point
from linobase.std_msgs import String

data = Point(x=1.0, y=2.0, z=3.0).serialize()
point = Point.deserialize(data)

greeting = String.deserialize(String(data="hello").serialize())
```

The messages available are:

- `linobase.std_msgs`: `Empty`, `String`, `Float32`, `Float64`, `Int16`,
  `Int32`, `Int64`, `UInt8`, `Time`
- `linobase.geometry_msgs`: `Point`, `Point32`, `Polygon`, `Pose2D`
- `linobase.sensor_msgs`: `ChannelFloat32`, `LaserEcho`, `PointField`
  (with the `PointFieldType` enumeration), `RegionOfInterest`
- `linobase.lino_pid`: `LinoPID`
- `linobase.services`: `RequestParamRequest`, `RequestParamResponse`,
  `FrameGraphRequest`, `FrameGraphResponse`

Strings travel as a 32-bit length followed by UTF-8 bytes; variable
arrays as a one-byte count padded to four bytes, so they hold at most 255
elements. Reading past the end of the data raises `ValueError`.
`linobase.message.Writer` and `Reader` are the encoder and decoder the
messages use, and can be used to write new message types.

`linobase.tf.quaternion_from_yaw` returns the `Quaternion` for a rotation
about the z axis.

## Serial protocol

```python
from linobase.protocol import FrameDecoder, encode_message
from linobase.lino_pid import LinoPID

frame = encode_message(125, LinoPID(p=0.6, d=0.5, i=0.3), max_size=512)

decoder = FrameDecoder()
for received in decoder.feed(frame):
    print(received.topic_id, LinoPID.deserialize(received.payload))
```

`encode_frame` wraps raw payload bytes the same way. Both raise
`FrameTooLargeError` when a frame would exceed `max_size` (512 by
default). `FrameDecoder.feed` accepts bytes in pieces of any size and
returns the `Frame` objects they complete. Frames with a wrong size or
message checksum are dropped; frames with another protocol version are
dropped and counted in `version_mismatches`. `reset()` abandons a partly
received frame.

## IMU boards

```python
from linobase.imu_config import ImuBoard, board_config

config = board_config(ImuBoard.GY85)          # or board_config("gy85")
print(config.gyroscope)                       # "ITG3205"
x, y, z = config.magnetometer_axes.apply((10, 20, 30))
```

Boards: `SEN10724`, `GY85` (the default), `GY80` and `OTHER`. An unknown
name raises `ValueError`.

## What it does not do

The package builds and parses bytes; it does not open a serial port or
read the IMU. It has no node that registers publishers and subscribers,
negotiates topics, synchronises time with the host or requests
parameters: the caller sends encoded frames and dispatches decoded ones
by topic id itself.

## Running the tests

```
pip install .[test]
pytest
```