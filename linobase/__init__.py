"""Kinematics, IMU axis presets, binary messages and serial framing for a small robot base."""

__version__ = "0.1.0"

__all__ = [
    "geometry_msgs",
    "imu_config",
    "kinematics",
    "lino_pid",
    "message",
    "protocol",
    "sensor_msgs",
    "services",
    "std_msgs",
    "tf",
]