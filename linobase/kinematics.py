"""Wheel kinematics for differential and mecanum drive bases."""

from __future__ import annotations

import math
from dataclasses import dataclass


def _c_div(numerator: int, denominator: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


@dataclass(frozen=True)
class MotorOutput:
    """Per-motor command: front-left, front-right, rear-left, rear-right."""

    motor1: int = 0
    motor2: int = 0
    motor3: int = 0
    motor4: int = 0


@dataclass(frozen=True)
class Velocities:
    """Body velocities in m/s and rad/s."""

    linear_x: float = 0.0
    linear_y: float = 0.0
    angular_z: float = 0.0


class Kinematics:
    """Converts between body velocities and motor RPM/PWM."""

    def __init__(
        self,
        motor_max_rpm: int,
        wheel_diameter: float,
        base_width: float,
        pwm_bits: int,
    ) -> None:
        self.max_rpm = motor_max_rpm
        self.wheel_diameter = wheel_diameter
        self.base_width = base_width
        self.circumference = math.pi * wheel_diameter
        self.pwm_resolution = 2**pwm_bits - 1

    def get_rpm(
        self, linear_x: float, linear_y: float, angular_z: float
    ) -> MotorOutput:
        """Target RPM of each motor for the requested body velocity."""
        tangential_vel = angular_z * 60 * self.base_width
        x_rpm = linear_x * 60 / self.circumference
        y_rpm = linear_y * 60 / self.circumference
        tan_rpm = tangential_vel / self.circumference
        return MotorOutput(
            motor1=int(x_rpm - y_rpm - tan_rpm),
            motor2=int(x_rpm + y_rpm + tan_rpm),
            motor3=int(x_rpm + y_rpm - tan_rpm),
            motor4=int(x_rpm - y_rpm + tan_rpm),
        )

    def get_pwm(
        self, linear_x: float, linear_y: float, angular_z: float
    ) -> MotorOutput:
        """Target PWM of each motor for the requested body velocity."""
        rpm = self.get_rpm(linear_x, linear_y, angular_z)
        return MotorOutput(
            motor1=self.rpm_to_pwm(rpm.motor1),
            motor2=self.rpm_to_pwm(rpm.motor2),
            motor3=self.rpm_to_pwm(rpm.motor3),
            motor4=self.rpm_to_pwm(rpm.motor4),
        )

    def get_velocities(
        self,
        motor1: int,
        motor2: int,
        motor3: int | None = None,
        motor4: int | None = None,
    ) -> Velocities:
        """Body velocity from measured RPM of two or four motors."""
        wheel_travel = self.wheel_diameter * math.pi
        if motor3 is None and motor4 is None:
            average_rpm_x = _c_div(motor1 + motor2, 2)
            average_rpm_a = _c_div(motor2 - motor1, 2)
            return Velocities(
                linear_x=average_rpm_x / 60 * wheel_travel,
                linear_y=0.0,
                angular_z=average_rpm_a / 60 * wheel_travel / self.base_width,
            )
        if motor3 is None or motor4 is None:
            raise TypeError("give either two or four motor readings")
        average_rpm_x = _c_div(motor1 + motor2 + motor3 + motor4, 4)
        average_rpm_y = _c_div(-motor1 + motor2 + motor3 - motor4, 4)
        average_rpm_a = _c_div(-motor1 + motor2 - motor3 + motor4, 4)
        return Velocities(
            linear_x=average_rpm_x / 60 * wheel_travel,
            linear_y=average_rpm_y / 60 * wheel_travel,
            angular_z=average_rpm_a / 60 * wheel_travel / self.base_width,
        )

    def rpm_to_pwm(self, rpm: int) -> int:
        """Scale an RPM against the motor maximum onto 0..255."""
        return int(rpm / self.max_rpm * 255)