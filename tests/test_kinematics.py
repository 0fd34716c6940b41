import pytest

from linobase.kinematics import Kinematics, MotorOutput, Velocities


@pytest.fixture
def base():
    return Kinematics(90, 0.1, 0.2, 8)


def test_max_rpm_maps_to_full_pwm(base):
    assert base.rpm_to_pwm(90) == 255
    assert base.rpm_to_pwm(-90) == -255


def test_pwm_truncates_toward_zero(base):
    assert base.rpm_to_pwm(45) == 127
    assert base.rpm_to_pwm(-45) == -127


def test_pwm_resolution(base):
    assert base.pwm_resolution == 255


def test_zero_velocity_gives_zero_rpm(base):
    assert base.get_rpm(0, 0, 0) == MotorOutput(0, 0, 0, 0)


def test_forward_motion_all_wheels_equal(base):
    rpm = base.get_rpm(0.3, 0, 0)
    assert rpm.motor1 == rpm.motor2 == rpm.motor3 == rpm.motor4 > 0


def test_rotation_sides_opposite(base):
    rpm = base.get_rpm(0, 0, 1.0)
    assert rpm.motor1 == rpm.motor3 == -rpm.motor2 == -rpm.motor4
    assert rpm.motor2 > 0


def test_strafe_diagonals(base):
    rpm = base.get_rpm(0, 0.3, 0)
    assert rpm.motor2 == rpm.motor3 == -rpm.motor1 == -rpm.motor4
    assert rpm.motor2 > 0


def test_pwm_matches_rpm_scaling(base):
    rpm = base.get_rpm(0.2, 0.1, 0.5)
    pwm = base.get_pwm(0.2, 0.1, 0.5)
    assert pwm == MotorOutput(
        base.rpm_to_pwm(rpm.motor1),
        base.rpm_to_pwm(rpm.motor2),
        base.rpm_to_pwm(rpm.motor3),
        base.rpm_to_pwm(rpm.motor4),
    )


def test_four_wheel_round_trip(base):
    rpm = base.get_rpm(0.4, 0.2, 0.8)
    vel = base.get_velocities(rpm.motor1, rpm.motor2, rpm.motor3, rpm.motor4)
    assert vel.linear_x == pytest.approx(0.4, rel=0.05)
    assert vel.linear_y == pytest.approx(0.2, rel=0.1)


def test_two_wheel_averages_with_integer_division(base):
    assert base.get_velocities(1, 2) == base.get_velocities(1, 1)
    assert base.get_velocities(1, 2).angular_z == 0
    assert base.get_velocities(-1, -2) == base.get_velocities(-1, -1)


def test_two_wheel_has_no_lateral_velocity(base):
    vel = base.get_velocities(30, 60)
    assert vel.linear_y == 0
    assert vel.angular_z > 0


def test_stationary_velocities(base):
    assert base.get_velocities(0, 0, 0, 0) == Velocities()


def test_three_readings_rejected(base):
    with pytest.raises(TypeError):
        base.get_velocities(1, 2, 3)