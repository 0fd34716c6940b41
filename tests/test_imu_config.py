import pytest

from linobase.imu_config import (
    BAUD,
    DEFAULT_BOARD,
    AxisMap,
    ImuBoard,
    board_config,
)


def test_default_board_is_gy85():
    assert board_config() == board_config(ImuBoard.GY85)
    assert DEFAULT_BOARD is ImuBoard.GY85
    assert BAUD == 115200


def test_gy80_uses_l3g4200d_gyro():
    assert board_config(ImuBoard.GY80).gyroscope == "L3G4200D"
    assert board_config(ImuBoard.GY85).gyroscope == "ITG3205"


@pytest.mark.parametrize("board", list(ImuBoard))
def test_common_chips(board):
    config = board_config(board)
    assert config.accelerometer == "ADXL345"
    assert config.magnetometer == "HMC5883L"


def test_lookup_by_name():
    assert board_config("gy80") == board_config(ImuBoard.GY80)
    with pytest.raises(ValueError):
        board_config("MPU9250")


def test_gy85_magnetometer_swaps_y_and_z():
    mag = board_config(ImuBoard.GY85).magnetometer_axes
    assert mag.apply((10, 20, 30)) == (10, 30, 20)


def test_sen10724_accelerometer_swaps_and_inverts():
    acc = board_config(ImuBoard.SEN10724).accelerometer_axes
    assert acc.apply((4, 5, 6)) == (5, -4, 6)


@pytest.mark.parametrize("board", list(ImuBoard))
def test_maps_are_signed_permutations(board):
    config = board_config(board)
    raw = (3, 7, 11)
    for axes in (
        config.accelerometer_axes,
        config.gyroscope_axes,
        config.magnetometer_axes,
    ):
        mapped = axes.apply(raw)
        assert sorted(abs(v) for v in mapped) == sorted(raw)


def test_identity_map():
    assert AxisMap().apply((1.5, -2.5, 3.5)) == (1.5, -2.5, 3.5)


def test_invalid_axis_maps():
    with pytest.raises(ValueError):
        AxisMap(x_axis=3)
    with pytest.raises(ValueError):
        AxisMap(y_invert=0)


def test_apply_needs_three_values():
    with pytest.raises(ValueError):
        AxisMap().apply((1, 2))