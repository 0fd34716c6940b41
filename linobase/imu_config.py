"""IMU board presets: which chips are fitted and how their axes map."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

BAUD = 115200


class ImuBoard(Enum):
    """Supported IMU breakout boards."""

    SEN10724 = "SEN10724"
    GY85 = "GY85"
    GY80 = "GY80"
    OTHER = "OTHER"


DEFAULT_BOARD = ImuBoard.GY85


@dataclass(frozen=True)
class AxisMap:
    """Read order and sign of each body axis from a sensor's raw axes."""

    x_axis: int = 0
    y_axis: int = 1
    z_axis: int = 2
    x_invert: int = 1
    y_invert: int = 1
    z_invert: int = 1

    def __post_init__(self) -> None:
        for axis in (self.x_axis, self.y_axis, self.z_axis):
            if axis not in (0, 1, 2):
                raise ValueError(f"axis index {axis} is not 0, 1 or 2")
        for sign in (self.x_invert, self.y_invert, self.z_invert):
            if sign not in (1, -1):
                raise ValueError(f"axis inversion {sign} is not 1 or -1")

    def apply(self, raw: Sequence[float]) -> tuple[float, float, float]:
        """Reorder and sign a raw three-axis reading into body axes."""
        if len(raw) != 3:
            raise ValueError(f"expected three axes, got {len(raw)}")
        return (
            raw[self.x_axis] * self.x_invert,
            raw[self.y_axis] * self.y_invert,
            raw[self.z_axis] * self.z_invert,
        )


@dataclass(frozen=True)
class BoardConfig:
    """Chips fitted on a board and their axis maps."""

    accelerometer: str
    accelerometer_axes: AxisMap
    gyroscope: str
    gyroscope_axes: AxisMap
    magnetometer: str
    magnetometer_axes: AxisMap


_BOARDS = {
    ImuBoard.SEN10724: BoardConfig(
        "ADXL345", AxisMap(1, 0, 2, 1, -1, 1),
        "ITG3205", AxisMap(1, 0, 2, 1, 1, 1),
        "HMC5883L", AxisMap(0, 2, 1, -1, -1, -1),
    ),
    ImuBoard.GY85: BoardConfig(
        "ADXL345", AxisMap(0, 1, 2, 1, 1, 1),
        "ITG3205", AxisMap(0, 1, 2, 1, 1, 1),
        "HMC5883L", AxisMap(0, 2, 1, 1, 1, 1),
    ),
    ImuBoard.GY80: BoardConfig(
        "ADXL345", AxisMap(0, 1, 2, 1, 1, 1),
        "L3G4200D", AxisMap(0, 1, 2, 1, 1, 1),
        "HMC5883L", AxisMap(0, 2, 1, 1, 1, 1),
    ),
    ImuBoard.OTHER: BoardConfig(
        "ADXL345", AxisMap(1, 0, 2, 1, -1, 1),
        "ITG3205", AxisMap(1, 0, 2, 1, -1, 1),
        "HMC5883L", AxisMap(0, 2, 1, -1, -1, -1),
    ),
}


def board_config(board: ImuBoard | str = DEFAULT_BOARD) -> BoardConfig:
    """Return the preset for a board, given as an ImuBoard or its name."""
    if not isinstance(board, ImuBoard):
        try:
            board = ImuBoard[str(board).upper()]
        except KeyError:
            raise ValueError(f"unknown IMU board {board!r}") from None
    return _BOARDS[board]