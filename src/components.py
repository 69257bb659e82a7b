import math
from enum import Enum

import numpy as np

import quaternion


class Position:
    """
    Represents a 3D position in space.

    Attributes:
        x (float): The x-coordinate.
        y (float): The y-coordinate.
        z (float): The z-coordinate.
    """
    def __init__(self, x=0.0, y=0.0, z=0.0):
        self.x = x
        self.y = y
        self.z = z


class Orientation:
    """
    Represents a 3D orientation as a unit quaternion.

    The quaternion is kept in (w, x, y, z) order and is normalized on
    construction. Rotation systems update it in place.

    Attributes:
        quaternion (np.ndarray): The unit quaternion.
    """
    def __init__(self, w=1.0, x=0.0, y=0.0, z=0.0):
        self.quaternion = quaternion.normalize([w, x, y, z])

    @classmethod
    def from_axis_angle(cls, axis, degrees):
        return cls(*quaternion.from_axis_angle(axis, degrees))

    @property
    def up(self):
        """The object's local up vector expressed in world space."""
        return quaternion.rotate_vector(self.quaternion, quaternion.WORLD_UP)

    def as_matrix(self):
        return quaternion.to_matrix(self.quaternion)

    def __repr__(self):
        w, x, y, z = self.quaternion
        return f"Orientation(w={w:.6f}, x={x:.6f}, y={y:.6f}, z={z:.6f})"


class Scale:
    """
    Represents a 3D scale factor.

    Attributes:
        x (float): The scale factor along the x-axis.
        y (float): The scale factor along the y-axis.
        z (float): The scale factor along the z-axis.
    """
    def __init__(self, x=1.0, y=1.0, z=1.0):
        self.x = x
        self.y = y
        self.z = z


class AxisMode(Enum):
    """Which up-axis a rotation spins around."""

    WORLD_UP = "world"
    LOCAL_UP = "local"

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        if normalized.endswith("_up"):
            normalized = normalized[: -len("_up")]
        for mode in cls:
            if mode.value == normalized:
                return mode
        choices = ", ".join(mode.value for mode in cls)
        raise ValueError(f"Unknown axis mode '{value}', expected one of: {choices}")


class RotationConfig:
    """
    Rotation settings for one entity, fixed at construction.

    Attributes:
        rate_per_second (float): Degrees of rotation per second. Negative values spin the other way.
        axis_mode (AxisMode): Whether to spin around the world or the local up-axis.
    """
    def __init__(self, rate_per_second, axis_mode=AxisMode.WORLD_UP):
        if isinstance(rate_per_second, bool) or not isinstance(
            rate_per_second, (int, float, np.floating, np.integer)
        ):
            raise ValueError("Rotation rate must be a number")
        if not math.isfinite(rate_per_second):
            raise ValueError(f"Rotation rate must be finite, got {rate_per_second}")
        self._rate_per_second = float(rate_per_second)
        self._axis_mode = AxisMode.parse(axis_mode)

    @property
    def rate_per_second(self):
        return self._rate_per_second

    @property
    def axis_mode(self):
        return self._axis_mode

    def __repr__(self):
        return (
            f"RotationConfig(rate_per_second={self.rate_per_second}, "
            f"axis_mode={self.axis_mode.value})"
        )
