"""
Unit quaternion helpers built on numpy.

Quaternions are stored as float64 arrays in (w, x, y, z) order. Every function
returns a new array and leaves its inputs untouched.
"""

import numpy as np

WORLD_UP = np.array([0.0, 1.0, 0.0])


def identity():
    return np.array([1.0, 0.0, 0.0, 0.0])


def normalize(q):
    """
    Scale a quaternion back to unit length.

    Args:
        q (array-like): Quaternion in (w, x, y, z) order

    Returns:
        np.ndarray: Unit quaternion

    Raises:
        ValueError: If the quaternion has zero length
    """
    q = np.asarray(q, dtype=np.float64)
    norm = np.linalg.norm(q)
    if norm == 0.0 or not np.isfinite(norm):
        raise ValueError(f"Cannot normalize quaternion {q.tolist()}")
    return q / norm


def from_axis_angle(axis, degrees):
    """
    Build the rotation of `degrees` around `axis`.

    Args:
        axis (array-like): Rotation axis, need not be unit length
        degrees (float): Rotation angle, counter-clockwise when looking down the axis

    Returns:
        np.ndarray: Unit quaternion
    """
    axis = np.asarray(axis, dtype=np.float64)
    length = np.linalg.norm(axis)
    if length == 0.0:
        raise ValueError("Rotation axis must be non-zero")
    half_angle = np.radians(degrees) / 2.0
    xyz = axis / length * np.sin(half_angle)
    return np.array([np.cos(half_angle), xyz[0], xyz[1], xyz[2]])


def multiply(a, b):
    """Hamilton product a * b (apply b first, then a)."""
    w1, x1, y1, z1 = a
    w2, x2, y2, z2 = b
    return np.array(
        [
            w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
            w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
            w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2,
            w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2,
        ]
    )


def conjugate(q):
    w, x, y, z = q
    return np.array([w, -x, -y, -z])


def rotate_vector(q, vector):
    """Rotate a 3D vector by a unit quaternion."""
    pure = np.array([0.0, *np.asarray(vector, dtype=np.float64)])
    return multiply(multiply(q, pure), conjugate(q))[1:]


def angle_between(a, b):
    """
    Shortest-arc angle in degrees between two orientations.

    q and -q describe the same rotation, so the sign of the dot product is ignored.
    """
    dot = abs(float(np.dot(normalize(a), normalize(b))))
    return float(np.degrees(2.0 * np.arccos(min(dot, 1.0))))


def to_matrix(q):
    w, x, y, z = normalize(q)
    return np.array(
        [
            [1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)],
            [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)],
            [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)],
        ]
    )


def is_unit(q, tolerance=1e-6):
    return abs(float(np.linalg.norm(q)) - 1.0) <= tolerance
