"""Transform math: Unity TRS composition and three.js matrix layout."""

from __future__ import annotations

import math

from sceneport.models.records import TransformRecord, Vector3

Quaternion = tuple[float, float, float, float]  # x, y, z, w
Matrix4 = list[list[float]]  # row-major


def _axis_quaternion(axis: int, degrees: float) -> Quaternion:
    half = math.radians(degrees) / 2
    xyz = [0.0, 0.0, 0.0]
    xyz[axis] = math.sin(half)
    return (xyz[0], xyz[1], xyz[2], math.cos(half))


def _multiply(a: Quaternion, b: Quaternion) -> Quaternion:
    ax, ay, az, aw = a
    bx, by, bz, bw = b
    return (
        aw * bx + ax * bw + ay * bz - az * by,
        aw * by - ax * bz + ay * bw + az * bx,
        aw * bz + ax * by - ay * bx + az * bw,
        aw * bw - ax * bx - ay * by - az * bz,
    )


def euler_to_quaternion(euler_degrees: Vector3) -> Quaternion:
    """Unity ``Quaternion.Euler``: rotate about Z, then X, then Y."""
    x, y, z = euler_degrees
    qx = _axis_quaternion(0, x)
    qy = _axis_quaternion(1, y)
    qz = _axis_quaternion(2, z)
    return _multiply(_multiply(qy, qx), qz)


def quaternion_to_matrix(q: Quaternion) -> list[list[float]]:
    """3x3 rotation matrix of a unit quaternion."""
    x, y, z, w = q
    xx, yy, zz = x * x, y * y, z * z
    xy, xz, yz = x * y, x * z, y * z
    wx, wy, wz = w * x, w * y, w * z
    return [
        [1 - 2 * (yy + zz), 2 * (xy - wz), 2 * (xz + wy)],
        [2 * (xy + wz), 1 - 2 * (xx + zz), 2 * (yz - wx)],
        [2 * (xz - wy), 2 * (yz + wx), 1 - 2 * (xx + yy)],
    ]


def trs(position: Vector3, euler_degrees: Vector3, scale: Vector3) -> Matrix4:
    """Compose translate * rotate * scale into a row-major 4x4 matrix."""
    rotation = quaternion_to_matrix(euler_to_quaternion(euler_degrees))
    matrix = [
        [rotation[row][col] * scale[col] for col in range(3)] + [position[row]]
        for row in range(3)
    ]
    matrix.append([0.0, 0.0, 0.0, 1.0])
    return matrix


def to_three_layout(matrix: Matrix4) -> list[float]:
    """Flatten column-major, negating m23 to switch coordinate handedness."""
    flat = [matrix[row][col] for col in range(4) for row in range(4)]
    flipped = -matrix[2][3]
    # Keep 0 as 0 rather than -0.0 in the JSON output.
    flat[14] = flipped if flipped != 0 else 0.0
    return flat


def transform_matrix(transform: TransformRecord) -> list[float]:
    """Local-to-parent matrix of *transform* in three.js layout.

    Rotation is stored in radians and converted to degrees before the Euler
    composition, which works in degrees.
    """
    euler_degrees = (
        math.degrees(transform.rotation[0]),
        math.degrees(transform.rotation[1]),
        math.degrees(transform.rotation[2]),
    )
    return to_three_layout(trs(transform.position, euler_degrees, transform.scale))
