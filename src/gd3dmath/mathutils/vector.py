"""
2D/3D/4D vector value types and vector math.

Vector2, Vector3 and Vector4 are immutable named tuples, so they index, unpack,
hash and compare like tuples and convert straight to numpy arrays. The
arithmetic operators are overridden to act component-wise:

    Vector3(1, 2, 3) + Vector3(1, 1, 1)   -> Vector3(2, 3, 4)
    Vector3(1, 2, 3) * 2                  -> Vector3(2, 4, 6)

The generic helpers (lerp, hermite, maximize, ...) work on any of the three
types and return the type of their first argument.

Matrix transforms follow the row-vector convention used throughout the package
(v' = v * M, translation in row 3) and accept any 4x4 indexable: Matrix4,
tuple-of-tuples, or a numpy array.
"""
import math
from typing import NamedTuple

import numpy as np

from .scalar import ieee_div


class _VectorOps:
    """Component-wise operators shared by the vector named tuples."""
    __slots__ = ()

    def __add__(self, other):
        return type(self)(*(a + b for a, b in zip(self, other)))

    def __sub__(self, other):
        return type(self)(*(a - b for a, b in zip(self, other)))

    def __mul__(self, scalar):
        return type(self)(*(a * scalar for a in self))

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        return type(self)(*(ieee_div(a, scalar) for a in self))

    def __neg__(self):
        return type(self)(*(-a for a in self))

    def dot(self, other):
        return dot(self, other)

    def length(self):
        return length(self)

    def length_sq(self):
        return length_sq(self)

    def normalized(self):
        return normalize(self)

    def to_tuple(self):
        return tuple(self)


class _Vector2(NamedTuple):
    x: float = 0.0
    y: float = 0.0


class _Vector3(NamedTuple):
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


class _Vector4(NamedTuple):
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0


# NamedTuple cannot take mixins directly, so the operators are layered on a subclass
class Vector2(_VectorOps, _Vector2):
    __slots__ = ()


class Vector3(_VectorOps, _Vector3):
    __slots__ = ()

    def cross(self, other):
        return cross3(self, other)


class Vector4(_VectorOps, _Vector4):
    __slots__ = ()


# ============================================================================
# Component-wise helpers (any dimension)
# ============================================================================

def add(a, b):
    """a + b"""
    return type(a)(*(p + q for p, q in zip(a, b)))

def subtract(a, b):
    """a - b, on every component including w."""
    return type(a)(*(p - q for p, q in zip(a, b)))

def scale(a, s):
    return type(a)(*(p * s for p in a))

def dot(a, b):
    return sum(p * q for p, q in zip(a, b))

def length_sq(a):
    return dot(a, a)

def length(a):
    return math.sqrt(dot(a, a))

def normalize(a):
    """Unit-length copy of a. A zero vector stays zero."""
    # hypot does not underflow for tiny components
    mag = math.hypot(*a)
    if mag == 0.0:
        return type(a)()
    return type(a)(*(ieee_div(p, mag) for p in a))

def lerp(a, b, s):
    return type(a)(*(p + s * (q - p) for p, q in zip(a, b)))

def maximize(a, b):
    return type(a)(*(p if p > q else q for p, q in zip(a, b)))

def minimize(a, b):
    return type(a)(*(p if p < q else q for p, q in zip(a, b)))

def barycentric(a, b, c, f, g):
    """Point a + f(b - a) + g(c - a) of the triangle abc."""
    return type(a)(*(pa + f * (pb - pa) + g * (pc - pa) for pa, pb, pc in zip(a, b, c)))

def catmull_rom(a, b, c, d, s):
    """Catmull-Rom spline through b (s=0) and c (s=1), with a and d as the outer control points."""
    s2 = s * s
    s3 = s2 * s
    wa = -s3 + 2.0 * s2 - s
    wb = 3.0 * s3 - 5.0 * s2 + 2.0
    wc = -3.0 * s3 + 4.0 * s2 + s
    wd = s3 - s2
    return type(a)(*((wa * pa + wb * pb + wc * pc + wd * pd) * 0.5
                     for pa, pb, pc, pd in zip(a, b, c, d)))

def hermite(a, t1, b, t2, s):
    """Hermite spline from position a (tangent t1) to position b (tangent t2)."""
    s2 = s * s
    s3 = s2 * s
    h1 = 2.0 * s3 - 3.0 * s2 + 1.0
    h2 = -2.0 * s3 + 3.0 * s2
    h3 = s3 - 2.0 * s2 + s
    h4 = s3 - s2
    return type(a)(*(h1 * pa + h2 * pb + h3 * pt1 + h4 * pt2
                     for pa, pt1, pb, pt2 in zip(a, t1, b, t2)))


# ============================================================================
# Dimension-specific products
# ============================================================================

def ccw(a, b):
    """Z component of the 2D cross product. Positive when b is counterclockwise from a."""
    return a[0] * b[1] - a[1] * b[0]

def cross3(a, b):
    return Vector3(
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0]
    )

def cross4(a, b, c):
    """4D cross product: the vector orthogonal to a, b and c."""
    ax, ay, az, aw = a
    bx, by, bz, bw = b
    cx, cy, cz, cw = c
    return Vector4(
        (bz * cw - bw * cz) * ay - (by * cw - bw * cy) * az + (by * cz - bz * cy) * aw,
        (bw * cz - bz * cw) * ax - (bw * cx - bx * cw) * az + (bz * cx - bx * cz) * aw,
        (by * cw - bw * cy) * ax - (bx * cw - bw * cx) * ay + (bx * cy - by * cx) * aw,
        (bz * cy - by * cz) * ax - (bz * cx - bx * cz) * ay + (by * cx - bx * cy) * az
    )


# ============================================================================
# Matrix transforms (row vector * 4x4 matrix)
# ============================================================================

def vec4_transform(v, m):
    """(x, y, z, w) * M."""
    x, y, z, w = v[0], v[1], v[2], v[3]
    return Vector4(
        x * m[0][0] + y * m[1][0] + z * m[2][0] + w * m[3][0],
        x * m[0][1] + y * m[1][1] + z * m[2][1] + w * m[3][1],
        x * m[0][2] + y * m[1][2] + z * m[2][2] + w * m[3][2],
        x * m[0][3] + y * m[1][3] + z * m[2][3] + w * m[3][3]
    )

def vec3_transform(v, m):
    """(x, y, z, 1) * M, returning the homogeneous result."""
    x, y, z = v[0], v[1], v[2]
    return Vector4(
        x * m[0][0] + y * m[1][0] + z * m[2][0] + m[3][0],
        x * m[0][1] + y * m[1][1] + z * m[2][1] + m[3][1],
        x * m[0][2] + y * m[1][2] + z * m[2][2] + m[3][2],
        x * m[0][3] + y * m[1][3] + z * m[2][3] + m[3][3]
    )

def vec3_transform_coord(v, m):
    """Transform a point (w = 1) and project the result back into w = 1."""
    x, y, z = v[0], v[1], v[2]
    w = x * m[0][3] + y * m[1][3] + z * m[2][3] + m[3][3]
    return Vector3(
        ieee_div(x * m[0][0] + y * m[1][0] + z * m[2][0] + m[3][0], w),
        ieee_div(x * m[0][1] + y * m[1][1] + z * m[2][1] + m[3][1], w),
        ieee_div(x * m[0][2] + y * m[1][2] + z * m[2][2] + m[3][2], w)
    )

def vec3_transform_normal(v, m):
    """Transform a direction (w = 0): rotation/scale only, translation ignored."""
    x, y, z = v[0], v[1], v[2]
    return Vector3(
        x * m[0][0] + y * m[1][0] + z * m[2][0],
        x * m[0][1] + y * m[1][1] + z * m[2][1],
        x * m[0][2] + y * m[1][2] + z * m[2][2]
    )

def vec2_transform(v, m):
    """(x, y, 0, 1) * M, returning the homogeneous result."""
    x, y = v[0], v[1]
    return Vector4(
        x * m[0][0] + y * m[1][0] + m[3][0],
        x * m[0][1] + y * m[1][1] + m[3][1],
        x * m[0][2] + y * m[1][2] + m[3][2],
        x * m[0][3] + y * m[1][3] + m[3][3]
    )

def vec2_transform_coord(v, m):
    x, y = v[0], v[1]
    w = x * m[0][3] + y * m[1][3] + m[3][3]
    return Vector2(
        ieee_div(x * m[0][0] + y * m[1][0] + m[3][0], w),
        ieee_div(x * m[0][1] + y * m[1][1] + m[3][1], w)
    )

def vec2_transform_normal(v, m):
    x, y = v[0], v[1]
    return Vector2(
        x * m[0][0] + y * m[1][0],
        x * m[0][1] + y * m[1][1]
    )

def transform_coord_array(points, m):
    """Batch vec3_transform_coord over an (N, 3) array of points.

    Returns an (N, 3) float32 array. Rows whose w comes out as zero hold
    inf/nan, same as the scalar path.
    """
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 3)
    mat = np.asarray(m, dtype=np.float64)
    if mat.shape != (4, 4):
        raise ValueError(f"Expected a 4x4 matrix, got shape {mat.shape}")
    homogeneous = pts @ mat[:3, :] + mat[3, :]
    with np.errstate(divide='ignore', invalid='ignore'):
        result = homogeneous[:, :3] / homogeneous[:, 3:4]
    return result.astype(np.float32)
