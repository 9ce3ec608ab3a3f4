"""
4x4 matrix value type, matrix algebra, and transform/view/projection builders.

Conventions (Direct3D style):
    - Row-major storage, rows are tuples: m[row][col]. The flat layout m.n has
      the translation at n[12], n[13], n[14] (= m[3][0..2]).
    - Points are row vectors multiplied on the left: v' = v * M.
    - Composites read left to right in the order transforms apply:
      "rotate then translate" is mat_mul(R, T).
    - Projections map the view frustum to x, y in [-1, 1] and z in [0, 1].

Angles are radians. Degenerate numeric input (zn == zf, zero extents, ...)
yields inf/nan entries rather than raising; the one guarded case is invert()
of a matrix whose determinant is exactly zero, which returns the identity.
"""
import warnings

import numpy as np

from gd3dmath import settings
from .scalar import ieee_cos, ieee_div, ieee_sin, ieee_tan
from .vector import Vector3, cross3, dot, normalize, subtract
from .plane import normalize_plane


class Matrix4(tuple):
    """
    Immutable 4x4 matrix stored as four row tuples.

    Matrix4()                  -> identity
    Matrix4(m11, m12, ..., m44) -> 16 values in row-major order
    Matrix4(rows)              -> 4 rows of 4, a flat sequence of 16, or a (4, 4) numpy array
    """
    __slots__ = ()

    def __new__(cls, *values):
        if not values:
            return _IDENTITY
        if len(values) == 16:
            flat = [float(v) for v in values]
        elif len(values) == 1:
            arr = np.asarray(values[0], dtype=np.float64)
            if arr.shape not in ((4, 4), (16,)):
                raise ValueError(f"Expected 4x4 rows or 16 values, got shape {arr.shape}")
            flat = arr.reshape(16).tolist()
        else:
            raise ValueError(f"Invalid number of arguments. Expected 0, 1 or 16, got {len(values)}.")
        return tuple.__new__(cls, (tuple(flat[0:4]), tuple(flat[4:8]), tuple(flat[8:12]), tuple(flat[12:16])))

    def __repr__(self):
        return f"Matrix4({tuple(self)})"

    def __matmul__(self, other):
        """self @ other, where other is any 4x4: Matrix4, nested rows or a numpy array."""
        other = _as_matrix(other)
        if other is None:
            return NotImplemented
        return mat_mul(self, other)

    def __rmatmul__(self, other):
        other = _as_matrix(other)
        if other is None:
            return NotImplemented
        return mat_mul(other, self)

    @property
    def n(self):
        """The 16 entries in row-major order."""
        return self[0] + self[1] + self[2] + self[3]

    def to_array(self, dtype=np.float32):
        """Copy into a (4, 4) numpy array, float32 by default for GPU upload."""
        return np.array(self, dtype=dtype)


def _rows(r0, r1, r2, r3):
    # Trusted internal constructor: rows are already 4-tuples of floats
    return tuple.__new__(Matrix4, (r0, r1, r2, r3))


_IDENTITY = _rows(
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 0.0, 1.0)
)


def _as_matrix(value):
    if isinstance(value, Matrix4):
        return value
    try:
        return Matrix4(value)
    except (TypeError, ValueError):
        return None


def unpack_args(*args):
    """Accept either three scalars or one 3-sequence. Returns floats."""
    if len(args) == 3:
        x, y, z = args
    elif len(args) == 1 and len(args[0]) == 3:
        x, y, z = args[0]
    else:
        raise ValueError("Invalid number of arguments. Expected either a tuple (x, y, z) or three individual values.")
    return float(x), float(y), float(z)


# =============================================================================
# Algebra
# =============================================================================

def identity():
    """Return the 4x4 identity matrix."""
    return _IDENTITY

def is_identity(m, tolerance=1e-6):
    return all(abs(m[r][c] - _IDENTITY[r][c]) <= tolerance for r in range(4) for c in range(4))

def mat_mul(a, b):
    """Matrix product a * b. Applying the result equals applying a, then b."""
    (a00, a01, a02, a03), (a10, a11, a12, a13), (a20, a21, a22, a23), (a30, a31, a32, a33) = a
    (b00, b01, b02, b03), (b10, b11, b12, b13), (b20, b21, b22, b23), (b30, b31, b32, b33) = b
    return _rows(
        (a00 * b00 + a01 * b10 + a02 * b20 + a03 * b30,
         a00 * b01 + a01 * b11 + a02 * b21 + a03 * b31,
         a00 * b02 + a01 * b12 + a02 * b22 + a03 * b32,
         a00 * b03 + a01 * b13 + a02 * b23 + a03 * b33),
        (a10 * b00 + a11 * b10 + a12 * b20 + a13 * b30,
         a10 * b01 + a11 * b11 + a12 * b21 + a13 * b31,
         a10 * b02 + a11 * b12 + a12 * b22 + a13 * b32,
         a10 * b03 + a11 * b13 + a12 * b23 + a13 * b33),
        (a20 * b00 + a21 * b10 + a22 * b20 + a23 * b30,
         a20 * b01 + a21 * b11 + a22 * b21 + a23 * b31,
         a20 * b02 + a21 * b12 + a22 * b22 + a23 * b32,
         a20 * b03 + a21 * b13 + a22 * b23 + a23 * b33),
        (a30 * b00 + a31 * b10 + a32 * b20 + a33 * b30,
         a30 * b01 + a31 * b11 + a32 * b21 + a33 * b31,
         a30 * b02 + a31 * b12 + a32 * b22 + a33 * b32,
         a30 * b03 + a31 * b13 + a32 * b23 + a33 * b33)
    )

def transpose(m):
    """Swap rows and columns."""
    return _rows(
        (m[0][0], m[1][0], m[2][0], m[3][0]),
        (m[0][1], m[1][1], m[2][1], m[3][1]),
        (m[0][2], m[1][2], m[2][2], m[3][2]),
        (m[0][3], m[1][3], m[2][3], m[3][3])
    )

def _subfactors(m):
    """2x2 minors of the top two rows (s) and bottom two rows (c).

    The 4x4 determinant and every 3x3 cofactor are built from these twelve
    products (Laplace expansion by complementary minors).
    """
    (a00, a01, a02, a03), (a10, a11, a12, a13), (a20, a21, a22, a23), (a30, a31, a32, a33) = m
    s = (
        a00 * a11 - a10 * a01,
        a00 * a12 - a10 * a02,
        a00 * a13 - a10 * a03,
        a01 * a12 - a11 * a02,
        a01 * a13 - a11 * a03,
        a02 * a13 - a12 * a03,
    )
    c = (
        a20 * a31 - a30 * a21,
        a20 * a32 - a30 * a22,
        a20 * a33 - a30 * a23,
        a21 * a32 - a31 * a22,
        a21 * a33 - a31 * a23,
        a22 * a33 - a32 * a23,
    )
    return s, c

def _det_from_subfactors(s, c):
    return s[0] * c[5] - s[1] * c[4] + s[2] * c[3] + s[3] * c[2] - s[4] * c[1] + s[5] * c[0]

def determinant(m):
    """Compute the determinant of a 4x4 matrix."""
    s, c = _subfactors(m)
    return _det_from_subfactors(s, c)

def invert(m):
    """Invert a 4x4 matrix by the adjugate (transposed cofactor) method.

    A matrix whose determinant is exactly zero has no inverse; the identity is
    returned instead. Nearly singular matrices are inverted as-is.
    """
    s, c = _subfactors(m)
    det = _det_from_subfactors(s, c)
    if det == 0.0:
        if settings.get_singular_warnings():
            warnings.warn("invert() called on a singular matrix, falling back to identity",
                          RuntimeWarning, stacklevel=2)
        return _IDENTITY

    (a00, a01, a02, a03), (a10, a11, a12, a13), (a20, a21, a22, a23), (a30, a31, a32, a33) = m
    s0, s1, s2, s3, s4, s5 = s
    c0, c1, c2, c3, c4, c5 = c
    inv_det = 1.0 / det
    return _rows(
        (( a11 * c5 - a12 * c4 + a13 * c3) * inv_det,
         (-a01 * c5 + a02 * c4 - a03 * c3) * inv_det,
         ( a31 * s5 - a32 * s4 + a33 * s3) * inv_det,
         (-a21 * s5 + a22 * s4 - a23 * s3) * inv_det),
        ((-a10 * c5 + a12 * c2 - a13 * c1) * inv_det,
         ( a00 * c5 - a02 * c2 + a03 * c1) * inv_det,
         (-a30 * s5 + a32 * s2 - a33 * s1) * inv_det,
         ( a20 * s5 - a22 * s2 + a23 * s1) * inv_det),
        (( a10 * c4 - a11 * c2 + a13 * c0) * inv_det,
         (-a00 * c4 + a01 * c2 - a03 * c0) * inv_det,
         ( a30 * s4 - a31 * s2 + a33 * s0) * inv_det,
         (-a20 * s4 + a21 * s2 - a23 * s0) * inv_det),
        ((-a10 * c3 + a11 * c1 - a12 * c0) * inv_det,
         ( a00 * c3 - a01 * c1 + a02 * c0) * inv_det,
         (-a30 * s3 + a31 * s1 - a32 * s0) * inv_det,
         ( a20 * s3 - a21 * s1 + a22 * s0) * inv_det)
    )


# =============================================================================
# Affine builders
# =============================================================================

def scale_matrix(*args):
    x, y, z = unpack_args(*args)
    return _rows(
        (x, 0.0, 0.0, 0.0),
        (0.0, y, 0.0, 0.0),
        (0.0, 0.0, z, 0.0),
        (0.0, 0.0, 0.0, 1.0)
    )

def translate_matrix(*args):
    x, y, z = unpack_args(*args)
    return _rows(
        (1.0, 0.0, 0.0, 0.0),
        (0.0, 1.0, 0.0, 0.0),
        (0.0, 0.0, 1.0, 0.0),
        (x, y, z, 1.0)
    )

def rotation_x_matrix(angle):
    c, s = ieee_cos(angle), ieee_sin(angle)
    return _rows(
        (1.0, 0.0, 0.0, 0.0),
        (0.0, c, s, 0.0),
        (0.0, -s, c, 0.0),
        (0.0, 0.0, 0.0, 1.0)
    )

def rotation_y_matrix(angle):
    c, s = ieee_cos(angle), ieee_sin(angle)
    return _rows(
        (c, 0.0, -s, 0.0),
        (0.0, 1.0, 0.0, 0.0),
        (s, 0.0, c, 0.0),
        (0.0, 0.0, 0.0, 1.0)
    )

def rotation_z_matrix(angle):
    c, s = ieee_cos(angle), ieee_sin(angle)
    return _rows(
        (c, s, 0.0, 0.0),
        (-s, c, 0.0, 0.0),
        (0.0, 0.0, 1.0, 0.0),
        (0.0, 0.0, 0.0, 1.0)
    )

def rotation_axis_matrix(axis, angle):
    """Rotation of `angle` radians about an arbitrary axis (Rodrigues' formula).

    The axis is normalized first; a zero axis leaves only the cos(angle) diagonal.
    """
    x, y, z = normalize(Vector3(*axis))
    c, s = ieee_cos(angle), ieee_sin(angle)
    om = 1.0 - c
    return _rows(
        (x * x * om + c,     x * y * om + z * s, x * z * om - y * s, 0.0),
        (x * y * om - z * s, y * y * om + c,     y * z * om + x * s, 0.0),
        (x * z * om + y * s, y * z * om - x * s, z * z * om + c,     0.0),
        (0.0, 0.0, 0.0, 1.0)
    )

def yaw_pitch_roll_matrix(yaw, pitch, roll):
    """Roll about Z, then pitch about X, then yaw about Y."""
    return mat_mul(rotation_z_matrix(roll), mat_mul(rotation_x_matrix(pitch), rotation_y_matrix(yaw)))

def reflect_matrix(plane):
    """Reflection through a plane. The plane need not be normalized."""
    a, b, c, d = normalize_plane(plane)
    ta, tb, tc = -2.0 * a, -2.0 * b, -2.0 * c
    return _rows(
        (ta * a + 1.0, tb * a,       tc * a,       0.0),
        (ta * b,       tb * b + 1.0, tc * b,       0.0),
        (ta * c,       tb * c,       tc * c + 1.0, 0.0),
        (ta * d,       tb * d,       tc * d,       1.0)
    )

def _about(center, m):
    # Conjugate m so it acts around `center` instead of the origin
    cx, cy, cz = center
    return mat_mul(mat_mul(translate_matrix(-cx, -cy, -cz), m), translate_matrix(cx, cy, cz))

def transformation_2d_matrix(scaling_center, scale, rotation_center, angle, translation):
    """Rotate about rotation_center in the xy plane, scale about scaling_center, then translate.

    All points and vectors are 2D; z passes through unchanged.
    """
    s = _about((scaling_center[0], scaling_center[1], 0.0), scale_matrix(scale[0], scale[1], 1.0))
    r = _about((rotation_center[0], rotation_center[1], 0.0), rotation_z_matrix(angle))
    t = translate_matrix(translation[0], translation[1], 0.0)
    return mat_mul(mat_mul(r, s), t)

def transformation_3d_matrix(scaling_center, scale, rotation_center, angle, translation, axis=(0.0, 0.0, 1.0)):
    """Rotate `angle` about `axis` through rotation_center, scale about scaling_center, then translate."""
    s = _about(unpack_args(scaling_center), scale_matrix(scale))
    r = _about(unpack_args(rotation_center), rotation_axis_matrix(axis, angle))
    t = translate_matrix(translation)
    return mat_mul(mat_mul(r, s), t)


# =============================================================================
# View builders
# =============================================================================

def _look_at(eye, za, up):
    xa = normalize(cross3(up, za))
    ya = cross3(za, xa)
    return _rows(
        (xa.x, ya.x, za.x, 0.0),
        (xa.y, ya.y, za.y, 0.0),
        (xa.z, ya.z, za.z, 0.0),
        (-dot(xa, eye), -dot(ya, eye), -dot(za, eye), 1.0)
    )

def look_at_lh_matrix(eye, at, up):
    """Left-handed view matrix: the camera at `eye` looks down +z toward `at`."""
    eye = Vector3(*eye)
    return _look_at(eye, normalize(subtract(Vector3(*at), eye)), up)

def look_at_rh_matrix(eye, at, up):
    """Right-handed view matrix: the camera at `eye` looks down -z toward `at`."""
    eye = Vector3(*eye)
    return _look_at(eye, normalize(subtract(eye, Vector3(*at))), up)


# =============================================================================
# Projection builders
# =============================================================================

def orthographic_lh_matrix(w, h, zn, zf):
    return _rows(
        (ieee_div(2.0, w), 0.0, 0.0, 0.0),
        (0.0, ieee_div(2.0, h), 0.0, 0.0),
        (0.0, 0.0, ieee_div(1.0, zf - zn), 0.0),
        (0.0, 0.0, ieee_div(zn, zn - zf), 1.0)
    )

def orthographic_rh_matrix(w, h, zn, zf):
    return _rows(
        (ieee_div(2.0, w), 0.0, 0.0, 0.0),
        (0.0, ieee_div(2.0, h), 0.0, 0.0),
        (0.0, 0.0, ieee_div(1.0, zn - zf), 0.0),
        (0.0, 0.0, ieee_div(zn, zn - zf), 1.0)
    )

def orthographic_off_center_lh_matrix(left, right, top, bottom, zn, zf):
    """Maps x in [left, right] to [-1, 1], y in [bottom, top] to [-1, 1], z in [zn, zf] to [0, 1]."""
    return _rows(
        (ieee_div(2.0, right - left), 0.0, 0.0, 0.0),
        (0.0, ieee_div(2.0, top - bottom), 0.0, 0.0),
        (0.0, 0.0, ieee_div(1.0, zf - zn), 0.0),
        (ieee_div(left + right, left - right), ieee_div(top + bottom, bottom - top), ieee_div(zn, zn - zf), 1.0)
    )

def orthographic_off_center_rh_matrix(left, right, top, bottom, zn, zf):
    return _rows(
        (ieee_div(2.0, right - left), 0.0, 0.0, 0.0),
        (0.0, ieee_div(2.0, top - bottom), 0.0, 0.0),
        (0.0, 0.0, ieee_div(1.0, zn - zf), 0.0),
        (ieee_div(left + right, left - right), ieee_div(top + bottom, bottom - top), ieee_div(zn, zn - zf), 1.0)
    )

def perspective_lh_matrix(w, h, zn, zf):
    """Left-handed perspective. w and h are the view volume extents at the near plane."""
    return _rows(
        (ieee_div(2.0 * zn, w), 0.0, 0.0, 0.0),
        (0.0, ieee_div(2.0 * zn, h), 0.0, 0.0),
        (0.0, 0.0, ieee_div(zf, zf - zn), 1.0),
        (0.0, 0.0, ieee_div(zn * zf, zn - zf), 0.0)
    )

def perspective_rh_matrix(w, h, zn, zf):
    return _rows(
        (ieee_div(2.0 * zn, w), 0.0, 0.0, 0.0),
        (0.0, ieee_div(2.0 * zn, h), 0.0, 0.0),
        (0.0, 0.0, ieee_div(zf, zn - zf), -1.0),
        (0.0, 0.0, ieee_div(zn * zf, zn - zf), 0.0)
    )

def perspective_fov_lh_matrix(fovy, aspect, zn, zf):
    """Left-handed perspective from a vertical field of view (radians) and aspect = width / height."""
    y_scale = ieee_div(1.0, ieee_tan(fovy * 0.5))
    x_scale = ieee_div(y_scale, aspect)
    return _rows(
        (x_scale, 0.0, 0.0, 0.0),
        (0.0, y_scale, 0.0, 0.0),
        (0.0, 0.0, ieee_div(zf, zf - zn), 1.0),
        (0.0, 0.0, ieee_div(zn * zf, zn - zf), 0.0)
    )

def perspective_fov_rh_matrix(fovy, aspect, zn, zf):
    y_scale = ieee_div(1.0, ieee_tan(fovy * 0.5))
    x_scale = ieee_div(y_scale, aspect)
    return _rows(
        (x_scale, 0.0, 0.0, 0.0),
        (0.0, y_scale, 0.0, 0.0),
        (0.0, 0.0, ieee_div(zf, zn - zf), -1.0),
        (0.0, 0.0, ieee_div(zn * zf, zn - zf), 0.0)
    )

def perspective_off_center_lh_matrix(left, right, top, bottom, zn, zf):
    """Left-handed perspective with an asymmetric near-plane window [left, right] x [bottom, top]."""
    return _rows(
        (ieee_div(2.0 * zn, right - left), 0.0, 0.0, 0.0),
        (0.0, ieee_div(2.0 * zn, top - bottom), 0.0, 0.0),
        (ieee_div(left + right, left - right), ieee_div(top + bottom, bottom - top), ieee_div(zf, zf - zn), 1.0),
        (0.0, 0.0, ieee_div(zn * zf, zn - zf), 0.0)
    )

def perspective_off_center_rh_matrix(left, right, top, bottom, zn, zf):
    return _rows(
        (ieee_div(2.0 * zn, right - left), 0.0, 0.0, 0.0),
        (0.0, ieee_div(2.0 * zn, top - bottom), 0.0, 0.0),
        (ieee_div(left + right, right - left), ieee_div(top + bottom, top - bottom), ieee_div(zf, zn - zf), -1.0),
        (0.0, 0.0, ieee_div(zn * zf, zn - zf), 0.0)
    )
