"""gd3dmath - Direct3D-style 3D math library."""
__version__ = "0.1.0"

from gd3dmath.mathutils.scalar import EPSILON, clamp, deg_to_rad, float_eq, ieee_div, rad_to_deg, sign
from gd3dmath.mathutils.vector import Vector2, Vector3, Vector4
from gd3dmath.mathutils.color import Color
from gd3dmath.mathutils.rect import RectLT, RectXY
from gd3dmath.mathutils.plane import Plane
from gd3dmath.mathutils.matrix4 import (
    Matrix4,
    determinant,
    identity,
    invert,
    mat_mul,
    transpose,
)
from gd3dmath.mathutils.viewport import Viewport, project, unproject
from gd3dmath.settings import get_singular_warnings, set_singular_warnings


__all__ = [
    'EPSILON', 'clamp', 'deg_to_rad', 'float_eq', 'ieee_div', 'rad_to_deg', 'sign',
    'Vector2', 'Vector3', 'Vector4',
    'Color',
    'RectLT', 'RectXY',
    'Plane',
    'Matrix4', 'determinant', 'identity', 'invert', 'mat_mul', 'transpose',
    'Viewport', 'project', 'unproject',
    'get_singular_warnings', 'set_singular_warnings',
]
