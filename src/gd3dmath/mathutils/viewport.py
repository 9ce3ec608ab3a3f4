"""
Viewport mapping between object space and window (screen) coordinates.

Screen x grows right from viewport.x, screen y grows down from viewport.y, and
screen z spans [min_z, max_z].
"""
from typing import NamedTuple

from .matrix4 import invert, mat_mul, orthographic_off_center_lh_matrix
from .vector import vec3_transform_coord


class Viewport(NamedTuple):
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    min_z: float = 0.0
    max_z: float = 1.0


def screen_to_ndc_matrix(viewport):
    """Matrix taking window coordinates of `viewport` into normalized device coordinates."""
    x, y, w, h, min_z, max_z = viewport
    return orthographic_off_center_lh_matrix(x, x + w, y, y + h, min_z, max_z)

def project(v, viewport, projection, view, world):
    """Object-space point to window coordinates (x, y in pixels, z in [min_z, max_z])."""
    ndc_to_screen = invert(screen_to_ndc_matrix(viewport))
    m = mat_mul(mat_mul(mat_mul(world, view), projection), ndc_to_screen)
    return vec3_transform_coord(v, m)

def unproject(v, viewport, projection, view, world):
    """Window coordinates back to an object-space point. Inverse of project()."""
    clip_to_object = invert(mat_mul(mat_mul(world, view), projection))
    m = mat_mul(screen_to_ndc_matrix(viewport), clip_to_object)
    return vec3_transform_coord(v, m)
