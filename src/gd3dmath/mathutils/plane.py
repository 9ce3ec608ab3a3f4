"""
Planes in the form ax + by + cz + d = 0.

(a, b, c) is the plane normal; with a unit normal, d is the negated distance
from the origin along it and dot_plane_coordinate gives signed distances.
"""
import math
from typing import NamedTuple

from .scalar import ieee_div
from .vector import Vector3, cross3, dot, subtract, vec4_transform


class Plane(NamedTuple):
    a: float = 0.0
    b: float = 0.0
    c: float = 0.0
    d: float = 0.0

    @property
    def normal(self):
        return Vector3(self.a, self.b, self.c)


def dot_plane(p, v):
    """Plane dotted with a homogeneous 4-vector."""
    return p[0] * v[0] + p[1] * v[1] + p[2] * v[2] + p[3] * v[3]

def dot_plane_coordinate(p, v):
    """Plane dotted with a point (w = 1). Zero on the plane, positive on the normal side."""
    return p[0] * v[0] + p[1] * v[1] + p[2] * v[2] + p[3]

def dot_plane_normal(p, v):
    """Plane normal dotted with a direction (w = 0)."""
    return p[0] * v[0] + p[1] * v[1] + p[2] * v[2]

def from_point_normal(point, normal):
    return Plane(normal[0], normal[1], normal[2], -dot(normal, point))

def from_points(v0, v1, v2):
    """Plane through three points, normal = (v1 - v0) x (v2 - v0), not normalized."""
    v0 = Vector3(*v0)
    n = cross3(subtract(Vector3(*v1), v0), subtract(Vector3(*v2), v0))
    return from_point_normal(v0, n)

def normalize_plane(p):
    """Scale all four coefficients so the normal has unit length.

    A zero normal gives inf/nan coefficients.
    """
    mag = math.hypot(p[0], p[1], p[2])
    return Plane(*(ieee_div(k, mag) for k in p))

def scale_plane(p, s):
    return Plane(p[0] * s, p[1] * s, p[2] * s, p[3] * s)

def transform_plane(p, m):
    """Plane coefficients as a row 4-vector times m.

    To move a plane by a transform T, pass the inverse transpose of T.
    """
    return Plane(*vec4_transform(p, m))

def line_intersect_plane(plane, p0, p1):
    """Point where the segment p0-p1 crosses the plane.

    When the endpoints are not on strictly opposite sides, the endpoint closer
    to the plane is returned instead (p0 on ties).
    """
    p0, p1 = Vector3(*p0), Vector3(*p1)
    d0 = dot_plane_coordinate(plane, p0)
    d1 = dot_plane_coordinate(plane, p1)
    if d0 * d1 < 0.0:
        t = d0 / (d0 - d1)
        return p0 + (p1 - p0) * t
    return p1 if abs(d1) < abs(d0) else p0
