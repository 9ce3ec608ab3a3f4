"""
Scalar helpers shared by the vector, plane and matrix modules.
"""
import math

import numpy as np

# Tolerance used by float_eq
EPSILON = 1e-4


def deg_to_rad(degrees):
    return degrees * (math.pi / 180.0)

def rad_to_deg(radians):
    return radians * (180.0 / math.pi)

def clamp(x, lo, hi):
    return lo if x < lo else hi if x > hi else x

def sign(x):
    """Returns 1 for zero and positive values, -1 otherwise."""
    return 1 if x >= 0 else -1

def float_eq(x, v, epsilon=EPSILON):
    """True if x lies strictly within epsilon of v."""
    return (v - epsilon) < x < (v + epsilon)

def ieee_div(a, b):
    """Divide with IEEE-754 semantics.

    Python raises ZeroDivisionError on float division by zero. Matrix builders
    fed degenerate input (zn == zf, zero extents, zero normals) must instead
    produce inf/nan and let the caller see it downstream.
    """
    if b != 0.0:
        return a / b
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.float64(a) / np.float64(b))

def _ieee_trig(fn, np_fn, a):
    # math.sin/cos/tan raise on +-inf; numpy returns nan
    if math.isfinite(a):
        return fn(a)
    with np.errstate(invalid='ignore'):
        return float(np_fn(np.float64(a)))

def ieee_sin(a):
    """math.sin, returning nan for infinite input instead of raising."""
    return _ieee_trig(math.sin, np.sin, a)

def ieee_cos(a):
    return _ieee_trig(math.cos, np.cos, a)

def ieee_tan(a):
    return _ieee_trig(math.tan, np.tan, a)
