"""
Integer screen-space rectangles.

Two forms describe the same thing:
    RectXY(x, y, w, h)                  - origin plus extent
    RectLT(left, top, right, bottom)    - edge coordinates

Both are immutable; inflate/offset return new rectangles.
"""
from typing import NamedTuple


class RectXY(NamedTuple):
    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0

    def to_lt(self):
        return RectLT(self.x, self.y, self.x + self.w, self.y + self.h)

    def intersects(self, other):
        """True if the two rectangles overlap by a non-zero area."""
        return self.to_lt().intersects(other.to_lt())

    def contains(self, x, y):
        """Half-open test: the left/top edges are inside, right/bottom are not."""
        return self.x <= x < self.x + self.w and self.y <= y < self.y + self.h

    def outside(self, x, y):
        """True if the point lies beyond any edge (edges themselves count as inside)."""
        return x < self.x or x > self.x + self.w or y < self.y or y > self.y + self.h

    def inflate(self, h, v):
        dh, dv = h >> 1, v >> 1
        return RectXY(self.x - dh, self.y - dv, self.w + 2 * dh, self.h + 2 * dv)

    def offset(self, x, y):
        return RectXY(self.x + x, self.y + y, self.w, self.h)


class RectLT(NamedTuple):
    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0

    def to_xy(self):
        return RectXY(self.left, self.top, self.right - self.left, self.bottom - self.top)

    def intersects(self, other):
        min_right = min(self.right, other.right)
        min_bottom = min(self.bottom, other.bottom)
        max_left = max(self.left, other.left)
        max_top = max(self.top, other.top)
        return min_right > max_left and min_bottom > max_top

    def contains(self, x, y):
        return self.left <= x < self.right and self.top <= y < self.bottom

    def outside(self, x, y):
        return x < self.left or x > self.right or y < self.top or y > self.bottom

    def inflate(self, h, v):
        dh, dv = h >> 1, v >> 1
        return RectLT(self.left - dh, self.top - dv, self.right + dh, self.bottom + dv)

    def offset(self, x, y):
        return RectLT(self.left + x, self.top + y, self.right + x, self.bottom + y)
