from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Tuple

Vec3 = Tuple[float, float, float]

# -----------------------------
# Small vector utilities
# -----------------------------

def v_dot(a: Vec3, b: Vec3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def v_len(a: Vec3) -> float:
    return math.sqrt(v_dot(a, a))


def v_norm(a: Vec3) -> Vec3:
    l = v_len(a)
    if l == 0:
        return (0.0, 0.0, 0.0)
    return (a[0] / l, a[1] / l, a[2] / l)


# -----------
# Point type
# -----------

@dataclass
class Point3D:
    """A location or direction in 3D space. Mutable, compared by value."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def as_tuple(self) -> Vec3:
        return (self.x, self.y, self.z)

    def length(self) -> float:
        return v_len(self.as_tuple())

    def normalize(self) -> "Point3D":
        # zero vectors stay zero
        self.x, self.y, self.z = v_norm(self.as_tuple())
        return self

    def copy(self) -> "Point3D":
        return Point3D(self.x, self.y, self.z)
