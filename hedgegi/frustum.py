"""View frustum built from a combined view-projection matrix."""

import math
from dataclasses import dataclass

Vector3 = tuple


def _dot(a, b) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


@dataclass
class Plane:
    """Plane with the equation dot(normal, p) + offset = 0."""

    normal: Vector3 = (0.0, 0.0, 0.0)
    offset: float = 0.0

    @classmethod
    def from_coefficients(cls, a: float, b: float, c: float, d: float) -> "Plane":
        return cls((float(a), float(b), float(c)), float(d))

    def normalized(self) -> "Plane":
        """Scale the equation so that the normal has unit length."""
        length = math.sqrt(_dot(self.normal, self.normal))
        if length == 0.0:
            raise ValueError("cannot normalise a plane with a zero normal")
        return Plane(tuple(n / length for n in self.normal), self.offset / length)

    def signed_distance(self, point) -> float:
        return _dot(point, self.normal) + self.offset


_PLANE_ROWS = ((0, 1.0), (0, -1.0), (1, -1.0), (1, 1.0), (2, 1.0), (2, -1.0))


class Frustum:
    """Six clipping planes extracted from a 4x4 matrix indexed [row][column]."""

    def __init__(self, matrix=None):
        self.planes = [Plane() for _ in _PLANE_ROWS]
        if matrix is not None:
            self.set(matrix)

    def set(self, matrix) -> None:
        last = [float(matrix[3][col]) for col in range(4)]
        planes = []
        for row, sign in _PLANE_ROWS:
            coeffs = [last[col] + sign * float(matrix[row][col]) for col in range(4)]
            planes.append(Plane.from_coefficients(*coeffs).normalized())
        self.planes = planes

    def intersects_box(self, box_min, box_max) -> bool:
        """Return True as soon as one plane has the box's chosen corner in front of it."""
        for plane in self.planes:
            corner = tuple(
                lo if n >= 0.0 else hi
                for n, lo, hi in zip(plane.normal, box_min, box_max)
            )
            if plane.signed_distance(corner) >= 0:
                return True
        return False

    def intersects_point(self, point) -> bool:
        return all(plane.signed_distance(point) > 0 for plane in self.planes)

    def intersects_sphere(self, center, radius: float) -> bool:
        return all(plane.signed_distance(center) > -radius for plane in self.planes)