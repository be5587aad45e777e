"""Lightmap bake points rasterised from mesh UV layouts."""

import logging
import math
from dataclasses import dataclass, field
from enum import IntFlag

logger = logging.getLogger(__name__)

INVALID_COORDINATE = 0xFFFF
_SURFACE_BIAS = 0.0000002
_EPSILON = 1e-6

# Dilation offsets in half-texel units; the unshifted pass comes last so it wins.
BAKE_POINT_OFFSETS = (
    (-2, -2), (2, -2), (-2, 2), (2, 2),
    (-1, -2), (1, -2), (-2, -1), (2, -1),
    (-2, 1), (2, 1), (-1, 2), (1, 2),
    (-2, 0), (2, 0), (0, -2), (0, 2),
    (-1, -1), (1, -1), (-1, 0), (1, 0),
    (-1, 1), (1, 1), (0, -1), (0, 1),
    (0, 0),
)


class BakePointFlags(IntFlag):
    NONE = 0
    DISCARD_BACKFACE = 1 << 0
    LOCAL_LIGHT = 1 << 1
    SHADOW = 1 << 2
    SOFT_SHADOW = 1 << 3
    ALL = DISCARD_BACKFACE | LOCAL_LIGHT | SHADOW | SOFT_SHADOW


@dataclass
class Vertex:
    position: tuple = (0.0, 0.0, 0.0)
    normal: tuple = (0.0, 0.0, 1.0)
    tangent: tuple = (1.0, 0.0, 0.0)
    binormal: tuple = (0.0, 1.0, 0.0)
    vpos: tuple = (0.0, 0.0)


@dataclass(frozen=True)
class Triangle:
    a: int
    b: int
    c: int


@dataclass
class Mesh:
    vertices: list = field(default_factory=list)
    triangles: list = field(default_factory=list)


def _zero_colors(count: int) -> list:
    return [(0.0, 0.0, 0.0) for _ in range(count)]


@dataclass
class BakePoint:
    position: tuple = (0.0, 0.0, 0.0)
    tangent: tuple = (1.0, 0.0, 0.0)
    binormal: tuple = (0.0, 1.0, 0.0)
    normal: tuple = (0.0, 0.0, 1.0)
    colors: list = field(default_factory=list)
    shadow: float = 0.0
    x: int = INVALID_COORDINATE
    y: int = INVALID_COORDINATE

    def valid(self) -> bool:
        return self.x != INVALID_COORDINATE and self.y != INVALID_COORDINATE

    def discard(self) -> None:
        self.x = INVALID_COORDINATE
        self.y = INVALID_COORDINATE

    def begin(self) -> None:
        """Reset accumulated colours and shadow before sampling."""
        self.colors = _zero_colors(len(self.colors))
        self.shadow = 0.0

    def end(self, sample_count: int) -> None:
        """Average the accumulated colours over the number of samples."""
        self.colors = [
            tuple(channel / sample_count for channel in color) for color in self.colors
        ]


def validate_vpos(vpos) -> bool:
    """Return whether a lightmap UV lies within the unit square."""
    return 0.0 <= vpos[0] <= 1.0 and 0.0 <= vpos[1] <= 1.0


def _nearly_equal(a, b) -> bool:
    return all(abs(x - y) <= _EPSILON for x, y in zip(a, b))


def _valid_uv_triangle(a, b, c) -> bool:
    return (
        validate_vpos(a) and validate_vpos(b) and validate_vpos(c)
        and not _nearly_equal(a, b)
        and not _nearly_equal(b, c)
        and not _nearly_equal(c, a)
    )


def _roundf(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _barycentric(point, a, b, c):
    """Return the weights of b and c for a 2D point, or None for a degenerate triangle."""
    v0 = (b[0] - a[0], b[1] - a[1])
    v1 = (c[0] - a[0], c[1] - a[1])
    v2 = (point[0] - a[0], point[1] - a[1])
    d00 = v0[0] * v0[0] + v0[1] * v0[1]
    d01 = v0[0] * v1[0] + v0[1] * v1[1]
    d11 = v1[0] * v1[0] + v1[1] * v1[1]
    d20 = v2[0] * v0[0] + v2[1] * v0[1]
    d21 = v2[0] * v1[0] + v2[1] * v1[1]
    denom = d00 * d11 - d01 * d01
    if denom == 0.0:
        return None
    return (d11 * d20 - d01 * d21) / denom, (d00 * d21 - d01 * d20) / denom


def _lerp(a, b, c, u: float, v: float) -> tuple:
    w = 1.0 - u - v
    return tuple(x * w + y * u + z * v for x, y, z in zip(a, b, c))


def _normalized(vector) -> tuple:
    length = math.sqrt(sum(x * x for x in vector))
    return tuple(vector) if length == 0.0 else tuple(x / length for x in vector)


def _sign(value: float) -> float:
    return (value > 0) - (value < 0)


def _biased(position, normal) -> tuple:
    return tuple(
        p + abs(p) * _sign(n) * _SURFACE_BIAS for p, n in zip(position, normal)
    )


def create_bake_points(name: str, meshes, size: int, basis_count: int = 1) -> list:
    """Rasterise every triangle's lightmap UVs into a size*size grid of bake points.

    Each triangle is also drawn shifted by small offsets to dilate its edges.
    Texels no triangle covers stay invalid.
    """
    factor = 0.5 / size
    points = [BakePoint(colors=_zero_colors(basis_count)) for _ in range(size * size)]

    tri_count = 0
    valid_tri_count = 0

    for mesh in meshes:
        tri_count += len(mesh.triangles)
        for triangle in mesh.triangles:
            a = mesh.vertices[triangle.a]
            b = mesh.vertices[triangle.b]
            c = mesh.vertices[triangle.c]

            if _valid_uv_triangle(a.vpos, b.vpos, c.vpos):
                valid_tri_count += 1

            for ox, oy in BAKE_POINT_OFFSETS:
                sx, sy = ox * factor, oy * factor
                uvs = [(v.vpos[0] + sx, v.vpos[1] + sy) for v in (a, b, c)]
                us = [uv[0] for uv in uvs]
                vs = [uv[1] for uv in uvs]

                x_begin = max(0, _roundf(size * min(us)) - 1)
                x_end = min(size - 1, _roundf(size * max(us)) + 1)
                y_begin = max(0, _roundf(size * min(vs)) - 1)
                y_end = min(size - 1, _roundf(size * max(vs)) + 1)

                for x in range(x_begin, x_end + 1):
                    for y in range(y_begin, y_end + 1):
                        texel = ((x + 0.5) / size, (y + 0.5) / size)
                        bary = _barycentric(texel, *uvs)
                        if bary is None:
                            continue
                        u, v = bary
                        w = 1.0 - u - v
                        if not (0.0 <= u <= 1.0 and 0.0 <= v <= 1.0 and 0.0 <= w <= 1.0):
                            continue

                        position = _lerp(a.position, b.position, c.position, u, v)
                        normal = _normalized(_lerp(a.normal, b.normal, c.normal, u, v))
                        tangent = _normalized(_lerp(a.tangent, b.tangent, c.tangent, u, v))
                        binormal = _normalized(
                            _lerp(a.binormal, b.binormal, c.binormal, u, v)
                        )

                        points[y * size + x] = BakePoint(
                            position=_biased(position, normal),
                            tangent=tangent,
                            binormal=binormal,
                            normal=normal,
                            colors=_zero_colors(basis_count),
                            shadow=0.0,
                            x=x,
                            y=y,
                        )

    if valid_tri_count < tri_count // 2:
        logger.warning('Instance "%s" has invalid lightmap UV data', name)

    return points