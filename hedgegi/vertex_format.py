"""Vertex layouts of model meshes: byte swapping, colour removal and strips."""

import struct
from dataclasses import dataclass, field
from enum import IntEnum

STRIP_RESTART = 0xFFFF


class VertexFormat(IntEnum):
    FLOAT1 = 0x2C83A4
    FLOAT2 = 0x2C23A5
    FLOAT3 = 0x2A23B9
    FLOAT4 = 0x1A23A6
    INT1 = 0x2C83A1
    INT2 = 0x2C23A2
    INT4 = 0x1A23A3
    UINT1 = 0x2C82A1
    UINT2 = 0x2C22A2
    UINT4 = 0x1A22A3
    INT1_NORM = 0x2C81A1
    INT2_NORM = 0x2C21A2
    INT4_NORM = 0x1A21A3
    UINT1_NORM = 0x2C80A1
    UINT2_NORM = 0x2C20A2
    UINT4_NORM = 0x1A20A3
    D3D_COLOR = 0x182886
    UBYTE4 = 0x1A2286
    BYTE4 = 0x1A2386
    UBYTE4_NORM = 0x1A2086
    BYTE4_NORM = 0x1A2186
    SHORT2 = 0x2C2359
    SHORT4 = 0x1A235A
    USHORT2 = 0x2C2259
    USHORT4 = 0x1A225A
    SHORT2_NORM = 0x2C2159
    SHORT4_NORM = 0x1A215A
    USHORT2_NORM = 0x2C2059
    USHORT4_NORM = 0x1A205A
    UDEC3 = 0x2A2287
    DEC3 = 0x2A2387
    UDEC3_NORM = 0x2A2087
    DEC3_NORM = 0x2A2187
    UDEC4 = 0x1A2287
    DEC4 = 0x1A2387
    UDEC4_NORM = 0x1A2087
    DEC4_NORM = 0x1A2187
    UHEND3 = 0x2A2290
    HEND3 = 0x2A2390
    UHEND3_NORM = 0x2A2090
    HEND3_NORM = 0x2A2190
    UDHEN3 = 0x2A2291
    DHEN3 = 0x2A2391
    UDHEN3_NORM = 0x2A2091
    DHEN3_NORM = 0x2A2191
    FLOAT16_2 = 0x2C235F
    FLOAT16_4 = 0x1A2360
    LAST_ENTRY = 0xFFFFFFFF


class VertexType(IntEnum):
    POSITION = 0
    BLEND_WEIGHT = 1
    BLEND_INDICES = 2
    NORMAL = 3
    PSIZE = 4
    TEXCOORD = 5
    TANGENT = 6
    BINORMAL = 7
    TESS_FACTOR = 8
    POSITION_T = 9
    COLOR = 10
    FOG = 11
    DEPTH = 12
    SAMPLE = 13


F = VertexFormat

# (word size in bytes, number of words) swapped for each format.
_SWAP_LAYOUT = {
    F.FLOAT1: (4, 1),
    F.FLOAT2: (4, 2),
    F.FLOAT3: (4, 3),
    F.FLOAT4: (4, 4),
    **dict.fromkeys(
        (
            F.INT1, F.INT1_NORM, F.UINT1, F.UINT1_NORM, F.D3D_COLOR,
            F.UDEC3, F.DEC3, F.UDEC3_NORM, F.DEC3_NORM,
            F.UDEC4, F.DEC4, F.UDEC4_NORM, F.DEC4_NORM,
            F.UHEND3, F.HEND3, F.UHEND3_NORM, F.HEND3_NORM,
            F.UDHEN3, F.DHEN3, F.UDHEN3_NORM, F.DHEN3_NORM,
            F.UBYTE4, F.BYTE4, F.UBYTE4_NORM, F.BYTE4_NORM,
        ),
        (4, 1),
    ),
    **dict.fromkeys((F.INT2, F.INT2_NORM, F.UINT2, F.UINT2_NORM), (4, 2)),
    **dict.fromkeys((F.INT4, F.INT4_NORM, F.UINT4, F.UINT4_NORM), (4, 4)),
    **dict.fromkeys(
        (F.SHORT2, F.SHORT2_NORM, F.USHORT2, F.USHORT2_NORM, F.FLOAT16_2), (2, 2)
    ),
    **dict.fromkeys(
        (F.SHORT4, F.SHORT4_NORM, F.USHORT4, F.USHORT4_NORM, F.FLOAT16_4), (2, 4)
    ),
}


@dataclass
class VertexElement:
    stream: int = 0
    offset: int = 0
    format: VertexFormat = VertexFormat.FLOAT3
    method: int = 0
    type: VertexType = VertexType.POSITION
    index: int = 0


@dataclass
class MeshData:
    """Interleaved vertex bytes described by a list of vertex elements."""

    vertex_count: int = 0
    vertex_size: int = 0
    vertices: bytearray = field(default_factory=bytearray)
    vertex_elements: list = field(default_factory=list)
    faces: list = field(default_factory=list)

    def elements(self):
        """Yield the vertex elements up to the terminating entry."""
        for element in self.vertex_elements:
            if element.format == VertexFormat.LAST_ENTRY:
                return
            yield element

    def vertex_offsets(self, element: VertexElement):
        return (
            i * self.vertex_size + element.offset for i in range(self.vertex_count)
        )


def swap_vertex(fmt, buffer: bytearray, offset: int = 0) -> None:
    """Reverse the byte order of one vertex element in place."""
    try:
        word_size, word_count = _SWAP_LAYOUT[VertexFormat(fmt)]
    except (KeyError, ValueError):
        raise ValueError(f"Unsupported vertex format {fmt!r}") from None
    end = offset + word_size * word_count
    if offset < 0 or end > len(buffer):
        raise ValueError("vertex element lies outside the buffer")
    for start in range(offset, end, word_size):
        buffer[start:start + word_size] = buffer[start:start + word_size][::-1]


def swap_vertices(mesh: MeshData) -> None:
    """Reverse the byte order of every element of every vertex in place."""
    for element in mesh.elements():
        for offset in mesh.vertex_offsets(element):
            swap_vertex(element.format, mesh.vertices, offset)


_WHITE_FLOAT4 = struct.pack("<4f", 1.0, 1.0, 1.0, 1.0)
_WHITE_UBYTE4 = b"\xff\xff\xff\xff"


def remove_vertex_colors(mesh: MeshData) -> None:
    """Set every vertex colour to opaque white."""
    for element in mesh.elements():
        if element.type != VertexType.COLOR:
            continue
        if element.format == VertexFormat.FLOAT4:
            white = _WHITE_FLOAT4
        elif element.format == VertexFormat.UBYTE4_NORM:
            white = _WHITE_UBYTE4
        else:
            continue
        for offset in mesh.vertex_offsets(element):
            mesh.vertices[offset:offset + len(white)] = white


def strip_to_triangles(faces) -> list:
    """Expand a triangle strip with 0xFFFF restarts into triangles.

    Degenerate triangles are dropped and winding alternates along the strip.
    """
    indices = iter(faces)
    f1 = next(indices, None)
    f2 = next(indices, None)
    if f1 is None or f2 is None:
        return []

    triangles = []
    reverse = False
    for f3 in indices:
        if f3 == STRIP_RESTART:
            f1 = next(indices, None)
            f2 = next(indices, None)
            if f1 is None or f2 is None:
                break
            reverse = False
            continue
        if f1 != f2 and f2 != f3 and f3 != f1:
            triangles.append((f1, f3, f2) if reverse else (f1, f2, f3))
        f1, f2 = f2, f3
        reverse = not reverse
    return triangles