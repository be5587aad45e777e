"""Spherical-harmonics light field definitions (``.shlf``)."""

import struct
from dataclasses import dataclass, field

_HEADER = struct.Struct("<I144sIQ")
_NODE = struct.Struct("<Q3I9f")


@dataclass
class SHLightFieldNode:
    name: str = ""
    probe_counts: tuple = (0, 0, 0)
    position: tuple = (0.0, 0.0, 0.0)
    rotation: tuple = (0.0, 0.0, 0.0)
    scale: tuple = (1.0, 1.0, 1.0)


@dataclass
class SHLightField:
    version: int = 0
    unknown: bytes = bytes(144)
    nodes: list = field(default_factory=list)


def _cstring(data: bytes, offset: int) -> str:
    end = data.find(b"\0", offset) if 0 <= offset < len(data) else -1
    if end < 0:
        raise ValueError(f"no terminated string at offset {offset}")
    return data[offset:end].decode("utf-8")


def parse_sh_light_field(data) -> SHLightField:
    """Parse little-endian light field data; offsets are relative to data."""
    data = bytes(data)
    if len(data) < _HEADER.size:
        raise ValueError("light field data is too short")
    version, unknown, count, entries = _HEADER.unpack_from(data)
    if entries + count * _NODE.size > len(data):
        raise ValueError("light field entries run past the end of the data")

    nodes = []
    for index in range(count):
        name_offset, *values = _NODE.unpack_from(data, entries + index * _NODE.size)
        nodes.append(
            SHLightFieldNode(
                name=_cstring(data, name_offset),
                probe_counts=tuple(values[0:3]),
                position=tuple(values[3:6]),
                rotation=tuple(values[6:9]),
                scale=tuple(values[9:12]),
            )
        )
    return SHLightField(version, unknown, nodes)