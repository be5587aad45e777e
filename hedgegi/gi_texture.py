"""GI texture atlas descriptions and GI texture group tables."""

import math
import struct
from dataclasses import dataclass, field


def _read_exact(stream, size: int) -> bytes:
    data = stream.read(size)
    if len(data) < size:
        raise EOFError(f"expected {size} bytes, got {len(data)}")
    return data


def _read(stream, fmt: str) -> tuple:
    layout = struct.Struct("<" + fmt)
    return layout.unpack(_read_exact(stream, layout.size))


def _read_name(stream) -> str:
    (size,) = _read(stream, "B")
    return _read_exact(stream, size).decode("utf-8")


def _write_name(stream, name: str) -> None:
    data = name.encode("utf-8")
    if len(data) > 0xFF:
        raise ValueError(f"name {name!r} is longer than 255 bytes")
    stream.write(struct.pack("<B", len(data)))
    stream.write(data)


@dataclass
class AtlasTexture:
    """A texture's placement inside an atlas, in normalised coordinates."""

    name: str = ""
    width: float = 1.0
    height: float = 1.0
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def read(cls, stream) -> "AtlasTexture":
        name = _read_name(stream)
        width, height, x, y = _read(stream, "4B")
        return cls(
            name=name,
            width=1.0 / (1 << width),
            height=1.0 / (1 << height),
            x=x / 256.0,
            y=y / 256.0,
        )

    def write(self, stream) -> None:
        _write_name(stream, self.name)
        stream.write(
            struct.pack(
                "<4B",
                int(math.log2(1.0 / self.width)) & 0xFF,
                int(math.log2(1.0 / self.height)) & 0xFF,
                int(self.x * 256) & 0xFF,
                int(self.y * 256) & 0xFF,
            )
        )


@dataclass
class Atlas:
    name: str = ""
    textures: list = field(default_factory=list)

    @classmethod
    def read(cls, stream) -> "Atlas":
        name = _read_name(stream)
        (count,) = _read(stream, "H")
        return cls(name, [AtlasTexture.read(stream) for _ in range(count)])

    def write(self, stream) -> None:
        _write_name(stream, self.name)
        stream.write(struct.pack("<H", len(self.textures)))
        for texture in self.textures:
            texture.write(stream)


@dataclass
class AtlasInfo:
    atlases: list = field(default_factory=list)

    @classmethod
    def read(cls, stream) -> "AtlasInfo":
        (empty,) = _read(stream, "B")
        if empty:
            return cls()
        (count,) = _read(stream, "H")
        return cls([Atlas.read(stream) for _ in range(count)])

    def write(self, stream) -> None:
        empty = not self.atlases
        stream.write(struct.pack("<B", int(empty)))
        if empty:
            return
        stream.write(struct.pack("<H", len(self.atlases)))
        for atlas in self.atlases:
            atlas.write(stream)


@dataclass(frozen=True)
class BoundingSphere:
    center: tuple = (0.0, 0.0, 0.0)
    radius: float = 0.0


@dataclass
class GITextureGroup:
    level: int = 0
    indices: list = field(default_factory=list)
    bounds: BoundingSphere = field(default_factory=BoundingSphere)
    memory_size: int = 0


@dataclass
class GITextureGroupInfo:
    instance_names: list = field(default_factory=list)
    instance_bounds: list = field(default_factory=list)
    groups: list = field(default_factory=list)
    level2_group_indices: list = field(default_factory=list)

    @property
    def instance_count(self) -> int:
        return len(self.instance_names)


def _unpack(data: bytes, fmt: str, offset: int) -> tuple:
    layout = struct.Struct(">" + fmt)
    if offset < 0 or offset + layout.size > len(data):
        raise ValueError(f"offset {offset} is outside the data")
    return layout.unpack_from(data, offset)


def _cstring(data: bytes, offset: int) -> str:
    end = data.find(b"\0", offset) if 0 <= offset < len(data) else -1
    if end < 0:
        raise ValueError(f"no terminated string at offset {offset}")
    return data[offset:end].decode("utf-8")


def _sphere(data: bytes, offset: int) -> BoundingSphere:
    x, y, z, radius = _unpack(data, "4f", offset)
    return BoundingSphere((x, y, z), radius)


def _u32_array(data: bytes, count: int, offset: int) -> list:
    return list(_unpack(data, f"{count}I", offset)) if count else []


def _group(data: bytes, offset: int) -> GITextureGroup:
    level, index_count, index_offset, bounds_offset, memory_size = _unpack(
        data, "5I", offset
    )
    return GITextureGroup(
        level=level,
        indices=_u32_array(data, index_count, index_offset),
        bounds=_sphere(data, bounds_offset),
        memory_size=memory_size,
    )


def parse_gi_texture_group_info(data) -> GITextureGroupInfo:
    """Parse a big-endian GI texture group table; offsets are relative to data."""
    data = bytes(data)
    (
        instance_count,
        names_offset,
        bounds_offset,
        group_count,
        groups_offset,
        level2_count,
        level2_offset,
    ) = _unpack(data, "7I", 0)

    name_offsets = _u32_array(data, instance_count, names_offset)
    sphere_offsets = _u32_array(data, instance_count, bounds_offset)
    group_offsets = _u32_array(data, group_count, groups_offset)

    return GITextureGroupInfo(
        instance_names=[_cstring(data, off) for off in name_offsets],
        instance_bounds=[_sphere(data, off) for off in sphere_offsets],
        groups=[_group(data, off) for off in group_offsets],
        level2_group_indices=_u32_array(data, level2_count, level2_offset),
    )