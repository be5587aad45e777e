"""Light definitions stored in ``.light`` files."""

import struct
from dataclasses import dataclass
from enum import IntEnum


class LightType(IntEnum):
    DIRECTIONAL = 0
    POINT = 1


_BASE = "I3f3f"
_POINT_EXTRA = "I4f"


def _layout(fmt: str, big_endian: bool) -> struct.Struct:
    return struct.Struct((">" if big_endian else "<") + fmt)


@dataclass
class RawLight:
    """A light; attribute and range only exist on point lights."""

    type: LightType = LightType.DIRECTIONAL
    position: tuple = (0.0, 0.0, 0.0)
    color: tuple = (0.0, 0.0, 0.0)
    attribute: int = 0
    range: tuple = (0.0, 0.0, 0.0, 0.0)

    @classmethod
    def unpack(cls, data, big_endian: bool = True) -> "RawLight":
        data = bytes(data)
        base = _layout(_BASE, big_endian)
        if len(data) < base.size:
            raise ValueError("light data is too short")
        raw_type, px, py, pz, cr, cg, cb = base.unpack_from(data)
        light = cls(LightType(raw_type), (px, py, pz), (cr, cg, cb))
        if light.type != LightType.POINT:
            return light

        extra = _layout(_POINT_EXTRA, big_endian)
        if len(data) < base.size + extra.size:
            raise ValueError("point light data is too short")
        attribute, *light_range = extra.unpack_from(data, base.size)
        light.attribute = attribute
        light.range = tuple(light_range)
        return light

    def pack(self, big_endian: bool = True) -> bytes:
        out = _layout(_BASE, big_endian).pack(
            int(self.type), *self.position, *self.color
        )
        if self.type == LightType.POINT:
            out += _layout(_POINT_EXTRA, big_endian).pack(self.attribute, *self.range)
        return out