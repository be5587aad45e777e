import pytest

from hedgegi.light import LightType, RawLight


def test_directional_round_trip_big_endian():
    light = RawLight(LightType.DIRECTIONAL, (0.5, -1.0, 0.25), (1.0, 0.5, 0.0))
    assert RawLight.unpack(light.pack(True), True) == light


def test_point_round_trip_little_endian():
    light = RawLight(LightType.POINT, (1.0, 2.0, 3.0), (0.5, 0.5, 0.5), 7, (1.0, 2.0, 3.0, 4.0))
    assert RawLight.unpack(light.pack(False), False) == light


def test_point_light_is_longer_than_directional():
    directional = RawLight(LightType.DIRECTIONAL).pack()
    point = RawLight(LightType.POINT).pack()
    assert len(point) > len(directional)


def test_big_endian_type_comes_first():
    data = RawLight(LightType.POINT).pack(True)
    assert data[:4] == b"\x00\x00\x00\x01"


def test_directional_ignores_extra_fields():
    source = RawLight(LightType.DIRECTIONAL, (1.0, 1.0, 1.0), (2.0, 2.0, 2.0), 5, (1.0, 1.0, 1.0, 1.0))
    parsed = RawLight.unpack(source.pack())
    assert parsed.attribute == 0
    assert parsed.range == (0.0, 0.0, 0.0, 0.0)


def test_unknown_type_raises():
    data = bytearray(RawLight().pack(True))
    data[3] = 9
    with pytest.raises(ValueError):
        RawLight.unpack(bytes(data), True)


def test_truncated_point_light_raises():
    data = RawLight(LightType.POINT).pack(True)
    with pytest.raises(ValueError):
        RawLight.unpack(data[:-4], True)