import logging

import pytest

from hedgegi.bake_point import (
    INVALID_COORDINATE,
    BakePoint,
    BakePointFlags,
    Mesh,
    Triangle,
    Vertex,
    create_bake_points,
    validate_vpos,
)


def _planar_vertex(u, v, normal=(0.0, 0.0, 1.0)):
    return Vertex(position=(u, v, 0.0), normal=normal, vpos=(u, v))


def _big_triangle_mesh(normal=(0.0, 0.0, 1.0)):
    return Mesh(
        vertices=[
            _planar_vertex(0.0, 0.0, normal),
            _planar_vertex(2.0, 0.0, normal),
            _planar_vertex(0.0, 2.0, normal),
        ],
        triangles=[Triangle(0, 1, 2)],
    )


def test_flag_values_match_source():
    assert BakePointFlags(1) == BakePointFlags.DISCARD_BACKFACE
    assert BakePointFlags(8) == BakePointFlags.SOFT_SHADOW
    assert BakePointFlags(3) == BakePointFlags.DISCARD_BACKFACE | BakePointFlags.LOCAL_LIGHT
    assert BakePointFlags.ALL & BakePointFlags.SHADOW


def test_default_point_is_invalid():
    point = BakePoint()
    assert not point.valid()
    assert point.x == INVALID_COORDINATE


def test_discard_invalidates():
    point = BakePoint(x=3, y=4)
    assert point.valid()
    point.discard()
    assert not point.valid()


def test_begin_resets_accumulators():
    point = BakePoint(colors=[(1.0, 2.0, 3.0), (4.0, 5.0, 6.0)], shadow=0.7)
    point.begin()
    assert point.colors == [(0.0, 0.0, 0.0), (0.0, 0.0, 0.0)]
    assert point.shadow == 0.0


def test_end_averages_colors():
    point = BakePoint(colors=[(4.0, 8.0, 12.0)])
    point.end(4)
    assert point.colors == [(1.0, 2.0, 3.0)]


@pytest.mark.parametrize(
    "vpos, expected",
    [((0.0, 0.0), True), ((1.0, 1.0), True), ((0.5, 0.25), True),
     ((-0.01, 0.5), False), ((0.5, 1.01), False)],
)
def test_validate_vpos(vpos, expected):
    assert validate_vpos(vpos) is expected


def test_grid_size_and_coordinates():
    size = 4
    points = create_bake_points("cover", [_big_triangle_mesh()], size, 2)
    assert len(points) == size * size
    for index, point in enumerate(points):
        assert point.valid()
        assert point.y * size + point.x == index
        assert len(point.colors) == 2


def test_positions_follow_uv_layout():
    size = 4
    points = create_bake_points("cover", [_big_triangle_mesh()], size)
    for point in points:
        assert point.position[0] == pytest.approx((point.x + 0.5) / size)
        assert point.position[1] == pytest.approx((point.y + 0.5) / size)
        assert point.position[2] == pytest.approx(0.0)


def test_normals_are_normalised():
    points = create_bake_points("cover", [_big_triangle_mesh((0.0, 0.0, 5.0))], 4)
    assert all(p.normal == pytest.approx((0.0, 0.0, 1.0)) for p in points)


def test_uncovered_texels_stay_invalid():
    mesh = Mesh(
        vertices=[
            _planar_vertex(0.0, 0.0),
            _planar_vertex(0.25, 0.0),
            _planar_vertex(0.0, 0.25),
        ],
        triangles=[Triangle(0, 1, 2)],
    )
    size = 8
    points = create_bake_points("corner", [mesh], size)
    assert points[0].valid()
    assert not points[size * size - 1].valid()


def test_position_is_biased_along_normal():
    mesh = Mesh(
        vertices=[
            Vertex(position=(0.0, 0.0, 1.0), vpos=(0.0, 0.0)),
            Vertex(position=(2.0, 0.0, 1.0), vpos=(2.0, 0.0)),
            Vertex(position=(0.0, 2.0, 1.0), vpos=(0.0, 2.0)),
        ],
        triangles=[Triangle(0, 1, 2)],
    )
    points = create_bake_points("biased", [mesh], 2)
    assert all(p.position[2] > 1.0 for p in points)
    assert all(p.position[2] == pytest.approx(1.0) for p in points)


def test_invalid_uvs_warn(caplog):
    mesh = Mesh(
        vertices=[_planar_vertex(0.5, 0.5), _planar_vertex(0.5, 0.5), _planar_vertex(0.5, 0.5)],
        triangles=[Triangle(0, 1, 2), Triangle(2, 1, 0)],
    )
    with caplog.at_level(logging.WARNING):
        points = create_bake_points("broken", [mesh], 4)
    assert "invalid lightmap UV data" in caplog.text
    assert not any(p.valid() for p in points)


def test_no_meshes_gives_invalid_grid_without_warning(caplog):
    with caplog.at_level(logging.WARNING):
        points = create_bake_points("empty", [], 3)
    assert len(points) == 9
    assert not any(p.valid() for p in points)
    assert caplog.text == ""