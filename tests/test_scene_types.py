from hedgegi.scene_types import (
    Material,
    MaterialParameters,
    MaterialTextures,
    MaterialType,
    Model,
)


def test_material_type_order():
    assert [t.value for t in MaterialType] == [0, 1, 2, 3]
    assert MaterialType(3) is MaterialType.SKY


def test_material_defaults():
    material = Material()
    assert material.name == ""
    assert material.type is MaterialType.COMMON
    assert material.sky_type == 0
    assert not material.sky_sqrt
    assert not material.has_metalness


def test_parameter_defaults_match_source():
    params = MaterialParameters()
    assert params.diffuse == (1.0, 1.0, 1.0, 1.0)
    assert params.opacity_reflection_refraction_spec_type == (1.0, 0.0, 0.0, 0.0)
    assert params.pbr_factor == (0.04, 0.5, 0.0, 0.0)
    assert params.emission_param == (0.0, 0.0, 0.0, 1.0)
    assert not params.double_sided


def test_textures_default_missing():
    textures = MaterialTextures()
    assert textures.diffuse is None
    assert textures.environment is None


def test_materials_do_not_share_parameters():
    first = Material()
    second = Material()
    first.parameters.additive = True
    assert second.parameters.additive is False


def test_models_do_not_share_mesh_lists():
    first = Model("a")
    second = Model("b")
    first.meshes.append("mesh")
    assert second.meshes == []
    assert first.meshes == ["mesh"]