from hedgegi.fx_scene_data import (
    EyeLightMode,
    FxParameter,
    FxSceneData,
    FxTimeChangeSettings,
    GIMode,
    LightFieldMode,
    SaturationScalingType,
    TimeType,
)


def test_enum_values_match_format():
    assert GIMode(4) == GIMode.SEPARATED
    assert LightFieldMode(2) == LightFieldMode.NONE
    assert TimeType(4) == TimeType.NIGHT
    assert EyeLightMode(1) == EyeLightMode.POINT


def test_scene_data_has_four_independent_items():
    data = FxSceneData()
    assert len(data.items) == 4
    data.items[0].hdr.middle_gray = 0.5
    assert data.items[1].hdr.middle_gray == 0.0
    assert len({id(item) for item in data.items}) == len(data.items)


def test_scene_data_instances_do_not_share_state():
    first = FxSceneData()
    second = FxSceneData()
    first.config.gi_mode = GIMode.SHADOW
    first.items[2].scene.sky_intensity_scale = 2.0
    assert second.config.gi_mode == GIMode.NORMAL
    assert second.items[2].scene.sky_intensity_scale == 0.0


def test_time_change_has_four_hour_params():
    settings = FxTimeChangeSettings()
    assert len(settings.hour_params) == 4
    settings.hour_params[0].sky_intensity = 1.5
    assert settings.hour_params[3].sky_intensity == 0.0
    assert settings.time_debug_index == TimeType.NONE


def test_defaults_are_zeroed():
    parameter = FxParameter()
    assert parameter.light_field.saturation_scaling_type == (
        SaturationScalingType.KEEPING_LUMINANCE
    )
    assert parameter.ols_near == parameter.ols_far
    assert parameter.ols_near is not parameter.ols_far
    assert parameter.separate_ols_layer is False
    assert parameter.grass_setting.grass_dup_count == 0


def test_equality_follows_field_values():
    left = FxSceneData()
    right = FxSceneData()
    assert left == right
    right.items[1].glare.enable = True
    assert left != right
    left.items[1].glare.enable = True
    assert left == right