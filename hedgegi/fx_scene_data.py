"""Scene effect parameters of the older engine's scene data files."""

from dataclasses import dataclass, field
from enum import IntEnum

ZERO3 = (0.0, 0.0, 0.0)


class GIMode(IntEnum):
    NORMAL = 0
    ONLY = 1
    NONE = 2
    SHADOW = 3
    SEPARATED = 4


class LightFieldMode(IntEnum):
    NORMAL = 0
    ONLY = 1
    NONE = 2


class PeepingPlayerType(IntEnum):
    DEFAULT = 0
    EDGE = 1


class EyeLightMode(IntEnum):
    DIR = 0
    POINT = 1


class SaturationScalingType(IntEnum):
    KEEPING_LUMINANCE = 0
    KEEPING_BRIGHTNESS = 1
    NONE = 2


class TimeType(IntEnum):
    NONE = 0
    MORNING = 1
    DAY = 2
    EVENING = 3
    NIGHT = 4


@dataclass
class FxSceneConfig:
    gamma_tv_wii_u: float = 0.0
    gamma_drc_wii_u: float = 0.0
    fixed_ldr: bool = False
    gi_mode: GIMode = GIMode.NORMAL
    light_field_mode: LightFieldMode = LightFieldMode.NORMAL
    draw_light_field_sampling_points: bool = False
    update_light_field_each_frame: bool = False
    draw_light_field_region: bool = False
    screenshot_large_scale: int = 0
    draw_fx_col_geom: bool = False
    draw_fx_col_name: bool = False
    draw_local_light_sphere: bool = False


@dataclass
class FxCullingSettings:
    range_default: float = 0.0
    range_near: float = 0.0
    range_middle: float = 0.0
    range_far: float = 0.0


@dataclass
class FxGrassSettings:
    grass_is_hide: bool = False
    grass_height_min: float = 0.0
    grass_height: float = 0.0
    grass_width: float = 0.0
    grass_far: float = 0.0
    grass_far_end: float = 0.0
    grass_wind_axis: float = 0.0
    grass_wind_speed: float = 0.0
    grass_wind_cycle: float = 0.0
    grass_wind_strength: float = 0.0
    grass_dup_count: int = 0
    grass_dup_range: float = 0.0


@dataclass
class FxStageDistortion:
    distortion_is_use: bool = False
    distortion_speed: float = 0.0
    distortion_power: float = 0.0
    distortion_density: float = 0.0
    distortion_depth_density: float = 0.0
    distortion_power_bloom: float = 0.0
    distortion_power_depth: float = 0.0
    distortion_power_front: float = 0.0
    distortion_density_front: float = 0.0


@dataclass
class FxSceneCasinoLight:
    is_use_casino_light: bool = False
    casino_light_aabb_min: tuple = ZERO3
    casino_light_aabb_max: tuple = ZERO3
    casino_light_move_ratio: float = 0.0
    casino_light_strength_max: float = 0.0
    casino_light_rad_min: float = 0.0
    casino_light_rad_max: float = 0.0


@dataclass
class FxSceneSettings:
    sky_intensity_scale: float = 0.0
    sky_followup_ratio_y: float = 0.0
    pseudo_fog_enable: bool = False
    pseudo_fog_without_far: bool = False
    pseudo_dof: bool = False
    deep_blur_enable: bool = False
    no_blur_enable: bool = False
    blur_scale: float = 0.0
    peeping_player_enable: bool = False
    occ_checked_player_time: float = 0.0
    peeping_player_type: PeepingPlayerType = PeepingPlayerType.DEFAULT
    clear_first_surface: bool = False
    use_manual_z_prepass: bool = False
    use_capture_framebuffer_color: bool = False
    use_capture_framebuffer_depth: bool = False
    player_draw_overlay: bool = False


@dataclass
class FxLightSettings:
    global_light_enable: bool = False
    amb_light_enable: bool = False
    all_local_light_enable: bool = False
    eye_light_enable: bool = False
    eye_light_mode: EyeLightMode = EyeLightMode.DIR
    eye_light_diffuse: tuple = ZERO3
    eye_light_specular: tuple = ZERO3
    eye_light_range_start: float = 0.0
    eye_light_range_end: float = 0.0


@dataclass
class FxLightFieldSettings:
    ignore_data: bool = False
    default_update_interval: int = 0
    offset_color_up: tuple = ZERO3
    offset_color_down: tuple = ZERO3
    saturation_scaling_type: SaturationScalingType = (
        SaturationScalingType.KEEPING_LUMINANCE
    )
    saturation_scaling_rate: float = 0.0
    luminance_scaling_rate: float = 0.0
    disable_final_adjust_color: bool = False
    luminance_min: float = 0.0
    luminance_max: float = 0.0
    luminance_midium: float = 0.0
    intensity_threshold: float = 0.0
    intensity_bias: float = 0.0
    default_interruption: float = 0.0
    default_color_up: tuple = ZERO3
    default_color_down: tuple = ZERO3


@dataclass
class FxLightScatteringSettings:
    enable: bool = False
    color: tuple = ZERO3
    depth_scale: float = 0.0
    in_scattering_scale: float = 0.0
    rayleigh: float = 0.0
    mie: float = 0.0
    g: float = 0.0
    znear: float = 0.0
    zfar: float = 0.0


@dataclass
class FxHdrSettings:
    enable: bool = False
    adaptation_enable: bool = False
    adaptation_ratio: float = 0.0
    middle_gray: float = 0.0
    luminance_low: float = 0.0
    luminance_high: float = 0.0


@dataclass
class FxGlareSettings:
    enable: bool = False
    bright_pass_threshold: float = 0.0
    bright_pass_inv_scale: float = 0.0
    persistent: float = 0.0
    bloom_scale: float = 0.0


@dataclass
class FxDofSettings:
    enable: bool = False
    ignore_sky: bool = False
    focus: float = 0.0
    znear: float = 0.0
    zfar: float = 0.0
    focus_range: float = 0.0


@dataclass
class FxHourSettings:
    middle_gray: float = 0.0
    base_color: tuple = ZERO3
    light: tuple = ZERO3
    sky_intensity: float = 0.0
    sky: tuple = ZERO3
    ambient: tuple = ZERO3
    light_scattering: tuple = ZERO3


HOUR_COUNT = 4


def _hour_params() -> list:
    return [FxHourSettings() for _ in range(HOUR_COUNT)]


@dataclass
class FxTimeChangeSettings:
    enable: bool = False
    ignore_sky: bool = False
    time_debug_index: TimeType = TimeType.NONE
    morning: float = 0.0
    day: float = 0.0
    evening: float = 0.0
    night: float = 0.0
    hour_params: list = field(default_factory=_hour_params)


@dataclass
class FxInShadowShadowScaleSettings:
    shadow_scale_x: float = 0.0
    shadow_scale_y: float = 0.0
    shadow_scale_light_field_y: float = 0.0


@dataclass
class FxOnSceneShadowScaleSettings:
    shadow_scale_z: float = 0.0
    shadow_scale_w: float = 0.0
    shadow_scale_light_field_w: float = 0.0


@dataclass
class FxShadowScale:
    shadow_scale_in_shadow: FxInShadowShadowScaleSettings = field(
        default_factory=FxInShadowShadowScaleSettings
    )
    shadow_scale_on_scene: FxOnSceneShadowScaleSettings = field(
        default_factory=FxOnSceneShadowScaleSettings
    )


@dataclass
class FxStencilShadow:
    enable: bool = False
    shadow_color: tuple = ZERO3
    shadow_alpha: float = 0.0


@dataclass
class FxEffectSettings:
    light_scale: float = 0.0
    shadow_scale: float = 0.0


@dataclass
class FxParameter:
    culling: FxCullingSettings = field(default_factory=FxCullingSettings)
    scene: FxSceneSettings = field(default_factory=FxSceneSettings)
    light: FxLightSettings = field(default_factory=FxLightSettings)
    light_field: FxLightFieldSettings = field(default_factory=FxLightFieldSettings)
    ols_near: FxLightScatteringSettings = field(
        default_factory=FxLightScatteringSettings
    )
    separate_ols_layer: bool = False
    ols_far: FxLightScatteringSettings = field(
        default_factory=FxLightScatteringSettings
    )
    hdr: FxHdrSettings = field(default_factory=FxHdrSettings)
    glare: FxGlareSettings = field(default_factory=FxGlareSettings)
    dof: FxDofSettings = field(default_factory=FxDofSettings)
    time_change: FxTimeChangeSettings = field(default_factory=FxTimeChangeSettings)
    shadow_scale: FxShadowScale = field(default_factory=FxShadowScale)
    grass_setting: FxGrassSettings = field(default_factory=FxGrassSettings)
    stage_distortion: FxStageDistortion = field(default_factory=FxStageDistortion)
    stencil_shadow: FxStencilShadow = field(default_factory=FxStencilShadow)
    effect: FxEffectSettings = field(default_factory=FxEffectSettings)
    casino_light: FxSceneCasinoLight = field(default_factory=FxSceneCasinoLight)


ITEM_COUNT = 4


def _items() -> list:
    return [FxParameter() for _ in range(ITEM_COUNT)]


@dataclass
class FxSceneData:
    """Global configuration plus one parameter set per item slot."""

    config: FxSceneConfig = field(default_factory=FxSceneConfig)
    items: list = field(default_factory=_items)