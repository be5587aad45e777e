"""Scene effect parameters of the newer engine's scene data files."""

from dataclasses import dataclass, field
from enum import IntEnum

ZERO3 = (0.0, 0.0, 0.0)
ZERO4 = (0.0, 0.0, 0.0, 0.0)
ZERO_MATRIX4 = (ZERO4, ZERO4, ZERO4, ZERO4)

DEBUG_SCREEN_COUNT = 16
OCCLUSION_MANUAL_LIGHT_COUNT = 4
ITEM_COUNT = 16


class BloomRenderTargetSize(IntEnum):
    ONE_FOURTH = 0
    ONE_EIGHTH = 1
    ONE_SIXTEENTH = 2


class DOFRenderTargetSize(IntEnum):
    FULL_SCALE = 0
    HALF_SCALE = 1
    QUARTER_SCALE = 2


class AntiAliasingType(IntEnum):
    NONE = 0
    TAA = 1
    FXAA = 2
    LAST = 3


class ToneMapType(IntEnum):
    MANUAL_EXPOSURE = 0
    AUTO = 1


class ExposureMode(IntEnum):
    DISNEY = 0
    FILMIC = 1


class DebugViewType(IntEnum):
    DEFAULT = 0
    DIR_DIFFUSE = 1
    DIR_SPECULAR = 2
    AMB_DIFFUSE = 3
    AMB_SPECULAR = 4
    ONLY_IBL = 5
    ONLY_IBL_SURF_NORMAL = 6
    SHADOW = 7
    WHITE_ALBEDO = 8
    USER0 = 9
    USER1 = 10
    USER2 = 11
    USER3 = 12
    ALBEDO = 13
    ALBEDO_CHECK_OUTLIER = 14
    OPACITY = 15
    NORMAL = 16
    ROUGHNESS = 17
    AMBIENT = 18
    CAVITY = 19
    REFLECTANCE = 20
    METALLIC = 21
    LOCAL_LIGHT = 22
    SCATTERING_FEX = 23
    SCATTERING_LIN = 24
    SSAO = 25
    RLR = 26
    IBL_DIFFUSE = 27
    IBL_SPECULAR = 28
    ENV_BRDF = 29
    WORLD_POSITION = 30
    SHADING_MODEL_ID = 31
    IBL_CAPTURE = 32
    IBL_SKY_TERRAIN = 33
    WRITE_DEPTH_TO_ALPHA = 34


class LocalLightCullingType(IntEnum):
    NONE = 0
    CPU_TILE = 1
    GPU_TILE = 2


class TextureViewType(IntEnum):
    NONE = 0
    DEPTH = 1
    BLOOM_POWER = 2
    BLOOM_BRIGHT = 3
    BLOOM_FINAL = 4
    GLARE = 5
    LUMINANCE = 6
    DOF_BOKEH = 7
    DOF_BOKEH_NEAR = 8
    SSAO_SOURCE = 9
    DOWNSAMPLE = 10
    CASCADED_SHADOW_MAPS_0 = 11
    CASCADED_SHADOW_MAPS_1 = 12
    CASCADED_SHADOW_MAPS_2 = 13
    CASCADED_SHADOW_MAPS_3 = 14


class AmbientSpecularType(IntEnum):
    NONE = 0
    SG = 1
    IBL = 2
    BLEND = 3


class DebugScreenView(IntEnum):
    DEFAULT = 0
    ALL_ENABLE = 1
    ALL_DISABLE = 2


class ViewMode(IntEnum):
    RGB = 0
    RRR = 1
    GGG = 2
    BBB = 3
    AAA = 4


class DebugScreenType(IntEnum):
    GBUFFER0 = 0
    GBUFFER1 = 1
    GBUFFER2 = 2
    GBUFFER3 = 3
    DEPTHBUFFER = 4
    CSM0 = 5
    CSM1 = 6
    CSM2 = 7
    CSM3 = 8
    HDR = 9
    BLOOM = 10
    RLR = 11
    GODRAY = 12
    SSAO = 13
    CUSTOM0 = 14
    CUSTOM1 = 15
    CUSTOM2 = 16
    CUSTOM3 = 17


class ErrorCheckType(IntEnum):
    NONE = 0
    NAN = 1
    ALBEDO = 2
    NORMAL = 3


class GlareType(IntEnum):
    DISABLE = 0
    CAMERA = 1
    NATURAL = 2
    CHEAP_LENS = 3
    FILTER_CROSS_SCREEN = 4
    FILTER_CROSS_SCREEN_SPECTRAL = 5
    FILTER_SNOW_CROSS = 6
    FILTER_SNOW_CROSS_SPECTRAL = 7
    FILTER_SUNNY_CROSS = 8
    FILTER_SUNNY_CROSS_SPECTRAL = 9
    CINECAM_VERTICAL_SLITS = 10
    CINECAM_HORIZONTAL_SLITS = 11


class LutIndex(IntEnum):
    DEFAULT = 0
    WB = 1
    USER_0 = 2
    USER_1 = 3
    USER_2 = 4
    USER_3 = 5
    USER_4 = 6
    USER_5 = 7


class ShadowFilter(IntEnum):
    POINT = 0
    PCF = 1
    ESM = 2
    MSM = 3
    VSM_POINT = 4
    VSM_LINEAR = 5
    VSM_ANISO_2 = 6
    VSM_ANISO_4 = 7
    VSM_ANISO_8 = 8
    VSM_ANISO_16 = 9


class ShadowRangeType(IntEnum):
    CAMERA_LOOKAT = 0
    POSITION_MANUAL = 1
    FULL_MANUAL = 2


class FitProjection(IntEnum):
    TO_CASCADES = 0
    TO_SCENE = 1


class FitNearFar(IntEnum):
    ZERO_ONE = 0
    AABB = 1
    SCENE_AABB = 2


class CascadeSelection(IntEnum):
    MAP = 0
    INTERVAL = 1


class ScalingType(IntEnum):
    PHOTOSHOP_FILTER = 2
    NONE = 3
    IGNORE_DATA = 4


class DebugDrawType(IntEnum):
    NONE = 0
    LOOKAT = 1
    NODE = 2


class DebugColorType(IntEnum):
    COLOR = 0
    SHADOW = 1
    LUMINANCE = 2


class BlurType(IntEnum):
    PREV_SURFACE = 0
    RADIAL = 1
    CAMERA = 2


class FocusType(IntEnum):
    CENTER = 0
    LOOKAT = 1
    USER_SETTING = 2


@dataclass
class FxRenderTargetSetting:
    bloom_render_target_scale: BloomRenderTargetSize = BloomRenderTargetSize.ONE_FOURTH
    dof_render_target_scale: DOFRenderTargetSize = DOFRenderTargetSize.FULL_SCALE
    shadow_map_width: int = 0
    shadow_map_height: int = 0


@dataclass
class FxAntiAliasing:
    aa_type: AntiAliasingType = AntiAliasingType.NONE


@dataclass
class NeedleFxSceneConfig:
    rendertarget: FxRenderTargetSetting = field(default_factory=FxRenderTargetSetting)
    antialiasing: FxAntiAliasing = field(default_factory=FxAntiAliasing)


@dataclass
class FxHDROption:
    enable: bool = False
    padding: int = 0


@dataclass
class FxDebugScreenOption:
    enable: bool = False
    full_screen: bool = False
    view_mode: ViewMode = ViewMode.RGB
    exposure: float = 0.0
    screen_type: DebugScreenType = DebugScreenType.GBUFFER0
    error_check: ErrorCheckType = ErrorCheckType.NONE


def _debug_screens() -> list:
    return [FxDebugScreenOption() for _ in range(DEBUG_SCREEN_COUNT)]


@dataclass
class FxRenderOption:
    debug_view_type: DebugViewType = DebugViewType.DEFAULT
    clear_render_target: bool = False
    max_cube_probe: int = 0
    enable_draw_cube_probe: bool = False
    enable_directional_light: bool = False
    enable_point_light: bool = False
    enable_effect_deformation: bool = False
    enable_reverse_depth: bool = False
    culling_too_small_threshold: float = 0.0
    local_light_culling_type: LocalLightCullingType = LocalLightCullingType.NONE
    local_light_scale: float = 0.0
    debug_enable_draw_local_light: bool = False
    debug_texture_view_type: TextureViewType = TextureViewType.NONE
    debug_enable_output_texture_view: bool = False
    debug_view_depth_near: float = 0.0
    debug_view_depth_far: float = 0.0
    debug_ambient_specular_type: AmbientSpecularType = AmbientSpecularType.NONE
    debug_ibl_plus_directional_specular: bool = False
    debug_enable_sggi_ver2nd: bool = False
    debug_enable_occlusion_culling_view: bool = False
    debug_occluder_vert_threshold: int = 0
    debug_screen: list = field(default_factory=_debug_screens)
    debug_screen_view: DebugScreenView = DebugScreenView.DEFAULT


@dataclass
class FxSGGIParameter:
    sg_start_smoothness: float = 0.0
    sg_end_smoothness: float = 0.0


@dataclass
class FxRLRParameter:
    enable: bool = False
    num: float = 0.0
    travel_fade_start: float = 0.0
    travel_fade_end: float = 0.0
    border_fade_start: float = 0.0
    border_fade_end: float = 0.0
    override_ratio: float = 0.0
    max_roughness: float = 0.0
    hiz_start_level: float = 0.0


@dataclass
class FxBloomParameter:
    enable: bool = False
    bloom_threshold: float = 0.0
    bloom_max: float = 0.0
    bloom_scale: float = 0.0
    star_scale: float = 0.0
    ghost_count: int = 0
    ghost_scale: float = 0.0
    halo_scale: float = 0.0
    sample_radius_scale: float = 0.0
    blur_quality: int = 0
    glare_type: GlareType = GlareType.DISABLE


@dataclass
class FxToneMapParameter:
    middle_gray: float = 0.0
    lum_max: float = 0.0
    lum_min: float = 0.0
    adapted_ratio: float = 0.0


@dataclass
class FxExposureParameter:
    exposure_value: float = 0.0


@dataclass
class FxColorContrastParameter:
    enable: bool = False
    contrast: float = 0.0
    dynamic_range: float = 0.0
    crush_shadows: float = 0.0
    crush_hilights: float = 0.0
    use_lut: bool = False
    lut_index0: LutIndex = LutIndex.DEFAULT
    lut_index1: LutIndex = LutIndex.DEFAULT
    blend_ratio: float = 0.0
    min_contrast: float = 0.0
    use_hls_correction: bool = False
    hls_hue_offset: float = 0.0
    hls_lightness_offset: float = 0.0
    hls_saturation_offset: float = 0.0
    hls_color_offset: tuple = (0, 0, 0)
    padding: int = 0


@dataclass
class FxLightScatteringParameter:
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
class FxDOFParameter:
    enable: bool = False
    use_focus_look_at: bool = False
    foreground_bokeh_max_depth: float = 0.0
    foreground_bokeh_start_depth: float = 0.0
    background_bokeh_start_depth: float = 0.0
    background_bokeh_max_depth: float = 0.0
    enable_circle_dof: bool = False
    coc_max_radius: float = 0.0
    bokeh_radius_scale: float = 0.0
    bokeh_sample_count: int = 0
    sky_focus_distance: float = 0.0
    bokeh_bias: float = 0.0
    draw_focal_plane: bool = False
    enable_swa: bool = False
    swa_focus: float = 0.0
    swa_focus_range: float = 0.0
    swa_near: float = 0.0
    swa_far: float = 0.0


@dataclass
class FxShadowMapParameter:
    enable: bool = False
    shadow_filter: ShadowFilter = ShadowFilter.POINT
    shadow_range_type: ShadowRangeType = ShadowRangeType.CAMERA_LOOKAT
    fit_projection: FitProjection = FitProjection.TO_CASCADES
    fit_near_far: FitNearFar = FitNearFar.ZERO_ONE
    cascade_selection: CascadeSelection = CascadeSelection.MAP
    scene_range: float = 0.0
    scene_center: tuple = ZERO3
    manual_light_pos: tuple = ZERO3
    cascade_level: int = 0
    cascade_splits: tuple = ZERO4
    blur_quality: int = 0
    blur_size: int = 0
    bias: float = 0.0
    fadeout_distance: float = 0.0
    shadow_camera_view_matrix: tuple = ZERO_MATRIX4
    shadow_camera_projection_matrix: tuple = ZERO_MATRIX4
    shadow_camera_near_depth: float = 0.0
    shadow_camera_far_depth: float = 0.0
    shadow_camera_look_at_depth: float = 0.0
    enable_shadow_camera: bool = False
    enable_move_light_texel_size: bool = False
    enable_draw_scene_aabb: bool = False
    enable_draw_shadow_frustum: bool = False
    enable_draw_cascade: bool = False
    enable_draw_camera_frustum: bool = False
    enable_pause_camera: bool = False


@dataclass
class FxSSAOParameter:
    enable: bool = False
    intensity: float = 0.0
    radius: float = 0.0
    fadeout_distance: float = 0.0
    fadeout_radius: float = 0.0
    power: float = 0.0
    bias: float = 0.0
    occlusion_distance: float = 0.0
    render_target_size_enum_index: int = 0


@dataclass
class FxLightFieldParameter:
    saturation_scaling_type: ScalingType = ScalingType.NONE
    saturation_scaling_rate: float = 0.0
    luminance_scaling_rate: float = 0.0
    force_update: bool = False
    ignore_data: bool = False
    ignore_final_light_color_adjustment: bool = False
    intensity_threshold: float = 0.0
    intensity_bias: float = 0.0
    luminance_max: float = 0.0
    luminance_min: float = 0.0
    luminance_center: float = 0.0
    default_color_up: tuple = ZERO3
    default_color_down: tuple = ZERO3
    offset_color_up: tuple = ZERO3
    offset_color_down: tuple = ZERO3
    debug_draw_type: DebugDrawType = DebugDrawType.NONE
    debug_color_type: DebugColorType = DebugColorType.COLOR
    draw_node_start: int = 0
    draw_node_count: int = 0
    debug_color_scale: float = 0.0
    debug_box_scale: float = 0.0
    debug_look_at_range: float = 0.0
    lock_look_at: bool = False


@dataclass
class FxSHLightFieldParameter:
    enable: bool = False
    debug_draw_type: DebugDrawType = DebugDrawType.NONE
    show_sky_visibility: bool = False


@dataclass
class FxScreenBlurParameter:
    enable: bool = False
    blur_type: BlurType = BlurType.PREV_SURFACE
    blur_power: float = 0.0
    focus_type: FocusType = FocusType.CENTER
    focus_position: tuple = ZERO3
    focus_range: float = 0.0
    alpha_slope: float = 0.0
    sample_num: int = 0


def _manual_light_positions() -> list:
    return [ZERO3 for _ in range(OCCLUSION_MANUAL_LIGHT_COUNT)]


@dataclass
class FxOcclusionCapsuleParameter:
    enable: bool = False
    enable_occlusion: bool = False
    occlusion_color: tuple = (0, 0, 0, 0)
    occlusion_power: float = 0.0
    enable_specular_occlusion: bool = False
    specular_occlusion_power: float = 0.0
    specular_occlusion_cone_angle: float = 0.0
    enable_shadow: bool = False
    shadow_color: tuple = (0, 0, 0, 0)
    shadow_power: float = 0.0
    shadow_cone_angle: float = 0.0
    culling_distance: float = 0.0
    enable_manual_light: bool = False
    manual_light_count: int = 0
    manual_light_pos: list = field(default_factory=_manual_light_positions)
    debug_draw: bool = False


@dataclass
class FxEffectParameter:
    light_field_color_coefficient: float = 0.0
    shadow_color: tuple = ZERO3
    directional_light_overwrite: tuple = ZERO3
    directional_light_intensity_overwrite: float = 0.0
    overwrite_directional_light: bool = False
    render_wireframe: bool = False


@dataclass
class FxScreenSpaceGodrayParameter:
    enable: bool = False
    num: float = 0.0
    density: float = 0.0
    decay: float = 0.0
    threshold: float = 0.0
    lum_max: float = 0.0
    intensity: float = 0.0
    enable_dither: bool = False


@dataclass
class FxGodrayParameter:
    enable: bool = False
    box: tuple = ZERO_MATRIX4
    color: tuple = ZERO3
    num: float = 0.0


@dataclass
class FxHeatHazeParameter:
    enable: bool = False
    speed: float = 0.0
    scale: float = 0.0
    cycle: float = 0.0
    near_depth: float = 0.0
    far_depth: float = 0.0
    max_height: float = 0.0
    parallax_correct_factor: float = 0.0


@dataclass
class FxSceneEnvironmentParameter:
    wind_rotation_y: float = 0.0
    wind_strength: float = 0.0
    wind_noise: float = 0.0
    wind_amplitude: float = 0.0
    wind_frequencies: tuple = ZERO4
    grass_lod_distance: tuple = ZERO4
    enable_tread_grass: bool = False
    enable_high_light: bool = False
    high_light_threshold: float = 0.0
    high_light_object_ambient_scale: float = 0.0
    high_light_object_albedo_heighten: float = 0.0
    high_light_chara_ambient_scale: float = 0.0
    high_light_chara_albedo_heighten: float = 0.0
    high_light_chara_falloff_scale: float = 0.0


@dataclass
class FxTAAParameter:
    blend_ratio: float = 0.0
    sharpness_power: float = 0.0


@dataclass
class NeedleFxParameter:
    hdr_option: FxHDROption = field(default_factory=FxHDROption)
    render_option: FxRenderOption = field(default_factory=FxRenderOption)
    sggi: FxSGGIParameter = field(default_factory=FxSGGIParameter)
    rlr: FxRLRParameter = field(default_factory=FxRLRParameter)
    bloom: FxBloomParameter = field(default_factory=FxBloomParameter)
    tonemap_type: ToneMapType = ToneMapType.MANUAL_EXPOSURE
    exposure_mode: ExposureMode = ExposureMode.DISNEY
    tonemap: FxToneMapParameter = field(default_factory=FxToneMapParameter)
    exposure: FxExposureParameter = field(default_factory=FxExposureParameter)
    color_contrast: FxColorContrastParameter = field(
        default_factory=FxColorContrastParameter
    )
    lightscattering: FxLightScatteringParameter = field(
        default_factory=FxLightScatteringParameter
    )
    dof: FxDOFParameter = field(default_factory=FxDOFParameter)
    shadowmap: FxShadowMapParameter = field(default_factory=FxShadowMapParameter)
    ssao: FxSSAOParameter = field(default_factory=FxSSAOParameter)
    lightfield: FxLightFieldParameter = field(default_factory=FxLightFieldParameter)
    shlightfield: FxSHLightFieldParameter = field(
        default_factory=FxSHLightFieldParameter
    )
    blur: FxScreenBlurParameter = field(default_factory=FxScreenBlurParameter)
    occlusion_capsule: FxOcclusionCapsuleParameter = field(
        default_factory=FxOcclusionCapsuleParameter
    )
    effect: FxEffectParameter = field(default_factory=FxEffectParameter)
    ss_godray: FxScreenSpaceGodrayParameter = field(
        default_factory=FxScreenSpaceGodrayParameter
    )
    godray: FxGodrayParameter = field(default_factory=FxGodrayParameter)
    heat_haze: FxHeatHazeParameter = field(default_factory=FxHeatHazeParameter)
    scene_env: FxSceneEnvironmentParameter = field(
        default_factory=FxSceneEnvironmentParameter
    )
    taa: FxTAAParameter = field(default_factory=FxTAAParameter)


@dataclass
class StageCommonParameter:
    deadline: float = 0.0


@dataclass
class StageCameraParameter:
    z_near: float = 0.0
    z_far: float = 0.0
    fovy: float = 0.0


@dataclass
class StageConfig:
    common: StageCommonParameter = field(default_factory=StageCommonParameter)
    camera: StageCameraParameter = field(default_factory=StageCameraParameter)


def _items() -> list:
    return [NeedleFxParameter() for _ in range(ITEM_COUNT)]


@dataclass
class NeedleFxSceneData:
    """Global configuration, one parameter set per item slot, and stage settings."""

    config: NeedleFxSceneConfig = field(default_factory=NeedleFxSceneConfig)
    items: list = field(default_factory=_items)
    stage_config: StageConfig = field(default_factory=StageConfig)