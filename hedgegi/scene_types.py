"""Materials and models of a loaded scene."""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class MaterialType(IntEnum):
    COMMON = 0
    BLEND = 1
    IGNORE_LIGHT = 2
    SKY = 3


@dataclass
class MaterialParameters:
    diffuse: tuple = (1.0, 1.0, 1.0, 1.0)
    specular: tuple = (1.0, 1.0, 1.0, 1.0)
    ambient: tuple = (1.0, 1.0, 1.0, 1.0)
    power_gloss_level: tuple = (0.0, 0.0, 0.0, 0.0)
    opacity_reflection_refraction_spec_type: tuple = (1.0, 0.0, 0.0, 0.0)
    luminance_range: tuple = (0.0, 0.0, 0.0, 0.0)
    luminance: tuple = (1.0, 1.0, 1.0, 1.0)
    pbr_factor: tuple = (0.04, 0.5, 0.0, 0.0)
    pbr_factor2: tuple = (0.04, 0.5, 0.0, 0.0)
    emission_param: tuple = (0.0, 0.0, 0.0, 1.0)
    emissive: tuple = (0.0, 0.0, 0.0, 0.0)
    double_sided: bool = False
    additive: bool = False


@dataclass
class MaterialTextures:
    """Bitmaps a material samples; any of them may be missing."""

    diffuse: Any = None
    specular: Any = None
    gloss: Any = None
    normal: Any = None
    alpha: Any = None
    diffuse_blend: Any = None
    specular_blend: Any = None
    gloss_blend: Any = None
    normal_blend: Any = None
    emission: Any = None
    environment: Any = None


@dataclass
class Material:
    name: str = ""
    type: MaterialType = MaterialType.COMMON
    sky_type: int = 0
    sky_sqrt: bool = False
    ignore_vertex_color: bool = False
    has_metalness: bool = False
    parameters: MaterialParameters = field(default_factory=MaterialParameters)
    textures: MaterialTextures = field(default_factory=MaterialTextures)


@dataclass
class Model:
    name: str = ""
    meshes: list = field(default_factory=list)