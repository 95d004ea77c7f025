"""three.js Object-format document (format version 4.5).

Field names follow Python conventions; aliases carry the exact JSON keys
``THREE.ObjectLoader`` expects.  Dump with ``by_alias=True``.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from sceneport.config import (
    BOX_SEGMENTS,
    BOX_SIZE,
    FORMAT_TYPE,
    FORMAT_VERSION,
    GENERATOR_NAME,
    MATERIAL_COLOR,
    MATERIAL_REFLECTIVITY,
    MATERIAL_REFRACTION_RATIO,
    MATERIAL_SHININESS,
)

NodeType = Literal["PerspectiveCamera", "DirectionalLight", "Mesh"]


class _OutputModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class Metadata(_OutputModel):
    version: float = FORMAT_VERSION
    type: str = FORMAT_TYPE
    generator: str = GENERATOR_NAME


class BoxGeometry(_OutputModel):
    uuid: str
    type: Literal["BoxGeometry"] = "BoxGeometry"
    width: float = BOX_SIZE
    height: float = BOX_SIZE
    depth: float = BOX_SIZE
    width_segments: int = Field(default=BOX_SEGMENTS, alias="widthSegments")
    height_segments: int = Field(default=BOX_SEGMENTS, alias="heightSegments")
    depth_segments: int = Field(default=BOX_SEGMENTS, alias="depthSegments")


class PhongMaterial(_OutputModel):
    uuid: str
    type: Literal["MeshPhongMaterial"] = "MeshPhongMaterial"
    color: int = MATERIAL_COLOR
    reflectivity: float = MATERIAL_REFLECTIVITY
    refraction_ratio: float = Field(
        default=MATERIAL_REFRACTION_RATIO, alias="refractionRatio"
    )
    flat_shading: bool = Field(default=False, alias="flatShading")
    vertex_colors: bool = Field(default=False, alias="vertexColors")
    shininess: float = MATERIAL_SHININESS


class ObjectNode(_OutputModel):
    """One node of the exported scene tree."""

    uuid: str
    type: NodeType = "Mesh"
    matrix: Optional[list[float]] = None
    """16 floats, column-major; omitted for entities without a transform."""

    fov: float = 0
    geometry: str
    material: str
    cast_shadow: bool = Field(default=False, alias="castShadow")
    receive_shadow: bool = Field(default=False, alias="receiveShadow")
    children: list[ObjectNode] = Field(default_factory=list)


class SceneRoot(_OutputModel):
    uuid: str
    type: Literal["Scene"] = "Scene"
    children: list[ObjectNode] = Field(default_factory=list)


class SceneDocument(_OutputModel):
    """The complete exported document."""

    metadata: Metadata = Field(default_factory=Metadata)
    geometries: list[BoxGeometry]
    materials: list[PhongMaterial]
    object_: SceneRoot = Field(alias="object")

    def to_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self, indent: int | None = 2) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)
