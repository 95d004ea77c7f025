"""Typed records for the source scene and the exported document."""

from sceneport.models.output import (
    BoxGeometry,
    Metadata,
    ObjectNode,
    PhongMaterial,
    SceneDocument,
    SceneRoot,
)
from sceneport.models.records import (
    CameraRecord,
    EntityRecord,
    LightRecord,
    SceneGraph,
    SourceDocument,
    TransformRecord,
)

__all__ = [
    "BoxGeometry",
    "CameraRecord",
    "EntityRecord",
    "LightRecord",
    "Metadata",
    "ObjectNode",
    "PhongMaterial",
    "SceneDocument",
    "SceneGraph",
    "SceneRoot",
    "SourceDocument",
    "TransformRecord",
]
