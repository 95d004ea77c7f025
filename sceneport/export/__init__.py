"""three.js JSON export: matrices, identifiers, serialization, file output."""

from sceneport.export.identifiers import (
    IdentifierProvider,
    SequentialProvider,
    UUIDProvider,
)
from sceneport.export.serializer import SceneSerializer
from sceneport.export.writer import ExportResult, JSONSceneWriter, read_scene_text

__all__ = [
    "ExportResult",
    "IdentifierProvider",
    "JSONSceneWriter",
    "SceneSerializer",
    "SequentialProvider",
    "UUIDProvider",
    "read_scene_text",
]
