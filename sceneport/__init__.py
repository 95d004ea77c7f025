"""sceneport — Unity scene to three.js JSON scene exporter."""

__version__ = "1.0.0"

from sceneport.api.facade import SceneExporter, convert_scene
from sceneport.config import ComponentType, ExportSettings, configure_logging
from sceneport.errors import (
    FieldParseError,
    MissingFieldError,
    ParseError,
    SceneExportError,
    SourceNotFoundError,
)
from sceneport.export.identifiers import (
    IdentifierProvider,
    SequentialProvider,
    UUIDProvider,
)
from sceneport.export.serializer import SceneSerializer
from sceneport.export.writer import ExportResult
from sceneport.extraction.pipeline import build_scene_graph
from sceneport.models.output import SceneDocument
from sceneport.models.records import SceneGraph
from sceneport.parsing.documents import parse_documents

__all__ = [
    "__version__",
    # Facade
    "SceneExporter",
    "convert_scene",
    # Pipeline stages
    "build_scene_graph",
    "parse_documents",
    "SceneSerializer",
    # Models
    "ComponentType",
    "ExportResult",
    "ExportSettings",
    "SceneDocument",
    "SceneGraph",
    # Identifiers
    "IdentifierProvider",
    "SequentialProvider",
    "UUIDProvider",
    # Errors
    "FieldParseError",
    "MissingFieldError",
    "ParseError",
    "SceneExportError",
    "SourceNotFoundError",
    "configure_logging",
]
