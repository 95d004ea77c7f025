"""SceneExporter — the single entry point for scene conversion.

Usage::

    from sceneport import SceneExporter

    exporter = SceneExporter()
    json_text = exporter.convert(Path("Main.unity").read_text())
    result = exporter.export("Assets/Scenes/Main.unity")   # Build/Main.unity.json
"""

from __future__ import annotations

import logging
from pathlib import Path

from sceneport.config import ExportSettings
from sceneport.export.identifiers import IdentifierProvider
from sceneport.export.serializer import SceneSerializer
from sceneport.export.writer import ExportResult, JSONSceneWriter, read_scene_text
from sceneport.extraction.pipeline import build_scene_graph
from sceneport.models.output import SceneDocument
from sceneport.models.records import SceneGraph
from sceneport.parsing.documents import parse_documents

logger = logging.getLogger(__name__)


def convert_scene(
    text: str,
    ids: IdentifierProvider | None = None,
) -> SceneDocument:
    """Run parser, builder and serializer over raw scene text."""
    graph = build_scene_graph(parse_documents(text))
    return SceneSerializer(ids).serialize(graph)


class SceneExporter:
    """Convert Unity scenes to three.js JSON.

    Parameters
    ----------
    settings:
        Output directory, indentation and log level.  Defaults to
        :meth:`ExportSettings.from_env`.
    ids:
        Identifier provider for the serializer; random UUIDs by default.
    """

    def __init__(
        self,
        settings: ExportSettings | None = None,
        *,
        ids: IdentifierProvider | None = None,
    ) -> None:
        self.settings = settings or ExportSettings.from_env()
        self._ids = ids
        self._writer = JSONSceneWriter(indent=self.settings.indent)

    def build(self, text: str) -> SceneGraph:
        """Parse *text* and return the linked scene graph."""
        return build_scene_graph(parse_documents(text))

    def to_document(self, text: str) -> SceneDocument:
        return convert_scene(text, self._ids)

    def convert(self, text: str) -> str:
        """Convert scene text to a JSON string."""
        return self.to_document(text).to_json(indent=self.settings.indent)

    def export(
        self,
        scene_path: str | Path,
        output_dir: str | Path | None = None,
    ) -> ExportResult:
        """Convert a scene file and write ``<name>.json`` into *output_dir*.

        Nothing is written if reading or conversion fails.

        Raises
        ------
        SourceNotFoundError
            If *scene_path* does not exist.
        ParseError
            If the file is not UTF-8 text or not well-formed scene YAML.
        MissingFieldError, FieldParseError
            If a required field is absent or not a finite number.
        """
        scene_path = Path(scene_path)
        target_dir = Path(output_dir) if output_dir is not None else self.settings.output_dir

        logger.info("Exporting %s", scene_path)
        document = self.to_document(read_scene_text(scene_path))
        result = self._writer.write(document, scene_path, target_dir)
        logger.info("%s", result.message)
        return result
