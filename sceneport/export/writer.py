"""Scene file reading and JSON document writing."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from sceneport.config import OUTPUT_SUFFIX
from sceneport.errors import ParseError, SourceNotFoundError
from sceneport.models.output import SceneDocument


@dataclass
class ExportResult:
    """Result of a file export."""

    file_path: Path
    source_path: Path
    node_count: int = 0
    message: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "file_path": str(self.file_path),
            "source_path": str(self.source_path),
            "node_count": self.node_count,
            "message": self.message,
        }


def read_scene_text(scene_path: str | Path) -> str:
    """Return the text of a scene file, or raise :class:`SourceNotFoundError`.

    Raises :class:`ParseError` if the file is not valid UTF-8.
    """
    path = Path(scene_path)
    if not path.is_file():
        raise SourceNotFoundError(path)
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ParseError(f"{path} is not valid UTF-8: {exc}") from exc


def output_path_for(scene_path: str | Path, output_dir: str | Path) -> Path:
    """``Assets/Main.unity`` -> ``<output_dir>/Main.unity.json``."""
    return Path(output_dir) / (Path(scene_path).name + OUTPUT_SUFFIX)


class JSONSceneWriter:
    """Write exported documents as JSON files.

    Parameters
    ----------
    indent:
        JSON indentation, or ``None`` for a single line.
    """

    def __init__(self, indent: int | None = 2) -> None:
        self.indent = indent

    def write(
        self,
        document: SceneDocument,
        scene_path: str | Path,
        output_dir: str | Path,
    ) -> ExportResult:
        output_path = output_path_for(scene_path, output_dir)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(document.to_json(indent=self.indent), encoding="utf-8")

        return ExportResult(
            file_path=output_path,
            source_path=Path(scene_path),
            node_count=len(document.object_.children),
            message=f"{output_path.name} created in {output_path.parent}",
        )
