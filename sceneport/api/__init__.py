"""Public conversion API."""

from sceneport.api.facade import SceneExporter, convert_scene

__all__ = ["SceneExporter", "convert_scene"]
