"""Scene graph builder: typed records from decoded Unity documents."""

from sceneport.extraction.pipeline import build_scene_graph

__all__ = ["build_scene_graph"]
