"""Scene graph builder.

Entry point: ``build_scene_graph(documents)``

Classifies each decoded document by its Unity class id, extracts a typed
record keyed by the document anchor, then repairs the transform hierarchy
and links components to their GameObjects.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from sceneport.config import ComponentType
from sceneport.extraction.components import extract_camera, extract_light
from sceneport.extraction.entities import extract_entity
from sceneport.extraction.hierarchy import (
    find_parent_cycles,
    link_components,
    reconcile_hierarchy,
)
from sceneport.extraction.transforms import extract_transform
from sceneport.models.records import SceneGraph, SourceDocument

logger = logging.getLogger(__name__)


def _add_entity(graph: SceneGraph, document: SourceDocument) -> None:
    graph.entities[document.anchor] = extract_entity(document)


def _add_transform(graph: SceneGraph, document: SourceDocument) -> None:
    graph.transforms[document.anchor] = extract_transform(document)


def _add_camera(graph: SceneGraph, document: SourceDocument) -> None:
    graph.cameras[document.anchor] = extract_camera(document)


def _add_light(graph: SceneGraph, document: SourceDocument) -> None:
    graph.lights[document.anchor] = extract_light(document)


_HANDLERS: dict[int, Callable[[SceneGraph, SourceDocument], None]] = {
    ComponentType.GAME_OBJECT: _add_entity,
    ComponentType.TRANSFORM: _add_transform,
    ComponentType.CAMERA: _add_camera,
    ComponentType.LIGHT: _add_light,
}


def build_scene_graph(documents: Iterable[SourceDocument]) -> SceneGraph:
    """Build a :class:`SceneGraph` from decoded documents.

    Parameters
    ----------
    documents:
        Decoded documents in file order, as returned by
        :func:`sceneport.parsing.parse_documents`.

    Returns
    -------
    SceneGraph
        Records keyed by handle, with transforms, cameras and lights
        attached to their entities.

    Raises
    ------
    MissingFieldError, FieldParseError
        On the first field that cannot be decoded.  No partial graph is
        returned.
    """
    graph = SceneGraph()
    skipped = 0

    for document in documents:
        handler = _HANDLERS.get(document.class_id)
        if handler is None:
            skipped += 1
            continue
        if document.stripped:
            logger.debug(
                "Skipping stripped %s &%d", document.type_name, document.anchor
            )
            skipped += 1
            continue
        handler(graph, document)

    reconcile_hierarchy(graph)
    link_components(graph)

    for cycle in find_parent_cycles(graph):
        logger.warning(
            "Transform hierarchy cycle: %s", " -> ".join(str(h) for h in cycle)
        )

    logger.info(
        "Scene graph: %d entities, %d transforms, %d cameras, %d lights "
        "(%d documents skipped)",
        len(graph.entities),
        len(graph.transforms),
        len(graph.cameras),
        len(graph.lights),
        skipped,
    )
    return graph
