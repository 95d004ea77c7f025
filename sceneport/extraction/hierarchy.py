"""Post-passes over the record arena: hierarchy repair and component linking.

Unity stores both directions of the transform hierarchy (``m_Father`` and
``m_Children``) and the two are not always in agreement.  Lookups into the
arena use ``dict.get`` so dangling handles are simply no-ops.
"""

from __future__ import annotations

import logging

from sceneport.models.records import SceneGraph

logger = logging.getLogger(__name__)


def reconcile_hierarchy(graph: SceneGraph) -> None:
    """Add every transform to its parent's child list if it is not there yet.

    The appended value is the child's owning entity handle.
    """
    for transform in graph.transforms.values():
        if transform.parent is None:
            continue
        parent = graph.transforms.get(transform.parent)
        if parent is None:
            logger.debug(
                "Transform %d: parent %d not in scene", transform.handle, transform.parent
            )
            continue
        if transform.entity not in parent.children:
            parent.children.append(transform.entity)


def link_components(graph: SceneGraph) -> None:
    """Attach cameras, lights and transforms to their owning entities.

    Components whose owner is not in the scene are dropped silently.
    """
    dropped = 0

    for camera in graph.cameras.values():
        entity = graph.entities.get(camera.entity)
        if entity is None:
            dropped += 1
            continue
        entity.camera = camera

    for light in graph.lights.values():
        entity = graph.entities.get(light.entity)
        if entity is None:
            dropped += 1
            continue
        entity.light = light

    for transform in graph.transforms.values():
        entity = graph.entities.get(transform.entity)
        if entity is None:
            dropped += 1
            continue
        entity.transform = transform

    if dropped:
        logger.debug("Dropped %d components with unknown owners", dropped)


def find_parent_cycles(graph: SceneGraph) -> list[list[int]]:
    """Return every cycle in the ``parent`` chain, as lists of transform handles."""
    cycles: list[list[int]] = []
    settled: set[int] = set()

    for start in graph.transforms:
        path: list[int] = []
        on_path: set[int] = set()
        current = start
        while current is not None and current not in settled:
            if current in on_path:
                cycles.append(path[path.index(current):])
                break
            on_path.add(current)
            path.append(current)
            record = graph.transforms.get(current)
            current = record.parent if record is not None else None
        settled.update(path)

    return cycles
