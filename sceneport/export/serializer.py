"""Project a SceneGraph onto a three.js Object-format document."""

from __future__ import annotations

import logging

from sceneport.export.identifiers import IdentifierProvider, UUIDProvider
from sceneport.export.matrix import transform_matrix
from sceneport.models.output import (
    BoxGeometry,
    NodeType,
    ObjectNode,
    PhongMaterial,
    SceneDocument,
    SceneRoot,
)
from sceneport.models.records import EntityRecord, SceneGraph

logger = logging.getLogger(__name__)


def node_type(entity: EntityRecord) -> NodeType:
    """Camera wins over light; everything else is exported as a mesh."""
    if entity.camera is not None:
        return "PerspectiveCamera"
    if entity.light is not None:
        return "DirectionalLight"
    return "Mesh"


class SceneSerializer:
    """Serialize scene graphs with a single shared box and phong material.

    Parameters
    ----------
    ids:
        Source of fresh identifiers.  Defaults to random UUIDs, so repeated
        exports of the same scene differ only in their identifiers.
    """

    def __init__(self, ids: IdentifierProvider | None = None) -> None:
        self._ids = ids or UUIDProvider()

    def serialize(self, graph: SceneGraph) -> SceneDocument:
        geometry = BoxGeometry(uuid=self._ids.new_id())
        material = PhongMaterial(uuid=self._ids.new_id())
        root = SceneRoot(uuid=self._ids.new_id())

        for entity in graph.entities.values():
            root.children.append(
                self._entity_node(entity, geometry.uuid, material.uuid)
            )

        logger.debug("Serialized %d top-level nodes", len(root.children))
        return SceneDocument(
            geometries=[geometry],
            materials=[material],
            object_=root,
        )

    def _entity_node(
        self, entity: EntityRecord, geometry: str, material: str
    ) -> ObjectNode:
        transform = entity.transform
        matrix = transform_matrix(transform) if transform is not None else None
        has_light = entity.light is not None

        node = ObjectNode(
            uuid=self._ids.new_id(),
            type=node_type(entity),
            matrix=matrix,
            fov=entity.camera.field_of_view if entity.camera is not None else 0,
            geometry=geometry,
            material=material,
            cast_shadow=has_light,
            receive_shadow=has_light,
        )

        # Children are one synthetic level deep and reuse the parent's matrix.
        if transform is not None:
            for _child in transform.children:
                node.children.append(
                    ObjectNode(
                        uuid=self._ids.new_id(),
                        type="Mesh",
                        matrix=list(matrix),
                        geometry=geometry,
                        material=material,
                    )
                )
        return node
