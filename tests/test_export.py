"""Tests for matrix composition and three.js serialization."""

from __future__ import annotations

import json
import math
from concurrent.futures import ThreadPoolExecutor

import pytest

from sceneport.export.identifiers import SequentialProvider, UUIDProvider
from sceneport.export.matrix import (
    euler_to_quaternion,
    to_three_layout,
    transform_matrix,
    trs,
)
from sceneport.export.serializer import SceneSerializer, node_type
from sceneport.extraction.pipeline import build_scene_graph
from sceneport.models.records import (
    CameraRecord,
    EntityRecord,
    LightRecord,
    SceneGraph,
    TransformRecord,
)
from sceneport.parsing.documents import parse_documents

IDENTITY = [
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
]


def _graph(*entities: EntityRecord) -> SceneGraph:
    return SceneGraph(entities={e.handle: e for e in entities})


def _serialize(graph: SceneGraph) -> dict:
    return SceneSerializer(SequentialProvider()).serialize(graph).to_dict()


# ---------------------------------------------------------------------------
# Matrix math
# ---------------------------------------------------------------------------


class TestMatrix:

    def test_identity(self):
        t = TransformRecord(handle=1, entity=2)
        assert transform_matrix(t) == IDENTITY

    def test_translation_flips_z(self):
        t = TransformRecord(handle=1, entity=2, position=(1, 2, 3))
        expected = IDENTITY[:12] + [1.0, 2.0, -3.0, 1.0]
        assert transform_matrix(t) == expected

    def test_zero_z_is_not_negative_zero(self):
        t = TransformRecord(handle=1, entity=2, position=(5, 0, 0))
        matrix = transform_matrix(t)
        assert matrix[14] == 0.0
        assert math.copysign(1.0, matrix[14]) == 1.0

    def test_scale_on_diagonal(self):
        t = TransformRecord(handle=1, entity=2, scale=(2, 3, 4))
        matrix = transform_matrix(t)
        assert (matrix[0], matrix[5], matrix[10]) == (2.0, 3.0, 4.0)

    def test_rotation_about_y_uses_radians(self):
        t = TransformRecord(handle=1, entity=2, rotation=(0, math.pi / 2, 0))
        matrix = transform_matrix(t)
        # Column-major: first column is the rotated X axis -> (0, 0, -1).
        assert matrix[0:3] == pytest.approx([0.0, 0.0, -1.0], abs=1e-9)
        assert matrix[8:11] == pytest.approx([1.0, 0.0, 0.0], abs=1e-9)

    def test_euler_order_z_then_x_then_y(self):
        # 90 deg about X and Y; Unity applies Z, then X, then Y.
        q = euler_to_quaternion((90.0, 90.0, 0.0))
        expected = (0.5, 0.5, -0.5, 0.5)
        assert q == pytest.approx(expected, abs=1e-9)

    def test_rotation_then_scale(self):
        matrix = trs((0, 0, 0), (0, 0, 90), (2, 1, 1))
        # Rz(90) * S: X axis scaled by 2 maps to +Y.
        assert [row[0] for row in matrix[:3]] == pytest.approx([0.0, 2.0, 0.0], abs=1e-9)

    def test_layout_is_column_major(self):
        matrix = [[float(r * 4 + c) for c in range(4)] for r in range(4)]
        flat = to_three_layout(matrix)
        assert flat[0:4] == [0.0, 4.0, 8.0, 12.0]
        assert flat[12:16] == [3.0, 7.0, -11.0, 15.0]


# ---------------------------------------------------------------------------
# Identifier providers
# ---------------------------------------------------------------------------


class TestIdentifiers:

    def test_uuid_provider_unique(self):
        provider = UUIDProvider()
        ids = {provider.new_id() for _ in range(100)}
        assert len(ids) == 100

    def test_sequential_provider(self):
        provider = SequentialProvider()
        assert provider.new_id() == "00000000-0000-0000-0000-000000000001"
        assert provider.new_id() == "00000000-0000-0000-0000-000000000002"

    @pytest.mark.parametrize("provider_cls", [UUIDProvider, SequentialProvider])
    def test_providers_unique_across_threads(self, provider_cls):
        provider = provider_cls()

        def draw(_):
            return [provider.new_id() for _ in range(200)]

        with ThreadPoolExecutor(max_workers=8) as pool:
            batches = list(pool.map(draw, range(8)))
        ids = [i for batch in batches for i in batch]
        assert len(ids) == len(set(ids)) == 1600


# ---------------------------------------------------------------------------
# Serializer
# ---------------------------------------------------------------------------


class TestSerializer:

    def test_document_shape(self):
        doc = _serialize(_graph())
        assert doc["metadata"] == {
            "version": 4.5, "type": "Object", "generator": "SceneExporter",
        }
        assert doc["geometries"] == [{
            "uuid": "00000000-0000-0000-0000-000000000001",
            "type": "BoxGeometry",
            "width": 1, "height": 1, "depth": 1,
            "widthSegments": 1, "heightSegments": 1, "depthSegments": 1,
        }]
        assert doc["materials"] == [{
            "uuid": "00000000-0000-0000-0000-000000000002",
            "type": "MeshPhongMaterial",
            "color": 16777215,
            "reflectivity": 1,
            "refractionRatio": 0.98,
            "flatShading": False,
            "vertexColors": False,
            "shininess": 30,
        }]
        assert doc["object"]["type"] == "Scene"
        assert doc["object"]["children"] == []

    def test_plain_entity(self):
        doc = _serialize(_graph(EntityRecord(handle=1, name="Cube")))
        node = doc["object"]["children"][0]
        assert node["type"] == "Mesh"
        assert "matrix" not in node
        assert node["fov"] == 0
        assert node["castShadow"] is False
        assert node["receiveShadow"] is False
        assert node["children"] == []
        assert node["geometry"] == doc["geometries"][0]["uuid"]
        assert node["material"] == doc["materials"][0]["uuid"]

    def test_camera_without_transform(self):
        entity = EntityRecord(
            handle=1, camera=CameraRecord(handle=2, field_of_view=60, entity=1),
        )
        node = _serialize(_graph(entity))["object"]["children"][0]
        assert node["type"] == "PerspectiveCamera"
        assert node["fov"] == 60
        assert "matrix" not in node

    def test_light_casts_shadows(self):
        entity = EntityRecord(handle=1, light=LightRecord(handle=2, entity=1))
        node = _serialize(_graph(entity))["object"]["children"][0]
        assert node["type"] == "DirectionalLight"
        assert node["castShadow"] is True
        assert node["receiveShadow"] is True

    def test_camera_beats_light(self):
        entity = EntityRecord(
            handle=1,
            camera=CameraRecord(handle=2, field_of_view=45, entity=1),
            light=LightRecord(handle=3, entity=1),
        )
        assert node_type(entity) == "PerspectiveCamera"
        node = _serialize(_graph(entity))["object"]["children"][0]
        assert node["castShadow"] is True

    def test_children_reuse_parent_matrix(self):
        entity = EntityRecord(
            handle=1,
            transform=TransformRecord(
                handle=2, entity=1, position=(1, 2, 3), children=[10, 11],
            ),
        )
        node = _serialize(_graph(entity))["object"]["children"][0]
        assert len(node["children"]) == 2
        for child in node["children"]:
            assert child["type"] == "Mesh"
            assert child["matrix"] == node["matrix"]
            assert child["children"] == []
            assert child["fov"] == 0
            assert child["castShadow"] is False

    def test_grandchildren_not_expanded(self, unity):
        text = unity.yaml(
            unity.game_object(1, "A"),
            unity.transform(2, 1, children=(4,)),
            unity.game_object(3, "B"),
            unity.transform(4, 3, father=2, children=(6,)),
            unity.game_object(5, "C"),
            unity.transform(6, 5, father=4),
        )
        doc = _serialize(build_scene_graph(parse_documents(text)))
        for node in doc["object"]["children"]:
            for child in node["children"]:
                assert child["children"] == []

    def test_all_uuids_unique(self, sample_scene):
        graph = build_scene_graph(parse_documents(sample_scene))
        document = SceneSerializer().serialize(graph)
        doc = document.to_dict()
        seen = [doc["geometries"][0]["uuid"], doc["materials"][0]["uuid"],
                doc["object"]["uuid"]]

        def walk(nodes):
            for n in nodes:
                seen.append(n["uuid"])
                walk(n["children"])

        walk(doc["object"]["children"])
        assert len(seen) == len(set(seen))

    def test_fresh_ids_each_export(self, sample_scene):
        graph = build_scene_graph(parse_documents(sample_scene))
        serializer = SceneSerializer()
        first = serializer.serialize(graph).to_dict()
        second = serializer.serialize(graph).to_dict()
        assert first["object"]["uuid"] != second["object"]["uuid"]

    def test_deterministic_with_sequential_ids(self, sample_scene):
        graph = build_scene_graph(parse_documents(sample_scene))
        first = SceneSerializer(SequentialProvider()).serialize(graph).to_json()
        second = SceneSerializer(SequentialProvider()).serialize(graph).to_json()
        assert first == second

    def test_sample_scene(self, sample_scene, ids):
        graph = build_scene_graph(parse_documents(sample_scene))
        doc = json.loads(SceneSerializer(ids).serialize(graph).to_json())
        nodes = doc["object"]["children"]
        assert [n["type"] for n in nodes] == [
            "PerspectiveCamera", "DirectionalLight", "Mesh", "Mesh", "Mesh",
        ]
        camera, light, parent, child, loose = nodes
        assert camera["fov"] == 60
        assert camera["matrix"][12:15] == [0.0, 1.0, 10.0]
        assert parent["matrix"][12:15] == [1.0, 2.0, -3.0]
        assert len(parent["children"]) == 2
        assert child["children"] == []
        assert "matrix" not in loose
