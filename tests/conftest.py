"""Shared fixtures: synthetic Unity scene files."""

from __future__ import annotations

from typing import Callable

import pytest

from sceneport.export.identifiers import SequentialProvider

UNITY_HEADER = "%YAML 1.1\n%TAG !u! tag:unity3d.com,2011:\n"


def _unity_yaml(*documents: str) -> str:
    return UNITY_HEADER + "".join(documents)


def _game_object(anchor: int, name: str) -> str:
    return (
        f"--- !u!1 &{anchor}\n"
        "GameObject:\n"
        "  m_ObjectHideFlags: 0\n"
        "  serializedVersion: 6\n"
        f"  m_Name: {name}\n"
        "  m_IsActive: 1\n"
    )


def _transform(
    anchor: int,
    owner: int,
    *,
    position: tuple = (0, 0, 0),
    rotation: tuple = (0, 0, 0),
    scale: tuple = (1, 1, 1),
    father: int = 0,
    children: tuple = (),
) -> str:
    if children:
        child_lines = "\n" + "".join(f"  - {{fileID: {c}}}\n" for c in children)
    else:
        child_lines = " []\n"
    return (
        f"--- !u!4 &{anchor}\n"
        "Transform:\n"
        "  m_ObjectHideFlags: 0\n"
        f"  m_GameObject: {{fileID: {owner}}}\n"
        f"  m_LocalRotation: {{x: {rotation[0]}, y: {rotation[1]}, z: {rotation[2]}, w: 1}}\n"
        f"  m_LocalPosition: {{x: {position[0]}, y: {position[1]}, z: {position[2]}}}\n"
        f"  m_LocalScale: {{x: {scale[0]}, y: {scale[1]}, z: {scale[2]}}}\n"
        f"  m_Children:{child_lines}"
        f"  m_Father: {{fileID: {father}}}\n"
        "  m_RootOrder: 0\n"
    )


def _camera(anchor: int, owner: int, fov: object = 60) -> str:
    return (
        f"--- !u!20 &{anchor}\n"
        "Camera:\n"
        f"  m_GameObject: {{fileID: {owner}}}\n"
        "  m_Enabled: 1\n"
        "  near clip plane: 0.3\n"
        "  far clip plane: 1000\n"
        f"  field of view: {fov}\n"
    )


def _light(anchor: int, owner: int) -> str:
    return (
        f"--- !u!108 &{anchor}\n"
        "Light:\n"
        f"  m_GameObject: {{fileID: {owner}}}\n"
        "  m_Type: 1\n"
        "  m_Color: {r: 1, g: 0.95686275, b: 0.8392157, a: 1}\n"
        "  m_Intensity: 1\n"
    )


def _mesh_renderer(anchor: int, owner: int) -> str:
    return (
        f"--- !u!23 &{anchor}\n"
        "MeshRenderer:\n"
        f"  m_GameObject: {{fileID: {owner}}}\n"
        "  m_Materials:\n"
        "  - {fileID: 10303, guid: 0000000000000000f000000000000000, type: 0}\n"
    )


class UnityScene:
    """Namespace of document builders handed to tests."""

    yaml = staticmethod(_unity_yaml)
    game_object = staticmethod(_game_object)
    transform = staticmethod(_transform)
    camera = staticmethod(_camera)
    light = staticmethod(_light)
    mesh_renderer = staticmethod(_mesh_renderer)


@pytest.fixture
def unity() -> type[UnityScene]:
    return UnityScene


@pytest.fixture
def sample_scene() -> str:
    """Camera, light, a parent/child pair, a mesh-only object and noise.

    Handles:
      100 Main Camera (transform 101, camera 102)
      200 Directional Light (light 201, transform 202)
      300 Parent (transform 301, declares child 401)
      400 Child (transform 401, father 301)
      500 Loose (no components)
    """
    return _unity_yaml(
        "--- !u!29 &1\nOcclusionCullingSettings:\n  m_ObjectHideFlags: 0\n",
        _game_object(100, "Main Camera"),
        _transform(101, 100, position=(0, 1, -10)),
        _camera(102, 100, 60),
        _game_object(200, "Directional Light"),
        _light(201, 200),
        _transform(202, 200, position=(0, 3, 0), rotation=(0.5, -0.5, 0)),
        _game_object(300, "Parent"),
        _transform(301, 300, position=(1, 2, 3), children=(401,)),
        _mesh_renderer(302, 300),
        _game_object(400, "Child"),
        _transform(401, 400, position=(0, 1, 0), father=301),
        _game_object(500, "Loose"),
    )


@pytest.fixture
def ids() -> SequentialProvider:
    return SequentialProvider()
