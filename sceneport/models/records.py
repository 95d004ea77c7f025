"""Scene graph records — the typed view of a Unity scene.

Records only ever refer to each other through integer handles (the Unity
``fileID`` / document anchor).  The builder attaches component records to
their entity in a final link pass; nothing else holds object references.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field

Vector3 = tuple[float, float, float]


class SourceDocument(BaseModel):
    """One decoded YAML document: ``--- !u!<class_id> &<anchor>``."""

    tag: str
    anchor: int
    class_id: int
    type_name: str
    """Root key of the document, e.g. ``GameObject`` or ``Transform``."""

    body: dict[str, Any] = Field(default_factory=dict)
    stripped: bool = False
    """Prefab placeholder documents carry no local fields."""


class TransformRecord(BaseModel):
    """Local position/rotation/scale plus hierarchy edges."""

    handle: int
    position: Vector3 = (0.0, 0.0, 0.0)
    rotation: Vector3 = (0.0, 0.0, 0.0)
    """Euler angles in radians, as stored in the scene file."""

    scale: Vector3 = (1.0, 1.0, 1.0)
    entity: int
    parent: Optional[int] = None
    children: list[int] = Field(default_factory=list)


class CameraRecord(BaseModel):
    handle: int
    field_of_view: float
    entity: int


class LightRecord(BaseModel):
    handle: int
    entity: int


class EntityRecord(BaseModel):
    """A Unity GameObject with at most one transform, camera and light."""

    handle: int
    name: str = ""
    transform: Optional[TransformRecord] = None
    camera: Optional[CameraRecord] = None
    light: Optional[LightRecord] = None


class SceneGraph(BaseModel):
    """Arena of records keyed by handle, in document order."""

    entities: dict[int, EntityRecord] = Field(default_factory=dict)
    transforms: dict[int, TransformRecord] = Field(default_factory=dict)
    cameras: dict[int, CameraRecord] = Field(default_factory=dict)
    lights: dict[int, LightRecord] = Field(default_factory=dict)
