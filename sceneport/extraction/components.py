"""Extract Camera and Light components."""

from __future__ import annotations

from sceneport.models.records import CameraRecord, LightRecord, SourceDocument
from sceneport.parsing.fields import read_float, read_reference


def extract_camera(document: SourceDocument) -> CameraRecord:
    """Read the vertical field of view (degrees) and owning GameObject."""
    handle = document.anchor
    return CameraRecord(
        handle=handle,
        field_of_view=read_float(document.body, "field of view", handle),
        entity=read_reference(document.body, "m_GameObject", handle),
    )


def extract_light(document: SourceDocument) -> LightRecord:
    # Only ownership is modelled; colour, intensity and range are not exported.
    handle = document.anchor
    return LightRecord(
        handle=handle,
        entity=read_reference(document.body, "m_GameObject", handle),
    )
