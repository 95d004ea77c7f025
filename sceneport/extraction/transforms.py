"""Extract Transform documents: local TRS and hierarchy edges."""

from __future__ import annotations

from sceneport.models.records import SourceDocument, TransformRecord
from sceneport.parsing.fields import (
    read_optional_reference,
    read_reference,
    read_reference_list,
    read_vector3,
)


def extract_transform(document: SourceDocument) -> TransformRecord:
    """Return a TransformRecord for a ``Transform`` document.

    ``m_LocalRotation`` is read as three Euler angles in radians; its ``w``
    component is ignored.  A ``m_Father`` of ``{fileID: 0}`` means the
    transform is a root.
    """
    body = document.body
    handle = document.anchor

    return TransformRecord(
        handle=handle,
        position=read_vector3(body, "m_LocalPosition", handle),
        rotation=read_vector3(body, "m_LocalRotation", handle),
        scale=read_vector3(body, "m_LocalScale", handle),
        entity=read_reference(body, "m_GameObject", handle),
        parent=read_optional_reference(body, "m_Father", handle),
        children=read_reference_list(body, "m_Children", handle),
    )
