"""Extract GameObject documents as entity records."""

from __future__ import annotations

from sceneport.models.records import EntityRecord, SourceDocument
from sceneport.parsing.fields import require


def extract_entity(document: SourceDocument) -> EntityRecord:
    """Register a GameObject by its anchor with its display name.

    Transform, camera and light are attached later by the link pass.
    """
    name = require(document.body, "m_Name", document.anchor)
    return EntityRecord(handle=document.anchor, name=str(name))
