"""PyYAML loader tuned for Unity's scene serialization.

Unity writes one ``%TAG !u! tag:unity3d.com,2011:`` directive at the top of
the file and then many documents that all use the ``!u!`` handle.  Stock
PyYAML forgets tag handles at every explicit document start, so the loader
below carries them forward.  It also reports the anchor of each document's
root node, which stock PyYAML discards after composing.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator

import yaml
from yaml.nodes import Node

# ``--- !u!4 &123 stripped``: prefab placeholders, not valid YAML as written.
_STRIPPED_HEADER = re.compile(
    r"^(---[^\n]*?&([-\w]+))[ \t]+stripped[ \t]*\r?$",
    re.MULTILINE,
)


@dataclass
class RawDocument:
    """A composed document root together with its header metadata."""

    node: Node
    tag: str | None
    anchor: str | None
    stripped: bool = False


class UnitySceneLoader(yaml.SafeLoader):
    """SafeLoader that composes Unity documents without constructing them."""

    def process_directives(self):  # type: ignore[override]
        inherited = dict(self.tag_handles or {})
        value = super().process_directives()
        for handle, prefix in inherited.items():
            self.tag_handles.setdefault(handle, prefix)
        return value

    def compose_document(self) -> RawDocument:  # type: ignore[override]
        # Drop the DOCUMENT-START event.
        self.get_event()
        root_event = self.peek_event()
        node = self.compose_node(None, None)
        # Drop the DOCUMENT-END event.
        self.get_event()
        self.anchors = {}
        return RawDocument(
            node=node,
            tag=getattr(root_event, "tag", None),
            anchor=getattr(root_event, "anchor", None),
        )


def strip_placeholder_markers(text: str) -> tuple[str, set[str]]:
    """Remove ``stripped`` header markers, returning the anchors they were on."""
    anchors: set[str] = set()

    def _replace(match: re.Match[str]) -> str:
        anchors.add(match.group(2))
        return match.group(1)

    return _STRIPPED_HEADER.sub(_replace, text), anchors


def compose_documents(text: str) -> Iterator[RawDocument]:
    """Yield every document of *text* in order.

    Raises :class:`yaml.YAMLError` on malformed input.
    """
    cleaned, stripped = strip_placeholder_markers(text)
    loader = UnitySceneLoader(cleaned)
    try:
        while loader.check_node():
            document = loader.get_node()
            document.stripped = document.anchor in stripped
            yield document
    finally:
        loader.dispose()
