"""Decode Unity YAML text into :class:`SourceDocument` records."""

from __future__ import annotations

import logging
from typing import Any

import yaml

from sceneport.config import UNITY_TAG_PREFIX
from sceneport.errors import ParseError
from sceneport.models.records import SourceDocument
from sceneport.parsing.loader import RawDocument, compose_documents

logger = logging.getLogger(__name__)


def decode_node(node: yaml.Node) -> Any:
    """Convert a composed YAML node into plain dicts, lists and strings.

    Scalars stay strings; numeric conversion is the builder's job.
    """
    if isinstance(node, yaml.MappingNode):
        result: dict[str, Any] = {}
        for key_node, value_node in node.value:
            if not isinstance(key_node, yaml.ScalarNode):
                raise ParseError(
                    f"Non-scalar mapping key at line {key_node.start_mark.line + 1}"
                )
            result[key_node.value] = decode_node(value_node)
        return result
    if isinstance(node, yaml.SequenceNode):
        return [decode_node(item) for item in node.value]
    return node.value


def parse_class_id(tag: str | None) -> int:
    """Return the numeric class id from a ``tag:unity3d.com,2011:<id>`` tag."""
    if not tag or not tag.startswith(UNITY_TAG_PREFIX):
        raise ParseError(f"Document tag {tag!r} is not a Unity class tag")
    suffix = tag[len(UNITY_TAG_PREFIX):]
    try:
        return int(suffix)
    except ValueError:
        raise ParseError(f"Document tag {tag!r} has a non-numeric class id") from None


def parse_anchor(anchor: str | None) -> int:
    """Return the document anchor as an integer file id."""
    if anchor is None:
        raise ParseError("Document has no anchor")
    try:
        return int(anchor)
    except ValueError:
        raise ParseError(f"Document anchor &{anchor} is not an integer") from None


def _to_source_document(raw: RawDocument) -> SourceDocument:
    class_id = parse_class_id(raw.tag)
    anchor = parse_anchor(raw.anchor)

    if not isinstance(raw.node, yaml.MappingNode) or not raw.node.value:
        raise ParseError(f"Document &{anchor} does not hold a mapping")
    if len(raw.node.value) != 1:
        raise ParseError(
            f"Document &{anchor} has {len(raw.node.value)} root entries, expected one"
        )

    root = decode_node(raw.node)
    # Unity documents hold exactly one entry: ``<TypeName>: {fields}``.
    type_name, body = next(iter(root.items()))
    if body is None or body == "":
        body = {}
    if not isinstance(body, dict):
        raise ParseError(f"Document &{anchor} ({type_name}) body is not a mapping")

    return SourceDocument(
        tag=raw.tag,
        anchor=anchor,
        class_id=class_id,
        type_name=type_name,
        body=body,
        stripped=raw.stripped,
    )


def parse_documents(text: str) -> list[SourceDocument]:
    """Parse a Unity scene file into an ordered list of documents.

    Parameters
    ----------
    text:
        Full contents of a ``.unity`` (or ``.prefab``) file.

    Returns
    -------
    list[SourceDocument]
        One entry per YAML document, in file order.

    Raises
    ------
    ParseError
        If the text is not well-formed YAML or a document header lacks a
        parseable Unity tag or anchor.
    """
    documents: list[SourceDocument] = []
    try:
        for raw in compose_documents(text):
            documents.append(_to_source_document(raw))
    except yaml.YAMLError as exc:
        raise ParseError(f"Malformed scene YAML: {exc}") from exc

    logger.debug("Decoded %d documents", len(documents))
    return documents
