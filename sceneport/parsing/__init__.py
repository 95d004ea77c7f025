"""Unity YAML document parser."""

from sceneport.parsing.documents import decode_node, parse_documents

__all__ = ["decode_node", "parse_documents"]
