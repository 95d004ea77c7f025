"""Typed accessors over decoded document bodies.

Each accessor takes the owning document's handle so failures can name both
the field and the document they came from.
"""

from __future__ import annotations

import math
import re
from typing import Any

from sceneport.errors import FieldParseError, MissingFieldError
from sceneport.models.records import Vector3

# Unity's null reference: ``{fileID: 0}``
NULL_FILE_ID = 0

# Plain decimal literals only: no ``1_000``, no padding, no ``inf``/``nan``.
_FLOAT_LITERAL = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_INT_LITERAL = re.compile(r"[+-]?[0-9]+")


def require(body: dict[str, Any], field: str, handle: int, path: str = "") -> Any:
    """Return ``body[field]`` or raise :class:`MissingFieldError`."""
    if field not in body:
        raise MissingFieldError(path + field, handle)
    return body[field]


def require_mapping(
    body: dict[str, Any], field: str, handle: int, path: str = ""
) -> dict[str, Any]:
    value = require(body, field, handle, path)
    # ``m_Father: `` with no value decodes to an empty scalar.
    if value == "" or value is None:
        return {}
    if not isinstance(value, dict):
        raise FieldParseError(path + field, handle, value, expected="mapping")
    return value


def read_float(
    body: dict[str, Any], field: str, handle: int, path: str = ""
) -> float:
    """Read a finite decimal float; the output matrix has no room for inf/nan."""
    value = require(body, field, handle, path)
    if not isinstance(value, str) or not _FLOAT_LITERAL.fullmatch(value):
        raise FieldParseError(path + field, handle, value)
    number = float(value)
    # ``1e999`` overflows to inf
    if not math.isfinite(number):
        raise FieldParseError(path + field, handle, value)
    return number


def read_int(body: dict[str, Any], field: str, handle: int, path: str = "") -> int:
    value = require(body, field, handle, path)
    if not isinstance(value, str) or not _INT_LITERAL.fullmatch(value):
        raise FieldParseError(path + field, handle, value, expected="integer")
    return int(value)


def read_vector3(body: dict[str, Any], field: str, handle: int) -> Vector3:
    """Read an ``{x: .., y: .., z: ..}`` mapping as a float triple."""
    vector = require_mapping(body, field, handle)
    prefix = f"{field}."
    return (
        read_float(vector, "x", handle, prefix),
        read_float(vector, "y", handle, prefix),
        read_float(vector, "z", handle, prefix),
    )


def read_reference(body: dict[str, Any], field: str, handle: int) -> int:
    """Read a required ``{fileID: N}`` reference."""
    reference = require_mapping(body, field, handle)
    return read_int(reference, "fileID", handle, f"{field}.")


def read_optional_reference(
    body: dict[str, Any], field: str, handle: int
) -> int | None:
    """Read a required reference field whose null value means "none".

    The field itself must be present; ``{fileID: 0}`` or an empty mapping
    yields ``None``.
    """
    reference = require_mapping(body, field, handle)
    if not reference:
        return None
    file_id = read_int(reference, "fileID", handle, f"{field}.")
    return None if file_id == NULL_FILE_ID else file_id


def read_reference_list(body: dict[str, Any], field: str, handle: int) -> list[int]:
    """Read an optional list of ``{fileID: N}`` references.

    A missing field is an empty list.  Null references and entries without a
    ``fileID`` are skipped.
    """
    items = body.get(field)
    if not items:
        return []
    if not isinstance(items, list):
        raise FieldParseError(field, handle, items, expected="sequence")

    handles: list[int] = []
    for index, item in enumerate(items):
        if not isinstance(item, dict) or "fileID" not in item:
            continue
        file_id = read_int(item, "fileID", handle, f"{field}[{index}].")
        if file_id == NULL_FILE_ID:
            continue
        handles.append(file_id)
    return handles
