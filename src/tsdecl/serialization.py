"""Tree serialization — JSON round-trip for declaration nodes.

Converts node trees to/from JSON-compatible dicts. Useful for:
- Caching generator output models between builds
- Snapshotting trees in tests and debugging

All output is deterministic (sorted keys) for cache-key stability.

Example:
    from tsdecl import create_interface, create_interface_property
    from tsdecl.serialization import to_json, from_json

    node = create_interface("Point", [create_interface_property("x", "number")])
    assert from_json(to_json(node)) == node

Thread Safety:
    All functions are pure — safe to call from any thread.

"""

import json
from dataclasses import fields
from typing import Any

from tsdecl.comments import Comment, CommentKind, to_comment
from tsdecl.errors import SerializationError
from tsdecl.nodes import (
    ClassConstructor,
    ClassDeclaration,
    ClassMethod,
    ClassProperty,
    Export,
    ExportAllFrom,
    ExportNamedDeclaration,
    ExportSpecifier,
    FunctionDeclaration,
    InterfaceDeclaration,
    InterfaceIndexer,
    InterfaceMethod,
    InterfaceProperty,
    ModuleDeclaration,
    Node,
    Parameter,
    VariableDeclaration,
    VariableDeclarator,
)

# Registry of node type names to classes for deserialization
_NODE_TYPES: dict[str, type[Node]] = {
    cls.__name__: cls
    for cls in (
        ModuleDeclaration,
        ExportAllFrom,
        ExportNamedDeclaration,
        Export,
        VariableDeclaration,
        VariableDeclarator,
        ExportSpecifier,
        Parameter,
        FunctionDeclaration,
        InterfaceDeclaration,
        InterfaceMethod,
        InterfaceProperty,
        InterfaceIndexer,
        ClassDeclaration,
        ClassMethod,
        ClassConstructor,
        ClassProperty,
    )
}


def to_dict(node: Node) -> dict[str, Any]:
    """Convert a node to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.
    Recursively serializes child nodes and comments.

    """
    result: dict[str, Any] = {"_type": type(node).__name__}

    for f in fields(node):
        value = getattr(node, f.name)
        result[f.name] = _serialize_value(value)

    return result


def _serialize_value(value: Any) -> Any:
    if isinstance(value, Node):
        return to_dict(value)
    if isinstance(value, Comment):
        kind = value.kind.value if isinstance(value.kind, CommentKind) else value.kind
        return {"kind": kind, "text": value.text}
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    # Primitives: str, bool, None
    return value


def from_dict(data: dict[str, Any]) -> Node:
    """Reconstruct a typed node from a dict produced by ``to_dict``.

    Raises:
        SerializationError: If ``_type`` is missing or unknown.

    """
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized node"
        raise SerializationError(msg)

    node_cls = _NODE_TYPES.get(type_name)
    if node_cls is None:
        msg = f"Unknown node type: {type_name!r}"
        raise SerializationError(msg, type_name=type_name)

    kwargs: dict[str, Any] = {}
    for f in fields(node_cls):
        if f.name not in data:
            continue
        raw = data[f.name]
        if f.name == "comments":
            kwargs[f.name] = None if raw is None else tuple(to_comment(c) for c in raw)
        else:
            kwargs[f.name] = _deserialize_value(raw)

    return node_cls(**kwargs)


def _deserialize_value(value: Any) -> Any:
    if isinstance(value, dict):
        return from_dict(value)
    if isinstance(value, list):
        return tuple(_deserialize_value(item) for item in value)
    return value


def to_json(node: Node, *, indent: int | None = None) -> str:
    """Serialize a node tree to a JSON string (sorted keys)."""
    return json.dumps(to_dict(node), sort_keys=True, indent=indent)


def from_json(data: str) -> Node:
    """Deserialize a node tree from a JSON string.

    Raises:
        SerializationError: If the JSON is not an object describing a node.

    """
    raw = json.loads(data)
    if not isinstance(raw, dict):
        msg = f"Expected a serialized node object, got {type(raw).__name__}"
        raise SerializationError(msg)
    return from_dict(raw)


__all__ = ["from_dict", "from_json", "to_dict", "to_json"]
