"""Tree serialization — JSON round-trip for Ramita nodes.

Converts node trees to/from JSON-compatible dicts. Useful for:
- Caching parsed trees to disk
- Handing trees to non-Python consumers
- Debugging and inspection

All output is deterministic (sorted keys) for cache-key stability.

Example:
    from ramita import parse
    from ramita.serialization import to_json, from_json

    tree = parse('<p class="x">Hello</p>')
    json_str = to_json(tree)
    assert from_json(json_str) == tree

Thread Safety:
    All functions are pure — safe to call from any thread.

"""

import json
from dataclasses import fields
from typing import Any

from ramita.nodes import Comment, Element, Node, Text, Tree

# Registry of node type names to classes for deserialization
_NODE_TYPES: dict[str, type[Node]] = {
    "Element": Element,
    "Text": Text,
    "Comment": Comment,
}


def to_dict(node: Node) -> dict[str, Any]:
    """Convert a node to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.
    Recursively serializes child nodes.

    Args:
        node: Any Ramita node.

    Returns:
        Dict with ``_type`` and all node fields.

    """
    result: dict[str, Any] = {"_type": type(node).__name__}

    for f in fields(node):
        value = getattr(node, f.name)
        if f.name == "children":
            result[f.name] = [to_dict(child) for child in value]
        elif f.name == "attrs":
            result[f.name] = dict(value)
        else:
            result[f.name] = value

    return result


def from_dict(data: dict[str, Any]) -> Node:
    """Reconstruct a node from a dict.

    Args:
        data: Dict with ``_type`` and node fields (as produced by to_dict).

    Returns:
        Typed node (frozen dataclass).

    Raises:
        ValueError: If ``_type`` is missing or unknown.

    """
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized node"
        raise ValueError(msg)

    node_cls = _NODE_TYPES.get(type_name)
    if node_cls is None:
        msg = f"Unknown node type: {type_name!r}"
        raise ValueError(msg)

    kwargs: dict[str, Any] = {}
    for f in fields(node_cls):
        if f.name not in data:
            continue
        raw = data[f.name]
        if f.name == "children":
            kwargs[f.name] = tuple(from_dict(child) for child in raw)
        elif f.name == "attrs":
            kwargs[f.name] = dict(raw)
        else:
            kwargs[f.name] = raw

    return node_cls(**kwargs)


def to_json(tree: Tree, *, indent: int | None = None) -> str:
    """Serialize a node, or a list of roots, to a JSON string.

    A list of roots becomes a JSON array.

    Args:
        tree: Node or list of nodes to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    if isinstance(tree, list):
        payload: Any = [to_dict(node) for node in tree]
    else:
        payload = to_dict(tree)
    return json.dumps(payload, sort_keys=True, indent=indent)


def from_json(data: str) -> Tree:
    """Deserialize a node or list of roots from a JSON string.

    Args:
        data: JSON string (as produced by to_json).

    Returns:
        Node, or list of nodes for a JSON array.

    Raises:
        ValueError: If the JSON is neither an object nor an array of objects.

    """
    raw = json.loads(data)
    if isinstance(raw, list):
        return [from_dict(item) for item in raw]
    if not isinstance(raw, dict):
        msg = f"Expected a serialized node, got {type(raw).__name__}"
        raise ValueError(msg)
    return from_dict(raw)
