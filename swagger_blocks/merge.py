"""
Merge policy for serialized declaration fragments.

Fragments are merged after serialization, into freshly built output
structures, so stored nodes are never touched. The node type a fragment
was declared with decides which of its fields are merge points:

- MERGE_NODES: one sub-node, merged with that sub-node type's own policy
- MERGE_MAPPINGS: name -> sub-node entries, entries sharing a name merged
- MERGE_KEYED_SEQUENCES: lists whose entries sharing an identity are merged

Every other field follows the general policy: lists are unioned in
first-seen order, scalars and mappings use last-declaration-wins. $ref
objects and pointer fields ("#/...") are opaque and always replaced.
"""

from __future__ import annotations

from typing import Any

from .nodes import UNSET, Node
from .utils import is_pointer_key, is_reference


def union_sequences(current: list[Any], incoming: list[Any]) -> list[Any]:
    """Append the items of `incoming` that `current` does not contain yet."""
    result = list(current)
    for item in incoming:
        if item not in result:
            result.append(item)
    return result


def merge_node(current: Any, incoming: Any, node_class: type[Node]) -> Any:
    """Merge two serialized `node_class` objects.

    Returns:
        `current` merged in place, or `incoming` when either side is not an
        object or is a $ref object
    """
    if (
        isinstance(current, dict)
        and isinstance(incoming, dict)
        and not is_reference(current)
        and not is_reference(incoming)
    ):
        return merge_fields(current, incoming, node_class)
    return incoming


def merge_entries(target: dict[str, Any], incoming: dict[str, Any], entry_class: type[Node]) -> dict[str, Any]:
    """Merge a name -> object mapping (e.g. responses by status code) in place."""
    for name, entry in incoming.items():
        if name in target:
            target[name] = merge_node(target[name], entry, entry_class)
        else:
            target[name] = entry
    return target


def merge_keyed_sequence(
    target: list[Any],
    incoming: list[Any],
    identity: str,
    entry_class: type[Node] = Node,
) -> list[Any]:
    """Merge list entries sharing the same `identity` field (e.g. apis by path).

    Entries without the identity field, or with a new value, are appended.
    """
    positions: dict[Any, int] = {}
    for position, entry in enumerate(target):
        if isinstance(entry, dict) and identity in entry:
            positions.setdefault(entry[identity], position)

    for entry in incoming:
        if not isinstance(entry, dict) or identity not in entry:
            target.append(entry)
            continue
        position = positions.get(entry[identity])
        if position is None:
            positions[entry[identity]] = len(target)
            target.append(entry)
        else:
            target[position] = merge_node(target[position], entry, entry_class)
    return target


def merge_fields(target: dict[str, Any], incoming: dict[str, Any], node_class: type[Node]) -> dict[str, Any]:
    """Merge the top-level fields of a serialized `node_class` fragment into `target`.

    Args:
        target: Output structure being assembled (mutated in place)
        incoming: Freshly serialized fragment
        node_class: Node type the fragment was declared with

    Returns:
        The merged `target`
    """
    for field, value in incoming.items():
        current = target.get(field, UNSET)
        if field in node_class.MERGE_KEYED_SEQUENCES and isinstance(value, list):
            identity, entry_class = node_class.MERGE_KEYED_SEQUENCES[field]
            base = current if isinstance(current, list) else []
            target[field] = merge_keyed_sequence(base, value, identity, entry_class)
        elif current is UNSET or is_pointer_key(field):
            target[field] = value
        elif field in node_class.MERGE_NODES:
            target[field] = merge_node(current, value, node_class.MERGE_NODES[field])
        elif field in node_class.MERGE_MAPPINGS and isinstance(current, dict) and isinstance(value, dict):
            merge_entries(current, value, node_class.MERGE_MAPPINGS[field])
        elif isinstance(current, list) and isinstance(value, list):
            target[field] = union_sequences(current, value)
        else:
            target[field] = value
    return target
