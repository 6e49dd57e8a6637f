"""
Generic declarative node used to build JSON-shaped Swagger fragments.

A Node is an ordered mapping from field name to value. Values are
scalars, other nodes, or lists of scalars/mappings/nodes. Nested
structure is declared through blocks: callables evaluated against a
freshly created child node, or `with` statements on the returned child.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from typing import Any

from ..utils import is_pointer_key


class _Unset:
    """Sentinel for fields that were never assigned."""

    _instance: _Unset | None = None

    def __new__(cls) -> _Unset:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> _Unset:
        return self

    def __deepcopy__(self, memo: dict) -> _Unset:
        return self


UNSET: Any = _Unset()

Block = Callable[["Node"], Any]


def serialize(value: Any) -> Any:
    """Serialize a node value into fresh dict/list/scalar structures."""
    if isinstance(value, Node):
        return value.as_json()
    if isinstance(value, Mapping):
        return {str(k): serialize(v) for k, v in value.items() if v is not UNSET}
    if isinstance(value, (list, tuple)):
        return [serialize(item) for item in value]
    return value


class Node:
    """Ordered, mutable builder for one JSON object.

    Subclasses only change which fields the aggregator treats as merge
    points and which builder methods exist; the storage and serialization
    rules are the same for every node.
    """

    # Fields holding one sub-node, merged with the given node type's policy
    MERGE_NODES: Mapping[str, type[Node]] = {}

    # Fields holding name -> sub-node entries; entries sharing a name are merged
    MERGE_MAPPINGS: Mapping[str, type[Node]] = {}

    # List fields whose entries sharing an identity field are merged: field -> (identity, entry type)
    MERGE_KEYED_SEQUENCES: Mapping[str, tuple[str, type[Node]]] = {}

    # Class used for children created through the generic accessors
    child_class: type[Node] | None = None

    def __init__(self, mapping: Mapping[str, Any] | None = None, /, **keys: Any):
        self._data: dict[str, Any] = {}
        self.keys(mapping, **keys)

    @classmethod
    def build(cls, mapping: Mapping[str, Any] | None = None, /, *, block: Block | None = None, **keys: Any) -> Node:
        """Create a node seeded with `mapping`/`keys`, then evaluate `block` against it."""
        node = cls(mapping, **keys)
        return node.evaluate(block)

    def evaluate(self, block: Block | None) -> Node:
        """Run a block of declarations against this node."""
        if block is not None:
            block(self)
        return self

    def __enter__(self) -> Node:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    def __contains__(self, field: object) -> bool:
        return str(field) in self._data

    def fields(self) -> Iterator[tuple[str, Any]]:
        """Iterate over (field, value) pairs in declaration order."""
        return iter(list(self._data.items()))

    def get(self, field: str, default: Any = UNSET, /) -> Any:
        """Return the current value of a field, or `default` (UNSET) if never assigned."""
        return self._data.get(str(field), default)

    def set(self, field: str, value: Any, /) -> None:
        """Assign a field.

        Usable for any field name, including names that collide with a
        builder method of the node type. Mappings become child nodes,
        sequences are stored as shallow copies, UNSET removes the field.
        Pointer fields ($ref, "#/...") keep their value verbatim.
        """
        field = str(field)
        if is_pointer_key(field):
            self._data[field] = value
        elif value is UNSET:
            self._data.pop(field, None)
        elif isinstance(value, Node):
            self._data[field] = value
        elif isinstance(value, Mapping):
            self._attach_child(field, self._child_class(), value, None, {})
        elif isinstance(value, (list, tuple)):
            self._data[field] = list(value)
        else:
            self._data[field] = value

    def keys(self, mapping: Mapping[str, Any] | None = None, /, **keys: Any) -> None:
        """Assign several fields at once, in order."""
        for source in (mapping or {}, keys):
            for field, value in source.items():
                self.set(field, value)

    def child(
        self,
        field: str,
        mapping: Mapping[str, Any] | None = None,
        /,
        *,
        block: Block | None = None,
        **keys: Any,
    ) -> Node:
        """Attach a new child node under `field` and return it.

        `mapping`/`keys` pre-seed the child; `block` runs afterwards so its
        assignments win on conflict. The returned child is a context manager.
        """
        return self._attach_child(str(field), self._child_class(), mapping, block, keys)

    def append(
        self,
        field: str,
        mapping: Mapping[str, Any] | None = None,
        /,
        *,
        block: Block | None = None,
        **keys: Any,
    ) -> Node:
        """Append a new child node to the list-valued field `field` and return it."""
        return self._append_child(str(field), self._child_class(), mapping, block, keys)

    def field(self, field: str, value: Any = UNSET, /, *, block: Block | None = None, **keys: Any) -> Any:
        """Combined getter/setter accessor.

        - no value, block or keys: return the current value
        - a mapping, keys or a block: create a child node
        - a list or tuple: store a shallow copy
        - anything else: store the scalar
        """
        if value is UNSET and block is None and not keys:
            return self.get(field)
        if block is not None or keys or (isinstance(value, Mapping) and not is_pointer_key(str(field))):
            mapping = value if isinstance(value, Mapping) else None
            return self.child(field, mapping, block=block, **keys)
        self.set(field, value)
        return value

    def as_json(self) -> dict[str, Any]:
        """Serialize depth-first into fresh structures; unset fields are omitted."""
        return {field: serialize(value) for field, value in self._data.items() if value is not UNSET}

    def _child_class(self) -> type[Node]:
        return self.child_class or Node

    def _attach_child(
        self,
        field: str,
        node_class: type[Node],
        mapping: Mapping[str, Any] | None,
        block: Block | None,
        keys: Mapping[str, Any],
    ) -> Node:
        node = node_class.build(mapping, block=block, **keys)
        self._data[field] = node
        return node

    def _append_child(
        self,
        field: str,
        node_class: type[Node],
        mapping: Mapping[str, Any] | None,
        block: Block | None,
        keys: Mapping[str, Any],
    ) -> Node:
        node = node_class.build(mapping, block=block, **keys)
        self._list(field).append(node)
        return node

    def _keyed_child(
        self,
        container: str,
        key: Any,
        node_class: type[Node],
        mapping: Mapping[str, Any] | None,
        block: Block | None,
        keys: Mapping[str, Any],
    ) -> Node:
        """Attach a child under `self[container][key]`, e.g. properties[name]."""
        holder = self._data.get(container)
        if not isinstance(holder, Node):
            holder = Node()
            self._data[container] = holder
        return holder._attach_child(str(key), node_class, mapping, block, keys)

    def _list(self, field: str) -> list[Any]:
        items = self._data.get(field)
        if not isinstance(items, list):
            items = []
            self._data[field] = items
        return items


class NodeList:
    """Builder over a list-valued field whose items are added one call at a time.

    Used where the target schema wants a list of objects under a name that
    is declared with a block, e.g. v2 `allOf` or v1 operation authorizations.
    """

    item_class: type[Node] = Node

    def __init__(self, items: list[Any], item_class: type[Node] | None = None):
        self._items = items
        if item_class is not None:
            self.item_class = item_class

    def __enter__(self) -> NodeList:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        return None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def evaluate(self, block: Callable[[NodeList], Any] | None) -> NodeList:
        if block is not None:
            block(self)
        return self

    def append(self, mapping: Mapping[str, Any] | None = None, /, *, block: Block | None = None, **keys: Any) -> Node:
        """Append a new item node and return it."""
        node = self.item_class.build(mapping, block=block, **keys)
        self._items.append(node)
        return node
