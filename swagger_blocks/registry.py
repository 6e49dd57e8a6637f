"""
Per-class declaration registry and the class-body DSL.

Each declaring unit (usually a class) owns one `Declarations` object
holding the nodes produced by its declarations. The registry is stored
in the class' own namespace, so subclasses never inherit the
declarations of their parents.

Two ways of declaring are supported:

    registry = declarations(PetController)
    with registry.declare_root(swaggerVersion="1.2") as root:
        root.set("apiVersion", "1.0.0")

or, inside a class body:

    class PetController(SwaggerBlocks):
        @swagger_root(swaggerVersion="1.2")
        def root(node):
            node.set("apiVersion", "1.0.0")
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from .errors import NotSupportedError
from .nodes import ROOT_CLASSES, Block, Node, v1, v2

logger = logging.getLogger(__name__)

DECLARATIONS_ATTR = "__swagger_declarations__"
PENDING_ATTR = "__swagger_pending__"


def root_class_for(version: str | None, seed: Mapping[str, Any]) -> type[Node]:
    """Pick the root node variant from an explicit version or the seed keys.

    Without an explicit version, a `swagger` seed key selects 2.0, a
    `swaggerVersion` seed key selects that 1.x version, anything else is 1.2.
    """
    if version is None:
        if "swagger" in seed:
            version = seed["swagger"]
        else:
            version = seed.get("swaggerVersion", v1.SWAGGER_VERSION)
    version = str(version)
    if version in ROOT_CLASSES:
        return ROOT_CLASSES[version]
    if version.startswith("1."):
        return v1.ResourceListingNode
    raise NotSupportedError(f"Unsupported Swagger version: {version}")


class Declarations:
    """Nodes declared by one unit, grouped by declaration kind."""

    def __init__(self, owner: Any = None):
        self.owner = owner
        self.roots: list[Node] = []
        self.api_roots: dict[str, v1.ApiDeclarationNode] = {}
        self.models: dict[str, v1.ModelNode] = {}
        self.schemas: dict[str, v2.SchemaNode] = {}
        self.paths: list[tuple[str, v2.PathNode]] = []

    def __repr__(self) -> str:
        owner = getattr(self.owner, "__qualname__", self.owner)
        return f"Declarations(owner={owner!r})"

    @property
    def root(self) -> Node | None:
        return self.roots[0] if self.roots else None

    def is_empty(self) -> bool:
        return not (self.roots or self.api_roots or self.models or self.schemas or self.paths)

    def declare_root(
        self,
        mapping: Mapping[str, Any] | None = None,
        /,
        *,
        block: Block | None = None,
        version: str | None = None,
        **keys: Any,
    ) -> Node:
        """Declare the root document.

        Declaring more than one root is only reported when the unit is
        aggregated, together with roots declared by other units.
        """
        seed = {**(mapping or {}), **keys}
        node_class = root_class_for(version, seed)
        node = node_class()
        if version is not None:
            node.set(node_class.VERSION_FIELD, str(version))
        node.keys(seed)
        self.roots.append(node)
        logger.debug("%r declared a %s", self, node_class.__name__)
        return node.evaluate(block)

    def declare_api_root(
        self,
        key: str,
        mapping: Mapping[str, Any] | None = None,
        /,
        *,
        block: Block | None = None,
        **keys: Any,
    ) -> v1.ApiDeclarationNode:
        """Declare (or extend) the v1 resource `key`.

        A repeated key evaluates the block against the existing node, so a
        later declaration adds entries instead of replacing the first one.
        """
        key = str(key)
        node = self.api_roots.get(key)
        if node is None:
            node = v1.ApiDeclarationNode(mapping, **keys)
            self.api_roots[key] = node
        else:
            node.keys(mapping, **keys)
        logger.debug("%r declared api root %r", self, key)
        return node.evaluate(block)

    def declare_model(
        self,
        name: str,
        mapping: Mapping[str, Any] | None = None,
        /,
        *,
        block: Block | None = None,
        **keys: Any,
    ) -> v1.ModelNode:
        node = v1.ModelNode.build(mapping, block=block, **keys)
        self.models[str(name)] = node
        return node

    def declare_schema(
        self,
        name: str,
        mapping: Mapping[str, Any] | None = None,
        /,
        *,
        block: Block | None = None,
        **keys: Any,
    ) -> v2.SchemaNode:
        node = v2.SchemaNode.build(mapping, block=block, **keys)
        self.schemas[str(name)] = node
        return node

    def declare_path(
        self,
        path: str,
        mapping: Mapping[str, Any] | None = None,
        /,
        *,
        block: Block | None = None,
        **keys: Any,
    ) -> v2.PathNode:
        """Record a path declaration; records sharing a path are merged when aggregated."""
        node = v2.PathNode.build(mapping, block=block, **keys)
        self.paths.append((str(path), node))
        return node


def find_declarations(unit: Any) -> Declarations | None:
    """Return the registry of `unit` without creating one.

    `unit` may be a Declarations object itself, or any object (usually a
    class) carrying one in its own namespace.
    """
    if isinstance(unit, Declarations):
        return unit
    try:
        namespace = vars(unit)
    except TypeError:
        return None
    found = namespace.get(DECLARATIONS_ATTR)
    return found if isinstance(found, Declarations) else None


def declarations(unit: Any) -> Declarations:
    """Return the registry of `unit`, attaching an empty one on first use."""
    found = find_declarations(unit)
    if found is None:
        found = Declarations(owner=unit)
        setattr(unit, DECLARATIONS_ATTR, found)
    return found


@dataclass
class PendingDeclaration:
    """A declaration recorded by a decorator, applied when the class is created."""

    kind: str
    args: tuple = ()
    keys: dict[str, Any] = field(default_factory=dict)

    def apply(self, registry: Declarations, block: Block) -> Node:
        declare = getattr(registry, f"declare_{self.kind}")
        return declare(*self.args, block=block, **self.keys)


def _declaration(kind: str, args: tuple, keys: dict[str, Any]) -> Callable[[Callable], Callable]:
    def decorator(func: Callable) -> Callable:
        pending = [PendingDeclaration(kind, args, keys), *getattr(func, PENDING_ATTR, [])]
        setattr(func, PENDING_ATTR, pending)
        return func

    return decorator


def swagger_root(mapping: Mapping[str, Any] | None = None, /, *, version: str | None = None, **keys: Any):
    return _declaration("root", (mapping,), {"version": version, **keys})


def swagger_api_root(key: str, mapping: Mapping[str, Any] | None = None, /, **keys: Any):
    return _declaration("api_root", (key, mapping), keys)


def swagger_model(name: str, mapping: Mapping[str, Any] | None = None, /, **keys: Any):
    return _declaration("model", (name, mapping), keys)


def swagger_schema(name: str, mapping: Mapping[str, Any] | None = None, /, **keys: Any):
    return _declaration("schema", (name, mapping), keys)


def swagger_path(path: str, mapping: Mapping[str, Any] | None = None, /, **keys: Any):
    return _declaration("path", (path, mapping), keys)


def apply_declarations(cls: type) -> Declarations:
    """Apply every decorated function of `cls`, in definition order, to its registry."""
    registry = declarations(cls)
    for value in list(vars(cls).values()):
        func = value.__func__ if isinstance(value, (staticmethod, classmethod)) else value
        for pending in getattr(func, PENDING_ATTR, ()):
            pending.apply(registry, func)
    return registry


def swaggered(cls: type) -> type:
    """Class decorator equivalent of inheriting from SwaggerBlocks."""
    apply_declarations(cls)
    return cls


class SwaggerBlocks:
    """Mixin collecting class-body declarations when a subclass is created."""

    def __init_subclass__(cls, **kwargs: Any):
        super().__init_subclass__(**kwargs)
        apply_declarations(cls)
