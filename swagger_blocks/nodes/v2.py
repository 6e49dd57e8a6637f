"""
Node variants for Swagger 2.0 documents.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .base import Block, Node, NodeList

SWAGGER_VERSION = "2.0"

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch")


class SchemaNode(Node):
    """A JSON schema object: a named definition, a property or an inline schema."""

    def property(self, name: str, mapping=None, /, *, block: Block | None = None, **keys: Any) -> SchemaNode:
        return self._keyed_child("properties", name, SchemaNode, mapping, block, keys)

    def items(self, mapping=None, /, *, block: Block | None = None, **keys: Any) -> SchemaNode:
        return self._attach_child("items", SchemaNode, mapping, block, keys)

    def additional_properties(self, mapping=None, /, *, block: Block | None = None, **keys: Any) -> SchemaNode:
        return self._attach_child("additionalProperties", SchemaNode, mapping, block, keys)

    def all_of(self, *, block=None) -> SchemaList:
        """Start (or continue) the `allOf` list; add members with `.schema()`."""
        return SchemaList(self._list("allOf")).evaluate(block)

    def xml(self, mapping=None, /, *, block: Block | None = None, **keys: Any) -> Node:
        return self._attach_child("xml", Node, mapping, block, keys)

    def external_docs(self, mapping=None, /, *, block: Block | None = None, **keys: Any) -> Node:
        return self._attach_child("externalDocs", Node, mapping, block, keys)


class SchemaList(NodeList):
    item_class = SchemaNode

    def schema(self, mapping: Mapping[str, Any] | None = None, /, *, block: Block | None = None, **keys: Any) -> Node:
        return self.append(mapping, block=block, **keys)


class ParameterNode(Node):
    def schema(self, mapping=None, /, *, block: Block | None = None, **keys: Any) -> SchemaNode:
        return self._attach_child("schema", SchemaNode, mapping, block, keys)

    def items(self, mapping=None, /, *, block: Block | None = None, **keys: Any) -> SchemaNode:
        return self._attach_child("items", SchemaNode, mapping, block, keys)


class ResponseNode(Node):
    MERGE_MAPPINGS = {"headers": SchemaNode}

    def schema(self, mapping=None, /, *, block: Block | None = None, **keys: Any) -> SchemaNode:
        return self._attach_child("schema", SchemaNode, mapping, block, keys)

    def header(self, name: str, mapping=None, /, *, block: Block | None = None, **keys: Any) -> Node:
        return self._keyed_child("headers", name, SchemaNode, mapping, block, keys)


def _parameter_seed(name: str | None, mapping: Mapping[str, Any] | None) -> dict[str, Any]:
    seed = {"name": name} if name is not None else {}
    seed.update(mapping or {})
    return seed


class OperationNode(Node):
    MERGE_MAPPINGS = {"responses": ResponseNode}

    def parameter(self, name: str | None = None, mapping=None, /, *, block: Block | None = None, **keys: Any) -> ParameterNode:
        """Append a parameter; a positional name becomes its first field."""
        return self._append_child("parameters", ParameterNode, _parameter_seed(name, mapping), block, keys)

    def response(self, code: int | str, mapping=None, /, *, block: Block | None = None, **keys: Any) -> ResponseNode:
        return self._keyed_child("responses", code, ResponseNode, mapping, block, keys)

    def security(self, mapping=None, /, *, block: Block | None = None, **keys: Any) -> Node:
        """Append one security requirement object."""
        return self._append_child("security", Node, mapping, block, keys)

    def external_docs(self, mapping=None, /, *, block: Block | None = None, **keys: Any) -> Node:
        return self._attach_child("externalDocs", Node, mapping, block, keys)


class PathNode(Node):
    """A path item; HTTP methods map to operation sub-nodes."""

    MERGE_NODES = {method: OperationNode for method in HTTP_METHODS}

    def operation(self, method: str, mapping=None, /, *, block: Block | None = None, **keys: Any) -> OperationNode:
        return self._attach_child(str(method).lower(), OperationNode, mapping, block, keys)

    def parameter(self, name: str | None = None, mapping=None, /, *, block: Block | None = None, **keys: Any) -> ParameterNode:
        return self._append_child("parameters", ParameterNode, _parameter_seed(name, mapping), block, keys)


class TagNode(Node):
    def external_docs(self, mapping=None, /, *, block: Block | None = None, **keys: Any) -> Node:
        return self._attach_child("externalDocs", Node, mapping, block, keys)


class SecuritySchemeNode(Node):
    def scopes(self, mapping=None, /, *, block: Block | None = None, **keys: Any) -> Node:
        return self._attach_child("scopes", Node, mapping, block, keys)


class SwaggerRootNode(Node):
    """Root of a Swagger 2.0 document."""

    VERSION_FIELD = "swagger"

    # Path records sharing a path string are merged operation by operation
    MERGE_MAPPINGS = {"paths": PathNode}

    def info(self, mapping=None, /, *, block: Block | None = None, **keys: Any) -> Node:
        return self._attach_child("info", Node, mapping, block, keys)

    def security_definition(self, name: str, mapping=None, /, *, block: Block | None = None, **keys: Any) -> SecuritySchemeNode:
        return self._keyed_child("securityDefinitions", name, SecuritySchemeNode, mapping, block, keys)

    def tag(self, mapping=None, /, *, block: Block | None = None, **keys: Any) -> TagNode:
        return self._append_child("tags", TagNode, mapping, block, keys)

    def parameter(self, name: str, mapping=None, /, *, block: Block | None = None, **keys: Any) -> ParameterNode:
        """Declare a reusable parameter under the root `parameters` mapping."""
        return self._keyed_child("parameters", name, ParameterNode, mapping, block, keys)

    def response(self, name: str, mapping=None, /, *, block: Block | None = None, **keys: Any) -> ResponseNode:
        return self._keyed_child("responses", name, ResponseNode, mapping, block, keys)

    def security(self, mapping=None, /, *, block: Block | None = None, **keys: Any) -> Node:
        return self._append_child("security", Node, mapping, block, keys)

    def external_docs(self, mapping=None, /, *, block: Block | None = None, **keys: Any) -> Node:
        return self._attach_child("externalDocs", Node, mapping, block, keys)
