"""
Node variants for Swagger 1.2 documents.

Builder method names are snake_case; the fields they write use the
camelCase spellings of the Swagger 1.2 specification.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .base import Block, Node, NodeList

SWAGGER_VERSION = "1.2"


class ScopeList(NodeList):
    """List of authorization scopes attached to a v1 operation."""

    def scope(self, mapping: Mapping[str, Any] | None = None, /, *, block: Block | None = None, **keys: Any) -> Node:
        return self.append(mapping, block=block, **keys)


class GrantTypeNode(Node):
    def login_endpoint(self, mapping=None, /, *, block: Block | None = None, **keys: Any) -> Node:
        return self._attach_child("loginEndpoint", Node, mapping, block, keys)

    def token_request_endpoint(self, mapping=None, /, *, block: Block | None = None, **keys: Any) -> Node:
        return self._attach_child("tokenRequestEndpoint", Node, mapping, block, keys)

    def token_endpoint(self, mapping=None, /, *, block: Block | None = None, **keys: Any) -> Node:
        return self._attach_child("tokenEndpoint", Node, mapping, block, keys)


class AuthorizationNode(Node):
    """An entry of the resource listing `authorizations` mapping."""

    def scope(self, mapping=None, /, *, block: Block | None = None, **keys: Any) -> Node:
        return self._append_child("scopes", Node, mapping, block, keys)

    def grant_type(self, name: str, mapping=None, /, *, block: Block | None = None, **keys: Any) -> Node:
        return self._keyed_child("grantTypes", name, GrantTypeNode, mapping, block, keys)


class ResourceListingNode(Node):
    """Root of a Swagger 1.2 document (the "resource listing")."""

    VERSION_FIELD = "swaggerVersion"

    def info(self, mapping=None, /, *, block: Block | None = None, **keys: Any) -> Node:
        return self._attach_child("info", Node, mapping, block, keys)

    def api(self, mapping=None, /, *, block: Block | None = None, **keys: Any) -> Node:
        """Declare a resource summary ({path, description}) of the listing."""
        return self._append_child("apis", Node, mapping, block, keys)

    def authorization(self, name: str, mapping=None, /, *, block: Block | None = None, **keys: Any) -> AuthorizationNode:
        return self._keyed_child("authorizations", name, AuthorizationNode, mapping, block, keys)


class ParameterNode(Node):
    def items(self, mapping=None, /, *, block: Block | None = None, **keys: Any) -> Node:
        return self._attach_child("items", Node, mapping, block, keys)


class OperationNode(Node):
    """One HTTP-method bound operation of an API entry."""

    def parameter(self, name: str | None = None, mapping=None, /, *, block: Block | None = None, **keys: Any) -> ParameterNode:
        """Append a parameter; a positional name becomes its first field."""
        seed = {"name": name} if name is not None else {}
        seed.update(mapping or {})
        return self._append_child("parameters", ParameterNode, seed, block, keys)

    def response_message(self, mapping=None, /, *, block: Block | None = None, **keys: Any) -> Node:
        return self._append_child("responseMessages", Node, mapping, block, keys)

    def authorization(self, name: str, scopes: list | None = None, /, *, block=None) -> ScopeList:
        """Declare the scopes of `name` required by this operation."""
        holder = self.get("authorizations")
        if not isinstance(holder, Node):
            holder = Node()
            self.set("authorizations", holder)
        items = list(scopes or [])
        holder.set(name, items)
        return ScopeList(holder.get(name)).evaluate(block)


class ApiNode(Node):
    """One entry of an API declaration's `apis` list."""

    def operation(self, mapping=None, /, *, block: Block | None = None, **keys: Any) -> OperationNode:
        return self._append_child("operations", OperationNode, mapping, block, keys)


class ApiDeclarationNode(Node):
    """Keyed resource ("API declaration") contributed by one or more classes."""

    VERSION_FIELD = "swaggerVersion"

    # apis entries sharing the same path are merged into one entry
    MERGE_KEYED_SEQUENCES = {"apis": ("path", ApiNode)}

    def api(self, mapping=None, /, *, block: Block | None = None, **keys: Any) -> ApiNode:
        return self._append_child("apis", ApiNode, mapping, block, keys)


class PropertyNode(Node):
    def items(self, mapping=None, /, *, block: Block | None = None, **keys: Any) -> Node:
        return self._attach_child("items", Node, mapping, block, keys)


class ModelNode(Node):
    """A named v1 model, emitted under the API declaration's `models`."""

    def property(self, name: str, mapping=None, /, *, block: Block | None = None, **keys: Any) -> PropertyNode:
        return self._keyed_child("properties", name, PropertyNode, mapping, block, keys)
