"""
Aggregation of declarations scattered across classes into Swagger documents.

Entry points:

1. build_root_json: v1 resource listing or v2 unified document
2. build_api_json: v1 per-resource API declaration

Both validate root cardinality eagerly, then assemble the document from
freshly serialized fragments. Stored nodes are never mutated, so running
an aggregation twice on the same classes yields equal documents.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from .config import AggregatorConfig
from .errors import DeclarationError, NotSupportedError
from .merge import merge_fields
from .nodes import Node, v1, v2
from .registry import Declarations, find_declarations
from .utils import qualify_refs

logger = logging.getLogger(__name__)

SUMMARY_FIELDS = ("path", "description")


class Aggregator:
    """Builds Swagger documents from an ordered list of declaring units."""

    def __init__(self, config: AggregatorConfig | None = None):
        self.config = config or AggregatorConfig()

    def build_root_json(self, classes: Iterable[Any]) -> dict[str, Any]:
        """Build the root document (v1 resource listing or v2 document).

        Args:
            classes: Declaring units in caller order; units without
                declarations are skipped

        Returns:
            JSON-shaped document

        Raises:
            DeclarationError: If zero or several roots are declared
        """
        registries = self._collect(classes)
        root = self._limit_root(registries)
        document = root.as_json()

        if isinstance(root, v2.SwaggerRootNode):
            self._merge_paths(document, registries)
            self._merge_definitions(document, registries)
            if self.config.qualify_definition_refs:
                qualify_refs(document, self.config.definitions_prefix)
        elif self.config.summarize_api_roots:
            self._summarize_api_roots(document, registries)
        else:
            document.setdefault("apis", [])
        return document

    def build_api_json(self, resource_key: str, classes: Iterable[Any]) -> dict[str, Any]:
        """Build the v1 API declaration of `resource_key`.

        Args:
            resource_key: Key given to swagger_api_root
            classes: Declaring units in caller order

        Returns:
            JSON-shaped API declaration, with every declared model under "models"

        Raises:
            DeclarationError: If zero or several roots are declared
            NotSupportedError: If the declared root is a Swagger 2.0 document
        """
        registries = self._collect(classes)
        root = self._limit_root(registries)
        if isinstance(root, v2.SwaggerRootNode):
            raise NotSupportedError("build_api_json is not supported for Swagger 2.0")

        resource_key = str(resource_key)
        document: dict[str, Any] = {}
        for registry in registries:
            node = registry.api_roots.get(resource_key)
            if node is not None:
                merge_fields(document, node.as_json(), v1.ApiDeclarationNode)
        if not document:
            logger.debug("No swagger_api_root named %r, emitting an empty declaration", resource_key)
        document.setdefault("apis", [])

        models: dict[str, Any] = {}
        for registry in registries:
            for name, model in registry.models.items():
                models[name] = model.as_json()
            for name, schema in registry.schemas.items():
                models[name] = schema.as_json()
        document["models"] = models
        return document

    def _collect(self, classes: Iterable[Any]) -> list[Declarations]:
        registries = []
        for unit in classes:
            registry = find_declarations(unit)
            if registry is None:
                logger.debug("Skipping %r: no swagger declarations", unit)
                continue
            registries.append(registry)
        return registries

    def _limit_root(self, registries: list[Declarations]) -> Node:
        roots = [root for registry in registries for root in registry.roots]
        if not roots:
            raise DeclarationError("swagger_root must be declared")
        if len(roots) > 1:
            raise DeclarationError(f"Only one swagger_root declaration is allowed, found {len(roots)}")
        return roots[0]

    def _summarize_api_roots(self, document: dict[str, Any], registries: list[Declarations]) -> None:
        """Append one {path, description} summary per distinct API entry to the listing."""
        apis = document.setdefault("apis", [])
        seen = {self._summary_key(entry) for entry in apis if isinstance(entry, dict)}
        for registry in registries:
            for key, node in registry.api_roots.items():
                for entry in node.as_json().get("apis", []):
                    summary = {field: entry[field] for field in SUMMARY_FIELDS if field in entry}
                    marker = self._summary_key(summary)
                    if marker in seen:
                        continue
                    seen.add(marker)
                    apis.append(summary)
                    logger.debug("Listed %r from api root %r", summary, key)

    @staticmethod
    def _summary_key(entry: dict[str, Any]) -> tuple[Any, Any]:
        return (entry.get("path"), entry.get("description"))

    def _merge_paths(self, document: dict[str, Any], registries: list[Declarations]) -> None:
        if not isinstance(document.get("paths"), dict):
            document["paths"] = {}
        for registry in registries:
            for path, node in registry.paths:
                if path in document["paths"]:
                    logger.debug("Merging repeated declaration of path %r", path)
                merge_fields(document, {"paths": {path: node.as_json()}}, v2.SwaggerRootNode)

    def _merge_definitions(self, document: dict[str, Any], registries: list[Declarations]) -> None:
        definitions: dict[str, Any] = {}
        for registry in registries:
            for name, schema in registry.schemas.items():
                definitions[name] = schema.as_json()
        if not definitions and not self.config.always_emit_definitions:
            return
        current = document.get("definitions")
        if isinstance(current, dict):
            current.update(definitions)
        else:
            document["definitions"] = definitions


def build_root_json(classes: Iterable[Any], config: AggregatorConfig | None = None) -> dict[str, Any]:
    """Build the root document of `classes` (see Aggregator.build_root_json)."""
    return Aggregator(config).build_root_json(classes)


def build_api_json(resource_key: str, classes: Iterable[Any], config: AggregatorConfig | None = None) -> dict[str, Any]:
    """Build the v1 API declaration of `resource_key` (see Aggregator.build_api_json)."""
    return Aggregator(config).build_api_json(resource_key, classes)
