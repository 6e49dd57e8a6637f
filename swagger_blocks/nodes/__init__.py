"""
Declarative node tree.

Contains the generic Node builder and the Swagger 1.2 / 2.0 variants.
"""

from __future__ import annotations

from . import v1, v2
from .base import UNSET, Block, Node, NodeList, serialize

ROOT_CLASSES: dict[str, type[Node]] = {
    v1.SWAGGER_VERSION: v1.ResourceListingNode,
    v2.SWAGGER_VERSION: v2.SwaggerRootNode,
}

__all__ = [
    "UNSET",
    "Block",
    "Node",
    "NodeList",
    "ROOT_CLASSES",
    "serialize",
    "v1",
    "v2",
]
