"""Swagger Blocks

Declare fragments of Swagger 1.2 / 2.0 documents on any number of
classes using nested, block-structured declarations, then aggregate
them into complete JSON-shaped documents.
"""

__version__ = "1.0.0"

from .aggregator import Aggregator, build_api_json, build_root_json
from .config import AggregatorConfig
from .errors import DeclarationError, NotSupportedError, OutputError, SwaggerBlocksError
from .nodes import UNSET, Node, NodeList
from .registry import (
    Declarations,
    SwaggerBlocks,
    apply_declarations,
    declarations,
    find_declarations,
    swagger_api_root,
    swagger_model,
    swagger_path,
    swagger_root,
    swagger_schema,
    swaggered,
)

__all__ = [
    "Aggregator",
    "AggregatorConfig",
    "build_root_json",
    "build_api_json",
    "Declarations",
    "SwaggerBlocks",
    "apply_declarations",
    "declarations",
    "find_declarations",
    "swagger_root",
    "swagger_api_root",
    "swagger_model",
    "swagger_schema",
    "swagger_path",
    "swaggered",
    "Node",
    "NodeList",
    "UNSET",
    "SwaggerBlocksError",
    "DeclarationError",
    "NotSupportedError",
    "OutputError",
]
