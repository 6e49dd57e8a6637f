"""
Configuration for document aggregation.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class AggregatorConfig:
    """Configuration options for building Swagger documents."""

    # Append {path, description} summaries of keyed API roots to the v1 resource listing
    summarize_api_roots: bool = True

    # Rewrite bare $ref names to local pointers in v2 documents
    qualify_definition_refs: bool = False

    # Pointer prefix used when qualifying $ref names
    definitions_prefix: str = "#/definitions/"

    # Emit "definitions" in v2 documents even when no schema was declared
    always_emit_definitions: bool = False

    @staticmethod
    def from_dict(d: dict) -> AggregatorConfig:
        """Create a config from a dictionary."""
        config = AggregatorConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "summarize_api_roots": self.summarize_api_roots,
            "qualify_definition_refs": self.qualify_definition_refs,
            "definitions_prefix": self.definitions_prefix,
            "always_emit_definitions": self.always_emit_definitions,
        }
