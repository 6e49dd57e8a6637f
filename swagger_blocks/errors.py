"""
Exceptions raised while aggregating Swagger declarations.
"""

from __future__ import annotations


class SwaggerBlocksError(Exception):
    """Base class for every error raised by swagger_blocks."""

    pass


class DeclarationError(SwaggerBlocksError):
    """Raised when the root declaration cardinality is violated.

    This can happen when:
    - No class in the aggregated set declared a swagger_root
    - More than one swagger_root was declared across the aggregated set
    """

    pass


class NotSupportedError(SwaggerBlocksError):
    """Raised when an operation has no equivalent for the declared Swagger version.

    The v1 per-resource API declaration has no v2 analogue, so
    build_api_json refuses class sets whose root is a v2 document.
    """

    pass


class OutputError(SwaggerBlocksError):
    """Raised when a generated document fails validation before being written."""

    pass
