"""Output schemas for API commands.

Importing this package registers every schema.
"""

from . import service
from ._registry import get_output_schema

__all__ = ["get_output_schema", "service"]
