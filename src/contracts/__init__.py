"""Selector schema files.

Loading schemas from JSON or YAML and checking their structure against the
bundled selector meta schema.
"""

from .exceptions import SchemaFileError, SchemaLoadError, SchemaValidationError
from .schema_loader import (
    SCHEMAS_BASE_PATH,
    get_meta_schema,
    load_schema,
    validate_schema,
)

__all__ = [
    # Exceptions
    "SchemaFileError",
    "SchemaLoadError",
    "SchemaValidationError",
    # Loader functions
    "load_schema",
    "validate_schema",
    "get_meta_schema",
    "SCHEMAS_BASE_PATH",
]
