"""Loading and structural validation of selector schema files."""

import json
import logging
from pathlib import Path
from typing import Any

import jsonschema
import yaml

from .exceptions import SchemaLoadError, SchemaValidationError

logger = logging.getLogger(__name__)

# Base path for bundled JSON schemas
SCHEMAS_BASE_PATH = Path(__file__).parent / "schemas"

SELECTOR_META_SCHEMA_PATH = SCHEMAS_BASE_PATH / "selector.schema.json"

YAML_SUFFIXES = (".yaml", ".yml")

_meta_schema: dict[str, Any] | None = None


def get_meta_schema() -> dict[str, Any]:
    """Return the JSON schema describing selector schemas (cached)."""
    global _meta_schema
    if _meta_schema is None:
        _meta_schema = json.loads(SELECTOR_META_SCHEMA_PATH.read_text())
    return _meta_schema


def load_schema(schema_path: str | Path) -> Any:
    """Load a selector schema from a JSON or YAML file.

    Args:
        schema_path: Path to a .json, .yaml or .yml file

    Returns:
        The parsed schema (a selector string, list or dictionary)

    Raises:
        SchemaLoadError: If file not found or cannot be parsed
    """
    path = Path(schema_path)
    if not path.exists():
        raise SchemaLoadError(str(schema_path), "File not found")

    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in YAML_SUFFIXES:
        try:
            schema = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise SchemaLoadError(str(schema_path), f"Invalid YAML: {e}") from e
    else:
        try:
            schema = json.loads(text)
        except json.JSONDecodeError as e:
            raise SchemaLoadError(str(schema_path), f"Invalid JSON: {e}") from e

    logger.debug(f"Loaded selector schema from {path}")
    return schema


def validate_schema(schema: Any) -> None:
    """Check that a selector schema is structurally valid.

    Only the shape is checked. Selector syntax is validated when the
    schema is resolved.

    Raises:
        SchemaValidationError: If the schema does not match the selector meta schema
    """
    try:
        jsonschema.validate(schema, get_meta_schema())
    except jsonschema.ValidationError as e:
        path = ".".join(str(p) for p in e.path)
        if path:
            message = f"Invalid selector schema at '{path}': {e.message}"
        else:
            message = f"Invalid selector schema: {e.message}"
        raise SchemaValidationError(message, [{"path": path, "message": e.message}]) from e
