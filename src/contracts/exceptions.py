"""Errors raised while reading selector schema documents from disk.

Both are kept apart from ``ExtractionError``: they concern the schema file
itself, before any HTML is resolved.
"""


class SchemaFileError(Exception):
    """Base class for selector schema file problems."""


class SchemaLoadError(SchemaFileError):
    """The schema file is missing or is not valid JSON/YAML.

    Attributes:
        schema_path: Path as given by the caller
        reason: What went wrong while reading or decoding the file
    """

    def __init__(self, schema_path: str, reason: str):
        super().__init__(f"Cannot read selector schema '{schema_path}': {reason}")
        self.schema_path = schema_path
        self.reason = reason


class SchemaValidationError(SchemaFileError):
    """The decoded schema does not match the selector meta schema.

    ``errors`` holds one ``{"path": ..., "message": ...}`` entry per
    violation, ``path`` being the dotted location inside the schema.
    """

    def __init__(self, message: str, errors: list[dict] | None = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or []
