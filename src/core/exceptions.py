"""Custom exception hierarchy for the extraction engine.

Provides typed exceptions so callers can tell configuration mistakes
from schema mistakes without parsing messages.
"""


class ExtractionError(Exception):
    """Base exception for all extraction errors.

    All custom exceptions inherit from this, allowing:
        try:
            ...
        except ExtractionError as e:
            # Handle any engine-specific error
    """

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigError(ExtractionError):
    """Error in engine configuration.

    Raised at construction time, e.g. when no resolver is registered or an
    object resolver has no value resolver to delegate fields to.

    Attributes:
        config_key: The configuration key that caused the error
    """

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        details: dict | None = None,
    ):
        super().__init__(f"Configuration error: {message}", details)
        self.config_key = config_key


class SchemaError(ExtractionError):
    """Error in a selector schema.

    Rejects the resolution call it occurs in. Sibling resolutions are not
    affected beyond the surrounding gather.

    Attributes:
        selector: The offending selector value
    """

    def __init__(
        self,
        message: str,
        selector: object = None,
        details: dict | None = None,
    ):
        super().__init__(f"Schema error: {message}", details)
        self.selector = selector


class EmptySelectorError(SchemaError):
    """Raised when the active selector is empty after parsing."""

    def __init__(self, selector: object = None, details: dict | None = None):
        super().__init__(
            "Empty selector. Please check your selector schema syntax",
            selector=selector,
            details=details,
        )


class AutoScopeError(SchemaError):
    """Raised when auto scoping is requested for a non-string selector."""

    def __init__(self, selector: object = None, details: dict | None = None):
        super().__init__(
            "Invalid scope: []. Auto scoping only supports a simple string selector. "
            "Please provide a valid scope (string or array of single string). Ex: 'h1' or ['h1']",
            selector=selector,
            details=details,
        )
