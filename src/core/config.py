"""Configuration management."""
import os
from dataclasses import dataclass

DEFAULT_HTML_PARSER = "html.parser"
DEFAULT_TIMEZONE = "UTC"


@dataclass
class ParserSettings:
    """Runtime settings for the preassembled parsers.

    Usage in .env:
        HTML_PARSER=html.parser     # bs4 backend: html.parser, lxml, html5lib
        DATE_TIMEZONE=UTC           # zone for naive dates, or "local"
        LOG_LEVEL=INFO
    """
    html_parser: str = DEFAULT_HTML_PARSER
    date_timezone: str = DEFAULT_TIMEZONE
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "ParserSettings":
        """Load settings from environment variables."""
        return cls(
            html_parser=os.environ.get("HTML_PARSER", DEFAULT_HTML_PARSER),
            date_timezone=os.environ.get("DATE_TIMEZONE", DEFAULT_TIMEZONE),
            log_level=os.environ.get("LOG_LEVEL", "INFO"),
        )
