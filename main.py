#!/usr/bin/env python3
"""Command line entry point: extract data from an HTML document with a selector schema.

Usage:
    python main.py schema.yaml page.html
    curl -s https://example.com | python main.py schema.json
"""
import argparse
import asyncio
import json
import logging
import sys
from dataclasses import dataclass, replace
from typing import Any

# Load .env file before any other imports that use os.environ
from dotenv import load_dotenv

load_dotenv()

from src.contracts import SchemaFileError, load_schema, validate_schema
from src.core.config import ParserSettings
from src.core.exceptions import ExtractionError
from src.parser.parser import Parser


@dataclass
class CliArgs:
    """Parsed command-line arguments."""
    schema: str
    html: str | None
    log_level: str | None
    html_parser: str | None
    indent: int | None


def parse_arguments() -> CliArgs:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Extract structured data from HTML using a selector schema"
    )
    parser.add_argument(
        "schema",
        help="Selector schema file (.json, .yaml or .yml)"
    )
    parser.add_argument(
        "html",
        nargs="?",
        help="HTML file to parse (reads stdin when omitted)"
    )
    parser.add_argument(
        "--log-level", "-l",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (defaults to LOG_LEVEL or INFO)"
    )
    parser.add_argument(
        "--parser", "-p",
        dest="html_parser",
        default=None,
        help="BeautifulSoup parser backend, e.g. html.parser or lxml"
    )
    parser.add_argument(
        "--indent", "-i",
        type=int,
        default=2,
        help="JSON output indentation (0 for compact output)"
    )
    args = parser.parse_args()

    return CliArgs(
        schema=args.schema,
        html=args.html,
        log_level=args.log_level,
        html_parser=args.html_parser,
        indent=args.indent or None,
    )


def setup_logging(level: str) -> logging.Logger:
    """Configure logging and return the logger."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            # stdout carries the JSON result
            logging.StreamHandler(sys.stderr),
        ]
    )
    return logging.getLogger(__name__)


def read_html(path: str | None) -> str:
    """Read the HTML document from a file or stdin."""
    if path is None:
        return sys.stdin.read()
    with open(path, encoding="utf-8") as f:
        return f.read()


def run_extraction(schema: Any, html: str, settings: ParserSettings) -> Any:
    """Resolve the schema against the document."""
    parser = Parser(settings=settings)
    return asyncio.run(parser.resolve_from_html(html, schema))


def main() -> int:
    """Main entry point."""
    args = parse_arguments()

    settings = ParserSettings.from_env()
    if args.log_level:
        settings = replace(settings, log_level=args.log_level)
    if args.html_parser:
        settings = replace(settings, html_parser=args.html_parser)

    logger = setup_logging(settings.log_level)

    try:
        schema = load_schema(args.schema)
        validate_schema(schema)
        html = read_html(args.html)
        logger.info(f"Parsing {args.html or 'stdin'} with {settings.html_parser}")

        result = run_extraction(schema, html, settings)

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except (SchemaFileError, ExtractionError) as e:
        logger.error(f"Error: {e}")
        return 1
    except OSError as e:
        logger.error(f"Cannot read HTML: {e}")
        return 1

    print(json.dumps(result, default=str, ensure_ascii=False, indent=args.indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
