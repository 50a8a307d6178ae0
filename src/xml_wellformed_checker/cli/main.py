"""Main CLI entry point for the xml-wellformed command-line tool.

Checks one or more XML files for well-formedness and prints one
``[Line n] message`` entry per problem found. A well-formed file produces no
output unless a summary is requested.
"""

import argparse
import json
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

from xml_wellformed_checker import __version__
from xml_wellformed_checker.api import check_file
from xml_wellformed_checker.shared import (
    CheckerConfig,
    CheckResult,
    ConfigError,
    LineSourceError,
    get_logger,
)

EXIT_OK = 0
EXIT_NOT_WELL_FORMED = 1
EXIT_READ_FAILURE = 2
EXIT_INTERRUPTED = 130


@dataclass
class FileOutcome:
    """Result of checking one path: either a CheckResult or a read error."""

    path: Path
    result: Optional[CheckResult] = None
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        if self.result is not None:
            return self.result.to_dict()
        return {"file": str(self.path), "error": self.error}


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog="xml-wellformed",
        description="Check XML files for well-formed tag nesting"
    )

    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument(
        "paths",
        nargs="+",
        type=Path,
        help="XML files to check"
    )
    parser.add_argument(
        "--format", "-f",
        choices=["text", "json"],
        default=None,
        help="Output format (default: text)"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        help="Configuration file path (JSON)"
    )
    parser.add_argument(
        "--encoding", "-e",
        default=None,
        help="Text encoding of the input files (default: utf-8)"
    )
    parser.add_argument(
        "--summary", "-s",
        action="store_true",
        help="Print line count and root element information per file"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Quiet output"
    )

    return parser


def load_config(args: argparse.Namespace) -> CheckerConfig:
    """Build the effective configuration from file and command-line options."""
    config = CheckerConfig.from_file(args.config) if args.config else CheckerConfig()
    return config.override(
        output_format=args.format,
        encoding=args.encoding,
        show_summary=True if args.summary else None,
    )


def configure_logging(args: argparse.Namespace, config: CheckerConfig) -> None:
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    else:
        level = getattr(logging, config.log_level)
    logging.basicConfig(level=level)


def check_paths(paths: List[Path], config: CheckerConfig) -> List[FileOutcome]:
    """Check each path in order, collecting read failures instead of raising."""
    logger = get_logger(__name__, config.correlation_id, "cli")
    outcomes = []
    for path in paths:
        try:
            outcomes.append(FileOutcome(path, result=check_file(path, config)))
        except LineSourceError as e:
            logger.warning("Skipping unreadable file", extra={"file_path": str(path)})
            outcomes.append(FileOutcome(path, error=str(e)))
    return outcomes


def format_summary(outcome: FileOutcome) -> str:
    result = outcome.result
    root = f"<{result.root_name}>" if result.root_name is not None else "none"
    return (
        f"{outcome.path}: {result.lines_processed} lines, root {root}, "
        f"{result.root_count} root element(s), {result.error_count} error(s)"
    )


def format_text(outcomes: List[FileOutcome], show_summary: bool) -> str:
    """Render diagnostics as ``[Line n] message`` lines.

    With several files, each file's diagnostics are preceded by ``path:``.
    Unreadable files are left out; they are reported on stderr.
    """
    lines: List[str] = []
    with_headers = len(outcomes) > 1
    for outcome in outcomes:
        if outcome.result is None:
            continue
        if with_headers and outcome.result.diagnostics:
            lines.append(f"{outcome.path}:")
        lines.extend(outcome.result.render_lines())
        if show_summary:
            lines.append(format_summary(outcome))
    return "\n".join(lines)


def format_json(outcomes: List[FileOutcome]) -> str:
    return json.dumps([outcome.to_dict() for outcome in outcomes], indent=2)


def exit_code_for(outcomes: List[FileOutcome]) -> int:
    if any(outcome.result is None for outcome in outcomes):
        return EXIT_READ_FAILURE
    if any(not outcome.result.is_well_formed for outcome in outcomes):
        return EXIT_NOT_WELL_FORMED
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args)
    except ConfigError as e:
        print(f"Error: Invalid configuration: {e}", file=sys.stderr)
        return EXIT_READ_FAILURE

    configure_logging(args, config)

    try:
        outcomes = check_paths(args.paths, config)
    except KeyboardInterrupt:
        print("\nOperation interrupted by user", file=sys.stderr)
        return EXIT_INTERRUPTED

    for outcome in outcomes:
        if outcome.error is not None:
            print(f"Error: Couldn't read file: {outcome.path}", file=sys.stderr)

    if config.output_format == "json":
        output = format_json(outcomes)
    else:
        output = format_text(outcomes, config.show_summary)
    if output:
        print(output)

    return exit_code_for(outcomes)


if __name__ == "__main__":
    sys.exit(main())
