"""Output formatting and logging setup for CLI operations.

This module provides:
- ProgressIndicator: TTY-aware progress indicators for long operations
- handle_error: Formatted error messages with context and optional stack traces
- print_json: JSON output that keeps Somali and Arabic text readable
- configure_logging: Root logger setup from --log-level / --log-file
"""

import json
import logging
import sys
import traceback
from pathlib import Path
from typing import Any, TextIO

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Only handlers carrying this name are replaced on reconfiguration
_HANDLER_NAME = "somalid-cli"

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


class ProgressIndicator:
    """Simple progress indicator for CLI operations.

    Automatically detects TTY to disable progress indicators when output
    is redirected to a file or pipe. Progress messages are written to
    stderr to keep stdout clean for actual output.

    Example:
        progress = ProgressIndicator(enabled=not quiet)
        progress.start("Validating records.csv")
        # ... do work ...
        progress.success("Validated 120 records")
    """

    def __init__(self, enabled: bool = True, stream: TextIO = sys.stderr):
        """Initialize progress indicator.

        Args:
            enabled: Show progress marks (forced off when stream is not a TTY)
            stream: Stream that receives the progress marks
        """
        self.enabled = enabled and stream.isatty()
        self.stream = stream

    def start(self, message: str) -> None:
        """Write the step label followed by an ellipsis.

        Args:
            message: Step label, e.g. "Validating records.csv"
        """
        if self.enabled:
            self.stream.write(f"{message}... ")
            self.stream.flush()

    def success(self, message: str) -> None:
        """Close the step with a checkmark and print the result.

        Args:
            message: Result line, always printed to stdout
        """
        if self.enabled:
            self.stream.write("✓\n")
        print(message)

    def error(self, message: str) -> None:
        """Close the step with a cross and report the failure.

        Args:
            message: Failure description, always printed to stderr
        """
        if self.enabled:
            self.stream.write("✗\n")
        print(f"Error: {message}", file=sys.stderr)


def handle_error(error: Exception, verbose: bool = False) -> None:
    """Format and display error message with context.

    Displays error messages to stderr with optional context fields from
    SomalidError exceptions. When verbose mode is enabled, also displays
    the full stack trace.

    Args:
        error: Exception to display
        verbose: Whether to show stack trace (default False)
    """
    print(f"Error: {error}", file=sys.stderr)

    if hasattr(error, "context") and error.context:
        print("Context:", file=sys.stderr)
        for key, value in error.context.items():
            print(f"  {key}: {value}", file=sys.stderr)

    if verbose:
        print("\nStack trace:", file=sys.stderr)
        traceback.print_exc(file=sys.stderr)


def print_json(data: Any, stream: TextIO | None = None) -> None:
    """Print ``data`` as indented JSON without escaping non-ASCII text."""
    print(json.dumps(data, indent=2, ensure_ascii=False), file=stream or sys.stdout)


def configure_logging(log_level: str = "warning", log_file: Path | None = None) -> None:
    """Configure the root logger for a CLI run.

    Args:
        log_level: One of debug, info, warning, error (case-insensitive)
        log_file: Optional file to log to instead of stderr

    Raises:
        ValueError: If ``log_level`` is not a known level name
    """
    level = LOG_LEVELS.get(log_level.lower())
    if level is None:
        raise ValueError(
            f"Unknown log level '{log_level}'. Available: {', '.join(LOG_LEVELS)}"
        )

    handler: logging.Handler
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.set_name(_HANDLER_NAME)

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)
            existing.close()
    root.addHandler(handler)
    root.setLevel(level)
