"""CLI command implementations.

This module implements the CLI commands for the somalid tool:
- validate: Validate a single identity record given as options
- mask: Mask an ID number
- batch: Validate every row of a CSV file
- check_config: Validate a rule configuration file
- languages: List supported message languages

Each command is implemented as a function that returns an exit code,
enabling both direct invocation and subprocess-based testing.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Annotated, Any

import polars as pl
from cyclopts import Parameter

from somalid.cli.config import ConfigError, load_config, load_rule, validate_config
from somalid.cli.exit_codes import ExitCode
from somalid.cli.output import ProgressIndicator, configure_logging, handle_error, print_json
from somalid.core.exceptions import ValidationError
from somalid.core.record import REQUIRED_FIELDS, canonical_field
from somalid.core.rule import Rule
from somalid.i18n.catalog import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES
from somalid.privacy import mask_id
from somalid.validation.batch import validate_batch
from somalid.validation.record import validate_record_multilingual

logger = logging.getLogger(__name__)

REPORT_FORMATS = (".csv", ".json")


def _future_expiry_override(no_future_expiry: bool) -> bool | None:
    # None keeps the config file value
    return False if no_future_expiry else None


def _check_language(language: str | None) -> str | None:
    if language is not None and language not in SUPPORTED_LANGUAGES:
        available = ", ".join(SUPPORTED_LANGUAGES)
        print(f"Error: Unknown language '{language}'. Available: {available}", file=sys.stderr)
        return None
    return language or DEFAULT_LANGUAGE


def validate(
    id_number: Annotated[str, Parameter(name="--id", help="National ID number")],
    name: Annotated[str, Parameter(help="Full name")],
    sex: Annotated[str, Parameter(help="Sex (Male/Female, M/F)")],
    dob: Annotated[str, Parameter(help="Date of birth")],
    issue: Annotated[str, Parameter(help="Date of issue")],
    expiry: Annotated[str, Parameter(help="Date of expiry")],
    config: Annotated[Path | None, Parameter(help="Rule configuration file path")] = None,
    language: Annotated[str, Parameter(help="Error message language (en, so, ar)")] = "en",
    no_future_expiry: Annotated[bool, Parameter(help="Accept expired documents")] = False,
    log_level: Annotated[str, Parameter(help="Log level (debug, info, warning, error)")] = "warning",
    log_file: Annotated[Path | None, Parameter(help="Log file path")] = None,
) -> int:
    """Validate one identity record.

    On success prints ``{"ok": true, "data": {...}}`` with the ID masked. On
    failure prints ``{"ok": false, "error": ..., "code": ..., "messages": ...}``
    to stderr.

    Returns:
        Exit code (0 for a valid record, 2 for a validation failure,
        6 for configuration errors)

    Example:
        >>> exit_code = validate(
        ...     id_number="934265782412",
        ...     name="Ahmed Hassan",
        ...     sex="M",
        ...     dob="15-03-1990",
        ...     issue="01-01-2020",
        ...     expiry="01-01-2030",
        ... )
    """
    try:
        configure_logging(log_level, log_file)

        lang = _check_language(language)
        if lang is None:
            return ExitCode.CONFIG_ERROR

        rule = load_rule(
            config, require_future_expiry=_future_expiry_override(no_future_expiry)
        )

        record = {
            "id_number": id_number,
            "name": name,
            "sex": sex,
            "dob": dob,
            "issue": issue,
            "expiry": expiry,
        }
        validated = validate_record_multilingual(record, rule, language=lang)

        print_json({"ok": True, "data": validated.masked()})
        return ExitCode.SUCCESS

    except ValidationError as e:
        print_json(
            {
                "ok": False,
                "error": e.message,
                "code": e.code.value,
                "field": e.field,
                "messages": e.messages,
                "localized_message": e.localized_message,
            },
            stream=sys.stderr,
        )
        return ExitCode.VALIDATION_ERROR
    except (ConfigError, ValueError) as e:
        handle_error(e, verbose=False)
        return ExitCode.CONFIG_ERROR
    except Exception as e:
        handle_error(e, verbose=False)
        return ExitCode.UNEXPECTED_ERROR


def mask(
    id_number: Annotated[str, Parameter(name="--id", help="ID number to mask")],
    head: Annotated[int, Parameter(help="Leading digits left visible")] = 2,
    tail: Annotated[int, Parameter(help="Trailing digits left visible")] = 3,
) -> int:
    """Print the masked form of an ID number.

    Example:
        $ somalid mask --id "9342 6578 2412"
        93*******412
    """
    try:
        print(mask_id(id_number, head=head, tail=tail))
        return ExitCode.SUCCESS
    except ValueError as e:
        handle_error(e, verbose=False)
        return ExitCode.CONFIG_ERROR


def _missing_columns(columns: list[str]) -> list[str]:
    present = {canonical_field(column) for column in columns}
    return [field for field in REQUIRED_FIELDS if field not in present]


def _write_report(result: Any, output: Path) -> None:
    output.parent.mkdir(parents=True, exist_ok=True)
    if output.suffix.lower() == ".json":
        output.write_text(
            json.dumps(result.to_json(masked=True), indent=2, ensure_ascii=False),
            encoding="utf-8",
        )
    else:
        result.to_dataframe(masked=True).write_csv(output)


def batch(
    input_path: Annotated[Path, Parameter(help="CSV file with one record per row")],
    output: Annotated[Path | None, Parameter(help="Report file path (.csv or .json)")] = None,
    config: Annotated[Path | None, Parameter(help="Rule configuration file path")] = None,
    language: Annotated[str | None, Parameter(help="Error message language (en, so, ar)")] = None,
    no_future_expiry: Annotated[bool, Parameter(help="Accept expired documents")] = False,
    quiet: Annotated[bool, Parameter(help="Suppress progress output")] = False,
    verbose: Annotated[bool, Parameter(help="Show detailed error information")] = False,
    log_level: Annotated[str, Parameter(help="Log level (debug, info, warning, error)")] = "warning",
    log_file: Annotated[Path | None, Parameter(help="Log file path")] = None,
) -> int:
    """Validate every row of a CSV file.

    Columns are matched by field name (id_number, name, sex, dob, issue,
    expiry) or by their aliases (idNumber, dobDMY, ...). All values are read
    as text. A failing row never stops the batch.

    Returns:
        Exit code (0 if every record is valid, 2 if any record fails,
        3 for unreadable input, 4 if the report cannot be written,
        6 for configuration errors)

    Example:
        >>> exit_code = batch(
        ...     input_path=Path("records.csv"),
        ...     output=Path("report.json"),
        ...     language="so",
        ... )
    """
    try:
        configure_logging(log_level, log_file)

        if language is not None and _check_language(language) is None:
            return ExitCode.CONFIG_ERROR

        if output is not None and output.suffix.lower() not in REPORT_FORMATS:
            print(
                f"Error: Unsupported report format '{output.suffix}'. "
                f"Use one of: {', '.join(REPORT_FORMATS)}",
                file=sys.stderr,
            )
            return ExitCode.CONFIG_ERROR

        if not input_path.exists():
            print(f"Error: Input file not found: {input_path}", file=sys.stderr)
            return ExitCode.INPUT_ERROR

        rule: Rule = load_rule(
            config, require_future_expiry=_future_expiry_override(no_future_expiry)
        )

        progress = ProgressIndicator(enabled=not quiet)
        progress.start(f"Validating {input_path.name}")

        try:
            frame = pl.read_csv(input_path, infer_schema_length=0)
        except (OSError, pl.exceptions.PolarsError) as e:
            progress.error(f"Cannot read {input_path}: {e}")
            return ExitCode.INPUT_ERROR

        missing = _missing_columns(frame.columns)
        if missing:
            progress.error(f"Missing required columns: {', '.join(missing)}")
            return ExitCode.INPUT_ERROR

        result = validate_batch(frame.to_dicts(), rule, language=language)
        progress.success(result.format())

        if output is not None:
            try:
                _write_report(result, output)
            except OSError as e:
                handle_error(e, verbose=verbose)
                return ExitCode.OUTPUT_ERROR
            logger.info("Wrote report to %s", output)
            if not quiet:
                print(f"Report written to {output}")

        return ExitCode.SUCCESS if result.is_valid() else ExitCode.VALIDATION_ERROR

    except (ConfigError, ValueError) as e:
        handle_error(e, verbose=verbose)
        return ExitCode.CONFIG_ERROR
    except Exception as e:
        handle_error(e, verbose=verbose)
        return ExitCode.UNEXPECTED_ERROR


def check_config(
    config_path: Annotated[Path, Parameter(help="Configuration file path")],
) -> int:
    """Validate a rule configuration file.

    Returns:
        Exit code (0 for valid config, 6 for invalid config)

    Example:
        >>> exit_code = check_config(config_path=Path("rule.yaml"))
    """
    try:
        config = load_config(config_path)

        errors = validate_config(config)
        if errors:
            print("✗ Configuration validation failed:", file=sys.stderr)
            for error in errors:
                print(f"  {error}", file=sys.stderr)
            return ExitCode.CONFIG_ERROR

        print("✓ Configuration is valid")
        for key, value in Rule.from_mapping(config).to_dict().items():
            print(f"  {key}: {value}")

        return ExitCode.SUCCESS

    except ConfigError as e:
        print("✗ Configuration error:", file=sys.stderr)
        print(f"  {e}", file=sys.stderr)
        return ExitCode.CONFIG_ERROR
    except Exception as e:
        handle_error(e, verbose=False)
        return ExitCode.UNEXPECTED_ERROR


def languages() -> int:
    """List the languages validation messages are available in."""
    print("Available languages:")
    for code, label in SUPPORTED_LANGUAGES.items():
        print(f"  {code}: {label}")
    return ExitCode.SUCCESS
