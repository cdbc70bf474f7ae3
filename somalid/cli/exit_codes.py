"""Exit code constants for CLI commands.

This module defines standard exit codes for different error conditions,
following Unix conventions where 0 indicates success and non-zero values
indicate different types of failures.

Exit codes:
    0: SUCCESS - Operation completed successfully
    1: UNEXPECTED_ERROR - Unexpected/unhandled exception
    2: VALIDATION_ERROR - One or more records failed validation
    3: INPUT_ERROR - Input file missing or unreadable
    4: OUTPUT_ERROR - Report file could not be written
    6: CONFIG_ERROR - Configuration file or argument error
"""


class ExitCode:
    """Standard exit codes for CLI commands.

    Example:
        >>> from somalid.cli.exit_codes import ExitCode
        >>> import sys
        >>>
        >>> try:
        ...     validate_record(record)
        ...     sys.exit(ExitCode.SUCCESS)
        ... except ValidationError:
        ...     sys.exit(ExitCode.VALIDATION_ERROR)
    """

    SUCCESS = 0
    """Operation completed successfully."""

    UNEXPECTED_ERROR = 1
    """Unexpected or unhandled exception occurred."""

    VALIDATION_ERROR = 2
    """A record (or at least one record of a batch) failed validation."""

    INPUT_ERROR = 3
    """Input file missing, unreadable or lacking required columns."""

    OUTPUT_ERROR = 4
    """Report file could not be written."""

    CONFIG_ERROR = 6
    """Configuration file or argument error."""
