"""CLI entry point for somalid.

Enables invocation via `python -m somalid`.

This module imports the Cyclopts app and invokes it, exiting with the
appropriate exit code based on command execution results.
"""

import sys

from somalid.cli.app import app

if __name__ == "__main__":
    exit_code = app()
    sys.exit(exit_code if exit_code is not None else 0)
