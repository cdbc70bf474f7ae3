"""Cyclopts application and command routing for somalid CLI.

This module defines the main Cyclopts application and registers all subcommands
for the somalid identity record validator.

The CLI provides the following commands:
- validate: Validate one record given as options
- mask: Mask an ID number
- batch: Validate every row of a CSV file
- check-config: Validate a rule configuration file
- languages: List supported message languages
"""

from cyclopts import App

from somalid.cli import commands

app = App(
    name="somalid",
    help="Somali national ID record validator",
    version="0.1.0",
)

app.command(commands.validate)
app.command(commands.mask)
app.command(commands.batch)
app.command(commands.check_config, name="check-config")
app.command(commands.languages)
