"""CLI interface for the somalid identity record validator.

This package provides command-line access to record validation, ID masking,
CSV batch validation and rule configuration checks.
"""
