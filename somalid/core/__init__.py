"""Core types: error hierarchy, validation rule and record shapes."""
