"""Command-line interface for roomtypes."""
