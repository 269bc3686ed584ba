"""Command-line interface for imfparse."""
