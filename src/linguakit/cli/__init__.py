"""Command-line interface for LinguaKit."""
