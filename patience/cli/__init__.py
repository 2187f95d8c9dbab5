"""Command-line interfaces for the patience engine."""
