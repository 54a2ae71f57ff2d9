"""Command-line interface for brandaudit."""
