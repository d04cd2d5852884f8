"""Command-line interface for gradient-parser."""
