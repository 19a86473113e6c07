"""Command-line interface for dimcontent."""
