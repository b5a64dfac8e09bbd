"""Command-line argument and path handling."""
