"""Command-line interface for bfsfind."""
