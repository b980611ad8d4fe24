"""Command line interface for WorkWatch."""
