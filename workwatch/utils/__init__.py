"""Utility modules for WorkWatch."""
