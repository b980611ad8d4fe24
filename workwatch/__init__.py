"""WorkWatch - a terminal work-time tracker."""

__version__ = '0.1.0'
