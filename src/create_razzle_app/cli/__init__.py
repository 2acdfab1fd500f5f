"""CLI layer — argument parsing, user output, and error boundary.

This package is the outermost layer of the application.  It may import
from ``core`` and ``infra``, but no other layer may import from ``cli``.
"""
