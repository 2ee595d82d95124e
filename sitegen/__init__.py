"""Sitegen - Static site generator with one-level template inclusion.

Mirrors a source tree into an output tree, copying assets verbatim and
inlining ``<!-- template: NAME -->`` references in HTML files.
"""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Re-export main CLI entry point
from .cli import main

__all__ = ["main"]
