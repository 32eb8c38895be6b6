"""Formatting routines for RFC 2646 format=flowed text."""
from __future__ import annotations

from .config import LineWidths, ReformatOptions, default_widths, set_default_widths
from .convert.flowed import quote, quote_fixed, reformat
from .version import __version__

__all__ = [
    "LineWidths",
    "ReformatOptions",
    "default_widths",
    "quote",
    "quote_fixed",
    "reformat",
    "set_default_widths",
    "__version__",
]
