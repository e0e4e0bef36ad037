"""Readable one-line idioms.

- `select`: pick one of two precomputed values by a boolean
- `reverse` / `reverse_bytes`: reverse text by characters, not storage units
- `concat`: flatten an ordered collection of sequences into one list
"""

from __future__ import annotations

from oneliners.core.errors import ConfigError, OnelinersError, TextDecodeError, UsageError
from oneliners.idioms import concat, reverse, reverse_bytes, select

__all__ = [
    "ConfigError",
    "OnelinersError",
    "TextDecodeError",
    "UsageError",
    "__version__",
    "concat",
    "reverse",
    "reverse_bytes",
    "select",
]

__version__ = "0.1.0"
