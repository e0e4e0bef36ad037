"""Project core.

Stable, non-domain-specific building blocks shared by the library and the CLI
(currently the error hierarchy).
"""

from __future__ import annotations

from oneliners.core.errors import ConfigError, OnelinersError, TextDecodeError, UsageError

__all__ = ["ConfigError", "OnelinersError", "TextDecodeError", "UsageError"]
