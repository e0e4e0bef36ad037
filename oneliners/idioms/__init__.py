"""The one-line idioms themselves.

Every function here is pure: no I/O, no shared state, no logging.
"""

from __future__ import annotations

from oneliners.idioms.choice import select
from oneliners.idioms.sequences import concat
from oneliners.idioms.text import reverse, reverse_bytes

__all__ = ["concat", "reverse", "reverse_bytes", "select"]
