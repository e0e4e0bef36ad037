from __future__ import annotations

import codecs

from oneliners.core.errors import TextDecodeError


def reverse(text: str) -> str:
    """Reverse `text` character by character.

    `str` is a sequence of code points, so multi-byte characters stay intact.
    Whitespace is kept (and reversed) like any other character.

    Example:
        >>> reverse("Hello, World")
        'dlroW ,olleH'
    """

    if not isinstance(text, str):
        raise TypeError(f"reverse() expects str, got {type(text).__name__}")
    return text[::-1]


def text_codec_name(encoding: str) -> str:
    """Return the canonical name of `encoding` if it maps bytes to str.

    Codecs such as `hex` or `rot13` are registered but are not text encodings;
    they are rejected along with unknown names.
    """

    try:
        name = codecs.lookup(encoding).name
        # bytes.decode refuses non-text codecs even for empty input.
        b"".decode(name)
    except LookupError as e:
        raise TextDecodeError(f"not a text encoding: {encoding!r}", encoding=encoding) from e
    return name


def reverse_bytes(data: bytes, *, encoding: str = "utf-8") -> bytes:
    """Decode `data`, reverse its characters, and encode the result again.

    Decoding is strict: bytes that are not valid in `encoding` raise
    TextDecodeError instead of being reversed at the byte level.
    """

    name = text_codec_name(encoding)
    try:
        text = bytes(data).decode(name)
    except UnicodeDecodeError as e:
        raise TextDecodeError(
            f"cannot decode input as {name} at byte {e.start}: {e.reason}",
            encoding=name,
            position=e.start,
        ) from e

    return reverse(text).encode(name)
