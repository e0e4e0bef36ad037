from __future__ import annotations

import pytest

from oneliners import TextDecodeError, reverse, reverse_bytes
from oneliners.idioms.text import text_codec_name


def test_reverse_concrete_scenario() -> None:
    assert reverse("Hello, World") == "dlroW ,olleH"


def test_reverse_empty() -> None:
    assert reverse("") == ""


def test_reverse_keeps_whitespace() -> None:
    assert reverse(" test ") == " tset "
    assert reverse("a\tb\n") == "\nb\ta"


@pytest.mark.parametrize(
    "s",
    ["", "x", "Hello, World", " test ", "héllo wörld", "日本語テキスト", "a😀b🎉c", "​zero‍width"],
)
def test_reverse_is_an_involution(s: str) -> None:
    assert reverse(reverse(s)) == s


def test_reverse_keeps_multibyte_characters_whole() -> None:
    assert reverse("añb") == "bña"
    assert reverse("a😀b") == "b😀a"
    # Still valid UTF-8 after reversal.
    assert reverse("日本").encode("utf-8").decode("utf-8") == "本日"


def test_reverse_lone_surrogate_is_best_effort() -> None:
    assert reverse("\ud800x") == "x\ud800"


def test_reverse_rejects_bytes() -> None:
    with pytest.raises(TypeError):
        reverse(b"abc")  # type: ignore[arg-type]


def test_reverse_bytes_utf8() -> None:
    assert reverse_bytes("héllo".encode("utf-8")) == "olléh".encode("utf-8")
    assert reverse_bytes(b"") == b""


def test_reverse_bytes_other_encoding() -> None:
    assert reverse_bytes("ab".encode("utf-16"), encoding="utf-16") == "ba".encode("utf-16")
    assert reverse_bytes("çà".encode("latin-1"), encoding="latin-1") == "àç".encode("latin-1")


def test_reverse_bytes_invalid_input_is_error() -> None:
    with pytest.raises(TextDecodeError) as ei:
        reverse_bytes(b"ab\xffcd")

    assert isinstance(ei.value, ValueError)
    assert ei.value.position == 2
    assert ei.value.encoding == "utf-8"
    assert "byte 2" in str(ei.value)


def test_reverse_bytes_truncated_sequence_is_error() -> None:
    # First byte of a two-byte sequence with nothing after it.
    with pytest.raises(TextDecodeError):
        reverse_bytes(b"abc\xc3")


def test_reverse_bytes_unknown_encoding() -> None:
    with pytest.raises(TextDecodeError) as ei:
        reverse_bytes(b"abc", encoding="no-such-codec")

    assert "no-such-codec" in str(ei.value)


@pytest.mark.parametrize("encoding", ["hex", "rot13", "base64"])
def test_reverse_bytes_non_text_codec(encoding: str) -> None:
    with pytest.raises(TextDecodeError) as ei:
        reverse_bytes(b"abc", encoding=encoding)

    assert "not a text encoding" in str(ei.value)
    assert ei.value.encoding == encoding


def test_text_codec_name_normalizes() -> None:
    assert text_codec_name("UTF8") == "utf-8"
    assert text_codec_name("latin_1") == "iso8859-1"
