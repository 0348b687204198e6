import pytest

from ustrkit.utf8 import (
    bi_of_cpi,
    codepoint_size,
    cpi_of_bi,
    is_ascii,
    is_continuation_byte,
    utf8_strlen,
)

SAMPLES = ["hello", "cse29🐕", "apples🍎 and bananas🍌", "héllo wörld", "日本語", ""]


@pytest.mark.parametrize("text", SAMPLES)
def test_is_ascii_matches_str_isascii(text):
    assert is_ascii(text.encode("utf-8")) == text.isascii()


def test_is_ascii_accepts_str():
    assert is_ascii("hello") is True
    assert is_ascii("cse29🐕") is False


@pytest.mark.parametrize("text", SAMPLES)
def test_continuation_bytes_count(text):
    raw = text.encode("utf-8")
    continuations = sum(1 for b in raw if is_continuation_byte(b))
    assert len(raw) - continuations == len(text)


def test_continuation_byte_bounds():
    assert is_continuation_byte(0x80)
    assert not is_continuation_byte(0xC0)
    assert not is_continuation_byte(ord("a"))


@pytest.mark.parametrize("ch", ["a", "é", "語", "🐕", "🍌", "\x7f"])
def test_codepoint_size_matches_encoding(ch):
    raw = ch.encode("utf-8")
    assert codepoint_size(raw[0]) == len(raw)


@pytest.mark.parametrize("byte", [0x80, 0xBF, 0xF8, 0xFF])
def test_codepoint_size_rejects_invalid_lead(byte):
    with pytest.raises(ValueError):
        codepoint_size(byte)


@pytest.mark.parametrize("value", [-1, 256])
def test_codepoint_size_rejects_non_byte(value):
    with pytest.raises(ValueError):
        codepoint_size(value)


@pytest.mark.parametrize("text", SAMPLES)
def test_strlen_counts_codepoints(text):
    assert utf8_strlen(text.encode("utf-8")) == len(text)
    assert utf8_strlen(text) == len(text)


def test_strlen_invalid_encoding():
    with pytest.raises(ValueError):
        utf8_strlen(b"ab\xffcd")


@pytest.mark.parametrize("text", [t for t in SAMPLES if t])
def test_bi_of_cpi_matches_prefix_length(text):
    raw = text.encode("utf-8")
    for cpi in range(len(text) + 1):
        assert bi_of_cpi(raw, cpi) == len(text[:cpi].encode("utf-8"))


@pytest.mark.parametrize("text", [t for t in SAMPLES if t])
def test_cpi_bi_round_trip(text):
    raw = text.encode("utf-8")
    for cpi in range(len(text)):
        assert cpi_of_bi(raw, bi_of_cpi(raw, cpi)) == cpi


def test_cpi_of_bi_inside_codepoint_rounds_up():
    raw = "🐕a".encode("utf-8")
    assert cpi_of_bi(raw, 1) == cpi_of_bi(raw, 4)


@pytest.mark.parametrize("index", [-1, 5, 100])
def test_cpi_of_bi_out_of_range(index):
    with pytest.raises(IndexError):
        cpi_of_bi(b"hello", index)


def test_bi_of_cpi_end_is_length():
    raw = "cse29🐕".encode("utf-8")
    assert bi_of_cpi(raw, utf8_strlen(raw)) == len(raw)


def test_bi_of_cpi_out_of_range():
    raw = "cse29🐕".encode("utf-8")
    with pytest.raises(IndexError):
        bi_of_cpi(raw, utf8_strlen(raw) + 1)
    with pytest.raises(IndexError):
        bi_of_cpi(raw, -1)


def test_bi_of_cpi_invalid_encoding():
    with pytest.raises(ValueError):
        bi_of_cpi(b"a\xffb", 2)