import pytest

from jsonvalue.utf import check_first, check_full, check_string, encode_codepoint, iterate

SAMPLES = [0x00, 0x41, 0x7F, 0x80, 0xE9, 0x7FF, 0x800, 0x20AC, 0xFFFF, 0x10000, 0x1F600, 0x10FFFF]


@pytest.mark.parametrize("codepoint", SAMPLES)
def test_encode_matches_standard_encoding(codepoint):
    assert encode_codepoint(codepoint) == chr(codepoint).encode("utf-8")


@pytest.mark.parametrize("codepoint", [-1, 0x110000])
def test_encode_out_of_range(codepoint):
    with pytest.raises(ValueError):
        encode_codepoint(codepoint)


@pytest.mark.parametrize("codepoint", SAMPLES)
def test_check_first_gives_sequence_length(codepoint):
    encoded = chr(codepoint).encode("utf-8")
    assert check_first(encoded[0]) == len(encoded)


def test_check_first_rejects_invalid_leads():
    invalid = list(range(0x80, 0xC2)) + list(range(0xF5, 0x100))
    assert all(check_first(byte) == 0 for byte in invalid)


def test_check_first_rejects_non_byte():
    with pytest.raises(ValueError):
        check_first(256)


@pytest.mark.parametrize("codepoint", [c for c in SAMPLES if c >= 0x80])
def test_check_full_decodes(codepoint):
    assert check_full(chr(codepoint).encode("utf-8")) == codepoint


@pytest.mark.parametrize(
    "data",
    [
        b"\xed\xa0\x80",  # surrogate half
        b"\xe0\x80\xaf",  # overlong
        b"\xc1\xbf",  # overlong two-byte
        b"\xf4\x90\x80\x80",  # beyond U+10FFFF
        b"\xc3\x28",  # bad continuation byte
        b"a",  # single byte is not a multi-byte sequence
    ],
)
def test_check_full_rejects(data):
    assert check_full(data) is None


def test_iterate_round_trip():
    text = "a\u00e9\u20ac\U0001F600z"
    assert list(iterate(text.encode("utf-8"))) == [ord(c) for c in text]


def test_iterate_empty():
    assert list(iterate(b"")) == []


@pytest.mark.parametrize("data", [b"ab\xff", b"\xe2\x82", b"\x80"])
def test_iterate_invalid(data):
    with pytest.raises(ValueError):
        list(iterate(data))


def test_check_string_valid():
    assert check_string("h\u00e9llo \U0001F600".encode("utf-8")) is True


@pytest.mark.parametrize("data", [b"a\xefz", b"asdf\xfe", b"\xed\xa0\x80"])
def test_check_string_invalid(data):
    assert check_string(data) is False


def test_encoded_samples_pass_check_string():
    data = b"".join(encode_codepoint(c) for c in SAMPLES)
    assert check_string(data) is True
    assert list(iterate(data)) == SAMPLES