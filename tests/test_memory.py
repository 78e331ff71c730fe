import pytest

from sigtalk.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix():
    buf = bytearray(b"abcdef")
    result = memset(buf, ord("Z"), 3)
    assert result is buf
    assert buf == b"Z" * 3 + b"def"


def test_memset_truncates_value_to_byte():
    buf = bytearray(4)
    memset(buf, 0x100 + ord("A"), 4)
    assert buf == b"A" * 4


def test_memset_rejects_overlong_count():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


def test_bzero_from_source_example():
    buf = bytearray(b"This is a test!")
    view = memoryview(buf)[9:]
    bzero(view, 2)
    expected = b"This is a\x00\x00est!"
    assert memcmp(buf, expected, len(expected)) == 0
    assert memchr(buf, 0, len(buf)) == 9
    assert bytes(buf) == expected


def test_memcpy_copies_terminator_from_source_example():
    dest = bytearray(b"Hello\x00")
    memcpy(dest, b"Kit\x00", 4)
    assert dest[:3] == b"Kit"
    assert dest[3] == 0
    assert dest[4:5] == b"o"


def test_memcpy_rejects_short_source():
    with pytest.raises(ValueError):
        memcpy(bytearray(10), b"ab", 3)


def test_memmove_forward_overlap():
    buf = bytearray(b"ABCDEFGH")
    memmove(buf, 4, 2, 3)
    assert buf == b"ABCD" + b"CDE" + b"H"


def test_memmove_backward_overlap():
    buf = bytearray(b"ABCDEFGH")
    memmove(buf, 0, 4, 4)
    assert buf == b"EFGH" * 2


def test_memmove_out_of_bounds():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)


def test_memchr_finds_first_match():
    data = b"hello world"
    assert memchr(data, ord("o"), len(data)) == data.index(b"o")


def test_memchr_respects_limit():
    data = b"hello world"
    assert memchr(data, ord("w"), 5) is None


def test_memcmp_equal_and_different():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abc", b"abd", 3) == ord("c") - ord("d")
    assert memcmp(b"abc", b"abd", 2) == 0


def test_memcmp_uses_unsigned_bytes():
    assert memcmp(b"\xff", b"\x01", 1) > 0


def test_calloc_zeroed():
    buf = calloc(5, 4)
    assert len(buf) == 20
    assert not any(buf)


def test_calloc_zero_count_gives_one_byte():
    assert len(calloc(0, 8)) == 1
    assert len(calloc(8, 0)) == 1


def test_calloc_overflow():
    with pytest.raises(MemoryError):
        calloc(2**63, 4)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)