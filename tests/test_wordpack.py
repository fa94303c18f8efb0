# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

"""Tests for moving words between the state and byte buffers."""

import pytest

import wordpack


def test_load64_is_big_endian():
    assert wordpack.load64(bytes(range(8))) == 0x0001020304050607
    assert wordpack.load64(bytes(range(16)), 8) == 0x08090A0B0C0D0E0F


def test_store64_is_big_endian():
    buf = bytearray(10)
    wordpack.store64(buf, 1, 0x0102030405060708)
    assert buf == bytearray(b"\x00\x01\x02\x03\x04\x05\x06\x07\x08\x00")


def test_load64_accepts_memoryview():
    data = memoryview(bytes(range(16)))
    assert wordpack.load64(data[8:]) == 0x08090A0B0C0D0E0F


def test_load_partial_fills_high_bytes():
    assert wordpack.load_partial(b"\x01\x02\x03", 0, 3) == 0x0102030000000000
    assert wordpack.load_partial(b"\xff\xaa", 1, 1) == 0xAA00000000000000
    assert wordpack.load_partial(b"", 0, 0) == 0


def test_store_partial_leaves_other_bytes_alone():
    buf = bytearray(b"\xff" * 10)
    wordpack.store_partial(buf, 1, 0x1122334455667788, 3)
    assert buf == bytearray(b"\xff\x11\x22\x33" + b"\xff" * 6)


def test_store_partial_zero_bytes_is_a_no_op():
    buf = bytearray(b"\xee" * 4)
    wordpack.store_partial(buf, 2, 0x1122334455667788, 0)
    assert buf == bytearray(b"\xee" * 4)


@pytest.mark.parametrize("n", range(8))
def test_pad_marks_byte_after_data(n):
    w = wordpack.pad(n)
    b = w.to_bytes(8, "big")
    assert b[n] == 0x80
    assert b[:n] == bytes(n)
    assert b[n + 1:] == bytes(7 - n)


def test_pad_rejects_full_word():
    with pytest.raises(AssertionError):
        wordpack.pad(8)


def test_mask_and_clear():
    assert wordpack.mask(1) == 0xFF00000000000000
    assert wordpack.mask(3) == 0xFFFFFF0000000000
    assert wordpack.mask(8) == wordpack.word_mask
    w = 0x1122334455667788
    assert wordpack.clear(w, 3) == 0x0000004455667788
    assert wordpack.clear(w, 0) == w
    assert wordpack.clear(w, 3) | (w & wordpack.mask(3)) == w


def test_rotr():
    assert wordpack.rotr(1, 1) == 1 << 63
    assert wordpack.rotr(0x8000000000000000, 63) == 1
    assert wordpack.rotr(0x0123456789ABCDEF, 8) == 0xEF0123456789ABCD


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (0, 0, 0),
        (1, 0, -1),
        (0, 1, -1),
        (1 << 63, 0, -1),
        (0, 1 << 40, -1),
        (wordpack.word_mask, wordpack.word_mask, -1),
    ],
)
def test_notzero(a, b, expected):
    assert wordpack.notzero(a, b) == expected
