# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

"""Tests for the Ascon permutation."""

import pytest

import asconp
import wordpack


def sample_state():
    return [0x80400C0600000000, 0x0001020304050607, 0x08090A0B0C0D0E0F,
            0x0001020304050607, 0x08090A0B0C0D0E0F]


def test_short_schedules_are_suffixes():
    assert asconp.constants_for(12) == asconp.round_constants
    assert asconp.constants_for(8) == asconp.round_constants[4:]
    assert asconp.constants_for(6) == asconp.round_constants[6:]
    assert asconp.constants_for(6)[0] == 0x96


def test_round_constants():
    for i, c in enumerate(asconp.round_constants):
        assert c == ((0xF - i) << 4) | i


@pytest.mark.parametrize("rounds", [0, 1, 7, 13])
def test_unsupported_round_counts(rounds):
    with pytest.raises(ValueError, match="Unsupported round count"):
        asconp.permute(sample_state(), rounds)


def test_twelve_rounds_is_four_rounds_then_eight():
    a = asconp.permute(sample_state(), 12)
    b = sample_state()
    for c in asconp.round_constants[:4]:
        asconp.single_round(b, c)
    asconp.permute(b, 8)
    assert a == b


def test_eight_rounds_is_two_rounds_then_six():
    a = asconp.permute(sample_state(), 8)
    b = sample_state()
    for c in asconp.round_constants[4:6]:
        asconp.single_round(b, c)
    asconp.permute(b, 6)
    assert a == b


def test_permutes_in_place():
    x = sample_state()
    y = asconp.permute(x, 6)
    assert y is x
    assert x != sample_state()


@pytest.mark.parametrize("rounds", asconp.supported_rounds)
def test_words_stay_64_bit(rounds):
    x = asconp.permute([wordpack.word_mask] * 5, rounds)
    assert all(0 <= w <= wordpack.word_mask for w in x)
    x = asconp.permute([0] * 5, rounds)
    assert all(0 <= w <= wordpack.word_mask for w in x)
    assert x != [0] * 5


def test_single_bit_change_diffuses():
    a = asconp.permute(sample_state(), 12)
    x = sample_state()
    x[4] ^= 1
    b = asconp.permute(x, 12)
    assert all(u != v for u, v in zip(a, b))


def test_dump_state(capsys):
    asconp.dump_state([1, 2, 3, 4, 5], "init")
    out = capsys.readouterr().out
    assert out.startswith("init:")
    assert "x0=0000000000000001" in out
    assert "x4=0000000000000005" in out
