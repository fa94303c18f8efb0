# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

"""Tests for the ascon-tool command line."""

import pytest

import asconcli

KEY = "000102030405060708090a0b0c0d0e0f"
NONCE = KEY


def run(capsys, *argv):
    asconcli.main(list(argv))
    return capsys.readouterr()


def test_encrypt(capsys):
    out = run(capsys, "encrypt", "--key", KEY, "--nonce", NONCE, "").out
    assert out == "e355159f292911f794cb1432a0103a8a\n"


def test_encrypt_ascon128a(capsys):
    out = run(capsys, "encrypt", "--variant", "Ascon128a", "--key", KEY, "--nonce", NONCE, "").out
    assert out == "7a834e6f09210957067b10fd831f0078\n"


def test_decrypt(capsys):
    out = run(capsys, "decrypt", "--key", KEY, "--nonce", NONCE, "--ad", "00",
              "944df887cd4901614c5dedbc42fc0da0").out
    assert out == "\n"


def test_roundtrip_with_dump(capsys):
    ct = run(capsys, "encrypt", "--key", KEY, "--nonce", NONCE, "--ad", "aabb", "68656c6c6f").out.strip()
    out = run(capsys, "decrypt", "--key", KEY, "--nonce", NONCE, "--ad", "aabb", "--dump", ct).out
    assert out == "Plaintext (5 bytes):\n       0 68 65 6c 6c 6f\n"


def test_trace(capsys):
    out = run(capsys, "encrypt", "--trace", "--key", KEY, "--nonce", NONCE, "00").out
    assert out.splitlines()[0].startswith("initial value:")


def test_decrypt_failure(capsys):
    with pytest.raises(SystemExit) as e:
        asconcli.main(["decrypt", "--key", KEY, "--nonce", NONCE, "00" * 16])
    assert e.value.code == 1
    assert "Tag verification failed" in capsys.readouterr().err


def test_decrypt_short_ciphertext(capsys):
    with pytest.raises(SystemExit) as e:
        asconcli.main(["decrypt", "--key", KEY, "--nonce", NONCE, "abcd"])
    assert e.value.code == 1
    err = capsys.readouterr().err
    assert "Encrypted bytes should have at least 16 bytes" in err
    assert "Tag verification failed" not in err


def test_kat_checks_reference_files(capsys):
    out = run(capsys, "kat").out
    assert "======== LWC_AEAD_KAT_128_128.txt ========" in out
    assert "======== LWC_AEAD_KAT_128_128_a.txt ========" in out


def test_bad_key_length(capsys):
    with pytest.raises(SystemExit) as e:
        asconcli.main(["encrypt", "--key", "00", "--nonce", NONCE, "00"])
    assert e.value.code == 1
    assert "Key must be 16 bytes" in capsys.readouterr().err


def test_bad_hex(capsys):
    with pytest.raises(SystemExit):
        asconcli.main(["encrypt", "--key", "zz", "--nonce", NONCE, "00"])
    assert "Key is not valid hex" in capsys.readouterr().err


def test_kat_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit):
        asconcli.main(["kat", "--dir", str(tmp_path), "--variant", "Ascon128"])
    assert "No such file" in capsys.readouterr().err


def test_kat_detects_bad_record(tmp_path, capsys):
    p = tmp_path / "LWC_AEAD_KAT_128_128.txt"
    p.write_text(
        "Count = 1\n"
        "Key = 000102030405060708090A0B0C0D0E0F\n"
        "Nonce = 000102030405060708090A0B0C0D0E0F\n"
        "PT = \n"
        "AD = \n"
        "CT = 00000000000000000000000000000000\n"
        "\n")
    with pytest.raises(SystemExit):
        asconcli.main(["kat", "--dir", str(tmp_path), "--variant", "Ascon128"])
    assert "Count = 1: ciphertext mismatch" in capsys.readouterr().err


def test_bench(capsys):
    out = run(capsys, "bench", "--sizes", "8", "--repeats", "1").out
    lines = out.splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("Ascon128 encryption (8 bytes)")
    assert lines[1].startswith("Ascon128a encryption (8 bytes)")
