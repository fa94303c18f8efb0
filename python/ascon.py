# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

"""Ascon-128 and Ascon-128a authenticated encryption, version 1.2.

Both variants run the same sponge pipeline and differ only in their IV, the
number of bytes absorbed per permutation call (the rate), and the number of
permutation rounds between blocks.
"""

import collections

import asconp
import cipher
import errors
from wordpack import (load64, store64, load_partial, store_partial, pad, clear,
    notzero, from_ints, word_bytes)

KEYBYTES = 16
NPUBBYTES = 16
ABYTES = 16

_lengths = {"key": KEYBYTES, "nonce": NPUBBYTES, "tag": ABYTES}

ASCON_128 = {
    "cipher": "Ascon",
    "name": "Ascon128",
    "iv": 0x80400c0600000000,
    "rate": 8,
    "rounds_a": 12,
    "rounds_b": 6,
    "lengths": _lengths,
}

ASCON_128A = {
    "cipher": "Ascon",
    "name": "Ascon128a",
    "iv": 0x80800c0800000000,
    "rate": 16,
    "rounds_a": 12,
    "rounds_b": 8,
    "lengths": _lengths,
}

all_variants = [ASCON_128, ASCON_128A]

AeadResult = collections.namedtuple("AeadResult", ["status", "data"])

def no_trace(label, state):
    pass

def print_state(label, state):
    asconp.dump_state(state, label)

def lookup_variant(v):
    for known in all_variants:
        if v == known or v == known["name"]:
            return known
    raise errors.UsageError(f"Not a variant: {v}")

class Session(object):
    """One encryption or decryption: owns the state from key load to tag."""

    def __init__(self, variant, key, trace=no_trace):
        self._rate = variant["rate"]
        self._rounds_a = variant["rounds_a"]
        self._rounds_b = variant["rounds_b"]
        self._iv = variant["iv"]
        self._trace = trace
        self._key = (load64(key, 0), load64(key, word_bytes))
        self.state = None

    def _permute(self, rounds):
        asconp.permute(self.state, rounds)

    def initialize(self, nonce):
        k0, k1 = self._key
        x = self.state = [self._iv, k0, k1,
            load64(nonce, 0), load64(nonce, word_bytes)]
        self._trace("initial value", x)
        self._permute(self._rounds_a)
        x[3] ^= k0
        x[4] ^= k1
        self._trace("initialization", x)

    def _absorb_final(self, data, offset):
        x = self.state
        remaining = len(data) - offset
        i = 0
        while remaining >= word_bytes:
            x[i] ^= load64(data, offset)
            i += 1
            offset += word_bytes
            remaining -= word_bytes
        x[i] ^= pad(remaining)
        if remaining:
            x[i] ^= load_partial(data, offset, remaining)

    def absorb_associated_data(self, ad):
        x = self.state
        if len(ad) > 0:
            offset = 0
            while len(ad) - offset >= self._rate:
                for i in range(self._rate // word_bytes):
                    x[i] ^= load64(ad, offset + i * word_bytes)
                self._trace("absorb adata", x)
                self._permute(self._rounds_b)
                offset += self._rate
            self._absorb_final(ad, offset)
            self._trace("pad adata", x)
            self._permute(self._rounds_b)
        # domain separation, whether or not there was any AD
        x[4] ^= 1
        self._trace("domain separation", x)

    def encrypt_message(self, m):
        x = self.state
        c = bytearray(len(m))
        offset = 0
        while len(m) - offset >= self._rate:
            for i in range(self._rate // word_bytes):
                o = offset + i * word_bytes
                x[i] ^= load64(m, o)
                store64(c, o, x[i])
            self._trace("absorb plaintext", x)
            self._permute(self._rounds_b)
            offset += self._rate
        remaining = len(m) - offset
        i = 0
        while remaining >= word_bytes:
            x[i] ^= load64(m, offset)
            store64(c, offset, x[i])
            i += 1
            offset += word_bytes
            remaining -= word_bytes
        x[i] ^= pad(remaining)
        if remaining:
            x[i] ^= load_partial(m, offset, remaining)
            store_partial(c, offset, x[i], remaining)
        self._trace("pad plaintext", x)
        return c

    def decrypt_message(self, c):
        x = self.state
        m = bytearray(len(c))
        offset = 0
        while len(c) - offset >= self._rate:
            for i in range(self._rate // word_bytes):
                o = offset + i * word_bytes
                cx = load64(c, o)
                store64(m, o, x[i] ^ cx)
                x[i] = cx
            self._trace("insert ciphertext", x)
            self._permute(self._rounds_b)
            offset += self._rate
        remaining = len(c) - offset
        i = 0
        while remaining >= word_bytes:
            cx = load64(c, offset)
            store64(m, offset, x[i] ^ cx)
            x[i] = cx
            i += 1
            offset += word_bytes
            remaining -= word_bytes
        x[i] ^= pad(remaining)
        if remaining:
            cx = load_partial(c, offset, remaining)
            x[i] ^= cx
            store_partial(m, offset, x[i], remaining)
            x[i] = clear(x[i], remaining) ^ cx
        self._trace("pad ciphertext", x)
        return m

    def finalize(self):
        x = self.state
        k0, k1 = self._key
        # the key goes into the two words right after the rate part
        w = self._rate // word_bytes
        x[w] ^= k0
        x[w + 1] ^= k1
        self._trace("final 1st key xor", x)
        self._permute(self._rounds_a)
        x[3] ^= k0
        x[4] ^= k1
        self._trace("final 2nd key xor", x)

    def tag(self):
        return from_ints(self.state[3:5])

    def verify(self, tag):
        """0 if tag matches, -1 otherwise, without an early exit."""
        x = self.state
        return notzero(x[3] ^ load64(tag, 0), x[4] ^ load64(tag, word_bytes))

def _check_nonce_key(npub, k):
    if len(npub) != NPUBBYTES:
        raise errors.InvalidLengthError(f"Nonce must be {NPUBBYTES} bytes")
    if len(k) != KEYBYTES:
        raise errors.InvalidLengthError(f"Key must be {KEYBYTES} bytes")

def crypto_aead_encrypt(m, ad, npub, k, variant=ASCON_128, trace=no_trace):
    """Encrypt m, returning AeadResult(0, ciphertext || tag).

    m may be empty. The result is always len(m) + ABYTES bytes long.
    """
    variant = lookup_variant(variant)
    _check_nonce_key(npub, k)
    s = Session(variant, k, trace)
    s.initialize(npub)
    s.absorb_associated_data(ad)
    c = s.encrypt_message(m)
    s.finalize()
    return AeadResult(0, bytes(c) + s.tag())

def crypto_aead_decrypt(c, ad, npub, k, variant=ASCON_128, trace=no_trace):
    """Decrypt and verify c (ciphertext || tag).

    Returns AeadResult(0, plaintext) on success, and AeadResult(-1, None) if c
    is shorter than a tag or the tag does not verify.
    """
    variant = lookup_variant(variant)
    _check_nonce_key(npub, k)
    if len(c) < ABYTES:
        return AeadResult(-1, None)
    c = memoryview(c)
    mlen = len(c) - ABYTES
    s = Session(variant, k, trace)
    s.initialize(npub)
    s.absorb_associated_data(ad)
    m = s.decrypt_message(c[:mlen])
    s.finalize()
    status = s.verify(c[mlen:])
    if status != 0:
        return AeadResult(status, None)
    return AeadResult(0, bytes(m))

def _require(value, what):
    if value is None:
        raise errors.MissingArgumentError(f"{what} cannot be null")

def encrypt(message, associated_data, nonce, key, variant=ASCON_128):
    """Encrypt a non-empty message; returns ciphertext with the tag appended.

    Raises:
        MissingArgumentError: an argument is None.
        InvalidLengthError: the message is empty or the nonce or key is not
            16 bytes.
    """
    _require(message, "Message")
    _require(associated_data, "Associated data")
    _require(nonce, "Nonce")
    _require(key, "Key")
    if len(message) < 1:
        raise errors.InvalidLengthError("Message should have some bytes")
    _check_nonce_key(nonce, key)
    return crypto_aead_encrypt(message, associated_data, nonce, key, variant).data

def decrypt(ciphertext, associated_data, nonce, key, variant=ASCON_128):
    """Decrypt ciphertext with the tag appended; returns the message.

    Raises:
        MissingArgumentError: an argument is None.
        InvalidLengthError: the ciphertext is shorter than a tag or the nonce
            or key is not 16 bytes.
        AuthenticationError: the tag does not verify.
    """
    _require(ciphertext, "Encrypted bytes")
    _require(associated_data, "Associated data")
    _require(nonce, "Nonce")
    _require(key, "Key")
    if len(ciphertext) < ABYTES:
        raise errors.InvalidLengthError(
            f"Encrypted bytes should have at least {ABYTES} bytes")
    _check_nonce_key(nonce, key)
    status, m = crypto_aead_decrypt(ciphertext, associated_data, nonce, key, variant)
    if status != 0:
        raise errors.AuthenticationError("Tag verification failed, "
            "either parameters are incorrect or data has been corrupted")
    return m

class Ascon(cipher.Aead):
    def __init__(self, trace=no_trace):
        super().__init__()
        self._trace = trace
        self.choose_variant(lambda x: True)

    def variant_name(self):
        return self.variant["name"]

    def variants(self):
        yield from all_variants

    def set_name(self, name):
        self.choose_variant(lambda v: v["name"] == name)

    def rate(self):
        return self.variant["rate"]

    def message_lengths(self):
        r = self.rate()
        return sorted(set([0, 1, word_bytes - 1, word_bytes, word_bytes + 1,
            r - 1, r, r + 1, 2 * r, 3 * r + 5]))

    def associated_data_lengths(self):
        r = self.rate()
        return sorted(set([0, 1, r - 1, r, r + 1, 2 * r + 3]))

    def encrypt(self, plaintext, key, nonce, associated_data=b""):
        return crypto_aead_encrypt(plaintext, associated_data, nonce, key,
            self.variant, self._trace).data

    def decrypt(self, ciphertext, key, nonce, associated_data=b""):
        if len(ciphertext) < ABYTES:
            raise errors.InvalidLengthError(
                f"Encrypted bytes should have at least {ABYTES} bytes")
        status, m = crypto_aead_decrypt(ciphertext, associated_data, nonce, key,
            self.variant, self._trace)
        if status != 0:
            raise errors.AuthenticationError("Tag verification failed")
        return m
