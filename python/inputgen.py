# Copyright 2018 Google Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Deterministic inputs for AEAD test vectors.

lengths maps each input name (key, nonce, associated_data, plaintext) to a
byte count; every generator yields (inputs, description) pairs.
"""

import random

def oneset(l, b):
    l = bytearray(l)
    l[b >> 3] |= (1 << (b & 7))
    return bytes(l)

def rangeset(l, s):
    return bytes((b & 0xff) for b in range(s, s+l))

def incrementing(l):
    """0x00, 0x01, ... as used by the LWC known-answer files."""
    return rangeset(l, 0)

def randbytes(l, r):
    return bytes(r.randrange(0x100) for _ in range(l))

def set_containing(hi, c):
    r = random.Random(repr((hi, c)))
    s = set([0, hi-1])
    while len(s) < min(c, hi):
        s.add(r.randrange(hi))
    return sorted(s)

example_count = 4

def generate_zero(lengths):
    yield {k: bytes(v) for k, v in lengths.items()}, "All zero"

def generate_onebit(lengths):
    starting = {k: bytes(v) for k, v in lengths.items()}
    for k, v in lengths.items():
        if v == 0:
            continue
        for i in set_containing(v*8, example_count):
            d = starting.copy()
            d[k] = oneset(v, i)
            yield d, f"Set bit {i} of {k}"

def generate_incrementing(lengths):
    yield {k: incrementing(v) for k, v in lengths.items()}, "Incrementing bytes"

def generate_random(lengths):
    for i in range(1, example_count + 1):
        r = random.Random(repr((sorted(lengths.items()), i)))
        d = {k: randbytes(v, r) for k, v in lengths.items()}
        yield d, f"Random ({i:2})"

def generate_testinputs(lengths):
    yield from generate_zero(lengths)
    yield from generate_onebit(lengths)
    yield from generate_incrementing(lengths)
    yield from generate_random(lengths)
