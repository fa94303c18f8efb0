# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

"""The Ascon permutation on a state of five 64-bit words."""

from wordpack import mod, rotr, word_mask

# A permutation of r rounds uses the last r constants.
round_constants = [0xf0, 0xe1, 0xd2, 0xc3, 0xb4, 0xa5, 0x96, 0x87, 0x78, 0x69, 0x5a, 0x4b]

supported_rounds = (12, 8, 6)

rotations = [(19, 28), (61, 39), (1, 6), (10, 17), (7, 41)]

def constants_for(rounds):
    if rounds not in supported_rounds:
        raise ValueError(f"Unsupported round count: {rounds}")
    return round_constants[len(round_constants) - rounds:]

def substitution(x):
    x[0] ^= x[4]
    x[4] ^= x[3]
    x[2] ^= x[1]
    # chi: every term is taken from the words as they were before this step
    t = [x[i] ^ (~x[(i + 1) % 5] & x[(i + 2) % 5]) for i in range(5)]
    t[1] ^= t[0]
    t[0] ^= t[4]
    t[3] ^= t[2]
    t[2] = ~t[2]
    for i in range(5):
        x[i] = t[i] & word_mask

def linear(x):
    for i, (a, b) in enumerate(rotations):
        x[i] ^= rotr(x[i], a) ^ rotr(x[i], b)

def single_round(x, c):
    x[2] ^= c
    substitution(x)
    linear(x)

def permute(x, rounds):
    """Apply rounds rounds of the permutation to the state x in place."""
    assert len(x) == 5
    for c in constants_for(rounds):
        single_round(x, c)
    return x

def dump_state(x, label=""):
    print(f"{label}:{' ' * max(0, 17 - len(label))}"
        + "".join(f" x{i}={mod(w):016x}" for i, w in enumerate(x)))
