# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

"""Moving 64-bit words between the permutation state and byte buffers.

Words always cross the boundary in big-endian byte order, whatever the host
byte order is. A partial word of n bytes occupies the most significant n bytes
of the word, so that padding lands on the byte right after the data.
"""

word_bytes = 8
word_bits = 8 * word_bytes
word_mask = (1 << word_bits) - 1
byteorder = 'big'

def mod(i):
    return i & word_mask

def rotr(i, r):
    return mod((i >> r) | (i << (word_bits - r)))

def load64(b, offset=0):
    return int.from_bytes(b[offset:offset + word_bytes], byteorder=byteorder)

def store64(b, offset, w):
    b[offset:offset + word_bytes] = w.to_bytes(word_bytes, byteorder=byteorder)

def load_partial(b, offset, n):
    assert 0 <= n <= word_bytes
    return int.from_bytes(b[offset:offset + n], byteorder=byteorder) << (word_bits - 8 * n)

def store_partial(b, offset, w, n):
    # Only b[offset:offset + n] is written.
    assert 0 <= n <= word_bytes
    b[offset:offset + n] = (w >> (word_bits - 8 * n)).to_bytes(n, byteorder=byteorder)

def mask(n):
    """The top n bytes of a word set, the rest clear."""
    return mod(((1 << (8 * n)) - 1) << (word_bits - 8 * n))

def clear(w, n):
    """Zero the top n bytes of w."""
    return w & ~mask(n) & word_mask

def pad(n):
    """The padding marker for a block whose last word holds n data bytes."""
    assert 0 <= n < word_bytes
    return 0x80 << (56 - 8 * n)

def from_ints(ints):
    return b''.join(i.to_bytes(word_bytes, byteorder=byteorder) for i in ints)

def notzero(a, b):
    """0 if a and b are both zero, -1 otherwise.

    Both words are folded down to a single byte before anything depends on
    the value, so the work done does not depend on where they differ.
    """
    r = a | b
    r |= r >> 32
    r |= r >> 16
    r |= r >> 8
    return ((((r & 0xff) - 1) >> 8) & 1) - 1
