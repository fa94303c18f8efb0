# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

"""Time encryption of random messages for each Ascon variant."""

import time

from Cryptodome.Random import get_random_bytes

import ascon

key = bytes([0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 64, 100, 200, 225, 255])
nonce = bytes(15) + bytes([13])
ad = bytes(range(15))

default_sizes = [64, 1024, 65536]

def time_encrypt(cipher, message, repeats):
    best = None
    for _ in range(repeats):
        start = time.perf_counter()
        cipher.encrypt(message, key=key, nonce=nonce, associated_data=ad)
        elapsed = time.perf_counter() - start
        best = elapsed if best is None else min(best, elapsed)
    return best

def run(sizes=default_sizes, repeats=3):
    c = ascon.Ascon()
    for size in sizes:
        message = get_random_bytes(size)
        for v in c.variants():
            c.variant = v
            yield c.variant_name(), size, time_encrypt(c, message, repeats)

def report(results):
    for name, size, seconds in results:
        print(f"{name} encryption ({size} bytes)\t{seconds * 1e6:12.1f} us"
            f"\t{size / seconds / 1e3:10.1f} kB/s")
