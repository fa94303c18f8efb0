# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

import hexjson
import inputgen

def generate_testvectors(cipher, verbose=False):
    for lengths in cipher.test_input_lengths():
        if verbose:
            print(lengths)
        for tv, d in inputgen.generate_testinputs(lengths):
            yield cipher.make_testvector(tv, d)

def vector_path(cipher, path):
    return path / cipher.name() / "{}.json".format(cipher.variant_name())

def write_tests(cipher, path, verbose=False):
    for v in cipher.variants():
        cipher.variant = v
        p = vector_path(cipher, path)
        print(f"Writing: {p}")
        count = hexjson.write_using_hex(p, generate_testvectors(cipher, verbose))
        print(f"Wrote {count} vectors")

def check_testvector(cipher, tv, verbose):
    cipher.check_testvector(tv)
    if verbose:
        print(f"OK: {tv['description']}")

def check_file(cipher, fn, verbose):
    count = 0
    for tv in hexjson.iter_unhex(fn):
        check_testvector(cipher, tv, verbose)
        count += 1
    return count

def check_tests(cipher, path, verbose):
    total = 0
    for fn in sorted((path / cipher.name()).iterdir()):
        print(f"======== {fn.name} ========")
        total += check_file(cipher, fn, verbose)
    return total
