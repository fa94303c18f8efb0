#!/usr/bin/env python3
#
# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

import argparse
import pathlib
import sys

import ascon
import benchmark
import cipherlist
import dumphex
import errors
import fetchkat
import kat
import paths
import tvgen

def fail(msg):
    sys.stderr.write(f'Error: {msg}\n')
    sys.exit(1)

def parse_hex(what, s):
    try:
        return bytes.fromhex(s)
    except ValueError:
        fail(f"{what} is not valid hex: {s!r}")

def select_variants(args):
    c = ascon.Ascon(trace=ascon.print_state if getattr(args, 'trace', False) else ascon.no_trace)
    if args.variant == 'all':
        names = [v['name'] for v in c.variants()]
    else:
        names = [args.variant]
    for name in names:
        c.set_name(name)
        yield c

def show(label, b, dump):
    if dump:
        dumphex.dumphex(b, label)
    else:
        print(b.hex())

def cmd_encrypt(args):
    c = next(select_variants(args))
    try:
        ct = c.encrypt(parse_hex("Message", args.message),
            key=parse_hex("Key", args.key), nonce=parse_hex("Nonce", args.nonce),
            associated_data=parse_hex("Associated data", args.ad))
    except errors.UsageError as e:
        fail(str(e))
    show("Ciphertext", ct, args.dump)

def cmd_decrypt(args):
    c = next(select_variants(args))
    try:
        pt = c.decrypt(parse_hex("Ciphertext", args.ciphertext),
            key=parse_hex("Key", args.key), nonce=parse_hex("Nonce", args.nonce),
            associated_data=parse_hex("Associated data", args.ad))
    except errors.AsconError as e:
        fail(str(e))
    show("Plaintext", pt, args.dump)

def cmd_kat(args):
    failed = False
    for c in select_variants(args):
        p = args.dir / kat.filename(c)
        if args.write:
            print(f"Writing: {p}")
            print(f"Wrote {kat.write_kat(c, p)} records")
            continue
        if not p.exists():
            fail(f"No such file: {p}")
        print(f"======== {p.name} ========")
        failures = kat.check_records(c, kat.parse(p), args.verbose)
        for f in failures:
            sys.stderr.write(f'{c.variant_name()}: {f}\n')
        failed = failed or bool(failures)
    if failed:
        fail("Known-answer check failed")

def cmd_tv(args):
    for c in cipherlist.all_ciphers:
        if args.write:
            tvgen.write_tests(c, args.dir, args.verbose)
        else:
            print(f"Checked {tvgen.check_tests(c, args.dir, args.verbose)} vectors")

def cmd_fetch_kat(args):
    for name in fetchkat.sources:
        fetchkat.fetch_kat(name, args.dir, args.base_url)

def cmd_bench(args):
    benchmark.report(benchmark.run(args.sizes, args.repeats))

def add_variant(p, allow_all=False):
    choices = [v['name'] for v in ascon.all_variants]
    if allow_all:
        choices.append('all')
    p.add_argument('--variant', choices=choices,
                   default='all' if allow_all else 'Ascon128',
                   help='parameter set to use')

def add_crypt_args(p):
    add_variant(p)
    p.add_argument('--key', required=True, help='16-byte key, hex')
    p.add_argument('--nonce', required=True, help='16-byte nonce, hex')
    p.add_argument('--ad', default='', help='associated data, hex')
    p.add_argument('--dump', action='store_true', help='print a hex dump')
    p.add_argument('--trace', action='store_true',
                   help='print the permutation state after each step')

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="""Ascon-128 and Ascon-128a
    authenticated encryption, and tools for their test vectors.""")
    sub = parser.add_subparsers(dest='command', required=True)

    p = sub.add_parser('encrypt', help='encrypt a hex message')
    add_crypt_args(p)
    p.add_argument('message', help='message, hex')
    p.set_defaults(func=cmd_encrypt)

    p = sub.add_parser('decrypt', help='decrypt and verify hex ciphertext')
    add_crypt_args(p)
    p.add_argument('ciphertext', help='ciphertext with tag appended, hex')
    p.set_defaults(func=cmd_decrypt)

    p = sub.add_parser('kat', help='write or check LWC known-answer files')
    add_variant(p, allow_all=True)
    p.add_argument('--write', action='store_true', help='write instead of check')
    p.add_argument('--dir', type=pathlib.Path, default=paths.kat)
    p.add_argument('--verbose', action='store_true')
    p.set_defaults(func=cmd_kat)

    p = sub.add_parser('tv', help='write or check JSON test vectors')
    p.add_argument('--write', action='store_true', help='write instead of check')
    p.add_argument('--dir', type=pathlib.Path, default=paths.ours)
    p.add_argument('--verbose', action='store_true')
    p.set_defaults(func=cmd_tv)

    p = sub.add_parser('fetch-kat', help='download the reference known-answer files')
    p.add_argument('--dir', type=pathlib.Path, default=paths.kat)
    p.add_argument('--base-url', default=fetchkat.base_url)
    p.set_defaults(func=cmd_fetch_kat)

    p = sub.add_parser('bench', help='time encryption')
    p.add_argument('--sizes', type=int, nargs='+', default=benchmark.default_sizes,
                   help='message sizes in bytes')
    p.add_argument('--repeats', type=int, default=3)
    p.set_defaults(func=cmd_bench)

    return parser.parse_args(argv)

def main(argv=None):
    args = parse_args(argv)
    args.func(args)

if __name__ == "__main__":
    main()
