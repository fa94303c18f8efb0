# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

"""Known-answer files in the NIST lightweight cryptography (LWC) text format.

Each record looks like

    Count = 1
    Key = 000102030405060708090A0B0C0D0E0F
    Nonce = 000102030405060708090A0B0C0D0E0F
    PT =
    AD =
    CT = E355159F292911F794CB1432A0103A8A

followed by a blank line. Key, nonce, message and associated data are
incrementing bytes; every message length up to MAX_MESSAGE_LENGTH is paired
with every associated data length up to MAX_ASSOCIATED_DATA_LENGTH.
"""

import errors
import inputgen

MAX_MESSAGE_LENGTH = 32
MAX_ASSOCIATED_DATA_LENGTH = 32

fields = ["Key", "Nonce", "PT", "AD", "CT"]

filenames = {
    "Ascon128": "LWC_AEAD_KAT_128_128.txt",
    "Ascon128a": "LWC_AEAD_KAT_128_128_a.txt",
}

def filename(cipher):
    return filenames[cipher.variant_name()]

def generate_records(cipher, max_mlen=MAX_MESSAGE_LENGTH,
        max_adlen=MAX_ASSOCIATED_DATA_LENGTH):
    lengths = cipher.lengths()
    key = inputgen.incrementing(lengths["key"])
    nonce = inputgen.incrementing(lengths["nonce"])
    msg = inputgen.incrementing(max_mlen)
    ad = inputgen.incrementing(max_adlen)
    count = 1
    for mlen in range(max_mlen + 1):
        for adlen in range(max_adlen + 1):
            pt = msg[:mlen]
            a = ad[:adlen]
            yield {
                "Count": count,
                "Key": key,
                "Nonce": nonce,
                "PT": pt,
                "AD": a,
                "CT": cipher.encrypt(pt, key=key, nonce=nonce, associated_data=a),
            }
            count += 1

def format_record(r):
    lines = [f"Count = {r['Count']}\n"]
    lines += [f"{k} = {r[k].hex().upper()}\n" for k in fields]
    lines.append("\n")
    return "".join(lines)

def render(records):
    return "".join(format_record(r) for r in records)

def write_kat(cipher, path, **kw):
    path.parent.mkdir(parents=True, exist_ok=True)
    count = 0
    with path.open("w", newline="\n") as f:
        for r in generate_records(cipher, **kw):
            f.write(format_record(r))
            count += 1
    return count

def parse_lines(lines):
    d = {}
    for l in lines:
        l = l.strip()
        if l:
            k, v = l.split("=", 1)
            k, v = k.strip(), v.strip()
            d[k] = int(v) if k == "Count" else bytes.fromhex(v)
        elif d:
            yield d
            d = {}
    if d:
        yield d

def parse(path):
    with path.open() as f:
        yield from parse_lines(f)

def check_record(cipher, r):
    """Returns a description of the first problem with r, or None."""
    inputs = {"key": r["Key"], "nonce": r["Nonce"], "associated_data": r["AD"]}
    ct = cipher.encrypt(r["PT"], **inputs)
    if ct != r["CT"]:
        return f"Count = {r['Count']}: ciphertext mismatch"
    if cipher.decrypt(ct, **inputs) != r["PT"]:
        return f"Count = {r['Count']}: decryption did not recover the plaintext"
    tampered = bytearray(ct)
    tampered[0] ^= 1
    try:
        cipher.decrypt(bytes(tampered), **inputs)
    except errors.AuthenticationError:
        return None
    return f"Count = {r['Count']}: decryption should have failed"

def check_records(cipher, records, verbose=False):
    failures = []
    for r in records:
        problem = check_record(cipher, r)
        if problem:
            failures.append(problem)
        elif verbose:
            print(f"OK: Count = {r['Count']}")
    return failures
