# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

"""Download the reference known-answer files published with the Ascon C code."""

import hashlib

import requests

base_url = "https://raw.githubusercontent.com/ascon/ascon-c/v1.2.7/crypto_aead"

# Where each KAT file lives under base_url, and its SHA-256.
sources = {
    "LWC_AEAD_KAT_128_128.txt": ("ascon128v12",
        "6d616b2ab817f391030ab3ba15dff37fad20433f7a7ac925aadcba550b12e3b0"),
    "LWC_AEAD_KAT_128_128_a.txt": ("ascon128av12",
        "d453a54fd663316a6223734013dcd2d732e2b1dee0c85391cf6f818000322fd9"),
}

# The a-variant file is published under the same name as the other one.
_published_name = {
    "LWC_AEAD_KAT_128_128_a.txt": "LWC_AEAD_KAT_128_128.txt",
}

def kat_url(name, base=base_url):
    directory, _ = sources[name]
    return f"{base}/{directory}/{_published_name.get(name, name)}"

def do_fetch_file(path, url):
    r = requests.get(url, stream=True, timeout=60)
    r.raise_for_status()
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("wb") as f:
        for chunk in r.iter_content(4096):
            f.write(chunk)

def hash_file(path):
    m = hashlib.sha256()
    with path.open("rb") as f:
        while True:
            data = f.read(4096)
            if not data:
                break
            m.update(data)
    return m.hexdigest()

def fetch_file(path, url, expected_hash):
    if path.exists():
        h = hash_file(path)
        if h == expected_hash:
            return
        path.unlink()
    print(f"Downloading: {url}")
    do_fetch_file(path, url)
    got = hash_file(path)
    if got != expected_hash:
        raise Exception(f"Hash mismatch, expected {expected_hash} but got {got}")

def fetch_kat(name, directory, base=base_url):
    _, expected_hash = sources[name]
    path = directory / name
    fetch_file(path, kat_url(name, base), expected_hash)
    return path
