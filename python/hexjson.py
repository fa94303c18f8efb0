# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

"""JSON test vector files, with byte strings stored as hex under "_hex" keys."""

import json

_bytes_types = (bytes, bytearray, memoryview)

def recursive_hex(o):
    if isinstance(o, dict):
        res = {}
        for k, v in o.items():
            if k.endswith("_hex"):
                raise Exception(f"Disallowed dict key {k}: we reserve keys that end _hex")
            if isinstance(v, _bytes_types):
                res[k + "_hex"] = bytes(v).hex()
            else:
                res[k] = recursive_hex(v)
        return res
    elif isinstance(o, list):
        return [recursive_hex(i) for i in o]
    elif isinstance(o, _bytes_types):
        raise Exception("Can't recursive_hex bytes not contained in dict")
    else:
        return o

def recursive_unhex(o):
    if isinstance(o, dict):
        res = {}
        for k, v in o.items():
            if k.endswith("_hex"):
                res[k[:-4]] = bytes.fromhex(v)
            else:
                res[k] = recursive_unhex(v)
        return res
    elif isinstance(o, list):
        return [recursive_unhex(i) for i in o]
    else:
        return o

def write_using_hex(fn, it):
    """Write the vectors from it to fn; returns how many were written."""
    tvs = [recursive_hex(tv) for tv in it]
    fn.parent.mkdir(parents=True, exist_ok=True)
    with fn.open("w") as f:
        json.dump(tvs, f, indent=4)
    return len(tvs)

def loadjson(fn):
    with fn.open() as f:
        return json.load(f)

def iter_unhex(fn):
    for htv in loadjson(fn):
        yield recursive_unhex(htv)
