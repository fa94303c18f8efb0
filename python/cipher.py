# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

class Cipher(object):
    def name(self):
        return type(self).__name__

    @property
    def variant(self):
        return self._variant

    @variant.setter
    def variant(self, value):
        if value not in self.variants():
            raise Exception(f"Not a variant: {value}")
        self._variant = value

    def choose_variant(self, criterion):
        for v in self.variants():
            if criterion(v):
                self.variant = v
                return
        raise Exception("No variant matching criterion")

    def lengths(self):
        return self.variant["lengths"]

class Aead(Cipher):
    """An authenticated cipher: ciphertext is the encrypted message followed by the tag."""

    def make_testvector(self, input, description):
        input = input.copy()
        if "plaintext" in input:
            pt = input["plaintext"]
            del input["plaintext"]
            ct = self.encrypt(pt, **input)
        else:
            ct = input["ciphertext"]
            del input["ciphertext"]
            pt = self.decrypt(ct, **input)
        return {
            "cipher": self.variant,
            "description": description,
            "input": input,
            "plaintext": pt,
            "ciphertext": ct,
        }

    def check_testvector(self, tv):
        self.variant = tv["cipher"]
        assert tv["ciphertext"] == self.encrypt(tv["plaintext"], **tv["input"])
        assert tv["plaintext"] == self.decrypt(tv["ciphertext"], **tv["input"])

    def test_input_lengths(self):
        v = dict(self.lengths())
        del v["tag"]
        for adlen in self.associated_data_lengths():
            for mlen in self.message_lengths():
                yield {**v, "associated_data": adlen, "plaintext": mlen}
