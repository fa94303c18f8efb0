# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

class AsconError(Exception):
    pass

class UsageError(AsconError):
    """The call itself was malformed; no cryptographic work was done."""

class MissingArgumentError(UsageError, TypeError):
    pass

class InvalidLengthError(UsageError, ValueError):
    pass

class AuthenticationError(AsconError, ValueError):
    """The tag did not match. Any plaintext computed along the way is discarded."""
