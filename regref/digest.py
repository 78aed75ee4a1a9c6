""" Content digests of the form algorithm:hex

Digests are immutable content addresses. The hex portion must be
lowercase and exactly as long as the algorithm's output. Bare 64
character hex strings are how content ids are usually passed around
by humans, see `validate_hex`.
"""

import re
import hashlib
from regref import exceptions as exc

CANONICAL_ALGORITHM = 'sha256'

# algorithm -> length of the hex encoded output
algorithms = {
    'sha256': 64,
    'sha384': 96,
    'sha512': 128,
}

_digest_regex = re.compile(r'[a-zA-Z0-9_+.\-]+:[a-fA-F0-9]+')
_encoded_regex = re.compile('[a-f0-9]+')
_hex_regex = re.compile('[a-f0-9]{64}')


def validate_hex(value):
    """ bare content ids are 64 lowercase hex characters """
    if _hex_regex.fullmatch(value) is None:
        raise exc.InvalidDigestFormatError(f'{value!r} is not a 64 character hex string')

    return value


def is_hex(value):
    return _hex_regex.fullmatch(value) is not None


class Digest(str):
    """ algorithm:hex, validated on construction """

    __slots__ = ()

    def __new__(cls, digest):
        if isinstance(digest, cls):
            return digest

        self = super().__new__(cls, digest)
        self.validate()
        return self

    @classmethod
    def parse(cls, digest):
        return cls(digest)

    @classmethod
    def from_bytes(cls, data, algorithm=CANONICAL_ALGORITHM):
        if algorithm not in algorithms:
            raise exc.UnsupportedAlgorithmError(algorithm)

        m = hashlib.new(algorithm)
        m.update(data)
        return cls(algorithm + ':' + m.hexdigest())

    @classmethod
    def from_string(cls, string, algorithm=CANONICAL_ALGORITHM):
        return cls.from_bytes(string.encode(), algorithm=algorithm)

    @property
    def algorithm(self):
        return self.split(':', 1)[0]

    @property
    def hex(self):
        return self.split(':', 1)[1]

    def validate(self):
        algorithm, sep, encoded = self.partition(':')
        if not sep or not algorithm or not encoded:
            raise exc.InvalidDigestFormatError(f'{str(self)!r} is not of the form algorithm:hex')

        if algorithm not in algorithms:
            if _digest_regex.fullmatch(self) is None:
                raise exc.InvalidDigestFormatError(f'{str(self)!r} is not of the form algorithm:hex')

            raise exc.UnsupportedAlgorithmError(f'unsupported digest algorithm {algorithm!r}')

        if len(encoded) != algorithms[algorithm]:
            msg = (f'{algorithm} digests have {algorithms[algorithm]} hex '
                   f'characters, got {len(encoded)} in {str(self)!r}')
            raise exc.InvalidDigestLengthError(msg)

        if _encoded_regex.fullmatch(encoded) is None:
            raise exc.InvalidDigestFormatError(f'{str(self)!r} hex portion is not lowercase hex')

    def __repr__(self):
        return f'{self.__class__.__name__}({str(self)!r})'
