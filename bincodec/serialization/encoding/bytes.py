# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

r"""
This modules implements encoding of byte sequence by prefixing it with the length of the sequence encoded as an
8-byte unsigned little-endian integer.

>>> se = Serializer.build_bytes_serializer()
>>> encode_bytes(se, b'test')  # will prepend 0400000000000000 before writing b'test'
>>> bytes(se.finalize()).hex()
'040000000000000074657374'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('040000000000000074657374'))
>>> decode_bytes(de)
b'test'
>>> de.finalize()

A length prefix that goes beyond the available data is an error, nothing is read past the end of the input:

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0500000000000000') + b'test')
>>> try:
...     decode_bytes(de)
... except TruncatedInputError as e:
...     print(*e.args)
not enough bytes to read

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('040000000000000074657374') + b'foo')
>>> _ = decode_bytes(de)
>>> try:
...     de.finalize()
... except TrailingDataError as e:
...     print(*e.args)
trailing data
"""

from bincodec.serialization import Deserializer, Serializer, TrailingDataError, TruncatedInputError  # noqa: F401

from .int import decode_int, encode_int

LENGTH_PREFIX_SIZE = 8


def encode_length(serializer: Serializer, length: int) -> None:
    """ Encodes a length prefix, shared by every variable length encoding."""
    encode_int(serializer, length, length=LENGTH_PREFIX_SIZE, signed=False)


def decode_length(deserializer: Deserializer) -> int:
    """ Decodes a length prefix, shared by every variable length encoding."""
    return decode_int(deserializer, length=LENGTH_PREFIX_SIZE, signed=False)


def encode_bytes(serializer: Serializer, data: bytes) -> None:
    """ Encodes a byte-sequence adding a length prefix.

    This module's docstring has more details and examples.
    """
    encode_length(serializer, len(data))
    serializer.write_bytes(data)


def decode_bytes(deserializer: Deserializer) -> bytes:
    """ Decodes a byte-sequence with a length prefix.

    This module's docstring has more details and examples.
    """
    size = decode_length(deserializer)
    return bytes(deserializer.read_bytes(size))
