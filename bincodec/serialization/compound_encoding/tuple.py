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
This module implements encoding of heterogeneous tuples with a known number of fields, which is also how structs are
encoded (field names never go into the stream).

There actually isn't a "format" per-se, the encoding of `(A, B, C)` is just the encoding of A concatenated with B
concatenated with C. So this compound encoder is basically a shortcut that can be used by cases that already have a
tuple of values and a matching tuple of encoders of those values.

>>> from bincodec.serialization.encoding.bool import decode_bool, encode_bool
>>> from bincodec.serialization.encoding.utf8 import decode_utf8, encode_utf8
>>> from functools import partial
>>> from bincodec.serialization.encoding.int import decode_int, encode_int
>>> encode_u8 = partial(encode_int, length=1, signed=False)
>>> decode_u8 = partial(decode_int, length=1, signed=False)

>>> se = Serializer.build_bytes_serializer()
>>> encode_tuple(se, (101, True, 'ab'), (encode_u8, encode_bool, encode_utf8))
>>> bytes(se.finalize()).hex()
'650102000000000000006162'

Breakdown of the result:

    65: 101
    01: True
    02000000000000006162: 'ab' (with length prefix)

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('650102000000000000006162'))
>>> decode_tuple(de, (decode_u8, decode_bool, decode_utf8))
(101, True, 'ab')

An empty tuple takes no bytes at all, which is how the unit value is encoded:

>>> se = Serializer.build_bytes_serializer()
>>> encode_tuple(se, (), ())
>>> bytes(se.finalize())
b''
"""

from collections.abc import Sequence
from typing import Any

from bincodec.serialization import Deserializer, Serializer, ShapeMismatchError

from . import Decoder, Encoder


def encode_tuple(serializer: Serializer, values: Sequence[Any], encoders: Sequence[Encoder[Any]]) -> None:
    if len(values) != len(encoders):
        raise ShapeMismatchError(f'expected {len(encoders)} field(s), got {len(values)}')
    for value, encoder in zip(values, encoders):
        encoder(serializer, value)


def decode_tuple(deserializer: Deserializer, decoders: Sequence[Decoder[Any]]) -> tuple[Any, ...]:
    return tuple(decoder(deserializer) for decoder in decoders)
