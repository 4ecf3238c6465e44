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
A collection is basically any value that has a known size and is iterable, but whose size is not part of the shape.

Layout: [N: 8-byte unsigned little-endian][value_0]...[value_N-1]

This is the same length prefix that is used for text, so a collection of `u8` and a text have the exact same layout.

>>> from functools import partial
>>> from bincodec.serialization.encoding.int import decode_int, encode_int
>>> encode_u8 = partial(encode_int, length=1, signed=False)
>>> decode_u8 = partial(decode_int, length=1, signed=False)

>>> se = Serializer.build_bytes_serializer()
>>> encode_collection(se, [1, 2, 3], encode_u8)
>>> bytes(se.finalize()).hex()
'0300000000000000010203'

When decoding, the builder can be any compatible collection, it only matters that the collection can be initialized
with an `Iterable[T]`.

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0300000000000000010203'))
>>> decode_collection(de, decode_u8, list)
[1, 2, 3]
>>> de.finalize()
"""

from collections.abc import Collection, Iterable
from typing import Callable, TypeVar

from bincodec.serialization import Deserializer, Serializer
from bincodec.serialization.encoding.bytes import decode_length, encode_length

from . import Decoder, Encoder

T = TypeVar('T')
R = TypeVar('R', bound=Collection)


def encode_collection(serializer: Serializer, values: Collection[T], encoder: Encoder[T]) -> None:
    encode_length(serializer, len(values))
    for value in values:
        encoder(serializer, value)


def decode_collection(
    deserializer: Deserializer,
    decoder: Decoder[T],
    builder: Callable[[Iterable[T]], R],
) -> R:
    length = decode_length(deserializer)
    return builder(decoder(deserializer) for _ in range(length))
