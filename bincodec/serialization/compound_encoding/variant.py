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
A tagged union is encoded as the ordinal of the active variant followed by the payload of that variant only.

Layout: [ordinal: 4-byte unsigned little-endian][payload of the active variant]

The decoder for the payload is picked by the ordinal, so decoding takes one decoder per declared variant, in
declaration order. Reordering variants changes the ordinals and therefore breaks previously encoded data.

>>> from functools import partial
>>> from bincodec.serialization.encoding.int import decode_int, encode_int
>>> encode_i32 = partial(encode_int, length=4, signed=True)
>>> decode_i32 = partial(decode_int, length=4, signed=True)
>>> encode_u32 = partial(encode_int, length=4, signed=False)
>>> decode_u32 = partial(decode_int, length=4, signed=False)

>>> se = Serializer.build_bytes_serializer()
>>> encode_variant(se, 1, 5, encode_u32, variant_count=2)  # Y(5)
>>> bytes(se.finalize()).hex()
'0100000005000000'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0100000005000000'))
>>> decode_variant(de, (decode_i32, decode_u32))
(1, 5)
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0200000005000000'))
>>> try:
...     decode_variant(de, (decode_i32, decode_u32))
... except InvalidDiscriminantError as e:
...     print(*e.args)
ordinal 2 is out of range for 2 variant(s)
"""

from collections.abc import Sequence
from typing import Any, TypeVar

from bincodec.serialization import Deserializer, InvalidDiscriminantError, Serializer  # noqa: F401
from bincodec.serialization.encoding.ordinal import decode_ordinal, encode_ordinal

from . import Decoder, Encoder

T = TypeVar('T')


def encode_variant(
    serializer: Serializer,
    ordinal: int,
    payload: T,
    encoder: Encoder[T],
    *,
    variant_count: int,
) -> None:
    encode_ordinal(serializer, ordinal, variant_count=variant_count)
    encoder(serializer, payload)


def decode_variant(deserializer: Deserializer, decoders: Sequence[Decoder[Any]]) -> tuple[int, Any]:
    ordinal = decode_ordinal(deserializer, variant_count=len(decoders))
    return ordinal, decoders[ordinal](deserializer)
