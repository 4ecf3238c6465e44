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
A fixed-size array is a homogeneous sequence whose length is part of the shape, not of the data.

Layout: [value_0]...[value_N-1], there is no length prefix.

>>> from functools import partial
>>> from bincodec.serialization.encoding.float import decode_float, encode_float
>>> encode_f64 = partial(encode_float, length=8)
>>> decode_f64 = partial(decode_float, length=8)

>>> se = Serializer.build_bytes_serializer()
>>> encode_array(se, [1.1, 2.2], encode_f64, length=2)
>>> bytes(se.finalize()).hex()
'9a9999999999f13f9a99999999990140'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('9a9999999999f13f9a99999999990140'))
>>> decode_array(de, decode_f64, length=2)
(1.1, 2.2)
>>> de.finalize()

>>> se = Serializer.build_bytes_serializer()
>>> try:
...     encode_array(se, [1.1], encode_f64, length=2)
... except ShapeMismatchError as e:
...     print(*e.args)
expected 2 element(s), got 1
"""

from collections.abc import Sequence
from typing import TypeVar

from bincodec.serialization import Deserializer, Serializer, ShapeMismatchError

from . import Decoder, Encoder

T = TypeVar('T')


def encode_array(serializer: Serializer, values: Sequence[T], encoder: Encoder[T], *, length: int) -> None:
    if len(values) != length:
        raise ShapeMismatchError(f'expected {length} element(s), got {len(values)}')
    for value in values:
        encoder(serializer, value)


def decode_array(deserializer: Deserializer, decoder: Decoder[T], *, length: int) -> tuple[T, ...]:
    return tuple(decoder(deserializer) for _ in range(length))
