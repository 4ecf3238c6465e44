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

"""
This module implements the encoding of variant ordinals, the zero-based position of a variant in the declaration
order of an enum.

An ordinal is always a 4-byte unsigned little-endian integer, regardless of how many variants there are. When
decoding, the number of declared variants must be given so out-of-range ordinals can be rejected.

>>> se = Serializer.build_bytes_serializer()
>>> encode_ordinal(se, 1, variant_count=2)
>>> bytes(se.finalize()).hex()
'01000000'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('01000000'))
>>> decode_ordinal(de, variant_count=2)
1

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('02000000'))
>>> try:
...     decode_ordinal(de, variant_count=2)
... except InvalidDiscriminantError as e:
...     print(*e.args)
ordinal 2 is out of range for 2 variant(s)
"""

from bincodec.serialization import Deserializer, InvalidDiscriminantError, Serializer, ShapeMismatchError

from .int import decode_int, encode_int

ORDINAL_SIZE = 4
MAX_VARIANT_COUNT = 2 ** (8 * ORDINAL_SIZE)


def encode_ordinal(serializer: Serializer, ordinal: int, *, variant_count: int) -> None:
    if not 0 <= ordinal < variant_count:
        raise ShapeMismatchError(f'ordinal {ordinal} is out of range for {variant_count} variant(s)')
    encode_int(serializer, ordinal, length=ORDINAL_SIZE, signed=False)


def decode_ordinal(deserializer: Deserializer, *, variant_count: int) -> int:
    ordinal = decode_int(deserializer, length=ORDINAL_SIZE, signed=False)
    if ordinal >= variant_count:
        raise InvalidDiscriminantError(f'ordinal {ordinal} is out of range for {variant_count} variant(s)')
    return ordinal
