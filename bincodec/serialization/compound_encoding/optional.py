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
An optional value is encoded with a one byte tag followed by the value only when it is present.

Layout:

    [0x00] when None
    [0x01][value] when not None

>>> from functools import partial
>>> from bincodec.serialization.encoding.int import decode_int, encode_int
>>> encode_u8 = partial(encode_int, length=1, signed=False)
>>> decode_u8 = partial(decode_int, length=1, signed=False)

>>> se = Serializer.build_bytes_serializer()
>>> encode_optional(se, 255, encode_u8)
>>> encode_optional(se, None, encode_u8)
>>> bytes(se.finalize()).hex()
'01ff00'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('01ff00'))
>>> decode_optional(de, decode_u8)
255
>>> decode_optional(de, decode_u8) is None
True
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(b'\x02')
>>> try:
...     decode_optional(de, decode_u8)
... except InvalidDiscriminantError as e:
...     print(*e.args)
b'\x02' is not a valid optional tag
"""

from typing import Optional, TypeVar

from bincodec.serialization import Deserializer, InvalidDiscriminantError, Serializer

from . import Decoder, Encoder

T = TypeVar('T')

_ABSENT = 0x00
_PRESENT = 0x01


def encode_optional(serializer: Serializer, value: Optional[T], encoder: Encoder[T]) -> None:
    if value is None:
        serializer.write_byte(_ABSENT)
    else:
        serializer.write_byte(_PRESENT)
        encoder(serializer, value)


def decode_optional(deserializer: Deserializer, decoder: Decoder[T]) -> Optional[T]:
    tag = deserializer.read_byte()
    if tag == _PRESENT:
        return decoder(deserializer)
    elif tag == _ABSENT:
        return None
    else:
        raw = bytes([tag])
        raise InvalidDiscriminantError(f'{raw!r} is not a valid optional tag')
