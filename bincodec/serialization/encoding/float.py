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
This module implements encoding of IEEE-754 binary floats, either single (4 bytes) or double (8 bytes) precision.

The bit pattern is written as is, in little-endian byte order.

>>> se = Serializer.build_bytes_serializer()
>>> encode_float(se, 5.5, length=4)  # writes 0000b040
>>> encode_float(se, 6.6, length=8)  # writes 6666666666661a40
>>> bytes(se.finalize()).hex()
'0000b0406666666666661a40'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0000b0406666666666661a40'))
>>> decode_float(de, length=4)
5.5
>>> decode_float(de, length=8)
6.6
>>> de.finalize()

Python floats are doubles, so not every value survives a trip through a single precision float:

>>> fits_float32(5.5)
True
>>> fits_float32(1.1)
False
"""

import math
import struct

from bincodec.serialization import Deserializer, Serializer, ShapeMismatchError

_FORMATS = {
    4: '<f',
    8: '<d',
}


def _get_format(length: int) -> str:
    try:
        return _FORMATS[length]
    except KeyError:
        raise ValueError(f'unsupported float length: {length}')


def fits_float32(value: float) -> bool:
    """ Whether `value` can be converted to a 4-byte float and back without changing."""
    if math.isnan(value) or math.isinf(value):
        return True
    try:
        packed = struct.pack('<f', value)
    except OverflowError:
        return False
    unpacked, = struct.unpack('<f', packed)
    return unpacked == value


def encode_float(serializer: Serializer, value: float, *, length: int) -> None:
    """ Encode a float using the given byte-length (4 or 8).

    This module's docstring has more details and examples.
    """
    try:
        serializer.write_struct((value,), _get_format(length))
    except (OverflowError, struct.error) as e:
        raise ShapeMismatchError(f'{value!r} cannot be encoded as a {length}-byte float') from e


def decode_float(deserializer: Deserializer, *, length: int) -> float:
    """ Decode a float using the given byte-length (4 or 8).

    This module's docstring has more details and examples.
    """
    value, = deserializer.read_struct(_get_format(length))
    return value
