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
This module implements utf-8 string encoding with a length prefix.

It works exactly like bytes-encoding but the encoded byte-sequence is utf-8 and it takes/returns a `str`. The prefix
is the number of bytes, not the number of characters.

>>> se = Serializer.build_bytes_serializer()
>>> encode_utf8(se, 'abcdefgh')  # writes 0800000000000000 6162636465666768
>>> encode_utf8(se, 'π')  # writes 0200000000000000 cf80
>>> bytes(se.finalize()).hex()
'080000000000000061626364656667680200000000000000cf80'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('080000000000000061626364656667680200000000000000cf80'))
>>> decode_utf8(de)
'abcdefgh'
>>> decode_utf8(de)
'π'
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0100000000000000ff'))
>>> try:
...     decode_utf8(de)
... except InvalidEncodingError as e:
...     print(*e.args)
text is not valid utf-8
"""

from bincodec.serialization import Deserializer, InvalidEncodingError, Serializer, ShapeMismatchError

from .bytes import decode_bytes, encode_bytes


def encode_utf8(serializer: Serializer, value: str) -> None:
    """ Encodes a string using UTF-8 and adding a length prefix.

    This module's docstring has more details and examples.
    """
    if not isinstance(value, str):
        raise ShapeMismatchError(f'expected str, got {type(value).__name__}')
    try:
        data = value.encode('utf-8')
    except UnicodeEncodeError as e:
        # lone surrogates are valid in a Python str but have no utf-8 representation
        raise ShapeMismatchError('text cannot be encoded as utf-8') from e
    encode_bytes(serializer, data)


def decode_utf8(deserializer: Deserializer) -> str:
    """ Decodes a UTF-8 string with a length prefix.

    This module's docstring has more details and examples.
    """
    data = decode_bytes(deserializer)
    try:
        return data.decode('utf-8')
    except UnicodeDecodeError as e:
        raise InvalidEncodingError('text is not valid utf-8') from e
