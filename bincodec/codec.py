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
Encoding and decoding of values given their shape.

This module maps each shape to the encoder in `bincodec.serialization.encoding` or
`bincodec.serialization.compound_encoding` that implements it, recursing into compound shapes. Every function here is
pure: the shape is always passed explicitly and nothing is kept between calls.

>>> from bincodec.shapes import I32, U8, U32, OptionalShape, UnionShape, Variant, VariantShape
>>> to_bytes(U8, 101).hex()
'65'
>>> to_bytes(I32, 104).hex()
'68000000'
>>> to_bytes(OptionalShape(U8), None).hex()
'00'
>>> TestUnion = UnionShape('TestUnion', (VariantShape('X', I32), VariantShape('Y', U32)))
>>> to_bytes(TestUnion, Variant('Y', 5)).hex()
'0100000005000000'

Decoding reports how many bytes were consumed, anything after that is left to the caller:

>>> decode(TestUnion, bytes.fromhex('0100000005000000ff'))
(Variant(name='Y', payload=5), 8)
>>> try:
...     from_bytes(TestUnion, bytes.fromhex('0100000005000000ff'))
... except TrailingDataError as e:
...     print(*e.args)
trailing data
"""

from typing import Any

from bincodec.serialization import Deserializer, Serializer, TrailingDataError  # noqa: F401
from bincodec.serialization.compound_encoding import Decoder, Encoder
from bincodec.serialization.compound_encoding.array import decode_array, encode_array
from bincodec.serialization.compound_encoding.collection import decode_collection, encode_collection
from bincodec.serialization.compound_encoding.optional import decode_optional, encode_optional
from bincodec.serialization.compound_encoding.tuple import decode_tuple, encode_tuple
from bincodec.serialization.compound_encoding.variant import decode_variant, encode_variant
from bincodec.serialization.encoding.bool import decode_bool, encode_bool
from bincodec.serialization.encoding.float import decode_float, encode_float
from bincodec.serialization.encoding.int import decode_int, encode_int
from bincodec.serialization.encoding.ordinal import decode_ordinal, encode_ordinal
from bincodec.serialization.encoding.utf8 import decode_utf8, encode_utf8
from bincodec.serialization.types import Buffer
from bincodec.shapes.check import check_value
from bincodec.shapes.shape import (
    ArrayShape,
    BoolShape,
    EnumShape,
    FloatShape,
    IntShape,
    OptionalShape,
    SequenceShape,
    Shape,
    StructShape,
    TextShape,
    TupleShape,
    UnionShape,
    UnitShape,
    Variant,
)

__all__ = ['encode', 'decode_from', 'to_bytes', 'decode', 'from_bytes']


def encode(serializer: Serializer, shape: Shape, value: Any) -> None:
    """ Write the encoding of `value` according to `shape`.

    The value is checked while it is being encoded, a ShapeMismatchError is raised as soon as any part of it doesn't
    match the shape.
    """
    check_value(shape, value, deep=False)
    match shape:
        case IntShape(signed=signed):
            encode_int(serializer, value, length=shape.byte_size, signed=signed)
        case FloatShape():
            encode_float(serializer, value, length=shape.byte_size)
        case BoolShape():
            encode_bool(serializer, value)
        case UnitShape():
            # XXX: zero sized serialization, nothing to do
            pass
        case TextShape():
            encode_utf8(serializer, value)
        case ArrayShape(element=element, length=length):
            encode_array(serializer, value, _encoder_for(element), length=length)
        case TupleShape(fields=fields):
            encode_tuple(serializer, value, tuple(_encoder_for(i) for i in fields))
        case StructShape(fields=fields):
            values = tuple(value[i.name] for i in fields)
            encode_tuple(serializer, values, tuple(_encoder_for(i.shape) for i in fields))
        case OptionalShape(inner=inner):
            encode_optional(serializer, value, _encoder_for(inner))
        case EnumShape(variants=variants):
            encode_ordinal(serializer, shape.ordinal_of(value), variant_count=len(variants))
        case UnionShape(variants=variants):
            ordinal = shape.ordinal_of(value.name)
            payload_encoder = _encoder_for(variants[ordinal].payload)
            encode_variant(serializer, ordinal, value.payload, payload_encoder, variant_count=len(variants))
        case SequenceShape(element=element):
            encode_collection(serializer, value, _encoder_for(element))
        case _:
            raise TypeError(f'unknown shape: {shape!r}')


def decode_from(deserializer: Deserializer, shape: Shape) -> Any:
    """ Read a value of the given shape, consuming exactly the bytes of its encoding and nothing more.
    """
    match shape:
        case IntShape(signed=signed):
            return decode_int(deserializer, length=shape.byte_size, signed=signed)
        case FloatShape():
            return decode_float(deserializer, length=shape.byte_size)
        case BoolShape():
            return decode_bool(deserializer)
        case UnitShape():
            return ()
        case TextShape():
            return decode_utf8(deserializer)
        case ArrayShape(element=element, length=length):
            return decode_array(deserializer, _decoder_for(element), length=length)
        case TupleShape(fields=fields):
            return decode_tuple(deserializer, tuple(_decoder_for(i) for i in fields))
        case StructShape(fields=fields):
            values = decode_tuple(deserializer, tuple(_decoder_for(i.shape) for i in fields))
            return dict(zip(shape.field_names, values))
        case OptionalShape(inner=inner):
            return decode_optional(deserializer, _decoder_for(inner))
        case EnumShape(variants=variants):
            return variants[decode_ordinal(deserializer, variant_count=len(variants))]
        case UnionShape(variants=variants):
            ordinal, payload = decode_variant(deserializer, tuple(_decoder_for(i.payload) for i in variants))
            return Variant(variants[ordinal].name, payload)
        case SequenceShape(element=element):
            return decode_collection(deserializer, _decoder_for(element), list)
        case _:
            raise TypeError(f'unknown shape: {shape!r}')


def to_bytes(shape: Shape, value: Any, /, *, max_bytes: int | None = None) -> bytes:
    """ Shortcut to quickly convert a value to `bytes` without handling a serializer.

    When `max_bytes` is given, a MaxBytesExceededError is raised if the encoding would be longer than that.
    """
    serializer = Serializer.build_bytes_serializer()
    encode(serializer.with_optional_max_bytes(max_bytes), shape, value)
    return bytes(serializer.finalize())


def decode(shape: Shape, data: Buffer, /, *, max_bytes: int | None = None) -> tuple[Any, int]:
    """ Decode a value from the start of `data`, returns the value and how many bytes it took.

    Bytes after the encoded value are ignored. When `max_bytes` is given, a MaxBytesExceededError is raised if the
    value would need more than that many bytes.
    """
    deserializer = Deserializer.build_bytes_deserializer(data)
    value = decode_from(deserializer.with_optional_max_bytes(max_bytes), shape)
    return value, deserializer.cur_pos()


def from_bytes(shape: Shape, data: Buffer, /, *, max_bytes: int | None = None) -> Any:
    """ Strict version of `decode`: `data` must contain exactly one encoded value and nothing else.
    """
    deserializer = Deserializer.build_bytes_deserializer(data)
    value = decode_from(deserializer.with_optional_max_bytes(max_bytes), shape)
    deserializer.finalize()
    return value


def _encoder_for(shape: Shape) -> Encoder[Any]:
    def encoder(serializer: Serializer, value: Any, /) -> None:
        encode(serializer, shape, value)
    return encoder


def _decoder_for(shape: Shape) -> Decoder[Any]:
    def decoder(deserializer: Deserializer, /) -> Any:
        return decode_from(deserializer, shape)
    return decoder
