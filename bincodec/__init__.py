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
Binary codec that encodes and decodes values of statically described shapes in a bincode-compatible layout.

This module exports the main API: shape descriptors, the codec functions and the error kinds.
"""

from bincodec.codec import decode, decode_from, encode, from_bytes, to_bytes
from bincodec.serialization import (
    Deserializer,
    InvalidDiscriminantError,
    InvalidEncodingError,
    MaxBytesExceededError,
    SerializationError,
    Serializer,
    ShapeMismatchError,
    TrailingDataError,
    TruncatedInputError,
)
from bincodec.shapes import (
    BOOL,
    F32,
    F64,
    I8,
    I16,
    I32,
    I64,
    I128,
    TEXT,
    U8,
    U16,
    U32,
    U64,
    U128,
    UNIT,
    ArrayShape,
    BoolShape,
    EnumShape,
    Field,
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
    VariantShape,
    check_value,
)
from bincodec.version import __version__

__all__ = [
    'encode',
    'decode_from',
    'to_bytes',
    'decode',
    'from_bytes',
    'check_value',
    'Serializer',
    'Deserializer',
    'SerializationError',
    'ShapeMismatchError',
    'TruncatedInputError',
    'InvalidDiscriminantError',
    'InvalidEncodingError',
    'TrailingDataError',
    'MaxBytesExceededError',
    'Shape',
    'IntShape',
    'FloatShape',
    'BoolShape',
    'UnitShape',
    'TextShape',
    'ArrayShape',
    'TupleShape',
    'Field',
    'StructShape',
    'OptionalShape',
    'EnumShape',
    'VariantShape',
    'Variant',
    'UnionShape',
    'SequenceShape',
    'U8',
    'U16',
    'U32',
    'U64',
    'U128',
    'I8',
    'I16',
    'I32',
    'I64',
    'I128',
    'F32',
    'F64',
    'BOOL',
    'UNIT',
    'TEXT',
    '__version__',
]
