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

from bincodec.shapes.check import check_value
from bincodec.shapes.json import json_to_value, value_to_json
from bincodec.shapes.shape import (
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
)
from bincodec.shapes.size import fixed_encoded_size, min_encoded_size

__all__ = [
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
    'check_value',
    'json_to_value',
    'value_to_json',
    'fixed_encoded_size',
    'min_encoded_size',
]
