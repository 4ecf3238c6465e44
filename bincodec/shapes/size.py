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
Encoded sizes that can be known from the shape alone.

>>> from bincodec.shapes.shape import F64, U8, ArrayShape, OptionalShape, TupleShape
>>> fixed_encoded_size(ArrayShape(F64, 2))
16
>>> fixed_encoded_size(OptionalShape(U8)) is None
True
>>> min_encoded_size(TupleShape((U8, OptionalShape(F64))))
2
"""

from bincodec.serialization.encoding.bytes import LENGTH_PREFIX_SIZE
from bincodec.serialization.encoding.ordinal import ORDINAL_SIZE
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
)


def fixed_encoded_size(shape: Shape) -> int | None:
    """Size in bytes of every value of the shape, or `None` when it depends on the value."""
    match shape:
        case IntShape() | FloatShape():
            return shape.byte_size
        case BoolShape():
            return 1
        case UnitShape():
            return 0
        case EnumShape():
            return ORDINAL_SIZE
        case ArrayShape(element=element, length=length):
            if length == 0:
                return 0
            element_size = fixed_encoded_size(element)
            return None if element_size is None else element_size * length
        case TupleShape(fields=fields):
            return _sum_fixed(fields)
        case StructShape(fields=fields):
            return _sum_fixed(i.shape for i in fields)
        case OptionalShape() | TextShape() | SequenceShape():
            return None
        case UnionShape(variants=variants):
            sizes = {fixed_encoded_size(i.payload) for i in variants}
            if len(sizes) != 1 or None in sizes:
                return None
            size, = sizes
            assert size is not None
            return ORDINAL_SIZE + size
        case _:
            raise TypeError(f'unknown shape: {shape!r}')


def min_encoded_size(shape: Shape) -> int:
    """Smallest number of bytes any value of the shape can take."""
    match shape:
        case IntShape() | FloatShape() | BoolShape() | UnitShape() | EnumShape():
            size = fixed_encoded_size(shape)
            assert size is not None
            return size
        case ArrayShape(element=element, length=length):
            return min_encoded_size(element) * length
        case TupleShape(fields=fields):
            return sum(min_encoded_size(i) for i in fields)
        case StructShape(fields=fields):
            return sum(min_encoded_size(i.shape) for i in fields)
        case OptionalShape():
            return 1
        case TextShape() | SequenceShape():
            return LENGTH_PREFIX_SIZE
        case UnionShape(variants=variants):
            return ORDINAL_SIZE + min(min_encoded_size(i.payload) for i in variants)
        case _:
            raise TypeError(f'unknown shape: {shape!r}')


def _sum_fixed(shapes) -> int | None:
    total = 0
    for shape in shapes:
        size = fixed_encoded_size(shape)
        if size is None:
            return None
        total += size
    return total
