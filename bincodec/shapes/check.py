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
Checking that a value structurally matches a shape.

There is no numeric coercion: a `bool` is not an integer, an `int` is not a float and an integer outside of the range
of the declared width is rejected instead of being narrowed.

>>> from bincodec.shapes.shape import F32, I32, U8
>>> check_value(U8, 101)
>>> try:
...     check_value(I32, True)
... except ShapeMismatchError as e:
...     print(*e.args)
expected i32, got bool
>>> try:
...     check_value(U8, 256)
... except ShapeMismatchError as e:
...     print(*e.args)
256 is out of range for u8
>>> try:
...     check_value(F32, 1.1)
... except ShapeMismatchError as e:
...     print(*e.args)
1.1 is not representable as f32
"""

from collections.abc import Mapping
from typing import Any

from bincodec.serialization import ShapeMismatchError
from bincodec.serialization.encoding.float import fits_float32
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


def check_value(shape: Shape, value: Any, /, *, deep: bool = True) -> None:
    """ Raise a ShapeMismatchError if the value's type is not compatible with the shape.

    If `deep=True` then the check recurses into compound shapes to check each inner value. It is expected that
    `deep=False` is used in a context where the recursion is made externally (the codec does this while encoding), so
    the same value is not checked multiple times.
    """
    match shape:
        case IntShape():
            _expect_type(shape, value, int, exclude=bool)
            if not shape.lower_bound <= value <= shape.upper_bound:
                raise ShapeMismatchError(f'{value} is out of range for {shape}')
        case FloatShape():
            _expect_type(shape, value, float)
            if shape.bits == 32 and not fits_float32(value):
                raise ShapeMismatchError(f'{value!r} is not representable as {shape}')
        case BoolShape():
            _expect_type(shape, value, bool)
        case UnitShape():
            if value != () or not isinstance(value, tuple):
                raise ShapeMismatchError(f'expected (), got {value!r}')
        case TextShape():
            _expect_type(shape, value, str)
        case ArrayShape(element=element, length=length):
            _expect_type(shape, value, (tuple, list), exclude=Variant)
            if len(value) != length:
                raise ShapeMismatchError(f'expected {length} element(s) for {shape}, got {len(value)}')
            if deep:
                for i in value:
                    check_value(element, i)
        case TupleShape(fields=fields):
            _expect_type(shape, value, (tuple, list), exclude=Variant)
            if len(value) != len(fields):
                raise ShapeMismatchError(f'expected {len(fields)} field(s) for {shape}, got {len(value)}')
            if deep:
                for field_shape, i in zip(fields, value):
                    check_value(field_shape, i)
        case StructShape(fields=fields):
            _expect_type(shape, value, Mapping)
            if set(value.keys()) != set(shape.field_names):
                raise ShapeMismatchError(f'fields of {shape} are {list(shape.field_names)}, got {list(value.keys())}')
            if deep:
                for i in fields:
                    check_value(i.shape, value[i.name])
        case OptionalShape(inner=inner):
            if value is not None and deep:
                check_value(inner, value)
        case EnumShape(variants=variants):
            _expect_type(shape, value, str)
            if value not in variants:
                raise ShapeMismatchError(f'{value!r} is not a variant of {shape}')
        case UnionShape():
            _expect_type(shape, value, Variant)
            try:
                ordinal = shape.ordinal_of(value.name)
            except KeyError:
                raise ShapeMismatchError(f'{value.name!r} is not a variant of {shape}')
            if deep:
                check_value(shape.variants[ordinal].payload, value.payload)
        case SequenceShape(element=element):
            _expect_type(shape, value, (tuple, list), exclude=Variant)
            if deep:
                for i in value:
                    check_value(element, i)
        case _:
            raise TypeError(f'unknown shape: {shape!r}')


def _expect_type(shape: Shape, value: Any, type_: Any, *, exclude: Any = ()) -> None:
    if not isinstance(value, type_) or isinstance(value, exclude):
        raise ShapeMismatchError(f'expected {shape}, got {type(value).__name__}')
