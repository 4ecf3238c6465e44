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
Shapes describe how the bytes of a value are laid out.

A shape is not a value, it's the knowledge needed to write a value or to interpret the next bytes of an input. The
set of shapes is closed: every shape is one of the frozen dataclasses in this module and `bincodec.codec` interprets
them with a single recursive routine. Shapes are plain immutable values, they are always passed explicitly, there is
no registry of shapes.

>>> str(TupleShape((U8, OptionalShape(F64))))
'(u8, Option<f64>)'
>>> str(ArrayShape(F64, 2))
'[f64; 2]'
>>> EnumShape('TestEnum', ('One', 'Two')).ordinal_of('Two')
1
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, NamedTuple

from bincodec.serialization.encoding.ordinal import MAX_VARIANT_COUNT

_INT_BITS = (8, 16, 32, 64, 128)
_FLOAT_BITS = (32, 64)


class Shape:
    """Base class of all shapes, used for isinstance checks and type annotations."""

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class IntShape(Shape):
    """Fixed-width integer, two's complement, little-endian."""
    bits: int
    signed: bool

    def __post_init__(self) -> None:
        if self.bits not in _INT_BITS:
            raise ValueError(f'unsupported integer width: {self.bits}')

    @property
    def byte_size(self) -> int:
        return self.bits // 8

    @property
    def lower_bound(self) -> int:
        return -(2**(self.bits - 1)) if self.signed else 0

    @property
    def upper_bound(self) -> int:
        return 2**(self.bits - 1) - 1 if self.signed else 2**self.bits - 1

    def __str__(self) -> str:
        return f'{"i" if self.signed else "u"}{self.bits}'


@dataclass(frozen=True, slots=True)
class FloatShape(Shape):
    """IEEE-754 binary float, little-endian."""
    bits: int

    def __post_init__(self) -> None:
        if self.bits not in _FLOAT_BITS:
            raise ValueError(f'unsupported float width: {self.bits}')

    @property
    def byte_size(self) -> int:
        return self.bits // 8

    def __str__(self) -> str:
        return f'f{self.bits}'


@dataclass(frozen=True, slots=True)
class BoolShape(Shape):
    def __str__(self) -> str:
        return 'bool'


@dataclass(frozen=True, slots=True)
class UnitShape(Shape):
    """The empty value, its only value is `()` and it takes zero bytes."""

    def __str__(self) -> str:
        return '()'


@dataclass(frozen=True, slots=True)
class TextShape(Shape):
    """UTF-8 text with an 8-byte length prefix counting bytes (not characters)."""

    def __str__(self) -> str:
        return 'str'


@dataclass(frozen=True, slots=True)
class ArrayShape(Shape):
    """Fixed number of elements of the same shape, the length is not encoded."""
    element: Shape
    length: int

    def __post_init__(self) -> None:
        _check_is_shape(self.element)
        if self.length < 0:
            raise ValueError('array length cannot be negative')

    def __str__(self) -> str:
        return f'[{self.element}; {self.length}]'


@dataclass(frozen=True, slots=True)
class TupleShape(Shape):
    """Heterogeneous fields in declaration order, nothing besides the fields is encoded."""
    fields: tuple[Shape, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, 'fields', tuple(self.fields))
        for field_shape in self.fields:
            _check_is_shape(field_shape)

    def __str__(self) -> str:
        if len(self.fields) == 1:
            return f'({self.fields[0]},)'
        return '(' + ', '.join(str(i) for i in self.fields) + ')'


class Field(NamedTuple):
    name: str
    shape: Shape


@dataclass(frozen=True, slots=True)
class StructShape(Shape):
    """Named fields, encoded exactly like a tuple of the field shapes, field names are not encoded."""
    name: str
    fields: tuple[Field, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, 'fields', tuple(Field(*i) for i in self.fields))
        _check_names('field', (i.name for i in self.fields))
        for i in self.fields:
            _check_is_shape(i.shape)

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(i.name for i in self.fields)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class OptionalShape(Shape):
    """A one byte presence tag followed by the inner value when present."""
    inner: Shape

    def __post_init__(self) -> None:
        _check_is_shape(self.inner)
        if isinstance(self.inner, OptionalShape):
            # `None` would be ambiguous between the outer and the inner optional
            raise ValueError('nested optional shapes are not supported')

    def __str__(self) -> str:
        return f'Option<{self.inner}>'


@dataclass(frozen=True, slots=True)
class EnumShape(Shape):
    """C-style enum, the value is the name of a variant and only its ordinal is encoded.

    The ordinal of a variant is its position in `variants`.
    """
    name: str
    variants: tuple[str, ...]
    _ordinals: dict[str, int] = field(init=False, repr=False, compare=False, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, 'variants', tuple(self.variants))
        _check_variant_count(self.variants)
        _check_names('variant', self.variants)
        object.__setattr__(self, '_ordinals', {name: i for i, name in enumerate(self.variants)})

    def ordinal_of(self, variant: str) -> int:
        return self._ordinals[variant]

    def __str__(self) -> str:
        return self.name


class VariantShape(NamedTuple):
    name: str
    payload: Shape = UnitShape()


class Variant(NamedTuple):
    """The value of a tagged union: the name of the active variant and its payload."""
    name: str
    payload: Any = ()


@dataclass(frozen=True, slots=True)
class UnionShape(Shape):
    """Tagged union, each variant carries a payload of its own shape.

    The ordinal of the active variant is encoded, followed by that variant's payload. The ordinal of a variant is its
    position in `variants`.
    """
    name: str
    variants: tuple[VariantShape, ...]
    _ordinals: dict[str, int] = field(init=False, repr=False, compare=False, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, 'variants', tuple(VariantShape(*i) for i in self.variants))
        _check_variant_count(self.variants)
        _check_names('variant', (i.name for i in self.variants))
        for i in self.variants:
            _check_is_shape(i.payload)
        object.__setattr__(self, '_ordinals', {v.name: i for i, v in enumerate(self.variants)})

    def ordinal_of(self, variant: str) -> int:
        return self._ordinals[variant]

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class SequenceShape(Shape):
    """Variable number of elements of the same shape, with an 8-byte length prefix counting elements."""
    element: Shape

    def __post_init__(self) -> None:
        from bincodec.shapes.size import min_encoded_size
        _check_is_shape(self.element)
        if min_encoded_size(self.element) == 0:
            raise ValueError(f'sequence elements must take at least one byte: {self.element}')

    def __str__(self) -> str:
        return f'Vec<{self.element}>'


def _check_is_shape(value: Any) -> None:
    if not isinstance(value, Shape):
        raise TypeError(f'expected a shape, got {value!r}')


def _check_variant_count(variants: tuple[Any, ...]) -> None:
    if not variants:
        raise ValueError('at least one variant is required')
    if len(variants) > MAX_VARIANT_COUNT:
        raise ValueError('too many variants')


def _check_names(kind: str, names: Any) -> None:
    seen: set[str] = set()
    for name in names:
        if not isinstance(name, str) or not name:
            raise ValueError(f'{kind} name must be a non-empty str: {name!r}')
        if name in seen:
            raise ValueError(f'duplicate {kind} name: {name}')
        seen.add(name)


U8 = IntShape(8, signed=False)
U16 = IntShape(16, signed=False)
U32 = IntShape(32, signed=False)
U64 = IntShape(64, signed=False)
U128 = IntShape(128, signed=False)
I8 = IntShape(8, signed=True)
I16 = IntShape(16, signed=True)
I32 = IntShape(32, signed=True)
I64 = IntShape(64, signed=True)
I128 = IntShape(128, signed=True)
F32 = FloatShape(32)
F64 = FloatShape(64)
BOOL = BoolShape()
UNIT = UnitShape()
TEXT = TextShape()
