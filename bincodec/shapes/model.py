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
Declarative description of shapes, used to write shapes in YAML/JSON files.

A shape spec is either the name of a primitive shape or an object whose `kind` key selects one of the compound
shapes. Specs are validated with pydantic and then converted to actual shapes with a `ShapeResolver`, which also
resolves `{kind: ref, name: ...}` references to named shapes.

>>> spec = SHAPE_SPEC_ADAPTER.validate_python({'kind': 'array', 'element': 'f64', 'length': 2})
>>> str(ShapeResolver().resolve(spec))
'[f64; 2]'
>>> resolver = ShapeResolver({'TestEnum': {'kind': 'enum', 'name': 'TestEnum', 'variants': ['One', 'Two']}})
>>> resolver.resolve_name('TestEnum')
EnumShape(name='TestEnum', variants=('One', 'Two'))
"""

from collections.abc import Mapping
from typing import Annotated, Any, Literal, Union

from pydantic import Field as PydanticField, NonNegativeInt, TypeAdapter

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
    EnumShape,
    Field,
    OptionalShape,
    SequenceShape,
    Shape,
    StructShape,
    TupleShape,
    UnionShape,
    VariantShape,
)
from bincodec.utils.pydantic import BaseModel

PRIMITIVE_SHAPES: dict[str, Shape] = {
    'u8': U8,
    'u16': U16,
    'u32': U32,
    'u64': U64,
    'u128': U128,
    'i8': I8,
    'i16': I16,
    'i32': I32,
    'i64': I64,
    'i128': I128,
    'f32': F32,
    'f64': F64,
    'bool': BOOL,
    'unit': UNIT,
    'text': TEXT,
}

PrimitiveName = Literal[
    'u8', 'u16', 'u32', 'u64', 'u128',
    'i8', 'i16', 'i32', 'i64', 'i128',
    'f32', 'f64',
    'bool', 'unit', 'text',
]


class ArraySpec(BaseModel):
    kind: Literal['array']
    element: 'ShapeSpec'
    length: NonNegativeInt


class TupleSpec(BaseModel):
    kind: Literal['tuple']
    fields: list['ShapeSpec']


class FieldSpec(BaseModel):
    name: str
    shape: 'ShapeSpec'


class StructSpec(BaseModel):
    kind: Literal['struct']
    name: str
    fields: list[FieldSpec]


class OptionalSpec(BaseModel):
    kind: Literal['optional']
    inner: 'ShapeSpec'


class EnumSpec(BaseModel):
    kind: Literal['enum']
    name: str
    variants: list[str]


class VariantSpec(BaseModel):
    name: str
    payload: 'ShapeSpec' = 'unit'


class UnionSpec(BaseModel):
    kind: Literal['union']
    name: str
    variants: list[VariantSpec]


class SequenceSpec(BaseModel):
    kind: Literal['sequence']
    element: 'ShapeSpec'


class RefSpec(BaseModel):
    kind: Literal['ref']
    name: str


CompoundSpec = Annotated[
    Union[ArraySpec, TupleSpec, StructSpec, OptionalSpec, EnumSpec, UnionSpec, SequenceSpec, RefSpec],
    PydanticField(discriminator='kind'),
]
ShapeSpec = Union[PrimitiveName, CompoundSpec]

for _model in (ArraySpec, TupleSpec, FieldSpec, StructSpec, OptionalSpec, VariantSpec, UnionSpec, SequenceSpec):
    _model.model_rebuild()

SHAPE_SPEC_ADAPTER: TypeAdapter[ShapeSpec] = TypeAdapter(ShapeSpec)


class ShapeResolver:
    """ Converts shape specs to shapes, resolving references against a set of named specs.

    Each named shape is only built once, so every reference to the same name yields the same shape instance.
    """

    def __init__(self, named: Mapping[str, Any] | None = None) -> None:
        self._named: dict[str, ShapeSpec] = {
            name: SHAPE_SPEC_ADAPTER.validate_python(spec) for name, spec in (named or {}).items()
        }
        self._resolved: dict[str, Shape] = {}
        self._resolving: list[str] = []

    def resolve_name(self, name: str) -> Shape:
        if name in self._resolved:
            return self._resolved[name]
        if name in self._resolving:
            raise ValueError('shape reference cycle: ' + ' -> '.join([*self._resolving, name]))
        if name not in self._named:
            raise ValueError(f'unknown shape reference: {name}')
        self._resolving.append(name)
        try:
            shape = self.resolve(self._named[name])
        finally:
            self._resolving.pop()
        self._resolved[name] = shape
        return shape

    def resolve(self, spec: ShapeSpec) -> Shape:
        match spec:
            case str():
                return PRIMITIVE_SHAPES[spec]
            case RefSpec(name=name):
                return self.resolve_name(name)
            case ArraySpec(element=element, length=length):
                return ArrayShape(self.resolve(element), length)
            case TupleSpec(fields=fields):
                return TupleShape(tuple(self.resolve(i) for i in fields))
            case StructSpec(name=name, fields=fields):
                return StructShape(name, tuple(Field(i.name, self.resolve(i.shape)) for i in fields))
            case OptionalSpec(inner=inner):
                return OptionalShape(self.resolve(inner))
            case EnumSpec(name=name, variants=variants):
                return EnumShape(name, tuple(variants))
            case UnionSpec(name=name, variants=variants):
                return UnionShape(name, tuple(VariantShape(i.name, self.resolve(i.payload)) for i in variants))
            case SequenceSpec(element=element):
                return SequenceShape(self.resolve(element))
            case _:
                raise TypeError(f'unknown shape spec: {spec!r}')
