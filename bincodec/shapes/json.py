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
Conversion between values and objects compatible with the builtin json module (or with what `yaml.safe_load` returns).

This is what allows writing fixture values in YAML/JSON files. Unions use the externally tagged form, an object with a
single key that is the variant name; variants with a unit payload can also be written as a bare string:

>>> from bincodec.shapes.shape import I32, U32, UnionShape, VariantShape
>>> TestUnion = UnionShape('TestUnion', (VariantShape('X', I32), VariantShape('Y', U32)))
>>> json_to_value(TestUnion, {'Y': 5})
Variant(name='Y', payload=5)
>>> value_to_json(TestUnion, Variant('X', 6))
{'X': 6}
"""

from typing import Any, TypeAlias

from bincodec.serialization import ShapeMismatchError
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

# These are all the values that can be observed when parsing a JSON with the builtin json module
# See: https://docs.python.org/3/library/json.html#encoders-and-decoders
Json: TypeAlias = dict | list | str | int | float | bool | None


def json_to_value(shape: Shape, json_value: Json, /) -> Any:
    """ Use this to convert a value that comes out from `json.load` into the value that the shape expects.

    Will raise a ShapeMismatchError if the given `json_value` is not compatible.
    """
    value = _json_to_value(shape, json_value)
    check_value(shape, value, deep=False)
    return value


def value_to_json(shape: Shape, value: Any, /) -> Json:
    """ Use this to convert a value to an object compatible with `json.dump`.

    Will raise a ShapeMismatchError if the given `value` is not compatible.
    """
    check_value(shape, value, deep=False)
    return _value_to_json(shape, value)


def _json_to_value(shape: Shape, json_value: Json) -> Any:
    match shape:
        case IntShape() | BoolShape() | TextShape():
            return json_value
        case FloatShape():
            # json has a single number type, an integral number for a float field is fine here
            if isinstance(json_value, int) and not isinstance(json_value, bool):
                return float(json_value)
            return json_value
        case UnitShape():
            if json_value is not None:
                raise ShapeMismatchError('expected None/null')
            return ()
        case ArrayShape(element=element):
            return tuple(json_to_value(element, i) for i in _expect_list(shape, json_value))
        case TupleShape(fields=fields):
            items = _expect_list(shape, json_value)
            if len(items) != len(fields):
                raise ShapeMismatchError(f'expected {len(fields)} field(s) for {shape}, got {len(items)}')
            return tuple(json_to_value(f, i) for f, i in zip(fields, items))
        case StructShape(fields=fields):
            if not isinstance(json_value, dict):
                raise ShapeMismatchError(f'expected object for {shape}')
            unknown = set(json_value.keys()) - set(shape.field_names)
            if unknown:
                raise ShapeMismatchError(f'unknown field(s) for {shape}: {sorted(unknown)}')
            missing = [i.name for i in fields if i.name not in json_value]
            if missing:
                raise ShapeMismatchError(f'missing field(s) for {shape}: {missing}')
            return {i.name: json_to_value(i.shape, json_value[i.name]) for i in fields}
        case OptionalShape(inner=inner):
            if json_value is None:
                return None
            return json_to_value(inner, json_value)
        case EnumShape():
            return json_value
        case UnionShape():
            return _json_to_variant(shape, json_value)
        case SequenceShape(element=element):
            return [json_to_value(element, i) for i in _expect_list(shape, json_value)]
        case _:
            raise TypeError(f'unknown shape: {shape!r}')


def _json_to_variant(shape: UnionShape, json_value: Json) -> Variant:
    if isinstance(json_value, str):
        name, payload_json = json_value, None
    elif isinstance(json_value, dict) and len(json_value) == 1:
        (name, payload_json), = json_value.items()
    else:
        raise ShapeMismatchError(f'expected {{"<variant>": <payload>}} for {shape}')
    try:
        ordinal = shape.ordinal_of(name)
    except KeyError:
        raise ShapeMismatchError(f'{name!r} is not a variant of {shape}')
    variant_shape = shape.variants[ordinal]
    if isinstance(json_value, str) and not isinstance(variant_shape.payload, UnitShape):
        raise ShapeMismatchError(f'variant {name} of {shape} requires a payload')
    return Variant(name, json_to_value(variant_shape.payload, payload_json))


def _value_to_json(shape: Shape, value: Any) -> Json:
    match shape:
        case IntShape() | FloatShape() | BoolShape() | TextShape() | EnumShape():
            return value
        case UnitShape():
            return None
        case ArrayShape(element=element) | SequenceShape(element=element):
            return [value_to_json(element, i) for i in value]
        case TupleShape(fields=fields):
            return [value_to_json(f, i) for f, i in zip(fields, value)]
        case StructShape(fields=fields):
            return {i.name: value_to_json(i.shape, value[i.name]) for i in fields}
        case OptionalShape(inner=inner):
            if value is None:
                return None
            return value_to_json(inner, value)
        case UnionShape():
            payload_shape = shape.variants[shape.ordinal_of(value.name)].payload
            if isinstance(payload_shape, UnitShape):
                return value.name
            return {value.name: value_to_json(payload_shape, value.payload)}
        case _:
            raise TypeError(f'unknown shape: {shape!r}')


def _expect_list(shape: Shape, json_value: Json) -> list:
    if not isinstance(json_value, list):
        raise ShapeMismatchError(f'expected list for {shape}')
    return json_value
