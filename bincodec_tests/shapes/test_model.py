import pytest
from pydantic import ValidationError

from bincodec.shapes import (
    F64,
    I32,
    TEXT,
    U8,
    U32,
    UNIT,
    ArrayShape,
    EnumShape,
    Field,
    OptionalShape,
    SequenceShape,
    StructShape,
    TupleShape,
    UnionShape,
    VariantShape,
)
from bincodec.shapes.model import SHAPE_SPEC_ADAPTER, ShapeResolver


def _resolve(spec, named=None):
    return ShapeResolver(named).resolve(SHAPE_SPEC_ADAPTER.validate_python(spec))


@pytest.mark.parametrize(['spec', 'shape'], [
    ('u8', U8),
    ('text', TEXT),
    ('unit', UNIT),
    ({'kind': 'array', 'element': 'f64', 'length': 2}, ArrayShape(F64, 2)),
    ({'kind': 'tuple', 'fields': ['u8', 'text']}, TupleShape((U8, TEXT))),
    ({'kind': 'optional', 'inner': 'u8'}, OptionalShape(U8)),
    ({'kind': 'sequence', 'element': {'kind': 'optional', 'inner': 'u8'}}, SequenceShape(OptionalShape(U8))),
    ({'kind': 'enum', 'name': 'E', 'variants': ['One', 'Two']}, EnumShape('E', ('One', 'Two'))),
    (
        {'kind': 'union', 'name': 'U', 'variants': [{'name': 'X', 'payload': 'i32'}, {'name': 'Y'}]},
        UnionShape('U', (VariantShape('X', I32), VariantShape('Y', UNIT))),
    ),
    (
        {'kind': 'struct', 'name': 'S', 'fields': [{'name': 'a', 'shape': 'u32'}]},
        StructShape('S', (Field('a', U32),)),
    ),
])
def test_resolve(spec, shape) -> None:
    assert _resolve(spec) == shape


@pytest.mark.parametrize('spec', [
    'u7',
    {'kind': 'array', 'element': 'u8'},
    {'kind': 'array', 'element': 'u8', 'length': -1},
    {'kind': 'map', 'key': 'u8'},
    {'kind': 'optional', 'inner': 'u8', 'extra': 1},
])
def test_invalid_spec(spec) -> None:
    with pytest.raises(ValidationError):
        SHAPE_SPEC_ADAPTER.validate_python(spec)


def test_references() -> None:
    resolver = ShapeResolver({
        'Inner': {'kind': 'enum', 'name': 'Inner', 'variants': ['A']},
        'Outer': {'kind': 'tuple', 'fields': [{'kind': 'ref', 'name': 'Inner'}, 'u8']},
    })
    inner = resolver.resolve_name('Inner')
    assert resolver.resolve_name('Outer') == TupleShape((inner, U8))
    assert resolver.resolve_name('Inner') is inner


def test_unknown_reference() -> None:
    with pytest.raises(ValueError, match='unknown shape reference: Missing'):
        _resolve({'kind': 'ref', 'name': 'Missing'})


def test_reference_cycle() -> None:
    resolver = ShapeResolver({
        'A': {'kind': 'optional', 'inner': {'kind': 'ref', 'name': 'B'}},
        'B': {'kind': 'sequence', 'element': {'kind': 'ref', 'name': 'A'}},
    })
    with pytest.raises(ValueError, match='shape reference cycle: A -> B -> A'):
        resolver.resolve_name('A')


def test_construction_rules_apply() -> None:
    with pytest.raises(ValueError):
        _resolve({'kind': 'optional', 'inner': {'kind': 'optional', 'inner': 'u8'}})
