import math

import pytest

from bincodec.serialization import ShapeMismatchError
from bincodec.shapes import (
    BOOL,
    F32,
    F64,
    I8,
    TEXT,
    U8,
    UNIT,
    ArrayShape,
    EnumShape,
    Field,
    OptionalShape,
    SequenceShape,
    StructShape,
    TupleShape,
    UnionShape,
    Variant,
    VariantShape,
    check_value,
)

UNION = UnionShape('U', (VariantShape('A', U8), VariantShape('B')))
STRUCT = StructShape('S', (Field('x', U8), Field('y', OptionalShape(TEXT))))


@pytest.mark.parametrize(['shape', 'value'], [
    (U8, 0),
    (U8, 255),
    (I8, -128),
    (F32, 5.5),
    (F32, math.inf),
    (F32, math.nan),
    (F64, 1.1),
    (BOOL, False),
    (UNIT, ()),
    (TEXT, ''),
    (ArrayShape(U8, 2), (1, 2)),
    (ArrayShape(U8, 2), [1, 2]),
    (TupleShape((U8, BOOL)), [1, True]),
    (STRUCT, {'x': 1, 'y': None}),
    (STRUCT, {'y': 'a', 'x': 1}),
    (OptionalShape(U8), None),
    (EnumShape('E', ('One', 'Two')), 'Two'),
    (UNION, Variant('A', 1)),
    (UNION, Variant('B')),
    (SequenceShape(U8), []),
    (SequenceShape(U8), (1, 2)),
])
def test_valid(shape, value) -> None:
    check_value(shape, value)


@pytest.mark.parametrize(['shape', 'value', 'message'], [
    (U8, 256, '256 is out of range for u8'),
    (I8, True, 'expected i8, got bool'),
    (F64, 1, 'expected f64, got int'),
    (F32, 1.1, '1.1 is not representable as f32'),
    (UNIT, None, 'expected (), got None'),
    (ArrayShape(U8, 2), (1, 2, 3), 'expected 2 element(s) for [u8; 2], got 3'),
    (STRUCT, {'x': 1}, "fields of S are ['x', 'y'], got ['x']"),
    (STRUCT, {'x': 1, 'y': 2}, 'expected str, got int'),
    (EnumShape('E', ('One',)), 'Two', "'Two' is not a variant of E"),
    (UNION, Variant('C'), "'C' is not a variant of U"),
    (UNION, Variant('A', ()), 'expected u8, got tuple'),
])
def test_invalid(shape, value, message: str) -> None:
    with pytest.raises(ShapeMismatchError) as exc_info:
        check_value(shape, value)
    assert str(exc_info.value) == message


def test_shallow_check() -> None:
    check_value(SequenceShape(U8), ['a'], deep=False)
    with pytest.raises(ShapeMismatchError):
        check_value(SequenceShape(U8), ['a'])


@pytest.mark.parametrize('shape', [TupleShape((TEXT, U8)), ArrayShape(TEXT, 2), SequenceShape(TEXT)])
def test_variant_is_not_a_tuple(shape) -> None:
    with pytest.raises(ShapeMismatchError, match='got Variant$'):
        check_value(shape, Variant('a', 1))
    with pytest.raises(ShapeMismatchError, match='got Variant$'):
        check_value(shape, Variant('a', 1), deep=False)
