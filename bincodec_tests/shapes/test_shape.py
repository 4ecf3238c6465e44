import pytest

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
    FloatShape,
    IntShape,
    OptionalShape,
    SequenceShape,
    StructShape,
    TupleShape,
    UnionShape,
    VariantShape,
)


@pytest.mark.parametrize(['shape', 'expected'], [
    (U8, 'u8'),
    (I32, 'i32'),
    (F64, 'f64'),
    (UNIT, '()'),
    (TEXT, 'str'),
    (ArrayShape(F64, 2), '[f64; 2]'),
    (TupleShape((U8,)), '(u8,)'),
    (TupleShape((U8, TEXT)), '(u8, str)'),
    (OptionalShape(U8), 'Option<u8>'),
    (SequenceShape(U32), 'Vec<u32>'),
    (EnumShape('TestEnum', ('One',)), 'TestEnum'),
])
def test_str(shape, expected: str) -> None:
    assert str(shape) == expected


def test_int_bounds() -> None:
    assert (U8.lower_bound, U8.upper_bound) == (0, 255)
    assert (I32.lower_bound, I32.upper_bound) == (-2**31, 2**31 - 1)
    assert IntShape(128, signed=False).byte_size == 16


@pytest.mark.parametrize('factory', [
    lambda: IntShape(24, signed=False),
    lambda: FloatShape(16),
    lambda: ArrayShape(U8, -1),
    lambda: EnumShape('E', ()),
    lambda: EnumShape('E', ('A', 'A')),
    lambda: EnumShape('E', ('',)),
    lambda: UnionShape('U', ()),
    lambda: UnionShape('U', (VariantShape('A', U8), VariantShape('A', I32))),
    lambda: StructShape('S', (Field('a', U8), Field('a', U8))),
    lambda: OptionalShape(OptionalShape(U8)),
    lambda: SequenceShape(UNIT),
    lambda: SequenceShape(TupleShape(())),
    lambda: SequenceShape(ArrayShape(U8, 0)),
])
def test_invalid_construction(factory) -> None:
    with pytest.raises(ValueError):
        factory()


def test_not_a_shape() -> None:
    with pytest.raises(TypeError):
        ArrayShape('u8', 2)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        TupleShape((U8, int))  # type: ignore[arg-type]


def test_shapes_are_values() -> None:
    union_a = UnionShape('U', (VariantShape('A', U8), VariantShape('B')))
    union_b = UnionShape('U', [('A', U8), ('B', UNIT)])  # type: ignore[arg-type]
    assert union_a == union_b
    assert hash(union_a) == hash(union_b)
    assert union_a.variants[1].payload == UNIT
    assert union_a.ordinal_of('B') == 1
    assert StructShape('S', [('x', U8)]).fields == (Field('x', U8),)  # type: ignore[arg-type]


def test_sequence_of_optional_unit_is_allowed() -> None:
    # the presence tag takes one byte even when the inner shape takes none
    assert SequenceShape(OptionalShape(UNIT)).element == OptionalShape(UNIT)
