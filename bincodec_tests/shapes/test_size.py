import pytest

from bincodec.shapes import (
    BOOL,
    F32,
    I32,
    TEXT,
    U8,
    U32,
    U128,
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
    fixed_encoded_size,
    min_encoded_size,
)


@pytest.mark.parametrize(['shape', 'fixed', 'minimum'], [
    (U8, 1, 1),
    (U128, 16, 16),
    (F32, 4, 4),
    (BOOL, 1, 1),
    (UNIT, 0, 0),
    (TEXT, None, 8),
    (ArrayShape(U32, 3), 12, 12),
    (ArrayShape(TEXT, 0), 0, 0),
    (ArrayShape(TEXT, 2), None, 16),
    (TupleShape((U8, U32)), 5, 5),
    (StructShape('S', (Field('a', U8), Field('b', OptionalShape(U8)))), None, 2),
    (OptionalShape(U32), None, 1),
    (EnumShape('E', ('A', 'B')), 4, 4),
    (UnionShape('U', (VariantShape('X', I32), VariantShape('Y', U32))), 8, 8),
    (UnionShape('U', (VariantShape('X', I32), VariantShape('Y'))), None, 4),
    (SequenceShape(U8), None, 8),
])
def test_sizes(shape, fixed, minimum) -> None:
    assert fixed_encoded_size(shape) == fixed
    assert min_encoded_size(shape) == minimum
