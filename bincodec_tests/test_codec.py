import math

import pytest

from bincodec import (
    BOOL,
    F32,
    F64,
    I32,
    TEXT,
    U8,
    U32,
    UNIT,
    ArrayShape,
    EnumShape,
    Field,
    InvalidDiscriminantError,
    InvalidEncodingError,
    MaxBytesExceededError,
    OptionalShape,
    SequenceShape,
    Serializer,
    ShapeMismatchError,
    StructShape,
    TrailingDataError,
    TruncatedInputError,
    TupleShape,
    UnionShape,
    Variant,
    VariantShape,
    decode,
    decode_from,
    encode,
    from_bytes,
    to_bytes,
)
from bincodec.serialization import Deserializer
from bincodec.shapes import fixed_encoded_size, min_encoded_size
from bincodec_tests import unittest
from bincodec_tests.utils import random_shape, random_value

TEST_UNION = UnionShape('TestUnion', (VariantShape('X', I32), VariantShape('Y', U32)))
TEST_ENUM = EnumShape('TestEnum', ('One', 'Two'))


@pytest.mark.parametrize(['shape', 'value', 'expected'], [
    (U8, 101, '65'),
    (I32, 104, '68000000'),
    (OptionalShape(U8), None, '00'),
    (OptionalShape(U8), 255, '01ff'),
    (OptionalShape(UNIT), (), '01'),
    (TEST_UNION, Variant('Y', 5), '0100000005000000'),
    (TEST_UNION, Variant('X', 6), '0000000006000000'),
    (TEST_ENUM, 'Two', '01000000'),
    (UNIT, (), ''),
    (TupleShape(()), (), ''),
    (ArrayShape(F64, 0), (), ''),
    (TEXT, '', '0000000000000000'),
    (SequenceShape(BOOL), [True, False], '0200000000000000' + '0100'),
    (TupleShape((U8, BOOL)), (1, True), '0101'),
])
def test_encoding(shape, value, expected: str) -> None:
    assert to_bytes(shape, value).hex() == expected
    assert from_bytes(shape, bytes.fromhex(expected)) == value


def test_struct_fields_in_declared_order() -> None:
    shape = StructShape('P', (Field('b', U8), Field('a', U32)))
    # dict order doesn't matter, only the declaration order
    assert to_bytes(shape, {'a': 2, 'b': 1}).hex() == '01' + '02000000'
    assert from_bytes(shape, bytes.fromhex('0102000000')) == {'b': 1, 'a': 2}


def test_decoded_canonical_forms() -> None:
    shape = TupleShape((ArrayShape(U8, 2), SequenceShape(U8)))
    data = to_bytes(shape, [[1, 2], (3,)])
    assert from_bytes(shape, data) == ((1, 2), [3])


def test_decode_reports_consumed_bytes() -> None:
    data = to_bytes(TEST_UNION, Variant('Y', 5)) + b'\xaa\xbb'
    assert decode(TEST_UNION, data) == (Variant('Y', 5), 8)
    with pytest.raises(TrailingDataError):
        from_bytes(TEST_UNION, data)


def test_decode_from_composes() -> None:
    data = to_bytes(U8, 7) + to_bytes(TEXT, 'hi')
    de = Deserializer.build_bytes_deserializer(data)
    assert decode_from(de, U8) == 7
    assert decode_from(de, TEXT) == 'hi'
    de.finalize()


def test_encode_composes() -> None:
    se = Serializer.build_bytes_serializer()
    encode(se, U8, 1)
    encode(se, BOOL, False)
    assert bytes(se.finalize()) == b'\x01\x00'


@pytest.mark.parametrize(['shape', 'value'], [
    (I32, True),
    (F64, 1),
    (U8, 256),
    (U8, -1),
    (BOOL, 1),
    (UNIT, None),
    (TEXT, b'abc'),
    (F32, 1.1),
    (TEST_ENUM, 'Three'),
    (TEST_ENUM, 0),
    (TEST_UNION, Variant('Z', 1)),
    (TEST_UNION, Variant('X', 2**31)),
    (TEST_UNION, ('X', 1)),
    (ArrayShape(U8, 2), [1]),
    (TupleShape((U8, U8)), (1, 2, 3)),
    (TupleShape((TEXT, U8)), Variant('a', 1)),
    (SequenceShape(U8), Variant('a', 1)),
    (StructShape('P', (Field('a', U8),)), {'a': 1, 'b': 2}),
    (StructShape('P', (Field('a', U8),)), {}),
    (SequenceShape(U8), [1, 'a']),
    (OptionalShape(U8), 'a'),
])
def test_shape_mismatch(shape, value) -> None:
    with pytest.raises(ShapeMismatchError):
        to_bytes(shape, value)


@pytest.mark.parametrize(['shape', 'hex_data'], [
    (BOOL, '02'),
    (OptionalShape(U8), '02'),
    (TEST_ENUM, '02000000'),
    (TEST_UNION, 'ffffffff00000000'),
])
def test_invalid_discriminant(shape, hex_data: str) -> None:
    with pytest.raises(InvalidDiscriminantError):
        decode(shape, bytes.fromhex(hex_data))


def test_invalid_text() -> None:
    with pytest.raises(InvalidEncodingError):
        decode(TEXT, bytes.fromhex('0100000000000000' + 'ff'))


def test_max_bytes() -> None:
    assert to_bytes(TEXT, 'abc', max_bytes=11).hex() == '0300000000000000' + '616263'
    with pytest.raises(MaxBytesExceededError):
        to_bytes(TEXT, 'abc', max_bytes=10)
    data = to_bytes(SequenceShape(U8), list(range(100)))
    with pytest.raises(MaxBytesExceededError):
        decode(SequenceShape(U8), data, max_bytes=50)
    assert decode(SequenceShape(U8), data, max_bytes=len(data)) == (list(range(100)), len(data))


def test_nan_is_preserved() -> None:
    value = from_bytes(F64, to_bytes(F64, math.nan))
    assert math.isnan(value)


def test_unknown_shape() -> None:
    with pytest.raises(TypeError):
        to_bytes(object(), 1)  # type: ignore[arg-type]


class CodecTestCase(unittest.TestCase):
    def _shapes_and_values(self, count: int = 200):
        for _ in range(count):
            shape = random_shape(self.rng)
            yield shape, random_value(self.rng, shape)

    def test_round_trip(self) -> None:
        for shape, value in self._shapes_and_values():
            data = to_bytes(shape, value)
            self.assertEqual(decode(shape, data), (value, len(data)), msg=f'{shape}: {value!r}')

    def test_deterministic(self) -> None:
        for shape, value in self._shapes_and_values():
            self.assertEqual(to_bytes(shape, value), to_bytes(shape, value))

    def test_exact_length(self) -> None:
        for shape, value in self._shapes_and_values():
            data = to_bytes(shape, value)
            self.assertGreaterEqual(len(data), min_encoded_size(shape))
            fixed_size = fixed_encoded_size(shape)
            if fixed_size is not None:
                self.assertEqual(len(data), fixed_size)
            self.assertEqual(decode(shape, data + b'\x00\x01\x02')[1], len(data))

    def test_truncated(self) -> None:
        for shape, value in self._shapes_and_values(50):
            data = to_bytes(shape, value)
            for size in range(len(data)):
                with self.assertRaises(TruncatedInputError, msg=f'{shape}: {data[:size].hex()}'):
                    decode(shape, data[:size])
