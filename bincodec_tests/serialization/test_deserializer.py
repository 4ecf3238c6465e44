import pytest

from bincodec.serialization import (
    Deserializer,
    MaxBytesExceededError,
    Serializer,
    TrailingDataError,
    TruncatedInputError,
)
from bincodec_tests import unittest


class BytesDeserializerTestCase(unittest.TestCase):
    def test_cur_pos(self) -> None:
        de = Deserializer.build_bytes_deserializer(b'abcdef')
        self.assertEqual(de.cur_pos(), 0)
        self.assertEqual(bytes(de.read_bytes(2)), b'ab')
        self.assertEqual(de.cur_pos(), 2)
        self.assertEqual(de.read_byte(), ord('c'))
        self.assertEqual(de.cur_pos(), 3)
        self.assertEqual(bytes(de.read_all()), b'def')
        self.assertEqual(de.cur_pos(), 6)
        self.assertTrue(de.is_empty())
        de.finalize()

    def test_peek_does_not_consume(self) -> None:
        de = Deserializer.build_bytes_deserializer(b'xy')
        self.assertEqual(de.peek_byte(), ord('x'))
        self.assertEqual(bytes(de.peek_bytes(2)), b'xy')
        self.assertEqual(de.cur_pos(), 0)

    def test_short_read(self) -> None:
        de = Deserializer.build_bytes_deserializer(b'ab')
        with self.assertRaises(TruncatedInputError):
            de.read_bytes(3)
        self.assertEqual(bytes(de.read_bytes(3, exact=False)), b'ab')
        with self.assertRaises(TruncatedInputError):
            de.read_byte()

    def test_finalize_with_trailing_data(self) -> None:
        de = Deserializer.build_bytes_deserializer(b'ab')
        de.read_byte()
        with self.assertRaises(TrailingDataError):
            de.finalize()

    def test_accepts_any_buffer(self) -> None:
        for data in (b'\x01\x02', bytearray(b'\x01\x02'), memoryview(b'\x01\x02')):
            de = Deserializer.build_bytes_deserializer(data)
            self.assertEqual(de.read_struct('<H'), (0x0201,))
            de.finalize()


def test_max_bytes_serializer() -> None:
    se = Serializer.build_bytes_serializer()
    limited = se.with_max_bytes(3)
    limited.write_bytes(b'ab')
    limited.write_byte(0)
    with pytest.raises(MaxBytesExceededError):
        limited.write_byte(0)
    assert bytes(se.finalize()) == b'ab\x00'


def test_max_bytes_deserializer() -> None:
    de = Deserializer.build_bytes_deserializer(b'abcd').with_max_bytes(2)
    assert bytes(de.read_bytes(2)) == b'ab'
    with pytest.raises(MaxBytesExceededError):
        de.read_byte()


def test_optional_max_bytes() -> None:
    se = Serializer.build_bytes_serializer()
    assert se.with_optional_max_bytes(None) is se
    de = Deserializer.build_bytes_deserializer(b'')
    assert de.with_optional_max_bytes(None) is de
