from bincodec.fixtures.examples import EXAMPLES
from bincodec.fixtures.verify import Mismatch, missing_fixtures, verify_encoded


def _reference_hex() -> dict[str, str]:
    return {i.name: i.encode().hex() for i in EXAMPLES}


def test_all_match() -> None:
    assert verify_encoded(EXAMPLES, _reference_hex()) == []


def test_partial_input_is_not_a_mismatch() -> None:
    assert verify_encoded(EXAMPLES, {'int_u8': '65'}) == []


def test_different_value() -> None:
    encoded = _reference_hex()
    encoded['int_u8'] = '66'
    assert verify_encoded(EXAMPLES, encoded) == [
        Mismatch('int_u8', 'expected 65, got 66 (decoded as 102)'),
    ]


def test_undecodable() -> None:
    mismatches = verify_encoded(EXAMPLES, {'bool_true': '02', 'int_u16': '67', 'none': '0000'})
    assert [i.name for i in mismatches] == ['bool_true', 'int_u16', 'none']
    assert mismatches[0].reason == "cannot decode: b'\\x02' is not a valid boolean"
    assert mismatches[1].reason == 'cannot decode: not enough bytes to read'
    assert mismatches[2].reason == 'cannot decode: trailing data'


def test_unknown_and_invalid_entries() -> None:
    mismatches = verify_encoded(EXAMPLES, {'nope': '00', 'int_u8': 'zz'})
    assert mismatches == [Mismatch('nope', 'unknown fixture'), Mismatch('int_u8', 'not a hex string')]


def test_max_bytes() -> None:
    encoded = {'test_type': EXAMPLES[0].encode().hex() + '00'}
    mismatches = verify_encoded(EXAMPLES, encoded, max_bytes=10)
    assert mismatches[0].reason == 'cannot decode: maximum number of bytes read'


def test_max_bytes_applies_to_matching_entries() -> None:
    encoded = {'test_type': EXAMPLES[0].encode().hex(), 'int_u8': '65'}
    assert verify_encoded(EXAMPLES, encoded, max_bytes=10) == [
        Mismatch('test_type', 'cannot decode: maximum number of bytes read'),
    ]


def test_missing_fixtures_in_reference_order() -> None:
    encoded = {'int_u8': '65', 'test_type': EXAMPLES[0].encode().hex()}
    missing = missing_fixtures(EXAMPLES, encoded)
    assert missing == [i.name for i in EXAMPLES if i.name not in ('int_u8', 'test_type')]
    assert missing[:3] == ['test_union', 'test_enum', 'none']
