import pytest

from bincodec.fixtures import EXAMPLES_FIXTURES_FILEPATH
from bincodec.fixtures.examples import EXAMPLES
from bincodec.fixtures.loader import load_fixtures

EXPECTED_HEX = {
    'test_type': (
        '0100000005000000'  # u: Y(5)
        '00000000'  # e: One
        '0800000000000000' '6162636465666768'  # s: "abcdefgh"
        '9a9999999999f13f' '9a99999999990140'  # p: [1.1, 2.2]
        '01ff'  # o: Some(255)
    ),
    'test_union': '0000000006000000',
    'test_enum': '01000000',
    'none': '00',
    'int_i8': '64',
    'int_u8': '65',
    'int_i16': '6600',
    'int_u16': '6700',
    'int_i32': '68000000',
    'int_u32': '69000000',
    'int_i64': '6a00000000000000',
    'int_u64': '6b00000000000000',
    'int_i128': '6c000000000000000000000000000000',
    'int_u128': '6d000000000000000000000000000000',
    'int_f32': '0000b040',
    'int_f64': '6666666666661a40',
    'bool_false': '00',
    'bool_true': '01',
}


def test_names_in_order() -> None:
    assert [i.name for i in EXAMPLES] == list(EXPECTED_HEX.keys())


@pytest.mark.parametrize('fixture', EXAMPLES, ids=lambda fixture: fixture.name)
def test_example_bytes(fixture) -> None:
    fixture.check()
    assert fixture.encode().hex() == EXPECTED_HEX[fixture.name]


def test_test_type_length() -> None:
    assert len(EXAMPLES[0].encode()) == 46


def test_examples_yaml_matches_builtin() -> None:
    loaded = load_fixtures(EXAMPLES_FIXTURES_FILEPATH)
    assert [i.name for i in loaded] == [i.name for i in EXAMPLES]
    for fixture, builtin in zip(loaded, EXAMPLES):
        assert fixture.shape == builtin.shape
        assert fixture.value == builtin.value
        assert fixture.encode() == builtin.encode()
