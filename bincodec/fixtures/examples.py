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
The reference fixtures: one value for each kind of shape, compared byte by byte against other encoder implementations.

>>> EXAMPLES[0].encode().hex()
'010000000500000000000000080000000000000061626364656667689a9999999999f13f9a9999999999014001ff'
>>> [i.name for i in EXAMPLES[:4]]
['test_type', 'test_union', 'test_enum', 'none']
"""

from bincodec.fixtures.fixture import Fixture
from bincodec.shapes import (
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
    StructShape,
    UnionShape,
    Variant,
    VariantShape,
)

TEST_UNION = UnionShape('TestUnion', (
    VariantShape('X', I32),
    VariantShape('Y', U32),
))

TEST_ENUM = EnumShape('TestEnum', ('One', 'Two'))

TEST_TYPE = StructShape('TestType', (
    Field('u', TEST_UNION),
    Field('e', TEST_ENUM),
    Field('s', TEXT),
    Field('p', ArrayShape(F64, 2)),
    Field('o', OptionalShape(U8)),
    Field('v', UNIT),
))

EXAMPLES: list[Fixture] = [
    Fixture('test_type', TEST_TYPE, {
        'u': Variant('Y', 5),
        'e': 'One',
        's': 'abcdefgh',
        'p': (1.1, 2.2),
        'o': 255,
        'v': (),
    }),
    Fixture('test_union', TEST_UNION, Variant('X', 6)),
    Fixture('test_enum', TEST_ENUM, 'Two'),
    Fixture('none', OptionalShape(U8), None),
    Fixture('int_i8', I8, 100),
    Fixture('int_u8', U8, 101),
    Fixture('int_i16', I16, 102),
    Fixture('int_u16', U16, 103),
    Fixture('int_i32', I32, 104),
    Fixture('int_u32', U32, 105),
    Fixture('int_i64', I64, 106),
    Fixture('int_u64', U64, 107),
    Fixture('int_i128', I128, 108),
    Fixture('int_u128', U128, 109),
    Fixture('int_f32', F32, 5.5),
    Fixture('int_f64', F64, 6.6),
    Fixture('bool_false', BOOL, False),
    Fixture('bool_true', BOOL, True),
]
