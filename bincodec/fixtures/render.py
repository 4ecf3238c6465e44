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
Rendering of encoded fixtures as source code or data files.

The zig format is a list of byte slice constants, ready to be imported by a zig test suite:

>>> print(render_zig({'none': bytes([0]), 'int_i8': bytes([100])}, header='// examples'), end='')
// examples
<BLANKLINE>
pub const none: []const u8 = &.{ 0x0,  };
pub const int_i8: []const u8 = &.{ 0x64,  };
"""

import json
from collections.abc import Iterable, Mapping
from enum import Enum

from structlog import get_logger

from bincodec.fixtures.fixture import Fixture

logger = get_logger()

DEFAULT_ZIG_HEADER = "// This file is generated using 'bincodec-cli emit_fixtures >examples.zig'"


class FixtureFormat(str, Enum):
    ZIG = 'zig'
    HEX = 'hex'
    JSON = 'json'


def encode_fixtures(fixtures: Iterable[Fixture]) -> dict[str, bytes]:
    """ Encode all fixtures, keeping their order. Fixture names must be unique.
    """
    encoded: dict[str, bytes] = {}
    for fixture in fixtures:
        if fixture.name in encoded:
            raise ValueError(f'duplicate fixture name: {fixture.name}')
        data = fixture.encode()
        logger.debug('encoded fixture', name=fixture.name, shape=str(fixture.shape), size=len(data))
        encoded[fixture.name] = data
    return encoded


def render_zig_constant(name: str, data: bytes) -> str:
    """
    >>> render_zig_constant('test_enum', bytes([1, 0, 0, 0]))
    'pub const test_enum: []const u8 = &.{ 0x1, 0x0, 0x0, 0x0,  };'
    """
    return f'pub const {name}: []const u8 = &.{{ ' + ''.join(f'0x{byte:X}, ' for byte in data) + ' };'


def render_zig(encoded: Mapping[str, bytes], *, header: str = DEFAULT_ZIG_HEADER) -> str:
    lines = [header, '']
    lines.extend(render_zig_constant(name, data) for name, data in encoded.items())
    return '\n'.join(lines) + '\n'


def render_hex(encoded: Mapping[str, bytes]) -> str:
    """
    >>> print(render_hex({'int_u16': bytes.fromhex('6700'), 'bool_true': bytes([1])}), end='')
    int_u16 6700
    bool_true 01
    """
    return ''.join(f'{name} {data.hex()}\n' for name, data in encoded.items())


def render_json(encoded: Mapping[str, bytes]) -> str:
    return json.dumps({name: data.hex() for name, data in encoded.items()}, indent=2) + '\n'


def render_fixtures(
    fixtures: Iterable[Fixture],
    fmt: FixtureFormat,
    *,
    zig_header: str = DEFAULT_ZIG_HEADER,
) -> str:
    """Encode the fixtures and render them in the given format."""
    encoded = encode_fixtures(fixtures)
    match FixtureFormat(fmt):
        case FixtureFormat.ZIG:
            output = render_zig(encoded, header=zig_header)
        case FixtureFormat.HEX:
            output = render_hex(encoded)
        case FixtureFormat.JSON:
            output = render_json(encoded)
    logger.info('rendered fixtures', count=len(encoded), format=FixtureFormat(fmt).value,
                total_bytes=sum(len(i) for i in encoded.values()))
    return output
