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
Checking of fixtures encoded by another implementation against the reference encodings.
"""

from collections.abc import Iterable, Mapping
from typing import NamedTuple, Optional

from structlog import get_logger

from bincodec.codec import from_bytes
from bincodec.fixtures.fixture import Fixture
from bincodec.serialization import SerializationError
from bincodec.shapes import value_to_json

logger = get_logger()


class Mismatch(NamedTuple):
    name: str
    reason: str


def verify_encoded(
    fixtures: Iterable[Fixture],
    encoded: Mapping[str, str],
    *,
    max_bytes: Optional[int] = None,
) -> list[Mismatch]:
    """ Compare hex encoded fixtures with the reference fixtures, returns one Mismatch for each entry that differs.

    Each entry is decoded strictly with the shape of the reference fixture that has the same name, even when its bytes
    are identical to the reference, so `max_bytes` applies to every entry. Names that are not known are mismatches,
    reference fixtures that are not present in `encoded` are only logged.
    """
    log = logger.new()
    reference = {fixture.name: fixture for fixture in fixtures}
    mismatches: list[Mismatch] = []

    for name, hex_data in encoded.items():
        mismatch = _verify_one(reference.get(name), name, hex_data, max_bytes=max_bytes)
        if mismatch is None:
            log.debug('fixture matches', name=name)
        else:
            log.error('fixture mismatch', name=name, reason=mismatch.reason)
            mismatches.append(mismatch)

    for name in missing_fixtures(reference.values(), encoded):
        log.warn('fixture missing from input', name=name)

    return mismatches


def missing_fixtures(fixtures: Iterable[Fixture], encoded: Mapping[str, str]) -> list[str]:
    """ Names of the fixtures that have no entry in `encoded`, in the order of `fixtures`."""
    return [fixture.name for fixture in fixtures if fixture.name not in encoded]


def _verify_one(
    fixture: Optional[Fixture],
    name: str,
    hex_data: str,
    *,
    max_bytes: Optional[int],
) -> Optional[Mismatch]:
    if fixture is None:
        return Mismatch(name, 'unknown fixture')

    try:
        data = bytes.fromhex(hex_data)
    except (TypeError, ValueError):
        return Mismatch(name, 'not a hex string')

    try:
        value = from_bytes(fixture.shape, data, max_bytes=max_bytes)
    except SerializationError as e:
        return Mismatch(name, f'cannot decode: {e}')

    expected = fixture.encode()
    if data == expected:
        return None

    decoded = value_to_json(fixture.shape, value)
    return Mismatch(name, f'expected {expected.hex()}, got {data.hex()} (decoded as {decoded!r})')
