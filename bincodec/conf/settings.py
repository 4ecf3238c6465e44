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

from pathlib import Path
from typing import Optional

from pydantic import PositiveInt

from bincodec.fixtures.render import DEFAULT_ZIG_HEADER, FixtureFormat
from bincodec.utils.pydantic import BaseModel
from bincodec.utils.yaml import model_from_extended_yaml


class CodecSettings(BaseModel):
    """ Settings used by the command line tools. The codec itself is configured only by the shapes it is given.
    """

    # Format used by `emit_fixtures` when none is given on the command line.
    FIXTURE_FORMAT: FixtureFormat = FixtureFormat.ZIG

    # Path to a fixture YAML file, when not set the built-in examples are used.
    FIXTURES_YAML: Optional[str] = None

    # Maximum number of bytes a single fixture may take when decoding untrusted input, no limit when not set.
    MAX_DECODE_BYTES: Optional[PositiveInt] = None

    # First line of the zig output.
    ZIG_HEADER: str = DEFAULT_ZIG_HEADER

    @classmethod
    def from_yaml(cls, *, filepath: str) -> 'CodecSettings':
        """ Takes a filepath to a yaml file and returns a validated CodecSettings instance.

        The `extends` key may refer to files relative to this package, like `default.yml`.
        """
        return model_from_extended_yaml(cls, filepath=filepath, custom_root=Path(__file__).parent)
