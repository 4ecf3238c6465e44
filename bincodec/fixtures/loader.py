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
from typing import Any, Optional, Union

from bincodec.fixtures.fixture import Fixture
from bincodec.serialization import ShapeMismatchError
from bincodec.shapes import json_to_value
from bincodec.shapes.model import ShapeResolver, ShapeSpec
from bincodec.utils.pydantic import BaseModel
from bincodec.utils.yaml import model_from_extended_yaml


class FixtureSpec(BaseModel):
    shape: ShapeSpec
    value: Any


class FixtureFile(BaseModel):
    """Contents of a fixture YAML file.

    Named shapes can be referenced by fixtures (and by other named shapes) with `{kind: ref, name: ...}`. Fixtures
    are keyed by their name and rendered in the order they appear in the file.
    """
    shapes: dict[str, ShapeSpec] = {}
    fixtures: dict[str, FixtureSpec]

    def to_fixtures(self) -> list[Fixture]:
        resolver = ShapeResolver(self.shapes)
        fixtures = []
        for name, spec in self.fixtures.items():
            shape = resolver.resolve(spec.shape)
            try:
                value = json_to_value(shape, spec.value)
            except ShapeMismatchError as e:
                raise ShapeMismatchError(f'invalid value for fixture {name}: {e}') from e
            fixtures.append(Fixture(name, shape, value))
        return fixtures


def load_fixtures(filepath: Union[Path, str], *, custom_root: Optional[Path] = None) -> list[Fixture]:
    """Load fixtures from a YAML file, which can extend other fixture files."""
    fixture_file = model_from_extended_yaml(FixtureFile, filepath=filepath, custom_root=custom_root)
    return fixture_file.to_fixtures()


def get_fixtures(fixtures_yaml: Optional[str] = None) -> list[Fixture]:
    """Fixtures from the given YAML file, or the built-in examples when no file is given."""
    if fixtures_yaml is None:
        from bincodec.fixtures.examples import EXAMPLES
        return list(EXAMPLES)
    return load_fixtures(fixtures_yaml)
