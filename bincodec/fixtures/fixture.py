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

from typing import Any, NamedTuple

from bincodec.codec import to_bytes
from bincodec.shapes import Shape, check_value


class Fixture(NamedTuple):
    """A named value together with its shape, rendered as a constant holding the value's encoding."""
    name: str
    shape: Shape
    value: Any

    def check(self) -> None:
        """Raise a ShapeMismatchError if the value doesn't match the shape."""
        check_value(self.shape, self.value)

    def encode(self) -> bytes:
        return to_bytes(self.shape, self.value)
