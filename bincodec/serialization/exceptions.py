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


class SerializationError(ValueError):
    """Base class of every error raised while encoding or decoding.

    Encoding and decoding are deterministic, retrying the same call with the same input will fail the same way.
    """


class ShapeMismatchError(SerializationError):
    """The value given to an encoder does not match the declared shape.

    This is a contract violation of the caller (wrong type, wrong size, out of range, unknown variant...), it is not
    a condition that can happen because of external input.
    """


class TruncatedInputError(SerializationError):
    """There are fewer bytes left than what the shape being decoded requires."""


# kept for code that prefers the "reader" naming
OutOfDataError = TruncatedInputError


class InvalidDiscriminantError(SerializationError):
    """A tag byte or ordinal was read that does not map to any valid value.

    This covers a boolean byte other than 0/1, an optional tag other than 0/1 and an enum/union ordinal that is not
    smaller than the number of declared variants.
    """


class InvalidEncodingError(SerializationError):
    """The decoded text bytes are not valid UTF-8."""


class TrailingDataError(SerializationError):
    """A strict decode finished but there were bytes left over."""


class MaxBytesExceededError(SerializationError):
    """ This error is raised when the adapted serializer reached its maximum bytes write/read.

    After this exception is raised the adapted serializer cannot be used anymore. Handlers of this exception are
    expected to either: bubble up the exception (or an equivalent exception), or return an error. Handlers should not
    try to write again on the same serializer.
    """
