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
Adapters wrap another serializer/deserializer and forward every call to it, adding some extra policy on top.

The only policy currently needed is a cap on the amount of bytes that can go through the adapter:

>>> se = Serializer.build_bytes_serializer().with_max_bytes(2)
>>> se.write_bytes(b'ab')
>>> try:
...     se.write_byte(0x63)
... except MaxBytesExceededError as e:
...     print(*e.args)
maximum number of bytes written

>>> de = Deserializer.build_bytes_deserializer(b'abc').with_max_bytes(2)
>>> bytes(de.read_bytes(2))
b'ab'
>>> de.cur_pos()
2
>>> try:
...     de.read_byte()
... except MaxBytesExceededError as e:
...     print(*e.args)
maximum number of bytes read
"""

from typing import Generic, TypeVar

from typing_extensions import override

from .deserializer import Deserializer
from .exceptions import MaxBytesExceededError
from .serializer import Serializer
from .types import Buffer

S = TypeVar('S', bound=Serializer)
D = TypeVar('D', bound=Deserializer)

__all__ = ['MaxBytesSerializer', 'MaxBytesDeserializer', 'MaxBytesExceededError']


class MaxBytesSerializer(Serializer, Generic[S]):
    inner: S

    def __init__(self, serializer: S, max_bytes: int) -> None:
        self.inner = serializer
        self._bytes_left = max_bytes

    def _check_update_exceeds(self, write_size: int) -> None:
        self._bytes_left -= write_size
        if self._bytes_left < 0:
            raise MaxBytesExceededError('maximum number of bytes written')

    @override
    def finalize(self) -> Buffer:
        return self.inner.finalize()

    @override
    def cur_pos(self) -> int:
        return self.inner.cur_pos()

    @override
    def write_byte(self, data: int) -> None:
        self._check_update_exceeds(1)
        self.inner.write_byte(data)

    @override
    def write_bytes(self, data: Buffer) -> None:
        data_view = memoryview(data)
        self._check_update_exceeds(len(data_view))
        self.inner.write_bytes(data_view)


class MaxBytesDeserializer(Deserializer, Generic[D]):
    inner: D

    def __init__(self, deserializer: D, max_bytes: int) -> None:
        self.inner = deserializer
        self._bytes_left = max_bytes

    def _check_update_exceeds(self, read_size: int) -> None:
        self._bytes_left -= read_size
        if self._bytes_left < 0:
            raise MaxBytesExceededError('maximum number of bytes read')

    @override
    def finalize(self) -> None:
        self.inner.finalize()

    @override
    def cur_pos(self) -> int:
        return self.inner.cur_pos()

    @override
    def is_empty(self) -> bool:
        return self.inner.is_empty()

    @override
    def peek_byte(self) -> int:
        return self.inner.peek_byte()

    @override
    def peek_bytes(self, n: int, *, exact: bool = True) -> Buffer:
        return self.inner.peek_bytes(n, exact=exact)

    @override
    def read_byte(self) -> int:
        self._check_update_exceeds(1)
        return self.inner.read_byte()

    @override
    def read_bytes(self, n: int, *, exact: bool = True) -> Buffer:
        self._check_update_exceeds(n)
        return self.inner.read_bytes(n, exact=exact)

    @override
    def read_all(self) -> Buffer:
        result = self.inner.read_bytes(self._bytes_left, exact=False)
        self._bytes_left -= len(memoryview(result))
        if not self.inner.is_empty():
            raise MaxBytesExceededError('maximum number of bytes read')
        return result
