#  Copyright 2023 Hathor Labs
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#  http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.

from copy import deepcopy
from typing import Any, TypeVar

K = TypeVar('K')


def deep_merge(first_dict: dict[K, Any], second_dict: dict[K, Any]) -> dict[K, Any]:
    """
    Recursively merges two dicts, returning a new one with the merged values. Keeps both input dicts intact.

    Keys that only exist in `second_dict` are added after the keys of `first_dict`, so the order of a merged fixture
    file is the order of the base file followed by the new entries.

    >>> base = dict(fixtures=dict(int_u8=dict(shape='u8', value=101)))
    >>> extension = dict(fixtures=dict(int_u8=dict(value=102), bool_true=dict(shape='bool', value=True)))
    >>> result = deep_merge(base, extension)
    >>> result == dict(fixtures=dict(int_u8=dict(shape='u8', value=102), bool_true=dict(shape='bool', value=True)))
    True
    >>> list(result['fixtures'])
    ['int_u8', 'bool_true']
    >>> base == dict(fixtures=dict(int_u8=dict(shape='u8', value=101)))
    True
    """
    merged = deepcopy(first_dict)

    def do_deep_merge(first: dict[K, Any], second: dict[K, Any]) -> dict[K, Any]:
        for key in second:
            if key in first and isinstance(first[key], dict) and isinstance(second[key], dict):
                do_deep_merge(first[key], second[key])
            else:
                first[key] = deepcopy(second[key])

        return first

    return do_deep_merge(merged, second_dict)
