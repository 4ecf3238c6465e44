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

from pathlib import Path
from typing import Any, Optional, TypeVar, Union

import yaml
from pydantic import BaseModel

from bincodec.utils.dict import deep_merge

_EXTENDS_KEY = 'extends'

T = TypeVar('T', bound=BaseModel)


def dict_from_yaml(*, filepath: Union[Path, str]) -> dict[str, Any]:
    """Takes a filepath to a yaml file and returns a dictionary with its contents."""
    path = Path(filepath)
    if not path.is_file():
        raise ValueError(f"'{filepath}' is not a file")

    with path.open('r') as file:
        contents = yaml.safe_load(file)

    if contents is None:
        return {}

    if not isinstance(contents, dict):
        raise ValueError(f"'{filepath}' cannot be parsed as a dictionary")

    return contents


def dict_from_extended_yaml(*, filepath: Union[Path, str], custom_root: Optional[Path] = None) -> dict[str, Any]:
    """
    Takes a filepath to a yaml file and returns a dictionary with its contents.

    Supports extending another yaml file via the 'extends' key in the file. The 'extends' value can be an absolute path
    to a yaml file, or a path relative to the extending yaml file. The custom_root arg can be provided to set a custom
    root for relative paths, taking lower precedence. The contents of the extending file are merged over the contents
    of the extended file with `deep_merge`.

    Note: the 'extends' key is reserved and will not be present in the returned dictionary.
    To opt-out of the extension feature, use dict_from_yaml().
    """
    return _load_extended(Path(filepath), custom_root, chain=())


def _load_extended(path: Path, custom_root: Optional[Path], *, chain: tuple[Path, ...]) -> dict[str, Any]:
    resolved = path.resolve()
    if resolved in chain:
        cycle = ' -> '.join(str(i) for i in (*chain, resolved))
        raise ValueError(f'Cannot parse yaml with recursive extensions: {cycle}')

    extension_dict = dict_from_yaml(filepath=path)
    file_to_extend = extension_dict.pop(_EXTENDS_KEY, None)

    if not file_to_extend:
        return extension_dict

    path_to_extend = path.parent / str(file_to_extend)

    if not path_to_extend.is_file() and custom_root:
        path_to_extend = custom_root / str(file_to_extend)

    dict_to_extend = _load_extended(path_to_extend, custom_root, chain=(*chain, resolved))
    return deep_merge(dict_to_extend, extension_dict)


def model_from_extended_yaml(
    model: type[T],
    *,
    filepath: Union[Path, str],
    custom_root: Optional[Path] = None,
) -> T:
    """Takes a pydantic model and a filepath to a yaml file and returns a validated model instance."""
    contents = dict_from_extended_yaml(filepath=filepath, custom_root=custom_root)

    return model.model_validate(contents)
