import os

import pytest

from bincodec.utils.pydantic import BaseModel
from bincodec.utils.yaml import dict_from_extended_yaml, dict_from_yaml, model_from_extended_yaml


class _Model(BaseModel):
    a: int
    b: dict[str, int] = {}


def _write(directory, name: str, contents: str) -> str:
    filepath = os.path.join(directory, name)
    with open(filepath, 'w') as f:
        f.write(contents)
    return filepath


def test_dict_from_yaml(tmp_path) -> None:
    assert dict_from_yaml(filepath=_write(tmp_path, 'a.yml', 'a: 1\n')) == {'a': 1}
    assert dict_from_yaml(filepath=_write(tmp_path, 'empty.yml', '')) == {}


def test_dict_from_yaml_not_a_dict(tmp_path) -> None:
    with pytest.raises(ValueError):
        dict_from_yaml(filepath=_write(tmp_path, 'list.yml', '- 1\n- 2\n'))


def test_dict_from_yaml_missing_file(tmp_path) -> None:
    with pytest.raises(ValueError, match='is not a file'):
        dict_from_yaml(filepath=tmp_path / 'missing.yml')


def test_extends_relative(tmp_path) -> None:
    _write(tmp_path, 'base.yml', 'a: 1\nb: {x: 1, y: 2}\n')
    filepath = _write(tmp_path, 'ext.yml', 'extends: base.yml\nb: {y: 3}\n')
    assert dict_from_extended_yaml(filepath=filepath) == {'a': 1, 'b': {'x': 1, 'y': 3}}


def test_extends_custom_root(tmp_path) -> None:
    root = tmp_path / 'root'
    root.mkdir()
    _write(root, 'base.yml', 'a: 1\n')
    filepath = _write(tmp_path, 'ext.yml', 'extends: base.yml\nb: {x: 2}\n')
    assert model_from_extended_yaml(_Model, filepath=filepath, custom_root=root) == _Model(a=1, b={'x': 2})


def test_recursive_extends(tmp_path) -> None:
    _write(tmp_path, 'a.yml', 'extends: b.yml\n')
    filepath = _write(tmp_path, 'b.yml', 'extends: a.yml\n')
    with pytest.raises(ValueError, match='Cannot parse yaml with recursive extensions'):
        dict_from_extended_yaml(filepath=filepath)
