import json

import pytest

from linkprobe.exceptions import ConfigFileError
from linkprobe.services.config_file_store import ConfigFileStore


def test_load_json_config(tmp_path):
    tmp_path.joinpath("linkprobe.config.json").write_text(json.dumps({"recurse": True, "skip": ["a", "b"]}))
    store = ConfigFileStore(base_dir=str(tmp_path))
    assert store.load_dict("linkprobe.config.json") == {"recurse": True, "skip": ["a", "b"]}


def test_load_yaml_config(tmp_path):
    tmp_path.joinpath("custom.yml").write_text("recurse: true\nskip:\n  - foo\n")
    store = ConfigFileStore(base_dir=str(tmp_path))
    assert store.load_dict("custom.yml") == {"recurse": True, "skip": ["foo"]}


def test_absolute_path_ignores_base_dir(tmp_path):
    path = tmp_path / "abs.json"
    path.write_text('{"silent": true}')
    store = ConfigFileStore(base_dir="/nonexistent")
    assert store.load_dict(str(path)) == {"silent": True}


def test_find_default_prefers_json(tmp_path):
    tmp_path.joinpath("linkprobe.config.yaml").write_text("recurse: false\n")
    tmp_path.joinpath("linkprobe.config.json").write_text("{}")
    store = ConfigFileStore(base_dir=str(tmp_path))
    assert store.find_default() == str(tmp_path / "linkprobe.config.json")


def test_find_default_without_files(tmp_path):
    assert ConfigFileStore(base_dir=str(tmp_path)).find_default() is None


def test_missing_file_raises(tmp_path):
    with pytest.raises(ConfigFileError):
        ConfigFileStore(base_dir=str(tmp_path)).load_dict("nope.json")


def test_invalid_document_raises(tmp_path):
    tmp_path.joinpath("bad.json").write_text('{"recurse": ')
    with pytest.raises(ConfigFileError):
        ConfigFileStore(base_dir=str(tmp_path)).load_dict("bad.json")


def test_non_mapping_document_raises(tmp_path):
    tmp_path.joinpath("list.json").write_text('["a", "b"]')
    with pytest.raises(ConfigFileError):
        ConfigFileStore(base_dir=str(tmp_path)).load_dict("list.json")


def test_empty_document_is_empty_config(tmp_path):
    tmp_path.joinpath("empty.yml").write_text("")
    assert ConfigFileStore(base_dir=str(tmp_path)).load_dict("empty.yml") == {}
