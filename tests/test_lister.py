import json
import os

import pytest

from dummyagent.lister import LIST_FILES_DEFINITION, list_files
from dummyagent.tooling import ToolError


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "b.txt").write_text("b")
    (tmp_path / "a_dir").mkdir()
    (tmp_path / "a_dir" / "inner.txt").write_text("i")
    (tmp_path / "c.txt").write_text("c")
    return tmp_path


def expected_listing():
    return ["a_dir/", os.path.join("a_dir", "inner.txt"), "b.txt", "c.txt"]


def test_lists_tree_in_lexical_depth_first_order(tree):
    result = list_files(json.dumps({"path": str(tree)}))
    assert json.loads(result) == expected_listing()


@pytest.mark.parametrize("arguments", ["", "null", "{}"])
def test_defaults_to_current_directory(tree, monkeypatch, arguments):
    monkeypatch.chdir(tree)
    assert json.loads(list_files(arguments)) == expected_listing()


def test_directories_have_trailing_slash(tree):
    entries = json.loads(list_files(json.dumps({"path": str(tree)})))
    directories = [entry for entry in entries if entry.endswith("/")]
    assert directories == ["a_dir/"]


def test_empty_directory_gives_null(tmp_path):
    assert json.loads(list_files(json.dumps({"path": str(tmp_path)}))) is None


def test_file_path_gives_null(tree):
    assert json.loads(list_files(json.dumps({"path": str(tree / "b.txt")}))) is None


def test_missing_directory_is_an_error(tmp_path):
    with pytest.raises(ToolError, match="error listing files in"):
        list_files(json.dumps({"path": str(tmp_path / "nope")}))


def test_invalid_json_is_rejected():
    with pytest.raises(ToolError, match="failed to parse input for list_files"):
        list_files("[1, 2")


def test_definition_has_no_required_fields(tree):
    assert LIST_FILES_DEFINITION.name == "list_files"
    assert "required" not in LIST_FILES_DEFINITION.input_schema
    result = LIST_FILES_DEFINITION.function(json.dumps({"path": str(tree)}))
    assert json.loads(result) == expected_listing()