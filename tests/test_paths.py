import os

import pytest

from metamanager import paths
from metamanager.errors import UninitializedRootError


@pytest.fixture
def mock_tree(tmp_path):
    """Build the directory layout used by the original lookup test."""
    root = tmp_path / "1_1"
    root.mkdir()
    (root / "1_a").touch()
    (root / "1_b").touch()
    (root / "2_1").mkdir()
    (root / "2_1" / "2_a").touch()
    (root / "2_2").mkdir()
    (root / "2_2" / "3_1").mkdir()
    (root / ".mm").mkdir()
    return root


def test_find_mm_dir_path_from_nested_dir(mock_tree):
    start = os.path.join(str(mock_tree), "2_2", "3_1")
    found = paths.find_mm_dir_path_from(start)
    assert found == os.path.join(str(mock_tree), ".mm")


def test_find_mm_dir_path_from_root_itself(mock_tree):
    assert paths.find_mm_dir_path_from(str(mock_tree)) == os.path.join(
        str(mock_tree), ".mm"
    )


def test_find_mm_dir_path_uses_env(mock_tree, monkeypatch):
    monkeypatch.setenv(paths.ENV_DIR_VARIABLE, str(mock_tree / "2_1"))
    assert paths.find_mm_dir_path() == os.path.join(str(mock_tree), ".mm")


def test_find_root_dir_is_parent_of_mm(mock_tree, monkeypatch):
    monkeypatch.setenv(paths.ENV_DIR_VARIABLE, str(mock_tree / "2_2" / "3_1"))
    assert paths.find_root_dir() == str(mock_tree)


def test_require_initialized_returns_mm_dir(mock_tree, monkeypatch):
    monkeypatch.setenv(paths.ENV_DIR_VARIABLE, str(mock_tree))
    assert paths.require_initialized() == os.path.join(str(mock_tree), ".mm")


def test_require_initialized_raises_without_mm(tmp_path, monkeypatch):
    monkeypatch.setenv(paths.ENV_DIR_VARIABLE, str(tmp_path))
    with pytest.raises(UninitializedRootError):
        paths.require_initialized()


def test_find_root_dir_none_without_mm(tmp_path, monkeypatch):
    monkeypatch.setenv(paths.ENV_DIR_VARIABLE, str(tmp_path))
    assert paths.find_root_dir() is None


def test_is_file_present(mock_tree):
    assert paths.is_file_present(mock_tree / "1_a") is True
    assert paths.is_file_present(mock_tree / "2_2") is True
    assert paths.is_file_present(mock_tree / "missing") is False


def test_is_mm_dir_present(mock_tree):
    assert paths.is_mm_dir_present(str(mock_tree)) is True
    assert paths.is_mm_dir_present(str(mock_tree / "2_1")) is False


def test_is_root_initialized_follows_cwd(mock_tree, monkeypatch):
    monkeypatch.chdir(mock_tree)
    assert paths.is_root_initialized() is True
    monkeypatch.chdir(mock_tree / "2_1")
    assert paths.is_root_initialized() is False


def test_get_abs_mm_dir_path(mock_tree, monkeypatch):
    monkeypatch.chdir(mock_tree)
    assert paths.get_abs_mm_dir_path() == os.path.join(os.getcwd(), ".mm")


def test_is_file_empty(tmp_path):
    empty = tmp_path / "empty"
    empty.touch()
    full = tmp_path / "full"
    full.write_bytes(b"data")
    assert paths.is_file_empty(empty) is True
    assert paths.is_file_empty(full) is False


def test_is_file_empty_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        paths.is_file_empty(tmp_path / "nope")


def test_save_to_file_round_trip(tmp_path):
    target = tmp_path / "out.json"
    paths.save_to_file(target, b'{"a":1}')
    assert target.read_bytes() == b'{"a":1}'
    paths.save_to_file(target, b"x")
    assert target.read_bytes() == b"x"