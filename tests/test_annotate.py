import os

import pytest

from metamanager.annotate import (
    id_get,
    id_jump,
    id_set,
    node_tags,
    render_tracks,
    tag_add,
    tag_delete,
    tag_get,
)
from metamanager.errors import (
    InvalidOperationError,
    NodeNotFoundError,
    UninitializedRootError,
)
from metamanager.tracking import init_root, track_path


@pytest.fixture
def root(tmp_path, monkeypatch):
    top = tmp_path / "1_1"
    top.mkdir()
    (top / "1_a").touch()
    (top / "1_b").touch()
    (top / "2_1").mkdir()
    (top / "2_1" / "2_a").touch()
    (top / "2_2").mkdir()
    (top / "2_2" / "3_1").mkdir()
    monkeypatch.setenv("MM_TEST_ENV_DIR", str(top))
    monkeypatch.chdir(top)
    return str(top)


@pytest.fixture
def tracked(root):
    init_root(root)
    track_path(root + "*")
    return root


def test_tag_add_and_get_e2e(tracked):
    root = tracked
    loc = os.path.join(root, "1_a")
    loc2 = os.path.join(root, "2_1", "2_a")
    loc3 = os.path.join(root, "2_2")
    loc4 = os.path.join(root, "2_2", "3_1")

    tags = ["hello", "world", "2", "random"]
    locs = [loc, loc2, loc3, loc4]
    for location, tag in zip(locs, tags):
        tag_add(location, tag)

    tag_add(loc3, "Hello World")
    tag_add(loc, "Hello World")

    for location, tag in zip(locs, tags):
        assert tag_get(tag) == [location]

    assert sorted(tag_get("Hello World")) == [loc, loc3]


def test_tag_added_twice_is_kept_once(tracked):
    loc = os.path.join(tracked, "1_b")
    tag_add(loc, "dup")
    tag_add(loc, "dup")
    assert node_tags(loc) == ["dup"]


def test_node_tags_keep_insertion_order(tracked):
    loc = os.path.join(tracked, "2_1")
    tag_add(loc, "b")
    tag_add(loc, "a")
    assert node_tags(loc) == ["b", "a"]


def test_tag_delete_removes_only_that_tag(tracked):
    loc = os.path.join(tracked, "1_a")
    tag_add(loc, "keep")
    tag_add(loc, "drop")
    tag_delete(loc, "drop")
    assert node_tags(loc) == ["keep"]
    assert tag_get("drop") == []


def test_tag_get_unknown_tag_is_empty(tracked):
    assert tag_get("nothing") == []


def test_tag_add_untracked_path_raises(root):
    init_root(root)
    with pytest.raises(NodeNotFoundError):
        tag_add(os.path.join(root, "1_a"), "x")


def test_id_set_get_and_jump(tracked):
    loc = os.path.join(tracked, "2_2", "3_1")
    id_set(loc, "deep")
    assert id_get(loc) == "deep"
    assert id_jump("deep") == loc


def test_id_get_unset_reports_empty(tracked):
    assert id_get(os.path.join(tracked, "1_b")) == "<empty>"


def test_id_set_duplicate_raises(tracked):
    first = os.path.join(tracked, "1_a")
    id_set(first, "same")
    with pytest.raises(InvalidOperationError, match="already set for node"):
        id_set(os.path.join(tracked, "1_b"), "same")
    assert id_get(os.path.join(tracked, "1_b")) == "<empty>"


def test_id_jump_unknown_raises(tracked):
    with pytest.raises(NodeNotFoundError):
        id_jump("missing")


def test_render_tracks_with_ids_and_tags(tracked):
    id_set(tracked, "top")
    tag_add(os.path.join(tracked, "1_a"), "marked")
    output = render_tracks(True, True)
    lines = output.splitlines()
    assert lines[0].endswith("1_1")
    assert any(line.endswith("id: top") for line in lines)
    assert any(line.endswith("<tags>") for line in lines)
    assert any(line.endswith("marked") for line in lines)
    assert any(line.endswith("2_a") for line in lines)


def test_render_tracks_plain_omits_extras(tracked):
    id_set(tracked, "top")
    tag_add(os.path.join(tracked, "1_a"), "marked")
    output = render_tracks(False, False)
    assert "id: top" not in output
    assert "<tags>" not in output
    assert "3_1" in output


def test_commands_require_initialized_root(root):
    with pytest.raises(UninitializedRootError):
        tag_get("anything")