import json

import pytest

from metamanager.nodes import (
    DirNode,
    FileNode,
    FileNodeJSONSerializer,
    GeneralNode,
    create_tree_node,
    create_tree_node_from_path,
)
from metamanager.tree import TreeNode, walk


def _sample_tree():
    return TreeNode(
        DirNode(),
        [
            TreeNode(FileNode()),
            TreeNode(
                DirNode(),
                [
                    TreeNode(DirNode(), [TreeNode(FileNode())]),
                    TreeNode(DirNode()),
                    TreeNode(DirNode()),
                    TreeNode(FileNode()),
                ],
            ),
            TreeNode(FileNode()),
        ],
    )


def test_data_serialization_preserves_kinds():
    serializer = FileNodeJSONSerializer()
    encoded = _sample_tree().to_json(serializer)
    decoded = TreeNode.from_json(encoded, serializer)

    kinds = [type(node.info) for node in walk(decoded)]

    assert len(kinds) == 9
    assert kinds.count(DirNode) == 5
    assert kinds.count(FileNode) == 4


def test_tree_round_trip_keeps_paths_tags_and_ids():
    serializer = FileNodeJSONSerializer()
    root = TreeNode(DirNode(abs_path="/r", tags=["a"], id="root"))
    root.add_child(TreeNode(FileNode(abs_path="/r/f", tags=["x", "y"])))
    decoded = TreeNode.from_json(root.to_json(serializer), serializer)
    assert decoded.info == DirNode(abs_path="/r", tags=["a"], id="root")
    assert decoded.children[0].info == FileNode(abs_path="/r/f", tags=["x", "y"])


def test_add_tag_ignores_duplicates():
    node = FileNode(abs_path="/p")
    node.add_tag("one")
    node.add_tag("two")
    node.add_tag("one")
    assert node.tags == ["one", "two"]


def test_delete_tag_removes_only_that_tag():
    node = DirNode(abs_path="/p", tags=["one", "two"])
    node.delete_tag("one")
    assert node.tags == ["two"]
    node.delete_tag("missing")
    assert node.tags == ["two"]


def test_node_json_field_names():
    document = json.loads(FileNode(abs_path="/p", tags=["t"], id="i").to_json())
    assert document == {"Parent": "/p", "Tags": ["t"], "Id": "i"}


def test_node_json_without_tags_is_null():
    document = json.loads(DirNode(abs_path="/p").to_json())
    assert document["Tags"] is None


def test_node_from_json_round_trip():
    original = DirNode(abs_path="/d", tags=["k"], id="d1")
    assert DirNode.from_json(original.to_json()) == original


def test_general_node_kind_names():
    assert FileNode().name == "FILE"
    assert DirNode().name == "DIR"
    assert isinstance(FileNode(), GeneralNode)


def test_marshal_tags_kind():
    serializer = FileNodeJSONSerializer()
    assert serializer.info_marshal(FileNode(abs_path="/f"))[1] == "FILE"
    assert serializer.info_marshal(DirNode(abs_path="/d"))[1] == "DIR"


def test_unmarshal_unknown_kind_raises():
    serializer = FileNodeJSONSerializer()
    with pytest.raises(ValueError, match="unknown serializationInfo: LINK found"):
        serializer.info_unmarshal(b"{}", "LINK")


def test_marshal_rejects_foreign_payload():
    with pytest.raises(TypeError):
        FileNodeJSONSerializer().info_marshal(object())


def test_create_tree_node_by_kind():
    assert isinstance(create_tree_node("/a", True).info, DirNode)
    node = create_tree_node("/a/b", False)
    assert isinstance(node.info, FileNode)
    assert node.info.abs_path == "/a/b"
    assert node.children == []


def test_create_tree_node_from_path_reads_disk(tmp_path):
    file_path = tmp_path / "f.txt"
    file_path.write_text("x")
    assert isinstance(create_tree_node_from_path(str(tmp_path)).info, DirNode)
    file_node = create_tree_node_from_path(str(file_path))
    assert isinstance(file_node.info, FileNode)
    assert file_node.info.abs_path == str(file_path)


def test_create_tree_node_from_missing_path_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        create_tree_node_from_path(str(tmp_path / "missing"))