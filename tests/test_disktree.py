import pytest

from contestkit.disktree import DiskTree, split_path


def test_split_path_components():
    assert split_path("home\\games\\a") == ["home", "games", "a"]


def test_split_path_drops_empty_components():
    assert split_path("\\a\\\\b\\") == ["a", "b"]


def test_split_path_empty():
    assert split_path("") == []


def test_worked_example():
    tree = DiskTree(["home\\games\\a", "home\\games\\b"])
    assert list(tree.lines()) == ["home", " games", "  a", "  b"]


def test_children_sorted_bytewise():
    tree = DiskTree(["b", "a", "B"])
    assert list(tree.lines()) == ["B", "a", "b"]


def test_duplicate_paths_merge():
    tree = DiskTree()
    tree.add_path("x\\y\\z")
    tree.add_path("x\\y\\z")
    tree.add_path("x\\y")
    assert list(tree.lines()) == ["x", " y", "  z"]


def test_insert_matches_add_path():
    by_parts = DiskTree()
    by_parts.insert(["usr", "lib"])
    by_path = DiskTree(["usr\\lib"])
    assert list(by_parts.lines()) == list(by_path.lines())


def test_render_joins_lines_with_newlines():
    tree = DiskTree(["p\\q", "r"])
    assert tree.render() == "".join(line + "\n" for line in tree.lines())
    assert tree.render().endswith("\n")


def test_empty_tree():
    tree = DiskTree()
    assert list(tree.lines()) == []
    assert tree.render() == ""


@pytest.mark.parametrize(
    "paths",
    [["a\\b\\c\\d"], ["m\\n", "m\\o\\p", "q"], ["k\\l", "k\\l\\m\\n"]],
)
def test_indentation_never_jumps_more_than_one_level(paths):
    lines = list(DiskTree(paths).lines())
    depths = [len(line) - len(line.lstrip(" ")) for line in lines]
    assert depths[0] == 0
    for before, after in zip(depths, depths[1:]):
        assert after <= before + 1