"""Tests for navigation tree builder."""

import pytest
from notemap.core.errors import InvalidPathError
from notemap.core.tree import TreeNode, build_tree


class TestBuildTree:
    """Tests for build_tree()."""

    def test__empty_input__returns_empty(self) -> None:
        """Return empty forest for no paths."""
        assert build_tree([]) == []

    def test__folders_before_files_alphabetical(self) -> None:
        """Order folders first, then files, each alphabetically."""
        tree = build_tree(
            [
                "folder/zebra.md",
                "folder/alpha.md",
                "folder/subfolder-z/file.md",
                "folder/subfolder-a/file.md",
            ]
        )

        assert len(tree) == 1
        folder = tree[0]
        assert [child.name for child in folder.children] == [
            "subfolder-a",
            "subfolder-z",
            "alpha.md",
            "zebra.md",
        ]

    def test__nested_shape(self) -> None:
        """Share ancestor folders between paths."""
        tree = build_tree(["a/b.md", "a/c/d.md"])

        assert len(tree) == 1
        a = tree[0]
        assert a.type == "folder"
        assert a.path == "a"
        assert len(a.children) == 2

        c, b = a.children
        assert c == TreeNode(
            name="c",
            type="folder",
            path="a/c",
            children=[TreeNode(name="d.md", type="file", path="a/c/d.md")],
        )
        assert b == TreeNode(name="b.md", type="file", path="a/b.md")

    def test__root_level_ordering(self) -> None:
        """Sort root nodes like any other level."""
        tree = build_tree(["simple-file.md", "File with spaces.md", "20-area/x.md"])

        assert [node.name for node in tree] == [
            "20-area",
            "File with spaces.md",
            "simple-file.md",
        ]

    def test__case_insensitive_order(self) -> None:
        """Order names without splitting upper and lower case."""
        tree = build_tree(["beta.md", "Alpha.md", "alpha2.md", "Gamma.md"])

        assert [node.name for node in tree] == [
            "Alpha.md",
            "alpha2.md",
            "beta.md",
            "Gamma.md",
        ]

    def test__accented_names__sorted_with_plain_letters(self) -> None:
        """Order accented names by their base letters, not after "z"."""
        tree = build_tree(["zebra.md", "éclair.md", "apple.md", "Émile.md"])

        assert [node.name for node in tree] == [
            "apple.md",
            "éclair.md",
            "Émile.md",
            "zebra.md",
        ]

    def test__accent_only_difference__tie_broken_by_name(self) -> None:
        """Keep a total order when names differ only by accents."""
        tree = build_tree(["résumé.md", "resume.md"])

        assert [node.name for node in tree] == ["resume.md", "résumé.md"]

    def test__file_nodes__have_no_children(self) -> None:
        """Leave children unset on files and set on folders."""
        tree = build_tree(["a.md", "b/c.md"])

        folder, file = tree
        assert file.children is None
        assert folder.children is not None
        assert folder.children[0].children is None

    def test__input_order_irrelevant(self) -> None:
        """Build the same tree regardless of input order."""
        paths = ["x/b.md", "a.md", "x/y/c.md", "x/a.md"]

        assert build_tree(paths) == build_tree(list(reversed(paths)))

    def test__duplicate_paths__merged(self) -> None:
        """Create one node for repeated paths."""
        tree = build_tree(["a/b.md", "a/b.md"])

        assert len(tree[0].children) == 1

    def test__backslashes__normalized(self) -> None:
        """Treat backslashes as separators."""
        tree = build_tree(["a\\b.md"])

        assert tree[0].children[0].path == "a/b.md"

    def test__fresh_forest_per_call(self) -> None:
        """Return independent trees from separate calls."""
        first = build_tree(["a/b.md"])
        second = build_tree(["a/b.md"])
        first[0].children.clear()

        assert len(second[0].children) == 1

    @pytest.mark.parametrize("path", ["a//b.md", "/a.md", "a/", "a/b.txt", ""])
    def test__malformed_path__raises(self, path: str) -> None:
        """Reject empty components and missing suffix."""
        with pytest.raises(InvalidPathError):
            build_tree(["ok.md", path])

    def test__file_used_as_folder__raises(self) -> None:
        """Reject a path that needs a folder where a file is."""
        with pytest.raises(InvalidPathError):
            build_tree(["a.md", "a.md/b.md"])


class TestTreeNodeToDict:
    """Tests for TreeNode.to_dict()."""

    def test__file__has_no_children_key(self) -> None:
        """Omit children for files."""
        node = TreeNode(name="b.md", type="file", path="a/b.md")

        assert node.to_dict() == {"name": "b.md", "type": "file", "path": "a/b.md"}

    def test__file_with_children_argument__dropped(self) -> None:
        """Ignore a children list passed for a file."""
        node = TreeNode(name="b.md", type="file", path="b.md", children=[])

        assert node.children is None
        assert "children" not in node.to_dict()

    def test__empty_folder__has_children_key(self) -> None:
        """Always include children for folders."""
        node = TreeNode(name="a", type="folder", path="a")

        assert node.to_dict() == {
            "name": "a",
            "type": "folder",
            "path": "a",
            "children": [],
        }

    def test__nested__serialized(self) -> None:
        """Serialize the whole subtree."""
        tree = build_tree(["a/b.md"])

        assert tree[0].to_dict() == {
            "name": "a",
            "type": "folder",
            "path": "a",
            "children": [{"name": "b.md", "type": "file", "path": "a/b.md"}],
        }
