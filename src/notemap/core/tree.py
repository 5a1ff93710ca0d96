"""Navigation tree builder.

Builds a folder/file tree from flat note paths for the navigation UI.
At every level folders come before files, and names within each group
are compared ignoring case and accents, so "Émile" sorts next to "emile".
"""

import unicodedata
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Literal, NotRequired, TypedDict, cast

from notemap.core.codec import MD_SUFFIX
from notemap.core.errors import InvalidPathError

NodeType = Literal["folder", "file"]


class TreeNodeDict(TypedDict):
    """Dictionary representation of a tree node."""

    name: str
    type: NodeType
    path: str
    children: NotRequired[list["TreeNodeDict"]]


@dataclass
class TreeNode:
    """Folder or file node in the notes tree."""

    name: str
    type: NodeType
    path: str
    children: list["TreeNode"] | None = None

    def __post_init__(self) -> None:
        # Folders always have a children list, files never do
        if self.is_folder and self.children is None:
            self.children = []
        elif not self.is_folder:
            self.children = None

    @property
    def is_folder(self) -> bool:
        return self.type == "folder"

    def to_dict(self) -> TreeNodeDict:
        """Convert to dictionary for JSON serialization.

        Files never carry a children key, folders always do.
        """
        result: TreeNodeDict = {"name": self.name, "type": self.type, "path": self.path}
        if self.children is not None:
            result["children"] = [child.to_dict() for child in self.children]
        return result


def build_tree(paths: Iterable[str]) -> list[TreeNode]:
    """Build navigation tree from note paths.

    Args:
        paths: Note paths relative to the notes directory

    Returns:
        Sorted root nodes, empty for empty input

    Raises:
        InvalidPathError: If a path has empty components, lacks the ".md"
            suffix, or needs a folder where a file already is
    """
    nodes: dict[str, TreeNode] = {}
    roots: list[TreeNode] = []

    for path in sorted(paths):
        segments = _split(path)
        parent: TreeNode | None = None
        current_path = ""

        for i, segment in enumerate(segments):
            is_last = i == len(segments) - 1
            current_path = f"{current_path}/{segment}" if current_path else segment

            node = nodes.get(current_path)
            if node is None:
                node = TreeNode(
                    name=segment,
                    type="file" if is_last else "folder",
                    path=current_path,
                )
                nodes[current_path] = node
                if parent is None:
                    roots.append(node)
                else:
                    cast(list[TreeNode], parent.children).append(node)
            elif not is_last and not node.is_folder:
                raise InvalidPathError(path, f"{current_path} is a file, not a folder")
            elif is_last and node.is_folder:
                raise InvalidPathError(path, f"{current_path} is a folder, not a file")

            parent = node

    _sort_nodes(roots)
    return roots


def _split(path: str) -> list[str]:
    """Split a note path into components, rejecting malformed paths."""
    normalized = path.replace("\\", "/")
    if not normalized.endswith(MD_SUFFIX):
        raise InvalidPathError(path, f"path must end with {MD_SUFFIX}")

    segments = normalized.split("/")
    if any(not segment for segment in segments):
        raise InvalidPathError(path, "empty path components are not allowed")
    return segments


def _collation_key(name: str) -> str:
    """Accent- and case-insensitive form of a name."""
    decomposed = unicodedata.normalize("NFKD", name)
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    return stripped.casefold()


def _sort_key(node: TreeNode) -> tuple[int, str, str]:
    # Raw name keeps the order total
    return (0 if node.is_folder else 1, _collation_key(node.name), node.name)


def _sort_nodes(nodes: list[TreeNode]) -> None:
    """Recursively sort nodes: folders first, then by name."""
    nodes.sort(key=_sort_key)
    for node in nodes:
        if node.children is not None:
            _sort_nodes(node.children)
