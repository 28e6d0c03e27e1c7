"""Tree node types for the file tree, comment thread and menu views."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Mapping, Union

from .errors import MalformedTreeError

NodeId = Union[str, int]

SYNTHETIC_ROOT_ID = "__root__"


class ViewKind(str, Enum):
    TREE = "tree"
    THREAD = "thread"
    MENU = "menu"


def _check_node_id(value: Any) -> NodeId:
    # bool is an int subclass but never a meaningful id
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise MalformedTreeError(f"node id must be a string or integer, got {type(value).__name__}")
    return value


@dataclass(eq=False)
class TreeNode:
    """A node in an arbitrary-arity tree.

    ``children`` may be omitted or ``None``; both mean the node is a leaf.
    Nodes compare by identity so that cyclic input cannot recurse through ``==``.
    """

    id: NodeId
    label: str = ""
    children: list[TreeNode] = field(default_factory=list)

    CHILD_KEYS: ClassVar[tuple[str, ...]] = ("children", "replies")

    def __post_init__(self) -> None:
        if self.children is None:
            self.children = []

    @property
    def has_children(self) -> bool:
        return bool(self.children)

    @property
    def display_label(self) -> str:
        return self.label if self.label else str(self.id)

    @classmethod
    def _fields_from_mapping(cls, data: Mapping[str, Any]) -> dict[str, Any]:
        label = data.get("label", data.get("name", ""))
        return {"label": "" if label is None else str(label)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TreeNode:
        """Build a tree from nested mappings such as decoded JSON.

        The walk uses an explicit stack, so nesting depth is bounded only by
        memory. A mapping reachable more than once (shared or cyclic) is
        rejected.

        Raises:
            MalformedTreeError: If a mapping lacks an id, has a non-list
                children value, or appears more than once in the structure.
        """
        seen: set[int] = set()
        root = cls._node_from_mapping(data, seen)
        stack: list[tuple[TreeNode, Mapping[str, Any]]] = [(root, data)]
        while stack:
            node, mapping = stack.pop()
            for child_data in cls._child_mappings(mapping, node.id):
                child = cls._node_from_mapping(child_data, seen)
                node.children.append(child)
                stack.append((child, child_data))
        return root

    @classmethod
    def _node_from_mapping(cls, data: Any, seen: set[int]) -> TreeNode:
        if not isinstance(data, Mapping):
            raise MalformedTreeError(f"expected an object, got {type(data).__name__}")
        if "id" not in data:
            raise MalformedTreeError("node is missing an 'id'")
        node_id = _check_node_id(data["id"])
        if id(data) in seen:
            raise MalformedTreeError("node appears more than once (cycle or shared subtree)", node_id=node_id)
        seen.add(id(data))
        return cls(id=node_id, children=[], **cls._fields_from_mapping(data))

    @classmethod
    def _child_mappings(cls, data: Mapping[str, Any], node_id: NodeId) -> list[Any]:
        for key in cls.CHILD_KEYS:
            if key in data:
                value = data[key]
                if value is None:
                    return []
                if not isinstance(value, list):
                    raise MalformedTreeError(f"'{key}' must be a list", node_id=node_id)
                return value
        return []


@dataclass(eq=False)
class ThreadNode(TreeNode):
    """A comment in a nested thread. ``replies`` is an alias of ``children``."""

    author: str = ""
    content: str = ""

    CHILD_KEYS: ClassVar[tuple[str, ...]] = ("replies", "children")

    @property
    def replies(self) -> list[TreeNode]:
        return self.children

    @property
    def display_label(self) -> str:
        if self.label:
            return self.label
        return self.author or str(self.id)

    @classmethod
    def _fields_from_mapping(cls, data: Mapping[str, Any]) -> dict[str, Any]:
        fields = super()._fields_from_mapping(data)
        fields["author"] = str(data.get("author") or "")
        fields["content"] = str(data.get("content") or "")
        return fields


@dataclass(eq=False)
class MenuNode(TreeNode):
    """A menu entry with unlimited nesting."""


NODE_TYPES: dict[ViewKind, type[TreeNode]] = {
    ViewKind.TREE: TreeNode,
    ViewKind.THREAD: ThreadNode,
    ViewKind.MENU: MenuNode,
}


def parse_tree(data: Any, kind: ViewKind | str = ViewKind.TREE, *, root_label: str = "(root)") -> TreeNode:
    """Parse decoded JSON into a node tree for the given view kind.

    A list at the top level (a menu bar, a list of threads) is wrapped in a
    synthetic root whose id is ``SYNTHETIC_ROOT_ID`` and whose label is
    ``root_label``.
    """
    node_type = NODE_TYPES[ViewKind(kind)]
    if isinstance(data, list):
        data = {"id": SYNTHETIC_ROOT_ID, "label": root_label, "children": data}
    return node_type.from_dict(data)
