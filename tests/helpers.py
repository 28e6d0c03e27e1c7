"""Tree builders shared by the test modules."""

from __future__ import annotations

from treeline.domains.tree.domain.nodes import ThreadNode, TreeNode


def node(node_id, *children, label: str = "") -> TreeNode:
    return TreeNode(id=node_id, label=label or f"node-{node_id}", children=list(children))


def chain(length: int, node_type=TreeNode) -> TreeNode:
    """A single path of ``length`` nodes with ids 0..length-1."""
    root = node_type(id=0, label="n0")
    current = root
    for i in range(1, length):
        child = node_type(id=i, label=f"n{i}")
        current.children.append(child)
        current = child
    return root


def thread(depth: int) -> ThreadNode:
    """A comment thread nested ``depth`` replies deep (depth + 1 comments)."""
    root = ThreadNode(id="c0", author="author0", content="comment 0")
    current = root
    for i in range(1, depth + 1):
        reply = ThreadNode(id=f"c{i}", author=f"author{i}", content=f"comment {i}")
        current.children.append(reply)
        current = reply
    return root


def ids(instructions) -> list:
    return [i.node_id for i in instructions]
