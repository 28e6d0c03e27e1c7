"""treeline - A bounded recursive tree formatter for the terminal."""

from typing import TYPE_CHECKING, Any

__all__ = [
    "__version__",
    "main",
    "TreeNode",
    "ThreadNode",
    "MenuNode",
    "TreeState",
    "TreeSession",
    "RenderInstruction",
    "render",
]

__version__ = "0.1.0"

if TYPE_CHECKING:
    from .cli import main
    from .domains.tree.app.session import TreeSession
    from .domains.tree.app.traversal import render
    from .domains.tree.domain.instructions import RenderInstruction
    from .domains.tree.domain.nodes import MenuNode, ThreadNode, TreeNode
    from .domains.tree.state.expansion import TreeState


def __getattr__(name: str) -> Any:
    """Lazy import so that importing the package does not pull in Textual."""
    if name == "main":
        from .cli import main

        return main
    if name == "TreeSession":
        from .domains.tree.app.session import TreeSession

        return TreeSession
    if name == "render":
        from .domains.tree.app.traversal import render

        return render
    if name == "RenderInstruction":
        from .domains.tree.domain.instructions import RenderInstruction

        return RenderInstruction
    if name in ("TreeNode", "ThreadNode", "MenuNode"):
        from .domains.tree.domain import nodes

        return getattr(nodes, name)
    if name == "TreeState":
        from .domains.tree.state.expansion import TreeState

        return TreeState
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
