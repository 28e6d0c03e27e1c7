"""Line emitter: maps render instructions to terminal text.

The emitter is stateless. It knows about indentation, icons and the
"continue thread" affordance, nothing about widgets or layout.
"""

from __future__ import annotations

from rich.text import Text

from treeline.domains.tree.domain.instructions import RenderInstruction
from treeline.domains.tree.domain.nodes import ThreadNode

from .icons import FILE_ICONS, IconSet

SHOW_REPLIES = "Show Replies"
HIDE_REPLIES = "Hide Replies"
REPLYING = "Replying…"


def _thread_body(node: ThreadNode, instruction: RenderInstruction, reply_form_open: bool) -> Text:
    body = Text(node.author or instruction.label, style="bold")
    if node.content:
        body.append(": ", style="dim")
        body.append(node.content)
    if instruction.has_children and not instruction.truncated:
        action = HIDE_REPLIES if instruction.is_expanded else SHOW_REPLIES
        body.append(f"  [{action}]", style="dim cyan")
    if reply_form_open:
        body.append(f"  {REPLYING}", style="italic yellow")
    return body


def format_line(
    instruction: RenderInstruction,
    icons: IconSet = FILE_ICONS,
    indent: int = 2,
    *,
    reply_form_open: bool = False,
) -> Text:
    """Format one instruction as a styled line.

    Indentation is ``indent * depth`` spaces. The icon distinguishes leaf,
    collapsed branch and expanded branch. Truncated instructions end with
    the continue-thread affordance.
    """
    line = Text(" " * (indent * instruction.depth))
    icon = icons.for_state(instruction.has_children, instruction.is_expanded)
    line.append(icon, style="bold" if instruction.has_children else "dim")
    line.append(" ")

    node = instruction.node
    if isinstance(node, ThreadNode):
        line.append_text(_thread_body(node, instruction, reply_form_open))
    else:
        line.append(instruction.label)

    if instruction.truncated:
        line.append("  ")
        line.append(icons.continue_text, style="underline blue")
    return line


def format_plain(
    instruction: RenderInstruction,
    icons: IconSet = FILE_ICONS,
    indent: int = 2,
    *,
    reply_form_open: bool = False,
) -> str:
    return format_line(instruction, icons, indent, reply_form_open=reply_form_open).plain
