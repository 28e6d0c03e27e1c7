#!/usr/bin/env python3
"""treeline - render file trees, comment threads and menus in the terminal."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape as escape_markup

from .domains.tree.domain.errors import MalformedTreeError
from .domains.tree.domain.nodes import NodeId, TreeNode, ViewKind


def _resolve_node_id(root: TreeNode, raw: str) -> NodeId:
    """Map a command-line id to the id used in the data (ints stay ints)."""
    from .domains.tree.app.traversal import iter_nodes

    for node in iter_nodes(root):
        if str(node.id) == raw:
            return node.id
    return raw


def _load_json(path: str) -> Any:
    if path == "-":
        return json.load(sys.stdin)
    with open(Path(path).expanduser(), encoding="utf-8") as f:
        return json.load(f)


def cmd_render(args: argparse.Namespace) -> int:
    from .config import load_view_config
    from .domains.tree.app.session import TreeSession
    from .domains.tree.domain.nodes import parse_tree

    console = Console()
    err_console = Console(stderr=True)

    try:
        data = _load_json(args.path)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        err_console.print(f"[red]Error:[/] could not read {escape_markup(args.path)}: {escape_markup(str(e))}")
        return 1

    try:
        config = load_view_config(args.view)
    except OSError as e:
        err_console.print(f"[red]Error:[/] could not read settings: {escape_markup(str(e))}")
        return 1
    except ValueError as e:
        err_console.print(f"[red]Error:[/] {escape_markup(str(e))}")
        return 1

    try:
        if args.unbounded:
            config = replace(config, max_depth=None)
        elif args.max_depth is not None:
            config = replace(config, max_depth=args.max_depth)
        root = parse_tree(data, args.view)
        session = TreeSession(root, config)
        if args.expand_all:
            session.expand_all()
        for raw in args.toggle or []:
            session.toggle(_resolve_node_id(root, raw))
        instructions = session.render()
    except (MalformedTreeError, ValueError) as e:
        err_console.print(f"[red]Error:[/] {escape_markup(str(e))}")
        return 1

    if args.format == "json":
        print(json.dumps([i.as_dict() for i in instructions], indent=2))
    elif args.format == "plain":
        for line in session.lines(instructions):
            print(line.plain)
    else:
        for line in session.lines(instructions):
            console.print(line)
    return 0


VIEW_SETTING_KEYS = ("default_expanded", "max_depth", "indent", "icons")


def cmd_config_set(args: argparse.Namespace) -> int:
    """Store one per-view override after checking it against the preset."""
    from .config import PRESETS, apply_overrides
    from .stores.settings import SettingsStore

    err_console = Console(stderr=True)

    try:
        value = json.loads(args.value)
    except json.JSONDecodeError:
        value = args.value
    if args.key == "icons" and not isinstance(value, dict):
        err_console.print("[red]Error:[/] icons must be a JSON object")
        return 1
    try:
        apply_overrides(PRESETS[ViewKind(args.view)], {args.key: value})
    except ValueError as e:
        err_console.print(f"[red]Error:[/] {escape_markup(str(e))}")
        return 1

    store = SettingsStore()
    try:
        store.set_view_override(args.view, args.key, value)
    except OSError as e:
        err_console.print(f"[red]Error:[/] could not write {escape_markup(str(store.file_path))}: {escape_markup(str(e))}")
        return 1
    print(f"{args.view}.{args.key} = {json.dumps(value)}")
    return 0


def cmd_config_show(args: argparse.Namespace) -> int:
    from .config import load_view_config

    err_console = Console(stderr=True)
    kinds = [args.view] if args.view else [k.value for k in ViewKind]
    try:
        configs = [load_view_config(kind) for kind in kinds]
    except OSError as e:
        err_console.print(f"[red]Error:[/] could not read settings: {escape_markup(str(e))}")
        return 1
    except ValueError as e:
        err_console.print(f"[red]Error:[/] {escape_markup(str(e))}")
        return 1

    for config in configs:
        print(
            json.dumps(
                {
                    "view": config.kind.value,
                    "default_expanded": config.default_expanded,
                    "max_depth": config.max_depth,
                    "indent": config.indent,
                }
            )
        )
    return 0


def cmd_demo(args: argparse.Namespace) -> int:
    from .domains.tree.ui.app import TreelineDemoApp

    TreelineDemoApp().run()
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="treeline",
        description="Render trees with per-node expand/collapse state and depth limits",
    )
    parser.add_argument(
        "--settings",
        metavar="PATH",
        help="Path to settings JSON file (overrides ~/.treeline/settings.json)",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    render_parser = subparsers.add_parser("render", help="Render a JSON tree to the terminal")
    render_parser.add_argument("path", help="Path to a JSON file, or - for stdin")
    render_parser.add_argument(
        "--view",
        choices=[k.value for k in ViewKind],
        default=ViewKind.TREE.value,
        help="View kind (default: tree)",
    )
    depth_group = render_parser.add_mutually_exclusive_group()
    depth_group.add_argument("--max-depth", type=int, metavar="N", help="Override the depth cutoff")
    depth_group.add_argument("--unbounded", action="store_true", help="Disable the depth cutoff")
    render_parser.add_argument("--expand-all", action="store_true", help="Expand every branch first")
    render_parser.add_argument(
        "--toggle",
        action="append",
        metavar="ID",
        help="Toggle a node before rendering (repeatable, applied in order)",
    )
    render_parser.add_argument(
        "--format",
        choices=["text", "plain", "json"],
        default="text",
        help="Output format (default: text)",
    )
    render_parser.set_defaults(func=cmd_render)

    config_parser = subparsers.add_parser("config", help="Show or change per-view settings")
    config_subparsers = config_parser.add_subparsers(dest="config_command")

    set_parser = config_subparsers.add_parser("set", help="Store a per-view override")
    set_parser.add_argument("view", choices=[k.value for k in ViewKind], help="View kind")
    set_parser.add_argument("key", choices=VIEW_SETTING_KEYS, help="Setting name")
    set_parser.add_argument("value", help="JSON value, e.g. 5, null, true or '{\"leaf\": \"*\"}'")
    set_parser.set_defaults(func=cmd_config_set)

    show_parser = config_subparsers.add_parser("show", help="Print the effective view settings")
    show_parser.add_argument("view", nargs="?", choices=[k.value for k in ViewKind], help="View kind")
    show_parser.set_defaults(func=cmd_config_show)

    demo_parser = subparsers.add_parser("demo", help="Launch the interactive demo")
    demo_parser.set_defaults(func=cmd_demo)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.settings:
        os.environ["TREELINE_SETTINGS_PATH"] = str(Path(args.settings).expanduser())
    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if not getattr(args, "func", None):
        parser.print_help()
        return 0
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
