"""Sample data for the demo app: a file tree, a comment thread and a menu bar."""

from __future__ import annotations

from typing import Any

FILE_SYSTEM_DATA: dict[str, Any] = {
    "id": "1",
    "name": "Root",
    "children": [
        {
            "id": "2",
            "name": "Documents",
            "children": [
                {"id": "3", "name": "report.pdf"},
                {"id": "4", "name": "data.xlsx"},
            ],
        },
        {
            "id": "5",
            "name": "Images",
            "children": [{"id": "6", "name": "photo.jpg"}],
        },
    ],
}

COMMENT_DATA: dict[str, Any] = {
    "id": "1",
    "author": "John Doe",
    "content": "Great article!",
    "replies": [
        {
            "id": "2",
            "author": "Jane Smith",
            "content": "Thanks John!",
            "replies": [
                {
                    "id": "3",
                    "author": "Bob Wilson",
                    "content": "I agree with both of you",
                    "replies": [
                        {
                            "id": "4",
                            "author": "Alice Chen",
                            "content": "Same here",
                            "replies": [
                                {"id": "5", "author": "Dan Park", "content": "Late to the party"},
                            ],
                        },
                    ],
                },
            ],
        },
    ],
}

MENU_DATA: list[dict[str, Any]] = [
    {
        "id": "1",
        "label": "File",
        "children": [
            {"id": "2", "label": "New"},
            {
                "id": "3",
                "label": "Open",
                "children": [{"id": "4", "label": "Recent Files"}],
            },
        ],
    },
    {
        "id": "5",
        "label": "Edit",
        "children": [
            {"id": "6", "label": "Copy"},
            {"id": "7", "label": "Paste"},
        ],
    },
]
