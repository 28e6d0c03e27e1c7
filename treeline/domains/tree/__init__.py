"""Bounded recursive tree formatter: file trees, comment threads and menus."""
