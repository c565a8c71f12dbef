# cmdmenus/navigation.py
"""Breadcrumb trail of the menus currently being traversed."""
from typing import Optional

from cmdmenus.config import settings


class NavigationStack:
    """Titles of the nested menus between the root and the current one."""

    def __init__(self):
        self.stack: list[str] = []

    def push(self, title: str) -> None:
        """Enter a menu."""
        self.stack.append(title)

    def pop(self) -> Optional[str]:
        """Leave the current menu and return its title.

        Returns None when no menu is being traversed.
        """
        if self.stack:
            return self.stack.pop()
        return None

    def current(self) -> Optional[str]:
        """Get the title of the innermost menu."""
        return self.stack[-1] if self.stack else None

    @property
    def depth(self) -> int:
        return len(self.stack)

    def breadcrumb(self, separator: Optional[str] = None) -> str:
        """Join the trail, e.g. ``Main › People › Marcel``."""
        if separator is None:
            separator = settings.render.breadcrumb_separator
        return separator.join(self.stack)
