# cmdmenus/errors.py
"""Errors raised when a menu tree is misused."""
from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from cmdmenus.list_menu import ListMenu
    from cmdmenus.menu import Menu
    from cmdmenus.option import Option


class MenuError(RuntimeError):
    """Base class for menu contract violations."""


class ConcurrentModificationError(MenuError):
    """Raised when a locked menu is structurally modified."""

    def __init__(self, menu: "Menu", operation: str):
        self.menu = menu
        self.operation = operation
        super().__init__(
            f'Impossible to {operation} in menu "{menu.title}" while running.'
        )


class DuplicateShortcutError(MenuError):
    """Raised when two options of the same menu share a shortcut."""

    def __init__(self, menu: "Menu", shortcut: str, option: Optional["Option"] = None):
        self.menu = menu
        self.shortcut = shortcut
        self.option = option
        super().__init__(
            f'Shortcut "{shortcut}" is already used in menu "{menu.title}".'
        )


class ManualOptionAddForbiddenError(MenuError):
    """Raised when an option is added by hand to a list."""

    def __init__(self, list_menu: "ListMenu", option: "Option"):
        self.list_menu = list_menu
        self.option = option
        super().__init__(
            f"It is forbidden to manually add an option ({option.title}) "
            f"in a list ({list_menu.title})."
        )


class NoListModelDefinedError(MenuError):
    """Raised when a list's data source returns no sequence."""

    def __init__(self, list_menu: "ListMenu"):
        self.list_menu = list_menu
        super().__init__(f"No list model defined for list {list_menu.title}.")


class NoListActionDefinedError(MenuError):
    """Raised when a list has no usable element mapping."""

    def __init__(self, list_menu: "ListMenu"):
        self.list_menu = list_menu
        super().__init__(f"No list action defined for list {list_menu.title}.")
