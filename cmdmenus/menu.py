# cmdmenus/menu.py
"""Static menus: an ordered set of options read and dispatched in a loop."""
from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, Optional

from cmdmenus.config import settings
from cmdmenus.errors import ConcurrentModificationError, DuplicateShortcutError
from cmdmenus.option import BACK, QUIT, Action, Option, Signal
from cmdmenus.traversal import DepthFirstTraversal

if TYPE_CHECKING:
    from cmdmenus.rendering import MenuRenderer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Selection:
    option: Option
    signal: Signal


class Menu(Option):
    """A titled set of options that can itself be an option of another menu.

    While the menu is running it is locked: adding, removing or clearing
    options raises :class:`ConcurrentModificationError`.
    """

    def __init__(
        self,
        title: str,
        shortcut: Optional[str] = None,
        action: Optional[Action] = None,
        *,
        auto_back: bool = False,
        renderer: Optional["MenuRenderer"] = None,
    ):
        super().__init__(title, shortcut, action)
        self._options: list[Option] = []
        self._locked = False
        self.auto_back = auto_back
        self.renderer = renderer

    @property
    def navigable(self) -> "Menu":
        return self

    @property
    def options(self) -> tuple[Option, ...]:
        return tuple(self._options)

    def __len__(self) -> int:
        return len(self._options)

    def __iter__(self) -> Iterator[Option]:
        return iter(self.options)

    # ───────────────────────────────────────────────────────────────
    # Locking
    # ───────────────────────────────────────────────────────────────

    @property
    def locked(self) -> bool:
        return self._locked

    def set_locked(self, locked: bool) -> None:
        self._locked = locked

    def unlock(self) -> bool:
        """Unlock the menu and return the previous lock state."""
        was_locked = self._locked
        self._locked = False
        return was_locked

    @contextmanager
    def running(self) -> Iterator["Menu"]:
        """Lock the menu for one run, restoring the previous state on exit."""
        was_locked = self._locked
        self._locked = True
        try:
            yield self
        finally:
            self._locked = was_locked

    @contextmanager
    def unlocked(self) -> Iterator["Menu"]:
        was_locked = self.unlock()
        try:
            yield self
        finally:
            self._locked = was_locked

    def _check_unlocked(self, operation: str) -> None:
        if self._locked:
            raise ConcurrentModificationError(self, operation)

    # ───────────────────────────────────────────────────────────────
    # Structure
    # ───────────────────────────────────────────────────────────────

    def add(self, option: Option) -> None:
        self._check_unlocked(f'add option "{option.title}"')
        if option.shortcut is not None and self.find(option.shortcut) is not None:
            raise DuplicateShortcutError(self, option.shortcut, option)
        self._options.append(option)

    def remove(self, option: Option) -> None:
        self._check_unlocked(f'remove option "{option.title}"')
        self._options.remove(option)

    def clear_options(self) -> None:
        self._check_unlocked("clear options")
        self._options.clear()

    def add_quit(self, shortcut: str, title: Optional[str] = None) -> None:
        """Add an option leaving every enclosing menu."""
        self._check_unlocked('add "quit" option')
        self.add(Option(title or settings.render.quit_title, shortcut, QUIT))

    def add_back(self, shortcut: str, title: Optional[str] = None) -> None:
        """Add an option returning to the parent menu."""
        self._check_unlocked('add "back" option')
        self.add(Option(title or settings.render.back_title, shortcut, BACK))

    def find(self, choice: str) -> Optional[Option]:
        """Resolve user input to an option by shortcut, or by position for options without one."""
        for option in self._options:
            if option.shortcut is not None and option.shortcut == choice:
                return option
        if choice.isdigit():
            position = int(choice)
            if 1 <= position <= len(self._options):
                option = self._options[position - 1]
                if option.shortcut is None:
                    return option
        return None

    # ───────────────────────────────────────────────────────────────
    # Running
    # ───────────────────────────────────────────────────────────────

    def run_once(self, traversal: DepthFirstTraversal) -> Optional[Selection]:
        """Display the menu, read one valid choice and dispatch it.

        Returns None without prompting when the menu has no option.
        """
        if not self._options:
            return None
        renderer = self.renderer or traversal.renderer
        options = self.options
        renderer.header(self.title, traversal.trail)
        renderer.options(options)

        while True:
            choice = renderer.read_choice(options)
            option = self.find(choice)
            if option is not None:
                break
            logger.debug("Invalid choice %r in menu %s", choice, self.title)
            renderer.invalid_choice(choice)

        return Selection(option, traversal.dispatch(option))

    def start(self) -> Signal:
        """Run this menu as the root of a new traversal."""
        return DepthFirstTraversal(self.renderer).run(self)
