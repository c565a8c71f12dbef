# cmdmenus/option.py
"""Selectable menu entries and the signals they hand back to the run loop."""
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Callable, Optional

from cmdmenus.config import settings

if TYPE_CHECKING:
    from cmdmenus.menu import Menu


class Signal(Enum):
    """Outcome of a selection, passed back up through every run frame."""
    CONTINUE = "continue"
    BACK = "back"
    QUIT = "quit"


Action = Callable[[], Optional[Signal]]


def QUIT() -> Signal:
    """Terminal action leaving every enclosing menu."""
    return Signal.QUIT


def BACK() -> Signal:
    """Terminal action leaving the current menu."""
    return Signal.BACK


class Option:
    """One entry of a menu: a title, an optional shortcut and an action.

    Title, shortcut and action are fixed at construction. The action is a
    zero-argument callable returning ``None`` or a :class:`Signal`.
    """

    def __init__(self, title: str, shortcut: Optional[str] = None, action: Optional[Action] = None):
        self._title = title
        self._shortcut = shortcut
        self._action = action

    @property
    def title(self) -> str:
        return self._title

    @property
    def shortcut(self) -> Optional[str]:
        return self._shortcut

    @property
    def action(self) -> Optional[Action]:
        return self._action

    @property
    def navigable(self) -> Optional["Menu"]:
        """Menu entered when this option is selected, if any."""
        return None

    def option_selected(self) -> Signal:
        """Invoke the bound action and normalize its result."""
        if self._action is None:
            return Signal.CONTINUE
        result = self._action()
        return result if isinstance(result, Signal) else Signal.CONTINUE

    def label(self, position: Optional[int] = None) -> str:
        """Display line, falling back to the 1-based position when there is no shortcut."""
        key = self._shortcut if self._shortcut is not None else str(position or "")
        return settings.render.option_format.format(shortcut=key, title=self._title)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._title!r}, shortcut={self._shortcut!r})"
