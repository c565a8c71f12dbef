# cmdmenus/traversal.py
"""Depth-first execution of nested menus."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from cmdmenus.navigation import NavigationStack
from cmdmenus.option import Option, Signal
from cmdmenus.rendering import MenuRenderer

if TYPE_CHECKING:
    from cmdmenus.menu import Menu

logger = logging.getLogger(__name__)


class DepthFirstTraversal:
    """Runs a menu and, synchronously, every menu entered from it.

    Entering a sub-menu is a nested :meth:`run` call and leaving it is the
    return from that call, so the call stack is the navigation history.
    A ``QUIT`` signal is handed back by every frame up to the root.
    """

    def __init__(self, renderer: Optional[MenuRenderer] = None, trail: Optional[NavigationStack] = None):
        self.renderer = renderer or MenuRenderer()
        self.trail = trail or NavigationStack()

    def run(self, menu: "Menu") -> Signal:
        """Loop over ``menu`` until back, quit, auto-back or nothing to select."""
        self.trail.push(menu.title)
        logger.debug("Entering menu %s (depth %d)", menu.title, self.trail.depth)
        try:
            with menu.running():
                while True:
                    selection = menu.run_once(self)
                    if selection is None:
                        return Signal.CONTINUE
                    if selection.signal is Signal.QUIT:
                        logger.debug("Quit selected, leaving menu %s", menu.title)
                        return Signal.QUIT
                    if selection.signal is Signal.BACK or menu.auto_back:
                        return Signal.CONTINUE
        finally:
            self.trail.pop()
            logger.debug("Left menu %s", menu.title)

    def dispatch(self, option: Option) -> Signal:
        """Invoke ``option`` and run the menu it leads to, if any.

        The nested menu's result only matters when it is ``QUIT``; otherwise
        the caller's own loop decides whether to continue.
        """
        signal = option.option_selected()
        if signal is not Signal.CONTINUE:
            return signal
        nested = option.navigable
        if nested is None:
            return Signal.CONTINUE
        if self.run(nested) is Signal.QUIT:
            return Signal.QUIT
        return Signal.CONTINUE
