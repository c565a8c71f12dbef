# cmdmenus/list_menu.py
"""Menus whose options are regenerated from a data source on every display.

The data source is a zero-argument callable returning the current sequence
of elements, or ``None`` when no data is available. Each element becomes a
row; selecting a row either calls a ``ListAction`` callback with
``(index, element)`` or enters the option built by a ``ListOption`` factory.
Because the rows are rebuilt right before each prompt, a row action that
mutates the source (e.g. deletes an element) is visible on the next display.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Generic, Optional, Sequence, TypeVar, Union

from cmdmenus.config import settings
from cmdmenus.errors import (
    DuplicateShortcutError,
    ManualOptionAddForbiddenError,
    NoListActionDefinedError,
    NoListModelDefinedError,
)
from cmdmenus.menu import Menu, Selection
from cmdmenus.option import BACK, QUIT, Action, Option, Signal
from cmdmenus.rendering import ListItemDefaultRenderer, ListItemRenderer

if TYPE_CHECKING:
    from cmdmenus.rendering import MenuRenderer
    from cmdmenus.traversal import DepthFirstTraversal

logger = logging.getLogger(__name__)

T = TypeVar("T")

ListData = Callable[[], Optional[Sequence[T]]]


@dataclass(frozen=True)
class ListEntry(Generic[T]):
    """Position and value of one element at materialize time."""
    index: int
    element: T


@dataclass(frozen=True)
class ListAction(Generic[T]):
    """Calls ``callback(index, element)`` when a row is selected."""
    callback: Callable[[int, T], Optional[Signal]]


@dataclass(frozen=True)
class ListOption(Generic[T]):
    """Builds the option (often a sub-menu) entered when a row is selected."""
    factory: Callable[[T], Option]


ListMapping = Union[ListAction, ListOption]


class ListItem(Option):
    """Row of a :class:`ListMenu`, bound to one :class:`ListEntry`."""

    def __init__(
        self,
        owner: "ListMenu",
        entry: ListEntry,
        title: str,
        shortcut: str,
        target: Optional[Option] = None,
    ):
        super().__init__(title, shortcut)
        self._owner = owner
        self._entry = entry
        self._target = target

    @property
    def entry(self) -> ListEntry:
        return self._entry

    @property
    def navigable(self) -> Optional[Menu]:
        if self._target is None:
            return None
        return self._target.navigable

    def option_selected(self) -> Signal:
        return self._owner._item_selected(self._entry, self._target)


class ListMenu(Menu, Generic[T]):
    """Menu listing the elements of a live data source.

    Options cannot be added by hand; only terminal options (quit, back) can
    be registered, and they are appended after the rows.
    """

    def __init__(
        self,
        title: str,
        model: ListData,
        mapping: ListMapping,
        shortcut: Optional[str] = None,
        *,
        action: Optional[Action] = None,
        renderer: Optional["MenuRenderer"] = None,
        item_renderer: Optional[ListItemRenderer] = None,
    ):
        super().__init__(title, shortcut, action, auto_back=True, renderer=renderer)
        if not isinstance(mapping, (ListAction, ListOption)):
            raise NoListActionDefinedError(self)
        self._model = model
        self._mapping = mapping
        self._quit: Optional[Option] = None
        self._back: Optional[Option] = None
        self._item_renderer: ListItemRenderer = item_renderer or ListItemDefaultRenderer()

    @classmethod
    def of_actions(
        cls,
        title: str,
        model: ListData,
        callback: Callable[[int, T], Optional[Signal]],
        shortcut: Optional[str] = None,
        **kwargs,
    ) -> "ListMenu":
        return cls(title, model, ListAction(callback), shortcut, **kwargs)

    @classmethod
    def of_options(
        cls,
        title: str,
        model: ListData,
        factory: Callable[[T], Option],
        shortcut: Optional[str] = None,
        **kwargs,
    ) -> "ListMenu":
        return cls(title, model, ListOption(factory), shortcut, **kwargs)

    @property
    def list_action(self) -> Optional[ListAction]:
        return self._mapping if isinstance(self._mapping, ListAction) else None

    @property
    def list_option(self) -> Optional[ListOption]:
        return self._mapping if isinstance(self._mapping, ListOption) else None

    @property
    def item_renderer(self) -> ListItemRenderer:
        return self._item_renderer

    def set_item_renderer(self, item_renderer: ListItemRenderer) -> None:
        self._check_unlocked("change the item renderer")
        self._item_renderer = item_renderer

    def add(self, option: Option) -> None:
        raise ManualOptionAddForbiddenError(self, option)

    def add_quit(self, shortcut: str, title: Optional[str] = None) -> None:
        self._check_unlocked('add "quit" option')
        self._quit = Option(title or settings.render.quit_title, shortcut, QUIT)

    def add_back(self, shortcut: str, title: Optional[str] = None) -> None:
        self._check_unlocked('add "back" option')
        self._back = Option(title or settings.render.back_title, shortcut, BACK)

    def materialize(self) -> int:
        """Rebuild the rows from the data source.

        Returns the number of rows, terminal options excluded.
        """
        elements = self._model()
        if elements is None:
            raise NoListModelDefinedError(self)
        terminals = [option for option in (self._quit, self._back) if option is not None]
        reserved = frozenset(
            option.shortcut for option in terminals if option.shortcut is not None
        )
        rows = [
            self._make_item(ListEntry(index, element), reserved)
            for index, element in enumerate(elements)
        ]
        self._check_shortcuts(rows + terminals)

        with self.unlocked():
            self.clear_options()
            for option in rows + terminals:
                super().add(option)

        logger.debug("List %s materialized with %d rows", self.title, len(rows))
        return len(rows)

    def run_once(self, traversal: "DepthFirstTraversal") -> Optional[Selection]:
        if self.materialize() == 0:
            renderer = self.renderer or traversal.renderer
            renderer.output(self._item_renderer.empty())
        return super().run_once(traversal)

    def _check_shortcuts(self, options: list[Option]) -> None:
        """Reject a colliding set before the current rows are replaced."""
        seen = set()
        for option in options:
            if option.shortcut is None:
                continue
            if option.shortcut in seen:
                raise DuplicateShortcutError(self, option.shortcut, option)
            seen.add(option.shortcut)

    def _make_item(self, entry: ListEntry, reserved: frozenset = frozenset()) -> ListItem:
        title = self._item_renderer.title(entry.index, entry.element)
        shortcut = self._item_renderer.free_shortcut(entry.index, entry.element, reserved)
        target = None
        if isinstance(self._mapping, ListOption):
            target = self._mapping.factory(entry.element)
        return ListItem(self, entry, title, shortcut, target)

    def _item_selected(self, entry: ListEntry, target: Optional[Option]) -> Signal:
        if isinstance(self._mapping, ListOption) and target is not None:
            # the list's own hook fires before the row's option
            self.option_selected()
            return target.option_selected()
        if isinstance(self._mapping, ListAction):
            result = self._mapping.callback(entry.index, entry.element)
            return result if isinstance(result, Signal) else Signal.CONTINUE
        raise NoListActionDefinedError(self)
