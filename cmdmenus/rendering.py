# cmdmenus/rendering.py
"""Console rendering of menus and of list elements."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import AbstractSet, Callable, Generic, Iterable, Optional, Sequence, TypeVar

from InquirerPy import inquirer
from rich.console import Console
from rich.text import Text

from cmdmenus.config import settings
from cmdmenus.navigation import NavigationStack
from cmdmenus.option import Option

T = TypeVar("T")


def alphabetic_shortcut(index: int) -> str:
    """0 -> a, 25 -> z, 26 -> aa, 27 -> ab ..."""
    letters = ""
    index += 1
    while index > 0:
        index, remainder = divmod(index - 1, 26)
        letters = chr(ord("a") + remainder) + letters
    return letters


def alphabetic_position(shortcut: str) -> Optional[int]:
    """Inverse of :func:`alphabetic_shortcut`; None for anything but lowercase letters."""
    if not shortcut or not all("a" <= char <= "z" for char in shortcut):
        return None
    position = 0
    for char in shortcut:
        position = position * 26 + ord(char) - ord("a") + 1
    return position - 1


def numeric_position(shortcut: str) -> Optional[int]:
    """Row index of a numeric shortcut, "1" being 0; None for anything else."""
    if not shortcut.isdigit() or shortcut.startswith("0"):
        return None
    return int(shortcut) - 1


def skip_reserved(index: int, reserved: Iterable[Optional[int]]) -> int:
    """Shift ``index`` past the reserved positions at or before it."""
    for position in sorted(p for p in reserved if p is not None):
        if position <= index:
            index += 1
    return index


class MenuRenderer:
    """Prints menus to a rich console and reads the user's choice.

    ``read_line`` replaces ``console.input`` as the input source; it receives
    the prompt text and returns the raw line typed by the user.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        read_line: Optional[Callable[[str], str]] = None,
    ):
        self.console = console or Console()
        self._read_line = read_line

    def output(self, text: str) -> None:
        self.console.print(text, markup=False, highlight=False)

    def header(self, title: str, trail: Optional[NavigationStack] = None) -> None:
        heading = title
        if (
            settings.render.show_breadcrumbs
            and trail is not None
            and trail.depth > 1
            and trail.current() == title
        ):
            heading = trail.breadcrumb()
        self.console.print()
        self.console.print(Text(heading, style="bold cyan"))

    def options(self, options: Sequence[Option]) -> None:
        for position, option in enumerate(options, 1):
            self.output(option.label(position))

    def read_choice(self, options: Sequence[Option]) -> str:
        prompt = f"{settings.render.prompt} : "
        if self._read_line is not None:
            return self._read_line(prompt).strip()
        return self.console.input(prompt).strip()

    def invalid_choice(self, choice: str) -> None:
        self.console.print(
            Text(settings.render.invalid_choice.format(choice=choice), style="red")
        )


class InquirerMenuRenderer(MenuRenderer):
    """Arrow-key selection through InquirerPy instead of typed shortcuts."""

    def options(self, options: Sequence[Option]) -> None:
        # InquirerPy draws the choices itself
        return None

    def read_choice(self, options: Sequence[Option]) -> str:
        choices = [
            {
                "name": option.label(position),
                "value": option.shortcut if option.shortcut is not None else str(position),
            }
            for position, option in enumerate(options, 1)
        ]
        return inquirer.select(
            message=f"{settings.render.prompt}:",
            choices=choices,
            instruction="(↑↓ navigate, Enter select)",
        ).execute()


class ListItemRenderer(ABC, Generic[T]):
    """Turns list elements into option titles and shortcuts."""

    @abstractmethod
    def title(self, index: int, element: T) -> str:
        pass

    @abstractmethod
    def shortcut(self, index: int, element: T) -> str:
        pass

    def free_shortcut(self, index: int, element: T, reserved: AbstractSet[str]) -> str:
        """Shortcut for a row when the list already uses ``reserved``.

        Renderers that cannot avoid them return :meth:`shortcut` as is and the
        list reports the collision.
        """
        return self.shortcut(index, element)

    def empty(self) -> str:
        """Message shown when the list has no element."""
        return settings.render.empty_message


class ListItemDefaultRenderer(ListItemRenderer[T]):
    """``str(element)`` titles with sequential letter shortcuts."""

    def title(self, index: int, element: T) -> str:
        return str(element)

    def shortcut(self, index: int, element: T) -> str:
        return alphabetic_shortcut(index)

    def free_shortcut(self, index: int, element: T, reserved: AbstractSet[str]) -> str:
        return alphabetic_shortcut(skip_reserved(index, map(alphabetic_position, reserved)))


class NumericItemRenderer(ListItemDefaultRenderer[T]):
    """``str(element)`` titles with 1-based numeric shortcuts."""

    def shortcut(self, index: int, element: T) -> str:
        return str(index + 1)

    def free_shortcut(self, index: int, element: T, reserved: AbstractSet[str]) -> str:
        return str(skip_reserved(index, map(numeric_position, reserved)) + 1)
