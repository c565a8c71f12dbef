# cmdmenus/__main__.py
import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.prompt import Prompt

from cmdmenus.config import settings
from cmdmenus.list_menu import ListMenu
from cmdmenus.menu import Menu
from cmdmenus.option import Option, Signal
from cmdmenus.rendering import InquirerMenuRenderer, MenuRenderer, NumericItemRenderer

app = typer.Typer(help="Command line menus - dynamic lists and nested menus")
console = Console()

DEFAULT_PEOPLE = ["Ginette", "Marcel", "Gisèle"]

state = {"renderer": None}


def show_banner():
    """Display the application banner."""
    banner = """
╔═══════════════════════════════════════════════════════════════╗
║                     ☰ COMMAND LINE MENUS                      ║
║            Dynamic lists and nested menus in a shell          ║
╚═══════════════════════════════════════════════════════════════╝
    """
    console.print(banner, style="bold blue")


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def get_renderer() -> MenuRenderer:
    if state["renderer"] is None:
        state["renderer"] = MenuRenderer(console=console)
    return state["renderer"]


def person_menu(people: list[str], someone: str) -> Menu:
    """Sub-menu shown for one person: display or delete them."""
    def show():
        console.print(f"You must give the man a name : {someone}.")

    def delete():
        people.remove(someone)
        console.print(f"[green]✓ {someone} has been deleted.[/green]")

    menu = Menu(someone, auto_back=True)
    menu.add(Option("show", "s", show))
    menu.add(Option("delete", "d", delete))
    return menu


def people_list(people: list[str]) -> ListMenu:
    """List of people where each person opens a sub-menu."""
    people_menu = ListMenu.of_options(
        "Select someone",
        lambda: people,
        lambda someone: person_menu(people, someone),
        "p",
    )
    people_menu.auto_back = False
    return people_menu


def run_menu(menu: Menu) -> Signal:
    """Start ``menu`` and turn interruptions into a clean exit."""
    try:
        return menu.start()
    except (KeyboardInterrupt, EOFError):
        console.print("\n[yellow]Interrupted.[/yellow]")
        raise typer.Exit(1)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", help="Log menu traversal"),
    arrows: bool = typer.Option(False, "--arrows", help="Select options with arrow keys"),
):
    """Command line menus demo."""
    configure_logging(verbose)
    if arrows:
        state["renderer"] = InquirerMenuRenderer(console=console)
    else:
        state["renderer"] = MenuRenderer(console=console)


@app.command()
def people(
    names: Optional[list[str]] = typer.Argument(None, help="People to list"),
):
    """Pick someone, then show or delete them."""
    show_banner()

    crowd = list(names or DEFAULT_PEOPLE)
    menu = people_list(crowd)
    menu.add_quit("q")
    menu.renderer = get_renderer()
    run_menu(menu)

    console.print(f"[dim]Remaining: {', '.join(crowd) or 'nobody'}[/dim]")


@app.command()
def browse(
    names: Optional[list[str]] = typer.Argument(None, help="People to list"),
):
    """Pick someone from a numbered list."""
    show_banner()

    crowd = list(names or DEFAULT_PEOPLE)

    def selected(index: int, someone: str):
        console.print(f"[bold]#{index + 1}[/bold] {someone}")

    menu = ListMenu.of_actions(
        "Select someone",
        lambda: crowd,
        selected,
        item_renderer=NumericItemRenderer(),
    )
    menu.auto_back = False
    menu.add_back("0")
    menu.renderer = get_renderer()
    run_menu(menu)


@app.command()
def tree():
    """Main menu with a people list, an add action and nested quit."""
    show_banner()

    crowd = list(DEFAULT_PEOPLE)

    def add_someone():
        name = Prompt.ask("Name", console=console).strip()
        if name:
            crowd.append(name)

    root = Menu("Main menu", renderer=get_renderer())
    people_menu = people_list(crowd)
    people_menu.add_back("0")
    people_menu.add_quit("q")
    root.add(people_menu)
    root.add(Option("Add someone", "a", add_someone))
    root.add_quit("q")
    run_menu(root)

    console.print("[dim]Goodbye![/dim]")


if __name__ == "__main__":
    app()
