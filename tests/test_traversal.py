# tests/test_traversal.py
from cmdmenus.list_menu import ListMenu
from cmdmenus.menu import Menu
from cmdmenus.navigation import NavigationStack
from cmdmenus.option import Option, Signal
from cmdmenus.traversal import DepthFirstTraversal


def three_levels(renderer, on_bottom=None):
    top = Menu("Top", renderer=renderer)
    middle = Menu("Middle", "2")
    bottom = Menu("Bottom", "3")
    bottom.add(Option("touch", "t", on_bottom))
    bottom.add_back("b")
    bottom.add_quit("q")
    middle.add(bottom)
    middle.add_back("b")
    top.add(middle)
    top.add_quit("q")
    return top, middle, bottom


# ═══════════════════════════════════════════════════════════════════
# Dispatch
# ═══════════════════════════════════════════════════════════════════

def test_dispatch_plain_option_continues(terminal):
    traversal = DepthFirstTraversal(terminal().renderer)
    assert traversal.dispatch(Option("noop", "n")) is Signal.CONTINUE


def test_dispatch_returns_terminal_signals(terminal):
    traversal = DepthFirstTraversal(terminal().renderer)
    menu = Menu("Main")
    menu.add_back("b")
    menu.add_quit("q")

    back, quit_option = menu.options
    assert traversal.dispatch(back) is Signal.BACK
    assert traversal.dispatch(quit_option) is Signal.QUIT


def test_dispatch_runs_nested_menu_before_returning(terminal):
    term = terminal("t")
    order = []
    nested = Menu("Nested", "n", auto_back=True)
    nested.add(Option("touch", "t", lambda: order.append("nested")))

    signal = DepthFirstTraversal(term.renderer).dispatch(nested)
    order.append("returned")

    assert signal is Signal.CONTINUE
    assert order == ["nested", "returned"]


# ═══════════════════════════════════════════════════════════════════
# Depth-first runs
# ═══════════════════════════════════════════════════════════════════

def test_quit_three_levels_deep_unwinds_everything(terminal):
    term = terminal("2", "3", "q")
    top, middle, bottom = three_levels(term.renderer)

    assert top.start() is Signal.QUIT

    assert term.reads == 3
    assert term.output.count("q : Exit") == 2  # top once, bottom once
    assert not any(menu.locked for menu in (top, middle, bottom))


def test_back_returns_to_parent_loop(terminal):
    term = terminal("2", "b", "q")
    top, _, _ = three_levels(term.renderer)

    assert top.start() is Signal.QUIT

    assert term.reads == 3
    assert term.output.count("2 : Middle") == 2  # top shown again after back


def test_ancestors_stay_locked_during_nested_run(terminal):
    term = terminal("2", "3", "t", "q")
    seen = {}

    def inspect():
        seen.update(top=top.locked, middle=middle.locked, bottom=bottom.locked)

    top, middle, bottom = three_levels(term.renderer, inspect)
    top.start()

    assert seen == {"top": True, "middle": True, "bottom": True}
    assert not top.locked and not middle.locked and not bottom.locked


def test_reentrant_menu_restores_outer_lock(terminal):
    term = terminal("m", "b", "b")
    menu = Menu("Loop", "m")
    menu.add(menu)
    menu.add_back("b")
    states = []
    menu.renderer = term.renderer

    traversal = DepthFirstTraversal(term.renderer)
    original_run = traversal.run

    def spying_run(target):
        result = original_run(target)
        states.append(target.locked)
        return result

    traversal.run = spying_run
    traversal.run(menu)

    # inner run ends with the outer one still holding the lock
    assert states == [True, False]
    assert term.reads == 3


def test_nested_header_shows_breadcrumb(terminal):
    term = terminal("2", "b", "q")
    top, _, _ = three_levels(term.renderer)

    top.start()

    assert "Top › Middle" in term.output


def test_trail_is_empty_after_run(terminal):
    term = terminal("2", "3", "q")
    top, _, _ = three_levels(term.renderer)
    trail = NavigationStack()

    DepthFirstTraversal(term.renderer, trail).run(top)

    assert trail.depth == 0


def test_list_rows_enter_sub_menus_depth_first(terminal):
    term = terminal("p", "b", "s", "q")
    people = ["Ginette", "Marcel"]
    shown = []

    def person(someone):
        sub = Menu(someone, auto_back=True)
        sub.add(Option("show", "s", lambda: shown.append(someone)))
        return sub

    root = Menu("Main", renderer=term.renderer)
    people_menu = ListMenu.of_options("People", lambda: people, person, "p")
    people_menu.auto_back = False
    people_menu.add_quit("q")
    root.add(people_menu)

    assert root.start() is Signal.QUIT
    assert shown == ["Marcel"]
    assert "Main › People › Marcel" in term.output
