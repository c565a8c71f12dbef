# tests/test_navigation.py
from cmdmenus.navigation import NavigationStack


def test_push_adds_menu_to_trail():
    nav = NavigationStack()
    nav.push("Main")
    nav.push("People")

    assert nav.current() == "People"
    assert nav.depth == 2


def test_pop_returns_menu_left():
    nav = NavigationStack()
    nav.push("Main")
    nav.push("People")
    nav.push("Marcel")

    left = nav.pop()

    assert left == "Marcel"
    assert nav.current() == "People"


def test_pop_can_empty_the_trail():
    nav = NavigationStack()
    nav.push("Main")

    assert nav.pop() == "Main"
    assert nav.pop() is None
    assert nav.depth == 0


def test_current_returns_none_for_empty_stack():
    nav = NavigationStack()

    assert nav.current() is None


def test_breadcrumb_joins_titles():
    nav = NavigationStack()
    nav.push("Main")
    nav.push("People")
    nav.push("Marcel")

    assert nav.breadcrumb(" / ") == "Main / People / Marcel"
    assert nav.breadcrumb() == "Main › People › Marcel"
