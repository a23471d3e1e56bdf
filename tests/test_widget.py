import pytest

from guart.focus import FocusController
from guart.geometry import Point
from guart.widget import Drawer, Parent, Widget


class Box(Widget):
    type_name = "Box"


class FocusBox(Box):
    focusable = True


class Root(Parent):
    type_name = "Root"


class RecordingDrawer(Drawer):
    def __init__(self):
        self.drawn = []

    def draw(self, drawable):
        self.drawn.append(drawable)


class Controller(FocusController):
    def reset_output(self):
        pass


def test_widget_is_abstract():
    with pytest.raises(TypeError):
        Widget(Point(0, 0))


def test_position_relative_to_parent():
    outer = Box(Point(10, 10))
    inner = Box(Point(1, 2))
    outer.add_widget(inner)
    assert inner.parent is outer
    assert inner.position == outer.position + Point(1, 2)
    inner.move_to(Point(5, 5))
    assert inner.position == outer.position + Point(5, 5)


def test_position_under_root_is_unchanged():
    root = Root()
    w = Box(Point(3, 4), "w")
    root.add_widget(w)
    assert w.position == Point(3, 4)
    assert w.label == "w"


def test_invalidate_without_drawer_draws_nothing_later():
    d = RecordingDrawer()
    a = Box(Point(0, 0))
    a.invalidate()
    a.set_drawer(d)
    a.invalidate()
    assert d.drawn == [a]


def test_invalidate_draws_parent_then_children():
    d = RecordingDrawer()
    root = Root()
    root.set_drawer(d)
    a, b = Box(Point(0, 0)), Box(Point(1, 1))
    root.add_widget(a)
    root.add_widget(b)
    root.invalidate()
    assert d.drawn == [root, a, b]


def test_set_drawer_propagates_to_existing_children():
    d = RecordingDrawer()
    root = Root()
    a = Box(Point(0, 0))
    b = Box(Point(0, 0))
    a.add_widget(b)
    root.add_widget(a)
    root.set_drawer(d)
    assert b.drawer is d


def test_remove_widget_redraws_remaining():
    d = RecordingDrawer()
    root = Root()
    root.set_drawer(d)
    a, b = Box(Point(0, 0)), Box(Point(0, 0))
    root.add_widget(a)
    root.add_widget(b)
    root.remove_widget(a)
    assert root.children == [b]
    assert d.drawn == [root, b]


def test_dispose_removes_tree_and_signals():
    root = Root()
    a, b = Box(Point(0, 0)), Box(Point(0, 0))
    root.add_widget(a)
    a.add_widget(b)
    disposed = []
    a.on_dispose = lambda w, action: disposed.append((w, action))
    b.on_dispose = lambda w, action: disposed.append((w, action))
    a.dispose()
    assert root.children == []
    assert a.children == []
    assert disposed == [(a, ""), (b, "")]


def test_dispose_leaves_focus_ring():
    c = Controller()
    root = Root()
    root.set_focus_controller(c)
    w = FocusBox(Point(0, 0))
    root.add_widget(w)
    assert c.focusables == (w,)
    w.dispose()
    assert c.focusables == ()


def test_child_focused_moves_child_to_top():
    root = Root()
    a, b, c = Box(Point(0, 0)), Box(Point(0, 0)), Box(Point(0, 0))
    for w in (a, b, c):
        root.add_widget(w)
    root.child_focused_callback(a)
    assert root.children == [b, c, a]


def test_focus_change_signals_and_reorders():
    root = Root()
    a, b = Box(Point(0, 0)), Box(Point(0, 0))
    root.add_widget(a)
    root.add_widget(b)
    events = []
    a.on_focus = lambda w, action: events.append((w, action))
    a.focus_change_callback(False)
    assert root.children == [a, b]
    a.focus_change_callback(True)
    assert root.children == [b, a]
    assert events == [(a, ""), (a, "")]


def test_set_active_propagates_and_updates_ring():
    c = Controller()
    root = Root()
    root.set_focus_controller(c)
    p = FocusBox(Point(0, 0))
    root.add_widget(p)
    child = FocusBox(Point(0, 0))
    p.add_widget(child)
    assert set(c.focusables) == {p, child}
    p.set_active(False)
    assert not p.active and not child.active
    assert c.focusables == ()
    assert c.focused is None
    p.set_active(True)
    assert p.active and child.active
    assert set(c.focusables) == {p, child}
    assert c.focused is None


def test_set_focus_controller_reaches_children():
    c = Controller()
    root = Root()
    p = Box(Point(0, 0))
    child = FocusBox(Point(0, 0))
    p.add_widget(child)
    root.add_widget(p)
    root.set_focus_controller(c)
    assert c.focusables == (child,)
    assert child.focus_controller is c


def test_widget_focused_through_parent():
    c = Controller()
    root = Root()
    root.set_focus_controller(c)
    p = FocusBox(Point(0, 0))
    root.add_widget(p)
    inner = Box(Point(0, 0))
    p.add_widget(inner)
    other = Box(Point(0, 0))
    root.add_widget(other)
    assert c.focused is p
    assert inner.is_focused()
    assert not other.is_focused()