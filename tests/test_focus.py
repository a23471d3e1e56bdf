from guart import keys
from guart.focus import FocusController, Focusable


class Controller(FocusController):
    def __init__(self):
        super().__init__()
        self.resets = 0

    def reset_output(self):
        self.resets += 1


class Item(Focusable):
    focusable = True

    def __init__(self, name, modal=False):
        super().__init__()
        self.name = name
        self.modal = modal
        self.keys = []
        self.changes = []

    def process_key(self, key):
        self.keys.append(key)

    def focus_change_callback(self, focused):
        self.changes.append(focused)


class Plain(Focusable):
    def focus_change_callback(self, focused):
        pass


def test_first_added_takes_focus():
    c = Controller()
    a = Item("a")
    Focusable.set_focus_controller(a, c)
    assert c.focused is a
    assert FocusController.is_focused(c, a) is True
    assert Focusable.is_focused(a) is True


def test_set_focus_pushes_to_front():
    c = Controller()
    a, b = Item("a"), Item("b")
    Focusable.set_focus_controller(a, c)
    Focusable.set_focus_controller(b, c)
    assert c.focusables == (b, a)
    assert c.focused is b
    assert Focusable.is_focused(b) is True
    assert Focusable.is_focused(a) is False


def test_add_without_focus_keeps_current():
    c = Controller()
    a, b = Item("a"), Item("b")
    Focusable.set_focus_controller(a, c)
    FocusController.add_focusable(c, b, False)
    assert c.focused is a
    assert c.focusables == (b, a)
    assert FocusController.is_focused(c, b) is False


def test_duplicates_and_none_ignored():
    c = Controller()
    a = Item("a")
    Focusable.set_focus_controller(a, c)
    FocusController.add_focusable(c, a, True)
    FocusController.add_focusable(c, None, True)
    assert c.focusables == (a,)
    assert FocusController.is_focused(c, a) is True


def test_tab_cycles_and_notifies():
    c = Controller()
    a, b = Item("a"), Item("b")
    Focusable.set_focus_controller(a, c)
    Focusable.set_focus_controller(b, c)
    assert FocusController.process_input(c, keys.TAB) is True
    assert c.focused is a
    assert b.changes == [False]
    assert a.changes == [True]
    assert FocusController.process_input(c, keys.TAB) is True
    assert c.focused is b


def test_tab_does_not_leave_modal():
    c = Controller()
    a = Item("a")
    m = Item("m", modal=True)
    Focusable.set_focus_controller(a, c)
    Focusable.set_focus_controller(m, c)
    assert FocusController.process_input(c, keys.TAB) is True
    assert c.focused is m
    assert m.changes == []


def test_keys_forwarded_to_focused():
    c = Controller()
    a, b = Item("a"), Item("b")
    Focusable.set_focus_controller(a, c)
    Focusable.set_focus_controller(b, c)
    assert FocusController.process_input(c, keys.UP) is True
    assert b.keys == [keys.UP]
    assert a.keys == []


def test_ctrl_c_and_ctrl_d_quit():
    for key in (keys.CTRL_C, keys.CTRL_D):
        c = Controller()
        FocusController.add_focusable(c, Item("a"), True)
        assert FocusController.process_input(c, key) is False
        assert c.resets == 1


def test_empty_input_or_ring_is_ignored():
    c = Controller()
    assert FocusController.process_input(c, keys.CTRL_C) is True
    assert c.resets == 0
    a = Item("a")
    FocusController.add_focusable(c, a, True)
    assert FocusController.process_input(c, "") is True
    assert a.keys == []


def test_remove_focused_moves_to_next():
    c = Controller()
    a, b, d = Item("a"), Item("b"), Item("d")
    for item in (a, b, d):
        FocusController.add_focusable(c, item, True)
    FocusController.process_input(c, keys.TAB)
    assert c.focusables == (d, b, a)
    assert c.focused is b
    FocusController.remove_focusable(c, b)
    assert c.focused is a
    assert c.focusables == (d, a)


def test_remove_last_focused_moves_back():
    c = Controller()
    a, b = Item("a"), Item("b")
    FocusController.add_focusable(c, a, True)
    FocusController.add_focusable(c, b, True)
    FocusController.process_input(c, keys.TAB)
    FocusController.remove_focusable(c, a)
    assert c.focused is b


def test_remove_only_clears_focus():
    c = Controller()
    a = Item("a")
    FocusController.add_focusable(c, a, True)
    FocusController.remove_focusable(c, a)
    assert c.focused is None
    assert c.focusables == ()
    assert FocusController.is_focused(c, a) is False


def test_set_focus_controller_registers_focusable_only():
    c = Controller()
    a = Item("a")
    p = Plain()
    Focusable.set_focus_controller(a, c)
    Focusable.set_focus_controller(p, c)
    assert c.focusables == (a,)
    assert Focusable.is_focused(a) is True
    assert Focusable.is_focused(p) is False


def test_no_controller_means_not_focused():
    a = Item("a")
    Focusable.set_focus_controller(a, None)
    assert Focusable.is_focused(a) is False


def test_release_focus_leaves_ring():
    c = Controller()
    a = Item("a")
    Focusable.set_focus_controller(a, c)
    Focusable.release_focus(a)
    assert c.focusables == ()