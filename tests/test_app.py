import os
import sys

import pytest

from guart import keys
from guart.app import build_demo, main
from guart.basic_widgets import Toast
from guart.output import Output
from guart.screen import Screen


class RecordingOutput(Output):
    def __init__(self):
        self.text = ""

    def write(self, data):
        self.text += data
        return self

    def flush(self):
        pass


@pytest.fixture
def demo():
    screen = Screen(RecordingOutput())
    widgets = build_demo(screen)
    return screen, widgets


def test_only_list_holds_focus_at_start(demo):
    screen, widgets = demo
    assert screen.focusables == (widgets["list"],)
    assert screen.focused is widgets["list"]


def test_list_items_name_toggled_widgets(demo):
    _, widgets = demo
    assert widgets["list"].items == ("window", "window2", "buttonBox2", "slider")


def test_toggled_widgets_start_inactive(demo):
    _, widgets = demo
    for name in ("window", "window2", "buttonBox2", "slider", "buttonBox", "label"):
        assert widgets[name].active is False
    assert widgets["list"].active is True


def test_enter_toggles_window(demo):
    screen, widgets = demo
    screen.process_input(keys.CR)
    assert widgets["window"].active is True
    assert widgets["buttonBox"] in screen.focusables
    screen.process_input(keys.CR)
    assert widgets["window"].active is False
    assert widgets["buttonBox"] not in screen.focusables


def test_enter_toggles_slider(demo):
    screen, widgets = demo
    for _ in range(3):
        screen.process_input(keys.DOWN)
    screen.process_input(keys.CR)
    assert widgets["slider"].active is True
    assert widgets["slider"] in screen.focusables


def test_button_shows_toast_until_dismissed(demo):
    screen, widgets = demo
    screen.process_input(keys.CR)
    screen.process_input(keys.TAB)
    assert screen.focused is widgets["buttonBox"]

    screen.process_input(keys.CR)
    toast = screen.focused
    assert isinstance(toast, Toast)
    assert toast.message == "Button clicked: Button1"
    assert toast in screen.children

    screen.process_input(keys.CR)
    assert toast not in screen.children
    assert screen.focused is widgets["buttonBox"]


def test_main_fails_without_terminal(monkeypatch, capsys):
    read_fd, write_fd = os.pipe()
    stdin = os.fdopen(read_fd)
    monkeypatch.setattr(sys, "stdin", stdin)
    try:
        assert main([]) == 1
    finally:
        stdin.close()
        os.close(write_fd)
    captured = capsys.readouterr()
    assert "Failed to initialize terminal input" in captured.err
    assert "Hello World!" in captured.out