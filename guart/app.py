"""An interactive demonstration of the widgets."""

from __future__ import annotations

import argparse
import sys
from contextlib import ExitStack

from guart.basic_widgets import ButtonBox, Label, Toast, Window
from guart.geometry import Dimensions, Point
from guart.lists import CheckList, Slider
from guart.output import Output, StreamOutput
from guart.screen import Screen
from guart.serial_output import SerialOutput
from guart.terminal import TerminalInput
from guart.widget import Widget


def build_demo(screen: Screen) -> dict[str, Widget]:
    """Populate ``screen`` with the demo widgets and return them by name."""
    window = Window(Point(10, 10), Dimensions(30, 10))
    window.label = "window"
    window2 = Window(Point(0, 1), Dimensions(30, 2))
    window2.label = "window2"
    screen.add_widget(window2)
    screen.add_widget(window)

    label = Label(Point(0, 0), "Hello World!")
    label.label = "label"
    button_box = ButtonBox(Point(0, 2), Dimensions(20, 1), ("Button1", "Button2"))
    button_box.label = "buttonBox"
    button_box2 = ButtonBox(Point(1, 4), Dimensions(20, 1), ("Siema", "Mordo"))
    button_box2.label = "buttonBox2"

    window.add_widget(label)
    window.add_widget(button_box)
    window.title = "Test Window"
    window2.title = "Second Window"
    button_box2.title = "Button Box 2"

    def show_toast(_widget: Widget, action: str) -> None:
        screen.add_widget(Toast(Point(20, 20), f"Button clicked: {action}"))
        screen.invalidate()

    button_box2.on_action = show_toast
    button_box.on_action = show_toast
    screen.add_widget(button_box2)

    slider = Slider(
        Point(50, 18),
        Dimensions(20, 12),
        ("0", "20", "40", "60", "80", "100"),
        True,
    )
    screen.add_widget(slider)

    checklist = CheckList(Point(30, 6), Dimensions(20, 10), (), True)
    toggled: dict[str, Widget] = {
        "window": window,
        "window2": window2,
        "buttonBox2": button_box2,
        "slider": slider,
    }
    for name in toggled:
        checklist.add_item(name)

    def toggle(_widget: Widget, action: str) -> None:
        target = toggled.get(action)
        if target is not None:
            target.set_active(not target.active)
        screen.invalidate()

    checklist.on_action = toggle
    screen.add_widget(checklist)

    for widget in toggled.values():
        widget.set_active(False)

    return {
        "window": window,
        "window2": window2,
        "label": label,
        "buttonBox": button_box,
        "buttonBox2": button_box2,
        "slider": slider,
        "list": checklist,
    }


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="guart", description="Interactive widget demo.")
    parser.add_argument(
        "--serial",
        metavar="PATH",
        help="render to a serial port instead of standard output",
    )
    args = parser.parse_args(argv)

    with ExitStack() as stack:
        output: Output
        if args.serial:
            output = stack.enter_context(SerialOutput(args.serial))
        else:
            output = StreamOutput()

        screen = Screen(output)
        build_demo(screen)
        screen.invalidate()

        try:
            terminal = TerminalInput()
            terminal.initialize()
        except OSError:
            print("Failed to initialize terminal input", file=sys.stderr)
            return 1
        stack.callback(terminal.restore)

        while screen.process_input(terminal.get_special_key()):
            pass
    return 0


if __name__ == "__main__":
    sys.exit(main())