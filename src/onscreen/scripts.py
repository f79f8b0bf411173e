import argparse
import logging
import pathlib
import sys

import trio

from .keystreams import dispatch_event, tap
from .rendering import raw_keyboard_for
from .settings import Settings
from .targets import BufferTextField

logger = logging.getLogger(__name__)


def print_state(controller, field):
    print(f"{controller.current_layout}/{controller.current_mode} {'open' if controller.is_open else 'closed'}: {field.text!r}")


async def run_demo(settings: Settings, stdin):
    controller = settings.make_controller()
    field = BufferTextField(name="demo")
    controller.attach_text_field(field)
    controller.open()
    print(raw_keyboard_for(controller).render_text())
    async for line in stdin:
        for label in line.split():
            key = controller.active_mode.find_key(label)
            if key is None:
                logger.warning("No key %r in %s/%s", label, controller.current_layout, controller.current_mode)
                continue
            for event in tap(key):
                dispatch_event(controller, event)
        print_state(controller, field)
    controller.detach_text_field(field)


demo_parser = argparse.ArgumentParser(prog="onscreen-demo")
demo_parser.add_argument("settings", type=pathlib.Path)


def demo_cli(argv=sys.argv):
    """Type on the keyboard by entering key labels, whitespace-separated, one line at a time.

    Text keys are named by their primary value and action keys by their action
    name (shift, backspace, switchMode, ...).
    """
    parsed = demo_parser.parse_args(argv[1:])
    settings = Settings.load(parsed.settings)
    logging.basicConfig(level=settings.logging_level)
    trio.run(run_demo, settings, trio.wrap_file(sys.stdin))
    return 0


print_layout_parser = argparse.ArgumentParser(prog="onscreen-print-layout")
print_layout_parser.add_argument("settings", type=pathlib.Path)
print_layout_parser.add_argument("--layout")
print_layout_parser.add_argument("--mode")


def print_layout_cli(argv=sys.argv):
    parsed = print_layout_parser.parse_args(argv[1:])
    settings = Settings.load(parsed.settings)
    logging.basicConfig(level=settings.logging_level)
    controller = settings.make_controller()
    if parsed.layout is not None:
        controller.set_layout(parsed.layout)
    if parsed.mode is not None:
        controller.set_mode(parsed.mode)
    print(raw_keyboard_for(controller).render_text())
    return 0
