"""The dashboard event loop."""

from typing import Optional

from feedboat.cli.ui.screen import Screen
from feedboat.core.dialog_stack import DialogStack
from feedboat.core.dialogs.samples import build_feed_list
from feedboat.core.events import (
    EventsSource,
    KeyEvent,
    ctrl,
    unblock_resize_signal,
)
from feedboat.core.router import InputRouter
from feedboat.utils.config import Config, get_feedboat_dir
from feedboat.utils.debug import debug, log_error
from feedboat.utils.exceptions import EventSourceClosed


def run_loop(
    stack: DialogStack,
    events: EventsSource,
    router: InputRouter,
    screen: Screen,
) -> str:
    """Draw, wait for one event, apply it; until quit or the source closes.

    Returns:
        "quit" if the user asked to quit, "closed" if input ran out
    """
    while True:
        screen.draw(stack)

        try:
            event = events.next()
        except EventSourceClosed as e:
            debug("dashboard", "Input closed, leaving", producer=e.producer)
            return "closed"
        except KeyboardInterrupt:
            # The tty keeps ISIG on, so Ctrl+C usually arrives as SIGINT here
            event = KeyEvent(ctrl("c"))

        router.dispatch(stack, event)

        if stack.should_quit:
            debug("dashboard", "Quit requested", depth=len(stack))
            return "quit"


def run_dashboard(
    config: Optional[Config] = None,
    stack: Optional[DialogStack] = None,
    events: Optional[EventsSource] = None,
    screen: Optional[Screen] = None,
) -> str:
    """Run the dashboard until the user quits.

    Raises:
        ConfigurationError: If the configured key bindings are invalid
    """
    config = config or Config(get_feedboat_dir())
    router = InputRouter.from_config(config)
    stack = stack or DialogStack(build_feed_list())
    screen = screen or Screen()

    owns_events = events is None

    try:
        with screen:
            # readchar saves and restores tty modes around every key, so the
            # reader must start after the screen has switched to cbreak
            events = events or EventsSource()
            return run_loop(stack, events, router, screen)
    except Exception as e:
        log_error("dashboard", "Dashboard crashed", e)
        raise
    finally:
        if owns_events:
            unblock_resize_signal()
