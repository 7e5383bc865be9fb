"""Screen navigation for the whole application and a text-mode front end."""

from __future__ import annotations

import argparse
import logging
import sys

from .book import BookScreen, book_create
from .flights import DEFAULT_FLIGHT
from .home import home_create
from .state import AppState
from .ticket import ticket_create
from .widgets import Align, Event, Widget

logger = logging.getLogger(__name__)

NAV_BAR_HEIGHT = 50
BOOK_CARD_INDEX = 2


def _add_nav_bar(screen: Widget, on_back) -> Widget:
    nav = screen.add(
        Widget(
            "obj",
            width="100%",
            height=NAV_BAR_HEIGHT,
            align=Align.BOTTOM_MID,
            clickable=True,
        )
    )
    nav.on(Event.CLICKED, lambda _w: on_back())
    return nav


class App:
    """Holds the shared state and the screens, and moves between them."""

    def __init__(self, asset_path: str = "") -> None:
        self.state = AppState(asset_path)
        if not hasattr(self.state, "flight"):
            self.state.flight = DEFAULT_FLIGHT
        self.book: BookScreen | None = None
        self.ticket: Widget | None = None
        self.home: Widget | None = home_create(self.state)
        self.home.child(BOOK_CARD_INDEX).on(Event.CLICKED, lambda _w: self.show_book())
        self.screen: Widget = self.home

    def _load(self, screen: Widget) -> None:
        previous = self.screen
        self.screen = screen
        if previous is not screen:
            previous.emit(Event.SCREEN_UNLOADED)

    def show_home(self) -> None:
        """Load the home screen, creating it if needed."""
        if self.home is None:
            self.home = home_create(self.state)
        self._load(self.home)

    def show_book(self) -> None:
        """Load the booking screen, creating it if needed."""
        if self.book is None:
            self.book = book_create(self.state, on_ticket=self.show_ticket)
            _add_nav_bar(self.book.root, self.show_home)
            self.book.root.on(Event.SCREEN_UNLOADED, self._on_book_unloaded)
        self._load(self.book.root)

    def show_ticket(self) -> None:
        """Load the ticket screen for the booked flight, creating it if needed."""
        if self.ticket is None:
            self.ticket = ticket_create(self.state)
            _add_nav_bar(self.ticket, self.show_book)
            self.ticket.on(Event.SCREEN_UNLOADED, self._on_ticket_unloaded)
        self._load(self.ticket)

    def back(self) -> None:
        """Click the current screen's navigation bar; the home screen has none."""
        nav = next((c for c in reversed(self.screen.children) if c.clickable), None)
        if nav is not None:
            nav.emit(Event.CLICKED)

    def _on_book_unloaded(self, screen: Widget) -> None:
        screen.clear()
        self.book = None

    def _on_ticket_unloaded(self, screen: Widget) -> None:
        screen.clear()
        self.ticket = None


def ui_init(asset_path: str = "") -> App:
    """Create the application with every screen library initialised."""
    logger.info("ui_init()")
    return App(asset_path)


_HELP = (
    "commands: home, book, ticket, back, tap, depart N, arrive N, "
    "select I VALUE, show, quit"
)


def _run_command(app: App, words: list[str]) -> bool:
    command, args = words[0], words[1:]
    if command == "quit":
        return False
    if command == "home":
        app.show_home()
    elif command == "book":
        app.show_book()
    elif command == "ticket":
        app.show_ticket()
    elif command == "back":
        app.back()
    elif command == "tap":
        if app.screen is app.home:
            app.home.child(BOOK_CARD_INDEX).emit(Event.CLICKED)
    elif command in ("depart", "arrive", "select"):
        if app.book is None or app.screen is not app.book.root:
            raise ValueError("not on the booking screen")
        numbers = [int(a) for a in args]
        if command == "depart":
            app.book.select_departure(*numbers)
        elif command == "arrive":
            app.book.select_arrival(*numbers)
        else:
            app.book.select_flight(*numbers)
    elif command != "show":
        raise ValueError(f"unknown command {command!r}")
    return True


def main(argv: list[str] | None = None) -> int:
    """Drive the interface from commands on standard input, printing each screen."""
    parser = argparse.ArgumentParser(prog="jambojet", description=_HELP)
    parser.add_argument("asset_path", nargs="?", default="", help="prefix for asset files")
    options = parser.parse_args(argv)

    app = ui_init(options.asset_path)
    print(app.screen.render())
    for line in sys.stdin:
        words = line.split()
        if not words:
            continue
        try:
            if not _run_command(app, words):
                break
        except (ValueError, IndexError, TypeError) as exc:
            print(f"error: {exc}", file=sys.stderr)
            continue
        print(app.screen.render())
    return 0