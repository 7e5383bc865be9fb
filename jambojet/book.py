"""The booking screen: pick departure and arrival cities, then slide a flight card to book it."""

from __future__ import annotations

from typing import Any, Callable

from .flights import (
    Flight,
    build_city_list,
    boarding_time,
    city_name,
    format_cost,
    format_duration,
    format_hhmm,
    get_flights,
    time_diff,
)
from .state import PRIMARY_COLOR, WHITE, AppState, Style
from .widgets import Align, Event, Widget, flights_create

MAX_MATCHED_FLIGHTS = 5
BOOKING_THRESHOLD = 90
BOOKING_DATE = "11/05/2025"
TITLE_AVAILABLE = "Available Flights"
TITLE_NONE = "No Flights Available"

DROP_DOWN_MAIN = Style(
    width=210,
    height=50,
    bg_color=WHITE,
    border_color=PRIMARY_COLOR,
    text_color=PRIMARY_COLOR,
    text_font="nn_regular_24",
)
DROP_DOWN = Style(
    width=200,
    height=50,
    bg_color=WHITE,
    border_color=PRIMARY_COLOR,
    text_color=PRIMARY_COLOR,
    text_font="nn_regular_24",
)
DROP_DOWN_SELECTED = Style(
    bg_color=WHITE,
    border_color=PRIMARY_COLOR,
    text_color=PRIMARY_COLOR,
    text_font="nn_regular_24",
    pad_left=0,
    pad_right=0,
    text_align="center",
)
NO_BAR = Style(outline_opa=0, outline_width=0, bg_opa=0)

_LIST_STYLES = {
    "list_main": Style(max_height=400),
    "list_selected": Style(bg_color=PRIMARY_COLOR, text_color=WHITE),
    "list_checked": Style(bg_color=PRIMARY_COLOR),
}


def _options(count: int, skip_city: int) -> list[str]:
    return build_city_list(count, skip_city).split("\n")


def _dropdown(options: list[str], align: Align, x: int) -> Widget:
    return Widget(
        "dropdown",
        align=align,
        x=x,
        y=120,
        options=options,
        styles=[
            (DROP_DOWN, "main"),
            (DROP_DOWN_SELECTED, "list"),
            (NO_BAR, "list_scrollbar"),
        ],
        local=dict(_LIST_STYLES),
    )


class BookScreen:
    """The booking screen and its behaviour.

    ``on_ticket`` is called with no arguments once a flight card's slider is
    released past the booking threshold.
    """

    def __init__(self, state: AppState, on_ticket: Callable[[], Any] | None = None) -> None:
        self.state = state
        self.on_ticket = on_ticket
        self.flights: list[Flight] = []
        self.booked: Flight | None = None

        self.root = Widget("obj", styles=[(state.light_theme, "main")])

        date_box = self.root.add(
            Widget(
                "obj",
                align=Align.TOP_MID,
                y=50,
                width=440,
                styles=[(DROP_DOWN_MAIN, "main"), (NO_BAR, "scrollbar")],
            )
        )
        date_box.add(Widget("label", text=BOOKING_DATE, align=Align.CENTER))

        self.departure = self.root.add(_dropdown(_options(8, -1), Align.TOP_LEFT, 50))
        self.departure.on(Event.VALUE_CHANGED, self._on_departure_selected)

        self.root.add(Widget("image", src="airplane_icon", align=Align.TOP_MID, y=130))

        self.arrival = self.root.add(_dropdown(_options(8, 0), Align.TOP_RIGHT, -50))
        self.arrival.on(Event.VALUE_CHANGED, self._on_arrival_selected)

        self.title = self.root.add(
            Widget(
                "label",
                text=TITLE_AVAILABLE,
                align=Align.TOP_MID,
                y=200,
                local={"main": Style(text_font="nn_regular_24")},
            )
        )

        self.flights_box = self.root.add(
            Widget(
                "obj",
                align=Align.TOP_MID,
                y=250,
                width=540,
                height=710,
                styles=[
                    (state.light_theme, "main"),
                    (state.flex_ver, "main"),
                    (NO_BAR, "scrollbar"),
                ],
                local={"main": Style(pad_all=0, pad_row=20)},
            )
        )

        self._generate_flights()

    @property
    def route(self) -> tuple[int, int]:
        """The (origin, destination) city indexes the dropdowns currently select."""
        origin = self.departure.selected
        destination = self.arrival.selected
        if destination >= origin:
            destination += 1
        return origin, destination

    def select_departure(self, index: int) -> None:
        """Choose the departure city by its position in the departure dropdown."""
        self._select(self.departure, index)

    def select_arrival(self, index: int) -> None:
        """Choose the arrival city by its position in the arrival dropdown."""
        self._select(self.arrival, index)

    def select_flight(self, index: int, slider_value: int) -> None:
        """Move the slider of the flight card at ``index`` to ``slider_value`` and release it."""
        card = self.flights_box.child(index)
        slider = card.child(6)
        slider.value = max(0, min(100, slider_value))
        slider.emit(Event.RELEASED)

    @staticmethod
    def _select(dropdown: Widget, index: int) -> None:
        if not 0 <= index < len(dropdown.options):
            raise IndexError(f"dropdown has no option {index}")
        dropdown.selected = index
        dropdown.emit(Event.VALUE_CHANGED)

    def _on_departure_selected(self, dropdown: Widget) -> None:
        index = dropdown.selected
        count = 8 if index < 4 else 4
        self.arrival.options = _options(count, index)
        self.arrival.selected = 0
        self._generate_flights()

    def _on_arrival_selected(self, _dropdown: Widget) -> None:
        self._generate_flights()

    def _generate_flights(self) -> None:
        self.flights_box.clear()
        origin, destination = self.route
        self.flights = get_flights(origin, destination, MAX_MATCHED_FLIGHTS)
        if not self.flights:
            self.title.text = TITLE_NONE
            return
        self.title.text = TITLE_AVAILABLE
        for flight in self.flights:
            card = flights_create(
                self.flights_box,
                city_name(flight.from_city),
                city_name(flight.to_city),
                format_hhmm(flight.departure_time),
                format_hhmm(flight.arrival_time),
                format_cost(flight.cost),
                format_duration(time_diff(flight.departure_time, flight.arrival_time)),
            )
            card.child(6).on(Event.RELEASED, self._booking_handler(flight))

    def _booking_handler(self, flight: Flight) -> Callable[[Widget], None]:
        def handle(slider: Widget) -> None:
            self._book(flight, slider.value)

        return handle

    def _book(self, flight: Flight, slider_value: int) -> None:
        self.booked = flight
        self.state.flight = flight
        self.state.subject("boarding").set(format_hhmm(boarding_time(flight.departure_time)))
        points = self.state.subject("points")
        points.set(points.value + flight.cost // 100)
        if slider_value > BOOKING_THRESHOLD and self.on_ticket is not None:
            self.on_ticket()


def book_create(state: AppState, on_ticket: Callable[[], Any] | None = None) -> BookScreen:
    """Build the booking screen; its widget tree is the returned screen's ``root``."""
    return BookScreen(state, on_ticket)