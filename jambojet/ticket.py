"""The ticket screen: the booked flight, the passenger's boarding details and a QR code."""

from __future__ import annotations

from .flights import (
    DEFAULT_FLIGHT,
    Flight,
    city_name,
    format_cost,
    format_duration,
    format_hhmm,
    time_diff,
)
from .home import CARD_OUTLINE
from .state import PRIMARY_COLOR, AppState, Style
from .widgets import Align, Widget, flights_create

QR_TEXT = "https://example.com/"
QR_SIZE = 280
TICKET_TITLE = "My Ticket"


def _font(name: str) -> dict[str, Style]:
    return {"main": Style(text_font=name)}


def ticket_create(state: AppState) -> Widget:
    """Build the ticket screen for the flight held in ``state.flight``.

    Children of the root: the logo (0), the flight card (1) and the ticket card (2).
    """
    flight: Flight = getattr(state, "flight", DEFAULT_FLIGHT)

    root = Widget(
        "obj",
        styles=[(state.light_theme, "main"), (state.flex_ver, "main")],
        local={"main": Style(pad_row=20, pad_bottom=0)},
    )
    root.add(Widget("image", src="logo"))

    flights_create(
        root,
        city_name(flight.from_city),
        city_name(flight.to_city),
        format_hhmm(flight.departure_time),
        format_hhmm(flight.arrival_time),
        format_cost(flight.cost),
        format_duration(time_diff(flight.departure_time, flight.arrival_time)),
    )

    card = root.add(
        Widget(
            "obj",
            height=600,
            styles=[(CARD_OUTLINE, "main"), (state.flex_ver, "main")],
            local={"main": Style(pad_row=20, pad_all=10)},
        )
    )
    card.add(Widget("label", text=TICKET_TITLE, align=Align.TOP_MID))

    name = card.add(Widget("label", local=_font("nn_bold_30")))
    name.bind_text(state.subject("name"))

    details = card.add(
        Widget(
            "obj",
            width="100%",
            height=80,
            styles=[(state.light_theme, "main")],
            local={"main": Style(text_font="nn_regular_24", pad_left=10, pad_right=10)},
        )
    )
    for subject, fmt, align in (
        ("flight", "Flight No: %s", Align.DEFAULT),
        ("seat", "Seat: %s", Align.TOP_RIGHT),
        ("terminal", "Terminal: %s", Align.BOTTOM_LEFT),
        ("gate", "Gate: %s", Align.BOTTOM_RIGHT),
    ):
        label = details.add(Widget("label", align=align))
        label.bind_text(state.subject(subject), fmt)

    boarding = card.add(
        Widget("label", width="100%", local={"main": Style(pad_left=10, pad_right=10)})
    )
    boarding.bind_text(state.subject("boarding"), "Boarding: %s")

    qr_box = card.add(
        Widget(
            "obj",
            width=300,
            height=300,
            styles=[(CARD_OUTLINE, "main")],
            local={"main": Style(pad_all=0)},
        )
    )
    qr_box.add(
        Widget(
            "qrcode",
            text=QR_TEXT,
            align=Align.CENTER,
            width=QR_SIZE,
            height=QR_SIZE,
            local={"dark": Style(bg_color=PRIMARY_COLOR)},
        )
    )
    return root