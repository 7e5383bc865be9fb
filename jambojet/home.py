"""The home screen: loyalty card, booking card and upcoming flights."""

from __future__ import annotations

from .state import PRIMARY_COLOR, WHITE, AppState, Style
from .widgets import Align, Widget, upcoming_create

CARD_OUTLINE = Style(
    width=440,
    height=200,
    bg_color=WHITE,
    border_color=PRIMARY_COLOR,
    text_color=PRIMARY_COLOR,
    text_font="nn_regular_24",
)
CARD_FILLED = Style(
    width=440,
    height=200,
    bg_color=PRIMARY_COLOR,
    border_color=PRIMARY_COLOR,
    text_color=WHITE,
    text_font="nn_regular_24",
)
NO_BAR = Style(outline_opa=0, outline_width=0, bg_opa=0)

UPCOMING_INFO = "JM8668 to Eldoret • Terminal 1D"
UPCOMING_DETAIL = "Seat 2A • Boarding: 11:55"


def _font(name: str) -> dict[str, Style]:
    return {"main": Style(text_font=name)}


def home_create(state: AppState) -> Widget:
    """Build the home screen; its child at index 2 is the "Book Flight" card."""
    root = Widget("obj", styles=[(state.light_theme, "main"), (state.flex_ver, "main")])
    root.add(Widget("image", src="logo"))

    loyalty = root.add(Widget("obj", styles=[(CARD_FILLED, "main")]))
    name = loyalty.add(Widget("label", local=_font("nn_bold_24")))
    name.bind_text(state.subject("name"))
    tier = loyalty.add(Widget("label", align=Align.TOP_RIGHT))
    tier.bind_text(state.subject("tier"))
    number = loyalty.add(Widget("label", align=Align.BOTTOM_LEFT, local=_font("nn_regular_16")))
    number.bind_text(state.subject("loyalty"))
    points = loyalty.add(Widget("label", align=Align.BOTTOM_RIGHT, local=_font("nn_bold_30")))
    points.bind_text(state.subject("points"))
    loyalty.add(
        Widget("label", text="Points", align=Align.BOTTOM_RIGHT, y=-35, local=_font("nn_regular_16"))
    )
    loyalty.add(Widget("image", src="emerald_icon", align=Align.CENTER))

    book = root.add(Widget("obj", styles=[(CARD_OUTLINE, "main")]))
    book.add(Widget("label", text="Book Flight", align=Align.TOP_MID))
    book.add(Widget("image", src="tickets_icon", align=Align.CENTER))

    empty = root.add(Widget("obj", hidden=True, styles=[(CARD_OUTLINE, "main")]))
    empty.add(Widget("label", text="No Upcoming Flights", align=Align.TOP_MID))
    empty.add(Widget("image", src="luggage_icon", align=Align.CENTER))

    upcoming = root.add(
        Widget(
            "obj",
            styles=[(CARD_OUTLINE, "main"), (state.flex_ver, "main"), (NO_BAR, "scrollbar")],
            local={"main": Style(pad_row=5, pad_all=0)},
        )
    )
    upcoming.add(Widget("label", text="Upcoming Flights", align=Align.TOP_MID))
    upcoming_create(upcoming, UPCOMING_INFO, UPCOMING_DETAIL)
    upcoming_create(upcoming, UPCOMING_INFO, UPCOMING_DETAIL)

    return root