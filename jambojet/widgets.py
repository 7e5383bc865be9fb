"""A small retained widget tree and the reusable flight and upcoming-flight cards."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable

from .state import PRIMARY_COLOR, WHITE, Style, Subject


class Align(Enum):
    """Placement of a widget inside its parent."""

    DEFAULT = "default"
    TOP_LEFT = "top_left"
    TOP_MID = "top_mid"
    TOP_RIGHT = "top_right"
    LEFT_MID = "left_mid"
    CENTER = "center"
    RIGHT_MID = "right_mid"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_MID = "bottom_mid"
    BOTTOM_RIGHT = "bottom_right"


class Event(Enum):
    """Events a widget can dispatch to its handlers."""

    CLICKED = "clicked"
    RELEASED = "released"
    VALUE_CHANGED = "value_changed"
    SCREEN_UNLOADED = "screen_unloaded"


Handler = Callable[["Widget"], Any]


@dataclass(eq=False)
class Widget:
    """A node of the user-interface tree: object, label, image, slider, dropdown or QR code."""

    kind: str = "obj"
    text: str = ""
    src: str | None = None
    align: Align = Align.DEFAULT
    x: int = 0
    y: int = 0
    width: int | str | None = None
    height: int | str | None = None
    value: int = 0
    options: list[str] = field(default_factory=list)
    selected: int = 0
    hidden: bool = False
    clickable: bool = False
    styles: list[tuple[Style, str]] = field(default_factory=list)
    local: dict[str, Style] = field(default_factory=dict)
    children: list[Widget] = field(default_factory=list, repr=False)
    parent: Widget | None = field(default=None, repr=False)
    _handlers: dict[Event, list[Handler]] = field(default_factory=dict, repr=False)
    _bindings: list[tuple[Subject, Callable[[Any], None]]] = field(
        default_factory=list, repr=False
    )

    def add(self, child: Widget) -> Widget:
        """Attach ``child`` as the last child and return it."""
        if child.parent is not None:
            child.parent.children.remove(child)
        child.parent = self
        self.children.append(child)
        return child

    def child(self, index: int) -> Widget:
        """Return the child at ``index``; negative indexes count from the end."""
        try:
            return self.children[index]
        except IndexError:
            raise IndexError(f"{self.kind} has no child {index}") from None

    def clear(self) -> None:
        """Delete every child, releasing their subject bindings."""
        for child in self.children:
            child._release()
            child.parent = None
        self.children.clear()

    def _release(self) -> None:
        for subject, observer in self._bindings:
            subject.unsubscribe(observer)
        self._bindings.clear()
        for child in self.children:
            child._release()

    def bind_text(self, subject: Subject, fmt: str | None = None) -> None:
        """Keep this widget's text in step with ``subject``, optionally through a %-format."""

        def update(value: Any) -> None:
            self.text = fmt % value if fmt else str(value)

        subject.subscribe(update)
        self._bindings.append((subject, update))

    def on(self, event: Event, callback: Handler) -> None:
        """Register ``callback`` to be called with this widget when ``event`` fires."""
        self._handlers.setdefault(event, []).append(callback)

    def emit(self, event: Event) -> None:
        """Dispatch ``event`` to every handler registered for it."""
        for callback in list(self._handlers.get(event, [])):
            callback(self)

    def texts(self) -> list[str]:
        """Return the text of every label in the subtree, depth first."""
        found = [self.text] if self.kind == "label" else []
        for child in self.children:
            found.extend(child.texts())
        return found

    def render(self, indent: int = 0) -> str:
        """Return an indented outline of the subtree."""
        parts = [self.kind]
        if self.text:
            parts.append(repr(self.text))
        if self.src:
            parts.append(f"src={self.src}")
        if self.kind == "slider":
            parts.append(f"value={self.value}")
        if self.align is not Align.DEFAULT:
            parts.append(f"align={self.align.value}")
        if self.hidden:
            parts.append("hidden")
        lines = ["  " * indent + " ".join(parts)]
        lines.extend(child.render(indent + 1) for child in self.children)
        return "\n".join(lines)


def _attach(parent: Widget | None, widget: Widget) -> Widget:
    return parent.add(widget) if parent is not None else widget


FLIGHT_CARD = Style(
    width=440,
    height=110,
    bg_color=WHITE,
    border_color=PRIMARY_COLOR,
    border_width=2,
    radius=10,
    text_color=PRIMARY_COLOR,
    text_font="nn_regular_24",
    pad_all=10,
)
FLIGHT_SLIDER = Style(width=380, height=2, bg_color=PRIMARY_COLOR)
FLIGHT_SLIDER_INDIC = Style(bg_color=PRIMARY_COLOR, border_color=0x54022C, bg_opa=155, width=20)
FLIGHT_SLIDER_KNOB = Style(
    bg_color=PRIMARY_COLOR,
    border_color=PRIMARY_COLOR,
    width=24,
    bg_opa=0,
    pad_all=20,
    bg_image_src="airplane_icon",
)

UPCOMING_CARD = Style(
    width=440,
    height=55,
    bg_color=WHITE,
    border_color=PRIMARY_COLOR,
    border_width=1,
    border_side="bottom",
    radius=0,
    text_color=PRIMARY_COLOR,
    text_font="nn_regular_16",
    pad_left=10,
    pad_right=10,
    pad_top=5,
    pad_bottom=5,
)


def _label(text: str, align: Align = Align.DEFAULT, font: str | None = None) -> Widget:
    local = {"main": Style(text_font=font)} if font else {}
    return Widget("label", text=text, align=align, local=local)


def flights_create(
    parent: Widget | None,
    from_city: str,
    to_city: str,
    departure: str,
    arrival: str,
    cost: str,
    duration: str,
) -> Widget:
    """Create a flight card; its seventh child (index 6) is the booking slider."""
    card = _attach(parent, Widget("obj", styles=[(FLIGHT_CARD, "main")]))
    card.add(_label(departure))
    card.add(_label(from_city, Align.BOTTOM_LEFT, "nn_regular_16"))
    card.add(_label(arrival, Align.TOP_RIGHT))
    card.add(_label(to_city, Align.BOTTOM_RIGHT, "nn_regular_16"))
    card.add(_label(duration, Align.BOTTOM_MID, "nn_bold_24"))
    card.add(_label(cost, Align.TOP_MID, "nn_regular_24"))
    card.add(
        Widget(
            "slider",
            align=Align.CENTER,
            value=10,
            styles=[
                (FLIGHT_SLIDER, "main"),
                (FLIGHT_SLIDER_INDIC, "indicator"),
                (FLIGHT_SLIDER_KNOB, "knob"),
            ],
        )
    )
    return card


def upcoming_create(parent: Widget | None, info1: str, info2: str) -> Widget:
    """Create a one-line upcoming-flight row with two lines of text and a plane icon."""
    row = _attach(parent, Widget("obj", styles=[(UPCOMING_CARD, "main")]))
    row.add(Widget("image", src="airplane_icon", align=Align.RIGHT_MID))
    row.add(_label(info1))
    row.add(_label(info2, Align.BOTTOM_LEFT))
    return row