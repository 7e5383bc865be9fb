import pytest

from jambojet.state import Subject
from jambojet.widgets import Align, Event, Widget, flights_create, upcoming_create


def _card(parent=None):
    return flights_create(
        parent, "Nairobi (NBO)", "Mombasa (MBA)", "06:30", "07:45", "KES 7000", "1h 15m"
    )


def test_flight_card_child_order():
    card = _card()
    assert card.texts() == [
        "06:30",
        "Nairobi (NBO)",
        "07:45",
        "Mombasa (MBA)",
        "1h 15m",
        "KES 7000",
    ]


def test_flight_card_slider_is_child_six():
    slider = _card().child(6)
    assert slider.kind == "slider"
    assert slider.value == 10
    assert slider.align is Align.CENTER
    assert [part for _, part in slider.styles] == ["main", "indicator", "knob"]


def test_flight_card_style_and_alignment():
    card = _card()
    style, part = card.styles[0]
    assert (style.width, style.height, part) == (440, 110, "main")
    assert card.child(1).align is Align.BOTTOM_LEFT
    assert card.child(4).local["main"].text_font == "nn_bold_24"


def test_card_attaches_to_parent():
    parent = Widget()
    card = _card(parent)
    assert parent.children == [card]
    assert card.parent is parent


def test_upcoming_row():
    row = upcoming_create(None, "first", "second")
    assert row.child(0).src == "airplane_icon"
    assert row.child(0).align is Align.RIGHT_MID
    assert row.texts() == ["first", "second"]
    assert row.styles[0][0].border_side == "bottom"


def test_child_negative_and_out_of_range():
    card = _card()
    assert card.child(-1) is card.child(6)
    with pytest.raises(IndexError):
        card.child(7)


def test_bind_text_follows_subject():
    subject = Subject("5A")
    label = Widget("label")
    label.bind_text(subject, "Seat: %s")
    assert label.text == "Seat: 5A"
    subject.set("7C")
    assert label.text == "Seat: 7C"


def test_bind_text_without_format_uses_value():
    subject = Subject(3)
    label = Widget("label")
    label.bind_text(subject)
    subject.set(4)
    assert label.text == "4"


def test_clear_removes_children_and_bindings():
    subject = Subject("a")
    parent = Widget()
    label = parent.add(Widget("label"))
    label.bind_text(subject)
    parent.clear()
    assert parent.children == []
    assert subject.observer_count == 0
    assert label.parent is None


def test_emit_calls_handlers_with_target():
    widget = Widget()
    seen = []
    widget.on(Event.CLICKED, seen.append)
    widget.emit(Event.RELEASED)
    widget.emit(Event.CLICKED)
    assert seen == [widget]


def test_render_outline_nests_children():
    lines = _card().render().splitlines()
    assert lines[0] == "obj"
    assert lines[1] == "  label '06:30'"
    assert len(lines) == 8
    assert lines[-1].startswith("  slider")