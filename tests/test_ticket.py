from jambojet.flights import (
    DEFAULT_FLIGHT,
    FLIGHT_DB,
    city_name,
    format_cost,
    format_hhmm,
)
from jambojet.state import AppState
from jambojet.ticket import QR_TEXT, TICKET_TITLE, ticket_create


def test_default_flight_shown():
    state = AppState()
    root = ticket_create(state)
    texts = root.texts()
    assert format_hhmm(DEFAULT_FLIGHT.departure_time) in texts
    assert format_hhmm(DEFAULT_FLIGHT.arrival_time) in texts
    assert format_cost(DEFAULT_FLIGHT.cost) in texts
    assert "Nairobi (NBO)" in texts
    assert "Mombasa (MBA)" in texts


def test_ticket_details_bound_to_subjects():
    state = AppState()
    texts = ticket_create(state).texts()
    assert TICKET_TITLE in texts
    assert "Flight No: JM8669" in texts
    assert "Seat: 5A" in texts
    assert "Terminal: 1D" in texts
    assert "Gate: 4" in texts
    assert "Boarding: 11:55" in texts
    assert state.subject("name").value in texts


def test_subject_change_updates_ticket():
    state = AppState()
    root = ticket_create(state)
    state.subject("seat").set("12C")
    state.subject("gate").set("7")
    texts = root.texts()
    assert "Seat: 12C" in texts
    assert "Gate: 7" in texts
    assert "Seat: 5A" not in texts


def test_uses_booked_flight():
    state = AppState()
    flight = FLIGHT_DB[-1]
    state.flight = flight
    texts = ticket_create(state).texts()
    assert city_name(flight.from_city) in texts
    assert city_name(flight.to_city) in texts
    assert format_cost(flight.cost) in texts


def test_structure_and_qr_code():
    root = ticket_create(AppState())
    assert root.child(0).src == "logo"
    assert root.child(1).child(6).kind == "slider"
    card = root.child(2)
    qr = card.child(-1).child(0)
    assert qr.kind == "qrcode"
    assert qr.text == QR_TEXT
    assert QR_TEXT not in root.texts()


def test_clear_releases_bindings():
    state = AppState()
    root = ticket_create(state)
    assert state.subject("seat").observer_count == 1
    root.clear()
    assert state.subject("seat").observer_count == 0
    assert state.subject("boarding").observer_count == 0