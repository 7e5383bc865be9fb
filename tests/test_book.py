import pytest

from jambojet.book import TITLE_AVAILABLE, TITLE_NONE, BookScreen, book_create
from jambojet.flights import City, city_list, city_name, format_cost, get_flights
from jambojet.state import AppState


@pytest.fixture
def state():
    return AppState("")


def test_initial_dropdown_options(state):
    screen = book_create(state)
    assert screen.departure.options == city_list(8, -1)
    assert screen.arrival.options == city_list(8, City.NBO_NAIROBI)
    assert City.ZNZ_ZANZIBAR.value not in [screen.departure.selected]


def test_initial_flights_are_nairobi_to_mombasa(state):
    screen = BookScreen(state)
    assert screen.route == (City.NBO_NAIROBI, City.MBA_MOMBASA)
    assert screen.flights == get_flights(City.NBO_NAIROBI, City.MBA_MOMBASA, 5)
    assert len(screen.flights_box.children) == len(screen.flights)
    assert screen.title.text == TITLE_AVAILABLE


def test_first_card_shows_flight_details(state):
    screen = BookScreen(state)
    texts = screen.flights_box.child(0).texts()
    assert "06:30" in texts
    assert "KES 7000" in texts
    assert city_name(City.NBO_NAIROBI) in texts
    assert city_name(City.MBA_MOMBASA) in texts


def test_every_card_has_slider_at_index_six(state):
    screen = BookScreen(state)
    for card in screen.flights_box.children:
        assert card.child(6).kind == "slider"


def test_departure_beyond_fourth_limits_arrivals(state):
    screen = BookScreen(state)
    screen.select_departure(City.GOM_GOMA)
    assert screen.arrival.options == city_list(4, City.GOM_GOMA)
    assert screen.arrival.selected == 0
    assert screen.route == (City.GOM_GOMA, City.NBO_NAIROBI)
    assert screen.flights == get_flights(City.GOM_GOMA, City.NBO_NAIROBI, 5)


def test_departure_change_resets_arrival_selection(state):
    screen = BookScreen(state)
    screen.select_arrival(2)
    screen.select_departure(City.MBA_MOMBASA)
    assert screen.arrival.selected == 0
    assert screen.arrival.options == city_list(8, City.MBA_MOMBASA)


def test_arrival_selection_skips_departure(state):
    screen = BookScreen(state)
    screen.select_departure(City.MBA_MOMBASA)
    screen.select_arrival(1)
    assert screen.route == (City.MBA_MOMBASA, City.EDL_ELDORET)
    assert screen.flights == get_flights(City.MBA_MOMBASA, City.EDL_ELDORET, 5)


def test_route_without_flights(state):
    screen = BookScreen(state)
    screen.select_arrival(3)
    assert screen.route == (City.NBO_NAIROBI, City.GOM_GOMA)
    assert screen.flights == []
    assert screen.flights_box.children == []
    assert screen.title.text == TITLE_NONE


def test_title_returns_when_flights_found_again(state):
    screen = BookScreen(state)
    screen.select_arrival(3)
    screen.select_arrival(0)
    assert screen.title.text == TITLE_AVAILABLE
    assert screen.flights


def test_selecting_below_threshold_updates_state_only(state):
    calls = []
    screen = BookScreen(state, lambda: calls.append(True))
    points_before = state.subject("points").value
    flight = screen.flights[0]
    screen.select_flight(0, 50)
    assert calls == []
    assert screen.booked == flight
    assert state.flight == flight
    assert state.subject("boarding").value == "05:50"
    assert state.subject("points").value == points_before + flight.cost // 100


def test_selecting_past_threshold_opens_ticket(state):
    calls = []
    screen = BookScreen(state, lambda: calls.append(True))
    screen.select_flight(1, 95)
    assert calls == [True]
    assert screen.booked == screen.flights[1]


def test_slider_value_is_clamped(state):
    calls = []
    screen = BookScreen(state, lambda: calls.append(True))
    screen.select_flight(0, 500)
    assert screen.flights_box.child(0).child(6).value == 100
    assert calls == [True]


def test_card_cost_matches_flight(state):
    screen = BookScreen(state)
    for card, flight in zip(screen.flights_box.children, screen.flights):
        assert format_cost(flight.cost) in card.texts()


def test_invalid_selections_raise(state):
    screen = BookScreen(state)
    with pytest.raises(IndexError):
        screen.select_departure(8)
    with pytest.raises(IndexError):
        screen.select_arrival(-1)
    with pytest.raises(IndexError):
        screen.select_flight(len(screen.flights), 50)