import io

from jambojet.app import App, main, ui_init
from jambojet.flights import FLIGHT_DB, format_hhmm, boarding_time
from jambojet.widgets import Event


def test_starts_on_home():
    app = ui_init("")
    assert app.screen is app.home
    assert "Book Flight" in app.screen.texts()


def test_book_card_opens_booking():
    app = App()
    app.home.child(2).emit(Event.CLICKED)
    assert app.book is not None
    assert app.screen is app.book.root


def test_back_from_book_returns_home_and_deletes_book():
    app = App()
    app.show_book()
    app.back()
    assert app.screen is app.home
    assert app.book is None


def test_back_on_home_stays():
    app = App()
    app.back()
    assert app.screen is app.home


def test_sliding_past_threshold_opens_ticket():
    app = App()
    points_before = app.state.subject("points").value
    app.show_book()
    app.book.select_flight(0, 100)
    assert app.ticket is not None
    assert app.screen is app.ticket
    assert app.book is None
    assert app.state.flight == FLIGHT_DB[0]
    assert app.state.subject("points").value == points_before + FLIGHT_DB[0].cost // 100
    expected = "Boarding: " + format_hhmm(boarding_time(FLIGHT_DB[0].departure_time))
    assert expected in app.screen.texts()


def test_short_slide_stays_on_book():
    app = App()
    app.show_book()
    book = app.book
    app.book.select_flight(0, 50)
    assert app.screen is book.root
    assert app.ticket is None


def test_back_from_ticket_recreates_book_and_releases_bindings():
    app = App()
    name = app.state.subject("name")
    base = name.observer_count
    app.show_book()
    app.book.select_flight(0, 100)
    assert name.observer_count == base + 1
    app.back()
    assert app.book is not None
    assert app.screen is app.book.root
    assert app.ticket is None
    assert name.observer_count == base


def test_show_home_recreates_missing_home():
    app = App()
    app.show_book()
    app.home = None
    app.show_home()
    assert app.home is not None
    assert app.screen is app.home


def test_main_runs_commands(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("tap\nselect 0 100\nquit\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Book Flight" in out
    assert "My Ticket" in out


def test_main_reports_bad_command(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("fly\ndepart 1\n"))
    assert main([]) == 0
    err = capsys.readouterr().err
    assert "unknown command 'fly'" in err
    assert "not on the booking screen" in err