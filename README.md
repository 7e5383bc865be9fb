# jambojet

A small airline booking interface for a domestic and regional flight
network. The three screens (home, flight booking and ticket) are built as a
tree of plain Python widgets, so the whole flow can be driven and inspected
without a display.

## What it does

- **Home** (`jambojet.home.home_create`): a loyalty card showing the
  passenger's name, tier, loyalty number and points, a "Book Flight" card
  (child index 2 of the screen) and a list of upcoming flights.
- **Book** (`jambojet.book.BookScreen`, built by `book_create`): pick a
  departure and an arrival city from two dropdowns. The screen lists up to
  five matching flights from the built-in timetable, with departure and
  arrival times, fare in KES and duration, or shows "No Flights Available".
  Releasing a flight card's slider books that flight: the boarding time
  (40 minutes before departure) is stored in the `boarding` subject and
  `cost // 100` points are added to `points`. If the slider was released
  above 90, the ticket screen is opened.
- **Ticket** (`jambojet.ticket.ticket_create`): the booked flight's card,
  the passenger's name, flight number, seat, terminal, gate and boarding
  time, and a QR code widget.

`jambojet.app.App` holds the shared state and moves between the screens.
The booking and ticket screens get a navigation bar at the bottom; `back()`
clicks it (booking goes back to home, ticket goes back to booking). Leaving
the booking or ticket screen discards it, and it is built afresh next time.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Command line

```
jambojet [ASSET_PATH]
```

`ASSET_PATH` is an optional prefix for font and image file paths (empty by
default). The program prints the widget tree of the home screen, then reads
commands from standard input, one per line, and prints the current screen
after each:

| command          | effect                                               |
|------------------|------------------------------------------------------|
| `home`           | show the home screen                                 |
| `book`           | show the booking screen                              |
| `ticket`         | show the ticket screen                               |
| `back`           | click the current screen's navigation bar            |
| `tap`            | on the home screen, click the "Book Flight" card     |
| `depart N`       | on the booking screen, pick departure option N       |
| `arrive N`       | on the booking screen, pick arrival option N         |
| `select I VALUE` | on the booking screen, release flight I's slider at VALUE (0–100) |
| `show`           | print the current screen again                       |
| `quit`           | stop                                                 |

Bad commands print `error: ...` on standard error and are otherwise ignored.
The program also stops at the end of input.

## Library use

Timetable helpers live in `jambojet.flights`:

```python
from jambojet.flights import City, get_flights, city_name, format_hhmm, boarding_time

for flight in get_flights(City.NBO_NAIROBI, City.MBA_MOMBASA, 5):
    print(city_name(flight.from_city), format_hhmm(flight.departure_time))

print(format_hhmm(boarding_time(900)))   # 08:20
```

The module also has `get_flight` (first match or `None`), `time_diff`
(HHMM difference, wrapping past midnight), `city_list` / `build_city_list`
for dropdown options, and `format_duration` / `format_cost`.

Driving the screens through `jambojet.app.App`:

```python
from jambojet.app import App

app = App("")
app.show_book()
app.book.select_departure(0)
app.book.select_arrival(0)
app.book.select_flight(0, 100)   # books the first flight and opens the ticket
print(app.screen.render())
app.back()
```

Shared values such as the passenger name or points are `Subject` objects held
by `jambojet.state.AppState`. Widgets bound to a subject with
`Widget.bind_text` update whenever it is set:

```python
from jambojet.state import AppState

state = AppState("")
state.subject("points").set(700)
```

Widgets (`jambojet.widgets.Widget`) support `add`, `child`, `clear`,
`bind_text`, `on` / `emit` for events, `texts()` to collect label text and
`render()` for an indented outline.

## What it does not do

- Nothing is drawn on a screen: there is no window, display driver or touch
  input. The screens exist only as widget trees that can be rendered as text.
- Fonts and images are recorded as file paths in `AppState.fonts` and
  `AppState.images`; no file is opened or loaded.
- The QR code widget only carries its text and size; no QR code is encoded.
- Bookings are not stored anywhere; they last only as long as the `App`.