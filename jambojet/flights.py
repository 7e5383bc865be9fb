"""Cities, the flight timetable and the time arithmetic used by the booking screens."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

MAX_CITY_STRING = 256
BOARDING_LEAD_MINUTES = 40
_MINUTES_PER_DAY = 24 * 60


class City(IntEnum):
    """Airports served, in timetable order."""

    NBO_NAIROBI = 0
    MBA_MOMBASA = 1
    EDL_ELDORET = 2
    KIS_KISUMU = 3
    GOM_GOMA = 4
    LAU_LAMU = 5
    MYD_MALINDI = 6
    UKA_UKUNDA = 7
    ZNZ_ZANZIBAR = 8


_CITY_NAMES = {
    City.NBO_NAIROBI: "Nairobi (NBO)",
    City.EDL_ELDORET: "Eldoret (EDL)",
    City.KIS_KISUMU: "Kisumu (KIS)",
    City.GOM_GOMA: "Goma (GOM)",
    City.LAU_LAMU: "Lamu (LAU)",
    City.MYD_MALINDI: "Malindi (MYD)",
    City.MBA_MOMBASA: "Mombasa (MBA)",
    City.UKA_UKUNDA: "Ukunda (UKA)",
    City.ZNZ_ZANZIBAR: "Zanzibar (ZNZ)",
}

UNKNOWN_CITY = "Unknown City"


@dataclass(frozen=True)
class Flight:
    """A scheduled flight; times are HHMM integers, cost is in KES."""

    from_city: City
    to_city: City
    departure_time: int
    arrival_time: int
    cost: int


@dataclass
class Ticket:
    """A boarding pass for a booked flight."""

    flight: Flight
    boarding_time: int
    flight_number: str
    seat: str
    terminal: str
    gate: str


def _f(origin: City, destination: City, dep: int, arr: int, cost: int) -> Flight:
    return Flight(origin, destination, dep, arr, cost)


_N, _M, _E, _K = City.NBO_NAIROBI, City.MBA_MOMBASA, City.EDL_ELDORET, City.KIS_KISUMU
_G, _L, _Y = City.GOM_GOMA, City.LAU_LAMU, City.MYD_MALINDI
_U, _Z = City.UKA_UKUNDA, City.ZNZ_ZANZIBAR

FLIGHT_DB: tuple[Flight, ...] = (
    _f(_N, _M, 630, 745, 7000),
    _f(_N, _M, 825, 940, 7000),
    _f(_N, _M, 1735, 1850, 6860),
    _f(_N, _M, 1920, 2035, 6580),
    _f(_N, _M, 1945, 2100, 6720),
    _f(_N, _E, 610, 710, 5500),
    _f(_N, _E, 720, 820, 5800),
    _f(_N, _E, 1210, 1310, 6000),
    _f(_N, _E, 1550, 1650, 6200),
    _f(_N, _E, 1830, 1930, 6500),
    _f(_N, _K, 600, 700, 9800),
    _f(_N, _K, 910, 1010, 10300),
    _f(_N, _K, 1250, 1350, 9800),
    _f(_N, _K, 1850, 1950, 8300),
    _f(_N, _L, 900, 1020, 8300),
    _f(_E, _K, 1220, 1255, 4800),
    _f(_E, _K, 1830, 1905, 5000),
    _f(_K, _N, 1210, 1320, 5200),
    _f(_K, _N, 1830, 1940, 5300),
    _f(_N, _Z, 900, 1030, 11000),
    _f(_N, _Z, 1330, 1500, 11500),
    _f(_M, _Z, 900, 1015, 7000),
    _f(_M, _L, 800, 900, 5000),
    _f(_M, _L, 1200, 1300, 5200),
    _f(_M, _Y, 900, 950, 4000),
    _f(_M, _Y, 1300, 1350, 4200),
    _f(_M, _U, 800, 850, 3000),
    _f(_M, _U, 1200, 1250, 3200),
    _f(_M, _G, 900, 1030, 12000),
    _f(_M, _G, 1300, 1430, 12500),
    _f(_M, _E, 800, 930, 7000),
    _f(_M, _E, 1200, 1330, 7200),
    _f(_M, _K, 900, 1030, 8000),
    _f(_M, _K, 1300, 1430, 8200),
    _f(_M, _N, 600, 730, 7000),
    _f(_M, _N, 900, 1030, 7200),
    _f(_M, _N, 1300, 1430, 7500),
    _f(_E, _N, 610, 710, 5500),
    _f(_E, _N, 720, 820, 5800),
    _f(_E, _N, 1210, 1310, 6000),
    _f(_E, _N, 1550, 1650, 6200),
    _f(_E, _N, 1830, 1930, 6500),
    _f(_E, _M, 800, 930, 7000),
    _f(_E, _M, 1200, 1330, 7200),
    _f(_E, _K, 1220, 1255, 4800),
    _f(_E, _K, 1830, 1905, 5000),
    _f(_K, _M, 900, 1030, 8000),
    _f(_K, _M, 1300, 1430, 8200),
    _f(_K, _E, 1220, 1255, 4800),
    _f(_K, _E, 1830, 1905, 5000),
    _f(_Z, _M, 900, 1015, 7000),
    _f(_Z, _N, 900, 1030, 11000),
    _f(_Z, _N, 1330, 1500, 11500),
    _f(_L, _M, 800, 900, 5000),
    _f(_L, _M, 1200, 1300, 5200),
    _f(_L, _N, 900, 1020, 8300),
    _f(_Y, _M, 900, 950, 4000),
    _f(_Y, _M, 1300, 1350, 4200),
    _f(_Y, _N, 900, 1030, 11000),
    _f(_U, _M, 800, 850, 3000),
    _f(_U, _M, 1200, 1250, 3200),
    _f(_U, _N, 900, 1020, 8300),
    _f(_U, _M, 800, 850, 3000),
    _f(_U, _M, 1200, 1250, 3200),
    _f(_G, _M, 900, 1030, 12000),
    _f(_G, _M, 1300, 1430, 12500),
    _f(_G, _N, 900, 1030, 11000),
    _f(_G, _N, 1330, 1500, 11500),
)

DEFAULT_FLIGHT = Flight(City.NBO_NAIROBI, City.MBA_MOMBASA, 900, 1030, 7000)

DEFAULT_TICKET = Ticket(
    flight=DEFAULT_FLIGHT,
    boarding_time=830,
    flight_number="JM8669",
    seat="5A",
    terminal="1D",
    gate="4",
)


def city_name(city: City | int) -> str:
    """Return the display name of a city, or "Unknown City" for an unknown value."""
    try:
        return _CITY_NAMES[City(city)]
    except ValueError:
        return UNKNOWN_CITY


def city_list(count: int, skip_city: int) -> list[str]:
    """Return up to ``count`` city names in timetable order, leaving out ``skip_city``."""
    if count <= 0:
        return []
    names = [city_name(city) for city in City if city != skip_city]
    return names[:count]


def build_city_list(count: int, skip_city: int) -> str:
    """Return the city names as newline-separated dropdown options."""
    return "\n".join(city_list(count, skip_city))[: MAX_CITY_STRING - 1]


def get_flight(origin: City | int, destination: City | int) -> Flight | None:
    """Return the first scheduled flight between two cities, or None."""
    return next(
        (f for f in FLIGHT_DB if f.from_city == origin and f.to_city == destination),
        None,
    )


def get_flights(origin: City | int, destination: City | int, max_results: int = 5) -> list[Flight]:
    """Return up to ``max_results`` scheduled flights between two cities, in timetable order."""
    if max_results <= 0:
        return []
    matches = (f for f in FLIGHT_DB if f.from_city == origin and f.to_city == destination)
    result: list[Flight] = []
    for flight in matches:
        result.append(flight)
        if len(result) >= max_results:
            break
    return result


def _to_minutes(hhmm: int) -> int:
    hours, minutes = divmod(hhmm, 100)
    return hours * 60 + minutes


def _to_hhmm(minutes: int) -> int:
    hours, mins = divmod(minutes, 60)
    return hours * 100 + mins


def time_diff(time1: int, time2: int) -> int:
    """Return the time from ``time1`` to ``time2`` as HHMM, wrapping past midnight."""
    return _to_hhmm((_to_minutes(time2) - _to_minutes(time1)) % _MINUTES_PER_DAY)


def boarding_time(departure_time: int) -> int:
    """Return the boarding time (HHMM), forty minutes before departure."""
    return _to_hhmm((_to_minutes(departure_time) - BOARDING_LEAD_MINUTES) % _MINUTES_PER_DAY)


def format_hhmm(value: int) -> str:
    """Format an HHMM integer as "HH:MM"."""
    hours, minutes = divmod(value, 100)
    return f"{hours:02d}:{minutes:02d}"[:5]


def format_duration(value: int) -> str:
    """Format an HHMM duration as "Hh MMm"."""
    hours, minutes = divmod(value, 100)
    return f"{hours}h {minutes:02d}m"


def format_cost(cost: int) -> str:
    """Format a price in Kenyan shillings."""
    return f"KES {cost}"