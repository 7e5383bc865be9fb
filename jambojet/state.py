"""Shared styles, fonts, images and observable subjects of the user interface."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

SUBJECT_STRING_LENGTH = 256

PRIMARY_COLOR = 0xE20177
WHITE = 0xFFFFFF
BLACK = 0x000000

_FONT_FILES: dict[str, tuple[str, int]] = {
    "inter_16": ("fonts/Inter_24pt_Regular.ttf", 16),
    "inter_24": ("fonts/Inter_24pt_Regular.ttf", 24),
    "inter_30": ("fonts/Inter_24pt_Regular.ttf", 30),
    "nn_regular_16": ("fonts/NunitoSans_10pt_Regular.ttf", 16),
    "nn_regular_24": ("fonts/NunitoSans_10pt_Regular.ttf", 24),
    "nn_bold_24": ("fonts/NunitoSans_10pt_Bold.ttf", 24),
    "nn_regular_30": ("fonts/NunitoSans_10pt_Regular.ttf", 30),
    "nn_bold_30": ("fonts/NunitoSans_10pt_Bold.ttf", 30),
}

_IMAGE_NAMES = ("logo", "emerald_icon", "tickets_icon", "luggage_icon", "airplane_icon")

_INITIAL_SUBJECTS: dict[str, str | int] = {
    "name": "Jane Doe",
    "seat": "5A",
    "flight": "JM8669",
    "terminal": "1D",
    "boarding": "11:55",
    "gate": "4",
    "tier": "Emerald",
    "loyalty": "JM000XXX000",
    "points": 673,
}


class Subject:
    """An observable value holding either a string or an integer.

    Observers are called with the current value when they subscribe and
    every time the value is set.
    """

    def __init__(self, value: str | int) -> None:
        if not isinstance(value, (str, int)):
            raise TypeError(f"subject value must be str or int, not {type(value).__name__}")
        self._is_text = isinstance(value, str)
        self.value: str | int = self._clip(value)
        self.previous: str | int = self.value
        self._observers: list[Callable[[str | int], Any]] = []

    def _clip(self, value: str | int) -> str | int:
        if isinstance(value, str):
            return value[: SUBJECT_STRING_LENGTH - 1]
        return value

    def set(self, value: str | int) -> None:
        """Store a new value of the subject's type and notify every observer."""
        if self._is_text and not isinstance(value, str):
            raise TypeError("string subject can only be set to a str")
        if not self._is_text and (not isinstance(value, int) or isinstance(value, bool)):
            raise TypeError("integer subject can only be set to an int")
        self.previous = self.value
        self.value = self._clip(value)
        for observer in list(self._observers):
            observer(self.value)

    def subscribe(self, callback: Callable[[str | int], Any]) -> None:
        """Add an observer and call it at once with the current value."""
        self._observers.append(callback)
        callback(self.value)

    def unsubscribe(self, callback: Callable[[str | int], Any]) -> None:
        """Remove an observer; raises ValueError if it was not subscribed."""
        self._observers.remove(callback)

    @property
    def observer_count(self) -> int:
        return len(self._observers)

    def __repr__(self) -> str:
        return f"Subject({self.value!r})"


@dataclass(frozen=True)
class Style:
    """A set of style properties; unset properties are None."""

    width: int | str | None = None
    height: int | str | None = None
    max_height: int | None = None
    bg_color: int | None = None
    bg_opa: int | None = None
    bg_image_src: str | None = None
    border_color: int | None = None
    border_width: int | None = None
    border_side: str | None = None
    radius: int | None = None
    outline_width: int | None = None
    outline_opa: int | None = None
    text_color: int | None = None
    text_font: str | None = None
    text_align: str | None = None
    pad_all: int | None = None
    pad_left: int | None = None
    pad_right: int | None = None
    pad_top: int | None = None
    pad_bottom: int | None = None
    pad_row: int | None = None
    layout: str | None = None
    flex_flow: str | None = None
    flex_main_place: str | None = None
    flex_cross_place: str | None = None
    flex_track_place: str | None = None

    def __post_init__(self) -> None:
        if self.pad_all is not None:
            for side in ("pad_left", "pad_right", "pad_top", "pad_bottom"):
                if getattr(self, side) is None:
                    object.__setattr__(self, side, self.pad_all)


DARK_THEME = Style(
    bg_color=BLACK,
    text_color=WHITE,
    pad_all=0,
    radius=0,
    border_width=0,
    width="100%",
    height="100%",
)

LIGHT_THEME = Style(
    bg_color=WHITE,
    pad_all=0,
    radius=0,
    border_width=0,
    width="100%",
    height="100%",
    text_color=PRIMARY_COLOR,
    text_font="nn_regular_24",
)

FLEX_VER = Style(
    layout="flex",
    flex_flow="column",
    pad_row=50,
    flex_track_place="center",
    flex_main_place="start",
    flex_cross_place="center",
    pad_all=50,
)


class AppState:
    """Everything the screens share: global styles, asset locations and subjects."""

    def __init__(self, asset_path: str = "") -> None:
        self.asset_path = asset_path
        self.dark_theme = DARK_THEME
        self.light_theme = LIGHT_THEME
        self.flex_ver = FLEX_VER
        self.fonts: dict[str, tuple[str, int]] = {
            name: (f"{asset_path}{path}", size) for name, (path, size) in _FONT_FILES.items()
        }
        self.images: dict[str, str] = {
            name: f"{asset_path}images/{name}.png" for name in _IMAGE_NAMES
        }
        self.subjects: dict[str, Subject] = {
            name: Subject(value) for name, value in _INITIAL_SUBJECTS.items()
        }

    def subject(self, name: str) -> Subject:
        """Return the subject registered under ``name``."""
        try:
            return self.subjects[name]
        except KeyError:
            raise KeyError(f"no subject named {name!r}") from None