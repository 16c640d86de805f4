"""Visual themes: colour palettes, fonts and icon paths."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


@dataclass(frozen=True)
class Color:
    """An opaque RGB colour."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for component in (self.r, self.g, self.b):
            if not 0 <= component <= 255:
                raise ValueError(f"colour component out of range: {component}")

    def name(self) -> str:
        """Return the colour as '#rrggbb' in lower case."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


@dataclass(frozen=True)
class Font:
    """Font family, size in points and weight."""

    family: str
    point_size: int
    weight: int = 400


FONT_WEIGHT_THIN = 100

WHITE = Color(255, 255, 255)
GREY_LIGHTER = Color(242, 242, 242)
GREY_LIGHT = Color(224, 224, 224)
GREY = Color(189, 189, 189)
GREY_DARK = Color(150, 150, 150)
GREY_DARKER = Color(111, 111, 111)
BLACK_LIGHT = Color(27, 27, 27)
BLACK = Color(0, 0, 0)

BLUISH_GREY_LIGHTER = Color(79, 80, 84)
BLUISH_GREY_LIGHT = Color(59, 60, 64)
BLUISH_GREY = Color(52, 52, 56)
BLUISH_GREY_DARK = Color(45, 46, 51)

BLUE_LIGHTERER = Color(180, 200, 255)
BLUE_LIGHTER = Color(100, 150, 240)
BLUE_LIGHT = Color(73, 146, 219)
BLUE = Color(60, 122, 224)

BLUE_CYAN = Color(64, 177, 254)


class Themes(Enum):
    """Existing themes."""

    UNDEFINED = "UNDEFINED"
    LIGHT = "LIGHT"
    DARK = "DARK"


@dataclass(frozen=True)
class StylizerTheme:
    """All colours, fonts and icons of one visual theme; defaults are the light theme."""

    menu_bar_text: Color = WHITE
    menu_bar_bg: Color = BLACK_LIGHT

    menu_text: Color = WHITE
    menu_text_sec: Color = GREY_LIGHT
    menu_bg: Color = BLUE
    menu_border: Color = GREY
    menu_bg_hover: Color = BLUE_LIGHT
    menu_bg_pressed: Color = BLUE_LIGHTER

    calendar_available: Color = WHITE
    calendar_available_next: Color = BLUE_LIGHTERER
    calendar_selected: Color = BLUE
    calendar_selected_txt: Color = WHITE

    text_color_normal: Color = GREY_DARKER
    text_color_selected: Color = BLUE
    text_color_disabled: Color = GREY
    text_color_indication: Color = GREY_DARK

    bg_default: Color = WHITE
    bg_alternative: Color = GREY_LIGHTER
    bg_alternative2: Color = GREY_LIGHT
    list_bg: Color = WHITE
    list_border: Color = GREY

    separator_color: Color = GREY
    separator_color_2nd: Color = GREY_DARK

    bg_slider: Color = GREY
    handle_slider: Color = GREY_DARKER

    btn_border: Color = GREY
    btn_text: Color = GREY_DARKER
    btn_text_dis: Color = GREY
    btn_bg: Color = WHITE
    btn_bg_hover: Color = GREY_LIGHTER
    btn_bg_pressed: Color = GREY_LIGHT
    btn_bg_dis: Color = WHITE

    btn_ok_border: Color = BLUE
    btn_ok_text: Color = WHITE
    btn_ok_text_dis: Color = WHITE
    btn_ok_bg: Color = BLUE
    btn_ok_bg_hover: Color = BLUE_LIGHT
    btn_ok_bg_pressed: Color = BLUE_LIGHTER
    btn_ok_bg_dis: Color = GREY

    combobox_background: Color = WHITE

    font_normal: Font = Font("Nimbus Sans L", 9, FONT_WEIGHT_THIN)

    slider_handle: str = ":/icons/cursor-grey.svg"
    slider_handle_disabled: str = ":/icons/cursor-dis.svg"
    slider_handle_v: str = ":/icons/cursor-round-grey.svg"
    slider_handle_v_dis: str = ":/icons/close-grey.svg"
    drop_up_icon: str = ":/icons/dropup-grey.svg"

    hand_icon: str = ":/icons/move-grey.svg"
    zoom_in_icon: str = ":/icons/zoom-in-grey.svg"
    zoom_out_icon: str = ":/icons/zoom-out-grey.svg"
    dot_rect_icon: str = ":/icons/region-grey.svg"

    radio_button: str = ":/icons/radio-grey.svg"
    radio_button_checked: str = ":/icons/radio-checked-grey.svg"
    radio_button_disabled: str = ":/icons/radio-white.svg"


def create_light_theme() -> StylizerTheme:
    """Return the light colored theme."""
    return StylizerTheme()


def create_dark_theme() -> StylizerTheme:
    """Return the dark colored theme."""
    return replace(
        StylizerTheme(),
        menu_bar_text=GREY_DARK,
        menu_bar_bg=BLACK_LIGHT,
        menu_text=WHITE,
        menu_text_sec=GREY_DARK,
        menu_bg=BLUISH_GREY_DARK,
        menu_border=BLUE_CYAN,
        menu_bg_hover=BLUISH_GREY,
        menu_bg_pressed=BLUISH_GREY_LIGHT,
        calendar_available=BLUISH_GREY_LIGHTER,
        calendar_available_next=GREY_DARK,
        calendar_selected=BLUE_CYAN,
        calendar_selected_txt=WHITE,
        text_color_normal=WHITE,
        text_color_selected=BLUE_CYAN,
        text_color_disabled=GREY_DARKER,
        text_color_indication=GREY_DARK,
        bg_default=BLUISH_GREY,
        bg_alternative=BLUISH_GREY_LIGHT,
        bg_alternative2=BLUISH_GREY_DARK,
        list_bg=BLUISH_GREY_DARK,
        list_border=BLUISH_GREY_DARK,
        separator_color=BLACK_LIGHT,
        separator_color_2nd=GREY_DARKER,
        bg_slider=BLUISH_GREY_DARK,
        handle_slider=GREY_DARKER,
        btn_border=GREY_DARKER,
        btn_text=GREY_LIGHT,
        btn_text_dis=GREY_DARKER,
        btn_bg=BLUISH_GREY,
        btn_bg_hover=BLUISH_GREY_DARK,
        btn_bg_pressed=BLUISH_GREY,
        btn_bg_dis=BLUISH_GREY_LIGHT,
        btn_ok_border=BLUE_CYAN,
        btn_ok_text=WHITE,
        btn_ok_text_dis=WHITE,
        btn_ok_bg=BLUE_CYAN,
        btn_ok_bg_hover=BLUE_LIGHT,
        btn_ok_bg_pressed=BLUE_LIGHTER,
        btn_ok_bg_dis=GREY_DARK,
        combobox_background=BLACK_LIGHT,
        slider_handle=":/icons/cursor.svg",
        slider_handle_v=":/icons/cursor-round.svg",
        drop_up_icon=":/icons/dropup.svg",
        hand_icon=":/icons/move.svg",
        zoom_in_icon=":/icons/zoom-in.svg",
        zoom_out_icon=":/icons/zoom-out.svg",
        dot_rect_icon=":/icons/region.svg",
        radio_button=":/icons/radio-white.svg",
        radio_button_checked=":/icons/radio-checked-white.svg",
        radio_button_disabled=":/icons/radio-grey.svg",
    )


_THEMES_BY_KEY = {"DARK": Themes.DARK, "LIGHT": Themes.LIGHT}


def string_to_theme(key: str) -> Themes:
    """Map 'DARK' or 'LIGHT' to a theme; anything else gives UNDEFINED."""
    return _THEMES_BY_KEY.get(key, Themes.UNDEFINED)


def theme_to_string(theme: Themes) -> str:
    """Map a theme to its key; an undefined theme gives 'DARK'."""
    if theme in (Themes.DARK, Themes.LIGHT):
        return theme.value
    return "DARK"