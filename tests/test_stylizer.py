import re
from dataclasses import replace

from rpgarena.stylizer import (
    Stylizer,
    build_button_stylesheet,
    build_stylesheet,
)
from rpgarena.theme import (
    Color,
    StylizerTheme,
    Themes,
    create_dark_theme,
    create_light_theme,
)


class _Widget:
    def __init__(self):
        self.sheets = []

    def setStyleSheet(self, sheet):  # noqa: N802
        self.sheets.append(sheet)


PLACEHOLDER = re.compile(r"%\d")


def test_full_stylesheet_has_no_unfilled_placeholders():
    for theme in (create_light_theme(), create_dark_theme()):
        assert PLACEHOLDER.search(build_stylesheet(theme)) is None


def test_button_stylesheet_has_no_unfilled_placeholders():
    for theme in (create_light_theme(), create_dark_theme()):
        assert PLACEHOLDER.search(build_button_stylesheet(theme)) is None


def test_two_digit_placeholder_is_not_split():
    theme = replace(
        StylizerTheme(), menu_text=Color(1, 2, 3), text_color_normal=Color(4, 5, 6)
    )
    sheet = build_stylesheet(theme)
    match = re.search(r"CompTabButton, QTabBar::tab \{\s*color:\s*(\S+);", sheet)
    assert match is not None
    assert match.group(1) == Color(1, 2, 3).name()


def test_icon_paths_are_inserted():
    theme = create_dark_theme()
    sheet = build_stylesheet(theme)
    assert f"url({theme.drop_up_icon})" in sheet
    assert f"url({theme.radio_button_checked})" in sheet
    assert f"url({theme.slider_handle_v_dis})" in sheet


def test_button_stylesheet_maps_hover_colour():
    theme = replace(StylizerTheme(), btn_ok_bg_hover=Color(9, 8, 7))
    sheet = build_button_stylesheet(theme)
    match = re.search(r"CompBigPrimaryButton:hover \{ background:\s*(\S+);", sheet)
    assert match.group(1) == Color(9, 8, 7).name()


def test_light_and_dark_sheets_differ():
    assert build_stylesheet(create_light_theme()) != build_stylesheet(
        create_dark_theme()
    )


def test_default_stylizer_is_undefined_light():
    stylizer = Stylizer()
    assert stylizer.theme_name is Themes.UNDEFINED
    assert stylizer.theme == create_light_theme()


def test_set_theme_dark_and_back():
    stylizer = Stylizer()
    stylizer.set_theme(Themes.DARK)
    assert stylizer.theme == create_dark_theme()
    assert stylizer.theme_name is Themes.DARK
    stylizer.set_theme(Themes.UNDEFINED)
    assert stylizer.theme == create_light_theme()
    assert stylizer.theme_name is Themes.UNDEFINED


def test_apply_theme_sets_sheet_on_widget():
    stylizer = Stylizer()
    stylizer.set_theme(Themes.DARK)
    widget = _Widget()
    stylizer.apply_theme(widget)
    assert widget.sheets == [build_stylesheet(create_dark_theme())]


def test_apply_button_theme_sets_sheet_on_widget():
    stylizer = Stylizer()
    stylizer.set_theme(Themes.LIGHT)
    widget = _Widget()
    stylizer.apply_button_theme(widget)
    assert widget.sheets == [stylizer.button_stylesheet()]
    assert create_light_theme().btn_ok_bg.name() in widget.sheets[0]