"""Style sheets built from a visual theme, and the holder of the current theme."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Mapping, Protocol, Sequence, Tuple

from rpgarena.theme import (
    Color,
    StylizerTheme,
    Themes,
    create_dark_theme,
    create_light_theme,
)


class StyledWidget(Protocol):
    """Anything that accepts a style sheet."""

    def setStyleSheet(self, sheet: str) -> None: ...  # noqa: N802


Declaration = Tuple[str, str]
Rule = Tuple[str, Sequence[Declaration]]


def _bg(value: str) -> Declaration:
    return ("background", value)


def _color(value: str) -> Declaration:
    return ("color", value)


def _url(icon_field: str, extra: str = "") -> str:
    return f"url({{{icon_field}}}){extra}"


def _padding(vertical: int, horizontal: int) -> list[Declaration]:
    return [
        ("padding-left", f"{horizontal}px"),
        ("padding-right", f"{horizontal}px"),
        ("padding-top", f"{vertical}px"),
        ("padding-bottom", f"{vertical}px"),
    ]


_BIG_BUTTON = [*_padding(10, 25), ("border-radius", "5px")]
_NO_SIZE = [("width", "0"), ("height", "0")]
_HANDLE_SIZE = [
    ("border", "0"),
    ("width", "12px"),
    ("min-width", "12px"),
    ("max-width", "12px"),
    ("height", "16px"),
    ("min-height", "16px"),
    ("max-height", "16px"),
]
_TRANSPARENT = "rgba(0,0,0,0)"
_CENTERED = " center no-repeat"

_GENERAL_RULES: list[Rule] = [
    ("CompMenu, CompMenu::item",
     [_color("{menu_bar_text}"), _bg("{menu_bar_bg}"), ("font-size", "8pt")]),
    ("QMainWindow, QLabel, QCheckBox, QRadioButton, QGroupBox, QDateTimeEdit, "
     "QTimeEdit, QListView, QTableView, QStatusBar, QProgressBar, #btn_new_mark",
     [_color("{text_color_normal}")]),
    ("CompTitleLabel", [("font-size", "14pt")]),
    ("QMainWindow, QMessageBox, QColorDialog, QDialog, QTabWidget, QTabWidget > QWidget",
     [_bg("{bg_default}")]),
    ("QTabWidget::pane", [("margin-top", "-1px"), ("border-top", "1px solid #999999")]),
    ("QTabBar::tab", [("padding", "8px")]),
    ("QTabBar::tab:!selected", [("margin-top", "2px"), ("margin-bottom", "1px")]),
    ("CompTabButton, QTabBar::tab", [_color("{menu_text}"), _bg("{menu_bg}")]),
    ("CompTabButton",
     [("border-radius", "0"), ("border-top-left-radius", "4px"),
      ("border-top-right-radius", "4px"), ("border", "0"), ("padding-top", "-2px")]),
    ("CompTabButtonIcon",
     [_color("{menu_text_sec}"), ("border-radius", "0"), ("font-size", "8pt"),
      ("padding-top", "15px")]),
    ("CompTabMinButton", [("font-size", "10pt")]),
    ("CompTabButton:hover", [_bg("{menu_bg_hover}")]),
    ("CompTabButton:disabled, QTabBar::tab:selected",
     [_bg("{menu_bg_pressed}"), ("border-bottom", "2px solid {menu_border}")]),
    ("CompTabButton:pressed", [_bg("{menu_bg_pressed}")]),
    ("CompIndicationLabel", [_color("{text_color_indication}")]),
    ("CompWidgetTabs CompIndicationLabel", [_color("{menu_text}")]),
    ("CompWidget1", [("border", "0")]),
    ("CompWidget1, QGroupBox", [_bg("{bg_alternative}")]),
    ("CompWidget2, QDateTimeEdit, QTimeEdit, QTableView, QStatusBar",
     [("border", "0"), _bg("{bg_alternative2}")]),
    ("QListView, QTreeView", [("border", "1px solid {list_border}"), _bg("{list_bg}")]),
    ("QTreeView::branch", [("border-image", "url(none.png)")]),
    ("CompWidgetTabs, CompTabLabel", [_bg("{menu_bg}")]),
    ("QFrame, QDateTimeEdit, QTimeEdit, CompScrollList",
     [("border-bottom", "1px solid {separator_color}")]),
    ("CompTabLabel",
     [_color("{menu_text_sec}"), ("font-size", "14pt"), ("padding-right", "20px"),
      ("border-radius", "0"), ("border", "0")]),
    ("CompWidgetBtmBorder",
     [("border", "0"), ("border-bottom", "1px solid {separator_color_2nd}")]),
    ("QColorDialog QPushButton, QDialogButtonBox QPushButton, CompPrimaryButton, "
     "CompSecondaryButton, QProgressDialog QPushButton",
     [("border", "1px solid {btn_border}"), _color("{btn_text}"), _bg("{btn_bg}"),
      *_padding(4, 15), ("border-radius", "3px")]),
    ("CompWidget1 CompSecondaryButton", [_bg("{bg_alternative}")]),
    ("CompWidget2 CompSecondaryButton", [_bg("{bg_alternative2}")]),
    (":disabled", [_color("{btn_text_dis}")]),
    ("CompSecondaryButton:disabled, CompSecondaryButton:checked, QComboBox:disabled, "
     "QLineEdit:disabled, QRadioButton:disabled, QCheckBox:disabled",
     [_bg("{btn_bg_dis}")]),
    ("CompBigSecondaryButton", _BIG_BUTTON),
    ("QDialogButtonBox QPushButton:hover, CompSecondaryButton:hover",
     [_bg("{btn_bg_hover}")]),
    ("QDialogButtonBox QPushButton:pressed, CompSecondaryButton:pressed",
     [_bg("{btn_bg_pressed}")]),
    ("CompPrimaryButton",
     [("border", "0px solid {btn_ok_border}"), _color("{btn_ok_text}"), _bg("{btn_ok_bg}")]),
    ("CompPrimaryButton:disabled", [_color("{btn_ok_text_dis}"), _bg("{btn_ok_bg_dis}")]),
    ("CompPrimaryButton:hover", [_bg("{btn_ok_bg_hover}")]),
    ("CompPrimaryButton:pressed", [_bg("{btn_ok_bg_pressed}")]),
    ("CompBigPrimaryButton", _BIG_BUTTON),
]

_INPUT_RULES: list[Rule] = [
    ("QComboBox, QLineEdit, QTextEdit, QDoubleSpinBox, QSpinBox", [_color("{btn_text}")]),
    ("QComboBox, QLineEdit, QTextEdit",
     [("border", "1px solid {btn_border}"), ("border-radius", "4px"),
      ("padding", "2px 5px 2px 5px"), ("min-width", "1.5em")]),
    ("QFrame", [("border-radius", "4px")]),
    ("#mark_list",
     [("border-radius", "4px"), ("border", "0px solid black"), ("font-size", "8pt"),
      ("padding", "8px"), ("padding-left", "20px")]),
    ("QColorDialog QLineEdit", [("border-radius", "0px"), ("padding", "0px 0px 0px 0px")]),
    ("QLineEdit, QTextEdit, QDoubleSpinBox, QSpinBox", [_bg("{list_bg}")]),
    ("QComboBox QAbstractItemView, QComboBox", [_bg("{combobox_background}")]),
    ("QLineEdit:disabled, QTextEdit:disabled, QDoubleSpinBox:disabled, QSpinBox:disabled",
     [_bg("{btn_ok_bg_dis}")]),
    ("QComboBox QAbstractItemView", [("border", "0"), ("padding", "2px")]),
    ("CompMarksComboBox",
     [("border-top", "0px"), ("border-left", "0px"), ("border-right", "0px"),
      ("border-radius", "0px")]),
    ("CompSearchInput, QDateTimeEdit, QTimeEdit",
     [("border", "0px"), ("border-radius", "0px"), ("border-bottom", "1px solid {btn_border}")]),
    ("QDateTimeEdit, QTimeEdit",
     [_color("{text_color_selected}"), _bg(_TRANSPARENT), ("padding", "2px 20px 2px 4px"),
      ("font-weight", "bold")]),
    ("QDateTimeEdit::up-button, QTimeEdit::up-button", _NO_SIZE),
    ("QDateTimeEdit::down-button, QTimeEdit::down-button", _NO_SIZE),
    ("QComboBox:focus, QLineEdit:focus", [("border-color", "{text_color_selected}")]),
    ("QComboBox::drop-down", [("border", "0")]),
    ("QComboBox::down-arrow", [("image", _url("drop_up_icon"))]),
    ("QComboBox::down-arrow:on", [("top", "1px"), ("left", "1px")]),
    ("CompWidget1 CompSearchInput, CompWidget1 QComboBox", [_bg("{bg_alternative}")]),
    ("CompWidget2 CompSearchInput, CompWidget2 QComboBox", [_bg("{bg_alternative2}")]),
    ("QSlider::groove:horizontal", [("height", "1px"), ("image", "0")]),
    ("QSlider::groove:vertical", [("width", "1px"), ("image", "0")]),
    ("QSlider::handle:horizontal:disabled, CompRangeHandle:disabled",
     [_bg(_url("slider_handle_disabled", _CENTERED))]),
    ("QSlider::handle, CompRangeHandle", [_bg(_url("slider_handle", _CENTERED))]),
    ("QSlider::handle:vertical", [_bg(_url("slider_handle_v", _CENTERED))]),
    ("QSlider::handle, CompRangeHandle", _HANDLE_SIZE),
    ("QSlider::handle:vertical:disabled", [_bg(_url("slider_handle_v_dis", _CENTERED))]),
    ("QSlider::handle:horizontal", [("margin", "-8px -0px")]),
    ("QSlider::handle:vertical", [("margin", "-3px -6px")]),
    ("QSlider::sub-page:horizontal, QSlider::add-page:vertical",
     [_bg("{text_color_selected}")]),
    ("CompWidgetTabs QSlider::sub-page:horizontal", [_bg("{menu_text}")]),
    ("QSlider::add-page:horizontal, CompRangeSlider::sub-page:horizontal, "
     "QSlider::sub-page:vertical",
     [_bg("{separator_color_2nd}")]),
    ("QCheckBox::indicator",
     [("width", "12px"), ("height", "12px"), ("border", "1px solid {btn_border}")]),
    ("QCheckBox::indicator:checked",
     [_bg("{text_color_selected}"), ("border", "1px solid {text_color_selected}")]),
    ("QCheckBox::indicator:checked:disabled",
     [_bg("{btn_border}"), ("border", "1px solid {separator_color_2nd}")]),
    ("QRadioButton::indicator", [("width", "12px"), ("height", "12px")]),
    ("QRadioButton::indicator", [("image", _url("radio_button"))]),
    ("QRadioButton::indicator::checked", [("image", _url("radio_button_checked"))]),
    ("QRadioButton::indicator:disabled", [("image", _url("radio_button_disabled"))]),
]

_LIST_RULES: list[Rule] = [
    ("QScrollArea", [("border", "0")]),
    ("QScrollBar", [("border", "1px solid {separator_color}"), _bg("{bg_slider}")]),
    ("QScrollBar::handle", [_bg("{handle_slider}"), ("border-radius", "2px")]),
    ("QScrollBar:vertical", [("width", "9px")]),
    ("QScrollBar:horizontal", [("height", "9px")]),
    ("QScrollBar::add-line, QScrollBar::sub-line", _NO_SIZE),
    ("QTableView", [("selection-background-color", _TRANSPARENT)]),
    ("QHeaderView::section",
     [("font-size", "8pt"), ("background-color", "{bg_default}"), ("border", "0"),
      _color("{text_color_normal}"), ("padding-bottom", "6px")]),
]

_MARK_RULES: list[Rule] = [
    ("CompMarkElement CompWidget1",
     [("border", "1px solid {bg_alternative2}"), ("border-left", "5px solid {btn_ok_bg}")]),
    ("CompMarkElement CompWidget2", [("border", "1px solid {bg_alternative2}")]),
    ("CompMarkElement QPushButton",
     [_color("{btn_text}"), ("border", "0"), _bg(_TRANSPARENT)]),
    ("CompMarkElement QPushButton:hover", [_color("{btn_text_dis}")]),
    ("#marks_list_frame > QFrame",
     [("border", "0"), ("margin-left", "2px"), ("border-left", "1px solid {btn_ok_bg}"),
      ("min-height", "15px")]),
    ("QCalendarWidget", [("font-size", "7pt")]),
    ("QCalendarWidget QWidget#qt_calendar_navigationbar, QCalendarWidget QToolButton",
     [_color("{text_color_indication}"), ("background-color", "{bg_alternative2}")]),
    ("QCalendarWidget QWidget", [("alternate-background-color", "{bg_alternative2}")]),
    ("QCalendarWidget QAbstractItemView:enabled",
     [_color("{text_color_normal}"), ("selection-background-color", "{text_color_selected}")]),
]

_AUDIO_RULES: list[Rule] = [
    ("CompListSlider",
     [("border-right", "1px solid {separator_color}"),
      ("border-top", "1px solid {separator_color_2nd}"),
      ("border-bottom", "1px solid {separator_color_2nd}"),
      _bg("url(:/icons/greypx.png) center repeat-x")]),
    ("CompListFirst",
     [("border-top-left-radius", "3px"), ("border-bottom-left-radius", "3px"),
      ("border-left", "1px solid {separator_color_2nd}")]),
    ("CompListLast",
     [("border-top-right-radius", "3px"), ("border-bottom-right-radius", "3px"),
      ("border-right", "1px solid {separator_color_2nd}")]),
]

_BUTTON_RULES: list[Rule] = [
    ("CompSecondaryButton:disabled, QComboBox:disabled, QLineEdit:disabled, "
     "QRadioButton:disabled, QCheckBox:disabled",
     [_bg("{btn_bg_dis}")]),
    ("CompBigSecondaryButton", _BIG_BUTTON),
    ("CompBigPrimaryButton",
     [("border", "0px solid {btn_ok_border}"), _color("{btn_ok_text}"), _bg("{btn_ok_bg}"),
      *_BIG_BUTTON]),
    ("CompBigPrimaryButton:disabled", [_color("{btn_ok_text_dis}"), _bg("{btn_ok_bg_dis}")]),
    ("CompBigPrimaryButton:hover", [_bg("{btn_ok_bg_hover}")]),
    ("CompBigPrimaryButton:pressed", [_bg("{btn_ok_bg_pressed}")]),
]


def _theme_values(theme: StylizerTheme) -> dict[str, str]:
    """Map each colour or icon field of *theme* to its text in a style sheet."""
    values: dict[str, str] = {}
    for theme_field in dataclasses.fields(theme):
        value = getattr(theme, theme_field.name)
        if isinstance(value, Color):
            values[theme_field.name] = value.name()
        elif isinstance(value, str):
            values[theme_field.name] = value
    return values


def _render(rules: Sequence[Rule], values: Mapping[str, str]) -> str:
    lines = []
    for selector, declarations in rules:
        body = " ".join(f"{prop}: {value.format_map(values)};" for prop, value in declarations)
        lines.append(f"{selector} {{ {body} }}")
    return "\n".join(lines) + "\n"


def build_stylesheet(theme: StylizerTheme) -> str:
    """Return the full application style sheet for *theme*."""
    values = _theme_values(theme)
    return "".join(
        _render(rules, values)
        for rules in (_GENERAL_RULES, _INPUT_RULES, _LIST_RULES, _MARK_RULES, _AUDIO_RULES)
    )


def build_button_stylesheet(theme: StylizerTheme) -> str:
    """Return the style sheet used for big buttons only."""
    return _render(_BUTTON_RULES, _theme_values(theme))


@dataclass
class Stylizer:
    """Holds the current theme and applies it to widgets."""

    theme: StylizerTheme = field(default_factory=StylizerTheme)
    theme_name: Themes = Themes.UNDEFINED

    def set_theme(self, theme_name: Themes) -> None:
        """Select the theme; it takes effect on the next apply."""
        if theme_name is Themes.DARK:
            self.theme = create_dark_theme()
        else:
            self.theme = create_light_theme()
        self.theme_name = theme_name

    def stylesheet(self) -> str:
        """Return the full style sheet of the current theme."""
        return build_stylesheet(self.theme)

    def button_stylesheet(self) -> str:
        """Return the button style sheet of the current theme."""
        return build_button_stylesheet(self.theme)

    def apply_theme(self, widget: StyledWidget) -> None:
        """Set the full style sheet on *widget* and so on its children."""
        widget.setStyleSheet(self.stylesheet())

    def apply_button_theme(self, widget: StyledWidget) -> None:
        """Set the button style sheet on *widget*."""
        widget.setStyleSheet(self.button_stylesheet())