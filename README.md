# rpgarena

The core data model of a turn-based role-playing arena. The package contains
the following modules:

- `rpgarena.constants` is the game's vocabulary: JSON keys, stat names, effect
  names, targets, reaches, forms, classes, sound file names and file paths.
  The sets of allowed values are frozensets, for example `ALL_STATS`,
  `EFFECTS` and `ALL_TARGETS`.
- `rpgarena.stats` holds character statistics.
  - `StatsType` is one statistic. `init_values(current, maximum)` sets its
    current and maximum values, raw values included.
  - `Stats` is the full sheet. `by_name(name)` looks a stat up by its key and
    raises `KeyError` for an unknown name. `items()` yields `(name, stat)`
    pairs in declaration order.
- `rpgarena.models` holds plain dataclasses: `EffectParam`, `EffectType`,
  `AllEffectsType`, `AttackType`, `EffectOutcome`, `Stuff` and `EditStuff`.
- `rpgarena.bossclass` covers boss loot.
  - `StuffRank` is the rarity enum.
  - `Buffer` is a flat or percent bonus.
  - `get_buffer(is_percent, init_value, delta)` builds four bonus steps.
  - `BossClass` holds the shared tables `PROBA_LOOTS`, `ARMOR`,
    `BONUS_STAT_STR` and `BONUS_LIST`, plus a per-instance `rank`.
- `rpgarena.theme` covers visual themes.
  - `Color` is an RGB colour. `name()` returns it as `#rrggbb`.
  - `Font` is a font description.
  - `Themes` is the enum of theme names.
  - `StylizerTheme` is a frozen dataclass of colours, a font and icon paths.
    Its defaults are the light theme.
  - `create_light_theme()` and `create_dark_theme()` return the two themes.
  - `string_to_theme(key)` maps `"DARK"` and `"LIGHT"` to a theme. Any other
    key gives `UNDEFINED`.
  - `theme_to_string(theme)` maps a theme to its key. `UNDEFINED` gives
    `"DARK"`.
- `rpgarena.stylizer` builds Qt-style style sheets.
  - `build_stylesheet(theme)` and `build_button_stylesheet(theme)` build the
    style sheet text for a theme.
  - `Stylizer` holds the current theme. `set_theme(theme_name)` selects the
    dark theme for `Themes.DARK` and the light theme for any other name.
  - `stylesheet()` and `button_stylesheet()` return the text for the current
    theme.
  - `apply_theme(widget)` and `apply_button_theme(widget)` call
    `widget.setStyleSheet(...)`.
- `rpgarena.parameters` reads the INI configuration.
  - `IniFile` holds the parsed file. Build it from a mapping, or with
    `IniFile.from_string(text)` or `IniFile.from_path(path)`.
  - `read_config_file(ini_file)` fills a `Parameters` object. Its `global_`
    section is a `GlobalParameters`, with `log_path`,
    `skyopsgateway_tcpserver_address`, `skyopsgateway_tcpserver_port`,
    `is_window_shown` and `debug_mode`.
  - `Parameters` reports problems through `unexpected_sections()`,
    `unexpected_keys()`, `incorrect_values()` and `legacy_params()`.
  - Booleans count as valid only when written `YES` or `NO`. `TRUE` and
    `FALSE` are read, but they are reported as incorrect values.

## Installation

```
pip install .
```

## Example

```python
from rpgarena.stats import Stats
from rpgarena.theme import string_to_theme
from rpgarena.stylizer import Stylizer
from rpgarena.parameters import IniFile, read_config_file

stats = Stats()
stats.by_name("PV").init_values(100, 120)
print(stats.hp.max_value)  # 120

stylizer = Stylizer()
stylizer.set_theme(string_to_theme("DARK"))
css = stylizer.stylesheet()

ini = IniFile.from_string("[GLOBAL]\nDEBUG_MODE = YES\nEXTRA = 1\n")
params = read_config_file(ini)
print(params.global_.debug_mode)  # True
print(params.unexpected_keys())   # [('GLOBAL', 'EXTRA')]
```

## What the package does not do

The package holds data and configuration only. It has no:

- combat engine: no applying of effects, damage, healing, turn order or game
  state;
- loading or saving of characters, attacks, equipment or games from JSON;
- sound;
- windows or screens.

The `Stylizer` only produces style sheet text and hands it to an object that
has a `setStyleSheet` method.

## Tests

```
pip install .[test]
pytest
```