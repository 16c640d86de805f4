"""Reading of the global INI configuration, with reports of bad or unknown entries."""

from __future__ import annotations

import configparser
import math
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import IntEnum
from itertools import takewhile
from os import PathLike
from typing import ClassVar

_WHITESPACE = " \t\n\r\f\v"
_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_FLOAT_PREFIX = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


class IniFile:
    """Sections of an INI file, each holding ordered key/value pairs."""

    def __init__(self, sections: Mapping[str, Mapping[str, str]] | None = None) -> None:
        self._sections: dict[str, dict[str, str]] = {
            name: dict(values) for name, values in (sections or {}).items()
        }

    @classmethod
    def from_string(cls, text: str) -> IniFile:
        """Parse INI text; section and key names keep their case."""
        parser = configparser.ConfigParser(
            interpolation=None, strict=False, default_section=""
        )
        parser.optionxform = str  # type: ignore[assignment,method-assign]
        parser.read_string(text)
        return cls({name: dict(parser.items(name)) for name in parser.sections()})

    @classmethod
    def from_path(cls, path: str | PathLike[str]) -> IniFile:
        """Read and parse the INI file at *path*."""
        with open(path, encoding="utf-8") as handle:
            return cls.from_string(handle.read())

    def section_names(self) -> list[str]:
        """Return the section names in file order."""
        return list(self._sections)

    def section_keys(self, section: str) -> list[str]:
        """Return the keys of *section* in file order; empty if the section is absent."""
        return list(self._sections.get(section, {}))

    def get_string(self, section: str, key: str) -> str | None:
        """Return the raw value of *key* in *section*, or None if it is absent."""
        return self._sections.get(section, {}).get(key)


class TriStateBool(IntEnum):
    """A boolean that may also be left to its default."""

    FALSE = -1
    DEFAULT = 0
    TRUE = 1


def _parse_integer(text: str, base: int, bits: int) -> int:
    """Parse the leading integer of *text* the way strtol does, within *bits* bits."""
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest.startswith(("+", "-")):
        sign = -1 if rest[0] == "-" else 1
        rest = rest[1:]
    if base in (0, 16) and rest[:2].lower() == "0x" and rest[2:3].lower() in _DIGITS[:16] and rest[2:3]:
        rest = rest[2:]
        base = 16
    elif base == 0:
        base = 8 if rest.startswith("0") else 10
    if not 2 <= base <= 36:
        raise ValueError(f"unsupported base: {base}")
    allowed = _DIGITS[:base]
    digits = "".join(takewhile(lambda ch: ch.lower() in allowed, rest))
    if not digits:
        raise ValueError(f"no integer in {text!r}")
    value = sign * int(digits, base)
    limit = 1 << (bits - 1)
    if not -limit <= value < limit:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def _parse_double(text: str) -> float:
    """Parse the leading floating-point number of *text* the way strtod does."""
    match = _FLOAT_PREFIX.match(text.lstrip(_WHITESPACE))
    if match is None:
        raise ValueError(f"no number in {text!r}")
    literal = match.group()
    value = float(literal)
    if math.isinf(value) and "inf" not in literal.lower():
        raise ValueError(f"number out of range: {text!r}")
    mantissa = re.split(r"[eE]", literal)[0]
    if value == 0.0 and any(ch in "123456789" for ch in mantissa):
        raise ValueError(f"number out of range: {text!r}")
    return value


@dataclass
class ParametersSection:
    """One expected section of the configuration and its rejected values."""

    section_name_abstract: str = ""
    section_name_real: str = ""
    incorrect_values: list[tuple[str, str]] = field(default_factory=list)

    def register_param_read(
        self, name: str, value: str, is_valid: bool, params: Parameters
    ) -> None:
        """Record that *name* was read, and whether its value was rejected."""
        if not is_valid:
            self.incorrect_values.append((name, value))
            params.register_incorrect_value(self.section_name_real, name, value)
        params._read_expected_parameters.append((self.section_name_real, name))

    def _raw(self, ini_file: IniFile, name: str) -> str | None:
        return ini_file.get_string(self.section_name_real, name)

    def decode_str(self, ini_file: IniFile, name: str, params: Parameters) -> str | None:
        """Return the value of *name*, or None if the key is absent."""
        raw = self._raw(ini_file, name)
        if raw is None:
            return None
        self.register_param_read(name, raw, True, params)
        return raw

    def decode_bool(self, ini_file: IniFile, name: str, params: Parameters) -> bool | None:
        """Return the boolean value of *name*, or None if the key is absent.

        Only YES and NO are valid; TRUE and FALSE are understood but reported
        as incorrect, and any other text gives False and is reported too.
        """
        raw = self._raw(ini_file, name)
        if raw is None:
            return None
        word = raw.upper()
        value = word in ("YES", "TRUE")
        is_valid = word in ("YES", "NO")
        self.register_param_read(name, raw, is_valid, params)
        return value

    def decode_tri_state_bool(
        self, ini_file: IniFile, name: str, params: Parameters
    ) -> TriStateBool | None:
        """Return the tri-state value of *name*, or None if the key is absent.

        TRUE is understood but reported as incorrect; unknown text gives DEFAULT
        and is reported as incorrect.
        """
        raw = self._raw(ini_file, name)
        if raw is None:
            return None
        table = {
            "YES": (TriStateBool.TRUE, True),
            "TRUE": (TriStateBool.TRUE, False),
            "NO": (TriStateBool.FALSE, True),
            "FALSE": (TriStateBool.FALSE, True),
            "DEFAULT": (TriStateBool.DEFAULT, True),
        }
        value, is_valid = table.get(raw.upper(), (TriStateBool.DEFAULT, False))
        self.register_param_read(name, raw, is_valid, params)
        return value

    def _decode_integer(
        self, ini_file: IniFile, name: str, base: int, bits: int, params: Parameters
    ) -> int | None:
        raw = self._raw(ini_file, name)
        if raw is None:
            return None
        try:
            value: int | None = _parse_integer(raw, base, bits)
        except ValueError:
            value = None
        self.register_param_read(name, raw, value is not None, params)
        return value

    def decode_int(
        self, ini_file: IniFile, name: str, base: int, params: Parameters
    ) -> int | None:
        """Return the 32-bit integer value of *name*; None if absent or invalid.

        With base 16 the value must start with '0x', otherwise it is read in base 10.
        """
        raw = self._raw(ini_file, name)
        if base == 16 and (raw is None or len(raw) < 3 or not raw.startswith("0x")):
            base = 10
        return self._decode_integer(ini_file, name, base, 32, params)

    def decode_long(
        self, ini_file: IniFile, name: str, base: int, params: Parameters
    ) -> int | None:
        """Return the 64-bit integer value of *name*; None if absent or invalid."""
        return self._decode_integer(ini_file, name, base, 64, params)

    def decode_double(
        self, ini_file: IniFile, name: str, params: Parameters
    ) -> float | None:
        """Return the floating-point value of *name*; None if absent or invalid."""
        raw = self._raw(ini_file, name)
        if raw is None:
            return None
        try:
            value: float | None = _parse_double(raw)
        except ValueError:
            value = None
        self.register_param_read(name, raw, value is not None, params)
        return value


@dataclass
class GlobalParameters(ParametersSection):
    """The GLOBAL section and its defaults."""

    log_path: str = "log"
    skyopsgateway_tcpserver_address: str = "127.0.0.1"
    skyopsgateway_tcpserver_port: str = "36504"
    is_window_shown: bool = False
    debug_mode: bool = False


@dataclass
class Parameters:
    """Configuration values together with what was unexpected or wrong in the file."""

    POSSIBLE_SECTIONS: ClassVar[tuple[str, ...]] = ("GLOBAL",)

    global_: GlobalParameters = field(default_factory=GlobalParameters)
    _found_expected_sections: list[str] = field(default_factory=list, repr=False)
    _all_sections_read: list[tuple[str, list[str]]] = field(default_factory=list, repr=False)
    _read_expected_parameters: list[tuple[str, str]] = field(default_factory=list, repr=False)
    _incorrect_values: list[tuple[str, str, str]] = field(default_factory=list, repr=False)
    _legacy_params: list[tuple[str, str, str, bool]] = field(default_factory=list, repr=False)

    def unexpected_sections(self) -> list[str]:
        """Return sections of the file that are not expected."""
        return [
            name
            for name, _ in self._all_sections_read
            if name not in self._found_expected_sections
        ]

    def unexpected_keys(self) -> list[tuple[str, str]]:
        """Return (section, key) pairs of expected sections that were never read."""
        return [
            (name, key)
            for name, keys in self._all_sections_read
            if name in self._found_expected_sections
            for key in keys
            if (name, key) not in self._read_expected_parameters
        ]

    def incorrect_values(self) -> list[tuple[str, str, str]]:
        """Return (section, key, value) triples whose values were rejected."""
        return list(self._incorrect_values)

    def legacy_params(self) -> list[tuple[str, str, str, bool]]:
        """Return (section, new key, legacy key, both present) records."""
        return list(self._legacy_params)

    def register_incorrect_value(self, section: str, key: str, value: str) -> None:
        """Record a rejected value."""
        self._incorrect_values.append((section, key, value))

    def register_found_expected_section(self, section: str) -> None:
        """Record an expected section, once."""
        if section not in self._found_expected_sections:
            self._found_expected_sections.append(section)

    def register_legacy_param(
        self, section: str, new_key: str, legacy_key: str, both_present: bool
    ) -> None:
        """Record the use of a legacy key."""
        self._legacy_params.append((section, new_key, legacy_key, both_present))

    def _record_sections(self, sections: Iterable[tuple[str, list[str]]]) -> None:
        self._all_sections_read.extend(sections)


def read_config_file(ini_file: IniFile) -> Parameters:
    """Read every expected parameter from *ini_file*; absent keys keep their defaults."""
    params = Parameters()
    params._record_sections(
        (name, ini_file.section_keys(name)) for name in ini_file.section_names()
    )

    section_name = "GLOBAL"
    params.register_found_expected_section(section_name)
    section = params.global_
    section.section_name_abstract = section_name
    section.section_name_real = section_name

    for key, attribute in (
        ("LOG_PATH", "log_path"),
        ("SKYOPSGATEWAY_TCPSERVER_ADDRESS", "skyopsgateway_tcpserver_address"),
        ("SKYOPSGATEWAY_TCPSERVER_PORT", "skyopsgateway_tcpserver_port"),
    ):
        text = section.decode_str(ini_file, key, params)
        if text is not None:
            setattr(section, attribute, text)

    for key, attribute in (
        ("IS_WINDOW_SHOWN", "is_window_shown"),
        ("DEBUG_MODE", "debug_mode"),
    ):
        flag = section.decode_bool(ini_file, key, params)
        if flag is not None:
            setattr(section, attribute, flag)

    return params