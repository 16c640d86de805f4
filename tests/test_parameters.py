import configparser

import pytest

from rpgarena.parameters import (
    IniFile,
    Parameters,
    ParametersSection,
    TriStateBool,
    read_config_file,
)


def _section(values):
    ini = IniFile({"S": values})
    section = ParametersSection(section_name_abstract="S", section_name_real="S")
    return ini, section, Parameters()


def test_defaults_when_file_is_empty():
    params = read_config_file(IniFile())
    g = params.global_
    assert g.log_path == "log"
    assert g.skyopsgateway_tcpserver_address == "127.0.0.1"
    assert g.skyopsgateway_tcpserver_port == "36504"
    assert g.is_window_shown is False
    assert g.debug_mode is False
    assert params.incorrect_values() == []
    assert params.unexpected_sections() == []


def test_values_read_from_text():
    text = (
        "[GLOBAL]\n"
        "LOG_PATH = logs/here\n"
        "SKYOPSGATEWAY_TCPSERVER_PORT = 4000\n"
        "IS_WINDOW_SHOWN = YES\n"
        "DEBUG_MODE = no\n"
    )
    params = read_config_file(IniFile.from_string(text))
    assert params.global_.log_path == "logs/here"
    assert params.global_.skyopsgateway_tcpserver_port == "4000"
    assert params.global_.is_window_shown is True
    assert params.global_.debug_mode is False
    assert params.incorrect_values() == []
    assert params.unexpected_keys() == []


def test_from_path(tmp_path):
    path = tmp_path / "conf.ini"
    path.write_text("[GLOBAL]\nLOG_PATH=abc\n", encoding="utf-8")
    params = read_config_file(IniFile.from_path(path))
    assert params.global_.log_path == "abc"


def test_key_case_is_preserved():
    ini = IniFile.from_string("[GLOBAL]\nLog_Path = x\n")
    assert ini.section_keys("GLOBAL") == ["Log_Path"]
    params = read_config_file(ini)
    assert params.global_.log_path == "log"
    assert params.unexpected_keys() == [("GLOBAL", "Log_Path")]


@pytest.mark.parametrize(
    "raw, expected, valid",
    [
        ("YES", True, True),
        ("yes", True, True),
        ("TRUE", True, False),
        ("NO", False, True),
        ("FALSE", False, False),
        ("maybe", False, False),
    ],
)
def test_decode_bool(raw, expected, valid):
    ini, section, params = _section({"K": raw})
    assert section.decode_bool(ini, "K", params) is expected
    if valid:
        assert params.incorrect_values() == []
    else:
        assert params.incorrect_values() == [("S", "K", raw)]
        assert section.incorrect_values == [("K", raw)]


def test_invalid_bool_in_file_resets_to_false_and_is_reported():
    params = read_config_file(IniFile({"GLOBAL": {"DEBUG_MODE": "TRUE"}}))
    assert params.global_.debug_mode is True
    assert params.incorrect_values() == [("GLOBAL", "DEBUG_MODE", "TRUE")]


@pytest.mark.parametrize(
    "raw, expected, valid",
    [
        ("YES", TriStateBool.TRUE, True),
        ("TRUE", TriStateBool.TRUE, False),
        ("NO", TriStateBool.FALSE, True),
        ("FALSE", TriStateBool.FALSE, True),
        ("Default", TriStateBool.DEFAULT, True),
        ("other", TriStateBool.DEFAULT, False),
    ],
)
def test_decode_tri_state_bool(raw, expected, valid):
    ini, section, params = _section({"K": raw})
    assert section.decode_tri_state_bool(ini, "K", params) is expected
    assert (params.incorrect_values() == []) is valid


@pytest.mark.parametrize(
    "value, member",
    [(-1, TriStateBool.FALSE), (0, TriStateBool.DEFAULT), (1, TriStateBool.TRUE)],
)
def test_tri_state_values(value, member):
    assert TriStateBool(value) is member


def test_missing_key_is_none_and_not_recorded():
    ini, section, params = _section({})
    assert section.decode_str(ini, "K", params) is None
    assert section.decode_bool(ini, "K", params) is None
    assert section.decode_int(ini, "K", 10, params) is None
    assert section.decode_double(ini, "K", params) is None
    assert params._read_expected_parameters == []
    assert params.incorrect_values() == []


def test_decode_int_decimal_and_partial():
    ini, section, params = _section({"A": "  -42", "B": "12abc"})
    assert section.decode_int(ini, "A", 10, params) == -42
    assert section.decode_int(ini, "B", 10, params) == 12
    assert params.incorrect_values() == []


def test_decode_int_hex_requires_prefix():
    ini, section, params = _section({"A": "0x1f", "B": "77"})
    assert section.decode_int(ini, "A", 16, params) == 31
    assert section.decode_int(ini, "B", 16, params) == 77


def test_decode_int_invalid_and_out_of_range():
    ini, section, params = _section({"A": "abc", "B": "99999999999"})
    assert section.decode_int(ini, "A", 10, params) is None
    assert section.decode_int(ini, "B", 10, params) is None
    assert params.incorrect_values() == [("S", "A", "abc"), ("S", "B", "99999999999")]


def test_decode_long_accepts_64_bit():
    ini, section, params = _section({"A": "99999999999", "B": "x"})
    assert section.decode_long(ini, "A", 10, params) == 99999999999
    assert section.decode_long(ini, "B", 10, params) is None
    assert params.incorrect_values() == [("S", "B", "x")]


def test_decode_double():
    ini, section, params = _section({"A": "2.5", "B": "1e3xyz", "C": "nope", "D": "1e999"})
    assert section.decode_double(ini, "A", params) == 2.5
    assert section.decode_double(ini, "B", params) == 1000.0
    assert section.decode_double(ini, "C", params) is None
    assert section.decode_double(ini, "D", params) is None
    assert [entry[1] for entry in params.incorrect_values()] == ["C", "D"]


def test_unexpected_sections_and_keys():
    ini = IniFile(
        {
            "GLOBAL": {"LOG_PATH": "l", "EXTRA": "1"},
            "OTHER": {"X": "y"},
        }
    )
    params = read_config_file(ini)
    assert params.unexpected_sections() == ["OTHER"]
    assert params.unexpected_keys() == [("GLOBAL", "EXTRA")]


def test_register_found_expected_section_once():
    params = Parameters()
    params.register_found_expected_section("GLOBAL")
    params.register_found_expected_section("GLOBAL")
    params._record_sections([("GLOBAL", ["K"])])
    assert params.unexpected_sections() == []
    assert params.unexpected_keys() == [("GLOBAL", "K")]


def test_legacy_params_returned_as_copy():
    params = Parameters()
    params.register_legacy_param("GLOBAL", "NEW", "OLD", True)
    listed = params.legacy_params()
    listed.clear()
    assert params.legacy_params() == [("GLOBAL", "NEW", "OLD", True)]


def test_ini_file_accessors():
    ini = IniFile.from_string("[A]\nk1 = v1\nk2=v2\n[B]\n")
    assert ini.section_names() == ["A", "B"]
    assert ini.section_keys("A") == ["k1", "k2"]
    assert ini.section_keys("missing") == []
    assert ini.get_string("A", "k2") == "v2"
    assert ini.get_string("B", "k1") is None


def test_ini_without_section_header_raises():
    with pytest.raises(configparser.MissingSectionHeaderError) as excinfo:
        IniFile.from_string("key = value\n")
    assert excinfo.value.lineno == 1