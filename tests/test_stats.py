import pytest

from rpgarena import constants as c
from rpgarena.stats import Stats, StatsType


def test_stats_type_defaults_are_zero():
    st = StatsType(c.STATS_HP)
    assert st.name == c.STATS_HP
    assert (st.current_value, st.max_value, st.raw_max_value, st.current_raw_value) == (
        0,
        0,
        0,
        0,
    )
    assert st.buf_equip_percent == 0


def test_init_values_sets_raw_values_too():
    st = StatsType(c.STATS_MANA)
    st.init_values(40, 120)
    assert st.current_value == 40
    assert st.current_raw_value == 40
    assert st.max_value == 120
    assert st.raw_max_value == 120
    assert st.buf_effect_value == 0


def test_items_cover_every_named_stat():
    names = [name for name, _ in Stats().items()]
    assert len(names) == len(set(names))
    assert set(names) == c.ALL_STATS - {""}


def test_items_follow_declaration_order():
    names = [name for name, _ in Stats().items()]
    assert names[0] == c.STATS_HP
    assert names[-1] == c.STATS_REGEN_SPEED


@pytest.mark.parametrize("name", sorted(c.ALL_STATS - {""}))
def test_by_name_returns_matching_stat(name):
    stats = Stats()
    assert stats.by_name(name).name == name


def test_by_name_returns_same_object_as_attribute():
    stats = Stats()
    stats.by_name(c.STATS_HP).init_values(10, 50)
    assert stats.hp.current_value == 10
    assert stats.hp.max_value == 50
    assert stats.by_name(c.STATS_DODGE) is stats.dodge


def test_items_pairs_name_with_stat():
    for name, stat in Stats().items():
        assert stat.name == name


def test_by_name_unknown_raises_key_error():
    with pytest.raises(KeyError):
        Stats().by_name("does not exist")


def test_by_name_empty_name_raises_key_error():
    with pytest.raises(KeyError):
        Stats().by_name("")


def test_instances_do_not_share_stats():
    first = Stats()
    second = Stats()
    first.vigor.init_values(7, 9)
    assert second.vigor.current_value == 0
    assert first.vigor is not second.vigor
    assert first.vigor.current_value == 7