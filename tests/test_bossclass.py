import pytest

from rpgarena import constants as c
from rpgarena.bossclass import BossClass, Buffer, StuffRank, get_buffer


@pytest.mark.parametrize("is_percent,init,delta", [(True, 3, 4), (False, 25, 25), (False, 0, 0)])
def test_get_buffer_steps(is_percent, init, delta):
    buffers = get_buffer(is_percent, init, delta)
    assert len(buffers) == 4
    assert buffers[0] == Buffer(init, is_percent)
    assert all(b.is_percent is is_percent for b in buffers)
    assert all(b2.value - b1.value == delta for b1, b2 in zip(buffers, buffers[1:]))


@pytest.mark.parametrize(
    "value, member",
    [
        (0, StuffRank.NO_CLASS),
        (1, StuffRank.COMMUN),
        (2, StuffRank.RARE),
        (3, StuffRank.EPIC),
        (4, StuffRank.LEGENDARY),
    ],
)
def test_stuff_rank_from_value(value, member):
    assert StuffRank(value) is member


def test_stuff_rank_order():
    ranks = [StuffRank(value) for value in range(5)]
    assert ranks == sorted(ranks)
    assert ranks[4] > ranks[3] > ranks[2] > ranks[1]


def test_default_rank():
    assert BossClass().rank == 0
    assert BossClass(rank=3).rank == 3


def test_proba_loots_table():
    boss = BossClass()
    assert boss.PROBA_LOOTS[0] == (100, 0, 0, 0, 0)
    assert len(boss.PROBA_LOOTS) == 6
    assert all(len(row) == len(StuffRank) for row in boss.PROBA_LOOTS)


def test_armor_table():
    boss = BossClass(rank=2)
    assert boss.ARMOR == (25, 50, 75, 100)


def test_bonus_list_covers_bonus_stats():
    boss = BossClass()
    assert set(boss.BONUS_LIST) == set(boss.BONUS_STAT_STR)
    assert len(boss.BONUS_STAT_STR) == len(set(boss.BONUS_STAT_STR))


def test_bonus_list_entries():
    assert BossClass.BONUS_LIST[c.STATS_ARM_MAG] == get_buffer(False, 25, 25)
    assert BossClass.BONUS_LIST[c.STATS_HP][0] == Buffer(3, True)
    assert not any(b.is_percent for b in BossClass.BONUS_LIST[c.STATS_CRIT])


def test_buffer_is_immutable():
    buffer = Buffer(1, False)
    with pytest.raises(AttributeError):
        buffer.value = 2
    assert buffer.value == 1
    assert buffer.is_percent is False