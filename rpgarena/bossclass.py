"""Boss ranks, loot probabilities and bonus tables."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar

from rpgarena import constants as c


class StuffRank(IntEnum):
    """Rarity of a looted piece of equipment."""

    NO_CLASS = 0
    COMMUN = 1
    RARE = 2
    EPIC = 3
    LEGENDARY = 4


@dataclass(frozen=True)
class Buffer:
    """A bonus value, either flat or in percent."""

    value: int = 0
    is_percent: bool = False


def get_buffer(is_percent: bool, init_value: int, delta: int) -> tuple[Buffer, ...]:
    """Return the four bonus steps starting at *init_value*, spaced by *delta*."""
    return tuple(Buffer(init_value + delta * i, is_percent) for i in range(4))


@dataclass
class BossClass:
    """Rank of a boss together with the loot tables shared by all bosses."""

    # Cumulative thresholds per rank: {no loot, commun, rare, epic, legendary}
    PROBA_LOOTS: ClassVar[tuple[tuple[int, ...], ...]] = (
        (100, 0, 0, 0, 0),
        (0, 60, 90, 100, 0),
        (0, 30, 70, 100, 0),
        (0, 20, 50, 90, 100),
        (0, 0, 20, 75, 100),
        (0, 0, 0, 40, 100),
    )
    # Armor per stuff rank: commun, rare, epic, legendary
    ARMOR: ClassVar[tuple[int, ...]] = (25, 50, 75, 100)
    BONUS_STAT_STR: ClassVar[tuple[str, ...]] = (
        c.STATS_HP,
        c.STATS_REGEN_HP,
        c.STATS_MANA,
        c.STATS_REGEN_MANA,
        c.STATS_VIGOR,
        c.STATS_REGEN_VIGOR,
        c.STATS_BERSECK,
        c.STATS_RATE_BERSECK,
        c.STATS_ARM_MAG,
        c.STATS_ARM_PHY,
        c.STATS_POW_MAG,
        c.STATS_POW_PHY,
        c.STATS_DODGE,
        c.STATS_REGEN_SPEED,
        c.STATS_CRIT,
    )
    BONUS_LIST: ClassVar[dict[str, tuple[Buffer, ...]]] = {
        c.STATS_HP: get_buffer(True, 3, 4),
        c.STATS_REGEN_HP: get_buffer(False, 2, 1),
        c.STATS_MANA: get_buffer(True, 3, 4),
        c.STATS_REGEN_MANA: get_buffer(False, 2, 1),
        c.STATS_VIGOR: get_buffer(True, 3, 4),
        c.STATS_REGEN_VIGOR: get_buffer(False, 2, 1),
        c.STATS_BERSECK: get_buffer(True, 3, 4),
        c.STATS_RATE_BERSECK: get_buffer(False, 1, 1),
        c.STATS_ARM_MAG: get_buffer(False, 25, 25),
        c.STATS_ARM_PHY: get_buffer(False, 25, 25),
        c.STATS_POW_MAG: get_buffer(False, 20, 20),
        c.STATS_POW_PHY: get_buffer(False, 20, 20),
        c.STATS_DODGE: get_buffer(False, 1, 1),
        c.STATS_REGEN_SPEED: get_buffer(False, 2, 1),
        c.STATS_CRIT: get_buffer(False, 2, 1),
    }

    rank: int = 0