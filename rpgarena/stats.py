"""Character statistics: one value record per stat and the full stat sheet."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field, fields

from rpgarena import constants as c


@dataclass
class StatsType:
    """Current, maximum and buff values of a single statistic."""

    name: str = ""
    current_value: int = 0
    max_value: int = 0
    base_equip_value: int = 0
    raw_max_value: int = 0
    current_raw_value: int = 0
    buf_effect_value: int = 0
    buf_effect_percent: int = 0
    buf_equip_value: int = 0
    buf_equip_percent: int = 0

    def init_values(self, current: int, maximum: int) -> None:
        """Set current and max values, raw values included."""
        self.current_value = current
        self.current_raw_value = current
        self.max_value = maximum
        self.raw_max_value = maximum


def _stat(name: str):
    return field(default_factory=lambda: StatsType(name))


@dataclass
class Stats:
    """The complete set of statistics of a character or an item."""

    hp: StatsType = _stat(c.STATS_HP)
    mana: StatsType = _stat(c.STATS_MANA)
    vigor: StatsType = _stat(c.STATS_VIGOR)
    berseck: StatsType = _stat(c.STATS_BERSECK)
    berseck_rate: StatsType = _stat(c.STATS_RATE_BERSECK)
    arm_phy: StatsType = _stat(c.STATS_ARM_PHY)
    arm_mag: StatsType = _stat(c.STATS_ARM_MAG)
    pow_phy: StatsType = _stat(c.STATS_POW_PHY)
    pow_mag: StatsType = _stat(c.STATS_POW_MAG)
    aggro: StatsType = _stat(c.STATS_AGGRO)
    aggro_rate: StatsType = _stat(c.STATS_RATE_AGGRO)
    speed: StatsType = _stat(c.STATS_SPEED)
    critical_strike: StatsType = _stat(c.STATS_CRIT)
    dodge: StatsType = _stat(c.STATS_DODGE)
    regen_hp: StatsType = _stat(c.STATS_REGEN_HP)
    regen_mana: StatsType = _stat(c.STATS_REGEN_MANA)
    regen_vigor: StatsType = _stat(c.STATS_REGEN_VIGOR)
    regen_speed: StatsType = _stat(c.STATS_REGEN_SPEED)

    def _by_name_table(self) -> dict[str, StatsType]:
        return {stat.name: stat for stat in (getattr(self, f.name) for f in fields(self))}

    def by_name(self, name: str) -> StatsType:
        """Return the stat whose name key is *name*; KeyError if unknown."""
        try:
            return self._by_name_table()[name]
        except KeyError:
            raise KeyError(f"unknown stat: {name!r}") from None

    def items(self) -> Iterator[tuple[str, StatsType]]:
        """Yield (stat name, stat) pairs in declaration order."""
        for f in fields(self):
            stat = getattr(self, f.name)
            yield stat.name, stat