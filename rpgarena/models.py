"""Plain data records for effects, attacks, their outcomes and equipment."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar

from rpgarena import constants as c
from rpgarena.stats import Stats


@dataclass
class EffectParam:
    """One effect of an attack, as read from data and as tracked in game."""

    effect: str = ""
    value: int = 0
    nb_turns: int = 0
    sub_value_effect: int = 0
    target: str = ""
    reach: str = ""
    stats_name: str = ""
    counter_turn: int = 0
    is_magic_atk: bool = False
    passive_talent: bool = False


@dataclass
class EffectType:
    """A count of effects of one kind together with their descriptions."""

    nb: int = 0
    effects: list[str] = field(default_factory=list)


@dataclass
class AllEffectsType:
    """Effects active on a character, grouped by kind."""

    buf: EffectType = field(default_factory=EffectType)
    debuf: EffectType = field(default_factory=EffectType)
    hot: EffectType = field(default_factory=EffectType)
    dot: EffectType = field(default_factory=EffectType)
    one_turn_effect: int = 0


@dataclass
class AttackType:
    """Definition of an attack a character can launch."""

    COEFF_CRIT_STATS: ClassVar[float] = 1.5
    COEFF_CRIT_DMG: ClassVar[float] = 2.0

    name: str = "Atq"
    level: int = 1
    mana_cost: int = 0
    vigor_cost: int = 0
    berseck_cost: int = 0
    target: str = c.TARGET_ENNEMY
    reach: str = c.REACH_INDIVIDUAL
    photo_name: str = "default.png"
    effects: list[EffectParam] = field(default_factory=list)
    form: str = c.STANDARD_FORM
    nature: Any = None
    atk_sound_path: str = ""


@dataclass
class EffectOutcome:
    """Result of applying one effect of an attack on a target."""

    log_display: str = ""
    new_effects: list[EffectParam] = field(default_factory=list)
    full_atk_amount_tx: int = 0
    real_amount_tx: int = 0
    target_name: str = ""
    atk: AttackType = field(default_factory=AttackType)
    is_critical: bool = False


@dataclass
class Stuff:
    """A piece of equipment and the stats it grants."""

    stats: Stats = field(default_factory=Stats)
    unique_name: str = ""
    name: str = ""
    body_part: str = ""
    rank: int = 0
    is_loot: bool = False
    stats_up_by_loot: list[str] = field(default_factory=list)


@dataclass
class EditStuff:
    """A piece of equipment being edited, with its change flag."""

    stuff: Stuff = field(default_factory=Stuff)
    name: str = ""
    body_part: str = ""
    updated: bool = False