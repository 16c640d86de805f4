from rpgarena import constants as c
from rpgarena.models import (
    AllEffectsType,
    AttackType,
    EditStuff,
    EffectOutcome,
    EffectParam,
    EffectType,
    Stuff,
)


def test_attack_defaults():
    atk = AttackType()
    assert atk.name == "Atq"
    assert atk.level == 1
    assert atk.target == c.TARGET_ENNEMY
    assert atk.reach == c.REACH_INDIVIDUAL
    assert atk.photo_name == "default.png"
    assert atk.form == c.STANDARD_FORM
    assert atk.effects == []


def test_attack_crit_coefficients():
    assert AttackType.COEFF_CRIT_STATS == 1.5
    assert AttackType.COEFF_CRIT_DMG == 2.0
    assert AttackType().COEFF_CRIT_DMG > AttackType().COEFF_CRIT_STATS


def test_attack_effect_lists_are_independent():
    first, second = AttackType(), AttackType()
    first.effects.append(EffectParam(effect=c.EFFECT_REINIT))
    assert second.effects == []
    assert first.effects[0].effect == c.EFFECT_REINIT


def test_effect_param_defaults_and_equality():
    ep = EffectParam()
    assert ep.value == 0 and ep.nb_turns == 0
    assert ep.is_magic_atk is False and ep.passive_talent is False
    assert EffectParam(effect=c.EFFECT_VALUE_CHANGE, value=5) == EffectParam(
        effect=c.EFFECT_VALUE_CHANGE, value=5
    )


def test_all_effects_type_groups_are_separate():
    all_effects = AllEffectsType()
    all_effects.buf.effects.append("x")
    all_effects.buf.nb += 1
    assert all_effects.debuf == EffectType()
    assert all_effects.buf.nb == 1
    assert all_effects.one_turn_effect == 0


def test_effect_outcome_default_attack():
    outcome = EffectOutcome()
    assert outcome.atk == AttackType()
    assert outcome.is_critical is False
    assert outcome.new_effects == []


def test_stuff_has_own_stats():
    a, b = Stuff(), Stuff()
    a.stats.hp.init_values(10, 20)
    assert b.stats.hp.max_value == 0
    assert a.stats.hp.max_value == 20
    assert a.rank == 0 and a.is_loot is False


def test_edit_stuff_defaults():
    es = EditStuff()
    assert es.updated is False
    assert es.stuff == Stuff()
    es.stuff.stats_up_by_loot.append(c.STATS_HP)
    assert EditStuff().stuff.stats_up_by_loot == []