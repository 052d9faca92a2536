"""Rough attack-power equivalents used to rank items without simulating."""

from __future__ import annotations

from wargear.items import HitEffect, HitEffectType, WeaponType
from wargear.stats import SpecialStats

CRIT_W = 40.0
CRIT_W_CAP = 25.0
HIT_W = 45.0
HIT_W_CAP = 15.0
EXPERTISE_W = 10.0
AP_PER_COH = 50 / 6.2
ARPEN_W = 0.3

_TARGET_DEFENCE_LEVEL = 365
_ATTACKER_SKILL = 350
_BASE_SKILL_DIFF = 15
_CRIT_AURA_MODIFIER = 1.8
_WHITE_CRIT_CAP_OFFSET = 40

_WEAPON_EXPERTISE = {
    WeaponType.SWORD: "sword_expertise",
    WeaponType.MACE: "mace_expertise",
    WeaponType.AXE: "axe_expertise",
}


def _dodge_chance(special_stats: SpecialStats, weapon_type: WeaponType, skill_diff: int) -> float:
    expertise = special_stats.expertise
    attribute = _WEAPON_EXPERTISE.get(weapon_type)
    if attribute is not None:
        expertise += getattr(special_stats, attribute)
    reduction = int(expertise) * 0.25
    if _BASE_SKILL_DIFF > 0:
        base = max(5 + skill_diff * 0.1, 5.0)
    else:
        base = max(5 - _BASE_SKILL_DIFF * 0.04, 0.0)
    return max(base - reduction, 0.0)


def hit_crit_expertise_ap_equivalent(special_stats: SpecialStats, weapon_type: WeaponType) -> float:
    """Attack power worth of hit, crit and expertise against a raid boss."""
    skill_diff = _TARGET_DEFENCE_LEVEL - _ATTACKER_SKILL
    crit_chance = special_stats.critical_strike - _BASE_SKILL_DIFF * 0.2 - _CRIT_AURA_MODIFIER

    hit_penalty = 0
    if skill_diff > 10:
        base_miss_chance = 5.0 + skill_diff * 0.2
        hit_penalty = 1
    elif skill_diff > 0:
        base_miss_chance = 5.0 + skill_diff * 0.1
    else:
        base_miss_chance = 5.0
    miss_chance_yellow = base_miss_chance + hit_penalty
    dw_miss_chance = base_miss_chance * 0.8 + 20.0
    miss_chance = dw_miss_chance - max(special_stats.hit - hit_penalty, 0.0)

    dodge_chance = _dodge_chance(special_stats, weapon_type, skill_diff)
    crit_cap = 100 - (miss_chance + dodge_chance + _WHITE_CRIT_CAP_OFFSET)

    if crit_chance > crit_cap:
        ap_from_crit = (crit_chance - crit_cap) * CRIT_W_CAP + crit_cap * CRIT_W
    else:
        ap_from_crit = crit_chance * CRIT_W

    if special_stats.hit > miss_chance_yellow:
        ap_from_hit = (special_stats.hit - miss_chance_yellow) * HIT_W_CAP + miss_chance_yellow * HIT_W
    else:
        ap_from_hit = special_stats.hit * HIT_W

    ap_from_expertise = int(special_stats.expertise) * 0.25 * EXPERTISE_W if dodge_chance > 0 else 0.0

    return ap_from_crit + ap_from_hit + ap_from_expertise


def hit_effect_ap_equivalent(hit_effect: HitEffect, total_ap: float, swing_speed: float, factor: float) -> float:
    """Attack power worth of an on-hit effect on a weapon of the given speed."""
    if hit_effect.type in (HitEffectType.DAMAGE_MAGIC, HitEffectType.DAMAGE_PHYSICAL):
        return hit_effect.probability * hit_effect.damage * AP_PER_COH / swing_speed * factor
    if hit_effect.type is HitEffectType.EXTRA_HIT:
        # An extra hit is valued like a crit.
        return 100.0 * hit_effect.probability * swing_speed * CRIT_W * factor
    if hit_effect.type is HitEffectType.STAT_BOOST:
        # Haste procs are assumed to be up a quarter of the time.
        return total_ap * hit_effect.special_stats_boost.haste * 0.25 * factor
    return 0.0


def estimate_special_stats_high(special_stats: SpecialStats) -> float:
    """Optimistic attack power worth of the stats (fast weapon, high AP, uncapped)."""
    estimate = special_stats.bonus_damage / 1.8 * 14
    estimate += (
        special_stats.damage_mod_physical * 3000
        + special_stats.damage_mod_physical * 3000 * special_stats.critical_strike / 100
    )
    estimate += (
        special_stats.attack_power
        + special_stats.hit * HIT_W
        + special_stats.critical_strike * CRIT_W
        + special_stats.expertise * EXPERTISE_W
        + special_stats.gear_armor_pen * ARPEN_W
    )
    return estimate


def estimate_special_stats_low(special_stats: SpecialStats) -> float:
    """Pessimistic attack power worth of the stats (slow weapon, low AP, capped)."""
    estimate = special_stats.bonus_damage / 2.6 * 14
    estimate += (
        special_stats.damage_mod_physical * 1500
        + special_stats.damage_mod_physical * 1500 * special_stats.critical_strike / 100
    )
    estimate += (
        special_stats.attack_power
        + special_stats.hit * HIT_W_CAP
        + special_stats.critical_strike * CRIT_W_CAP
        + special_stats.expertise
        + EXPERTISE_W
        + special_stats.gear_armor_pen * ARPEN_W
    )
    return estimate


_DIFF_FIELDS = (
    "critical_strike",
    "hit",
    "attack_power",
    "bonus_damage",
    "damage_mod_physical",
    "axe_expertise",
    "sword_expertise",
    "mace_expertise",
    "expertise",
    "gear_armor_pen",
)


def estimate_stat_diff(special_stats1: SpecialStats, special_stats2: SpecialStats) -> float:
    """Conservative estimate of how much better ``special_stats2`` is, in attack power.

    Gains are valued pessimistically and losses optimistically, so a positive
    result means the second set is better even in the worst case.
    """
    diff = special_stats2 - special_stats1
    losses = SpecialStats()
    gains = SpecialStats()
    for name in _DIFF_FIELDS:
        value = getattr(diff, name)
        if value > 0:
            setattr(gains, name, value)
        else:
            setattr(losses, name, -value)
    return estimate_special_stats_low(gains) - estimate_special_stats_high(losses)