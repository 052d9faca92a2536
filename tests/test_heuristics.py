import pytest

from wargear import heuristics
from wargear.heuristics import (
    estimate_special_stats_high,
    estimate_special_stats_low,
    estimate_stat_diff,
    hit_crit_expertise_ap_equivalent,
    hit_effect_ap_equivalent,
)
from wargear.items import HitEffect, HitEffectType, WeaponType
from wargear.stats import SpecialStats


def test_more_hit_is_worth_more():
    low = hit_crit_expertise_ap_equivalent(SpecialStats(hit=2), WeaponType.AXE)
    high = hit_crit_expertise_ap_equivalent(SpecialStats(hit=5), WeaponType.AXE)
    assert high > low


def test_hit_below_yellow_cap_uses_full_weight():
    low = hit_crit_expertise_ap_equivalent(SpecialStats(hit=2), WeaponType.DAGGER)
    high = hit_crit_expertise_ap_equivalent(SpecialStats(hit=3), WeaponType.DAGGER)
    assert high - low == pytest.approx(heuristics.HIT_W)


def test_crit_below_cap_uses_full_weight():
    low = hit_crit_expertise_ap_equivalent(SpecialStats(critical_strike=10), WeaponType.MACE)
    high = hit_crit_expertise_ap_equivalent(SpecialStats(critical_strike=11), WeaponType.MACE)
    assert high - low == pytest.approx(heuristics.CRIT_W)


def test_crit_above_cap_uses_capped_weight():
    low = hit_crit_expertise_ap_equivalent(SpecialStats(critical_strike=80), WeaponType.MACE)
    high = hit_crit_expertise_ap_equivalent(SpecialStats(critical_strike=81), WeaponType.MACE)
    assert high - low == pytest.approx(heuristics.CRIT_W_CAP)


def test_weapon_expertise_only_counts_for_matching_weapon():
    stats = SpecialStats(critical_strike=80, sword_expertise=20)
    without = SpecialStats(critical_strike=80)
    assert hit_crit_expertise_ap_equivalent(stats, WeaponType.AXE) == pytest.approx(
        hit_crit_expertise_ap_equivalent(without, WeaponType.AXE)
    )
    assert hit_crit_expertise_ap_equivalent(stats, WeaponType.SWORD) != pytest.approx(
        hit_crit_expertise_ap_equivalent(without, WeaponType.SWORD)
    )


def test_damage_effect_scales_with_factor_and_is_type_independent():
    physical = HitEffect("p", HitEffectType.DAMAGE_PHYSICAL, damage=100, probability=0.1)
    magic = HitEffect("m", HitEffectType.DAMAGE_MAGIC, damage=100, probability=0.1)
    full = hit_effect_ap_equivalent(physical, 2000, 2.0, 1.0)
    assert full > 0
    assert hit_effect_ap_equivalent(physical, 2000, 2.0, 0.5) == pytest.approx(full / 2)
    assert hit_effect_ap_equivalent(magic, 2000, 2.0, 1.0) == pytest.approx(full)


def test_damage_effect_worth_falls_with_slower_weapon():
    effect = HitEffect("p", HitEffectType.DAMAGE_PHYSICAL, damage=100, probability=0.1)
    fast = hit_effect_ap_equivalent(effect, 2000, 1.5, 1.0)
    slow = hit_effect_ap_equivalent(effect, 2000, 3.0, 1.0)
    assert fast == pytest.approx(2 * slow)


def test_extra_hit_grows_with_swing_speed():
    effect = HitEffect("e", HitEffectType.EXTRA_HIT, probability=0.1)
    assert hit_effect_ap_equivalent(effect, 0, 3.0, 1.0) == pytest.approx(
        2 * hit_effect_ap_equivalent(effect, 0, 1.5, 1.0)
    )


def test_stat_boost_haste_is_quarter_uptime():
    effect = HitEffect("s", HitEffectType.STAT_BOOST, special_stats_boost=SpecialStats(haste=0.2))
    assert hit_effect_ap_equivalent(effect, 2000, 2.0, 1.0) == pytest.approx(100)


def test_other_hit_effects_are_worth_nothing():
    effect = HitEffect("w", HitEffectType.WINDFURY_HIT, damage=100, probability=0.5)
    assert hit_effect_ap_equivalent(effect, 2000, 2.0, 1.0) == 0.0


def test_high_estimate_weights():
    assert estimate_special_stats_high(SpecialStats(attack_power=100)) == pytest.approx(100)
    assert estimate_special_stats_high(SpecialStats(hit=1)) == pytest.approx(heuristics.HIT_W)
    assert estimate_special_stats_high(SpecialStats(critical_strike=1)) == pytest.approx(heuristics.CRIT_W)
    assert estimate_special_stats_high(SpecialStats()) == 0.0


def test_low_estimate_weights():
    base = estimate_special_stats_low(SpecialStats())
    assert base == pytest.approx(heuristics.EXPERTISE_W)
    assert estimate_special_stats_low(SpecialStats(hit=1)) - base == pytest.approx(heuristics.HIT_W_CAP)
    assert estimate_special_stats_low(SpecialStats(critical_strike=1)) - base == pytest.approx(heuristics.CRIT_W_CAP)


def test_high_estimate_never_below_low_for_offensive_stats():
    stats = SpecialStats(critical_strike=10, hit=5, attack_power=200, bonus_damage=12, damage_mod_physical=0.02)
    assert estimate_special_stats_high(stats) > estimate_special_stats_low(stats) - heuristics.EXPERTISE_W


def test_stat_diff_of_identical_stats():
    stats = SpecialStats(critical_strike=5, hit=3, attack_power=120)
    assert estimate_stat_diff(stats, stats) == pytest.approx(heuristics.EXPERTISE_W)


def test_stat_diff_pure_gain_in_attack_power():
    assert estimate_stat_diff(SpecialStats(), SpecialStats(attack_power=100)) == pytest.approx(
        100 + heuristics.EXPERTISE_W
    )


def test_stat_diff_is_conservative_both_ways():
    first = SpecialStats(critical_strike=10, attack_power=0)
    second = SpecialStats(critical_strike=0, attack_power=400)
    forward = estimate_stat_diff(first, second)
    backward = estimate_stat_diff(second, first)
    assert forward < 400 - 10 * heuristics.CRIT_W_CAP + heuristics.EXPERTISE_W + 1e-9
    assert forward + backward < 2 * heuristics.EXPERTISE_W


def test_stat_diff_rejects_haste_and_attack_speed_together():
    bad = SpecialStats(haste=0.1, attack_speed=0.1)
    with pytest.raises(ValueError):
        estimate_stat_diff(bad, SpecialStats())