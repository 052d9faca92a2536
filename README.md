# wargear

A small library for comparing melee gear: stat arithmetic, heuristics that
turn stats into an attack-power (AP) equivalent, and a pruner that drops items
clearly weaker than others so that fewer candidates are left to evaluate.

It has no dependencies beyond the standard library.

## Install

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Modules

### `wargear.stats`

- `SpecialStats` is a dataclass of combat stats (crit, hit, attack power,
  haste, damage modifiers, expertise, armor penetration and more).
  `a + b` and `a - b` combine two blocks. Plain stats add and subtract.
  Damage, stat, crit and AP multipliers and attack speed combine
  multiplicatively. An operand that carries both `haste` and `attack_speed`
  raises `ValueError`.
- `a < b` is true only when `b` is strictly higher in every one of hit, crit,
  attack power, bonus damage, physical damage modifier, the four expertise
  stats and armor penetration.
- `multiplicative_addition(0.1, 0.2)` gives `0.32`.
  `multiplicative_subtraction` undoes it.
- `Attributes` holds strength and agility. It supports `+` and `* factor`.
  `multiply(stats)` scales both by `stats.stat_multiplier + 1`.
  `to_special_stats(stats)` converts to crit (one point per 33 agility) and
  attack power (two per strength), after the same scaling.

### `wargear.items`

- `Weapon`, `Armor` and `HitEffect` are dataclasses.
- The enums are `WeaponType`, `WeaponSocket`, `Socket`, `ItemSet` and
  `HitEffectType`.
- `Weapon.average_damage()` returns the mean of the weapon's damage range.
- `can_be_estimated()` is true for items with no set, no hit effects and no
  use effects. For armor, the item must also not be a trinket.

### `wargear.heuristics`

- `hit_crit_expertise_ap_equivalent(stats, weapon_type)` gives the AP worth of
  hit, crit and expertise against a raid boss. Crit and hit above their caps
  are weighted lower.
- `hit_effect_ap_equivalent(effect, total_ap, swing_speed, factor)` gives the
  AP worth of an on-hit damage, extra-hit or haste proc.
- `estimate_special_stats_high(stats)` is an optimistic AP valuation of a stat
  block. `estimate_special_stats_low(stats)` is a pessimistic one.
- `estimate_stat_diff(stats1, stats2)` values what `stats2` gains
  pessimistically and what it loses optimistically. A positive result
  therefore means `stats2` is better even in the worst case.

### `wargear.optimizer`

- `remove_weaker_weapons(weapon_socket, weapons, special_stats, keep_n_stronger_items, exclude)`
  drops every weapon for which at least `keep_n_stronger_items` other weapons
  are judged stronger. A weapon is judged stronger either by strict dominance
  (same weapon type) or by a positive estimated AP difference.
- `remove_weaker_items(armors, special_stats, keep_n_stronger_items, exclude)`
  does the same for armor.
- In both functions, `exclude` is a predicate, or `None`. Items for which it
  returns true are dropped before comparison.
- Items that cannot be estimated are always kept.
- Both functions return a `PruneResult` with the surviving `items` and an
  HTML-formatted `message` explaining each decision.
- `is_strictly_weaker_weapon` and `estimate_weapon_diff` are the comparisons
  the weapon pruner uses.

### `wargear.text`

- `percent_to_str`, `stat_percent_str` and `stat_percent_pair_str` format
  percentages to three significant digits, the last two as HTML lines.
- `string_with_precision(amount)` gives an integer string.
  `string_with_precision(amount, n)` gives fixed notation with `n` decimals.
- `find_string(strings, match)` reports whether `match` is in `strings`.
- `find_value(strings, values, match)` looks up parallel lists. If `match` is
  missing, it logs a warning and returns `0.0`.
- `FindValues(names, values).find(name, default)` returns the value paired
  with the first match, or `default` (0 if not given).

## Example

```python
from wargear.heuristics import estimate_stat_diff
from wargear.items import Weapon, WeaponSocket, WeaponType
from wargear.optimizer import remove_weaker_weapons
from wargear.stats import Attributes, SpecialStats

base = SpecialStats(critical_strike=1.0, attack_power=100.0)
gear = Attributes(strength=15, agility=33).to_special_stats(SpecialStats())
print(estimate_stat_diff(base, base + gear))

weapons = [
    Weapon("plain_axe", swing_speed=2.6, min_damage=100, max_damage=200, type=WeaponType.AXE),
    Weapon("better_axe", swing_speed=2.7, min_damage=150, max_damage=250,
           special_stats=SpecialStats(attack_power=20), type=WeaponType.AXE),
]
result = remove_weaker_weapons(WeaponSocket.MAIN_HAND, weapons, SpecialStats(), 1, None)
print([w.name for w in result.items])
print(result.message)
```

## What it does not do

This is a library of estimates only:

- It does not run a combat simulation.
- It does not ship a database of items.
- It does not build or equip characters.
- It has no command-line tool.

You supply the weapons and armor yourself as `Weapon` and `Armor` records.