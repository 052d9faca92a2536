"""Pruning of weapons and armor that are clearly outclassed by other candidates."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from wargear.heuristics import estimate_stat_diff
from wargear.items import Armor, Weapon, WeaponSocket
from wargear.stats import SpecialStats
from wargear.text import string_with_precision

ItemT = TypeVar("ItemT", Weapon, Armor)

_COMPARED_FIELDS = (
    "hit",
    "critical_strike",
    "attack_power",
    "axe_expertise",
    "sword_expertise",
    "mace_expertise",
    "expertise",
    "gear_armor_pen",
)


@dataclass
class PruneResult(Generic[ItemT]):
    """Items left after pruning, with an HTML log of the decisions taken."""

    items: list[ItemT] = field(default_factory=list)
    message: str = ""


@dataclass(eq=False)
class _Candidate(Generic[ItemT]):
    item: ItemT
    special_stats: SpecialStats
    can_be_estimated: bool
    remove: bool = False

    @property
    def name(self) -> str:
        return self.item.name


def is_strictly_weaker_weapon(
    stats1: SpecialStats,
    swing1: float,
    damage1: float,
    stats2: SpecialStats,
    swing2: float,
    damage2: float,
    socket: WeaponSocket,
) -> bool:
    """Whether the second weapon is at least as good everywhere and better somewhere.

    ``damage1`` and ``damage2`` are average damages. In the main hand a slower
    weapon is preferred, elsewhere a faster one.
    """
    pairs = [(getattr(stats1, name), getattr(stats2, name)) for name in _COMPARED_FIELDS]
    if socket == WeaponSocket.MAIN_HAND:
        pairs.append((swing1, swing2))
    else:
        pairs.append((-swing1, -swing2))
    pairs.append((damage1 / swing1, damage2 / swing2))

    greater_eq = all(second >= first for first, second in pairs)
    greater = any(second > first for first, second in pairs)
    return greater_eq and greater


def estimate_weapon_diff(weapon1: Weapon, weapon2: Weapon, main_hand: bool) -> float:
    """Estimated attack power gained from the damage and speed of ``weapon2`` over ``weapon1``."""

    def worth(weapon: Weapon) -> float:
        ap = weapon.average_damage() / weapon.swing_speed * 14
        if main_hand:
            ap += 100 * (weapon.swing_speed - 2.3)
        return ap

    diff = worth(weapon2) - worth(weapon1)
    return diff if main_hand else 0.5 * diff


def _better_count_prefix(found: int, keep: int) -> str:
    return f"{string_with_precision(found)}/{string_with_precision(keep)}"


def _candidates(
    items: Iterable[ItemT],
    special_stats: SpecialStats,
    exclude: Callable[[ItemT], bool] | None,
) -> list[_Candidate[ItemT]]:
    return [
        _Candidate(
            item=item,
            special_stats=item.special_stats + item.attributes.to_special_stats(special_stats),
            can_be_estimated=item.can_be_estimated(),
        )
        for item in items
        if exclude is None or not exclude(item)
    ]


def _collect(candidates: list[_Candidate[ItemT]], heading: str, message: list[str]) -> PruneResult[ItemT]:
    message.append(heading)
    kept = []
    for candidate in candidates:
        if candidate.remove:
            continue
        kept.append(candidate.item)
        message.append(f"<b>{candidate.name}</b><br>")
    return PruneResult(items=kept, message="".join(message))


def remove_weaker_weapons(
    weapon_socket: WeaponSocket,
    weapons: Iterable[Weapon],
    special_stats: SpecialStats,
    keep_n_stronger_items: int,
    exclude: Callable[[Weapon], bool] | None,
) -> PruneResult[Weapon]:
    """Drop weapons for which ``keep_n_stronger_items`` better ones exist.

    Weapons for which ``exclude`` returns true are left out entirely. Weapons
    with set bonuses, hit effects or use effects are never compared.
    """
    candidates = _candidates(weapons, special_stats, exclude)
    main_hand = weapon_socket == WeaponSocket.MAIN_HAND
    message: list[str] = []

    for weak in candidates:
        if not weak.can_be_estimated:
            continue
        stronger_found = 0
        for strong in candidates:
            if strong is weak or not strong.can_be_estimated:
                continue
            if weak.item.type == strong.item.type and is_strictly_weaker_weapon(
                weak.special_stats,
                weak.item.swing_speed,
                weak.item.average_damage(),
                strong.special_stats,
                strong.item.swing_speed,
                strong.item.average_damage(),
                weapon_socket,
            ):
                stronger_found += 1
                message.append(
                    f"{_better_count_prefix(stronger_found, keep_n_stronger_items)} since <b>{strong.name}"
                    f"</b> is better than <b>{weak.name}</b> in all aspects.<br>"
                )
            else:
                diff = estimate_stat_diff(weak.special_stats, strong.special_stats) + estimate_weapon_diff(
                    weak.item, strong.item, main_hand
                )
                if diff > 0:
                    stronger_found += 1
                    message.append(
                        f"{_better_count_prefix(stronger_found, keep_n_stronger_items)} since <b>{strong.name}"
                        f"</b> was estimated to be <b>{string_with_precision(diff, 3)} AP </b>better than "
                        f"<b>{weak.name}</b>.<br>"
                    )
            if stronger_found >= keep_n_stronger_items:
                weak.remove = True
                message.append(f"REMOVED:<b> {weak.name}</b>.<br>")
                break

    return _collect(candidates, "Weapons left:<br>", message)


def remove_weaker_items(
    armors: Iterable[Armor],
    special_stats: SpecialStats,
    keep_n_stronger_items: int,
    exclude: Callable[[Armor], bool] | None,
) -> PruneResult[Armor]:
    """Drop armor pieces for which ``keep_n_stronger_items`` better ones exist.

    Pieces for which ``exclude`` returns true are left out entirely. Trinkets
    and pieces with set bonuses, hit effects or use effects are never compared.
    """
    candidates = _candidates(armors, special_stats, exclude)
    message: list[str] = []

    for weak in candidates:
        if not weak.can_be_estimated:
            continue
        stronger_found = 0
        for strong in candidates:
            if strong is weak or not strong.can_be_estimated:
                continue
            if weak.special_stats < strong.special_stats:
                stronger_found += 1
                message.append(
                    f"{_better_count_prefix(stronger_found, keep_n_stronger_items)} since <b>{strong.name}"
                    f"</b> is better than <b>{weak.name}</b> in all aspects.<br>"
                )
            else:
                diff = estimate_stat_diff(weak.special_stats, strong.special_stats)
                if diff > 0:
                    stronger_found += 1
                    message.append(
                        f"{_better_count_prefix(stronger_found, keep_n_stronger_items)} since <b>{strong.name}"
                        f"</b> was estimated to be <b>{string_with_precision(diff, 3)} AP </b>better than "
                        f"<b>{weak.name}</b>.<br>"
                    )
            if stronger_found >= keep_n_stronger_items:
                weak.remove = True
                message.append(f"REMOVED:<b> {weak.name}</b>.<br>")
                break

    return _collect(candidates, "Armors left:<br>", message)