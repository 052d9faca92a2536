"""Character attributes and the combat stats derived from them."""

from __future__ import annotations

from dataclasses import dataclass


def multiplicative_addition(val1: float, val2: float) -> float:
    """Combine two fractional multipliers, e.g. 0.1 and 0.2 give 0.32."""
    return (1 + val1) * (1 + val2) - 1


def multiplicative_subtraction(val1: float, val2: float) -> float:
    """Undo :func:`multiplicative_addition` of ``val2`` from ``val1``."""
    return (1 + val1) / (1 + val2) - 1


@dataclass
class SpecialStats:
    """Combat stats; multipliers are stored as fractions above 1."""

    critical_strike: float = 0.0
    hit: float = 0.0
    attack_power: float = 0.0
    bonus_attack_power: float = 0.0
    haste: float = 0.0
    damage_mod_physical: float = 0.0
    stat_multiplier: float = 0.0
    bonus_damage: float = 0.0
    crit_multiplier: float = 0.0
    spell_crit: float = 0.0
    damage_mod_spell: float = 0.0
    expertise: float = 0.0
    sword_expertise: float = 0.0
    mace_expertise: float = 0.0
    axe_expertise: float = 0.0
    gear_armor_pen: int = 0
    ap_multiplier: float = 0.0
    attack_speed: float = 0.0

    @staticmethod
    def _check_operand(other: SpecialStats) -> None:
        if other.haste != 0 and other.attack_speed != 0:
            raise ValueError("operand may not carry both haste and attack_speed")

    def __add__(self, other: SpecialStats) -> SpecialStats:
        if not isinstance(other, SpecialStats):
            return NotImplemented
        self._check_operand(other)
        return SpecialStats(
            critical_strike=self.critical_strike + other.critical_strike,
            hit=self.hit + other.hit,
            attack_power=(self.attack_power + other.attack_power * (1 + self.ap_multiplier))
            * (1 + other.ap_multiplier),
            bonus_attack_power=self.bonus_attack_power + other.bonus_attack_power,
            haste=(1 + self.haste + other.haste * (1 + self.attack_speed)) * (1 + other.attack_speed) - 1,
            damage_mod_physical=multiplicative_addition(self.damage_mod_physical, other.damage_mod_physical),
            stat_multiplier=multiplicative_addition(self.stat_multiplier, other.stat_multiplier),
            bonus_damage=self.bonus_damage + other.bonus_damage,
            crit_multiplier=multiplicative_addition(self.crit_multiplier, other.crit_multiplier),
            spell_crit=self.spell_crit + other.spell_crit,
            damage_mod_spell=multiplicative_addition(self.damage_mod_spell, other.damage_mod_spell),
            expertise=self.expertise + other.expertise,
            sword_expertise=self.sword_expertise + other.sword_expertise,
            mace_expertise=self.mace_expertise + other.mace_expertise,
            axe_expertise=self.axe_expertise + other.axe_expertise,
            gear_armor_pen=int(self.gear_armor_pen + other.gear_armor_pen),
            ap_multiplier=multiplicative_addition(self.ap_multiplier, other.ap_multiplier),
            attack_speed=multiplicative_addition(self.attack_speed, other.attack_speed),
        )

    def __sub__(self, other: SpecialStats) -> SpecialStats:
        if not isinstance(other, SpecialStats):
            return NotImplemented
        self._check_operand(other)
        return SpecialStats(
            critical_strike=self.critical_strike - other.critical_strike,
            hit=self.hit - other.hit,
            attack_power=(self.attack_power - other.attack_power * (1 + self.ap_multiplier))
            / (1 + other.ap_multiplier),
            bonus_attack_power=self.bonus_attack_power - other.bonus_attack_power,
            haste=(1 + self.haste - other.haste * (1 + self.attack_speed)) / (1 + other.attack_speed) - 1,
            damage_mod_physical=multiplicative_subtraction(self.damage_mod_physical, other.damage_mod_physical),
            stat_multiplier=multiplicative_subtraction(self.stat_multiplier, other.stat_multiplier),
            bonus_damage=self.bonus_damage - other.bonus_damage,
            crit_multiplier=multiplicative_subtraction(self.crit_multiplier, other.crit_multiplier),
            spell_crit=self.spell_crit - other.spell_crit,
            damage_mod_spell=multiplicative_subtraction(self.damage_mod_spell, other.damage_mod_spell),
            expertise=self.expertise - other.expertise,
            sword_expertise=self.sword_expertise - other.sword_expertise,
            mace_expertise=self.mace_expertise - other.mace_expertise,
            axe_expertise=self.axe_expertise - other.axe_expertise,
            gear_armor_pen=int(self.gear_armor_pen - other.gear_armor_pen),
            ap_multiplier=multiplicative_subtraction(self.ap_multiplier, other.ap_multiplier),
            attack_speed=multiplicative_subtraction(self.attack_speed, other.attack_speed),
        )

    def __lt__(self, other: SpecialStats) -> bool:
        """True when every offensive stat is strictly lower than in ``other``."""
        if not isinstance(other, SpecialStats):
            return NotImplemented
        return (
            self.hit < other.hit
            and self.critical_strike < other.critical_strike
            and self.attack_power < other.attack_power
            and self.bonus_damage < other.bonus_damage
            and self.damage_mod_physical < other.damage_mod_physical
            and self.expertise < other.expertise
            and self.sword_expertise < other.sword_expertise
            and self.mace_expertise < other.mace_expertise
            and self.axe_expertise < other.axe_expertise
            and self.gear_armor_pen < other.gear_armor_pen
        )


@dataclass
class Attributes:
    """Primary attributes: strength and agility."""

    strength: float = 0.0
    agility: float = 0.0

    def __add__(self, other: Attributes) -> Attributes:
        if not isinstance(other, Attributes):
            return NotImplemented
        return Attributes(self.strength + other.strength, self.agility + other.agility)

    def __mul__(self, factor: float) -> Attributes:
        return Attributes(self.strength * factor, self.agility * factor)

    def multiply(self, multipliers: SpecialStats) -> Attributes:
        """Scale the attributes by the stat multiplier in ``multipliers``."""
        return self * (multipliers.stat_multiplier + 1)

    def to_special_stats(self, multipliers: SpecialStats) -> SpecialStats:
        """Convert to crit (33 agility per point) and attack power (2 per strength)."""
        multiplier = multipliers.stat_multiplier + 1
        return SpecialStats(
            critical_strike=self.agility * multiplier / 33,
            hit=0.0,
            attack_power=self.strength * multiplier * 2,
        )