"""Item definitions: weapons, armor pieces and the effects they carry."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from wargear.stats import Attributes, SpecialStats


class WeaponType(Enum):
    """Weapon families; some stats apply only to one family."""

    SWORD = "sword"
    MACE = "mace"
    AXE = "axe"
    DAGGER = "dagger"
    FIST = "fist"


class WeaponSocket(Enum):
    """Where a weapon may be wielded."""

    MAIN_HAND = "main_hand"
    ONE_HAND = "one_hand"
    OFF_HAND = "off_hand"
    TWO_HAND = "two_hand"


class Socket(Enum):
    """Equipment slot of an item."""

    HEAD = "head"
    NECK = "neck"
    SHOULDER = "shoulder"
    BACK = "back"
    CHEST = "chest"
    WRIST = "wrist"
    HANDS = "hands"
    BELT = "belt"
    LEGS = "legs"
    BOOTS = "boots"
    RING = "ring"
    TRINKET = "trinket"
    RANGED = "ranged"
    MAIN_HAND = "main_hand"
    OFF_HAND = "off_hand"


class ItemSet(Enum):
    """Item set an item belongs to, if any."""

    NONE = "none"
    DESTROYER = "destroyer"
    ONSLAUGHT = "onslaught"
    WARBRINGER = "warbringer"


class HitEffectType(Enum):
    """Kinds of effect an item can trigger when it hits."""

    NONE = "none"
    EXTRA_HIT = "extra_hit"
    STAT_BOOST = "stat_boost"
    DAMAGE_PHYSICAL = "damage_physical"
    DAMAGE_MAGIC = "damage_magic"
    WINDFURY_HIT = "windfury_hit"
    SWORD_SPEC = "sword_spec"


@dataclass
class HitEffect:
    """An effect with a chance to trigger on hit."""

    name: str
    type: HitEffectType
    attribute_boost: Attributes = field(default_factory=Attributes)
    special_stats_boost: SpecialStats = field(default_factory=SpecialStats)
    damage: float = 0.0
    duration: float = 0.0
    cooldown: float = 0.0
    probability: float = 0.0


@dataclass
class Weapon:
    """A weapon with its damage range, speed and bonuses."""

    name: str
    attributes: Attributes = field(default_factory=Attributes)
    special_stats: SpecialStats = field(default_factory=SpecialStats)
    swing_speed: float = 0.0
    min_damage: float = 0.0
    max_damage: float = 0.0
    weapon_socket: WeaponSocket = WeaponSocket.ONE_HAND
    type: WeaponType = WeaponType.SWORD
    hit_effects: list[HitEffect] = field(default_factory=list)
    set_name: ItemSet = ItemSet.NONE
    use_effects: list[object] = field(default_factory=list)

    def average_damage(self) -> float:
        """Mean of the weapon's damage range."""
        return (self.min_damage + self.max_damage) / 2

    def can_be_estimated(self) -> bool:
        """Whether the weapon's worth follows from its plain stats alone."""
        return self.set_name is ItemSet.NONE and not self.hit_effects and not self.use_effects


@dataclass
class Armor:
    """A non-weapon piece of equipment."""

    name: str
    attributes: Attributes = field(default_factory=Attributes)
    special_stats: SpecialStats = field(default_factory=SpecialStats)
    socket: Socket = Socket.HEAD
    set_name: ItemSet = ItemSet.NONE
    hit_effects: list[HitEffect] = field(default_factory=list)
    use_effects: list[object] = field(default_factory=list)

    def can_be_estimated(self) -> bool:
        """Whether the piece's worth follows from its plain stats alone."""
        return (
            self.set_name is ItemSet.NONE
            and not self.hit_effects
            and not self.use_effects
            and self.socket is not Socket.TRINKET
        )