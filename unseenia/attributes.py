"""Character attributes: level, experience and derived combat stats."""

from __future__ import annotations


def exp_for_level(level: int) -> int:
    """Experience needed to pass the given level."""
    return int((50 // 3) * (level**3 - 6 * level**2 + level * 17 - 12))


class AttributeComponent:
    """Level, experience, base attributes and the stats derived from them."""

    def __init__(self, level: int) -> None:
        if level < 1:
            raise ValueError(f"level must be at least 1, got {level}")
        self.level = level
        self.exp = 0
        self.exp_next = exp_for_level(level + 1)
        self.attribute_points = 2

        self.vitality = 1
        self.strength = 1
        self.dexterity = 1
        self.agility = 1
        self.intelligence = 1

        self.hp = 0
        self.hp_max = 0
        self.damage_min = 0
        self.damage_max = 0
        self.accuracy = 0
        self.defence = 0
        self.luck = 0

        self.update_level()
        self.update_stats(True)

    def debug_print(self) -> str:
        return (
            f"Level: {self.level}\n"
            f"Exp: {self.exp}\n"
            f"Exp Next: {self.exp_next}\n"
            f"Attp: {self.attribute_points}\n"
        )

    def lose_hp(self, hp: int) -> None:
        self.hp = max(self.hp - hp, 0)

    def gain_hp(self, hp: int) -> None:
        self.hp = min(self.hp + hp, self.hp_max)

    def lose_exp(self, exp: int) -> None:
        self.exp = max(self.exp - exp, 0)

    def gain_exp(self, exp: int) -> None:
        self.exp += exp
        self.update_level()

    def update_stats(self, reset: bool) -> None:
        """Recompute derived stats; with ``reset`` refill hit points."""
        intel_bonus = self.intelligence // 5
        self.hp_max = self.vitality * 5 + self.vitality + self.strength // 2 + intel_bonus
        self.damage_min = self.strength * 2 + self.strength // 4 + intel_bonus
        self.damage_max = self.strength * 2 + self.strength // 2 + intel_bonus
        self.accuracy = self.dexterity * 5 + self.dexterity // 2 + intel_bonus
        self.defence = self.agility * 2 + self.agility // 4 + intel_bonus
        self.luck = self.intelligence * 2 + intel_bonus
        if reset:
            self.hp = self.hp_max

    def update_level(self) -> None:
        """Turn accumulated experience into levels and attribute points."""
        while self.exp_next > 0 and self.exp >= self.exp_next:
            self.level += 1
            self.exp -= self.exp_next
            self.exp_next = exp_for_level(self.level)
            self.attribute_points += 1

    def update(self) -> None:
        self.update_level()