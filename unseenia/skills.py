"""Skills that level up with use."""

from __future__ import annotations

from enum import IntEnum


class SkillType(IntEnum):
    CONSTITUTION = 0
    COMBAT_MELEE = 1
    COMBAT_RANGED = 2
    ENDURANCE = 3


def _exp_for_level(level: int) -> int:
    return level**2 + level * 10 + level * 2


class Skill:
    """A single skill with its own level and experience."""

    def __init__(self, skill_type: int) -> None:
        self.type = skill_type
        self.level = 1
        self.level_max = 99
        self.exp = 0
        self.exp_next = 100

    def gain_exp(self, exp: int) -> None:
        self.exp += exp
        self.update_level()

    def lose_exp(self, exp: int) -> None:
        self.exp -= exp

    def update_level(self, up: bool = True) -> None:
        """Raise the level while experience covers it, or lower it on a deficit."""
        if up:
            while self.level < self.level_max and self.exp >= self.exp_next:
                self.level += 1
                self.exp_next = _exp_for_level(self.level)
        else:
            while self.level > 0 and self.exp < 0:
                self.level -= 1
                self.exp_next = _exp_for_level(self.level)


class SkillComponent:
    """The full set of skills an entity has."""

    def __init__(self) -> None:
        self.skills = [Skill(kind) for kind in SkillType]

    def _lookup(self, skill: int) -> Skill:
        if not 0 <= skill < len(self.skills):
            raise IndexError(f"skill does not exist: {skill}")
        return self.skills[skill]

    def get_skill(self, skill: int) -> int:
        """Return the level of the given skill."""
        return self._lookup(skill).level

    def gain_exp(self, skill: int, exp: int) -> None:
        self._lookup(skill).gain_exp(exp)