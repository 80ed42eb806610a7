from typing import Iterable, List, Optional

from .items import Potion, Weapon

MAX_WEAPONS = 5
MAX_POTIONS = 10


def _remove_identical(items: list, item) -> bool:
    # Value-equal items may be held twice, so removal goes by identity
    for index, held in enumerate(items):
        if held is item:
            del items[index]
            return True
    return False


class Inventory:
    """Bounded weapon and potion lists, kept in pickup order."""

    def __init__(self, weapons: Iterable[Weapon] = (), potions: Iterable[Potion] = ()):
        self.weapons: List[Weapon] = list(weapons)[:MAX_WEAPONS]
        self.potions: List[Potion] = list(potions)[:MAX_POTIONS]

    @property
    def weapon_is_full(self) -> bool:
        return len(self.weapons) >= MAX_WEAPONS

    @property
    def potion_is_full(self) -> bool:
        return len(self.potions) >= MAX_POTIONS

    @property
    def strongest_weapon(self) -> Optional[Weapon]:
        if not self.weapons:
            return None
        return max(self.weapons, key=lambda weapon: weapon.damage)

    def weapon_count(self) -> int:
        return len(self.weapons)

    def potion_count(self) -> int:
        return len(self.potions)

    def get_weapon(self, index: int) -> Weapon:
        if not 0 <= index < len(self.weapons):
            raise IndexError(f"No weapon in slot {index + 1}")
        return self.weapons[index]

    def get_potion(self, index: int) -> Potion:
        if not 0 <= index < len(self.potions):
            raise IndexError(f"No potion in slot {index + 1}")
        return self.potions[index]

    def holds_weapon(self, weapon: Weapon) -> bool:
        return any(held is weapon for held in self.weapons)

    def add_weapon(self, weapon: Weapon) -> bool:
        if self.weapon_is_full or self.holds_weapon(weapon):
            return False
        self.weapons.append(weapon)
        return True

    def add_potion(self, potion: Potion) -> bool:
        if self.potion_is_full or any(held is potion for held in self.potions):
            return False
        self.potions.append(potion)
        return True

    def remove_weapon(self, weapon: Weapon) -> bool:
        return _remove_identical(self.weapons, weapon)

    def remove_potion(self, potion: Potion) -> bool:
        return _remove_identical(self.potions, potion)

    def contents(self) -> str:
        lines = []
        if self.weapons:
            lines.append("Weapons:")
            lines.extend(f"{i}) {weapon.name}" for i, weapon in enumerate(self.weapons, 1))
        if self.potions:
            if lines:
                lines.append("")
            lines.append("Potions:")
            lines.extend(f"{i}) {potion.name}" for i, potion in enumerate(self.potions, 1))
        if not lines:
            return "Your inventory is empty."
        return "\n".join(lines)
