from dataclasses import dataclass
from typing import List, Optional

from .creature import Creature
from .items import Potion, Weapon


# eq=False: rooms are identified by reference, two empty rooms are still different places
@dataclass(eq=False)
class Room:
    monster: Optional[Creature] = None
    potions: Optional[List[Potion]] = None
    weapon: Optional[Weapon] = None
    is_boss_room: bool = False

    def __post_init__(self):
        if not self.potions:
            self.potions = None

    def describe(self) -> str:
        monster = self.monster.name if self.monster else "There is no monster in the room."
        if self.potions:
            potions = ", ".join(potion.name for potion in self.potions)
        else:
            potions = "There is no potion in the room."
        weapon = self.weapon.name if self.weapon else "There is no weapon in the room."
        return f"Monster: {monster}\nPotions: {potions}\nWeapon: {weapon}"

    def remove_weapon(self) -> Optional[Weapon]:
        weapon, self.weapon = self.weapon, None
        return weapon

    def remove_potion(self, index: int) -> Potion:
        if not self.potions or not 0 <= index < len(self.potions):
            raise IndexError(f"No potion in slot {index + 1}")
        potion = self.potions.pop(index)
        if not self.potions:
            self.potions = None
        return potion

    def remove_monster(self) -> Optional[Creature]:
        monster, self.monster = self.monster, None
        return monster

    def is_empty(self) -> bool:
        return self.monster is None and self.potions is None and self.weapon is None
