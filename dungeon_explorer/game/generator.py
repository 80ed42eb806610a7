"""Procedural room contents."""

import logging
from typing import List, Optional

from ..models import Creature, Potion, Room, Weapon, spawn_monster
from ..models.data import BOSS_KIND, ROOM_MONSTERS, WEAPON_TEMPLATES
from .dice import Dice

logger = logging.getLogger(__name__)


def starting_room() -> Room:
    return Room(potions=[Potion("Potion", 0, health_restore=10)], weapon=Weapon("Sword", 10, 1.0))


def boss_room() -> Room:
    return Room(monster=spawn_monster(BOSS_KIND), is_boss_room=True)


class RoomGenerator:
    def __init__(self, dice: Dice, boss_room_threshold: int = 7, boss_room_chance: int = 4):
        self.dice = dice
        self.boss_room_threshold = boss_room_threshold
        self.boss_room_chance = boss_room_chance

    def new_room(self, rooms_recorded: int) -> Room:
        """Generate the next room, given how many rooms the map already holds."""
        if rooms_recorded >= self.boss_room_threshold and self.dice.chance(self.boss_room_chance):
            logger.info("Boss room generated after %d rooms", rooms_recorded)
            return boss_room()

        monster = self._draw_monster()
        weapon = self._draw_weapon()
        room = Room(monster=monster, potions=self._draw_potions(), weapon=weapon)
        logger.debug("Generated room: %s", room.describe().replace("\n", " | "))
        return room

    def _draw_monster(self) -> Optional[Creature]:
        kind = ROOM_MONSTERS[self.dice.randrange(0, len(ROOM_MONSTERS))]
        return spawn_monster(kind) if kind is not None else None

    def _draw_weapon(self) -> Optional[Weapon]:
        # One extra slot for "no weapon"
        pick = self.dice.randrange(0, len(WEAPON_TEMPLATES) + 1)
        if pick == len(WEAPON_TEMPLATES):
            return None
        name, damage, speed = WEAPON_TEMPLATES[pick]
        return Weapon(name, damage, speed)

    def _draw_potions(self) -> List[Potion]:
        potions = []
        for _ in range(self.dice.randrange(0, 3)):
            potion = self._draw_potion()
            if not potion.is_blank:
                potions.append(potion)
        return potions

    def _draw_potion(self) -> Potion:
        health_restore = self.dice.randrange(5, 16) if self.dice.chance(2) else 0
        health_bonus = self.dice.randrange(1, 6) if self.dice.chance(6) else 0
        attack_bonus = self.dice.randrange(1, 6) if self.dice.chance(11) else 0
        return Potion("Potion", attack_bonus, health_restore, health_bonus)
