import logging
from typing import Optional

from .data import MONSTERS, CreatureKind
from .inventory import Inventory
from .items import Potion, Weapon
from .stats import Stats

logger = logging.getLogger(__name__)


class Creature:
    """Anything with stats that can fight. Monsters are plain creatures whose
    behaviour is looked up from the ``MONSTERS`` table by kind."""

    def __init__(self, name: str, kind: CreatureKind, stats: Stats, fled: bool = False):
        self.name = name
        self.kind = kind
        self.stats = stats
        self.fled = fled

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, {self.kind.value}, hp={self.stats.current_health}/{self.stats.max_health})"

    @property
    def is_alive(self) -> bool:
        return self.stats.current_health > 0

    @property
    def is_trap(self) -> bool:
        return self.kind is CreatureKind.TRAP

    @property
    def can_flee(self) -> bool:
        return MONSTERS.get(self.kind, {}).get("can_flee", False)

    def take_damage(self, amount: int) -> None:
        self.stats.modify_current_health(-amount)

    def use_potion(self, potion: Potion) -> None:
        self.stats.modify_max_health(potion.health_bonus)
        self.stats.modify_current_health(potion.health_restore)
        self.stats.modify_attack(potion.damage)


def spawn_monster(kind: CreatureKind) -> Creature:
    template = MONSTERS[kind]
    stats = Stats.create(template["health"], template["attack"], template["speed"], template["level"])
    return Creature(template["name"], kind, stats)


class Player(Creature):
    def __init__(self, name: str, stats: Stats, equipped_weapon: Optional[Weapon] = None, inventory: Optional[Inventory] = None, auto_equip: bool = False):
        super().__init__(name, CreatureKind.PLAYER, stats)
        self.equipped_weapon = equipped_weapon
        self.inventory = inventory if inventory is not None else Inventory()
        self.auto_equip = auto_equip

    @classmethod
    def new(cls, name: str, health: int, attack: int, level: int = 1) -> "Player":
        return cls(name, Stats.create(health, attack, speed=0.0, level=level, is_player=True))

    def use_potion(self, potion: Potion) -> None:
        self.inventory.remove_potion(potion)
        super().use_potion(potion)
        logger.debug("%s drank %s", self.name, potion.name)

    def gain_xp(self, amount: int) -> int:
        levels = self.stats.modify_xp(amount)
        if levels:
            logger.info("%s reached level %d", self.name, self.stats.level)
        return levels

    def _apply_weapon(self, weapon: Weapon, sign: int) -> None:
        self.stats.modify_attack(sign * weapon.damage)
        self.stats.modify_speed(sign * weapon.speed)

    def equip_weapon(self, weapon: Weapon) -> bool:
        """Equip ``weapon``, returning any weapon already held to the inventory.

        Refuses (returning False) when the swap would leave the previous
        weapon with nowhere to go.
        """
        if weapon is self.equipped_weapon:
            return False
        held = self.inventory.holds_weapon(weapon)
        if self.equipped_weapon is not None and not held and self.inventory.weapon_is_full:
            return False

        self.inventory.remove_weapon(weapon)
        if self.equipped_weapon is not None:
            previous = self.equipped_weapon
            self._apply_weapon(previous, -1)
            self.inventory.add_weapon(previous)
        self.equipped_weapon = weapon
        self._apply_weapon(weapon, 1)
        logger.debug("%s equipped %s", self.name, weapon.name)
        return True

    def unequip_weapon(self) -> bool:
        if self.equipped_weapon is None or self.inventory.weapon_is_full:
            return False
        weapon = self.equipped_weapon
        self._apply_weapon(weapon, -1)
        self.equipped_weapon = None
        self.inventory.add_weapon(weapon)
        return True

    def check_auto_equip(self) -> Optional[Weapon]:
        """Swap to the strongest carried weapon if it beats the one in hand.

        Called after a weapon has been added to the inventory.
        """
        if not self.auto_equip:
            return None
        best = self.inventory.strongest_weapon
        if best is None:
            return None
        if self.equipped_weapon is not None and best.damage <= self.equipped_weapon.damage:
            return None
        return best if self.equip_weapon(best) else None
