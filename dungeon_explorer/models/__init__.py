from .config import Config
from .data import CreatureKind
from .data_model import EncounterEntry
from .stats import Stats
from .items import Item, Potion, Weapon
from .inventory import Inventory
from .creature import Creature, Player, spawn_monster
from .room import Room

__all__ = [
    'Config', 'CreatureKind', 'EncounterEntry', 'Stats', 'Item', 'Potion', 'Weapon',
    'Inventory', 'Creature', 'Player', 'spawn_monster', 'Room',
]
