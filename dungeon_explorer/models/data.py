"""Static game data: creature kinds, monster templates and weapon templates."""

from enum import Enum


class CreatureKind(str, Enum):
    PLAYER = "player"
    GOBLIN = "goblin"
    ORC = "orc"
    TROLL = "troll"
    DRAGON = "dragon"
    TRAP = "trap"


# Speed thresholds shared by combat and weapon descriptions
FAST_SPEED = 1.33
SLOW_SPEED = 0.66

MONSTERS = {
    CreatureKind.GOBLIN: {"name": "Goblin", "health": 10, "attack": 4, "speed": 1.5, "level": 1, "can_flee": True},
    CreatureKind.ORC:    {"name": "Orc",    "health": 20, "attack": 6, "speed": 1.0, "level": 2, "can_flee": True},
    CreatureKind.TROLL:  {"name": "Troll",  "health": 35, "attack": 8, "speed": 0.5, "level": 3, "can_flee": False},
    CreatureKind.DRAGON: {"name": "Dragon", "health": 60, "attack": 12, "speed": 1.0, "level": 10, "can_flee": False},
    # A trap has no health and strikes exactly once when the room is entered
    CreatureKind.TRAP:   {"name": "Trap",   "health": 0,  "attack": 8, "speed": 0.0, "level": 0, "can_flee": False},
}

# Kinds that may appear in an ordinary room. None stands for an empty slot.
# The dragon is excluded; it only guards the boss room.
ROOM_MONSTERS = [CreatureKind.GOBLIN, CreatureKind.ORC, CreatureKind.TROLL, CreatureKind.TRAP, None]

# (name, damage, speed)
WEAPON_TEMPLATES = [
    ("Dagger", 5, 2.0),
    ("Sword", 10, 1.0),
    ("Great Sword", 15, 0.5),
]

BOSS_KIND = CreatureKind.DRAGON
