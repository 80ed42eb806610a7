"""Versioned JSON snapshots of a game in progress."""

import json
import logging
import os
from dataclasses import asdict
from typing import Optional

from ..errors import SaveError
from ..models import Creature, CreatureKind, EncounterEntry, Inventory, Player, Potion, Room, Stats, Weapon
from .map import Map
from .state import GameState

logger = logging.getLogger(__name__)

SAVE_VERSION = 1


def _creature_to_dict(creature: Creature) -> dict:
    return {
        "name": creature.name,
        "kind": creature.kind.value,
        "stats": asdict(creature.stats),
        "fled": creature.fled,
    }


def _player_to_dict(player: Player) -> dict:
    data = _creature_to_dict(player)
    data.update(
        equipped_weapon=asdict(player.equipped_weapon) if player.equipped_weapon else None,
        weapons=[asdict(weapon) for weapon in player.inventory.weapons],
        potions=[asdict(potion) for potion in player.inventory.potions],
        auto_equip=player.auto_equip,
    )
    return data


def _room_to_dict(room: Room) -> dict:
    return {
        "monster": _creature_to_dict(room.monster) if room.monster else None,
        "potions": [asdict(potion) for potion in room.potions] if room.potions else None,
        "weapon": asdict(room.weapon) if room.weapon else None,
        "is_boss_room": room.is_boss_room,
    }


def snapshot(game_state: GameState) -> dict:
    return {
        "version": SAVE_VERSION,
        "turn": game_state.turn,
        "current_room": game_state.map.index_of(game_state.current_room),
        "rooms": [_room_to_dict(room) for room in game_state.map.rooms],
        "player": _player_to_dict(game_state.player),
        "encounter_log": [asdict(entry) for entry in game_state.encounter_log],
    }


def _creature_from_dict(data: dict) -> Creature:
    return Creature(data["name"], CreatureKind(data["kind"]), Stats(**data["stats"]), fled=data.get("fled", False))


def _player_from_dict(data: dict) -> Player:
    weapon = data.get("equipped_weapon")
    inventory = Inventory(
        weapons=[Weapon(**w) for w in data.get("weapons", [])],
        potions=[Potion(**p) for p in data.get("potions", [])],
    )
    return Player(
        data["name"],
        Stats(**data["stats"]),
        equipped_weapon=Weapon(**weapon) if weapon else None,
        inventory=inventory,
        auto_equip=data.get("auto_equip", False),
    )


def _room_from_dict(data: dict) -> Room:
    return Room(
        monster=_creature_from_dict(data["monster"]) if data.get("monster") else None,
        potions=[Potion(**p) for p in data["potions"]] if data.get("potions") else None,
        weapon=Weapon(**data["weapon"]) if data.get("weapon") else None,
        is_boss_room=data.get("is_boss_room", False),
    )


def restore(data: dict) -> GameState:
    version = data.get("version")
    if version != SAVE_VERSION:
        raise SaveError(f"Unsupported save version: {version!r}")
    try:
        rooms = [_room_from_dict(room) for room in data["rooms"]]
        index = data["current_room"]
        if not isinstance(index, int) or not 0 <= index < len(rooms):
            raise IndexError(f"current room {index!r} is not one of the {len(rooms)} saved rooms")
        current_room = rooms[index]
        player = _player_from_dict(data["player"])
        encounter_log = [EncounterEntry(**entry) for entry in data.get("encounter_log", [])]
    except (KeyError, IndexError, TypeError, ValueError, AttributeError) as e:
        raise SaveError(f"Save file is corrupt: {e}") from e
    return GameState(player, current_room, Map(rooms), turn=data.get("turn", 0), encounter_log=encounter_log)


class SaveManager:
    def __init__(self, save_file: str):
        self.save_file = save_file

    def exists(self) -> bool:
        return os.path.exists(self.save_file)

    def save(self, game_state: GameState) -> None:
        directory = os.path.dirname(self.save_file)
        if directory:
            os.makedirs(directory, exist_ok=True)
        try:
            with open(self.save_file, "w", encoding="utf-8") as save_file:
                json.dump(snapshot(game_state), save_file, indent=2)
        except OSError as e:
            raise SaveError(f"Could not write {self.save_file}: {e}") from e
        logger.info("Saved game to %s (turn %d)", self.save_file, game_state.turn)

    def load(self) -> Optional[GameState]:
        if not self.exists():
            return None
        try:
            with open(self.save_file, encoding="utf-8") as save_file:
                data = json.load(save_file)
        except (OSError, json.JSONDecodeError) as e:
            raise SaveError(f"Could not read {self.save_file}: {e}") from e
        if not isinstance(data, dict):
            raise SaveError(f"{self.save_file} does not hold a saved game")
        game_state = restore(data)
        logger.info("Loaded game from %s (turn %d)", self.save_file, game_state.turn)
        return game_state
