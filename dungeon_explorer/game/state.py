from typing import List, Optional

from ..models import Config, EncounterEntry, Player, Room
from .generator import starting_room
from .map import Map


class GameState:
    def __init__(self, player: Player, current_room: Room, dungeon_map: Optional[Map] = None, turn: int = 0, encounter_log: Optional[List[EncounterEntry]] = None):
        self.player = player
        self.current_room = current_room
        self.map = dungeon_map if dungeon_map is not None else Map()
        if current_room not in self.map:
            self.map.add_room(current_room)
        self.turn = turn
        self.encounter_log: List[EncounterEntry] = list(encounter_log or [])
        self.playing = True
        self.won = False

    @classmethod
    def new_game(cls, config: Config, name: str) -> "GameState":
        player = Player.new(name, config.player_health, config.player_attack, config.player_level)
        return cls(player, starting_room())

    def increment_turn(self):
        self.turn += 1

    def is_player_alive(self):
        return self.player.is_alive

    def record_encounter(self, entry: EncounterEntry):
        self.encounter_log.append(entry)

    def recent_encounters(self, limit: int) -> List[EncounterEntry]:
        if limit <= 0:
            return []
        return self.encounter_log[-limit:]

    @property
    def monsters_defeated(self) -> int:
        return sum(1 for entry in self.encounter_log if entry.outcome == "defeated")

    @property
    def previous_room(self) -> Optional[Room]:
        return self.map.last_room(self.current_room)
