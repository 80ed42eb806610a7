import logging
from typing import Dict, List

from ..errors import InvalidActionError
from ..models.data import FAST_SPEED
from .combat import CombatEngine, CombatReport
from .generator import RoomGenerator
from .state import GameState

logger = logging.getLogger(__name__)


class GameLogic:
    def __init__(self, game_state: GameState, generator: RoomGenerator, combat: CombatEngine):
        self.game_state = game_state
        self.generator = generator
        self.combat = combat

    def can_flee(self) -> bool:
        state = self.game_state
        room = state.current_room
        return (
            room.monster is not None
            and not room.is_boss_room
            and state.player.stats.speed >= FAST_SPEED
            and state.previous_room is not None
        )

    def available_actions(self) -> Dict[str, str]:
        state = self.game_state
        room = state.current_room
        actions = {"M": "Menu"}
        if room.monster is not None:
            actions["A"] = f"Attack {room.monster.name}"
            if self.can_flee():
                actions["F"] = "Attempt to flee"
        else:
            if room.potions:
                actions["P"] = "Take potion(s)"
            if room.weapon is not None:
                actions["W"] = f"Take {room.weapon.name}"
            if room.is_boss_room:
                actions["E"] = "Exit the dungeon"
            else:
                if state.previous_room is not None:
                    actions["L"] = "Return to last room"
                if state.map.newest_room() is room:
                    actions["R"] = "Explore a new room"
                else:
                    actions["R"] = "Advance to next room"
        actions["S"] = "Save game"
        actions["Q"] = "Quit"
        return actions

    def _require(self, key: str) -> None:
        if key not in self.available_actions():
            raise InvalidActionError(f"Action {key!r} is not available here")

    def _resolve(self, report: CombatReport) -> List[str]:
        state = self.game_state
        state.record_encounter(report.to_entry(state.turn))
        if report.outcome == "player_died":
            state.playing = False
            logger.info("%s died on turn %d", state.player.name, state.turn)
        elif report.outcome in ("defeated", "fled", "trap"):
            state.current_room.remove_monster()
        return report.lines

    def enter_room(self, room) -> List[str]:
        self.game_state.current_room = room
        if room.monster is not None and room.monster.is_trap:
            # a trap strikes once and is gone, whether or not the player survives
            trap = room.remove_monster()
            return self._resolve(self.combat.spring_trap(self.game_state.player, trap))
        return []

    def attack(self) -> List[str]:
        self._require("A")
        monster = self.game_state.current_room.monster
        return self._resolve(self.combat.fight(self.game_state.player, monster))

    def flee(self) -> List[str]:
        self._require("F")
        state = self.game_state
        monster = state.current_room.monster
        lines = [f"You attempt to flee from the {monster.name}."]
        if self.combat.attempt_escape():
            lines.append(f"You successfully flee from the {monster.name}.")
            state.record_encounter(CombatReport(monster=monster.name, outcome="escaped").to_entry(state.turn))
            lines.extend(self.enter_room(state.previous_room))
            return lines
        lines.append(f"You fail to flee from the {monster.name}.")
        lines.extend(self._resolve(self.combat.fight(state.player, monster)))
        return lines

    def take_potion(self, index: int) -> List[str]:
        self._require("P")
        state = self.game_state
        room = state.current_room
        if not 0 <= index < len(room.potions):
            raise IndexError(f"No potion in slot {index + 1}")
        if state.player.inventory.potion_is_full:
            return ["You are carrying too many potions to take any more."]
        potion = room.remove_potion(index)
        state.player.inventory.add_potion(potion)
        return [f"You take the {potion.name}."]

    def take_weapon(self) -> List[str]:
        self._require("W")
        state = self.game_state
        room = state.current_room
        if state.player.inventory.weapon_is_full:
            return [f"You are carrying too many weapons to take the {room.weapon.name}."]
        weapon = room.remove_weapon()
        state.player.inventory.add_weapon(weapon)
        lines = [f"You take the {weapon.name}."]
        equipped = state.player.check_auto_equip()
        if equipped is not None:
            lines.append(f"You automatically equip the {equipped.name}.")
        return lines

    def return_to_last_room(self) -> List[str]:
        self._require("L")
        return ["You return to the last room."] + self.enter_room(self.game_state.previous_room)

    def explore(self) -> List[str]:
        self._require("R")
        state = self.game_state
        if state.map.newest_room() is state.current_room:
            room = self.generator.new_room(state.map.room_count)
            state.map.add_room(room)
            lines = ["You venture into the boss's lair..." if room.is_boss_room else "You explore a new room."]
        else:
            room = state.map.next_room(state.current_room)
            lines = ["You advance to the next room."]
        return lines + self.enter_room(room)

    def exit_dungeon(self) -> List[str]:
        self._require("E")
        self.game_state.won = True
        self.game_state.playing = False
        return ["You step out of the dungeon and into the daylight. You are free!"]

    def perform(self, key: str) -> List[str]:
        """Dispatch one of the actions that need no further input."""
        handlers = {
            "A": self.attack,
            "F": self.flee,
            "W": self.take_weapon,
            "L": self.return_to_last_room,
            "R": self.explore,
            "E": self.exit_dungeon,
        }
        if key not in handlers:
            raise InvalidActionError(f"Action {key!r} needs more input or is handled by the game loop")
        return handlers[key]()
