import logging
from typing import List, Optional

from ..errors import SaveError
from ..models import Config
from ..ui import Panels, Terminal
from .chronicle import Chronicle
from .combat import CombatEngine
from .dice import Dice
from .generator import RoomGenerator
from .logic import GameLogic
from .save import SaveManager
from .state import GameState

logger = logging.getLogger(__name__)


class Game:
    def __init__(self, config_path: str = "config.yaml", save_path: str = None, seed: int = None, terminal: Terminal = None) -> None:
        self.config = Config(config_path)
        self.terminal = terminal or Terminal()
        self.panels = Panels(self.config)

        self.dice = Dice(seed if seed is not None else self.config.seed)
        self.generator = RoomGenerator(self.dice, self.config.boss_room_threshold, self.config.boss_room_chance)
        self.combat = CombatEngine(self.dice)
        self.saves = SaveManager(save_path or self.config.save_file)
        self.chronicle = Chronicle(self.config.chronicle_file)

        self.state: Optional[GameState] = None
        self.logic: Optional[GameLogic] = None

    def begin(self, game_state: GameState) -> None:
        self.state = game_state
        self.logic = GameLogic(game_state, self.generator, self.combat)

    def start(self, load: bool = False) -> None:
        """Run the title screen until the player chooses Exit.

        Every game, new or loaded, comes back here once it ends.
        """
        self.terminal.show(self.panels.render_info_panel("DUNGEON EXPLORER", "Welcome to DUNGEON EXPLORER!"))
        if load and self.load_game():
            self.play()
        while self.title_menu():
            self.play()

    def title_menu(self) -> bool:
        """Returns True once a game is ready to play, False on Exit."""
        self.state = None
        self.logic = None
        last_run = self.chronicle.last_run
        if last_run:
            previously = (
                f"{last_run['player']} reached level {last_run['level']} after {last_run['rooms_explored']} rooms "
                f"and {last_run['monsters_defeated']} monsters ({last_run['outcome']})."
            )
            self.terminal.show(self.panels.render_info_panel("PREVIOUSLY...", previously))

        while True:
            self.terminal.show(self.panels.render_status_panel("OPTIONS", "1) New Game\n2) Load Game\n3) Exit"))
            choice = self.terminal.ask("> ").strip()
            if choice == "1":
                self.new_game()
                return True
            if choice == "2":
                if self.load_game():
                    return True
            elif choice == "3":
                return False
            else:
                self.terminal.show("Please enter a valid input.")

    def new_game(self) -> GameState:
        self.terminal.show(self.panels.render_info_panel(
            "DUNGEON EXPLORER",
            "You wake up alone in a dark dungeon. You don't remember who you are or how you got here.",
        ))
        name = self.terminal.ask(f"What will you call yourself? ({self.config.player_name}) ").strip()
        game_state = GameState.new_game(self.config, name or self.config.player_name)
        self.begin(game_state)
        logger.info("New game started for %s", game_state.player.name)
        return game_state

    def load_game(self) -> Optional[GameState]:
        try:
            game_state = self.saves.load()
        except SaveError as e:
            logger.warning("Failed to load %s: %s", self.saves.save_file, e)
            self.terminal.show(self.panels.render_end_panel("LOAD FAILED", str(e)))
            return None
        if game_state is None:
            self.terminal.show(self.panels.render_info_panel("LOAD GAME", "No saved game found."))
            return None
        self.begin(game_state)
        self.terminal.show(self.panels.render_info_panel("LOAD GAME", "Game successfully loaded."))
        return game_state

    def save_game(self) -> bool:
        try:
            self.saves.save(self.state)
        except SaveError as e:
            logger.warning("Failed to save: %s", e)
            self.terminal.show(self.panels.render_end_panel("SAVE FAILED", str(e)))
            return False
        self.terminal.show(self.panels.render_info_panel("SAVE GAME", f"Game saved to {self.saves.save_file}."))
        return True

    def play(self) -> str:
        while self.state.playing:
            self.take_action()

        if self.state.won:
            outcome = "victory"
            self.terminal.show(self.panels.render_victory_panel("VICTORY", f"{self.state.player.name} escaped the dungeon!"))
        elif not self.state.is_player_alive():
            outcome = "died"
            self.terminal.show(self.panels.render_end_panel("GAME OVER", "You have perished in the dungeon."))
        else:
            outcome = "quit"
            self.terminal.show(self.panels.render_info_panel("FAREWELL", "Farewell and til next time, adventurer!"))
        self.chronicle.record_run(self.state, outcome)
        return outcome

    def room_title(self) -> str:
        index = self.state.map.index_of(self.state.current_room) + 1
        return f"ROOM {index} (BOSS)" if self.state.current_room.is_boss_room else f"ROOM {index}"

    def choose_index(self, title: str, labels: List[str]) -> Optional[int]:
        """Ask for a 1-based choice from ``labels``; None when the player backs out."""
        options = "\n".join(f"{i}) {label}" for i, label in enumerate(labels, 1))
        self.terminal.show(self.panels.render_status_panel(title, options))
        while True:
            answer = self.terminal.ask("Enter a number, or Q to go back: ").strip().upper()
            if answer == "Q":
                return None
            try:
                index = int(answer) - 1
            except ValueError:
                self.terminal.show("Please enter a valid input.")
                continue
            if 0 <= index < len(labels):
                return index
            self.terminal.show("Your input was out of range.")

    def take_action(self) -> None:
        room = self.state.current_room
        self.terminal.show(self.panels.render_room_panel(self.room_title(), room.describe()))
        actions = self.logic.available_actions()
        self.terminal.show(self.panels.render_action_panel(actions))

        while True:
            choice = self.terminal.ask("> ").strip().upper()
            if choice in actions:
                break
            self.terminal.show("Please enter a valid input.")

        if choice == "M":
            self.open_menu()
            return
        if choice == "S":
            self.save_game()
            return
        if choice == "Q":
            self.state.playing = False
            return
        if choice == "P":
            index = self.choose_index("WHICH POTION?", [potion.name for potion in room.potions])
            if index is None:
                return
            self.state.increment_turn()
            lines = self.logic.take_potion(index)
        else:
            self.state.increment_turn()
            lines = self.logic.perform(choice)

        if lines:
            if choice in ("A", "F"):
                self.terminal.show(self.panels.render_combat_panel("COMBAT", "\n".join(lines)))
            else:
                self.terminal.show(self.panels.render_status_panel(f"TURN {self.state.turn}", "\n".join(lines)))

    def character_sheet(self) -> str:
        player = self.state.player
        stats = player.stats
        weapon = player.equipped_weapon.name if player.equipped_weapon else "None"
        lines = [
            f"Name: {player.name}",
            f"Health: {stats.current_health}/{stats.max_health} | Attack: {stats.attack} | Speed: {stats.speed:g}",
            f"Level: {stats.level} | XP: {stats.xp}/{stats.level}",
            f"Equipped Weapon: {weapon}",
            f"Auto-equip: {'On' if player.auto_equip else 'Off'}",
            "",
            player.inventory.contents(),
        ]
        encounters = self.state.recent_encounters(self.config.recent_encounters_limit)
        if encounters:
            lines.append("")
            lines.append("Recent encounters:")
            lines.extend(
                f"Turn {e.turn}: {e.monster} ({e.outcome}) dealt {e.damage_dealt}, took {e.damage_taken}" for e in encounters
            )
        return "\n".join(lines)

    def open_menu(self) -> None:
        player = self.state.player
        while True:
            self.terminal.show(self.panels.render_char_panel("MENU", self.character_sheet()))
            self.terminal.show(self.panels.render_map_panel("MAP", self.state.map.get_map(self.state.current_room)))

            actions = {}
            if player.inventory.weapon_count() > 0:
                actions["W"] = "Equip Weapon"
            if player.equipped_weapon is not None:
                actions["U"] = "Unequip Weapon"
            if player.inventory.potion_count() > 0:
                actions["P"] = "Drink Potion"
            actions["T"] = f"Turn auto-equip {'off' if player.auto_equip else 'on'}"
            actions["Q"] = "Quit Menu"
            self.terminal.show(self.panels.render_action_panel(actions))

            choice = self.terminal.ask("> ").strip().upper()
            if choice not in actions:
                self.terminal.show("Please enter a valid input.")
            elif choice == "Q":
                return
            elif choice == "W":
                index = self.choose_index("WHICH WEAPON?", [weapon.name for weapon in player.inventory.weapons])
                if index is not None:
                    weapon = player.inventory.get_weapon(index)
                    if player.equip_weapon(weapon):
                        self.terminal.show(f"You equip the {weapon.name}.")
            elif choice == "U":
                weapon = player.equipped_weapon
                if player.unequip_weapon():
                    self.terminal.show(f"You unequip the {weapon.name}.")
                else:
                    self.terminal.show("You have no room to carry another weapon.")
            elif choice == "P":
                index = self.choose_index("WHICH POTION?", [potion.name for potion in player.inventory.potions])
                if index is not None:
                    potion = player.inventory.get_potion(index)
                    player.use_potion(potion)
                    self.terminal.show(f"You drink the {potion.name}.")
            elif choice == "T":
                player.auto_equip = not player.auto_equip
