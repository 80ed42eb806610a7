import os
import yaml


class Config:
    def __init__(self, config_path: str = "config.yaml") -> None:
        self.config_path = config_path

        if config_path and os.path.exists(config_path):
            with open(config_path) as config_file:
                parameters = yaml.safe_load(config_file) or {}
        else:
            parameters = {}

        player_character = parameters.get("player") or {}
        self.player_name = player_character.get("name", "Adventurer")
        self.player_health = player_character.get("health", 30)
        self.player_attack = player_character.get("attack", 1)
        self.player_level = player_character.get("level", 1)

        game_settings = parameters.get("game_settings") or {}
        self.save_file = game_settings.get("save_file", "savegame.json")
        self.chronicle_file = game_settings.get("chronicle_file", "chronicle.parquet")
        self.recent_encounters_limit = game_settings.get("recent_encounters_limit", 5)
        self.boss_room_threshold = game_settings.get("boss_room_threshold", 7)
        self.boss_room_chance = game_settings.get("boss_room_chance", 4)
        self.seed = game_settings.get("seed")
        self.room_panel_color = game_settings.get("room_panel_color", "blue")
        self.character_panel_color = game_settings.get("character_panel_color", "white")
        self.status_panel_color = game_settings.get("status_panel_color", "white")
        self.map_panel_color = game_settings.get("map_panel_color", "white")
