from rich.panel import Panel
from rich.text import Text


class Panels:
    def __init__(self, config):
        self.config = config

    @staticmethod
    def _panel(title: str, message: str, border_style: str, justify: str = "left") -> Panel:
        return Panel(Text(message, justify=justify), title=title, border_style=border_style)

    def render_info_panel(self, title: str, message: str) -> Panel:
        return self._panel(title, message, "bright_black", justify="center")

    def render_room_panel(self, title: str, message: str) -> Panel:
        return self._panel(title, message, self.config.room_panel_color)

    def render_action_panel(self, actions: dict) -> Panel:
        message = "\n".join(f"{key}) {label}" for key, label in actions.items())
        return self._panel("ACTIONS", message, "bright_black")

    def render_status_panel(self, title: str, message: str) -> Panel:
        return self._panel(title, message, self.config.status_panel_color)

    def render_char_panel(self, title: str, message: str) -> Panel:
        return self._panel(title, message, self.config.character_panel_color)

    def render_combat_panel(self, title: str, message: str) -> Panel:
        return self._panel(title, message, "yellow")

    def render_map_panel(self, title: str, message: str) -> Panel:
        return self._panel(title, message, self.config.map_panel_color, justify="center")

    # Game over and victory share a layout, only the border colour differs
    def render_end_panel(self, title: str, message: str) -> Panel:
        return self._panel(title, message, "red", justify="center")

    def render_victory_panel(self, title: str, message: str) -> Panel:
        return self._panel(title, message, "green", justify="center")
