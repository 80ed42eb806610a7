from typing import Optional

from rich.console import Console


class Terminal:
    """The two console primitives the game needs: show something, read a line."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def show(self, renderable) -> None:
        self.console.print(renderable)

    def ask(self, prompt: str = "> ") -> str:
        return self.console.input(prompt)
