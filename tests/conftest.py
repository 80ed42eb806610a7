import io

import pytest
from rich.console import Console

from dungeon_explorer.ui import Terminal


class ScriptedDice:
    """Dice that replay a fixed list of values, checking each against its range."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def randrange(self, low, high):
        assert self.values, f"dice ran out of values (asked for [{low}, {high}))"
        value = self.values.pop(0)
        assert low <= value < high, f"scripted value {value} outside [{low}, {high})"
        self.calls.append((low, high))
        return value

    def roll(self, sides=20):
        return self.randrange(1, sides + 1)

    def chance(self, odds):
        return self.randrange(0, odds) == 0


class FakeTerminal(Terminal):
    def __init__(self, inputs):
        super().__init__(Console(file=io.StringIO(), record=True, width=120))
        self.inputs = list(inputs)
        self.prompts = []

    def ask(self, prompt="> "):
        self.prompts.append(prompt)
        assert self.inputs, f"no scripted input left for prompt {prompt!r}"
        return self.inputs.pop(0)

    @property
    def output(self):
        return self.console.export_text(clear=False)


@pytest.fixture
def scripted_dice():
    return ScriptedDice


@pytest.fixture
def fake_terminal():
    return FakeTerminal


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "player:\n"
        "  name: Ada\n"
        "  health: 30\n"
        "  attack: 1\n"
        "game_settings:\n"
        f"  save_file: {tmp_path / 'saves' / 'savegame.json'}\n"
        f"  chronicle_file: {tmp_path / 'chronicle.parquet'}\n"
        "  recent_encounters_limit: 3\n"
    )
    return str(path)
