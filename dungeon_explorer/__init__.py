"""DUNGEON EXPLORER: a turn-based text adventure."""

__version__ = "1.0.0"
