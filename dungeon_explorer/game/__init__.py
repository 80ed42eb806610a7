from .core import Game
from .state import GameState
from .logic import GameLogic
from .map import Map

__all__ = ['Game', 'GameState', 'GameLogic', 'Map']
