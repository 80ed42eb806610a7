class DungeonError(Exception):
    """Base class for errors raised by the game engine."""


class RoomNotFoundError(DungeonError, LookupError):
    pass


class InvalidActionError(DungeonError):
    pass


class SaveError(DungeonError):
    pass
