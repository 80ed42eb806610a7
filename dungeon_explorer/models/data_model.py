from dataclasses import dataclass


@dataclass
class EncounterEntry:
    turn: int
    monster: str
    outcome: str
    damage_dealt: int = 0
    damage_taken: int = 0
    xp_gained: int = 0
