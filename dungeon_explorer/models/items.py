from dataclasses import dataclass

from .data import FAST_SPEED, SLOW_SPEED


@dataclass(frozen=True)
class Item:
    base_name: str
    damage: int = 0

    def __post_init__(self):
        if self.damage < 0:
            raise ValueError(f"{self.base_name} cannot have negative damage ({self.damage})")

    @property
    def description(self) -> str:
        return ""

    @property
    def name(self) -> str:
        return f"{self.base_name} ({self.description})"


@dataclass(frozen=True)
class Potion(Item):
    health_restore: int = 0
    health_bonus: int = 0

    def __post_init__(self):
        super().__post_init__()
        if self.health_restore < 0 or self.health_bonus < 0:
            raise ValueError(f"{self.base_name} cannot have negative health effects")

    @property
    def description(self) -> str:
        parts = []
        if self.health_restore > 0:
            parts.append(f"Health Restore: {self.health_restore}")
        if self.health_bonus > 0:
            parts.append(f"Health Bonus: {self.health_bonus}")
        if self.damage > 0:
            parts.append(f"Attack Bonus: {self.damage}")
        return ", ".join(parts)

    @property
    def is_blank(self) -> bool:
        return not (self.health_restore or self.health_bonus or self.damage)


@dataclass(frozen=True)
class Weapon(Item):
    speed: float = 1.0

    @property
    def speed_rating(self) -> str:
        if self.speed >= FAST_SPEED:
            return "Fast"
        if self.speed < SLOW_SPEED:
            return "Slow"
        return "Normal"

    @property
    def description(self) -> str:
        return f"Damage: {self.damage}, Speed: {self.speed_rating}"
