from dataclasses import dataclass


@dataclass
class Stats:
    """Numeric attributes of a creature.

    Every ``modify_*`` method adds its argument and clamps the result at 0.
    Current health is additionally capped at max health. ``base_health`` and
    ``base_attack`` are snapshots taken at creation and drive level-up gains.
    """

    max_health: int
    current_health: int
    attack: int
    speed: float = 0.0
    level: int = 1
    xp: int = 0
    is_player: bool = False
    base_health: int = 0
    base_attack: int = 0

    @classmethod
    def create(cls, health: int, attack: int, speed: float = 0.0, level: int = 1, is_player: bool = False) -> "Stats":
        return cls(
            max_health=health,
            current_health=health,
            attack=attack,
            speed=speed,
            level=level,
            is_player=is_player,
            base_health=health,
            base_attack=attack,
        )

    def modify_max_health(self, amount: int) -> None:
        self.max_health = max(0, self.max_health + amount)
        if self.current_health > self.max_health:
            self.current_health = self.max_health

    def modify_current_health(self, amount: int) -> None:
        self.current_health = min(max(0, self.current_health + amount), self.max_health)

    def modify_attack(self, amount: int) -> None:
        self.attack = max(0, self.attack + amount)

    def modify_speed(self, amount: float) -> None:
        self.speed = max(0.0, self.speed + amount)

    def modify_level(self, amount: int) -> None:
        self.level = max(0, self.level + amount)

    def modify_xp(self, amount: int) -> int:
        """Add XP and, for players, level up while enough XP is banked.

        Each level costs XP equal to the current level. Returns the number of
        levels gained.
        """
        self.xp = max(0, self.xp + amount)
        if not self.is_player:
            return 0

        gained = 0
        while self.level > 0 and self.xp >= self.level:
            self.xp -= self.level
            self.level += 1
            gained += 1
            self.modify_max_health(self.base_health * self.level // 10)
            self.modify_attack(self.base_attack * self.level // 10)
            self.current_health = self.max_health
        return gained
