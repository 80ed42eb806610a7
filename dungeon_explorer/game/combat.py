import logging
from dataclasses import dataclass, field
from typing import List, Tuple

from ..models import Creature, EncounterEntry, Player
from ..models.data import FAST_SPEED, SLOW_SPEED
from .dice import Dice

logger = logging.getLogger(__name__)

FLEE_ODDS = 3  # one in three


@dataclass
class CombatReport:
    monster: str
    outcome: str = ""
    rounds: int = 0
    damage_dealt: int = 0
    damage_taken: int = 0
    xp_gained: int = 0
    attacks: List[Tuple[str, int]] = field(default_factory=list)
    lines: List[str] = field(default_factory=list)

    def to_entry(self, turn: int) -> EncounterEntry:
        return EncounterEntry(
            turn=turn,
            monster=self.monster,
            outcome=self.outcome,
            damage_dealt=self.damage_dealt,
            damage_taken=self.damage_taken,
            xp_gained=self.xp_gained,
        )


def swings_this_round(speed: float, ready: bool) -> int:
    if speed >= FAST_SPEED:
        return 2
    if speed >= SLOW_SPEED:
        return 1
    return 1 if ready else 0


class CombatEngine:
    def __init__(self, dice: Dice):
        self.dice = dice

    def attack_target(self, attacker: Creature, target: Creature) -> int:
        # Attack scales a d20 roll: full damage on a 20, nothing on a low roll with low attack
        damage = attacker.stats.attack * self.dice.roll(20) // 20
        target.take_damage(damage)
        return damage

    def try_flee(self, monster: Creature) -> bool:
        if self.dice.chance(FLEE_ODDS) and monster.can_flee:
            monster.fled = True
            monster.stats.modify_current_health(-monster.stats.current_health)
            return True
        return False

    def attempt_escape(self) -> bool:
        return self.dice.chance(FLEE_ODDS)

    def _swing(self, attacker: Creature, target: Creature, ready: bool, report: CombatReport, opening: str, follow_up: str, too_slow: str) -> bool:
        speed = attacker.stats.speed
        for swing in range(swings_this_round(speed, ready)):
            if not target.is_alive:
                break
            damage = self.attack_target(attacker, target)
            report.attacks.append((attacker.name, damage))
            if isinstance(attacker, Player):
                report.damage_dealt += damage
            else:
                report.damage_taken += damage
            report.lines.append(f"{follow_up if swing else opening} The attack deals {damage} damage.")
        if speed < SLOW_SPEED:
            if not ready:
                report.lines.append(too_slow)
            ready = not ready
        return ready

    def fight(self, player: Player, monster: Creature) -> CombatReport:
        """Run rounds until the player or the monster is out of the fight.

        The caller removes the monster from its room and ends the game on
        ``player_died``; XP is awarded here.
        """
        report = CombatReport(monster=monster.name)
        weapon = player.equipped_weapon.base_name if player.equipped_weapon else "bare hands"
        player_ready = True
        monster_ready = True

        while player.is_alive:
            report.rounds += 1
            player_ready = self._swing(
                player, monster, player_ready, report,
                f"You attack the {monster.name} with your {weapon}!",
                f"You attack the {monster.name} again!",
                f"You are too slow and the {monster.name} dodges your attack.",
            )

            if monster.is_alive and monster.stats.current_health < monster.stats.max_health // 3:
                if self.try_flee(monster):
                    report.lines.append(f"The {monster.name} flees!")

            if not monster.is_alive:
                break

            monster_ready = self._swing(
                monster, player, monster_ready, report,
                f"The {monster.name} attacks you!",
                f"The {monster.name} attacks you again!",
                f"The {monster.name} is too slow and you dodge its attack!",
            )
            logger.debug("Round %d: %s hp=%d, %s hp=%d", report.rounds, player.name, player.stats.current_health, monster.name, monster.stats.current_health)

        if not player.is_alive:
            report.outcome = "player_died"
            report.lines.append("You have died.")
        elif monster.fled:
            report.outcome = "fled"
        else:
            report.outcome = "defeated"
            report.xp_gained = monster.stats.level
            report.lines.append(f"You defeat the {monster.name}!")
            report.lines.append(f"You gain {monster.stats.level} XP!")
            levels = player.gain_xp(monster.stats.level)
            if levels:
                report.lines.append(f"You reach level {player.stats.level}!")
        if player.is_alive:
            report.lines.append(f"You have {player.stats.current_health} health remaining.")
        logger.info("Fight with %s ended after %d rounds: %s", monster.name, report.rounds, report.outcome)
        return report

    def spring_trap(self, player: Player, trap: Creature) -> CombatReport:
        report = CombatReport(monster=trap.name)
        damage = self.attack_target(trap, player)
        report.attacks.append((trap.name, damage))
        report.damage_taken = damage
        report.lines.append(f"You trigger a trap! It deals {damage} damage.")
        if player.is_alive:
            report.outcome = "trap"
            report.lines.append(f"You have {player.stats.current_health} health remaining.")
        else:
            report.outcome = "player_died"
            report.lines.append("You have died.")
        logger.info("%s sprang a trap for %d damage", player.name, damage)
        return report
