"""A band of enemies that raids the anthill."""

import random
from dataclasses import dataclass
from typing import List, Optional, Sequence

from antcolony.ant import Ant
from antcolony.roles import RoleKind

MIN_HEALTH = 50
MAX_HEALTH = 200
MIN_STRENGTH = 5
MAX_STRENGTH = 15


@dataclass
class EnemyIndividual:
    """One enemy with its own health and strength."""

    health: int
    strength: int
    alive: bool = True


class EnemyGroup:
    """A group of enemies attacking together."""

    def __init__(self, group_size: int = 0, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.enemies: List[EnemyIndividual] = [
            EnemyIndividual(
                health=self.rng.randint(MIN_HEALTH, MAX_HEALTH),
                strength=self.rng.randint(MIN_STRENGTH, MAX_STRENGTH),
            )
            for _ in range(group_size)
        ]

    def __len__(self) -> int:
        return len(self.enemies)

    def attack_anthill(self, home: Sequence[Sequence[Ant]]) -> None:
        """Let every living enemy strike one ant; surviving soldiers strike back."""
        if not home:
            print("The anthill is empty! There is no one to attack.")
            return

        soldiers: List[Ant] = []
        others: List[Ant] = []
        for group in home:
            for ant in group:
                if ant.health <= 0:
                    continue
                if ant.kind == RoleKind.SOLDIER:
                    soldiers.append(ant)
                else:
                    others.append(ant)

        for enemy in self.enemies:
            if not enemy.alive:
                continue
            if soldiers:
                pool = soldiers
            elif others:
                pool = others
            else:
                print("All the ants are dead")
                return
            target = pool[self.rng.randrange(len(pool))]
            print(
                f"the enemy is attacking {target.role_name()} "
                f"and deals {enemy.strength} damage."
            )
            target.hurt(enemy.strength)
            if target.health <= 0:
                print(f"{target.role_name()} is dead!")
                (soldiers if target.kind == RoleKind.SOLDIER else others).remove(target)

        counter_damage = sum(s.health for s in soldiers if s.health > 0)
        self.distribute_damage(counter_damage)

    def describe(self) -> str:
        lines = ["Enemy Group Info:"]
        lines.extend(
            f"Enemy {number}: Health = {enemy.health}, Strength = {enemy.strength}, "
            f"Alive = {int(enemy.alive)}"
            for number, enemy in enumerate(self.enemies, start=1)
        )
        return "\n".join(lines) + "\n\n"

    def is_alive(self) -> bool:
        return any(enemy.alive for enemy in self.enemies)

    def distribute_damage(self, damage: int) -> None:
        """Spread ``damage`` over living enemies in random chunks."""
        while damage > 0:
            living = [enemy for enemy in self.enemies if enemy.alive]
            if not living:
                return
            target = living[self.rng.randrange(len(living))]
            chunk = self.rng.randrange(damage) + 1
            target.health -= chunk
            if target.health <= 0:
                target.alive = False
                target.health = 0
            damage -= chunk