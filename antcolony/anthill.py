"""The anthill: its resources, its ants grouped by role, and yearly upkeep."""

import random
from typing import List, Optional, Tuple

from antcolony.ant import Ant
from antcolony.events import EVENT_ENEMY_ATTACK
from antcolony.roles import RoleKind

INITIAL_ANTS_PER_ROLE = 5
MAX_SIZE = 10
MAX_CAPACITY = 100
MAX_FOOD = 100
MAX_BRANCHES = 10
MAX_APHIDS = 10
MAX_AGE = 30


def _initial_profile(kind: RoleKind, coin: int) -> Tuple[int, int]:
    varied = 100 if coin == 0 else 50
    return {
        RoleKind.BABY: (0, varied),
        RoleKind.NANNY: (3, varied),
        RoleKind.SOLDIER: (10, 100),
        RoleKind.SHEPHERD: (10, 80),
        RoleKind.GATHERER: (20, 100),
        RoleKind.BUILDER: (20, 50),
        RoleKind.CLEANER: (28, 100),
    }[kind]


class Anthill:
    """A colony of ants held in one list per role."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.size = 10
        self.capacity = 100
        self.food = 50
        self.branches = 10
        self.aphids = 10
        self.garbage = 0
        self.happy_baby = 0
        self.happy_aphid = 0
        self.attack_pending = False
        self.resources_depleted = False
        self.new_baby_born = False
        self.event_message = ""
        self.show_enemies = False
        self.groups: List[List[Ant]] = [[] for _ in RoleKind]

        for kind in RoleKind:
            for _ in range(INITIAL_ANTS_PER_ROLE):
                age, health = _initial_profile(kind, self.rng.randrange(2))
                ant = Ant(age=age, health=health, kind=kind)
                ant.set_role(self)
                self.groups[kind].append(ant)
        self.update_ant_positions()

    def update(self) -> None:
        """Advance the colony by one year."""
        if self.attack_pending:
            removed = 0
            while removed < self.count(RoleKind.BABY) - self.happy_baby:
                self.remove_last_baby()
                removed += 1
            self.aphids = self.happy_aphid
            self.happy_aphid = self.happy_baby = 0
            self.branches = min(self.count(RoleKind.BUILDER), self.branches)
            self.food = min(
                self.count(RoleKind.GATHERER) + self.count(RoleKind.SHEPHERD), self.food
            )
            self.attack_pending = False

        ageing_groups = self.groups[:-1]
        for group in ageing_groups:
            for j in reversed(range(len(group))):
                ant = group[j]
                ant.age_one_year()
                if ant.health <= 0 or ant.age > MAX_AGE:
                    del group[j]
                    self.add_garbage(2)

        for group in ageing_groups:
            for j in reversed(range(len(group))):
                if j >= len(group):
                    continue
                ant = group[j]
                if ant.needs_update:
                    ant.set_role(self)
                    ant.needs_update = not ant.needs_update

        born = 0
        while born < self.count(RoleKind.NANNY) - self.count(RoleKind.BABY):
            if not self.add_baby():
                break
            born += 1

        self.update_ant_positions()

    def update_ant_positions(self) -> None:
        for group in self.groups:
            for ant in group:
                ant.x = self.rng.randrange(10)
                ant.y = self.rng.randrange(10)

    def live_ants(self) -> List[Ant]:
        return [ant for group in self.groups for ant in group if ant.health > 0]

    def count(self, kind: RoleKind) -> int:
        return len(self.groups[kind])

    def remove_last_baby(self) -> None:
        babies = self.groups[RoleKind.BABY]
        if babies:
            babies.pop()

    def perform_work(self) -> None:
        """Let every living ant with a role do its work."""
        for group in self.groups:
            for ant in list(group):
                if ant.health > 0 and ant.role is not None:
                    ant.role.work(ant, self)

    def perform_event(self) -> None:
        """Raise the nest-attack alarm for every non-baby ant."""
        for group in self.groups[RoleKind.NANNY:]:
            for ant in list(group):
                if ant.role is not None:
                    ant.role.on_event(EVENT_ENEMY_ATTACK, self)

    def resources_exhausted(self) -> bool:
        if self.size == 0 or self.food == 0 or self.count(RoleKind.BABY) <= 0:
            print("Anthill resources is over")
            return True
        return False

    def add_baby(self) -> bool:
        """Add a newborn at the front of the babies; False if there is no room."""
        if self.capacity > len(self.groups):
            print("A new baby was born!")
            self.groups[RoleKind.BABY].insert(0, Ant(age=0, health=100))
            return True
        print("No room for new ants")
        return False

    def mark_attack(self) -> None:
        self.attack_pending = True

    def happy_baby_plus(self) -> None:
        self.happy_baby += 1

    def happy_aphid_plus(self) -> None:
        self.happy_aphid += 1

    def grow(self, amount: int) -> None:
        possible = min(amount, MAX_SIZE - self.size)
        self.size += possible
        if self.size >= MAX_SIZE:
            self.size = MAX_SIZE
        else:
            self.capacity = min(MAX_CAPACITY, self.capacity + 2 * possible)

    def shrink(self, amount: int) -> None:
        possible = min(amount, self.size)
        self.size -= possible
        if self.size > 0:
            self.capacity = max(0, self.capacity - 2 * possible)
        if self.size < 0:
            self.size = 0
            self.resources_depleted = True

    def add_food(self, amount: int) -> None:
        self.food = min(self.food + amount, MAX_FOOD)

    def take_food(self, amount: int) -> None:
        self.food = max(self.food - amount, 0)
        if self.food == 0:
            self.resources_depleted = True

    def add_branches(self, amount: int) -> None:
        self.branches = min(self.branches + amount, MAX_BRANCHES)

    def take_branches(self, amount: int) -> None:
        self.branches = max(self.branches - amount, 0)
        if self.branches == 0:
            self.resources_depleted = True

    def add_aphids(self, amount: int) -> None:
        self.aphids = min(self.aphids + amount, MAX_APHIDS)

    def take_aphids(self, amount: int) -> None:
        self.aphids = max(self.aphids - amount, 0)

    def add_garbage(self, amount: int) -> None:
        self.garbage += amount

    def take_garbage(self, amount: int) -> None:
        self.garbage = max(self.garbage - amount, 0)