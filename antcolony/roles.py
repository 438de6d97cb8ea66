"""Ant roles: the daily work and the event reactions of each caste."""

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import TYPE_CHECKING

from antcolony.events import (
    EVENT_ENEMY_ATTACK,
    EVENT_HEAVY_BRANCH,
    EVENT_LARGE_FOOD,
    EVENT_NEST_DIRTY,
    EVENT_SOLDIERS_HELP,
)

if TYPE_CHECKING:
    from antcolony.ant import Ant
    from antcolony.anthill import Anthill


class RoleKind(IntEnum):
    """Index of an ant's group inside the anthill."""

    BABY = 0
    NANNY = 1
    SOLDIER = 2
    SHEPHERD = 3
    GATHERER = 4
    BUILDER = 5
    CLEANER = 6

    @property
    def label(self) -> str:
        return self.name.capitalize()


class Role(ABC):
    """Behaviour shared by every working caste."""

    @abstractmethod
    def work(self, ant: "Ant", home: "Anthill") -> None:
        """Do one year's work."""

    @abstractmethod
    def on_event(self, event: str, home: "Anthill") -> None:
        """React to a colony event."""

    def attack_enemy(self, home: "Anthill") -> None:
        """Take part in defending the nest; most castes do nothing."""
        return None


class NannyRole(Role):
    def work(self, ant: "Ant", home: "Anthill") -> None:
        rng = home.rng
        if home.count(RoleKind.BABY) >= 10:
            if rng.randrange(5) == 0:
                print("Oh no, your children are lost!")
                home.remove_last_baby()
                print(f"{home.count(RoleKind.BABY) - 1} children left")
            else:
                print("You are good Nanny, the kids are ok")

        babies = home.groups[RoleKind.BABY]
        if babies and home.food > 0:
            weakest = min(babies, key=lambda baby: baby.health)
            if weakest.health < 100:
                weakest.heal(10)
                home.take_food(1)
        elif home.food > 0 and home.groups[RoleKind.SOLDIER]:
            soldiers = home.groups[RoleKind.SOLDIER]
            soldier = soldiers[rng.randrange(len(soldiers))]
            if soldier.health < 100:
                print("Nanny feeds the soldiers")
                soldier.heal(10)
                home.take_food(1)

    def attack_enemy(self, home: "Anthill") -> None:
        if home.happy_baby < home.count(RoleKind.BABY):
            home.happy_baby_plus()

    def on_event(self, event: str, home: "Anthill") -> None:
        if event == EVENT_ENEMY_ATTACK:
            self.attack_enemy(home)


class SoldierRole(Role):
    def work(self, ant: "Ant", home: "Anthill") -> None:
        print("Soldier is doing job")
        if home.rng.randrange(5) == 0 and ant.health < 100:
            ant.heal(10)

    def attack_enemy(self, home: "Anthill") -> None:
        home.mark_attack()

    def on_event(self, event: str, home: "Anthill") -> None:
        if event in (EVENT_ENEMY_ATTACK, EVENT_SOLDIERS_HELP):
            self.attack_enemy(home)


class ShepherdRole(Role):
    def work(self, ant: "Ant", home: "Anthill") -> None:
        if home.food < 50 and home.aphids > 0:
            if home.rng.randrange(2) == 0:
                print("The ant got some tasty nectar")
                home.add_food(home.aphids)

    def attack_enemy(self, home: "Anthill") -> None:
        if home.happy_aphid < home.aphids:
            home.happy_aphid_plus()

    def on_event(self, event: str, home: "Anthill") -> None:
        if event == EVENT_ENEMY_ATTACK:
            self.attack_enemy(home)


class GathererRole(Role):
    def work(self, ant: "Ant", home: "Anthill") -> None:
        rng = home.rng
        if home.size < 10 and rng.randrange(10) == 0:
            print("Gatherer find new branches")
            home.grow(1)
        if home.food < 10 and rng.randrange(10) == 0:
            home.add_food(5)

    def attack_enemy(self, home: "Anthill") -> None:
        """Gatherers stay out of the fight."""
        return None

    def on_event(self, event: str, home: "Anthill") -> None:
        if event == EVENT_ENEMY_ATTACK:
            self.attack_enemy(home)
        if event == EVENT_LARGE_FOOD:
            self.large_food(home)

    def large_food(self, home: "Anthill") -> None:
        """Half the time, bring in a large haul of food."""
        if home.rng.randrange(2) == 0:
            print("Work is in progress!")
            home.add_food(15)


class BuilderRole(Role):
    def work(self, ant: "Ant", home: "Anthill") -> None:
        if home.branches != 0 and home.size < 10:
            print("Builder improved the Anthill")
            home.take_branches(1)
            home.grow(1)

    def attack_enemy(self, home: "Anthill") -> None:
        """Builders stay out of the fight."""
        return None

    def on_event(self, event: str, home: "Anthill") -> None:
        if event == EVENT_ENEMY_ATTACK:
            self.attack_enemy(home)
        if event == EVENT_HEAVY_BRANCH:
            self.branch_found(home)

    def branch_found(self, home: "Anthill") -> None:
        """Half the time, carry in five or six branches."""
        carried = home.rng.randrange(2) == 1
        if home.branches < 10 and carried:
            home.add_branches(home.rng.randrange(2) + 5)


class CleanerRole(Role):
    def work(self, ant: "Ant", home: "Anthill") -> None:
        lucky = home.rng.randrange(2) == 0
        if home.garbage > 0 and lucky:
            print("Clean Anthill")
            home.take_garbage(1)

    def attack_enemy(self, home: "Anthill") -> None:
        """Cleaners stay out of the fight."""
        return None

    def on_event(self, event: str, home: "Anthill") -> None:
        if event == EVENT_NEST_DIRTY:
            self.cleaning(home)

    def cleaning(self, home: "Anthill") -> None:
        """Remove one unit of garbage if there is any."""
        if home.garbage > 0:
            home.take_garbage(1)