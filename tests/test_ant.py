import random

import pytest

from antcolony.ant import Ant
from antcolony.anthill import Anthill
from antcolony.roles import (
    BuilderRole,
    CleanerRole,
    GathererRole,
    NannyRole,
    RoleKind,
    ShepherdRole,
    SoldierRole,
)


@pytest.fixture
def hill():
    return Anthill(rng=random.Random(5))


def test_default_ant_is_healthy_baby():
    ant = Ant()
    assert (ant.age, ant.health, ant.kind, ant.role) == (0, 100, RoleKind.BABY, None)


@pytest.mark.parametrize("start", [2, 9, 19, 27, 30])
def test_ageing_into_threshold_flags_update(start):
    ant = Ant(age=start)
    ant.age_one_year()
    assert ant.age == start + 1
    assert ant.needs_update is True


@pytest.mark.parametrize("start", [0, 3, 4, 12, 25])
def test_ageing_between_thresholds_clears_flag(start):
    ant = Ant(age=start, needs_update=True)
    ant.age_one_year()
    assert ant.needs_update is False


def test_heal_and_hurt_are_inverse():
    ant = Ant(health=60)
    ant.heal(15)
    ant.hurt(15)
    assert ant.health == 60
    ant.hurt(70)
    assert ant.health < 0


def test_role_name_follows_kind():
    assert Ant(kind=RoleKind.SOLDIER).role_name() == "Soldier"
    assert Ant(kind=RoleKind.CLEANER).role_name() == "Cleaner"


def test_describe_mentions_age_and_health():
    text = Ant(age=7, health=42).describe()
    assert "Age: 7" in text
    assert "Health:42" in text


@pytest.mark.parametrize(
    "age, health, kind, role_class",
    [
        (3, 100, RoleKind.NANNY, NannyRole),
        (10, 100, RoleKind.SOLDIER, SoldierRole),
        (10, 80, RoleKind.SHEPHERD, ShepherdRole),
        (20, 100, RoleKind.GATHERER, BuilderRole),
        (20, 50, RoleKind.BUILDER, GathererRole),
        (28, 100, RoleKind.CLEANER, CleanerRole),
    ],
)
def test_set_role_moves_ant_to_new_group(hill, age, health, kind, role_class):
    ant = Ant(age=age, health=health)
    hill.groups[RoleKind.BABY].append(ant)
    ant.set_role(hill)
    assert ant.kind == kind
    assert isinstance(ant.role, role_class)
    assert any(a is ant for a in hill.groups[kind])
    assert not any(a is ant for a in hill.groups[RoleKind.BABY])


def test_set_role_keeps_baby_in_place(hill):
    ant = Ant(age=1)
    hill.groups[RoleKind.BABY].append(ant)
    before = hill.count(RoleKind.BABY)
    ant.set_role(hill)
    assert ant.kind == RoleKind.BABY
    assert ant.role is None
    assert hill.count(RoleKind.BABY) == before


def test_set_role_too_old_drops_role_but_keeps_group(hill):
    ant = hill.groups[RoleKind.CLEANER][0]
    ant.age = 31
    before = hill.count(RoleKind.CLEANER)
    ant.set_role(hill)
    assert ant.kind == RoleKind.CLEANER
    assert ant.role is None
    assert hill.count(RoleKind.CLEANER) == before