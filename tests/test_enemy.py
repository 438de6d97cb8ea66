import random

from antcolony.ant import Ant
from antcolony.enemy import EnemyGroup, EnemyIndividual
from antcolony.roles import RoleKind


def _group(*enemies):
    group = EnemyGroup(rng=random.Random(1))
    group.enemies = list(enemies)
    return group


def test_generated_enemies_within_limits():
    group = EnemyGroup(50, rng=random.Random(3))
    assert len(group) == 50
    assert all(50 <= e.health <= 200 for e in group.enemies)
    assert all(5 <= e.strength <= 15 for e in group.enemies)
    assert all(e.alive for e in group.enemies)


def test_empty_group_is_not_alive():
    assert EnemyGroup().is_alive() is False
    assert EnemyGroup(2, rng=random.Random(0)).is_alive() is True


def test_distribute_damage_spends_all_when_enemies_survive():
    group = _group(EnemyIndividual(1000, 5), EnemyIndividual(1000, 5))
    group.distribute_damage(300)
    assert sum(e.health for e in group.enemies) == 2000 - 300
    assert group.is_alive()


def test_distribute_damage_kills_and_clamps():
    group = _group(EnemyIndividual(10, 5))
    group.distribute_damage(500)
    enemy = group.enemies[0]
    assert enemy.alive is False
    assert enemy.health == 0
    assert group.is_alive() is False


def test_soldier_is_targeted_and_strikes_back():
    soldier = Ant(age=10, health=1000, kind=RoleKind.SOLDIER)
    nanny = Ant(age=3, health=100, kind=RoleKind.NANNY)
    enemy = EnemyIndividual(health=100000, strength=7)
    group = _group(enemy)
    group.attack_anthill([[], [nanny], [soldier]])
    assert soldier.health == 1000 - 7
    assert nanny.health == 100
    assert enemy.health == 100000 - soldier.health


def test_dead_soldier_leaves_others_exposed():
    soldier = Ant(age=10, health=5, kind=RoleKind.SOLDIER)
    nanny = Ant(age=3, health=100, kind=RoleKind.NANNY)
    first = EnemyIndividual(health=50, strength=5)
    second = EnemyIndividual(health=60, strength=5)
    group = _group(first, second)
    group.attack_anthill([[nanny], [soldier]])
    assert soldier.health == 0
    assert nanny.health == 100 - 5
    assert (first.health, second.health) == (50, 60)


def test_dead_enemies_do_not_attack():
    nanny = Ant(age=3, health=100, kind=RoleKind.NANNY)
    group = _group(EnemyIndividual(0, 9, alive=False))
    group.attack_anthill([[nanny]])
    assert nanny.health == 100


def test_no_living_ants(capsys):
    dead = Ant(age=3, health=0, kind=RoleKind.NANNY)
    group = _group(EnemyIndividual(50, 5))
    group.attack_anthill([[dead], []])
    assert "All the ants are dead" in capsys.readouterr().out
    assert dead.health == 0


def test_empty_home(capsys):
    group = _group(EnemyIndividual(50, 5))
    group.attack_anthill([])
    assert "The anthill is empty! There is no one to attack." in capsys.readouterr().out


def test_describe():
    group = _group(EnemyIndividual(10, 5), EnemyIndividual(0, 6, alive=False))
    text = group.describe()
    assert text.startswith("Enemy Group Info:\n")
    assert "Enemy 1: Health = 10, Strength = 5, Alive = 1" in text
    assert "Enemy 2: Health = 0, Strength = 6, Alive = 0" in text