# antcolony

This package simulates an ant colony one year at a time. Each year the ants
grow older, and an ant's age and health decide its role. The roles work as
follows:

- Nannies look after the babies and feed the soldiers.
- Soldiers defend the nest.
- Shepherds milk the aphids for nectar.
- Gatherers look for food and new ground.
- Builders turn branches into a larger anthill.
- Cleaners carry out the garbage.

Each year one random event strikes the colony. It is an enemy raid, a storm,
a fire, a find of food and branches, a birth, or a quiet year.

## Installing

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Playing

```
antcolony
```

To make the random events repeatable, pass a seed:

```
antcolony --seed 42
```

The window shows four things:

- a grid of the living ants, coloured by role;
- the year, the number of ants, and the food, wood, aphids and garbage;
- the message for the current year;
- a **Next Year** button.

Click **Next Year** to play one year. The game ends in either of two cases:

- Every ant is dead. The window shows "Game Over! All ants are dead." for a
  minute and then closes.
- The anthill's size or food reaches zero, or no babies are left. The game
  prints "GAME OVER" and exits.

## Using the simulation from code

You can run the simulation without a window:

```python
import random

from antcolony.game import Game, YearEvent, info_text

game = Game(rng=random.Random(1))
game.next_year(YearEvent.FOOD_FOUND)  # or game.next_year() for a random event
print(info_text(game.anthill, game.year))
print(game.is_over())
```

The modules are:

- `antcolony.anthill`: `Anthill` holds the ants in one list per role, in
  `groups`. It also holds the colony's resources. `update()` ages the colony by
  a year. `perform_work()` lets every ant with a role do its work.
  `perform_event()` raises the nest-attack alarm.
- `antcolony.ant`: `Ant` has an age, health, role kind and grid position.
  `set_role(home)` chooses the ant's role from its age and health, and moves the
  ant to the matching group.
- `antcolony.roles`: `RoleKind` numbers the groups. The role classes
  (`NannyRole`, `SoldierRole`, `ShepherdRole`, `GathererRole`, `BuilderRole`,
  `CleanerRole`) each do one year's work and react to colony events.
- `antcolony.events`: `EventNotifier` delivers named events to the callbacks
  subscribed to them. The module also defines the event names
  `EVENT_ENEMY_ATTACK`, `EVENT_SOLDIERS_HELP`, `EVENT_LARGE_FOOD`,
  `EVENT_HEAVY_BRANCH` and `EVENT_NEST_DIRTY`.
- `antcolony.enemy`: `EnemyGroup` is a band of enemies with random health and
  strength. `attack_anthill(groups)` takes a colony's role groups. Each living
  enemy strikes one ant, and soldiers are struck first. The surviving soldiers'
  health then comes back as damage, spread over the enemies.
- `antcolony.game`: this module holds `Game` and `YearEvent`. It also has
  `apply_fire` and `enemies_attack`, which are the disaster effects, and
  `info_text` and `grid_cells`, which give the screen's content. `main` starts
  the window.
- `antcolony.button`: `Button` is a clickable rectangle drawn with pygame.

## Limits

- The game cannot save or load a colony. Every run starts from a fresh anthill.
- The yearly game does not use `EnemyGroup`. An enemy raid in the game goes
  through `enemies_attack` instead.
- The window draws coloured shapes and text only. It uses no images or sound.

## Running the tests

```
pytest
```