"""The yearly game loop: random events, the colony grid and the window."""

import argparse
import random
from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional, Tuple

import pygame

from antcolony.anthill import Anthill
from antcolony.button import Button
from antcolony.roles import RoleKind

WINDOW_WIDTH = 1200
WINDOW_HEIGHT = 700
GRID_SIZE = 15
CELL_SIZE = 40
ENEMY_DISPLAY_FRAMES = 500
GAME_OVER_PAUSE_MS = 60_000

GROUND_COLOR = (100, 150, 100)
ROLE_COLORS = {
    RoleKind.BABY: (255, 255, 255),
    RoleKind.NANNY: (0, 255, 255),
    RoleKind.SOLDIER: (0, 255, 0),
    RoleKind.SHEPHERD: (255, 0, 0),
    RoleKind.GATHERER: (148, 0, 211),
    RoleKind.BUILDER: (139, 69, 19),
    RoleKind.CLEANER: (255, 165, 0),
}


class YearEvent(IntEnum):
    ENEMY_ATTACK = 0
    FOOD_FOUND = 1
    STORM = 2
    BABY_BORN = 3
    NOTHING = 4
    FIRE = 5

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    YearEvent.ENEMY_ATTACK: "Enemy attacked!",
    YearEvent.FOOD_FOUND: "Found a new source of food and branches.",
    YearEvent.STORM: "A storm destroyed some branches.",
    YearEvent.BABY_BORN: "A new baby ant was born.",
    YearEvent.NOTHING: "Nothing happened this year.",
    YearEvent.FIRE: "Fire broke out in the anthill!",
}


def apply_fire(anthill: Anthill, rng: random.Random) -> None:
    """Burn resources and scorch every ant except the soldiers."""
    damage = rng.randrange(2) + 1
    anthill.take_aphids(damage)
    anthill.take_food(damage * 2)
    anthill.take_branches(damage)
    anthill.shrink(damage)
    for ant in anthill.live_ants():
        if ant.kind != RoleKind.SOLDIER:
            ant.hurt(10)


def enemies_attack(anthill: Anthill, rng: random.Random) -> None:
    """Plunder resources and wound every living ant a little."""
    damage = rng.randrange(5) + 1
    anthill.take_aphids(damage)
    anthill.take_food(damage * 3)
    anthill.take_branches(damage)
    anthill.shrink(damage)
    for ant in anthill.live_ants():
        ant.hurt(rng.randrange(10))


def info_text(anthill: Anthill, year: int) -> str:
    return (
        f"Year: {year}\n"
        f"Ants: {len(anthill.live_ants())}\n"
        f"Food: {anthill.food}\n"
        f"Wood: {anthill.branches}\n"
        f"Aphids: {anthill.aphids}\n"
        f"Garbage: {anthill.garbage}\n"
        "------------------------\n"
        f"{anthill.event_message}"
    )


def grid_cells(anthill: Anthill) -> List[Tuple[int, int, Tuple[int, int, int]]]:
    """Cells (column, row, colour) for living ants, filled row by row."""
    visible = [
        ant
        for ant in anthill.live_ants()
        if 0 <= ant.x < GRID_SIZE and 0 <= ant.y < GRID_SIZE
    ]
    return [
        (index % GRID_SIZE, index // GRID_SIZE, ROLE_COLORS.get(ant.kind, ROLE_COLORS[RoleKind.SOLDIER]))
        for index, ant in enumerate(visible)
    ]


@dataclass
class Game:
    """Game state that advances one year at a time."""

    rng: random.Random = field(default_factory=random.Random)
    anthill: Anthill = field(init=False)
    year: int = field(default=1, init=False)
    fire_event: bool = field(default=False, init=False)
    storm_event: bool = field(default=False, init=False)
    enemy_display_time: int = field(default=0, init=False)
    finished: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        self.anthill = Anthill(self.rng)

    def next_year(self, event: Optional[YearEvent] = None) -> YearEvent:
        """Play one year with ``event`` (random if omitted) and return it."""
        if event is None:
            event = YearEvent(self.rng.randrange(len(YearEvent)))
        hill = self.anthill
        self.storm_event = False
        self.fire_event = False

        hill.update()
        hill.event_message = event.message
        if event == YearEvent.ENEMY_ATTACK:
            hill.show_enemies = True
            self.enemy_display_time = ENEMY_DISPLAY_FRAMES
            enemies_attack(hill, self.rng)
            hill.perform_event()
        else:
            if event == YearEvent.FOOD_FOUND:
                hill.add_branches(5)
                hill.add_food(5)
            elif event == YearEvent.STORM:
                self.storm_event = True
                hill.take_branches(2)
            elif event == YearEvent.FIRE:
                self.fire_event = True
                apply_fire(hill, self.rng)
            hill.perform_work()
        hill.show_enemies = event == YearEvent.ENEMY_ATTACK

        self.year += 1
        if hill.resources_exhausted():
            self.finished = True
        return event

    def is_over(self) -> bool:
        return self.finished or not self.anthill.live_ants()


def _draw_grid(surface: pygame.Surface, anthill: Anthill) -> None:
    for row in range(GRID_SIZE):
        for col in range(GRID_SIZE):
            surface.fill(GROUND_COLOR, (col * CELL_SIZE, row * CELL_SIZE, CELL_SIZE, CELL_SIZE))
    for col, row, color in grid_cells(anthill):
        surface.fill(color, (col * CELL_SIZE, row * CELL_SIZE, CELL_SIZE, CELL_SIZE))


def _draw_info(surface: pygame.Surface, font: pygame.font.Font, anthill: Anthill, year: int) -> None:
    left = GRID_SIZE * CELL_SIZE + 20
    top = 20
    for line in info_text(anthill, year).split("\n"):
        label = font.render(line, True, (255, 255, 255))
        surface.blit(label, (left, top))
        top += font.get_linesize()


def _draw_overlay(surface: pygame.Surface, color: Tuple[int, int, int]) -> None:
    overlay = pygame.Surface((GRID_SIZE * CELL_SIZE - 200, GRID_SIZE * CELL_SIZE - 200), pygame.SRCALPHA)
    overlay.fill((*color, 128))
    surface.blit(overlay, (100, 100))


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Ant colony simulation")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    game = Game(rng=random.Random(args.seed))
    pygame.init()
    try:
        window = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("Ant Game")
        clock = pygame.time.Clock()
        font = pygame.font.Font(None, 26)
        button = Button(
            GRID_SIZE * CELL_SIZE + 20, 500, 150, 50, "Next Year",
            (70, 70, 70), (150, 150, 150), (20, 20, 20),
        )
        clicked = False
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            if not running:
                break

            hill = game.anthill
            window.fill((0, 0, 0))
            _draw_grid(window, hill)
            _draw_info(window, font, hill, game.year)
            if game.fire_event:
                _draw_overlay(window, (255, 80, 0))
            if game.storm_event:
                _draw_overlay(window, (120, 120, 200))
            if hill.show_enemies and game.enemy_display_time > 0:
                pygame.draw.circle(window, (0, 0, 0), (420, 120), 20)
                game.enemy_display_time -= 1
            else:
                hill.show_enemies = False

            mouse_down = pygame.mouse.get_pressed()[0]
            button.update(pygame.mouse.get_pos(), mouse_down)
            button.render(window, font)
            pygame.display.flip()

            if not hill.live_ants():
                hill.event_message = "Game Over! All ants are dead."
                _draw_info(window, font, hill, game.year)
                pygame.display.flip()
                pygame.time.wait(GAME_OVER_PAUSE_MS)
                break

            if button.is_pressed() and not clicked:
                game.next_year()
                clicked = True
                if game.finished:
                    print("GAME OVER")
                    return 0
            elif not mouse_down:
                clicked = False
            clock.tick(60)
    finally:
        pygame.quit()
    return 0